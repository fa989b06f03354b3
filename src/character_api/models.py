"""Datasets and response schemas for the character service."""

from __future__ import annotations

from enum import Enum
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Sex(str, Enum):
    """Sex of a generated character."""

    MALE = "Male"
    FEMALE = "Female"


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


# ---- Datasets (loaded once at startup) ----
class FirstNames(_Frozen):
    male: Tuple[str, ...] = ()
    female: Tuple[str, ...] = ()

    @field_validator("male", "female", mode="before")
    @classmethod
    def _null_as_empty(cls, value):
        return () if value is None else value


class Names(_Frozen):
    """Names dataset, read from ``{"firstName": {...}, "lastNames": [...]}``."""

    first_names: FirstNames = Field(default_factory=FirstNames, alias="firstName")
    last_names: Tuple[str, ...] = Field(default=(), alias="lastNames")

    # JSON null reads as an empty dataset, like a missing field
    @field_validator("first_names", mode="before")
    @classmethod
    def _null_first_names(cls, value):
        return FirstNames() if value is None else value

    @field_validator("last_names", mode="before")
    @classmethod
    def _null_last_names(cls, value):
        return () if value is None else value

    @property
    def male_first_names(self) -> Tuple[str, ...]:
        return self.first_names.male

    @property
    def female_first_names(self) -> Tuple[str, ...]:
        return self.first_names.female

    def first_names_for(self, sex: Sex) -> Tuple[str, ...]:
        if sex is Sex.MALE:
            return self.first_names.male
        return self.first_names.female

    def is_empty(self) -> bool:
        return not (
            self.first_names.male or self.first_names.female or self.last_names
        )


class PersonalityType(_Frozen):
    name: str = ""
    link: str = ""

    @field_validator("name", "link", mode="before")
    @classmethod
    def _null_as_blank(cls, value):
        return "" if value is None else value


class PersonalityCatalog(_Frozen):
    """Personality dataset, read from ``{"personalityType": [...], "alignment": [...]}``."""

    personality_types: Tuple[PersonalityType, ...] = Field(
        default=(), alias="personalityType"
    )
    alignments: Tuple[str, ...] = Field(default=(), alias="alignment")

    @field_validator("personality_types", "alignments", mode="before")
    @classmethod
    def _null_as_empty(cls, value):
        return () if value is None else value

    def is_empty(self) -> bool:
        return not (self.personality_types or self.alignments)


# ---- Per-request results ----
class NameResult(_Frozen):
    first_name: str = Field(alias="firstName")
    last_name: str = Field(alias="lastName")
    sex: Sex


class PersonalityResult(_Frozen):
    personality_type: PersonalityType = Field(alias="personalityType")
    alignment: str


class CharacterResult(_Frozen):
    sex: Sex
    first_name: str = Field(alias="firstName")
    last_name: str = Field(alias="lastName")
    personality_type: PersonalityType = Field(alias="personalityType")
    alignment: str
