"""Load-once datasets backing the character generator."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from importlib import resources
from pathlib import Path
from typing import Optional, Tuple, Union

from pydantic import ValidationError

from character_api.config import Settings
from character_api.models import Names, PersonalityCatalog

_LOG = logging.getLogger(__name__)

Source = Union[str, bytes]

NAMES_FILE = "names.json"
PERSONALITY_FILE = "randomizer.json"


class LoadError(Exception):
    """Raised when a dataset source is not valid JSON of the expected shape."""

    pass


def load_names(source: Source) -> Names:
    """Parse a names dataset. Missing fields become empty sequences."""
    try:
        return Names.model_validate_json(source)
    except ValidationError as exc:
        raise LoadError(f"Invalid names data: {exc}") from exc


def load_personality(source: Source) -> PersonalityCatalog:
    """Parse a personality dataset. Missing fields become empty sequences."""
    try:
        return PersonalityCatalog.model_validate_json(source)
    except ValidationError as exc:
        raise LoadError(f"Invalid personality data: {exc}") from exc


def load(
    names_source: Source, personality_source: Source
) -> Tuple[Names, PersonalityCatalog]:
    return load_names(names_source), load_personality(personality_source)


@dataclass(frozen=True, slots=True)
class DataStore:
    """Read-only datasets shared by all requests for the process lifetime."""

    names: Names = field(default_factory=Names)
    personality: PersonalityCatalog = field(default_factory=PersonalityCatalog)

    @classmethod
    def from_files(
        cls,
        names_path: Union[str, Path],
        personality_path: Union[str, Path],
    ) -> DataStore:
        """Load both datasets from disk.

        Each file is loaded on its own: a missing or malformed file is
        logged and leaves only that dataset empty.
        """
        names = _load_or_empty(Path(names_path), load_names, Names)
        personality = _load_or_empty(
            Path(personality_path), load_personality, PersonalityCatalog
        )
        return cls._logged(names, personality)

    @classmethod
    def from_defaults(cls, settings: Optional[Settings] = None) -> DataStore:
        """Load the datasets bundled with the package, honouring path overrides."""
        settings = settings or Settings.from_env()
        bundled = resources.files("character_api") / "data"
        names = _load_or_empty(
            Path(settings.names_path) if settings.names_path else bundled / NAMES_FILE,
            load_names,
            Names,
        )
        personality = _load_or_empty(
            (
                Path(settings.personality_path)
                if settings.personality_path
                else bundled / PERSONALITY_FILE
            ),
            load_personality,
            PersonalityCatalog,
        )
        return cls._logged(names, personality)

    @classmethod
    def _logged(cls, names: Names, personality: PersonalityCatalog) -> DataStore:
        _LOG.info(
            "Names loaded: %d male, %d female first names, %d last names",
            len(names.male_first_names),
            len(names.female_first_names),
            len(names.last_names),
        )
        _LOG.info(
            "Personality loaded: %d personality types, %d alignments",
            len(personality.personality_types),
            len(personality.alignments),
        )
        return cls(names=names, personality=personality)


def _load_or_empty(path, loader, empty_factory):
    """Read ``path`` with ``loader``; on failure log and return an empty dataset."""
    try:
        return loader(path.read_bytes())
    except OSError as exc:
        _LOG.error("Error reading %s: %s", path, exc)
    except LoadError as exc:
        _LOG.error("Error unmarshaling %s: %s", path, exc)
    return empty_factory()
