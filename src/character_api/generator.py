"""Aggregators that assemble random character records."""

from __future__ import annotations

import logging

from character_api.models import (
    CharacterResult,
    NameResult,
    PersonalityResult,
)
from character_api.selector import RandomSelector
from character_api.store import DataStore

_LOG = logging.getLogger(__name__)


class DataUnavailable(Exception):
    """Raised when a dataset needed for a request is empty."""

    pass


class CharacterGenerator:
    """Draws names and personalities from a ``DataStore``.

    Stateless apart from the selector's entropy, so one instance serves
    all concurrent requests.
    """

    def __init__(self, store: DataStore, selector: RandomSelector):
        self.store = store
        self.selector = selector

    def generate_name(self) -> NameResult:
        """Pick a sex, then a first name for that sex and a last name.

        Raises:
            DataUnavailable: If all name lists are empty, the list for the
                chosen sex is empty, or there are no last names.
        """
        names = self.store.names
        if names.is_empty():
            raise DataUnavailable("Names data not loaded or empty")

        sex = self.selector.pick_sex()
        first_names = names.first_names_for(sex)
        if not first_names:
            raise DataUnavailable(f"No {sex.value} first names available")
        first_name = self.selector.pick(first_names)

        if not names.last_names:
            raise DataUnavailable("No last names available")
        last_name = self.selector.pick(names.last_names)

        return NameResult(first_name=first_name, last_name=last_name, sex=sex)

    def generate_personality(self) -> PersonalityResult:
        """Pick one personality type and one alignment independently.

        Raises:
            DataUnavailable: If either list is empty.
        """
        catalog = self.store.personality
        if catalog.is_empty():
            raise DataUnavailable("Personality data not loaded or empty")
        if not catalog.personality_types:
            raise DataUnavailable("No personality types available")
        if not catalog.alignments:
            raise DataUnavailable("No alignments available")

        return PersonalityResult(
            personality_type=self.selector.pick(catalog.personality_types),
            alignment=self.selector.pick(catalog.alignments),
        )

    def generate_character(self) -> CharacterResult:
        name = self.generate_name()
        personality = self.generate_personality()
        _LOG.debug("Generated character %s %s", name.first_name, name.last_name)
        return CharacterResult(
            sex=name.sex,
            first_name=name.first_name,
            last_name=name.last_name,
            personality_type=personality.personality_type,
            alignment=personality.alignment,
        )
