"""Shared pytest fixtures for all tests."""

import sys
from pathlib import Path

import pytest

SRC_ROOT = Path(__file__).resolve().parents[1] / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from character_api.models import (  # noqa: E402
    FirstNames,
    Names,
    PersonalityCatalog,
    PersonalityType,
)
from character_api.selector import RandomSelector  # noqa: E402
from character_api.store import DataStore  # noqa: E402


@pytest.fixture
def fixture_names():
    """Single male, female and last name."""
    return Names(
        first_names=FirstNames(male=("Sam",), female=("Alex",)),
        last_names=("Doe",),
    )


@pytest.fixture
def fixture_personality():
    return PersonalityCatalog(
        personality_types=(
            PersonalityType(name="INTJ (Architect)", link="https://example.org/intj"),
            PersonalityType(name="ENFP (Campaigner)", link="https://example.org/enfp"),
        ),
        alignments=("Lawful Good", "Chaotic Neutral"),
    )


@pytest.fixture
def fixture_store(fixture_names, fixture_personality):
    return DataStore(names=fixture_names, personality=fixture_personality)


@pytest.fixture
def selector():
    return RandomSelector(seed=1234)


@pytest.fixture
def make_client(selector):
    """Factory for a TestClient around an app with the given store."""
    from fastapi.testclient import TestClient

    from character_api.api.app import create_app

    def _make(store):
        return TestClient(create_app(store=store, selector=selector))

    return _make


@pytest.fixture
def client(make_client, fixture_store):
    return make_client(fixture_store)
