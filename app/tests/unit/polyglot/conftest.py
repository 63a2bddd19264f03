"""Feature-level fixtures for dictionary engine tests."""

import pytest

from polyglot import DictionaryStore
from tests.factories.polyglot import make_engine, make_translations


@pytest.fixture
def store():
    """Empty DictionaryStore with the default override policy."""
    return DictionaryStore()


@pytest.fixture
def engine():
    """Engine holding only the reserved entry (en, de, ru), preferring en."""
    return make_engine()


@pytest.fixture
def populated_engine():
    """Engine with the reserved entry plus complete sample translations."""
    return make_engine(make_translations())


@pytest.fixture
def incomplete_engine():
    """Engine where "Farewell" has no Russian text."""
    return make_engine(make_translations(complete=False))
