"""Test data factories for deterministic test data generation."""

from tests.factories.polyglot import (
    make_engine,
    make_polyglot_settings,
    make_translations,
)

__all__ = [
    "make_engine",
    "make_polyglot_settings",
    "make_translations",
]
