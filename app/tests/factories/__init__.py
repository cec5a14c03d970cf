"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    make_language_descriptor,
    make_preferences,
    make_translation_store,
)

__all__ = [
    "make_language_descriptor",
    "make_preferences",
    "make_translation_store",
]
