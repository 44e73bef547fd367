"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    make_bulgarian_locale,
    make_nested_translation_data,
    make_translation_catalog,
    make_translation_data,
    make_translator,
)

__all__ = [
    "make_bulgarian_locale",
    "make_nested_translation_data",
    "make_translation_catalog",
    "make_translation_data",
    "make_translator",
]
