"""Feature-level fixtures for translation system tests."""

from datetime import datetime

import pytest

from intl.i18n import Translator
from tests.factories.i18n import (
    make_bulgarian_locale,
    make_nested_translation_data,
    make_translator,
)


@pytest.fixture
def translator():
    """Translator with flat English sample data."""
    return make_translator("en")


@pytest.fixture
def bulgarian_translator():
    """Translator with the Bulgarian locale tables as the only language."""
    translator = Translator()
    translator.add_translations("bg", make_bulgarian_locale())
    return translator


@pytest.fixture
def new_year_2019():
    """Local midnight, Tuesday 1 January 2019."""
    return datetime(2019, 1, 1)


@pytest.fixture
def temp_translations_dir(tmp_path):
    """Directory with one translation file per supported format.

    - en.json (nested)
    - bg.ini (sections)
    - de.yml (nested)
    """
    (tmp_path / "en.json").write_text(
        '{"incident": {"created": "Incident {incident_id} created"}, "confirm": "Yes"}',
        encoding="utf-8",
    )
    (tmp_path / "bg.ini").write_text(
        "confirm = Да\n\n[incident]\ncreated = \"Инцидент {incident_id} създаден\"\n",
        encoding="utf-8",
    )
    (tmp_path / "de.yml").write_text(
        "incident:\n  created: Vorfall {incident_id} erstellt\nconfirm: Ja\n",
        encoding="utf-8",
    )
    (tmp_path / "notes.txt").write_text("not a translation file", encoding="utf-8")
    return tmp_path


@pytest.fixture
def sample_translation_data():
    """Nested sample translation data."""
    return make_nested_translation_data()
