"""Tests for intl.i18n.factory module."""

import pytest

from intl.core.config import settings
from intl.i18n import InvalidFormat, create_translator


@pytest.mark.unit
class TestCreateTranslator:
    """Tests for create_translator()."""

    def test_loads_every_supported_file(self, temp_translations_dir):
        translator = create_translator(temp_translations_dir)
        assert sorted(translator.get_languages()) == ["bg", "de", "en"]

    def test_first_file_becomes_active(self, temp_translations_dir):
        translator = create_translator(temp_translations_dir)
        assert translator.get_language() == "bg"
        assert translator("confirm") == "Да"

    def test_requested_language(self, temp_translations_dir):
        translator = create_translator(temp_translations_dir, language="de")
        assert translator.get_language() == "de"
        assert (
            translator("incident.created", {"incident_id": "9"})
            == "Vorfall 9 erstellt"
        )

    def test_requested_language_without_file(self, temp_translations_dir):
        translator = create_translator(
            temp_translations_dir, file_format="json", language="xx"
        )
        assert translator.get_languages() == ["en"]
        assert translator.get_language() == "en"
        assert translator("confirm") == "Yes"

    def test_requested_language_in_empty_directory(self, tmp_path):
        translator = create_translator(tmp_path, language="xx")
        assert translator.get_language() == ""

    def test_single_format(self, temp_translations_dir):
        translator = create_translator(temp_translations_dir, file_format="yaml")
        assert translator.get_languages() == ["de"]

    def test_unknown_format(self, temp_translations_dir):
        with pytest.raises(InvalidFormat):
            create_translator(temp_translations_dir, file_format="xml")

    def test_missing_directory(self, tmp_path):
        with pytest.raises(ValueError):
            create_translator(tmp_path / "missing")

    def test_empty_without_directory(self, monkeypatch):
        monkeypatch.setattr(settings.formats, "TRANSLATIONS_DIR", None)
        translator = create_translator()
        assert translator.get_languages() == []

    def test_directory_from_settings(self, temp_translations_dir, monkeypatch):
        monkeypatch.setattr(
            settings.formats, "TRANSLATIONS_DIR", str(temp_translations_dir)
        )
        translator = create_translator()
        assert "en" in translator.get_languages()
