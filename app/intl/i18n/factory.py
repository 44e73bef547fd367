"""Factory functions for creating translators.

Provides a convenience function for initializing a translator from a
directory of translation files.
"""

from pathlib import Path
from typing import Optional

from intl.core.config import settings
from intl.core.logging import get_module_logger
from intl.i18n.loader import LOADERS, get_loader
from intl.i18n.translator import Translator

logger = get_module_logger()


def create_translator(
    translations_dir: Optional[Path] = None,
    file_format: Optional[str] = None,
    language: str = "",
) -> Translator:
    """Create a Translator and load every translation file of a directory.

    Files are named `<language>.<extension>` (e.g. `bg.json`, `en.yml`).
    When `file_format` is given only files of that format are loaded,
    otherwise every supported extension is picked up.

    Args:
        translations_dir: Directory with translation files
            (default: settings.formats.TRANSLATIONS_DIR; none means an
            empty translator).
        file_format: Restrict loading to one format ("json", "ini", "yaml").
        language: Language to activate. Falls back to the first file loaded
            when no file provides it.

    Returns:
        Translator: Configured translator instance

    Raises:
        ValueError: If translations_dir does not exist
        InvalidFormat: If file_format is not supported

    Usage:
        # Use settings (INTL_TRANSLATIONS_DIR)
        translator = create_translator()

        # Custom directory, JSON only
        translator = create_translator(Path("locales"), file_format="json")
    """
    translator = Translator(language=language)

    if translations_dir is None:
        if not settings.formats.TRANSLATIONS_DIR:
            logger.info("translator_created_empty")
            return translator
        translations_dir = Path(settings.formats.TRANSLATIONS_DIR)

    translations_dir = Path(translations_dir)
    if not translations_dir.is_dir():
        raise ValueError(f"Translations directory not found: {translations_dir}")

    if file_format is not None:
        loaders = [get_loader(file_format)]
    else:
        loaders = list({id(loader): loader for loader in LOADERS.values()}.values())

    for path in sorted(translations_dir.iterdir()):
        if not path.is_file():
            continue
        extension = path.suffix.lstrip(".").lower()
        for loader in loaders:
            if extension in loader.extensions:
                translator.add_translations(path.stem, loader.load(path))
                break

    if language and translator.get_language() != language:
        logger.warning(
            "requested_language_not_found",
            language=language,
            active_language=translator.get_language(),
        )

    logger.info(
        "translator_created",
        translations_dir=str(translations_dir),
        languages=translator.get_languages(),
        active_language=translator.get_language(),
    )
    return translator
