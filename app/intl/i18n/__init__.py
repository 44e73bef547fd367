"""intl translation system.

Provides per-language translation catalogs, key resolution with fallback,
placeholder substitution and locale-aware date and number formatting.

Main components:
- models: TranslationCatalog, Lookup, LocaleKey
- flatten: flatten / unflatten helpers for dotted keys
- loader: TranslationLoader with JSON, INI and YAML adapters
- translator: Translator service
- factory: create_translator for directories of translation files
"""

from intl.i18n.exceptions import (
    IntlError,
    InvalidContents,
    InvalidFile,
    InvalidFormat,
)
from intl.i18n.factory import create_translator
from intl.i18n.flatten import flatten, unflatten
from intl.i18n.loader import (
    INITranslationLoader,
    JSONTranslationLoader,
    TranslationLoader,
    YAMLTranslationLoader,
    dump_file,
    get_loader,
    load_file,
)
from intl.i18n.models import LocaleKey, Lookup, TranslationCatalog
from intl.i18n.translator import Translator

__all__ = [
    "IntlError",
    "InvalidFile",
    "InvalidFormat",
    "InvalidContents",
    "flatten",
    "unflatten",
    "TranslationLoader",
    "JSONTranslationLoader",
    "INITranslationLoader",
    "YAMLTranslationLoader",
    "get_loader",
    "load_file",
    "dump_file",
    "Lookup",
    "LocaleKey",
    "TranslationCatalog",
    "Translator",
    "create_translator",
]
