"""Translation service for resolving and formatting translated messages.

Core component of intl: owns the per-language catalogs, resolves keys with
fallback, substitutes placeholders and formats dates and numbers using the
`_locale.*` entries of the active language.
"""

import re
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from intl.core.config import settings
from intl.core.logging import get_module_logger
from intl.i18n.dates import DateFormatter, Timestamp
from intl.i18n.flatten import unflatten
from intl.i18n.loader import PathLike, dump_file, load_file
from intl.i18n.models import LocaleKey, TranslationCatalog, normalize_key
from intl.i18n.numbers import Number, format_number

logger = get_module_logger()

Key = Union[str, Sequence[str]]
Replacements = Union[Mapping[Any, Any], Sequence[Any], None]

PLACEHOLDER_PATTERN = re.compile(r"\{\s*([a-z0-9_\-]+)[^}]*\}", re.IGNORECASE)


def substitute(message: str, replacements: Replacements) -> str:
    """Replace `{name}` placeholders in a message.

    Only the leading identifier inside the braces is used as the name, so
    `{count, number}` is looked up as `count`. Names missing from
    `replacements` are left untouched. Substituted text is not rescanned.

    Args:
        message: Message with placeholders.
        replacements: Mapping of names to values, or a sequence whose items
            are addressed by position (`{0}`, `{1}`, ...).

    Returns:
        The message with known placeholders replaced.
    """
    if not replacements:
        return message

    if isinstance(replacements, Mapping):
        values = {str(name): value for name, value in replacements.items()}
    else:
        values = {str(index): value for index, value in enumerate(replacements)}

    def replace(match: "re.Match[str]") -> str:
        name = match.group(1)
        if name in values:
            return str(values[name])
        return match.group(0)

    return PLACEHOLDER_PATTERN.sub(replace, message)


class Translator:
    """Service for translating keys with placeholder substitution.

    Manages catalogs for multiple languages and tracks which keys were
    resolved since the last `get_used()` reset.

    Attributes:
        catalogs: Loaded TranslationCatalogs by language.
        used: Lowercase key -> last resolved value (before substitution).

    Usage:
        intl = Translator()
        intl.add_translations("en", {"greeting": "Hello {name}"})
        intl("greeting", {"name": "World"})  # "Hello World"
        intl(["missing", "greeting"])        # first resolvable key wins
    """

    def __init__(self, language: str = ""):
        """Initialize Translator.

        Args:
            language: Language to activate once its translations are added.
                Until then the first added language is active.
        """
        self.catalogs: Dict[str, TranslationCatalog] = {}
        self.used: Dict[str, str] = {}
        self._language = ""
        self._requested_language = language
        self.dates = DateFormatter(self.get)

    # Store management

    def add_translations(
        self, language: str, data: Mapping[Any, Any], reset: bool = False
    ) -> "Translator":
        """Merge translations for a language.

        Args:
            language: Language identifier (e.g. "bg").
            data: Nested or flat translations. Values overwrite existing ones
                at the same key, other keys are kept.
            reset: Discard the language's existing translations first.

        Returns:
            The translator, for chaining.
        """
        catalog = self.catalogs.get(language)
        if catalog is None:
            catalog = self.catalogs[language] = TranslationCatalog(language=language)
        elif reset:
            catalog.clear()

        count = catalog.merge(data)
        if language == self._requested_language:
            self._language = language
            self._requested_language = ""
        elif not self._language:
            self._language = language

        logger.debug(
            "translations_added",
            language=language,
            key_count=count,
            reset=reset,
        )
        return self

    def set_language(self, language: str) -> "Translator":
        """Activate a language that has translations; otherwise do nothing."""
        if language in self.catalogs:
            self._language = language
            self._requested_language = ""
        else:
            logger.debug(
                "language_not_registered",
                language=language,
                active_language=self._language,
            )
        return self

    def get_language(self) -> str:
        return self._language

    def get_languages(self) -> List[str]:
        """Get registered languages in the order they were added."""
        return list(self.catalogs.keys())

    def get_catalog(self, language: Optional[str] = None) -> Optional[TranslationCatalog]:
        """Get the catalog of a language (the active one by default)."""
        return self.catalogs.get(language if language is not None else self._language)

    def has(self, key: str, language: Optional[str] = None) -> bool:
        """Check whether a key is registered, without recording usage."""
        catalog = self.get_catalog(language)
        return catalog.has_message(key) if catalog else False

    def to_array(
        self, language: Optional[str] = None, nested: bool = False
    ) -> Dict[str, Any]:
        """Get a copy of a language's translations.

        Args:
            language: Language to export (the active one by default).
            nested: Rebuild nested mappings from the dotted keys.

        Returns:
            Flat (or nested) copy of the translations; {} for unknown languages.
        """
        catalog = self.get_catalog(language)
        if catalog is None:
            return {}
        messages = dict(catalog.messages)
        return unflatten(messages) if nested else messages

    def get_code(self, short: bool = False) -> str:
        """Get the locale code of the active language.

        Uses `_locale.code.long` / `_locale.code.short` when registered,
        otherwise derives it from the language identifier ("bg_BG" -> "bg").
        """
        language = self._language
        catalog = self.get_catalog()
        if short:
            fallback = re.split(r"[_-]", language, maxsplit=1)[0]
            key = LocaleKey.CODE_SHORT
        else:
            fallback = language
            key = LocaleKey.CODE_LONG
        return catalog.lookup(key).or_else(fallback) if catalog else fallback

    # Key resolution

    def get(
        self,
        key: Key,
        replacements: Replacements = None,
        default: Optional[str] = None,
    ) -> str:
        """Retrieve a translation and substitute its placeholders.

        Args:
            key: Translation key (case-insensitive), or a sequence of
                candidate keys tried in order.
            replacements: Placeholder values (mapping or positional sequence).
            default: Value used when no key resolves. None means the key
                itself (for a sequence, the lowercased first candidate).

        Returns:
            The translated, substituted message. Never raises.
        """
        if isinstance(key, (list, tuple)):
            raw = self._resolve_first(key, default)
        else:
            raw = self._resolve(key, default)
        return substitute(raw, replacements)

    __call__ = get

    def _resolve(self, key: Any, default: Optional[str]) -> str:
        normalized = normalize_key(key)
        catalog = self.get_catalog()
        lookup = catalog.lookup(normalized) if catalog else None

        if lookup is not None and lookup.found:
            value = lookup.value
        else:
            value = default if default is not None else str(key)
            logger.debug(
                "translation_not_found",
                key=normalized,
                language=self._language,
            )

        self.used[normalized] = value
        return value

    def _resolve_first(self, keys: Sequence[str], default: Optional[str]) -> str:
        candidates = [normalize_key(k) for k in keys]
        catalog = self.get_catalog()

        tried = []
        value = None
        for candidate in candidates:
            tried.append(candidate)
            lookup = catalog.lookup(candidate) if catalog else None
            if lookup is not None and lookup.found:
                value = lookup.value
                break

        if value is None:
            if default is not None:
                value = default
            else:
                value = candidates[0] if candidates else ""
            logger.debug(
                "translation_not_found",
                keys=candidates,
                language=self._language,
            )

        # Every alias tried on the way counts as resolved to the final value
        for candidate in tried:
            self.used[candidate] = value
        return value

    def get_used(self, reset: bool = True) -> Dict[str, str]:
        """Get the keys resolved since the last reset.

        Args:
            reset: Clear the log as part of the same call.

        Returns:
            Mapping of lowercase key -> resolved value (before substitution).
        """
        used = dict(self.used)
        if reset:
            self.used.clear()
        return used

    # Formatting

    def date(self, format: str = "short", timestamp: Timestamp = None) -> str:
        """Format a date with the active language's day and month names.

        Args:
            format: "short", "long", a `_locale.date.<name>` entry or a
                literal pattern using PHP `date()` letters.
            timestamp: Unix timestamp (local time), datetime, date or None
                for now.

        Example:
            >>> intl.date("jS F Y", datetime(2019, 1, 1))
            "1ви Януари 2019"
        """
        return self.dates.format(format, timestamp)

    def number(self, value: Number, decimals: int = 0) -> str:
        """Format a number with the active language's separators."""
        decimal_point = self.get(
            LocaleKey.NUMBER_DECIMAL, None, settings.formats.NUMBER_DECIMAL
        )
        thousands_sep = self.get(
            LocaleKey.NUMBER_THOUSANDS, None, settings.formats.NUMBER_THOUSANDS
        )
        return format_number(value, decimals, decimal_point, thousands_sep)

    # Files

    def from_file(
        self,
        language: str,
        location: PathLike,
        file_format: Optional[str] = None,
        reset: bool = False,
    ) -> "Translator":
        """Load translations for a language from a JSON, INI or YAML file.

        Raises:
            InvalidFile: If the path is not a file.
            InvalidFormat: If the format tag is unknown.
            InvalidContents: If the file does not decode to a mapping.
        """
        data = load_file(location, file_format or settings.formats.DEFAULT_FILE_FORMAT)
        return self.add_translations(language, data, reset=reset)

    def to_file(
        self,
        location: PathLike,
        file_format: Optional[str] = None,
        flat: bool = False,
        language: Optional[str] = None,
    ) -> bool:
        """Save a language's translations (the active one by default).

        Args:
            location: Target path.
            file_format: "json", "ini" or "yaml" (settings default if None).
            flat: Write dotted keys instead of nested mappings.
            language: Language to export.

        Returns:
            True when the file was written.

        Raises:
            InvalidFormat: If the format tag is unknown.
            OSError: If the file cannot be written.
        """
        data = self.to_array(language, nested=not flat)
        return dump_file(
            data, location, file_format or settings.formats.DEFAULT_FILE_FORMAT
        )
