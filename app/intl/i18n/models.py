"""Translation models for the intl library.

Defines the per-language catalog, the lookup result type and the reserved
`_locale.*` key builders.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from intl.i18n.flatten import flatten


def normalize_key(key: Any) -> str:
    """Return the canonical (lowercase) form of a translation key."""
    return str(key).lower()


def normalize_value(value: Any) -> str:
    """Coerce a leaf value from decoded data to the stored string form."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "1" if value else ""
    return str(value)


@dataclass(frozen=True)
class Lookup:
    """Result of looking a key up in a catalog.

    Distinguishes a key registered with an empty string from a key that is
    not registered at all.

    Attributes:
        found: Whether the key is registered.
        value: The registered value, or "" when not found.
    """

    found: bool
    value: str = ""

    @classmethod
    def hit(cls, value: str) -> "Lookup":
        return cls(found=True, value=value)

    @classmethod
    def missing(cls) -> "Lookup":
        return cls(found=False)

    def or_else(self, fallback: str) -> str:
        """Return the value if found, otherwise `fallback`."""
        return self.value if self.found else fallback


@dataclass
class TranslationCatalog:
    """Container for the translations of a single language.

    Messages are stored flat, keyed by the lowercase dotted path, so nested
    and flat input resolve the same way and merging nested input is a deep
    merge.

    Attributes:
        language: Language identifier the catalog belongs to (e.g. "bg").
        messages: Flat dict {lowercase.dotted.key: message}.
    """

    language: str
    messages: Dict[str, str] = field(default_factory=dict)

    def lookup(self, key: str) -> Lookup:
        """Look up a key (case-insensitive).

        Args:
            key: Dotted translation key.

        Returns:
            Lookup.hit(value) if registered, Lookup.missing() otherwise.
        """
        normalized = normalize_key(key)
        if normalized in self.messages:
            return Lookup.hit(self.messages[normalized])
        return Lookup.missing()

    def has_message(self, key: str) -> bool:
        return normalize_key(key) in self.messages

    def merge(self, data: Mapping[Any, Any]) -> int:
        """Merge nested or flat data into the catalog.

        Later values override existing ones at matching paths. A leaf that
        replaces a subtree drops the subtree's keys, and a subtree that
        replaces a leaf drops the leaf.

        Args:
            data: Translation data for this language.

        Returns:
            Number of keys written.
        """
        flat = flatten(data)
        for key, value in flat.items():
            normalized = normalize_key(key)
            self._drop_conflicts(normalized)
            self.messages[normalized] = normalize_value(value)
        return len(flat)

    def _drop_conflicts(self, key: str) -> None:
        """Remove stored keys below `key` and leaves at any of its ancestors."""
        prefix = key + "."
        for stored in [k for k in self.messages if k.startswith(prefix)]:
            del self.messages[stored]

        parts = key.split(".")
        for end in range(1, len(parts)):
            self.messages.pop(".".join(parts[:end]), None)

    def clear(self) -> None:
        self.messages.clear()


class LocaleKey:
    """Builders for the reserved `_locale.*` keys of a catalog."""

    PREFIX = "_locale"

    CODE_SHORT = "_locale.code.short"
    CODE_LONG = "_locale.code.long"
    NUMBER_DECIMAL = "_locale.numbers.decimal"
    NUMBER_THOUSANDS = "_locale.numbers.thousands"
    SUFFIX_DEFAULT = "_locale.days.suffixes.default"

    @staticmethod
    def date_format(name: str) -> str:
        return f"_locale.date.{name}"

    @staticmethod
    def day_short(weekday: int) -> str:
        return f"_locale.days.short.{weekday}"

    @staticmethod
    def day_long(weekday: int) -> str:
        return f"_locale.days.long.{weekday}"

    @staticmethod
    def day_suffix(day: Optional[int] = None) -> str:
        if day is None:
            return LocaleKey.SUFFIX_DEFAULT
        return f"_locale.days.suffixes.{day}"

    @staticmethod
    def month_short(month: int) -> str:
        return f"_locale.months.short.{month}"

    @staticmethod
    def month_long(month: int) -> str:
        return f"_locale.months.long.{month}"
