"""Locale-aware date formatting.

Patterns use the single-letter tokens of PHP's `date()` (`j`, `Y`, `H`, ...).
A backslash makes the next character literal. The day and month name tokens
(`D`, `l`, `F`, `M`) and the ordinal suffix token (`S`) are resolved through
the `_locale.*` entries of the active language.

Supported tokens: d j N w z W m n t L o Y y a A g G h H i s u v U c r and
the locale tokens above. Timezone tokens (e, I, O, P, T, Z) and B are not
supported and render as literal letters.
"""

import calendar
from datetime import date, datetime
from typing import Callable, Iterator, List, Tuple, Union

from intl.core.config import settings
from intl.i18n.models import LocaleKey

Timestamp = Union[int, float, datetime, date, None]

DAY_NAMES = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)

MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

LOCALE_TOKENS = frozenset("DlSFM")


def _hour12(dt: datetime) -> int:
    return dt.hour % 12 or 12


def _aware(dt: datetime) -> datetime:
    """Attach the local UTC offset to a naive datetime."""
    return dt if dt.tzinfo is not None else dt.astimezone()


NATIVE_TOKENS: dict = {
    # Day
    "d": lambda dt: f"{dt.day:02d}",
    "j": lambda dt: str(dt.day),
    "N": lambda dt: str(dt.isoweekday()),
    "w": lambda dt: str(dt.isoweekday() % 7),
    "z": lambda dt: str(dt.timetuple().tm_yday - 1),
    # Week
    "W": lambda dt: f"{dt.isocalendar()[1]:02d}",
    # Month
    "m": lambda dt: f"{dt.month:02d}",
    "n": lambda dt: str(dt.month),
    "t": lambda dt: str(calendar.monthrange(dt.year, dt.month)[1]),
    # Year
    "L": lambda dt: "1" if calendar.isleap(dt.year) else "0",
    "o": lambda dt: str(dt.isocalendar()[0]),
    "Y": lambda dt: f"{dt.year:04d}",
    "y": lambda dt: f"{dt.year % 100:02d}",
    # Time
    "a": lambda dt: "am" if dt.hour < 12 else "pm",
    "A": lambda dt: "AM" if dt.hour < 12 else "PM",
    "g": lambda dt: str(_hour12(dt)),
    "G": lambda dt: str(dt.hour),
    "h": lambda dt: f"{_hour12(dt):02d}",
    "H": lambda dt: f"{dt.hour:02d}",
    "i": lambda dt: f"{dt.minute:02d}",
    "s": lambda dt: f"{dt.second:02d}",
    "u": lambda dt: f"{dt.microsecond:06d}",
    "v": lambda dt: f"{dt.microsecond // 1000:03d}",
    "U": lambda dt: str(int(dt.timestamp())),
    # Full date/time, always in English like PHP
    "c": lambda dt: _aware(dt).isoformat(timespec="seconds"),
    "r": lambda dt: (
        f"{DAY_NAMES[dt.weekday()][:3]}, {dt.day:02d} {MONTH_NAMES[dt.month - 1][:3]} "
        f"{dt.year:04d} {dt:%H:%M:%S} {_aware(dt):%z}"
    ),
}


def tokenize(pattern: str) -> Iterator[Tuple[bool, str]]:
    """Split a date pattern into tokens and literals.

    Args:
        pattern: Date pattern (e.g. "jS F Y \\г.").

    Yields:
        (is_token, text) pairs. Escaped characters and characters that are
        not tokens are yielded as literals.

    Example:
        >>> list(tokenize("d.m\\Y"))
        [(True, 'd'), (False, '.'), (True, 'm'), (False, 'Y')]
    """
    chars = iter(pattern)
    for char in chars:
        if char == "\\":
            # A trailing backslash is kept as is
            yield False, next(chars, "\\")
        elif char in NATIVE_TOKENS or char in LOCALE_TOKENS:
            yield True, char
        else:
            yield False, char


def to_datetime(timestamp: Timestamp = None) -> datetime:
    """Normalize the accepted timestamp types to a naive local datetime."""
    if timestamp is None:
        return datetime.now()
    if isinstance(timestamp, datetime):
        return timestamp
    if isinstance(timestamp, date):
        return datetime(timestamp.year, timestamp.month, timestamp.day)
    return datetime.fromtimestamp(timestamp)


class DateFormatter:
    """Renders dates with day and month names taken from translations.

    Args:
        resolve: Key resolver with the signature of `Translator.get`.
    """

    def __init__(self, resolve: Callable[..., str]):
        self.resolve = resolve

    def pattern(self, name: str) -> str:
        """Resolve a named format ("short", "long") or return a literal pattern."""
        pattern = self.resolve(LocaleKey.date_format(name), None, name)
        if pattern == "short":
            return settings.formats.DATE_SHORT
        if pattern == "long":
            return settings.formats.DATE_LONG
        return pattern

    def _locale_token(self, token: str, dt: datetime) -> str:
        weekday = dt.isoweekday()
        if token == "D":
            return self.resolve(
                LocaleKey.day_short(weekday), None, DAY_NAMES[weekday - 1][:3]
            )
        if token == "l":
            return self.resolve(LocaleKey.day_long(weekday), None, DAY_NAMES[weekday - 1])
        if token == "S":
            return self.resolve(
                [LocaleKey.day_suffix(dt.day), LocaleKey.day_suffix()], None, ""
            )
        if token == "F":
            return self.resolve(
                LocaleKey.month_long(dt.month), None, MONTH_NAMES[dt.month - 1]
            )
        return self.resolve(
            LocaleKey.month_short(dt.month), None, MONTH_NAMES[dt.month - 1][:3]
        )

    def render(self, pattern: str, timestamp: Timestamp = None) -> str:
        """Render a literal pattern against a timestamp."""
        dt = to_datetime(timestamp)
        parts: List[str] = []
        for is_token, text in tokenize(pattern):
            if not is_token:
                parts.append(text)
            elif text in LOCALE_TOKENS:
                parts.append(self._locale_token(text, dt))
            else:
                parts.append(NATIVE_TOKENS[text](dt))
        return "".join(parts)

    def format(self, name: str = "short", timestamp: Timestamp = None) -> str:
        """Render a named format or literal pattern.

        Args:
            name: "short", "long", another `_locale.date.<name>` entry or a
                literal pattern.
            timestamp: Unix timestamp (local time), datetime, date or None
                for the current time.
        """
        return self.render(self.pattern(name), timestamp)
