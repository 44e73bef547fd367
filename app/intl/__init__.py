"""intl - translation lookup with locale-aware date and number formatting.

Usage:
    from intl import Translator

    intl = Translator()
    intl.add_translations("en", {"greeting": "Hello {name}"})
    intl("greeting", {"name": "World"})

Library logs go to the stdlib `intl` logger; call `configure_logging()` to
print them without configuring the root logger.
"""

from intl.core.logging import configure_logging
from intl.i18n import (
    IntlError,
    InvalidContents,
    InvalidFile,
    InvalidFormat,
    Translator,
    create_translator,
    flatten,
    unflatten,
)

__all__ = [
    "IntlError",
    "InvalidFile",
    "InvalidFormat",
    "InvalidContents",
    "Translator",
    "configure_logging",
    "create_translator",
    "flatten",
    "unflatten",
]
