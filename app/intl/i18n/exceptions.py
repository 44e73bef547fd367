"""Exceptions raised by the translation file adapters.

Lookups and formatting never raise; only importing or exporting
translation files can fail, and each failure has its own error kind.
"""


class IntlError(Exception):
    """Base exception for all intl errors.

    Example:
        try:
            translator.from_file("bg", "locales/bg.json")
        except IntlError as e:
            logger.error("translations_not_loaded", error=str(e))
    """

    pass


class InvalidFile(IntlError):
    """Raised when a translation file path does not point to a file.

    Example:
        >>> load_file("missing.json")
        Traceback (most recent call last):
        ...
        InvalidFile: Invalid file: missing.json
    """

    pass


class InvalidFormat(IntlError):
    """Raised when a file format tag is not one of json, ini, yaml."""

    pass


class InvalidContents(IntlError):
    """Raised when a file is not UTF-8 or cannot be decoded into a mapping."""

    pass
