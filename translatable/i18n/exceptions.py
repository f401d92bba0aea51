"""Exceptions for the translation system.

All errors raised by the i18n package inherit from TranslationError so
application code can handle them in one place.
"""

from typing import Optional


class TranslationError(Exception):
    """Base exception for all translation errors.

    Example:
        try:
            translator.resolve("greet", {"name": "Sam"})
        except TranslationError as e:
            logger.error("translation_error", error=str(e))
    """

    pass


class ArgumentError(TranslationError, ValueError):
    """Raised when a message cannot be built from the given input.

    Example:
        >>> TranslatableCarrier.create([])
        Traceback (most recent call last):
        ...
        ArgumentError: Message sequence cannot be empty.
    """

    pass


class FormatError(TranslationError):
    """Raised by the ICU formatter when a pattern cannot be formatted.

    Renderers catch it and fall back to the raw pattern; it never reaches
    callers of render(), resolve() or translate().

    Attributes:
        pattern: The pattern that failed.
        locale: The locale the formatter was built for.
    """

    def __init__(self, message: str, pattern: str = "", locale: str = ""):
        super().__init__(message)
        self.pattern = pattern
        self.locale = locale


class SourceError(TranslationError):
    """Raised when a message source cannot read its backing store.

    Missing data for a (locale, domain) pair is not an error; sources
    return an empty catalog in that case.

    Attributes:
        path: File or location that failed, when known.
    """

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path
