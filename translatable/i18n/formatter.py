"""ICU MessageFormat adapter.

Wraps PyICU's MessageFormat so the rest of the package can format a
pattern for a locale without touching ICU types directly.
"""

import re
from decimal import Decimal
from typing import Any, FrozenSet, Mapping, Optional

from icu import (
    Formattable,
    ICUError,
    InvalidArgsError,
    Locale,
    MessageFormat,
    UnicodeString,
)

from translatable.i18n.exceptions import FormatError
from translatable.i18n.pluralization import as_number
from translatable.logging import get_module_logger

logger = get_module_logger()


_NUMERIC_ARGUMENT_RE = re.compile(
    r"\{\s*(\w+)\s*,\s*(?:plural|selectordinal|number|spellout|ordinal)\b"
)


def _numeric_arguments(pattern: str) -> FrozenSet[str]:
    """Return the names of arguments *pattern* formats as numbers."""
    return frozenset(_NUMERIC_ARGUMENT_RE.findall(pattern))


def _to_formattable(value: Any, numeric: bool = False) -> Formattable:
    """Convert a Python parameter value to an ICU Formattable.

    Numeric strings are converted to numbers when the argument is
    formatted as a number (plural, number, ...).
    """
    if numeric and isinstance(value, str):
        number = as_number(value)
        if number is not None:
            if number.is_integer() and abs(number) < 2**53:
                return Formattable(int(number))
            return Formattable(number)
    if isinstance(value, bool):
        return Formattable(UnicodeString(str(value).lower()))
    if isinstance(value, (int, float)):
        return Formattable(value)
    if isinstance(value, Decimal):
        return Formattable(float(value))
    return Formattable(UnicodeString(str(value)))


class MessageFormatter:
    """Formats ICU MessageFormat patterns.

    ``format`` raises FormatError on malformed patterns or arguments.
    ``format_or_pattern`` applies the fallback every renderer uses: any
    formatting failure returns the raw pattern unchanged.
    """

    def format(
        self,
        locale: str,
        pattern: str,
        parameters: Optional[Mapping[str, Any]] = None,
    ) -> str:
        """Format *pattern* for *locale* with named *parameters*.

        Args:
            locale: ICU locale identifier (e.g. "en", "es_CL").
            pattern: ICU MessageFormat pattern.
            parameters: Named arguments referenced by the pattern.

        Returns:
            The formatted string.

        Raises:
            FormatError: If the pattern is malformed or ICU rejects the
                arguments.
        """
        parameters = parameters or {}
        numeric = _numeric_arguments(pattern)

        try:
            message_format = MessageFormat(UnicodeString(pattern), Locale(locale))
        except (ICUError, InvalidArgsError) as e:
            raise FormatError(
                f"Invalid message pattern for locale {locale}: {e}",
                pattern=pattern,
                locale=locale,
            ) from e

        try:
            result = message_format.format(
                [UnicodeString(str(name)) for name in parameters.keys()],
                [
                    _to_formattable(value, str(name) in numeric)
                    for name, value in parameters.items()
                ],
            )
        except (ICUError, InvalidArgsError) as e:
            raise FormatError(
                f"Could not format message for locale {locale}: {e}",
                pattern=pattern,
                locale=locale,
            ) from e

        if result is None:
            raise FormatError(
                f"Formatting produced no result for locale {locale}",
                pattern=pattern,
                locale=locale,
            )

        return str(result)

    def format_or_pattern(
        self,
        locale: str,
        pattern: str,
        parameters: Optional[Mapping[str, Any]] = None,
    ) -> str:
        """Format *pattern*, returning it unchanged if formatting fails."""
        try:
            return self.format(locale, pattern, parameters)
        except FormatError as e:
            logger.warning(
                "message_format_failed",
                locale=locale,
                pattern=pattern,
                error=str(e),
            )
            return pattern


default_formatter = MessageFormatter()
