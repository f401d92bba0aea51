"""Simple parameter substitution and count-based variant selection.

This is the plain (non-ICU) translation behaviour. Parameter keys are
replaced literally in the text, so keys usually carry their own
delimiters (``%name%``). When the count parameter holds a number the text
may contain ``|``-separated variants::

    "{0} No apples|{1} One apple|]1,Inf[ %count% apples"
    "There is one apple|There are %count% apples"

Explicit sets (``{0,2}``) and intervals (``[1,19]``, ``]19,Inf[``) are
matched first. Otherwise the variant is picked by the locale's CLDR
plural category, ordered zero, one, two, few, many, other over the
categories the locale defines.
"""

import re
from decimal import Decimal
from functools import lru_cache
from typing import Any, List, Mapping, Optional, Tuple

from babel.core import Locale, UnknownLocaleError

DEFAULT_COUNT_PARAMETER = "%count%"

CATEGORY_ORDER = ("zero", "one", "two", "few", "many", "other")

_PARTS_RE = re.compile(r"(?:\|\||[^|])+")
_INTERVAL_RE = re.compile(
    r"""^(?:
        \{\s*(?P<set>-?\d+(?:\.\d+)?(?:\s*,\s*-?\d+(?:\.\d+)?)*)\s*\}
        |
        (?P<left_delimiter>[\[\]])\s*
        (?P<left>-Inf|-?\d+(?:\.\d+)?)\s*,\s*
        (?P<right>\+?Inf|-?\d+(?:\.\d+)?)\s*
        (?P<right_delimiter>[\[\]])
    )\s*(?P<message>.*?)$""",
    re.VERBOSE | re.DOTALL,
)
_LABEL_RE = re.compile(r"^\w+:\s*(.*?)$", re.DOTALL)


def _stringify(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


def substitute(text: str, parameters: Optional[Mapping[str, Any]] = None) -> str:
    """Replace every parameter key found in *text* with its value.

    Longer keys win over shorter ones sharing a prefix, and replaced text is
    never scanned again.
    """
    if not parameters:
        return text

    replacements = {str(key): _stringify(value) for key, value in parameters.items()}
    replacements.pop("", None)
    if not replacements:
        return text

    keys = sorted(replacements, key=len, reverse=True)
    pattern = re.compile("|".join(re.escape(key) for key in keys))
    return pattern.sub(lambda match: replacements[match.group(0)], text)


def as_number(value: Any) -> Optional[float]:
    """Return *value* as a float if it is numeric, else None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float, Decimal)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError:
            return None
    return None


@lru_cache(maxsize=64)
def _plural_categories(locale: str) -> Tuple[Optional[Locale], Tuple[str, ...]]:
    try:
        babel_locale = Locale.parse(locale.replace("-", "_"))
    except (UnknownLocaleError, ValueError, TypeError):
        return None, ("one", "other")

    tags = set(babel_locale.plural_form.tags) | {"other"}
    return babel_locale, tuple(tag for tag in CATEGORY_ORDER if tag in tags)


def plural_position(number: float, locale: str) -> int:
    """Return the index of the standard variant to use for *number*.

    Unknown locales use the one/other rule.
    """
    babel_locale, categories = _plural_categories(locale)
    if babel_locale is None:
        category = "one" if abs(number) == 1 else "other"
    else:
        value: Any = int(number) if float(number).is_integer() else number
        category = babel_locale.plural_form(value)
    return categories.index(category) if category in categories else len(categories) - 1


def _split_variants(text: str) -> List[str]:
    if re.fullmatch(r"\|+", text):
        parts = text.split("|")
    else:
        parts = _PARTS_RE.findall(text)
    return [part.replace("||", "|").strip() for part in parts]


def _in_interval(number: float, match: "re.Match[str]") -> bool:
    if match.group("set") is not None:
        return any(number == float(n) for n in match.group("set").split(","))

    left_raw = match.group("left")
    right_raw = match.group("right")
    left = float("-inf") if left_raw == "-Inf" else float(left_raw)
    right = float("inf") if right_raw.lstrip("+") == "Inf" else float(right_raw)

    above_left = number >= left if match.group("left_delimiter") == "[" else number > left
    below_right = number <= right if match.group("right_delimiter") == "]" else number < right
    return above_left and below_right


def choose_variant(text: str, number: float, locale: str) -> str:
    """Pick the variant of *text* matching *number* for *locale*."""
    parts = _split_variants(text)
    standard: List[str] = []

    for part in parts:
        match = _INTERVAL_RE.match(part)
        if match:
            if _in_interval(number, match):
                return match.group("message")
            continue

        # "one: apple" labels only make sense between several variants
        label = _LABEL_RE.match(part) if len(parts) > 1 else None
        standard.append(label.group(1) if label else part)

    if not standard:
        return text

    position = plural_position(number, locale)
    if position < len(standard):
        return standard[position]

    # No variant for this category; the last one is the broadest
    return standard[-1]


def translate_simple(
    text: str,
    parameters: Optional[Mapping[str, Any]],
    locale: str,
    count_parameter: str = DEFAULT_COUNT_PARAMETER,
) -> str:
    """Apply the plain translation behaviour to *text*.

    Without a numeric count parameter this is just ``substitute``. With one,
    the matching variant is chosen first and then substituted.
    """
    parameters = parameters or {}
    number = as_number(parameters.get(count_parameter))
    if number is None:
        return substitute(text, parameters)

    return substitute(choose_variant(text, number, locale), parameters)
