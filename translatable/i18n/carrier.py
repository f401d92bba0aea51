"""Translatable carriers and errors.

A carrier packages a RenderableMessage for embedding in another object,
typically an exception. It renders the untranslated text once, at
construction, and renders localized text on demand::

    try:
        raise TranslatableError(("validation.required", {"field": "email"}))
    except TranslatableError as e:
        str(e)                      # "validation.required"
        e.translate(translator)     # "The field email is required"

Messages come in three shapes:

- a plain string, used as both pattern and message id;
- a structured sequence: the pattern first, then mappings of named
  parameters and/or positional values (stored under "0", "1", ...);
- a RenderableMessage, or any object with ``render`` and ``translate``,
  used as is.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple, Union

from translatable.i18n.exceptions import ArgumentError
from translatable.i18n.models import (
    DEFAULT_LOCALE,
    RenderableMessage,
    SupportsResolve,
    SupportsTranslate,
)

DEFAULT_ERROR_DOMAIN = "errors"

MessageInput = Union[str, Sequence[Any], SupportsTranslate]


class MessageShape(str, Enum):
    """The accepted shapes of carrier input."""

    PLAIN = "plain"
    STRUCTURED = "structured"
    RENDERABLE = "renderable"

    @classmethod
    def of(cls, message: Any) -> "MessageShape":
        """Classify *message*.

        Raises:
            ArgumentError: If *message* has none of the accepted shapes.
        """
        if isinstance(message, str):
            return cls.PLAIN
        if isinstance(message, (RenderableMessage, SupportsTranslate)):
            return cls.RENDERABLE
        if isinstance(message, (list, tuple)):
            return cls.STRUCTURED
        raise ArgumentError(
            "Message must be a string, a sequence or a renderable message, "
            f"got {type(message).__name__}."
        )


def _structured_parts(message: Sequence[Any]) -> Tuple[str, Dict[str, Any]]:
    if not message:
        raise ArgumentError("Message sequence cannot be empty.")

    pattern, *extras = message
    if not isinstance(pattern, str):
        raise ArgumentError("First element of message sequence must be a string.")

    parameters: Dict[str, Any] = {}
    position = 0
    for extra in extras:
        if isinstance(extra, Mapping):
            parameters.update({str(key): value for key, value in extra.items()})
        else:
            parameters[str(position)] = extra
            position += 1
    return pattern, parameters


def normalize_message(
    message: MessageInput,
    domain: Optional[str] = DEFAULT_ERROR_DOMAIN,
    locale: str = DEFAULT_LOCALE,
) -> SupportsTranslate:
    """Normalize any accepted message shape into a renderable message.

    Args:
        message: Plain string, structured sequence or renderable message.
        domain: Domain for messages built from strings or sequences.
        locale: Default locale for messages built from strings or sequences.

    Returns:
        A RenderableMessage. A renderable message passed in is returned
        unchanged.

    Raises:
        ArgumentError: If the sequence is empty, its first element is not
            a string, or the message has an unsupported type.
    """
    shape = MessageShape.of(message)

    if shape is MessageShape.RENDERABLE:
        return message  # type: ignore[return-value]

    if shape is MessageShape.PLAIN:
        return RenderableMessage(message, {}, domain, locale)  # type: ignore[arg-type]

    pattern, parameters = _structured_parts(message)  # type: ignore[arg-type]
    return RenderableMessage(pattern, parameters, domain, locale)


@dataclass(frozen=True)
class TranslatableCarrier:
    """A renderable message plus its untranslated rendering.

    Attributes:
        message: The carried renderable message.
        default_domain: Domain applied to string and sequence input.
        default_locale: Locale used by ``translate`` when none is given.
        rendered_default: Untranslated text, computed once at creation.
    """

    message: SupportsTranslate
    default_domain: str
    default_locale: str
    rendered_default: str

    @classmethod
    def create(
        cls,
        message: MessageInput,
        default_domain: str = DEFAULT_ERROR_DOMAIN,
        default_locale: str = DEFAULT_LOCALE,
    ) -> "TranslatableCarrier":
        """Build a carrier from any accepted message shape.

        Raises:
            ArgumentError: If the message cannot be normalized.
        """
        renderable = normalize_message(message, default_domain, default_locale)
        return cls(
            message=renderable,
            default_domain=default_domain,
            default_locale=default_locale,
            rendered_default=renderable.render(),
        )

    def default_message(self) -> str:
        return self.rendered_default

    def translate(self, translator: SupportsResolve, locale: Optional[str] = None) -> str:
        """Render the message through *translator*.

        Args:
            translator: Translator used for lookup and formatting.
            locale: Target locale, or None for ``default_locale``.
        """
        return self.message.translate(translator, locale or self.default_locale)

    def __str__(self) -> str:
        return self.rendered_default


class ErrorKind(str, Enum):
    """Category of a translatable error."""

    GENERIC = "generic"
    RUNTIME = "runtime"
    LOGIC = "logic"
    DOMAIN = "domain"
    INVALID_ARGUMENT = "invalid_argument"
    LENGTH = "length"
    OUT_OF_RANGE = "out_of_range"
    OUT_OF_BOUNDS = "out_of_bounds"
    OVERFLOW = "overflow"
    RANGE = "range"
    UNDERFLOW = "underflow"
    UNEXPECTED_VALUE = "unexpected_value"


class TranslatableError(Exception):
    """Exception whose message can be rendered in any locale.

    ``str(error)`` is the untranslated rendering. Subclasses may override
    ``default_domain`` and ``default_locale``.

    Attributes:
        carrier: The TranslatableCarrier holding the message.
        kind: ErrorKind categorising the error.
        code: Optional application error code.

    Example:
        raise TranslatableError(
            ("validation.between", {"min": 1, "max": 10}),
            kind=ErrorKind.OUT_OF_RANGE,
        )
    """

    default_domain: str = DEFAULT_ERROR_DOMAIN
    default_locale: str = DEFAULT_LOCALE

    def __init__(
        self,
        message: MessageInput,
        kind: ErrorKind = ErrorKind.GENERIC,
        code: int = 0,
    ):
        self.carrier = TranslatableCarrier.create(
            message, self.default_domain, self.default_locale
        )
        self.kind = kind
        self.code = code
        super().__init__(self.carrier.rendered_default)

    @property
    def message(self) -> SupportsTranslate:
        return self.carrier.message

    def default_message(self) -> str:
        return self.carrier.default_message()

    def translate(self, translator: SupportsResolve, locale: Optional[str] = None) -> str:
        """Render the error message through *translator*."""
        return self.carrier.translate(translator, locale)
