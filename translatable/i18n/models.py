"""Translation models for the i18n system.

Defines the catalog returned by message sources and the immutable
renderable message used by translatable errors.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Iterator, Mapping, Optional, Protocol, runtime_checkable

from translatable.i18n.exceptions import ArgumentError
from translatable.i18n.formatter import default_formatter

DEFAULT_DOMAIN = "messages"
DEFAULT_LOCALE = "en"


@runtime_checkable
class SupportsResolve(Protocol):
    """Anything that can resolve a message id to localized text."""

    def resolve(
        self,
        id: str,
        parameters: Optional[Mapping[str, Any]] = None,
        domain: Optional[str] = None,
        locale: Optional[str] = None,
    ) -> str: ...


@runtime_checkable
class SupportsTranslate(Protocol):
    """A message with an untranslated rendering and a translated one."""

    def render(self) -> str: ...

    def translate(self, translator: SupportsResolve, locale: Optional[str] = None) -> str: ...


@dataclass(frozen=True)
class MessageCatalog:
    """Messages of a single (locale, domain) pair.

    Maps message keys to ICU patterns. Patterns are not validated when the
    catalog is built; malformed ones surface when they are rendered.

    Attributes:
        locale: Locale the messages belong to.
        domain: Domain the messages belong to.
        messages: Mapping of message key to pattern.
    """

    locale: str
    domain: str = DEFAULT_DOMAIN
    messages: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "messages", MappingProxyType(dict(self.messages)))

    def get_message(self, key: str) -> Optional[str]:
        """Retrieve a pattern by key.

        Args:
            key: Message key (e.g. "validation.required").

        Returns:
            The pattern, or None if the key is absent.
        """
        return self.messages.get(key)

    def has_message(self, key: str) -> bool:
        """Check if the catalog holds *key*."""
        return key in self.messages

    def merge(self, other: "MessageCatalog") -> "MessageCatalog":
        """Return a new catalog with *other* layered over this one.

        Later entries override earlier ones.
        """
        merged: Dict[str, str] = dict(self.messages)
        merged.update(other.messages)
        return MessageCatalog(locale=self.locale, domain=self.domain, messages=merged)

    def __contains__(self, key: object) -> bool:
        return key in self.messages

    def __iter__(self) -> Iterator[str]:
        return iter(self.messages)

    def __len__(self) -> int:
        return len(self.messages)


@dataclass(frozen=True)
class RenderableMessage:
    """An immutable message that renders with or without a translator.

    The same ``pattern`` plays two roles. Rendered on its own it is a
    literal ICU pattern formatted for ``default_locale``. Handed to a
    translator it is a lookup id resolved against the translator's catalogs.

    Attributes:
        pattern: ICU pattern or message id. Never empty.
        parameters: Named parameters for the pattern.
        domain: Translation domain, or None for the translator's default.
        default_locale: Locale for standalone rendering and for translation
            when no locale is requested.
    """

    pattern: str
    parameters: Mapping[str, Any] = field(default_factory=dict)
    domain: Optional[str] = None
    default_locale: str = DEFAULT_LOCALE

    def __post_init__(self) -> None:
        if not isinstance(self.pattern, str) or not self.pattern:
            raise ArgumentError("Message pattern must be a non-empty string.")
        if not isinstance(self.parameters, Mapping):
            raise ArgumentError("Message parameters must be a mapping.")
        object.__setattr__(
            self, "parameters", MappingProxyType(dict(self.parameters))
        )

    def render(self) -> str:
        """Format the pattern for ``default_locale`` without a translator.

        Returns:
            The formatted text, or the raw pattern if formatting fails.
        """
        return default_formatter.format_or_pattern(
            self.default_locale, self.pattern, self.parameters
        )

    def translate(self, translator: SupportsResolve, locale: Optional[str] = None) -> str:
        """Resolve the pattern as a message id through *translator*.

        Args:
            translator: Translator used for lookup and formatting.
            locale: Target locale, or None for ``default_locale``.

        Returns:
            The translated text.
        """
        return translator.resolve(
            self.pattern,
            dict(self.parameters),
            self.domain,
            locale or self.default_locale,
        )

    def __str__(self) -> str:
        return self.render()
