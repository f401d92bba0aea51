"""i18n system - message translation with ICU formatting.

Resolves message ids against pluggable message sources across a locale
fallback chain and formats them with ICU MessageFormat. Errors can carry
translatable messages rendered untranslated at raise time and localized
when caught.

Main components:
- formatter: MessageFormatter (ICU adapter with raw-pattern fallback)
- models: RenderableMessage, MessageCatalog, SupportsTranslate
- sources: MessageSource protocol, YAML/JSON/in-memory/caching sources
- translator: Translator with locale fallback
- carrier: TranslatableCarrier, TranslatableError, ErrorKind
- pluralization: simple substitution for %count% style messages
"""

from translatable.i18n.carrier import (
    ErrorKind,
    MessageShape,
    TranslatableCarrier,
    TranslatableError,
    normalize_message,
)
from translatable.i18n.exceptions import (
    ArgumentError,
    FormatError,
    SourceError,
    TranslationError,
)
from translatable.i18n.factory import create_message_source, create_translator
from translatable.i18n.formatter import MessageFormatter
from translatable.i18n.models import MessageCatalog, RenderableMessage, SupportsTranslate
from translatable.i18n.sources import (
    CachingMessageSource,
    DictMessageSource,
    FileMessageSource,
    JSONMessageSource,
    MessageSource,
    YAMLMessageSource,
)
from translatable.i18n.translator import Translator

__all__ = [
    "ArgumentError",
    "CachingMessageSource",
    "DictMessageSource",
    "ErrorKind",
    "FileMessageSource",
    "FormatError",
    "JSONMessageSource",
    "MessageCatalog",
    "MessageFormatter",
    "MessageShape",
    "MessageSource",
    "RenderableMessage",
    "SourceError",
    "SupportsTranslate",
    "TranslatableCarrier",
    "TranslatableError",
    "TranslationError",
    "Translator",
    "YAMLMessageSource",
    "create_message_source",
    "create_translator",
    "normalize_message",
]
