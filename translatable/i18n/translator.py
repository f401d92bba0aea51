"""Translation service resolving message ids across a locale fallback chain.

Looks up a message id in the requested locale and then in each configured
fallback locale, formats the first hit with ICU MessageFormat, and degrades
to plain substitution of the id itself when nothing matches.

Thread safety: the current locale is read during ``resolve`` and only
changed by ``set_locale``. Callers sharing a Translator across threads
must serialise ``set_locale`` with in-flight ``resolve`` calls.
"""

from typing import Any, Iterable, List, Mapping, Optional, Set, Tuple

from translatable.i18n.formatter import MessageFormatter, default_formatter
from translatable.i18n.models import DEFAULT_DOMAIN, DEFAULT_LOCALE
from translatable.i18n.pluralization import DEFAULT_COUNT_PARAMETER, translate_simple
from translatable.i18n.sources import MessageSource
from translatable.logging import get_module_logger

logger = get_module_logger()

DEFAULT_FALLBACK_LOCALES: Tuple[str, ...] = ("en", "en_US", "es", "es_CL")


class Translator:
    """Service for resolving and formatting translated messages.

    Attributes:
        source: MessageSource providing catalogs.
        count_parameter: Parameter name that switches a catalog hit from ICU
            formatting to simple pluralization (default: ``%count%``). A None
            value does not count as present.
    """

    def __init__(
        self,
        source: MessageSource,
        locale: Optional[str] = None,
        fallback_locales: Optional[Iterable[str]] = None,
        count_parameter: str = DEFAULT_COUNT_PARAMETER,
        formatter: Optional[MessageFormatter] = None,
    ):
        """Initialize Translator.

        Args:
            source: MessageSource to look messages up in.
            locale: Locale used when ``resolve`` gets none (default: en).
            fallback_locales: Locales tried in order after the requested one.
                Defaults to en, en_US, es, es_CL.
            count_parameter: Name of the simple-pluralization count parameter.
            formatter: ICU formatter; a shared default is used if omitted.
        """
        self.source = source
        self.count_parameter = count_parameter
        self._formatter = formatter or default_formatter
        self._locale = locale or DEFAULT_LOCALE
        self._fallback_locales: Tuple[str, ...] = (
            tuple(fallback_locales)
            if fallback_locales is not None
            else DEFAULT_FALLBACK_LOCALES
        )
        logger.info(
            "initialized_translator",
            locale=self._locale,
            fallback_locales=list(self._fallback_locales),
        )

    @property
    def locale(self) -> str:
        """Locale used when a call does not request one."""
        return self._locale

    def set_locale(self, locale: str) -> None:
        """Change the current locale."""
        self._locale = locale

    @property
    def fallback_locales(self) -> Tuple[str, ...]:
        return self._fallback_locales

    def candidate_locales(self, locale: Optional[str] = None) -> List[str]:
        """Return the locales tried for *locale*, in order.

        The requested locale comes first, followed by the fallback locales
        that differ from it. No locale appears twice.
        """
        requested = locale or self._locale
        candidates = [requested]
        for fallback in self._fallback_locales:
            if fallback not in candidates:
                candidates.append(fallback)
        return candidates

    def resolve(
        self,
        id: str,
        parameters: Optional[Mapping[str, Any]] = None,
        domain: Optional[str] = None,
        locale: Optional[str] = None,
    ) -> str:
        """Resolve message *id* and format it with *parameters*.

        Args:
            id: Message id to look up.
            parameters: Named parameters for the message.
            domain: Translation domain (default: "messages").
            locale: Requested locale (default: the current locale).

        Returns:
            The formatted translation. When no catalog has *id*, the id
            itself after simple substitution. When the matched pattern
            cannot be formatted, the raw pattern.

        Raises:
            SourceError: If the message source cannot be read.
        """
        parameters = parameters or {}
        domain = domain or DEFAULT_DOMAIN
        requested = locale or self._locale

        match = self._find_message(id, requested, domain)

        if match is None:
            logger.debug(
                "translation_not_found",
                id=id,
                domain=domain,
                locale=requested,
            )
            return translate_simple(id, parameters, requested, self.count_parameter)

        matched_locale, message = match
        if matched_locale != requested:
            logger.debug(
                "used_fallback_translation",
                id=id,
                domain=domain,
                requested_locale=requested,
                fallback_locale=matched_locale,
            )

        if parameters.get(self.count_parameter) is not None:
            return translate_simple(
                message, parameters, matched_locale, self.count_parameter
            )

        return self._formatter.format_or_pattern(matched_locale, message, parameters)

    def has_message(
        self,
        id: str,
        domain: Optional[str] = None,
        locale: Optional[str] = None,
    ) -> bool:
        """Check if *id* exists in the requested locale, without fallback."""
        catalog = self.source.get_messages(
            locale or self._locale, domain or DEFAULT_DOMAIN
        )
        return catalog.has_message(id)

    def get_available_locales(self, domain: Optional[str] = None) -> Set[str]:
        """Return the locales the source has data for in *domain*."""
        return self.source.get_available_locales(domain or DEFAULT_DOMAIN)

    def _find_message(
        self, id: str, locale: str, domain: str
    ) -> Optional[Tuple[str, str]]:
        """Return (locale, pattern) of the first catalog holding *id*."""
        for candidate in self.candidate_locales(locale):
            catalog = self.source.get_messages(candidate, domain)
            message = catalog.get_message(id)
            if message is not None:
                return candidate, message
        return None
