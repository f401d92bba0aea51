"""Message sources: the interface and built-in implementations.

A message source returns the catalog for a (locale, domain) pair and lists
the locales it has data for. Absent data is an empty catalog, never an
error; only unreadable or corrupt storage raises SourceError.

File-backed sources expect one file per locale, grouped by domain::

    translations/
        messages/
            en.yaml
            es.yaml
        errors/
            en.yaml
            es.yaml
"""

import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Protocol, Set, Tuple, runtime_checkable

import yaml

from translatable.i18n.exceptions import SourceError
from translatable.i18n.models import DEFAULT_DOMAIN, MessageCatalog
from translatable.logging import get_module_logger

logger = get_module_logger()


@runtime_checkable
class MessageSource(Protocol):
    """Protocol for message sources used by the Translator.

    Implementations may read files, databases or remote services.
    """

    def get_messages(self, locale: str, domain: str = DEFAULT_DOMAIN) -> MessageCatalog:
        """Return all messages for *locale* in *domain*.

        Returns an empty catalog when there is no data for the pair.

        Raises:
            SourceError: If the backing store cannot be read.
        """
        ...

    def get_available_locales(self, domain: str = DEFAULT_DOMAIN) -> Set[str]:
        """Return the locales that have data for *domain*."""
        ...


def flatten_messages(
    data: Mapping[str, Any], prefix: str = "", source: Optional[str] = None
) -> Dict[str, str]:
    """Flatten nested mappings into dot-separated keys.

    ``{"validation": {"required": "..."}}`` becomes
    ``{"validation.required": "..."}``.

    Raises:
        SourceError: If a value is a list or another non-scalar.
    """
    items: Dict[str, str] = {}
    for key, value in data.items():
        full_key = f"{prefix}.{key}" if prefix else str(key)
        if isinstance(value, Mapping):
            items.update(flatten_messages(value, full_key, source))
        elif isinstance(value, (str, int, float)) and not isinstance(value, bool):
            items[full_key] = str(value)
        else:
            raise SourceError(
                f"Message {full_key!r} in {source or 'source'} must be a string, "
                f"got {type(value).__name__}",
                path=source,
            )
    return items


class FileMessageSource(ABC):
    """Base class for file-backed message sources.

    Subclasses define the file extensions and how a file is parsed.

    Attributes:
        directory: Base directory holding one sub-directory per domain.
    """

    extensions: Tuple[str, ...] = ()

    def __init__(self, directory: Path):
        """Initialize the source.

        Args:
            directory: Base directory with <domain>/<locale>.<ext> files.

        Raises:
            SourceError: If the directory does not exist.
        """
        self.directory = Path(directory)

        if not self.directory.is_dir():
            raise SourceError(
                f"Translations directory not found: {self.directory}",
                path=str(self.directory),
            )

        logger.info(
            "initialized_message_source",
            source=type(self).__name__,
            directory=str(self.directory),
        )

    def get_messages(self, locale: str, domain: str = DEFAULT_DOMAIN) -> MessageCatalog:
        path = self._find_file(locale, domain)
        if path is None:
            return MessageCatalog(locale=locale, domain=domain)

        messages = self.parse_file(path)
        logger.debug(
            "loaded_messages",
            locale=locale,
            domain=domain,
            file=str(path),
            message_count=len(messages),
        )
        return MessageCatalog(locale=locale, domain=domain, messages=messages)

    def get_available_locales(self, domain: str = DEFAULT_DOMAIN) -> Set[str]:
        if not self._is_safe_name(domain):
            logger.warning("rejected_unsafe_path", domain=domain)
            return set()

        domain_dir = self.directory / domain
        if not domain_dir.is_dir():
            return set()

        return {
            path.stem
            for extension in self.extensions
            for path in domain_dir.glob(f"*.{extension}")
            if path.is_file()
        }

    @abstractmethod
    def parse_file(self, path: Path) -> Dict[str, str]:
        """Read and parse a message file.

        Args:
            path: Full path of the file.

        Returns:
            Flat mapping of message key to pattern.

        Raises:
            SourceError: If the file cannot be read or parsed.
        """
        pass

    @staticmethod
    def _is_safe_name(name: str) -> bool:
        """Check that *name* is a single path segment."""
        if not name or name in (".", ".."):
            return False
        return not any(char in name for char in ("/", "\\", "\0"))

    def _find_file(self, locale: str, domain: str) -> Optional[Path]:
        """Return the message file for (locale, domain), if any.

        Locales and domains that would leave the translations directory
        find nothing.
        """
        if not (self._is_safe_name(locale) and self._is_safe_name(domain)):
            logger.warning("rejected_unsafe_path", locale=locale, domain=domain)
            return None

        root = self.directory.resolve()
        for extension in self.extensions:
            path = self.directory / domain / f"{locale}.{extension}"
            if path.is_file() and path.resolve().is_relative_to(root):
                return path
        return None

    @staticmethod
    def _read_text(path: Path) -> str:
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.error("message_source_error", file=str(path), error=str(e))
            raise SourceError(f"Could not read file {path}: {e}", path=str(path)) from e


class YAMLMessageSource(FileMessageSource):
    """Loads messages from ``<domain>/<locale>.yaml`` (or ``.yml``) files.

    Files hold key/pattern pairs; nested mappings are flattened with dots.
    """

    extensions = ("yaml", "yml")

    def parse_file(self, path: Path) -> Dict[str, str]:
        content = self._read_text(path)
        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as e:
            logger.error("yaml_parse_error", file=str(path), error=str(e))
            raise SourceError(f"Invalid YAML in file {path}: {e}", path=str(path)) from e

        if data is None:
            return {}

        if not isinstance(data, dict):
            logger.error("invalid_yaml_format", file=str(path), expected="dict")
            raise SourceError(
                f"Not a valid messages YAML file {path}: should be key value pairs.",
                path=str(path),
            )

        return flatten_messages(data, source=str(path))


class JSONMessageSource(FileMessageSource):
    """Loads messages from ``<domain>/<locale>.json`` files."""

    extensions = ("json",)

    def parse_file(self, path: Path) -> Dict[str, str]:
        content = self._read_text(path)
        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            logger.error("json_parse_error", file=str(path), error=str(e))
            raise SourceError(f"Invalid JSON in file {path}: {e}", path=str(path)) from e

        if not isinstance(data, dict):
            logger.error("invalid_json_format", file=str(path), expected="object")
            raise SourceError(
                f"Not a valid messages JSON file {path}: should be an object.",
                path=str(path),
            )

        return flatten_messages(data, source=str(path))


class DictMessageSource:
    """In-memory message source.

    Attributes:
        catalogs: Nested dict ``{domain: {locale: {key: pattern}}}``.
    """

    def __init__(
        self,
        catalogs: Optional[Mapping[str, Mapping[str, Mapping[str, Any]]]] = None,
    ):
        self.catalogs: Dict[str, Dict[str, Dict[str, str]]] = {}
        for domain, locales in (catalogs or {}).items():
            for locale, messages in locales.items():
                self.add_messages(locale, messages, domain)

    def add_messages(
        self, locale: str, messages: Mapping[str, Any], domain: str = DEFAULT_DOMAIN
    ) -> None:
        """Add or override messages for (locale, domain)."""
        flat = flatten_messages(messages, source=f"{domain}/{locale}")
        self.catalogs.setdefault(domain, {}).setdefault(locale, {}).update(flat)

    def get_messages(self, locale: str, domain: str = DEFAULT_DOMAIN) -> MessageCatalog:
        messages = self.catalogs.get(domain, {}).get(locale, {})
        return MessageCatalog(locale=locale, domain=domain, messages=messages)

    def get_available_locales(self, domain: str = DEFAULT_DOMAIN) -> Set[str]:
        return {
            locale
            for locale, messages in self.catalogs.get(domain, {}).items()
            if messages
        }


class CachingMessageSource:
    """Memoises catalogs of another source per (locale, domain).

    Source errors are not cached; the next call retries the wrapped source.

    Attributes:
        source: The wrapped message source.
        cache: Loaded catalogs keyed by (locale, domain).
    """

    def __init__(self, source: MessageSource):
        self.source = source
        self.cache: Dict[Tuple[str, str], MessageCatalog] = {}

    def get_messages(self, locale: str, domain: str = DEFAULT_DOMAIN) -> MessageCatalog:
        key = (locale, domain)
        if key not in self.cache:
            self.cache[key] = self.source.get_messages(locale, domain)
        return self.cache[key]

    def get_available_locales(self, domain: str = DEFAULT_DOMAIN) -> Set[str]:
        return self.source.get_available_locales(domain)

    def clear_cache(self) -> None:
        """Clear all cached catalogs."""
        self.cache.clear()
        logger.info("cleared_translation_cache")
