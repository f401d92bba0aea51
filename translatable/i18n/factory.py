"""Factory functions for creating i18n components.

Builds message sources and translators from TranslationSettings, with
explicit arguments taking precedence over configuration.
"""

from pathlib import Path
from typing import Iterable, Optional

from translatable.configuration import TranslationSettings, get_settings
from translatable.i18n.sources import (
    CachingMessageSource,
    FileMessageSource,
    JSONMessageSource,
    MessageSource,
    YAMLMessageSource,
)
from translatable.i18n.translator import Translator
from translatable.logging import get_module_logger

logger = get_module_logger()

SOURCE_CLASSES = {
    "yaml": YAMLMessageSource,
    "json": JSONMessageSource,
}


def create_message_source(
    translations_dir: Path,
    source_format: str = "yaml",
    use_cache: bool = True,
) -> MessageSource:
    """Create a file-backed message source.

    Args:
        translations_dir: Directory with <domain>/<locale>.<ext> files.
        source_format: "yaml" or "json".
        use_cache: Wrap the source in a CachingMessageSource.

    Raises:
        ValueError: If the format is not supported.
        SourceError: If the directory does not exist.
    """
    try:
        source_class = SOURCE_CLASSES[source_format.lower()]
    except KeyError as e:
        raise ValueError(f"Unsupported translation format: {source_format}") from e

    source: FileMessageSource = source_class(Path(translations_dir))
    if use_cache:
        return CachingMessageSource(source)
    return source


def create_translator(
    translations_dir: Optional[Path] = None,
    locale: Optional[str] = None,
    fallback_locales: Optional[Iterable[str]] = None,
    source: Optional[MessageSource] = None,
    config: Optional[TranslationSettings] = None,
) -> Translator:
    """Create and configure a Translator instance.

    Args:
        translations_dir: Message files directory (default: TRANSLATION_DIR).
        locale: Current locale (default: TRANSLATION_LOCALE).
        fallback_locales: Fallback chain (default: TRANSLATION_FALLBACK_LOCALES).
        source: Ready-made message source; skips file source creation.
        config: Settings to read defaults from (default: get_settings()).

    Returns:
        Translator: Configured translator instance

    Raises:
        ValueError: If neither a source nor a translations directory is set.
        SourceError: If the translations directory does not exist.

    Usage:
        translator = create_translator(translations_dir=Path("translations"))
        translator.resolve("welcome", {"name": "Ann"}, locale="es")
    """
    config = config or get_settings().translation

    if source is None:
        directory = translations_dir or config.translations_dir
        if directory is None:
            raise ValueError(
                "No message source configured: pass translations_dir or set TRANSLATION_DIR"
            )
        source = create_message_source(
            Path(directory),
            source_format=config.source_format,
            use_cache=config.use_cache,
        )

    translator = Translator(
        source=source,
        locale=locale or config.default_locale,
        fallback_locales=(
            fallback_locales if fallback_locales is not None else config.fallback_locales
        ),
        count_parameter=config.count_parameter,
    )
    logger.info(
        "translator_created",
        source=type(source).__name__,
        locale=translator.locale,
    )
    return translator
