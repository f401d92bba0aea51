"""Translation feature settings."""

import json
from typing import Annotated, Any, List, Optional

from pydantic import Field, field_validator
from pydantic_settings import NoDecode

from translatable.configuration.base import FeatureSettings

SUPPORTED_FORMATS = ("yaml", "json")


class TranslationSettings(FeatureSettings):
    """Configuration for the translator and its message source.

    Environment Variables:
        TRANSLATION_LOCALE: Locale used when none is requested (default: en)
        TRANSLATION_FALLBACK_LOCALES: Ordered fallback locales, as a JSON list
            or a comma-separated string (default: en,en_US,es,es_CL)
        TRANSLATION_DIR: Directory holding <domain>/<locale>.<ext> files
        TRANSLATION_FORMAT: Message file format, 'yaml' or 'json'
        TRANSLATION_CACHE: Cache loaded catalogs in memory (default: True)
        TRANSLATION_COUNT_PARAMETER: Parameter that switches a catalog hit to
            simple pluralization instead of ICU formatting (default: %count%)

    Example:
        ```python
        from translatable.configuration import get_settings

        config = get_settings().translation
        locale = config.default_locale
        fallbacks = config.fallback_locales
        ```
    """

    default_locale: str = Field(
        default="en",
        alias="TRANSLATION_LOCALE",
        description="Locale used when a call does not request one",
    )
    fallback_locales: Annotated[List[str], NoDecode] = Field(
        default_factory=lambda: ["en", "en_US", "es", "es_CL"],
        alias="TRANSLATION_FALLBACK_LOCALES",
        description="Locales tried in order after the requested one",
    )
    translations_dir: Optional[str] = Field(
        default=None,
        alias="TRANSLATION_DIR",
        description="Base directory of the file-backed message source",
    )
    source_format: str = Field(
        default="yaml",
        alias="TRANSLATION_FORMAT",
        description="Message file format: yaml or json",
    )
    use_cache: bool = Field(
        default=True,
        alias="TRANSLATION_CACHE",
        description="Memoise catalogs loaded from the message source",
    )
    count_parameter: str = Field(
        default="%count%",
        alias="TRANSLATION_COUNT_PARAMETER",
        description="Parameter name that selects simple pluralization",
    )

    @field_validator("fallback_locales", mode="before")
    @classmethod
    def _parse_fallback_locales(cls, v: Optional[Any]) -> Any:
        """Accept a JSON list, a comma-separated string or a native list."""
        if v is None:
            return []

        if isinstance(v, (list, tuple)):
            return [str(item).strip() for item in v if str(item).strip()]

        if isinstance(v, str):
            raw = v.strip()
            if raw.startswith("["):
                try:
                    parsed = json.loads(raw)
                except json.JSONDecodeError as e:
                    raise ValueError(
                        f"TRANSLATION_FALLBACK_LOCALES is not valid JSON: {e}"
                    ) from e
                return cls._parse_fallback_locales(parsed)
            return [part.strip() for part in raw.split(",") if part.strip()]

        return v

    @field_validator("source_format", mode="before")
    @classmethod
    def _validate_source_format(cls, v: Any) -> Any:
        if isinstance(v, str):
            v = v.strip().lower()
            if v == "yml":
                v = "yaml"
        if v not in SUPPORTED_FORMATS:
            raise ValueError(
                f"Unsupported translation format: {v!r} "
                f"(expected one of {', '.join(SUPPORTED_FORMATS)})"
            )
        return v
