"""Configuration module - public API.

Centralized configuration using Pydantic BaseSettings.

Exports:
    get_settings: Cached Settings instance, loaded on first call
    Settings: Main settings class (for testing/overrides)
    TranslationSettings: Translator and message source settings
"""

from translatable.configuration.settings import Settings, get_settings
from translatable.configuration.translation import TranslationSettings

__all__ = ["Settings", "TranslationSettings", "get_settings"]
