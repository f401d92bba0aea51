"""Application configuration settings - main aggregator."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from translatable.configuration.translation import TranslationSettings


class Settings(BaseSettings):
    """Application configuration settings - main aggregator.

    Environment Variables:
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
        ENVIRONMENT: Deployment environment name (default: development)

    Example:
        ```python
        from translatable.configuration import get_settings

        settings = get_settings()
        if settings.is_production:
            ...
        locale = settings.translation.default_locale
        ```
    """

    LOG_LEVEL: str = "INFO"
    ENVIRONMENT: str = "development"

    translation: TranslationSettings

    @property
    def is_production(self) -> bool:
        """Check if the application is running in production.

        Returns:
            True if ENVIRONMENT is 'production', False otherwise.
        """
        return self.ENVIRONMENT.lower() == "production"

    def __init__(self, **kwargs):
        """Initialize Settings with automatic subsettings instantiation.

        Args:
            **kwargs: Optional overrides for specific settings sections.
        """
        settings_map = {
            "translation": TranslationSettings,
        }

        for setting_name, setting_class in settings_map.items():
            if setting_name not in kwargs:
                kwargs[setting_name] = setting_class()

        super().__init__(**kwargs)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Get the process-wide settings instance.

    Settings are loaded from the environment on first call, not on import,
    so callers that pass explicit arguments never read the environment.

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()
