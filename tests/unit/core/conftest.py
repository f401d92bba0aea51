"""Fixtures for configuration and logging tests."""

from unittest.mock import Mock

import pytest

from translatable.configuration import Settings


@pytest.fixture
def mock_settings():
    """Mock Settings instance for testing."""
    settings = Mock(spec=Settings)
    settings.LOG_LEVEL = "INFO"
    settings.is_production = False
    return settings


@pytest.fixture
def clean_env(monkeypatch):
    """Remove translation environment variables."""
    for name in (
        "ENVIRONMENT",
        "LOG_LEVEL",
        "TRANSLATION_LOCALE",
        "TRANSLATION_FALLBACK_LOCALES",
        "TRANSLATION_DIR",
        "TRANSLATION_FORMAT",
        "TRANSLATION_CACHE",
        "TRANSLATION_COUNT_PARAMETER",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
