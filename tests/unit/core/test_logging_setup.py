"""Unit tests for translatable.logging.setup module."""

import logging

import pytest

from translatable.logging.setup import (
    _is_test_environment,
    configure_logging,
    get_module_logger,
)


@pytest.mark.unit
class TestIsTestEnvironment:
    """Test suite for _is_test_environment helper."""

    def test_detects_pytest_in_sys_modules(self):
        """Returns True when pytest is in sys.modules."""
        assert _is_test_environment() is True


@pytest.mark.unit
class TestConfigureLogging:
    """Test suite for configure_logging function."""

    def test_returns_logger(self, mock_settings):
        """configure_logging returns a logger with the usual methods."""
        result = configure_logging(settings=mock_settings)

        assert hasattr(result, "info")
        assert hasattr(result, "warning")
        assert hasattr(result, "error")

    def test_accepts_overrides(self, mock_settings):
        """configure_logging accepts log_level and is_production."""
        assert configure_logging(settings=mock_settings, log_level="DEBUG") is not None
        assert configure_logging(settings=mock_settings, is_production=True) is not None

    def test_suppresses_in_test_env(self, mock_settings):
        """In test environment, root logger level is set high to suppress output."""
        configure_logging(settings=mock_settings)

        assert logging.getLogger().level >= logging.CRITICAL


@pytest.mark.unit
class TestGetModuleLogger:
    """Test suite for get_module_logger function."""

    def test_returns_bound_logger(self):
        logger = get_module_logger()

        assert hasattr(logger, "info")
        assert hasattr(logger, "bind")

    def test_logging_calls_do_not_raise(self):
        logger = get_module_logger()
        logger.info("test_event", key="value")
        logger.warning("test_warning", locale="en")
