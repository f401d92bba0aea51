"""Shared fixtures for the whole test suite."""

import pytest

from translatable.logging import configure_logging


@pytest.fixture(autouse=True, scope="session")
def quiet_logging():
    """Silence structlog output for the test session."""
    configure_logging()
