"""Pytest configuration and shared fixtures."""

import pytest
import structlog

from mail_headers.config import get_settings


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    """Make every test read settings from its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def _reset_logging():
    """Drop logging configuration installed by a test."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def mock_settings():
    """Provide mock settings for testing."""
    from mail_headers.config import Settings

    return Settings(
        log_level="DEBUG",
        debug=True,
        allow_custom_headers=False,
    )


@pytest.fixture
def sample_headers() -> dict[str, str]:
    """Provide a mix of address and generic headers."""
    return {
        "To": "toni.tester@example.com",
        "From": "tina.tester@example.com",
        "Subject": "this is the subject",
        "Message-ID": "test.mail.1234567@localhost.local",
    }
