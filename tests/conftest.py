"""Root conftest - shared test configuration."""

import os

import pytest

# Tests never talk to the real service
os.environ.setdefault("API_BRIDGE_BASE_URL", "http://escuela.test/v1")
os.environ.setdefault("API_BRIDGE_LOG_FORMAT", "text")

from api_bridge.config import Settings, get_settings  # noqa: E402


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> Settings:
    return Settings(base_url="http://escuela.test/v1", report_save_failures=False)
