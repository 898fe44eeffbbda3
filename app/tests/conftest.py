"""Shared fixtures for the test suite."""

from unittest.mock import Mock

import pytest

from infrastructure.configuration import Settings
from infrastructure.services import providers


PROVIDERS = (
    providers.get_settings,
    providers.get_translation_cache,
    providers.get_translation_loader,
    providers.get_translation_service,
    providers.get_geo_resolver,
    providers.get_preference_resolver,
    providers.get_request_pipeline,
    providers.get_maxmind_client,
)


@pytest.fixture(autouse=True)
def clear_provider_caches():
    """Reset lru_cache provider singletons around every test."""
    for provider in PROVIDERS:
        provider.cache_clear()
    yield
    for provider in PROVIDERS:
        provider.cache_clear()


@pytest.fixture
def mock_settings():
    """Mock Settings instance for testing."""
    settings = Mock(spec=Settings)
    settings.LOG_LEVEL = "INFO"
    settings.GIT_SHA = "abc123"
    settings.PREFIX = "dev-"
    settings.is_production = False
    settings.model_dump.return_value = {
        "PREFIX": "dev-",
        "LOG_LEVEL": "INFO",
        "GIT_SHA": "abc123",
        "i18n": {"I18N_PRELOAD_TRANSLATIONS": True},
        "edge": {"EDGE_COUNTRY_HEADER": "cf-ipcountry"},
    }
    return settings
