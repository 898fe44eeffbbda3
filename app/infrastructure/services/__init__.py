"""
Dependency injection services.

Provides type aliases and provider functions for FastAPI dependency injection.
"""

from infrastructure.services.dependencies import (
    GeoResolverDep,
    LocaleContextDep,
    MaxMindClientDep,
    PreferenceResolverDep,
    SettingsDep,
    TranslationLoaderDep,
    TranslationServiceDep,
    get_locale_context,
)
from infrastructure.services.providers import (
    get_geo_resolver,
    get_maxmind_client,
    get_preference_resolver,
    get_request_pipeline,
    get_settings,
    get_translation_cache,
    get_translation_loader,
    get_translation_service,
)

__all__ = [
    "SettingsDep",
    "TranslationLoaderDep",
    "TranslationServiceDep",
    "GeoResolverDep",
    "PreferenceResolverDep",
    "LocaleContextDep",
    "MaxMindClientDep",
    "get_locale_context",
    "get_settings",
    "get_translation_cache",
    "get_translation_loader",
    "get_translation_service",
    "get_geo_resolver",
    "get_preference_resolver",
    "get_request_pipeline",
    "get_maxmind_client",
]
