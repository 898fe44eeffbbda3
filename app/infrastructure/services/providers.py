"""
Factory functions for dependency injection.

Provides application-scoped singleton providers for core infrastructure services.
"""

from functools import lru_cache
from pathlib import Path

from infrastructure.clients.maxmind import MaxMindClient
from infrastructure.configuration import Settings
from infrastructure.i18n.cache import TranslationCache
from infrastructure.i18n.factory import create_translation_loader
from infrastructure.i18n.geo import GeoResolver
from infrastructure.i18n.loader import TranslationLoader
from infrastructure.i18n.pipeline import RequestPipeline
from infrastructure.i18n.resolvers import PreferenceResolver
from infrastructure.i18n.service import TranslationService


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    This is the single source of truth for settings across the entire application.
    The @lru_cache decorator ensures only ONE instance is created per process.

    Infrastructure packages should use this directly to ensure singleton consistency:
        from infrastructure.services.providers import get_settings
        settings = get_settings()

    Application code should use the DI type alias for testability:
        from infrastructure.services import SettingsDep
        @router.get("/config")
        def get_config(settings: SettingsDep):
            return settings.i18n.model_dump()

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


@lru_cache
def get_translation_cache() -> TranslationCache:
    """
    Get the process-wide translation cache.

    Returns:
        TranslationCache: The one cache shared by every translation loader.
    """
    return TranslationCache()


@lru_cache
def get_translation_loader() -> TranslationLoader:
    """
    Get application-scoped translation loader singleton.

    Reads YAML bundles from I18N_TRANSLATIONS_DIR, or app/locales when unset.

    Returns:
        TranslationLoader: Cached loader backed by the shared cache.
    """
    settings = get_settings()
    translations_dir = settings.i18n.I18N_TRANSLATIONS_DIR
    return create_translation_loader(
        translations_dir=Path(translations_dir) if translations_dir else None,
        cache=get_translation_cache(),
    )


@lru_cache
def get_translation_service() -> TranslationService:
    """
    Get application-scoped translation service singleton.

    Usage:
        @router.get("/{locale}/")
        async def landing(locale: Locale, translation: TranslationServiceDep):
            t = await translation.get_translator(locale)
    """
    return TranslationService(get_translation_loader())


@lru_cache
def get_geo_resolver() -> GeoResolver:
    return GeoResolver()


@lru_cache
def get_preference_resolver() -> PreferenceResolver:
    return PreferenceResolver()


@lru_cache
def get_request_pipeline() -> RequestPipeline:
    """
    Get the locale routing pipeline used by LocaleMiddleware.

    Returns:
        RequestPipeline: Pipeline configured with I18N_SKIP_PATH_PREFIXES.
    """
    settings = get_settings()
    return RequestPipeline(
        geo_resolver=get_geo_resolver(),
        preference_resolver=get_preference_resolver(),
        skip_prefixes=settings.i18n.I18N_SKIP_PATH_PREFIXES,
    )


@lru_cache
def get_maxmind_client() -> MaxMindClient:
    """Provider for the MaxMind GeoIP2 client.

    Returns:
        MaxMindClient: Client reading settings.maxmind.MAXMIND_DB_PATH.
    """
    return MaxMindClient(settings=get_settings())
