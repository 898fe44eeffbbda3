"""
Type aliases for FastAPI dependency injection.

Provides annotated type hints for common infrastructure dependencies.
"""

from typing import Annotated

from fastapi import Depends, Request

from infrastructure.clients.maxmind import MaxMindClient
from infrastructure.configuration import Settings
from infrastructure.i18n.geo import GeoResolver
from infrastructure.i18n.loader import TranslationLoader
from infrastructure.i18n.models import LocaleContext
from infrastructure.i18n.registry import DEFAULT_LOCALE
from infrastructure.i18n.resolvers import PreferenceResolver
from infrastructure.i18n.service import TranslationService
from infrastructure.services.providers import (
    get_geo_resolver,
    get_maxmind_client,
    get_preference_resolver,
    get_settings,
    get_translation_loader,
    get_translation_service,
)


def get_locale_context(request: Request) -> LocaleContext:
    """Return the LocaleContext LocaleMiddleware attached to the request.

    Requests the middleware skipped carry no context and get the default
    locale.
    """
    context = getattr(request.state, "locale_context", None)
    if context is None:
        return LocaleContext(locale=DEFAULT_LOCALE)
    return context


# Settings dependency
SettingsDep = Annotated[Settings, Depends(get_settings)]

# Translation loading
TranslationLoaderDep = Annotated[TranslationLoader, Depends(get_translation_loader)]
TranslationServiceDep = Annotated[TranslationService, Depends(get_translation_service)]

# Locale detection
GeoResolverDep = Annotated[GeoResolver, Depends(get_geo_resolver)]
PreferenceResolverDep = Annotated[PreferenceResolver, Depends(get_preference_resolver)]

# Per-request locale context set by LocaleMiddleware
LocaleContextDep = Annotated[LocaleContext, Depends(get_locale_context)]

# MaxMind GeoIP2 client
MaxMindClientDep = Annotated[MaxMindClient, Depends(get_maxmind_client)]

__all__ = [
    "SettingsDep",
    "TranslationLoaderDep",
    "TranslationServiceDep",
    "GeoResolverDep",
    "PreferenceResolverDep",
    "LocaleContextDep",
    "MaxMindClientDep",
    "get_locale_context",
]
