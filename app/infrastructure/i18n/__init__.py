"""i18n system - locale routing and translation loading.

Main components:
- models: Locale, GeoSignal, RegionalRule, LocaleContext
- registry: supported locales, country and regional rules, fallbacks
- geo: GeoResolver and edge header parsing
- resolvers: AcceptLanguageParser and PreferenceResolver
- paths / cookies: URL prefix and preference cookie codecs
- loader: BundleSource implementations and the cached TranslationLoader
- translator: key lookup and {name} interpolation
- pipeline: RequestPipeline routing decisions
"""

from infrastructure.i18n.cache import TranslationCache
from infrastructure.i18n.cookies import CookieCodec
from infrastructure.i18n.geo import (
    GeoResolver,
    geo_signal_from_headers,
    geo_signal_from_location,
)
from infrastructure.i18n.loader import (
    BundleSource,
    MappingBundleSource,
    TranslationLoader,
    YAMLBundleSource,
)
from infrastructure.i18n.models import (
    GeoSignal,
    LanguageGroup,
    LanguageInfo,
    Locale,
    LocaleContext,
    RegionalRule,
    TranslationBundle,
)
from infrastructure.i18n.paths import PathLocaleCodec
from infrastructure.i18n.pipeline import RequestPipeline, RoutingAction, RoutingDecision
from infrastructure.i18n.registry import (
    DEFAULT_LOCALE,
    SUPPORTED_LOCALES,
    RegistryError,
    fallback_chain,
    validate_registry,
)
from infrastructure.i18n.resolvers import AcceptLanguageParser, PreferenceResolver
from infrastructure.i18n.service import TranslationService
from infrastructure.i18n.translator import Translator, get_value

__all__ = [
    "Locale",
    "LanguageGroup",
    "LanguageInfo",
    "GeoSignal",
    "RegionalRule",
    "LocaleContext",
    "TranslationBundle",
    "DEFAULT_LOCALE",
    "SUPPORTED_LOCALES",
    "RegistryError",
    "fallback_chain",
    "validate_registry",
    "GeoResolver",
    "geo_signal_from_headers",
    "geo_signal_from_location",
    "AcceptLanguageParser",
    "PreferenceResolver",
    "PathLocaleCodec",
    "CookieCodec",
    "TranslationCache",
    "BundleSource",
    "YAMLBundleSource",
    "MappingBundleSource",
    "TranslationLoader",
    "TranslationService",
    "Translator",
    "get_value",
    "RequestPipeline",
    "RoutingAction",
    "RoutingDecision",
]
