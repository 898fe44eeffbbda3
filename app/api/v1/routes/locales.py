"""Locale discovery and translation bundle endpoints."""

from fastapi import APIRouter, Request

from infrastructure.i18n.cookies import CookieCodec
from infrastructure.i18n.geo import geo_signal_from_headers
from infrastructure.i18n.models import LanguageGroup, Locale, LocaleContext
from infrastructure.i18n.registry import (
    DEFAULT_LOCALE,
    LANGUAGE_FALLBACKS,
    LANGUAGES,
    fallback_chain,
    languages_by_country,
    locales_in_group,
)
from infrastructure.services import (
    GeoResolverDep,
    PreferenceResolverDep,
    SettingsDep,
    TranslationLoaderDep,
)

router = APIRouter(tags=["Locales"])


@router.get("/locales")
def list_locales():
    """List supported locales with display metadata and fallbacks.

    ``groups`` splits the codes into EU official and regional languages.
    """
    locales = []
    for locale, info in LANGUAGES.items():
        fallback = LANGUAGE_FALLBACKS.get(locale)
        locales.append(
            {
                "code": locale.value,
                "name": info.name,
                "native_name": info.native_name,
                "flag": info.flag,
                "group": info.group.value,
                "fallback": fallback.value if fallback else None,
            }
        )
    groups = {
        group.value: [locale.value for locale in locales_in_group(group)]
        for group in LanguageGroup
    }
    return {"default": DEFAULT_LOCALE.value, "locales": locales, "groups": groups}


@router.get("/locales/by-country")
def list_locales_by_country():
    """Group supported locales by country for language pickers."""
    return {"countries": languages_by_country()}


@router.get("/locales/detect")
def detect_locale(
    request: Request,
    settings: SettingsDep,
    geo_resolver: GeoResolverDep,
    preference_resolver: PreferenceResolverDep,
):
    """Resolve the locale a page request with these headers would get.

    API paths carry no locale prefix, so only the saved preference, the
    Accept-Language header and the edge geo headers take part.
    """
    edge = settings.edge
    geo = geo_signal_from_headers(
        request.headers,
        country_header=edge.EDGE_COUNTRY_HEADER,
        city_header=edge.EDGE_CITY_HEADER,
        region_code_header=edge.EDGE_REGION_CODE_HEADER,
        timezone_header=edge.EDGE_TIMEZONE_HEADER,
    )
    geo_locale = geo_resolver.detect(geo)
    cookie_locale = CookieCodec.decode(request.headers.get("cookie"))
    locale = preference_resolver.resolve(
        url_locale=None,
        cookie_locale=cookie_locale,
        geo_locale=geo_locale,
        accept_language=request.headers.get("accept-language"),
    )
    context = LocaleContext(
        locale=locale,
        cookie_locale=cookie_locale,
        geo_locale=geo_locale,
        geo=geo,
    )
    return context.to_dict()


@router.get("/translations/{locale}")
async def get_translations(locale: Locale, loader: TranslationLoaderDep):
    """Return the translation bundle served for locale.

    ``fallback_candidates`` lists the locales tried, in order. It does not
    say which of them supplied ``messages``; the bundle is empty when none
    of them has one.
    """
    bundle = await loader.load(locale)
    return {
        "locale": locale.value,
        "fallback_candidates": [loc.value for loc in fallback_chain(locale)],
        "messages": bundle,
    }
