"""Localized landing page.

Serves a minimal page under every locale prefix ("/fr/", "/fr/pricing"),
rendered from the visitor's translation bundle, with a language picker
linking to the same page in every supported locale.
"""

from html import escape

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from infrastructure.i18n.models import Locale
from infrastructure.i18n.paths import PathLocaleCodec
from infrastructure.i18n.registry import LANGUAGES
from infrastructure.i18n.translator import Translator
from infrastructure.services import LocaleContextDep, TranslationServiceDep

router = APIRouter(tags=["Landing"])


LANDING_PAGE_HTML = """<!DOCTYPE html>
<html lang="{lang}">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{title}</title>
</head>
<body>
    <main>
        <h1>{heading}</h1>
        <p>{subtitle}</p>
        <p>{location}</p>
    </main>
    <nav aria-label="{language_label}">
        <ul>
{language_links}
        </ul>
    </nav>
</body>
</html>
"""


def _language_links(request: Request, current: Locale) -> str:
    links = []
    for locale, info in LANGUAGES.items():
        href = PathLocaleCodec.with_locale(request.url, locale)
        current_attr = ' aria-current="page"' if locale == current else ""
        links.append(
            f'            <li><a href="{escape(href)}" hreflang="{locale.value}"'
            f'{current_attr}>{info.flag} {escape(info.native_name)}</a></li>'
        )
    return "\n".join(links)


def render_landing_page(request: Request, translator: Translator, locale: Locale, country: str) -> str:
    """Render the landing page HTML for locale."""
    return LANDING_PAGE_HTML.format(
        lang=locale.value,
        title=escape(translator.t("meta.title")),
        heading=escape(translator.t("hero.title")),
        subtitle=escape(translator.t("hero.subtitle")),
        location=escape(translator.t("geo.detected", {"country": country})),
        language_label=escape(translator.t("nav.language")),
        language_links=_language_links(request, locale),
    )


@router.get("/{locale}/", response_class=HTMLResponse)
@router.get("/{locale}/{page:path}", response_class=HTMLResponse)
async def landing_page(
    request: Request,
    locale: Locale,
    context: LocaleContextDep,
    translation: TranslationServiceDep,
    page: str = "",
):
    """
    Landing page for a locale.

    Returns:
        HTMLResponse: Page rendered with the locale's translation bundle
    """
    translator = await translation.get_translator(locale)
    country = context.geo.country or "-"
    return HTMLResponse(content=render_landing_page(request, translator, locale, country))
