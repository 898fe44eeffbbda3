"""Per-request locale routing decisions.

The RequestPipeline decides, for one request, whether locale handling is
skipped, whether the visitor is redirected to a localized URL, or whether
the request continues with a resolved LocaleContext (optionally saving the
URL locale in the preference cookie).
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence

import structlog
from infrastructure.i18n.cookies import CookieCodec
from infrastructure.i18n.geo import GeoResolver
from infrastructure.i18n.models import GeoSignal, LocaleContext
from infrastructure.i18n.paths import PathLocaleCodec
from infrastructure.i18n.resolvers import PreferenceResolver

logger = structlog.get_logger().bind(component="i18n.pipeline")

DEFAULT_SKIP_PREFIXES = ("/_", "/api/")


class RoutingAction(str, Enum):
    SKIP = "skip"
    REDIRECT = "redirect"
    CONTINUE = "continue"


@dataclass(frozen=True)
class RoutingDecision:
    """Outcome of the locale pipeline for one request.

    Attributes:
        action: What the middleware should do with the request.
        location: Redirect target (REDIRECT only).
        context: Locale context for downstream handlers (CONTINUE only).
        set_cookie: Set-Cookie value to append to the response, if any.
    """

    action: RoutingAction
    location: Optional[str] = None
    context: Optional[LocaleContext] = None
    set_cookie: Optional[str] = None

    @classmethod
    def skip(cls) -> "RoutingDecision":
        return cls(action=RoutingAction.SKIP)

    @classmethod
    def redirect(cls, location: str) -> "RoutingDecision":
        return cls(action=RoutingAction.REDIRECT, location=location)


class RequestPipeline:
    """Sequences locale detection for a request.

    Args:
        geo_resolver: Maps the geo signal to a locale.
        preference_resolver: Applies the URL/cookie/header/geo cascade.
        skip_prefixes: Path prefixes that bypass locale handling.
    """

    def __init__(
        self,
        geo_resolver: Optional[GeoResolver] = None,
        preference_resolver: Optional[PreferenceResolver] = None,
        skip_prefixes: Sequence[str] = DEFAULT_SKIP_PREFIXES,
    ):
        self.geo_resolver = geo_resolver or GeoResolver()
        self.preference_resolver = preference_resolver or PreferenceResolver()
        self.skip_prefixes = tuple(skip_prefixes)

    def should_skip(self, path: str) -> bool:
        """True for internal assets, API routes and file requests."""
        return path.startswith(self.skip_prefixes) or "." in path

    def decide(
        self,
        path: str,
        query: str = "",
        cookie_header: Optional[str] = None,
        accept_language: Optional[str] = None,
        geo: Optional[GeoSignal] = None,
    ) -> RoutingDecision:
        """Decide how to route a request.

        Args:
            path: Request URL path.
            query: Raw query string, without the leading "?".
            cookie_header: Raw Cookie header.
            accept_language: Raw Accept-Language header.
            geo: Visitor-location hints.

        Returns:
            RoutingDecision for the middleware to execute.
        """
        if self.should_skip(path):
            return RoutingDecision.skip()

        geo = geo or GeoSignal()
        url_locale = PathLocaleCodec.extract_locale(path)
        cookie_locale = CookieCodec.decode(cookie_header)
        geo_locale = self.geo_resolver.detect(geo)
        preferred = self.preference_resolver.resolve(
            url_locale=url_locale,
            cookie_locale=cookie_locale,
            geo_locale=geo_locale,
            accept_language=accept_language,
        )

        if path == "/":
            location = f"/{preferred.value}/"
            logger.debug("locale_redirect", path=path, location=location)
            return RoutingDecision.redirect(location)

        if url_locale is None:
            location = f"/{preferred.value}{path}"
            if query:
                location += f"?{query}"
            logger.debug("locale_redirect", path=path, location=location)
            return RoutingDecision.redirect(location)

        context = LocaleContext(
            locale=url_locale,
            url_locale=url_locale,
            cookie_locale=cookie_locale,
            geo_locale=geo_locale,
            geo=geo,
        )
        set_cookie = None
        if url_locale != cookie_locale:
            set_cookie = CookieCodec.encode(url_locale)
        return RoutingDecision(
            action=RoutingAction.CONTINUE,
            context=context,
            set_cookie=set_cookie,
        )
