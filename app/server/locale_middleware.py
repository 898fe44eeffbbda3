import asyncio
from typing import TYPE_CHECKING, Optional

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import RedirectResponse, Response

from infrastructure.i18n.geo import geo_signal_from_headers, geo_signal_from_location
from infrastructure.i18n.models import GeoSignal
from infrastructure.i18n.pipeline import RequestPipeline, RoutingAction
from infrastructure.services.providers import (
    get_maxmind_client,
    get_request_pipeline,
    get_settings,
)
from server.utils import get_client_ip, get_raw_path

if TYPE_CHECKING:
    from infrastructure.clients.maxmind import MaxMindClient
    from infrastructure.configuration import Settings

logger = structlog.get_logger().bind(component="locale_middleware")


class LocaleMiddleware(BaseHTTPMiddleware):
    """Routes every page request under a locale prefix.

    Executes the RequestPipeline decision: skips internal and API paths,
    redirects unprefixed paths to the preferred locale (302), otherwise
    attaches the LocaleContext to ``request.state.locale_context`` and saves
    the URL locale in the preference cookie when it changed.
    """

    def __init__(
        self,
        app,
        pipeline: Optional[RequestPipeline] = None,
        settings: Optional["Settings"] = None,
        maxmind_client: Optional["MaxMindClient"] = None,
    ):
        super().__init__(app)
        self.settings = settings or get_settings()
        self.pipeline = pipeline or get_request_pipeline()
        self._maxmind_client = maxmind_client

    @property
    def maxmind_client(self) -> "MaxMindClient":
        if self._maxmind_client is None:
            self._maxmind_client = get_maxmind_client()
        return self._maxmind_client

    async def dispatch(self, request: Request, call_next) -> Response:
        path = get_raw_path(request)
        if self.pipeline.should_skip(path):
            return await call_next(request)

        geo = await self.geo_signal(request)
        decision = self.pipeline.decide(
            path=path,
            query=request.url.query,
            cookie_header=request.headers.get("cookie"),
            accept_language=request.headers.get("accept-language"),
            geo=geo,
        )

        if decision.action == RoutingAction.REDIRECT:
            return RedirectResponse(decision.location, status_code=302)

        if decision.action == RoutingAction.SKIP:
            return await call_next(request)

        request.state.locale_context = decision.context
        with structlog.contextvars.bound_contextvars(locale=decision.context.locale.value):
            response = await call_next(request)
        if decision.set_cookie:
            response.headers.append("set-cookie", decision.set_cookie)
        return response

    async def geo_signal(self, request: Request) -> GeoSignal:
        """Build the visitor's geo signal from edge headers.

        Falls back to a MaxMind lookup of the client IP when enabled and the
        edge sent no country.
        """
        edge = self.settings.edge
        signal = geo_signal_from_headers(
            request.headers,
            country_header=edge.EDGE_COUNTRY_HEADER,
            city_header=edge.EDGE_CITY_HEADER,
            region_code_header=edge.EDGE_REGION_CODE_HEADER,
            timezone_header=edge.EDGE_TIMEZONE_HEADER,
        )
        if signal.country or not self.settings.i18n.I18N_GEOIP_LOOKUP_ENABLED:
            return signal

        ip_address = get_client_ip(request, edge.EDGE_CLIENT_IP_HEADER)
        if not ip_address:
            return signal

        result = await asyncio.to_thread(self.maxmind_client.geolocate, ip_address)
        if not result.is_success:
            logger.debug("geoip_lookup_skipped", status=result.status.value)
            return signal
        return geo_signal_from_location(result.data)
