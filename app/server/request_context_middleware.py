from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from infrastructure.logging import bind_request_context, get_correlation_id

CORRELATION_ID_HEADER = "X-Correlation-ID"


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Binds correlation id, path and method to every log of a request.

    The correlation id is taken from the X-Correlation-ID request header or
    generated, and echoed on the response.
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        with bind_request_context(
            correlation_id=request.headers.get(CORRELATION_ID_HEADER),
            request_path=request.url.path,
            request_method=request.method,
        ):
            correlation_id = get_correlation_id()
            response = await call_next(request)
        if correlation_id:
            response.headers[CORRELATION_ID_HEADER] = correlation_id
        return response
