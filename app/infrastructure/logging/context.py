"""Request context binding for structured logging.

This module provides utilities for binding request-scoped context
to logs, so a correlation ID and request metadata flow through every
log entry emitted while a request is being routed and rendered.

Usage:
    from infrastructure.logging import bind_request_context

    with bind_request_context(correlation_id="req-123", request_path="/fr/"):
        logger.info("locale_resolved", locale="fr")

Dependencies:
    - structlog.contextvars
"""

import uuid
from contextlib import contextmanager
from typing import Optional, Any, Generator
import structlog


@contextmanager
def bind_request_context(
    correlation_id: Optional[str] = None,
    request_path: Optional[str] = None,
    request_method: Optional[str] = None,
    **extra_context: Any,
) -> Generator[None, None, None]:
    """Bind request-scoped context to all logs within the context manager.

    Args:
        correlation_id: Unique request identifier. Auto-generated if not provided.
        request_path: HTTP request path (e.g., "/fr/pricing").
        request_method: HTTP method (e.g., "GET", "POST").
        **extra_context: Additional key-value pairs to include in logs.

    Yields:
        None - context is automatically bound to structlog's context vars.

    Example:
        @app.middleware("http")
        async def logging_middleware(request: Request, call_next):
            with bind_request_context(
                correlation_id=request.headers.get("X-Correlation-ID"),
                request_path=request.url.path,
                request_method=request.method,
            ):
                return await call_next(request)
    """
    context: dict[str, Any] = {}

    # Use provided correlation_id or generate one
    context["correlation_id"] = correlation_id or str(uuid.uuid4())

    if request_path is not None:
        context["request_path"] = request_path

    if request_method is not None:
        context["request_method"] = request_method

    context.update(extra_context)

    structlog.contextvars.bind_contextvars(**context)
    try:
        yield
    finally:
        structlog.contextvars.unbind_contextvars(*context.keys())


def get_correlation_id() -> Optional[str]:
    """Get the current correlation ID from the logging context.

    Returns:
        The correlation ID if set, None otherwise.
    """
    ctx = structlog.contextvars.get_contextvars()
    return ctx.get("correlation_id")


def set_correlation_id(correlation_id: str) -> None:
    """Set the correlation ID in the current logging context.

    Args:
        correlation_id: The correlation ID to set.
    """
    structlog.contextvars.bind_contextvars(correlation_id=correlation_id)


def clear_request_context() -> None:
    """Clear all request-scoped context from the logging context.

    Should be called at the end of request processing to prevent
    context leakage between requests.
    """
    structlog.contextvars.clear_contextvars()
