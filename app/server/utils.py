from typing import Optional
from urllib.parse import quote

from starlette.requests import Request


def get_client_ip(request: Request, client_ip_header: Optional[str] = None) -> Optional[str]:
    """
    Determine the visitor's IP address.

    Prefers the edge platform's client IP header, then the first hop of
    X-Forwarded-For, then the socket peer address.

    Args:
        request (Request): The incoming request.
        client_ip_header (str, optional): Header set by the edge platform with the
            original client IP (e.g. "cf-connecting-ip").

    Returns:
        str | None: The client IP address, or None if it cannot be determined.
    """
    if client_ip_header:
        edge_ip = (request.headers.get(client_ip_header) or "").strip()
        if edge_ip:
            return edge_ip

    forwarded_for = request.headers.get("x-forwarded-for")
    if forwarded_for:
        first_hop = forwarded_for.split(",")[0].strip()
        if first_hop:
            return first_hop

    return request.client.host if request.client else None


# RFC 3986 pchar characters plus the segment separator
PATH_SAFE_CHARS = "/-._~!$&'()*+,;=:@"


def get_raw_path(request: Request) -> str:
    """
    Return the request path exactly as the client sent it.

    ``request.url.path`` is percent-decoded, so an encoded "?" or "/" would
    change meaning when the path is reused in a redirect. The ASGI
    ``raw_path`` keeps the original encoding; servers that omit it get the
    decoded path re-quoted.

    Args:
        request (Request): The incoming request.

    Returns:
        str: The still-encoded path, without the query string.
    """
    raw_path = request.scope.get("raw_path")
    if raw_path:
        return raw_path.decode("latin-1").split("?", 1)[0]
    return quote(request.url.path, safe=PATH_SAFE_CHARS)
