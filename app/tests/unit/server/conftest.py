"""Fixtures for server module unit tests."""

from typing import Dict, Optional
from unittest.mock import AsyncMock, MagicMock

import pytest
from starlette.requests import Request
from starlette.responses import Response

from infrastructure.configuration import I18nSettings, Settings


def build_request(
    path: str = "/",
    query: str = "",
    headers: Optional[Dict[str, str]] = None,
    client_host: Optional[str] = "198.51.100.20",
    raw_path: Optional[bytes] = None,
) -> Request:
    """Build a Starlette request from an ASGI scope.

    ``path`` is the decoded path; ``raw_path`` defaults to its encoding.
    """
    scope = {
        "type": "http",
        "http_version": "1.1",
        "method": "GET",
        "scheme": "http",
        "server": ("testserver", 80),
        "root_path": "",
        "path": path,
        "raw_path": path.encode() if raw_path is None else raw_path,
        "query_string": query.encode(),
        "headers": [
            (name.lower().encode("latin-1"), value.encode("latin-1"))
            for name, value in (headers or {}).items()
        ],
        "client": (client_host, 52000) if client_host else None,
    }
    return Request(scope)


@pytest.fixture
def make_request():
    return build_request


@pytest.fixture
def call_next():
    """Downstream handler returning a plain 200 response."""
    return AsyncMock(return_value=Response("ok", status_code=200))


@pytest.fixture
def app_settings():
    """Settings with GeoIP lookup disabled."""
    return Settings(i18n=I18nSettings(I18N_GEOIP_LOOKUP_ENABLED=False))


@pytest.fixture
def geoip_settings():
    """Settings with GeoIP lookup enabled."""
    return Settings(i18n=I18nSettings(I18N_GEOIP_LOOKUP_ENABLED=True))


@pytest.fixture
def mock_maxmind_client():
    return MagicMock()
