"""
Root-level conftest.py for integration tests.

Integration tests drive the real FastAPI application through the full
middleware stack and lifespan. Only the system boundaries (GeoIP database,
edge headers) are stubbed.
"""

import pytest
from fastapi.testclient import TestClient

from server import server


@pytest.fixture
def client():
    """TestClient over the application, lifespan included.

    Redirects are not followed so the locale routing decision can be
    asserted directly.
    """
    with TestClient(server.handler, follow_redirects=False) as test_client:
        yield test_client


@pytest.fixture
def app_with_lifespan(client):
    """Alias making lifespan-focused tests read naturally."""
    return client
