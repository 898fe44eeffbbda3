"""Fixtures for server integration tests."""

from unittest.mock import MagicMock

import pytest


@pytest.fixture
def mock_logger():
    """Create a mock structlog logger."""
    return MagicMock()


@pytest.fixture
def mock_app():
    """Create a mock FastAPI application with a plain state namespace."""
    app = MagicMock()
    app.state = MagicMock(spec=[])
    return app
