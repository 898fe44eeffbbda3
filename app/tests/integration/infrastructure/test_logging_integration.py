"""Integration tests for logging infrastructure.

Tests cover:
- Logging from i18n components under a bound request context
- Context isolation between requests
"""

import pytest
import structlog

from infrastructure.i18n import Locale, Translator
from infrastructure.logging import (
    bind_request_context,
    configure_logging,
    get_correlation_id,
    get_module_logger,
)


@pytest.mark.integration
class TestLoggingIntegration:
    """Integration tests for logging infrastructure."""

    def test_module_logger_logs_with_request_context(self):
        configure_logging()
        logger = get_module_logger()

        with bind_request_context(correlation_id="req-1", request_path="/fr/"):
            # Should not raise when logging
            logger.info("locale_resolved", locale="fr", source="url")
            assert structlog.contextvars.get_contextvars()["request_path"] == "/fr/"

    def test_missing_translation_logged_inside_context(self):
        configure_logging()
        translator = Translator({"hero": {"title": "Bonjour"}}, locale=Locale.FR)

        with bind_request_context(correlation_id="req-2"):
            assert translator.t("hero.cta") == "hero.cta"
            assert get_correlation_id() == "req-2"

    def test_context_does_not_leak_between_requests(self):
        with bind_request_context(correlation_id="req-3", locale="de"):
            pass

        with bind_request_context(correlation_id="req-4"):
            context = structlog.contextvars.get_contextvars()
            assert context["correlation_id"] == "req-4"
            assert "locale" not in context
