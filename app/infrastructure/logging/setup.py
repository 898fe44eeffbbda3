"""Structlog configuration and logger setup.

Configures structlog once per process: console rendering in development,
JSON in production, and no output at all while the test suite runs.

Usage:
    from infrastructure.logging import configure_logging, get_module_logger

    configure_logging()

    logger = get_module_logger()
    logger.info("translation_bundle_loaded", locale="fr")

Dependencies:
    - infrastructure.configuration.Settings
"""

import inspect
import logging
import sys
from types import ModuleType
from typing import TYPE_CHECKING, List, Optional

import structlog
from structlog.stdlib import BoundLogger
from structlog.typing import Processor

from infrastructure.logging.formatters import (
    add_app_info,
    add_environment_info,
    mask_sensitive_data,
    truncate_large_values,
)

if TYPE_CHECKING:
    from infrastructure.configuration import Settings

APP_NAME = "growfolio-i18n"

SILENT_LEVEL = logging.CRITICAL + 1


def _is_test_environment() -> bool:
    """Detect if running in a test environment.

    Returns:
        True if pytest is in sys.modules, False otherwise
    """
    return "pytest" in sys.modules


def _configure_silent_logging() -> BoundLogger:
    # Processors still run so bound loggers behave normally, but the root
    # level drops every record.
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(format="%(message)s", level=SILENT_LEVEL, force=True)
    logging.root.setLevel(SILENT_LEVEL)
    return structlog.stdlib.get_logger()


def build_processors(production: bool, app_version: str) -> List[Processor]:
    """Build the structlog processor chain.

    Args:
        production: Render JSON instead of the colored console output.
        app_version: Version string attached to every event (the git SHA).

    Returns:
        Ordered processor list ending with the renderer.
    """
    processors: List[Processor] = [
        # correlation_id, request_path and locale bound per request
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FILENAME,
                structlog.processors.CallsiteParameter.LINENO,
                structlog.processors.CallsiteParameter.FUNC_NAME,
            ]
        ),
        add_app_info(APP_NAME, app_version),
        add_environment_info("production" if production else "development"),
        mask_sensitive_data(),
        truncate_large_values(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if production:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())
    return processors


def configure_logging(
    settings: Optional["Settings"] = None,
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
) -> BoundLogger:
    """Configure structured logging for the service.

    Args:
        settings: Optional Settings instance. Defaults to the module singleton.
        log_level: Optional override for log level (DEBUG, INFO, WARNING, etc).
            Defaults to settings.LOG_LEVEL if not provided.
        is_production: Optional override for production mode. Defaults to
            settings.is_production if not provided. Controls JSON vs console output.

    Returns:
        Configured logger instance

    Example:
        logger = configure_logging(log_level="DEBUG", is_production=False)
    """
    if _is_test_environment():
        return _configure_silent_logging()

    if settings is None:
        from infrastructure.configuration.settings import settings as app_settings

        settings = app_settings

    production = is_production if is_production is not None else settings.is_production

    structlog.configure(
        processors=build_processors(production, settings.GIT_SHA),
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    level_name = (log_level or settings.LOG_LEVEL).upper()
    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, level_name, logging.INFO),
    )

    return structlog.stdlib.get_logger()


# Module-level logger (auto-configured on import)
logger: BoundLogger = configure_logging()


def _caller_module(depth: int = 2) -> Optional[ModuleType]:
    frame = inspect.currentframe()
    for _ in range(depth):
        if frame is None:
            return None
        frame = frame.f_back
    if frame is None:
        return None
    return inspect.getmodule(frame)


def get_logger(name: Optional[str] = None) -> BoundLogger:
    """Get a logger bound to name, or to the calling module's name.

    Args:
        name: Optional logger name (typically __name__ in calling module)

    Returns:
        Configured logger instance with context
    """
    if name:
        return logger.bind(logger_name=name)

    module = _caller_module()
    if module is None:
        return logger.bind(logger_name="unknown")
    return logger.bind(logger_name=module.__name__)


def get_module_logger() -> BoundLogger:
    """Get a logger for the calling module with full path context.

    Example:
        # In infrastructure/i18n/translator.py
        logger = get_module_logger()
        # context: {"component": "translator", "module_path": "infrastructure.i18n.translator"}
    """
    module = _caller_module()
    if module is None:
        return logger.bind(component="unknown")

    module_name = module.__name__
    return logger.bind(component=module_name.rsplit(".", 1)[-1], module_path=module_name)
