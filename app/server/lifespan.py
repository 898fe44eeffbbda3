from contextlib import asynccontextmanager
from typing import TYPE_CHECKING, AsyncIterator

from fastapi import FastAPI
from structlog.stdlib import BoundLogger

from infrastructure.i18n.registry import RegistryError, validate_registry
from infrastructure.logging.setup import configure_logging
from infrastructure.services import (
    get_maxmind_client,
    get_settings,
    get_translation_loader,
)

if TYPE_CHECKING:
    from infrastructure.configuration import Settings


def _get_logger(settings: "Settings") -> BoundLogger:
    return configure_logging(settings=settings)


def _list_configs(settings: "Settings", logger: BoundLogger) -> None:
    config_settings: dict[str, list[object]] = {"settings": []}

    for key, value in settings.model_dump().items():
        if isinstance(value, dict):
            config_settings[key] = list(value.keys())
        else:
            config_settings["settings"].append({key: value})

    logger.info("configuration_initialized", base_settings=config_settings["settings"])
    for key, value in config_settings.items():
        if key != "settings":
            logger.info("configuration_loaded", config_setting=key, keys=value)


def _validate_registry(logger: BoundLogger) -> None:
    try:
        validate_registry()
    except RegistryError as exc:
        logger.error("locale_registry_invalid", error=str(exc))
        raise
    logger.info("locale_registry_validated")


async def _preload_translations(
    app: FastAPI,
    settings: "Settings",
    logger: BoundLogger,
) -> None:
    try:
        loader = get_translation_loader()
    except ValueError as exc:
        logger.error("translation_loader_initialization_failed", error=str(exc))
        raise
    app.state.translation_loader = loader

    if not settings.i18n.I18N_PRELOAD_TRANSLATIONS:
        logger.info("translation_preload_skipped")
        return

    bundles = await loader.preload()
    logger.info("translations_warmed", locale_count=len(bundles))


def _close_geoip(logger: BoundLogger) -> None:
    get_maxmind_client().close()
    logger.info("geoip_reader_released")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    settings = get_settings()
    logger = _get_logger(settings)

    app.state.settings = settings
    app.state.logger = logger

    logger.info("application_startup")
    _list_configs(settings, logger)

    _validate_registry(logger)
    await _preload_translations(app, settings, logger)

    yield

    _close_geoip(logger)
    logger.info("application_shutdown")
