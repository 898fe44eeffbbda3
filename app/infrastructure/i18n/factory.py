"""Factory functions for creating i18n components.

Provides convenience functions for initializing the translation loader
and service with default configurations suitable for the application.
"""

from pathlib import Path
from typing import Mapping, Optional

import structlog
from infrastructure.i18n.cache import TranslationCache
from infrastructure.i18n.loader import TranslationLoader, YAMLBundleSource
from infrastructure.i18n.models import Locale
from infrastructure.i18n.registry import DEFAULT_LOCALE, LANGUAGE_FALLBACKS
from infrastructure.i18n.service import TranslationService

logger = structlog.get_logger()


def default_translations_dir() -> Path:
    """Return the bundled app/locales directory."""
    # This file is at .../app/infrastructure/i18n/factory.py
    app_root = Path(__file__).resolve().parents[2]
    return app_root / "locales"


def create_translation_loader(
    translations_dir: Optional[Path] = None,
    cache: Optional[TranslationCache] = None,
    fallbacks: Mapping[Locale, Locale] = LANGUAGE_FALLBACKS,
    default_locale: Locale = DEFAULT_LOCALE,
) -> TranslationLoader:
    """Create a TranslationLoader reading YAML bundles.

    If no translations_dir is provided, automatically discovers the default
    locales directory from the application structure.

    Args:
        translations_dir: Path to YAML translation files (default: app/locales)
        cache: Shared TranslationCache (default: a new private cache)
        fallbacks: Locale -> fallback locale (default: registry fallbacks)
        default_locale: Last-resort locale (default: en)

    Returns:
        TranslationLoader: Configured loader

    Raises:
        ValueError: If translations_dir does not exist

    Usage:
        loader = create_translation_loader()
        bundle = await loader.load(Locale.CA)
    """
    if translations_dir is None:
        translations_dir = default_translations_dir()

    source = YAMLBundleSource(translations_dir)
    loader = TranslationLoader(
        source=source,
        cache=cache,
        fallbacks=fallbacks,
        default_locale=default_locale,
    )
    logger.info(
        "translation_loader_created",
        translations_dir=str(translations_dir),
        default_locale=default_locale.value,
    )
    return loader


def create_translation_service(
    translations_dir: Optional[Path] = None,
    cache: Optional[TranslationCache] = None,
) -> TranslationService:
    """Create a TranslationService over a YAML translation loader."""
    loader = create_translation_loader(translations_dir=translations_dir, cache=cache)
    return TranslationService(loader)
