"""Locale routing and translation feature settings."""

from typing import List, Optional

from pydantic import Field

from infrastructure.configuration.base import FeatureSettings


class I18nSettings(FeatureSettings):
    """Locale routing and translation loading configuration.

    Environment Variables:
        I18N_TRANSLATIONS_DIR: Directory holding the YAML translation bundles
            (default: auto-discovered app/locales)
        I18N_PRELOAD_TRANSLATIONS: Warm the translation cache at startup
        I18N_SKIP_PATH_PREFIXES: JSON list of path prefixes that bypass locale
            routing (default: ["/_", "/api/"])
        I18N_GEOIP_LOOKUP_ENABLED: Geolocate the client IP with MaxMind when the
            edge supplies no country

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        if settings.i18n.I18N_PRELOAD_TRANSLATIONS:
            await loader.preload(SUPPORTED_LOCALES)
        ```
    """

    I18N_TRANSLATIONS_DIR: Optional[str] = Field(
        default=None, alias="I18N_TRANSLATIONS_DIR"
    )
    I18N_PRELOAD_TRANSLATIONS: bool = Field(
        default=True, alias="I18N_PRELOAD_TRANSLATIONS"
    )
    I18N_SKIP_PATH_PREFIXES: List[str] = Field(
        default_factory=lambda: ["/_", "/api/"],
        alias="I18N_SKIP_PATH_PREFIXES",
    )
    I18N_GEOIP_LOOKUP_ENABLED: bool = Field(
        default=False, alias="I18N_GEOIP_LOOKUP_ENABLED"
    )
