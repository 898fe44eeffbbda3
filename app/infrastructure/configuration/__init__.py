"""Infrastructure configuration module - public API.

This module provides centralized configuration management for the locale
routing service using Pydantic BaseSettings with domain-based organization.

Exports:
    Settings: Main settings class (for testing/overrides)
    I18nSettings: Locale routing settings class (for testing)

Example:
    ```python
    from infrastructure.services import get_settings

    settings = get_settings()

    # Access settings
    skip_prefixes = settings.i18n.I18N_SKIP_PATH_PREFIXES
    db_path = settings.maxmind.MAXMIND_DB_PATH

    # Check environment
    if settings.is_production:
        # Production-specific logic...
    ```
"""

from infrastructure.configuration.settings import Settings
from infrastructure.configuration.features.i18n import I18nSettings

__all__ = ["Settings", "I18nSettings"]
