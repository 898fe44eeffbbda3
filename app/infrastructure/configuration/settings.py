"""Growfolio i18n configuration settings - main aggregator."""

from pydantic_settings import BaseSettings, SettingsConfigDict

# Integration settings
from infrastructure.configuration.integrations import (
    EdgeGeoSettings,
    MaxMindSettings,
)

# Feature settings
from infrastructure.configuration.features import I18nSettings


class Settings(BaseSettings):
    """Growfolio i18n configuration settings - main aggregator.

    Aggregates all domain-specific settings into a single configuration object.
    Settings are organized by concern:

    - **Integrations**: Edge platform headers and the MaxMind GeoIP database
    - **Features**: Locale routing and translation loading

    Environment Variables:
        PREFIX: Environment prefix (empty in production)
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
        GIT_SHA: Git commit SHA for deployment tracking

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        country_header = settings.edge.EDGE_COUNTRY_HEADER
        if settings.i18n.I18N_GEOIP_LOOKUP_ENABLED:
            db_path = settings.maxmind.MAXMIND_DB_PATH
        ```
    """

    # Application-level settings
    PREFIX: str = ""
    LOG_LEVEL: str = "INFO"
    GIT_SHA: str = "Unknown"

    # Integration settings
    edge: EdgeGeoSettings
    maxmind: MaxMindSettings

    # Feature settings
    i18n: I18nSettings

    @property
    def is_production(self) -> bool:
        """Check if the application is running in production.

        Returns:
            True if PREFIX is empty (production), False otherwise.
        """
        return not bool(self.PREFIX)

    def __init__(self, **kwargs):
        """Initialize Settings with automatic subsettings instantiation.

        Args:
            **kwargs: Optional overrides for specific settings sections.
        """
        settings_map = {
            # Integrations
            "edge": EdgeGeoSettings,
            "maxmind": MaxMindSettings,
            # Features
            "i18n": I18nSettings,
        }

        for setting_name, setting_class in settings_map.items():
            if setting_name not in kwargs:
                kwargs[setting_name] = setting_class()

        super().__init__(**kwargs)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


# Create the singleton settings instance
settings = Settings()
