"""MaxMind integration settings."""

from pydantic import Field

from infrastructure.configuration.base import IntegrationSettings


class MaxMindSettings(IntegrationSettings):
    """MaxMind GeoIP database configuration.

    Only read when I18N_GEOIP_LOOKUP_ENABLED is set.

    Environment Variables:
        MAXMIND_DB_PATH: Path to MaxMind GeoLite2-City database file
    """

    MAXMIND_DB_PATH: str = Field(
        default="./geodb/GeoLite2-City.mmdb", alias="MAXMIND_DB_PATH"
    )
