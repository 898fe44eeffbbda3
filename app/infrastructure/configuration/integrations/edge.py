"""Edge platform (CDN) integration settings."""

from pydantic import Field

from infrastructure.configuration.base import IntegrationSettings


class EdgeGeoSettings(IntegrationSettings):
    """Names of the visitor-location headers injected by the edge platform.

    Defaults match Cloudflare's "Add visitor location headers" managed
    transform.

    Environment Variables:
        EDGE_COUNTRY_HEADER: ISO 3166-1 country code header
        EDGE_CITY_HEADER: City name header
        EDGE_REGION_CODE_HEADER: ISO 3166-2 region code header
        EDGE_TIMEZONE_HEADER: IANA time zone header
        EDGE_CLIENT_IP_HEADER: Original client IP header

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        country = request.headers.get(settings.edge.EDGE_COUNTRY_HEADER)
        ```
    """

    EDGE_COUNTRY_HEADER: str = Field(
        default="cf-ipcountry", alias="EDGE_COUNTRY_HEADER"
    )
    EDGE_CITY_HEADER: str = Field(default="cf-ipcity", alias="EDGE_CITY_HEADER")
    EDGE_REGION_CODE_HEADER: str = Field(
        default="cf-region-code", alias="EDGE_REGION_CODE_HEADER"
    )
    EDGE_TIMEZONE_HEADER: str = Field(
        default="cf-timezone", alias="EDGE_TIMEZONE_HEADER"
    )
    EDGE_CLIENT_IP_HEADER: str = Field(
        default="cf-connecting-ip", alias="EDGE_CLIENT_IP_HEADER"
    )
