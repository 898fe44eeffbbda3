"""Geo-based locale detection.

Maps the visitor-location hints supplied by the edge platform (country,
city, region code) to a supported locale. Regional rules are checked
first, in registry order, then the country-level default applies.
"""

from typing import Mapping, Optional, Sequence

import structlog
from infrastructure.i18n.models import GeoSignal, Locale, RegionalRule
from infrastructure.i18n.registry import (
    COUNTRY_TO_LOCALE,
    DEFAULT_LOCALE,
    REGIONAL_RULES,
)

logger = structlog.get_logger().bind(component="i18n.geo")

# Placeholder country codes Cloudflare sends for unknown or Tor traffic
UNKNOWN_COUNTRY_CODES = frozenset({"XX", "T1"})


def _clean(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


def _header_text(headers: Mapping[str, str], name: str) -> Optional[str]:
    """Read a text header, repairing UTF-8 sent through a latin-1 decode.

    ASGI servers decode header bytes as latin-1, so a UTF-8 city such as
    "Tromsø" arrives as "TromsÃ¸". Values that are not UTF-8 are
    kept as received.
    """
    value = headers.get(name)
    if value is None:
        return None
    try:
        value = value.encode("latin-1").decode("utf-8")
    except UnicodeError:
        pass
    return _clean(value)


def geo_signal_from_headers(
    headers: Mapping[str, str],
    country_header: str = "cf-ipcountry",
    city_header: str = "cf-ipcity",
    region_code_header: str = "cf-region-code",
    timezone_header: str = "cf-timezone",
) -> GeoSignal:
    """Build a GeoSignal from edge visitor-location request headers.

    Missing or blank headers become None. Placeholder country codes for
    unknown locations are treated as absent.

    Args:
        headers: Request headers (case-insensitive mapping).
        country_header: Header carrying the ISO country code.
        city_header: Header carrying the city name.
        region_code_header: Header carrying the ISO 3166-2 region code.
        timezone_header: Header carrying the IANA time zone.

    Returns:
        GeoSignal with whatever hints were present.
    """
    country = _header_text(headers, country_header)
    if country and country.upper() in UNKNOWN_COUNTRY_CODES:
        country = None
    return GeoSignal(
        country=country,
        city=_header_text(headers, city_header),
        region_code=_header_text(headers, region_code_header),
        timezone=_header_text(headers, timezone_header),
    )


def geo_signal_from_location(location: Mapping[str, Optional[str]]) -> GeoSignal:
    """Build a GeoSignal from a MaxMind geolocation payload.

    Args:
        location: ``GeoLocationData.to_dict()`` output.

    Returns:
        GeoSignal carrying the country, city, region and time zone found.
    """
    return GeoSignal(
        country=_clean(location.get("country_code")),
        city=_clean(location.get("city")),
        region_code=_clean(location.get("region_code")),
        timezone=_clean(location.get("time_zone")),
    )


class GeoResolver:
    """Resolves a locale from a geo signal.

    Pure: the result depends only on the signal and the registry data
    given at construction.

    Args:
        rules: Regional override rules, evaluated in order.
        country_map: Country code -> default locale.
        default_locale: Locale used when nothing matches.
    """

    def __init__(
        self,
        rules: Sequence[RegionalRule] = REGIONAL_RULES,
        country_map: Mapping[str, Locale] = COUNTRY_TO_LOCALE,
        default_locale: Locale = DEFAULT_LOCALE,
    ):
        self.rules = tuple(rules)
        self.country_map = country_map
        self.default_locale = default_locale

    def detect(self, signal: GeoSignal) -> Locale:
        """Detect the locale for a geo signal.

        Args:
            signal: Visitor-location hints; every field may be missing.

        Returns:
            The first matching regional rule's locale, else the country's
            default locale, else the default locale.
        """
        country = _clean(signal.country)
        if not country:
            return self.default_locale
        country = country.upper()

        for rule in self.rules:
            if rule.country != country:
                continue
            if rule.matches_region(signal.region_code):
                logger.debug(
                    "geo_regional_rule_matched",
                    country=country,
                    region_code=signal.region_code,
                    locale=rule.locale.value,
                )
                return rule.locale
            if rule.matches_city(signal.city):
                logger.debug(
                    "geo_regional_rule_matched",
                    country=country,
                    city=signal.city,
                    locale=rule.locale.value,
                )
                return rule.locale

        return self.country_map.get(country, self.default_locale)
