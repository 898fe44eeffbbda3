"""Locale models for the i18n system.

Defines the core data structures shared by locale resolution, geo
detection and translation loading.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, FrozenSet, Mapping, Optional, Union

# A translation bundle is a tree of string keys whose leaves are strings.
TranslationValue = Union[str, Mapping[str, Any]]
TranslationBundle = Dict[str, TranslationValue]


class Locale(str, Enum):
    """Supported locale identifiers.

    24 EU official languages plus 7 regional languages. Values are the URL
    segment and cookie value used on the site (e.g. "/fr/", "growfolio-lang=fr").
    """

    # EU official languages
    EN = "en"
    BG = "bg"
    HR = "hr"
    CS = "cs"
    DA = "da"
    NL = "nl"
    ET = "et"
    FI = "fi"
    FR = "fr"
    DE = "de"
    EL = "el"
    HU = "hu"
    GA = "ga"
    IT = "it"
    LV = "lv"
    LT = "lt"
    MT = "mt"
    PL = "pl"
    PT = "pt"
    RO = "ro"
    SK = "sk"
    SL = "sl"
    ES = "es"
    SV = "sv"
    # Regional languages
    CA = "ca"
    EU = "eu"
    GL = "gl"
    CY = "cy"
    FY = "fy"
    SE = "se"
    CO = "co"

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["Locale"]:
        """Return the Locale for value, or None if it is not supported.

        Matching is exact: "EN" and " en" are not supported codes.
        """
        if not value:
            return None
        try:
            return cls(value)
        except ValueError:
            return None

    def __str__(self) -> str:
        return self.value


class LanguageGroup(str, Enum):
    """Display grouping of supported languages."""

    OFFICIAL = "official"
    REGIONAL = "regional"


@dataclass(frozen=True)
class LanguageInfo:
    """Display metadata for a supported locale.

    Attributes:
        name: English name of the language.
        native_name: Name of the language in the language itself.
        flag: Emoji flag shown in language pickers.
        group: Whether this is an EU official or a regional language.
    """

    name: str
    native_name: str
    flag: str
    group: LanguageGroup


@dataclass(frozen=True)
class GeoSignal:
    """Visitor location hints supplied per request by the edge platform.

    Every field is optional and untrusted.

    Attributes:
        country: ISO 3166-1 alpha-2 country code (e.g., "ES").
        city: City name as reported by the edge (e.g., "Barcelona").
        region_code: ISO 3166-2 subdivision code, with or without the
            country prefix (e.g., "CT" or "ES-CT").
        timezone: IANA time zone name.
    """

    country: Optional[str] = None
    city: Optional[str] = None
    region_code: Optional[str] = None
    timezone: Optional[str] = None


@dataclass(frozen=True)
class RegionalRule:
    """Sub-national override assigning a locale to a region or city.

    A rule matches when the visitor's country equals ``country`` and either
    the normalized region code is in ``regions`` or the city (trimmed,
    lowercased) equals one of ``cities`` (lowercased).

    Attributes:
        country: ISO 3166-1 alpha-2 country code.
        locale: Locale served when the rule matches.
        regions: ISO 3166-2 region codes without the country prefix.
        cities: City names, matched case-insensitively.
    """

    country: str
    locale: Locale
    regions: FrozenSet[str] = field(default_factory=frozenset)
    cities: FrozenSet[str] = field(default_factory=frozenset)

    def matches_region(self, region_code: Optional[str]) -> bool:
        if not self.regions or not region_code:
            return False
        normalized = region_code.strip().upper()
        prefix = f"{self.country}-"
        if normalized.startswith(prefix):
            normalized = normalized[len(prefix) :]
        return normalized in self.regions

    def matches_city(self, city: Optional[str]) -> bool:
        if not self.cities or not city:
            return False
        normalized = city.strip().lower()
        return any(candidate.lower() == normalized for candidate in self.cities)


@dataclass(frozen=True)
class LocaleContext:
    """Structured per-request locale information.

    Created by the request pipeline and handed to downstream handlers
    through ``request.state.locale_context``.

    Attributes:
        locale: The resolved locale to serve.
        url_locale: Locale taken from the URL prefix, if any.
        cookie_locale: Locale taken from the preference cookie, if any.
        geo_locale: Locale detected from the geo signal.
        geo: The geo signal the detection was based on.
    """

    locale: Locale
    url_locale: Optional[Locale] = None
    cookie_locale: Optional[Locale] = None
    geo_locale: Optional[Locale] = None
    geo: GeoSignal = field(default_factory=GeoSignal)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-friendly dictionary."""
        return {
            "locale": self.locale.value,
            "url_locale": self.url_locale.value if self.url_locale else None,
            "cookie_locale": self.cookie_locale.value if self.cookie_locale else None,
            "geo": {
                "country": self.geo.country,
                "city": self.geo.city,
                "region_code": self.geo.region_code,
                "detected_locale": self.geo_locale.value if self.geo_locale else None,
            },
        }
