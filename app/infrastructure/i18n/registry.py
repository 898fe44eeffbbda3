"""Static locale registry.

Supported locales, their display metadata, the country -> locale map, the
ordered regional override rules and the translation fallback graph. All of
it is fixed at import time and never mutated.
"""

from types import MappingProxyType
from typing import Dict, List, Mapping, Tuple

from infrastructure.i18n.models import (
    LanguageGroup,
    LanguageInfo,
    Locale,
    RegionalRule,
)

DEFAULT_LOCALE: Locale = Locale.EN

SUPPORTED_LOCALES: Tuple[Locale, ...] = tuple(Locale)

_OFFICIAL = LanguageGroup.OFFICIAL
_REGIONAL = LanguageGroup.REGIONAL

LANGUAGES: Mapping[Locale, LanguageInfo] = MappingProxyType(
    {
        Locale.EN: LanguageInfo("English", "English", "🇬🇧", _OFFICIAL),
        Locale.BG: LanguageInfo("Bulgarian", "Български", "🇧🇬", _OFFICIAL),
        Locale.HR: LanguageInfo("Croatian", "Hrvatski", "🇭🇷", _OFFICIAL),
        Locale.CS: LanguageInfo("Czech", "Čeština", "🇨🇿", _OFFICIAL),
        Locale.DA: LanguageInfo("Danish", "Dansk", "🇩🇰", _OFFICIAL),
        Locale.NL: LanguageInfo("Dutch", "Nederlands", "🇳🇱", _OFFICIAL),
        Locale.ET: LanguageInfo("Estonian", "Eesti", "🇪🇪", _OFFICIAL),
        Locale.FI: LanguageInfo("Finnish", "Suomi", "🇫🇮", _OFFICIAL),
        Locale.FR: LanguageInfo("French", "Français", "🇫🇷", _OFFICIAL),
        Locale.DE: LanguageInfo("German", "Deutsch", "🇩🇪", _OFFICIAL),
        Locale.EL: LanguageInfo("Greek", "Ελληνικά", "🇬🇷", _OFFICIAL),
        Locale.HU: LanguageInfo("Hungarian", "Magyar", "🇭🇺", _OFFICIAL),
        Locale.GA: LanguageInfo("Irish", "Gaeilge", "🇮🇪", _OFFICIAL),
        Locale.IT: LanguageInfo("Italian", "Italiano", "🇮🇹", _OFFICIAL),
        Locale.LV: LanguageInfo("Latvian", "Latviešu", "🇱🇻", _OFFICIAL),
        Locale.LT: LanguageInfo("Lithuanian", "Lietuvių", "🇱🇹", _OFFICIAL),
        Locale.MT: LanguageInfo("Maltese", "Malti", "🇲🇹", _OFFICIAL),
        Locale.PL: LanguageInfo("Polish", "Polski", "🇵🇱", _OFFICIAL),
        Locale.PT: LanguageInfo("Portuguese", "Português", "🇵🇹", _OFFICIAL),
        Locale.RO: LanguageInfo("Romanian", "Română", "🇷🇴", _OFFICIAL),
        Locale.SK: LanguageInfo("Slovak", "Slovenčina", "🇸🇰", _OFFICIAL),
        Locale.SL: LanguageInfo("Slovenian", "Slovenščina", "🇸🇮", _OFFICIAL),
        Locale.ES: LanguageInfo("Spanish", "Español", "🇪🇸", _OFFICIAL),
        Locale.SV: LanguageInfo("Swedish", "Svenska", "🇸🇪", _OFFICIAL),
        Locale.CA: LanguageInfo("Catalan", "Català", "🏴", _REGIONAL),
        Locale.EU: LanguageInfo("Basque", "Euskara", "🏴", _REGIONAL),
        Locale.GL: LanguageInfo("Galician", "Galego", "🏴", _REGIONAL),
        Locale.CY: LanguageInfo("Welsh", "Cymraeg", "🏴󠁧󠁢󠁷󠁬󠁳󠁿", _REGIONAL),
        Locale.FY: LanguageInfo("Frisian", "Frysk", "🏴", _REGIONAL),
        Locale.SE: LanguageInfo("Sami", "Sámegiella", "🏳️", _REGIONAL),
        Locale.CO: LanguageInfo("Corsican", "Corsu", "🏴", _REGIONAL),
    }
)

# ISO 3166-1 alpha-2 country code -> primary language served there
COUNTRY_TO_LOCALE: Mapping[str, Locale] = MappingProxyType(
    {
        # EU countries
        "AT": Locale.DE,
        "BE": Locale.NL,  # Dutch-speaking majority
        "BG": Locale.BG,
        "HR": Locale.HR,
        "CY": Locale.EL,
        "CZ": Locale.CS,
        "DK": Locale.DA,
        "EE": Locale.ET,
        "FI": Locale.FI,
        "FR": Locale.FR,
        "DE": Locale.DE,
        "GR": Locale.EL,
        "HU": Locale.HU,
        "IE": Locale.EN,
        "IT": Locale.IT,
        "LV": Locale.LV,
        "LT": Locale.LT,
        "LU": Locale.FR,
        "MT": Locale.MT,
        "NL": Locale.NL,
        "PL": Locale.PL,
        "PT": Locale.PT,
        "RO": Locale.RO,
        "SK": Locale.SK,
        "SI": Locale.SL,
        "ES": Locale.ES,
        "SE": Locale.SV,
        # Non-EU European countries
        "GB": Locale.EN,
        "CH": Locale.DE,
        "NO": Locale.EN,  # Norwegian not supported
        "IS": Locale.EN,  # Icelandic not supported
        "LI": Locale.DE,
        "AD": Locale.CA,
        "MC": Locale.FR,
        "SM": Locale.IT,
        "VA": Locale.IT,
    }
)


def _rule(country: str, locale: Locale, regions=(), cities=()) -> RegionalRule:
    return RegionalRule(
        country=country,
        locale=locale,
        regions=frozenset(regions),
        cities=frozenset(cities),
    )


# Evaluated in order; the first matching rule wins.
REGIONAL_RULES: Tuple[RegionalRule, ...] = (
    # Spain - Catalan (Catalonia, Valencia, Balearic Islands)
    _rule("ES", Locale.CA, regions=("CT", "VC", "IB")),
    _rule(
        "ES",
        Locale.CA,
        cities=(
            "Barcelona",
            "Tarragona",
            "Girona",
            "Lleida",
            "Valencia",
            "Alicante",
            "Castellón",
            "Palma",
            "Ibiza",
        ),
    ),
    # Spain - Basque (Basque Country, Navarra)
    _rule("ES", Locale.EU, regions=("PV", "NC")),
    _rule(
        "ES",
        Locale.EU,
        cities=("Bilbao", "San Sebastián", "Vitoria-Gasteiz", "Pamplona", "Donostia"),
    ),
    # Spain - Galician (Galicia)
    _rule("ES", Locale.GL, regions=("GA",)),
    _rule(
        "ES",
        Locale.GL,
        cities=(
            "A Coruña",
            "Vigo",
            "Santiago de Compostela",
            "Ourense",
            "Lugo",
            "Pontevedra",
            "Ferrol",
        ),
    ),
    # United Kingdom - Welsh (Wales)
    _rule("GB", Locale.CY, regions=("WLS",)),
    _rule(
        "GB",
        Locale.CY,
        cities=(
            "Cardiff",
            "Swansea",
            "Newport",
            "Wrexham",
            "Bangor",
            "Aberystwyth",
            "Carmarthen",
            "Llandudno",
        ),
    ),
    # Netherlands - Frisian (Friesland)
    _rule("NL", Locale.FY, regions=("FR",)),
    _rule(
        "NL",
        Locale.FY,
        cities=("Leeuwarden", "Ljouwert", "Drachten", "Heerenveen", "Sneek", "Harlingen"),
    ),
    # Finland - Sami (Lapland)
    _rule("FI", Locale.SE, regions=("19",)),
    _rule(
        "FI",
        Locale.SE,
        cities=("Rovaniemi", "Inari", "Utsjoki", "Enontekiö", "Sodankylä"),
    ),
    # Sweden - Sami (Norrbotten, Västerbotten, Jämtland)
    _rule("SE", Locale.SE, regions=("BD", "AC", "Z")),
    _rule("SE", Locale.SE, cities=("Kiruna", "Gällivare", "Jokkmokk", "Arvidsjaur")),
    # Norway - Sami (Troms og Finnmark, Nordland)
    _rule("NO", Locale.SE, regions=("54", "55", "18")),
    _rule(
        "NO",
        Locale.SE,
        cities=("Tromsø", "Alta", "Hammerfest", "Kautokeino", "Karasjok"),
    ),
    # France - Corsican (Corse, Corse-du-Sud, Haute-Corse)
    _rule("FR", Locale.CO, regions=("94", "2A", "2B")),
    _rule(
        "FR",
        Locale.CO,
        cities=("Ajaccio", "Bastia", "Corte", "Porto-Vecchio", "Calvi", "Bonifacio"),
    ),
)

# Bundle served when a locale's own bundle is unavailable
LANGUAGE_FALLBACKS: Mapping[Locale, Locale] = MappingProxyType(
    {
        Locale.CA: Locale.ES,
        Locale.EU: Locale.ES,
        Locale.GL: Locale.ES,
        Locale.CY: Locale.EN,
        Locale.FY: Locale.NL,
        Locale.SE: Locale.FI,
        Locale.CO: Locale.FR,
        Locale.GA: Locale.EN,
        Locale.MT: Locale.EN,
    }
)

# Longest fallback chain tolerated by validate_registry()
MAX_FALLBACK_HOPS = 3

LANGUAGES_BY_COUNTRY: Tuple[Tuple[str, str, Tuple[Locale, ...]], ...] = (
    ("Ireland", "🇮🇪", (Locale.EN, Locale.GA)),
    ("Spain", "🇪🇸", (Locale.ES, Locale.CA, Locale.EU, Locale.GL)),
    ("France", "🇫🇷", (Locale.FR, Locale.CO)),
    ("Germany", "🇩🇪", (Locale.DE,)),
    ("Italy", "🇮🇹", (Locale.IT,)),
    ("Netherlands", "🇳🇱", (Locale.NL, Locale.FY)),
    ("Portugal", "🇵🇹", (Locale.PT,)),
    ("Poland", "🇵🇱", (Locale.PL,)),
    ("Greece", "🇬🇷", (Locale.EL,)),
    ("Romania", "🇷🇴", (Locale.RO,)),
    ("Hungary", "🇭🇺", (Locale.HU,)),
    ("Czech Republic", "🇨🇿", (Locale.CS,)),
    ("Slovakia", "🇸🇰", (Locale.SK,)),
    ("Bulgaria", "🇧🇬", (Locale.BG,)),
    ("Croatia", "🇭🇷", (Locale.HR,)),
    ("Slovenia", "🇸🇮", (Locale.SL,)),
    ("Finland", "🇫🇮", (Locale.FI, Locale.SE)),
    ("Sweden", "🇸🇪", (Locale.SV,)),
    ("Denmark", "🇩🇰", (Locale.DA,)),
    ("Wales", "🏴󠁧󠁢󠁷󠁬󠁳󠁿", (Locale.CY,)),
    ("Estonia", "🇪🇪", (Locale.ET,)),
    ("Latvia", "🇱🇻", (Locale.LV,)),
    ("Lithuania", "🇱🇹", (Locale.LT,)),
    ("Malta", "🇲🇹", (Locale.MT,)),
)


class RegistryError(ValueError):
    """Raised when the static locale registry is internally inconsistent."""


def locales_in_group(group: LanguageGroup) -> List[Locale]:
    """Return the locales of a display group, in registry order."""
    return [locale for locale, info in LANGUAGES.items() if info.group == group]


def fallback_chain(
    locale: Locale,
    fallbacks: Mapping[Locale, Locale] = LANGUAGE_FALLBACKS,
    default_locale: Locale = DEFAULT_LOCALE,
) -> List[Locale]:
    """List the locales whose bundles are tried, in order, for locale.

    The requested locale first, then its registered fallback, then the
    default locale. Duplicates are dropped.
    """
    chain = [locale]
    fallback = fallbacks.get(locale)
    if fallback is not None and fallback not in chain:
        chain.append(fallback)
    if default_locale not in chain:
        chain.append(default_locale)
    return chain


def _walk_fallbacks(
    locale: Locale,
    fallbacks: Mapping[Locale, Locale],
) -> List[Locale]:
    path = [locale]
    current = locale
    while current in fallbacks:
        current = fallbacks[current]
        if current in path:
            raise RegistryError(
                f"Fallback cycle: {' -> '.join(loc.value for loc in path + [current])}"
            )
        path.append(current)
        if len(path) - 1 > MAX_FALLBACK_HOPS:
            raise RegistryError(f"Fallback chain too long from {locale.value}")
    return path


def validate_registry(
    country_map: Mapping[str, Locale] = COUNTRY_TO_LOCALE,
    rules: Tuple[RegionalRule, ...] = REGIONAL_RULES,
    fallbacks: Mapping[Locale, Locale] = LANGUAGE_FALLBACKS,
    default_locale: Locale = DEFAULT_LOCALE,
) -> None:
    """Check the registry invariants.

    - every mapped and rule locale is supported
    - every regional rule has at least one region or city condition
    - no fallback key maps to itself, the graph is acyclic and every chain
      is at most MAX_FALLBACK_HOPS long
    - the default locale needs no fallback

    Raises:
        RegistryError: On the first violated invariant.
    """
    supported = set(SUPPORTED_LOCALES)
    if set(LANGUAGES) != supported:
        raise RegistryError("LANGUAGES must describe every supported locale")

    for country, locale in country_map.items():
        if locale not in supported:
            raise RegistryError(f"Country {country} maps to unsupported {locale!r}")

    for index, rule in enumerate(rules):
        if rule.locale not in supported:
            raise RegistryError(f"Regional rule {index} uses unsupported locale")
        if not rule.regions and not rule.cities:
            raise RegistryError(f"Regional rule {index} has no region or city")

    if default_locale in fallbacks:
        raise RegistryError("The default locale must not have a fallback")

    for source, target in fallbacks.items():
        if source == target:
            raise RegistryError(f"Fallback for {source.value} maps to itself")
        if source not in supported or target not in supported:
            raise RegistryError(f"Fallback {source!r} -> {target!r} is unsupported")
        _walk_fallbacks(source, fallbacks)


def languages_by_country() -> List[Dict[str, object]]:
    """Group supported locales by country for language pickers."""
    return [
        {"country": country, "flag": flag, "languages": [loc.value for loc in locales]}
        for country, flag, locales in LANGUAGES_BY_COUNTRY
    ]
