"""Locale resolution logic for determining the visitor's preferred language.

Provides the Accept-Language parser and the preference cascade that
combines URL, cookie, header and geo signals into one locale.
"""

import math
from typing import Iterable, List, Optional, Tuple

import structlog
from infrastructure.i18n.models import Locale
from infrastructure.i18n.registry import DEFAULT_LOCALE, SUPPORTED_LOCALES

logger = structlog.get_logger().bind(component="i18n.resolver")


class AcceptLanguageParser:
    """Parses an HTTP Accept-Language header into ranked language codes.

    "fr-FR;q=0.5, en-US;q=0.9, de" -> ["de", "en", "fr"]

    Only the primary subtag is kept, lowercased. Entries are ordered by
    descending quality; entries of equal quality keep their header order.
    A missing, non-numeric or non-finite quality counts as 1.0 so that a
    malformed entry is ranked rather than discarded.
    """

    DEFAULT_QUALITY = 1.0

    @classmethod
    def parse_quality(cls, raw: str) -> float:
        """Parse a q-value, defaulting to 1.0 when it is unusable."""
        try:
            quality = float(raw.strip())
        except ValueError:
            return cls.DEFAULT_QUALITY
        if not math.isfinite(quality):
            return cls.DEFAULT_QUALITY
        return quality

    @classmethod
    def parse_entries(cls, header: Optional[str]) -> List[Tuple[str, float]]:
        """Parse header into (primary subtag, quality) pairs in header order."""
        if not header:
            return []

        entries = []
        for part in header.split(","):
            tag, _, params = part.partition(";")
            code = tag.strip().split("-")[0].lower()
            if not code:
                continue

            quality = cls.DEFAULT_QUALITY
            for param in params.split(";"):
                name, sep, value = param.partition("=")
                if sep and name.strip().lower() == "q":
                    quality = cls.parse_quality(value)

            entries.append((code, quality))
        return entries

    @classmethod
    def parse(cls, header: Optional[str]) -> List[str]:
        """Return the language codes of header ranked by quality.

        Args:
            header: Accept-Language header value, possibly None or empty.

        Returns:
            Primary language subtags, highest quality first.
        """
        entries = cls.parse_entries(header)
        # sorted() is stable, so equal qualities keep header order
        ranked = sorted(entries, key=lambda entry: -entry[1])
        return [code for code, _ in ranked]


class PreferenceResolver:
    """Resolves the visitor's locale from every available signal.

    Strict cascade, first present source wins:
    1. Locale prefix in the URL
    2. Saved preference cookie
    3. First supported language of the Accept-Language header
    4. Geo-detected locale
    """

    def __init__(
        self,
        supported_locales: Iterable[Locale] = SUPPORTED_LOCALES,
        default_locale: Locale = DEFAULT_LOCALE,
    ):
        """Initialize preference resolver.

        Args:
            supported_locales: Locales the header tier may select.
            default_locale: Used only when no geo locale is supplied.
        """
        self.supported = frozenset(supported_locales)
        self.default_locale = default_locale
        self.log = logger.bind(default_locale=default_locale.value)

    def resolve_from_header(self, accept_language: Optional[str]) -> Optional[Locale]:
        """Return the first supported locale listed in accept_language.

        Args:
            accept_language: Accept-Language header value.

        Returns:
            Supported Locale, or None if the header names none.
        """
        for code in AcceptLanguageParser.parse(accept_language):
            locale = Locale.parse(code)
            if locale is not None and locale in self.supported:
                return locale
        return None

    def resolve(
        self,
        url_locale: Optional[Locale],
        cookie_locale: Optional[Locale],
        geo_locale: Optional[Locale],
        accept_language: Optional[str],
    ) -> Locale:
        """Resolve the locale to serve. Never fails.

        Args:
            url_locale: Valid locale from the URL prefix, if any.
            cookie_locale: Valid locale from the preference cookie, if any.
            geo_locale: Locale detected from the geo signal.
            accept_language: Raw Accept-Language header value.

        Returns:
            Resolved Locale.
        """
        if url_locale is not None:
            self.log.debug("resolved_from_url", locale=url_locale.value)
            return url_locale

        if cookie_locale is not None:
            self.log.debug("resolved_from_saved_preference", locale=cookie_locale.value)
            return cookie_locale

        header_locale = self.resolve_from_header(accept_language)
        if header_locale is not None:
            self.log.debug("resolved_from_header", locale=header_locale.value)
            return header_locale

        resolved = geo_locale or self.default_locale
        self.log.debug("resolved_from_geo", locale=resolved.value)
        return resolved
