"""Locale preference cookie.

Wire format::

    growfolio-lang=<locale>; Path=/; Max-Age=31536000; SameSite=Lax
"""

from typing import Optional

from infrastructure.i18n.models import Locale

LANG_COOKIE_NAME = "growfolio-lang"

# One year, in seconds
LANG_COOKIE_MAX_AGE = 60 * 60 * 24 * 365


class CookieCodec:
    """Encodes and decodes the persisted locale preference."""

    name = LANG_COOKIE_NAME
    max_age = LANG_COOKIE_MAX_AGE

    @classmethod
    def encode(cls, locale: Locale) -> str:
        """Build the Set-Cookie header value saving locale.

        Args:
            locale: Locale to persist.

        Returns:
            Set-Cookie header value.
        """
        return f"{cls.name}={locale.value}; Path=/; Max-Age={cls.max_age}; SameSite=Lax"

    @classmethod
    def decode(cls, cookie_header: Optional[str]) -> Optional[Locale]:
        """Read the saved locale from a Cookie request header.

        The cookie name must match exactly between ";" delimiters, so
        "xgrowfolio-lang=fr" or "growfolio-language=fr" never match. The
        first occurrence wins.

        Args:
            cookie_header: Raw Cookie header value.

        Returns:
            Saved Locale, or None if absent or not a supported locale.
        """
        if not cookie_header:
            return None

        for pair in cookie_header.split(";"):
            name, sep, value = pair.partition("=")
            if sep and name.strip() == cls.name:
                return Locale.parse(value.strip().strip('"'))
        return None
