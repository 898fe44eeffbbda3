"""Tests for infrastructure.i18n.cookies module."""

import pytest

from infrastructure.i18n.cookies import LANG_COOKIE_NAME, CookieCodec
from infrastructure.i18n.models import Locale


@pytest.mark.unit
class TestCookieCodec:
    """Tests for CookieCodec."""

    def test_encode(self):
        assert (
            CookieCodec.encode(Locale.CA)
            == "growfolio-lang=ca; Path=/; Max-Age=31536000; SameSite=Lax"
        )

    @pytest.mark.parametrize("locale", list(Locale))
    def test_decode_encoded_cookie(self, locale):
        """A header carrying the encoded pair decodes to the same locale."""
        pair = CookieCodec.encode(locale).split(";")[0]
        assert CookieCodec.decode(pair) == locale

    def test_decode_among_other_cookies(self):
        header = "session=abc; growfolio-lang=de; theme=dark"
        assert CookieCodec.decode(header) == Locale.DE

    @pytest.mark.parametrize("header", [None, "", "theme=dark"])
    def test_decode_absent(self, header):
        assert CookieCodec.decode(header) is None

    def test_decode_invalid_value(self):
        assert CookieCodec.decode("growfolio-lang=klingon") is None

    @pytest.mark.parametrize(
        "header",
        ["xgrowfolio-lang=fr", "growfolio-language=fr", "my-growfolio-lang=fr; a=b"],
    )
    def test_similar_names_do_not_match(self, header):
        assert CookieCodec.decode(header) is None

    def test_first_occurrence_wins(self):
        assert CookieCodec.decode("growfolio-lang=fr; growfolio-lang=de") == Locale.FR

    def test_cookie_name(self):
        assert LANG_COOKIE_NAME == "growfolio-lang"
