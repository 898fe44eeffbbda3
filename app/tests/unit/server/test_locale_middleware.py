"""Unit tests for server.locale_middleware module."""

from unittest.mock import MagicMock

import pytest

from infrastructure.i18n import Locale, RequestPipeline
from infrastructure.operations import OperationResult
from server.locale_middleware import LocaleMiddleware


@pytest.fixture
def middleware(app_settings, mock_maxmind_client):
    return LocaleMiddleware(
        MagicMock(),
        pipeline=RequestPipeline(),
        settings=app_settings,
        maxmind_client=mock_maxmind_client,
    )


@pytest.fixture
def geoip_middleware(geoip_settings, mock_maxmind_client):
    return LocaleMiddleware(
        MagicMock(),
        pipeline=RequestPipeline(),
        settings=geoip_settings,
        maxmind_client=mock_maxmind_client,
    )


@pytest.mark.unit
async def test_skips_api_paths(middleware, make_request, call_next):
    """API and asset requests pass through untouched."""
    request = make_request("/api/v1/locales")

    response = await middleware.dispatch(request, call_next)

    call_next.assert_awaited_once_with(request)
    assert response.status_code == 200
    assert "set-cookie" not in response.headers
    assert getattr(request.state, "locale_context", None) is None


@pytest.mark.unit
async def test_root_redirects_to_preferred_locale(middleware, make_request, call_next):
    request = make_request("/", headers={"accept-language": "fr-FR,fr;q=0.9"})

    response = await middleware.dispatch(request, call_next)

    assert response.status_code == 302
    assert response.headers["location"] == "/fr/"
    call_next.assert_not_awaited()


@pytest.mark.unit
async def test_unprefixed_path_redirect_keeps_query(middleware, make_request, call_next):
    request = make_request(
        "/pricing", query="plan=pro", headers={"cookie": "growfolio-lang=pt"}
    )

    response = await middleware.dispatch(request, call_next)

    assert response.status_code == 302
    assert response.headers["location"] == "/pt/pricing?plan=pro"


@pytest.mark.unit
async def test_redirect_keeps_encoded_path(middleware, make_request, call_next):
    """An encoded "?" stays part of the path in the redirect target."""
    request = make_request("/pricing?plan", raw_path=b"/pricing%3Fplan")

    response = await middleware.dispatch(request, call_next)

    assert response.headers["location"] == "/en/pricing%3Fplan"


@pytest.mark.unit
async def test_utf8_city_header_drives_detection(middleware, make_request, call_next):
    request = make_request(
        "/",
        headers={"cf-ipcountry": "NO", "cf-ipcity": "Tromsø".encode("utf-8").decode("latin-1")},
    )

    response = await middleware.dispatch(request, call_next)

    assert response.headers["location"] == "/se/"


@pytest.mark.unit
async def test_edge_geo_headers_drive_detection(middleware, make_request, call_next):
    request = make_request("/", headers={"cf-ipcountry": "ES", "cf-region-code": "CT"})

    response = await middleware.dispatch(request, call_next)

    assert response.headers["location"] == "/ca/"


@pytest.mark.unit
async def test_continue_attaches_context_and_saves_cookie(
    middleware, make_request, call_next
):
    request = make_request(
        "/de/preise",
        headers={"cookie": "growfolio-lang=fr", "cf-ipcountry": "AT"},
    )

    response = await middleware.dispatch(request, call_next)

    call_next.assert_awaited_once_with(request)
    context = request.state.locale_context
    assert context.locale == Locale.DE
    assert context.cookie_locale == Locale.FR
    assert context.geo_locale == Locale.DE
    assert response.headers["set-cookie"] == (
        "growfolio-lang=de; Path=/; Max-Age=31536000; SameSite=Lax"
    )


@pytest.mark.unit
async def test_continue_without_cookie_change(middleware, make_request, call_next):
    request = make_request("/de/", headers={"cookie": "growfolio-lang=de"})

    response = await middleware.dispatch(request, call_next)

    assert response.status_code == 200
    assert "set-cookie" not in response.headers


@pytest.mark.unit
async def test_existing_set_cookie_headers_preserved(middleware, make_request, call_next):
    """The locale cookie is appended, not substituted."""
    call_next.return_value.set_cookie("session", "abc")
    request = make_request("/it/")

    response = await middleware.dispatch(request, call_next)

    cookies = response.headers.getlist("set-cookie")
    assert len(cookies) == 2
    assert cookies[1].startswith("growfolio-lang=it;")


@pytest.mark.unit
async def test_downstream_exception_propagates(middleware, make_request, call_next):
    call_next.side_effect = RuntimeError("handler failed")

    with pytest.raises(RuntimeError, match="handler failed"):
        await middleware.dispatch(make_request("/en/"), call_next)


@pytest.mark.unit
async def test_geoip_disabled_skips_lookup(middleware, make_request, call_next, mock_maxmind_client):
    await middleware.dispatch(make_request("/"), call_next)

    mock_maxmind_client.geolocate.assert_not_called()


@pytest.mark.unit
async def test_geoip_lookup_when_edge_has_no_country(
    geoip_middleware, make_request, call_next, mock_maxmind_client
):
    mock_maxmind_client.geolocate.return_value = OperationResult.success(
        data={
            "country_code": "GB",
            "city": "Swansea",
            "region_code": None,
            "time_zone": "Europe/London",
        }
    )
    request = make_request("/", headers={"cf-connecting-ip": "203.0.113.7"})

    response = await geoip_middleware.dispatch(request, call_next)

    mock_maxmind_client.geolocate.assert_called_once_with("203.0.113.7")
    assert response.headers["location"] == "/cy/"


@pytest.mark.unit
async def test_geoip_lookup_failure_leaves_signal_empty(
    geoip_middleware, make_request, call_next, mock_maxmind_client
):
    mock_maxmind_client.geolocate.return_value = OperationResult.not_found("unknown ip")

    response = await geoip_middleware.dispatch(make_request("/"), call_next)

    mock_maxmind_client.geolocate.assert_called_once_with("198.51.100.20")
    assert response.headers["location"] == "/en/"


@pytest.mark.unit
async def test_geoip_not_used_when_edge_sends_country(
    geoip_middleware, make_request, call_next, mock_maxmind_client
):
    response = await geoip_middleware.dispatch(
        make_request("/", headers={"cf-ipcountry": "NL"}), call_next
    )

    mock_maxmind_client.geolocate.assert_not_called()
    assert response.headers["location"] == "/nl/"
