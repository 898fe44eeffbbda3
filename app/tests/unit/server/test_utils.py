"""Unit tests for server.utils module."""

import pytest

from server.utils import get_client_ip, get_raw_path


@pytest.mark.unit
def test_get_client_ip_prefers_edge_header(make_request):
    request = make_request(
        headers={"cf-connecting-ip": "203.0.113.7", "x-forwarded-for": "192.0.2.1"}
    )
    assert get_client_ip(request, "cf-connecting-ip") == "203.0.113.7"


@pytest.mark.unit
def test_get_client_ip_uses_first_forwarded_hop(make_request):
    request = make_request(headers={"x-forwarded-for": " 192.0.2.1 , 10.0.0.1"})
    assert get_client_ip(request, "cf-connecting-ip") == "192.0.2.1"


@pytest.mark.unit
def test_get_client_ip_falls_back_to_peer(make_request):
    request = make_request(headers={"cf-connecting-ip": "  "})
    assert get_client_ip(request, "cf-connecting-ip") == "198.51.100.20"


@pytest.mark.unit
def test_get_client_ip_without_header_name(make_request):
    request = make_request(headers={"cf-connecting-ip": "203.0.113.7"})
    assert get_client_ip(request) == "198.51.100.20"


@pytest.mark.unit
def test_get_client_ip_unknown(make_request):
    request = make_request(client_host=None)
    assert get_client_ip(request) is None


@pytest.mark.unit
def test_get_raw_path_keeps_percent_encoding(make_request):
    request = make_request("/pricing?plan", raw_path=b"/pricing%3Fplan")

    assert get_raw_path(request) == "/pricing%3Fplan"


@pytest.mark.unit
def test_get_raw_path_drops_query(make_request):
    request = make_request("/fr/", raw_path=b"/fr/?ref=nav")

    assert get_raw_path(request) == "/fr/"


@pytest.mark.unit
def test_get_raw_path_requotes_without_raw_path(make_request):
    request = make_request("/fr/mon prix", raw_path=b"")

    assert get_raw_path(request) == "/fr/mon%20prix"
