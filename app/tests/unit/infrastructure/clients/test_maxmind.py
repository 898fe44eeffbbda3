"""Unit tests for MaxMind infrastructure client."""

import pytest
from unittest.mock import Mock, MagicMock
from geoip2.errors import AddressNotFoundError, GeoIP2Error

from infrastructure.clients.maxmind import MaxMindClient, GeoLocationData
from infrastructure.operations import OperationStatus


@pytest.fixture
def maxmind_settings():
    """Create mock settings for MaxMind client."""
    settings = MagicMock()
    settings.maxmind.MAXMIND_DB_PATH = "/path/to/GeoLite2-City.mmdb"
    return settings


def _mock_reader(monkeypatch, response=None, side_effect=None):
    mock_reader = Mock()
    if side_effect is not None:
        mock_reader.city.side_effect = side_effect
    else:
        mock_reader.city.return_value = response
    mock_reader_class = Mock(return_value=mock_reader)
    monkeypatch.setattr("geoip2.database.Reader", mock_reader_class)
    return mock_reader, mock_reader_class


@pytest.mark.unit
def test_maxmind_client_success(maxmind_settings, monkeypatch):
    """Test successful geolocation with MaxMind client."""
    mock_response = Mock()
    mock_response.country.iso_code = "ES"
    mock_response.city.name = "Barcelona"
    mock_response.subdivisions.most_specific.iso_code = "CT"
    mock_response.location.time_zone = "Europe/Madrid"
    mock_reader, mock_reader_class = _mock_reader(monkeypatch, response=mock_response)

    client = MaxMindClient(settings=maxmind_settings)
    result = client.geolocate(ip_address="203.0.113.7")

    assert result.is_success
    assert result.data == {
        "country_code": "ES",
        "city": "Barcelona",
        "region_code": "CT",
        "time_zone": "Europe/Madrid",
    }
    mock_reader_class.assert_called_once_with("/path/to/GeoLite2-City.mmdb")
    mock_reader.city.assert_called_once_with("203.0.113.7")
    mock_reader.close.assert_not_called()


@pytest.mark.unit
def test_maxmind_client_not_found(maxmind_settings, monkeypatch):
    """Test IP not found in database."""
    mock_reader, _ = _mock_reader(
        monkeypatch, side_effect=AddressNotFoundError("Not found")
    )

    result = MaxMindClient(settings=maxmind_settings).geolocate("192.168.1.1")

    assert result.status == OperationStatus.NOT_FOUND
    assert result.error_code == "IP_NOT_FOUND"
    mock_reader.close.assert_not_called()


@pytest.mark.unit
def test_maxmind_client_invalid_ip(maxmind_settings, monkeypatch):
    """Test invalid IP address format."""
    _mock_reader(monkeypatch, side_effect=ValueError("Invalid IP"))

    result = MaxMindClient(settings=maxmind_settings).geolocate("not-an-ip")

    assert result.status == OperationStatus.PERMANENT_ERROR
    assert result.error_code == "INVALID_IP_FORMAT"


@pytest.mark.unit
def test_maxmind_client_geoip2_error(maxmind_settings, monkeypatch):
    """Test database errors are transient."""
    _mock_reader(monkeypatch, side_effect=GeoIP2Error("corrupt"))

    result = MaxMindClient(settings=maxmind_settings).geolocate("203.0.113.7")

    assert result.status == OperationStatus.TRANSIENT_ERROR
    assert result.error_code == "GEOIP2_ERROR"


@pytest.mark.unit
def test_maxmind_client_database_missing(maxmind_settings, monkeypatch):
    """Test missing database file."""
    monkeypatch.setattr(
        "geoip2.database.Reader", Mock(side_effect=FileNotFoundError("no such file"))
    )

    result = MaxMindClient(settings=maxmind_settings).geolocate("203.0.113.7")

    assert result.status == OperationStatus.TRANSIENT_ERROR
    assert result.error_code == "DB_FILE_ERROR"


@pytest.mark.unit
def test_maxmind_client_reuses_reader(maxmind_settings, monkeypatch):
    """The database is opened once and shared by later lookups."""
    # Arrange
    mock_response = Mock()
    mock_response.country.iso_code = "NO"
    mock_response.city.name = "Alta"
    mock_response.subdivisions.most_specific.iso_code = "54"
    mock_response.location.time_zone = "Europe/Oslo"
    mock_reader, mock_reader_class = _mock_reader(monkeypatch, response=mock_response)
    client = MaxMindClient(settings=maxmind_settings)

    # Act
    for _ in range(3):
        assert client.geolocate("203.0.113.7").is_success

    # Assert
    mock_reader_class.assert_called_once()
    assert mock_reader.city.call_count == 3


@pytest.mark.unit
def test_maxmind_client_close(maxmind_settings, monkeypatch):
    mock_reader, mock_reader_class = _mock_reader(
        monkeypatch, side_effect=AddressNotFoundError("Not found")
    )
    client = MaxMindClient(settings=maxmind_settings)
    client.geolocate("203.0.113.7")

    client.close()
    client.close()

    mock_reader.close.assert_called_once()
    client.geolocate("203.0.113.7")
    assert mock_reader_class.call_count == 2


@pytest.mark.unit
def test_maxmind_client_close_without_reader(maxmind_settings, monkeypatch):
    mock_reader, mock_reader_class = _mock_reader(monkeypatch)

    MaxMindClient(settings=maxmind_settings).close()

    mock_reader_class.assert_not_called()
    mock_reader.close.assert_not_called()


@pytest.mark.unit
def test_maxmind_client_retries_failed_open(maxmind_settings, monkeypatch):
    """A missing database is looked for again on the next lookup."""
    mock_reader = Mock()
    mock_reader.city.side_effect = AddressNotFoundError("Not found")
    mock_reader_class = Mock(side_effect=[FileNotFoundError("missing"), mock_reader])
    monkeypatch.setattr("geoip2.database.Reader", mock_reader_class)
    client = MaxMindClient(settings=maxmind_settings)

    first = client.geolocate("203.0.113.7")
    second = client.geolocate("203.0.113.7")

    assert first.error_code == "DB_FILE_ERROR"
    assert second.error_code == "IP_NOT_FOUND"
    assert mock_reader_class.call_count == 2


@pytest.mark.unit
def test_maxmind_client_healthcheck(maxmind_settings, monkeypatch):
    """Healthcheck queries the database with a public address."""
    mock_response = Mock()
    mock_response.country.iso_code = "US"
    mock_response.city.name = None
    mock_response.subdivisions.most_specific.iso_code = None
    mock_response.location.time_zone = "America/Chicago"
    mock_reader, _ = _mock_reader(monkeypatch, response=mock_response)

    result = MaxMindClient(settings=maxmind_settings).healthcheck()

    assert result.is_success
    assert result.data["status"] == "healthy"
    mock_reader.city.assert_called_once_with("8.8.8.8")


@pytest.mark.unit
def test_maxmind_client_healthcheck_failure(maxmind_settings, monkeypatch):
    monkeypatch.setattr(
        "geoip2.database.Reader", Mock(side_effect=FileNotFoundError("missing"))
    )

    result = MaxMindClient(settings=maxmind_settings).healthcheck()

    assert result.status == OperationStatus.PERMANENT_ERROR
    assert result.error_code == "HEALTHCHECK_FAILED"


@pytest.mark.unit
def test_geolocation_data_to_dict():
    data = GeoLocationData(country_code="GB", city="Cardiff")
    assert data.to_dict() == {
        "country_code": "GB",
        "city": "Cardiff",
        "region_code": None,
        "time_zone": None,
    }
