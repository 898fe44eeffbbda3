"""MaxMind GeoIP2 client for visitor geolocation.

Resolves a client IP address to the country, city, region and time zone
hints the locale pipeline uses when the edge platform sends none. Every
method returns an OperationResult.
"""

import threading
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

import geoip2.database
import structlog
from geoip2.errors import AddressNotFoundError, GeoIP2Error

from infrastructure.operations import OperationResult

if TYPE_CHECKING:
    from infrastructure.configuration import Settings

logger = structlog.get_logger()

# Known public address looked up by the healthcheck
HEALTHCHECK_IP = "8.8.8.8"


@dataclass
class GeoLocationData:
    """Visitor location resolved from an IP address."""

    country_code: Optional[str] = None
    city: Optional[str] = None
    region_code: Optional[str] = None
    time_zone: Optional[str] = None

    def to_dict(self) -> dict:
        """Convert to dictionary format."""
        return {
            "country_code": self.country_code,
            "city": self.city,
            "region_code": self.region_code,
            "time_zone": self.time_zone,
        }


class MaxMindClient:
    """Client for MaxMind GeoIP2 City database lookups.

    The database is opened on first use and the reader is shared by every
    lookup until ``close()``. A failed open is retried on the next lookup.

    Args:
        settings: Settings instance with maxmind.MAXMIND_DB_PATH
    """

    def __init__(self, settings: "Settings") -> None:
        self._db_path = settings.maxmind.MAXMIND_DB_PATH
        self._logger = logger.bind(component="maxmind_client")
        self._reader: Optional[geoip2.database.Reader] = None
        self._lock = threading.Lock()

    def _get_reader(self) -> geoip2.database.Reader:
        with self._lock:
            if self._reader is None:
                self._reader = geoip2.database.Reader(self._db_path)
                self._logger.info("maxmind_database_opened", db_path=self._db_path)
            return self._reader

    def close(self) -> None:
        """Close the database reader if it is open."""
        with self._lock:
            if self._reader is not None:
                self._reader.close()
                self._reader = None
                self._logger.info("maxmind_database_closed")

    def geolocate(self, ip_address: str) -> OperationResult:
        """Geolocate an IP address.

        Blocking: call through ``asyncio.to_thread`` from async code.

        Args:
            ip_address: IPv4 or IPv6 address to geolocate

        Returns:
            OperationResult with GeoLocationData.to_dict() data or error
        """
        log = self._logger.bind(client_ip=ip_address)
        log.debug("geolocating_ip")

        try:
            reader = self._get_reader()
            try:
                response = reader.city(ip_address)

                location = GeoLocationData(
                    country_code=response.country.iso_code,
                    city=response.city.name,
                    region_code=response.subdivisions.most_specific.iso_code,
                    time_zone=response.location.time_zone,
                )

                log.debug(
                    "geolocation_success",
                    country=location.country_code,
                    region_code=location.region_code,
                )
                return OperationResult.success(
                    data=location.to_dict(), message="IP geolocated successfully"
                )

            except AddressNotFoundError:
                log.info("ip_not_found")
                return OperationResult.not_found(
                    message="IP address not found in database",
                    error_code="IP_NOT_FOUND",
                )

            except ValueError as e:
                log.warning("invalid_ip_format", error=str(e))
                return OperationResult.permanent_error(
                    message="Invalid IP address format",
                    error_code="INVALID_IP_FORMAT",
                )

            except GeoIP2Error as e:
                log.error("geoip2_error", error=str(e))
                return OperationResult.transient_error(
                    message=f"GeoIP2 database error: {str(e)}",
                    error_code="GEOIP2_ERROR",
                )

        except (FileNotFoundError, IOError) as e:
            log.error("database_file_error", error=str(e), db_path=self._db_path)
            return OperationResult.transient_error(
                message=f"MaxMind database file error: {str(e)}",
                error_code="DB_FILE_ERROR",
            )

        except Exception as e:  # pylint: disable=broad-except
            log.exception("unexpected_error", error=str(e))
            return OperationResult.transient_error(
                message=f"Unexpected error during geolocation: {str(e)}",
                error_code="UNEXPECTED_ERROR",
            )

    def healthcheck(self) -> OperationResult:
        """Check that the database can be opened and queried.

        Returns:
            OperationResult indicating health status
        """
        log = self._logger.bind(operation="healthcheck")
        result = self.geolocate(HEALTHCHECK_IP)

        if result.is_success:
            log.debug("healthcheck_success")
            return OperationResult.success(
                data={"status": "healthy", "db_path": self._db_path},
                message="MaxMind database is accessible",
            )
        log.error("healthcheck_failed", error=result.message)
        return OperationResult.permanent_error(
            message=f"MaxMind healthcheck failed: {result.message}",
            error_code="HEALTHCHECK_FAILED",
        )
