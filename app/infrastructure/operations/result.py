"""Operation result dataclass.

Uniform result returned by translation bundle sources and geolocation
clients, carrying status, payload and error information.
"""

from typing import Optional, Any
from dataclasses import dataclass

from infrastructure.operations.status import OperationStatus


@dataclass
class OperationResult:
    """Uniform result returned from operations.

    Attributes:
        status: OperationStatus -- high-level outcome
        message: str -- human-friendly message for logs/troubleshooting
        data: Optional[Any] -- optional payload (a bundle, a location dict)
        error_code: Optional[str] -- optional machine error code
    """

    status: OperationStatus
    message: str
    data: Optional[Any] = None
    error_code: Optional[str] = None

    @property
    def is_success(self) -> bool:
        """True if status is SUCCESS."""
        return self.status == OperationStatus.SUCCESS

    @classmethod
    def success(
        cls, data: Optional[Any] = None, message: str = "ok"
    ) -> "OperationResult":
        """Create a SUCCESS OperationResult with optional data."""
        return cls(status=OperationStatus.SUCCESS, message=message, data=data)

    @classmethod
    def error(
        cls,
        status: OperationStatus,
        message: str,
        error_code: Optional[str] = None,
        data: Optional[Any] = None,
    ) -> "OperationResult":
        """Create an error OperationResult.

        Args:
            status: OperationStatus indicating error type
            message: Human-friendly error message
            error_code: Optional machine error code
            data: Optional payload to include with the error

        Returns:
            OperationResult with specified error status
        """
        return cls(
            status=status,
            message=message,
            error_code=error_code,
            data=data,
        )

    @classmethod
    def not_found(
        cls, message: str, error_code: Optional[str] = None
    ) -> "OperationResult":
        """Create a NOT_FOUND result (missing bundle, unknown IP address)."""
        return cls.error(OperationStatus.NOT_FOUND, message, error_code)

    @classmethod
    def transient_error(
        cls, message: str, error_code: Optional[str] = None
    ) -> "OperationResult":
        """Create a transient (retryable) error result.

        Use for errors that may succeed on retry, such as:
        - A bundle loader raising while its backing store is unavailable
        - An unreadable GeoIP database file

        Args:
            message: Human-friendly error message
            error_code: Optional machine error code

        Returns:
            OperationResult with TRANSIENT_ERROR status
        """
        return cls.error(OperationStatus.TRANSIENT_ERROR, message, error_code)

    @classmethod
    def permanent_error(
        cls, message: str, error_code: Optional[str] = None
    ) -> "OperationResult":
        """Create a permanent (non-retryable) error result.

        Use for errors that will not succeed on retry, such as:
        - Malformed YAML in a translation file
        - A translation document that is not a mapping
        - Invalid IP address input

        Args:
            message: Human-friendly error message
            error_code: Optional machine error code

        Returns:
            OperationResult with PERMANENT_ERROR status
        """
        return cls.error(OperationStatus.PERMANENT_ERROR, message, error_code)
