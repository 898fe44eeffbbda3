"""Operation status enumeration.

Status codes for operation results, used to classify outcomes of bundle
fetches and geolocation lookups.
"""

from enum import Enum


class OperationStatus(Enum):
    """Status codes for operation results.

    Attributes:
        SUCCESS: Operation completed successfully
        TRANSIENT_ERROR: Retryable error (unavailable store, I/O failure)
        PERMANENT_ERROR: Non-retryable error (malformed content, invalid input)
        NOT_FOUND: Resource not found
    """

    SUCCESS = "success"
    TRANSIENT_ERROR = "transient_error"
    PERMANENT_ERROR = "permanent_error"
    NOT_FOUND = "not_found"
