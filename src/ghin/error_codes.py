"""Error codes for the GHIN client."""

from enum import Enum

class ErrorCode(Enum):
    """Enumeration of all possible error codes."""
    # Authentication Errors
    AUTH_FAILED = "auth_failed"

    # API Errors
    REQUEST_FAILED = "request_failed"
    TIMEOUT = "timeout"

    # Data Errors
    INVALID_RESPONSE = "invalid_response"
    VALIDATION_FAILED = "validation_failed"

    # Configuration Errors
    CONFIG_INVALID = "config_invalid"
