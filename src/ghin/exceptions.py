"""Centralized error definitions for the GHIN client."""

from dataclasses import dataclass
from typing import Any

import pydantic
import requests

from ghin.error_codes import ErrorCode


@dataclass
class GhinError(Exception):
    """Base exception for all GHIN client errors."""
    message: str
    code: ErrorCode
    details: dict[str, Any] | None = None

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} (Code: {self.code.value}, Details: {self.details})"
        return f"{self.message} (Code: {self.code.value})"

class APIError(GhinError):
    """Base class for API-related errors."""
    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.REQUEST_FAILED,
        response: requests.Response | None = None,
        details: dict[str, Any] | None = None
    ):
        super().__init__(message, code, details)
        self.response = response

class APITimeoutError(APIError):
    """API timeout error."""
    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message, ErrorCode.TIMEOUT, details=details)

class APIResponseError(APIError):
    """API response error."""
    def __init__(self, message: str, response: requests.Response | None = None):
        super().__init__(message, ErrorCode.INVALID_RESPONSE, response=response)

class APIValidationError(APIError):
    """Response body could not be parsed or did not match its schema."""
    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message, ErrorCode.VALIDATION_FAILED, details=details)

class AuthError(APIError):
    """Authentication error."""
    def __init__(self, message: str, response: requests.Response | None = None):
        super().__init__(message, ErrorCode.AUTH_FAILED, response=response)

class ConfigError(GhinError):
    """Configuration error."""
    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message, ErrorCode.CONFIG_INVALID, details)

class ValidationError(GhinError):
    """Invalid argument passed to a client method."""
    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message, ErrorCode.VALIDATION_FAILED, details)

def validation_details(error: pydantic.ValidationError) -> dict[str, Any]:
    """Condense a pydantic error into the ``details`` mapping of a GhinError."""
    return {
        "errors": [
            {"loc": list(item["loc"]), "msg": item["msg"], "type": item["type"]}
            for item in error.errors(include_url=False)
        ]
    }
