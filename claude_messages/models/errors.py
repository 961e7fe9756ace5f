"""Error types and response models for the Messages API.

Provides error type enums with HTTP status code mapping and
error response structures matching the official API format.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Literal

from ..core.exceptions import MessagesApiError
from .base import WireModel


class ErrorType(StrEnum):
    """Messages API error types with corresponding HTTP status codes.

    - invalid_request_error (400): Invalid request parameters
    - authentication_error (401): Invalid or missing API key
    - permission_error (403): API key lacks permission
    - not_found_error (404): Resource not found
    - request_too_large (413): Request exceeds the maximum size
    - rate_limit_error (429): Rate limit exceeded
    - api_error (500): Internal server error
    - overloaded_error (529): Service overloaded
    """

    INVALID_REQUEST = "invalid_request_error"
    AUTHENTICATION = "authentication_error"
    PERMISSION = "permission_error"
    NOT_FOUND = "not_found_error"
    REQUEST_TOO_LARGE = "request_too_large"
    RATE_LIMIT = "rate_limit_error"
    API = "api_error"
    OVERLOADED = "overloaded_error"

    @property
    def status_code(self) -> int:
        """Get HTTP status code for this error type."""
        return {
            ErrorType.INVALID_REQUEST: 400,
            ErrorType.AUTHENTICATION: 401,
            ErrorType.PERMISSION: 403,
            ErrorType.NOT_FOUND: 404,
            ErrorType.REQUEST_TOO_LARGE: 413,
            ErrorType.RATE_LIMIT: 429,
            ErrorType.API: 500,
            ErrorType.OVERLOADED: 529,
        }[self]


class ErrorDetail(WireModel):
    """Error detail object."""

    type: ErrorType
    message: str


class ErrorResponse(WireModel):
    """Error response body."""

    type: Literal["error"] = "error"
    error: ErrorDetail

    def to_exception(self) -> MessagesApiError:
        """Convert into a raisable ``MessagesApiError``."""
        return MessagesApiError(
            error_type=self.error.type.value,
            message=self.error.message,
            status_code=self.error.type.status_code,
        )
