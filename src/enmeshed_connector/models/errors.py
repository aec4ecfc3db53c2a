"""Error models for the enmeshed connector client."""
from __future__ import annotations

from enum import Enum
from typing import Any, Optional


class ErrorCode(str, Enum):
    """Local error codes; remote errors keep the Connector's own code."""

    UNKNOWN_ERROR = "UNKNOWN_ERROR"
    API_ERROR = "API_ERROR"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    AUTHENTICATION_ERROR = "AUTHENTICATION_ERROR"
    NOT_FOUND = "NOT_FOUND"
    RATE_LIMIT_EXCEEDED = "RATE_LIMIT_EXCEEDED"
    TIMEOUT = "TIMEOUT"
    CONNECTION_ERROR = "CONNECTION_ERROR"
    MALFORMED_RESPONSE = "MALFORMED_RESPONSE"


class EnmeshedError(Exception):
    """Base exception for the enmeshed connector client."""

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
        request_id: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or ErrorCode.UNKNOWN_ERROR.value
        self.details = details or {}
        self.request_id = request_id

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "details": self.details,
                "request_id": self.request_id,
            }
        }


class APIError(EnmeshedError):
    """Error returned by the Connector API."""

    def __init__(
        self,
        message: str,
        status_code: int,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
        request_id: Optional[str] = None,
    ):
        super().__init__(message, code or ErrorCode.API_ERROR.value, details, request_id)
        self.status_code = status_code

    @classmethod
    def from_response(cls, status_code: int, body: Any) -> "APIError":
        """Create the matching APIError subclass from an HTTP error response.

        The Connector wraps failures as
        ``{"error": {"id", "code", "message", "docs", "time"}}``.
        """
        if isinstance(body, dict):
            error_data = body.get("error", body.get("detail", {}))
        else:
            error_data = body

        if isinstance(error_data, str):
            message, code, details, request_id = error_data, None, {}, None
        elif isinstance(error_data, list):
            message = "Validation Error"
            code = ErrorCode.VALIDATION_ERROR.value
            details = {"errors": error_data}
            request_id = None
        elif isinstance(error_data, dict):
            message = error_data.get("message", "Unknown error")
            code = error_data.get("code")
            details = {
                k: v for k, v in error_data.items() if k in ("docs", "time", "details")
            }
            request_id = error_data.get("id")
        else:
            message, code, details, request_id = "Unknown error", None, {}, None

        if status_code == 400:
            error_cls: type[APIError] = ValidationError
        elif status_code in (401, 403):
            error_cls = AuthenticationError
        elif status_code == 404:
            error_cls = NotFoundError
        elif status_code == 429:
            error_cls = RateLimitError
        else:
            error_cls = APIError

        return error_cls(
            message=message,
            status_code=status_code,
            code=code,
            details=details,
            request_id=request_id,
        )


class ValidationError(APIError):
    """The Connector rejected the request payload."""

    def __init__(self, message: str, status_code: int = 400, code: Optional[str] = None, **kwargs: Any):
        super().__init__(message, status_code, code or ErrorCode.VALIDATION_ERROR.value, **kwargs)


class AuthenticationError(APIError):
    """Authentication error."""

    def __init__(
        self,
        message: str = "Invalid or missing API key",
        status_code: int = 401,
        code: Optional[str] = None,
        **kwargs: Any,
    ):
        super().__init__(message, status_code, code or ErrorCode.AUTHENTICATION_ERROR.value, **kwargs)


class NotFoundError(APIError):
    """Resource not found error."""

    def __init__(self, message: str, status_code: int = 404, code: Optional[str] = None, **kwargs: Any):
        super().__init__(message, status_code, code or ErrorCode.NOT_FOUND.value, **kwargs)


class RateLimitError(APIError):
    """Rate limit exceeded error."""

    def __init__(
        self,
        message: str = "Rate limit exceeded",
        status_code: int = 429,
        code: Optional[str] = None,
        retry_after: Optional[int] = None,
        **kwargs: Any,
    ):
        super().__init__(message, status_code, code or ErrorCode.RATE_LIMIT_EXCEEDED.value, **kwargs)
        self.retry_after = retry_after


class TimeoutError(EnmeshedError):
    """The request timed out after all retries."""

    def __init__(self, message: str = "Request timed out"):
        super().__init__(message, code=ErrorCode.TIMEOUT.value)


class ConnectionError(EnmeshedError):
    """The Connector could not be reached after all retries."""

    def __init__(self, message: str = "Could not connect to the Connector"):
        super().__init__(message, code=ErrorCode.CONNECTION_ERROR.value)


class MalformedResponseError(EnmeshedError):
    """The Connector returned data that breaks the onboarding contract."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message, code=ErrorCode.MALFORMED_RESPONSE.value, details=details)
