"""Cuey API error types"""

import logging
from enum import Enum
from typing import Any, Optional


logger = logging.getLogger(__name__)


class ErrorCode(str, Enum):
    """Error codes returned by the API"""
    UNAUTHORIZED = "UNAUTHORIZED"
    NOT_FOUND = "NOT_FOUND"
    BAD_REQUEST = "BAD_REQUEST"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"


class CueyError(Exception):
    """
    Base error for Cuey API failures

    Every error carries a stable code, the HTTP status it maps to and
    optional structured details from the server or the validator.
    """

    code: ErrorCode = ErrorCode.INTERNAL_SERVER_ERROR
    status_code: int = 500
    default_message: str = "An internal server error occurred."

    def __init__(self, message: Optional[str] = None, details: Any = None):
        self.message = message or self.default_message
        self.details = details
        super().__init__(self.message)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(message={self.message!r}, "
            f"code={self.code.value!r}, status_code={self.status_code})"
        )


class UnauthorizedError(CueyError):
    """Invalid or missing API key (401)"""
    code = ErrorCode.UNAUTHORIZED
    status_code = 401
    default_message = "Unauthorized. Invalid or missing API key."


class NotFoundError(CueyError):
    """Resource not found (404)"""
    code = ErrorCode.NOT_FOUND
    status_code = 404
    default_message = "Resource not found."


class BadRequestError(CueyError):
    """Request rejected by the server (400)"""
    code = ErrorCode.BAD_REQUEST
    status_code = 400
    default_message = "Bad request"


class ValidationError(CueyError):
    """Request validation failed, client-side or server-side (400)"""
    code = ErrorCode.VALIDATION_ERROR
    status_code = 400
    default_message = "Validation error"


class InternalServerError(CueyError):
    """Server error (5xx), unmapped status or unreadable response"""
    code = ErrorCode.INTERNAL_SERVER_ERROR
    status_code = 500
    default_message = "An internal server error occurred."


class ConfigurationError(Exception):
    """Client is missing configuration required to make a request"""


_STATUS_ERRORS = {
    401: UnauthorizedError,
    404: NotFoundError,
}


def error_from_response(status_code: int, body: Any) -> CueyError:
    """
    Map a non-2xx response to a typed error

    Args:
        status_code: HTTP status of the response
        body: Decoded response body (dict for JSON, str otherwise)

    Returns:
        The matching CueyError instance
    """
    error_data = body.get("error") if isinstance(body, dict) else None
    if not isinstance(error_data, dict):
        error_data = {}

    message = error_data.get("message")
    details = error_data.get("details")

    if status_code in _STATUS_ERRORS:
        error = _STATUS_ERRORS[status_code](message, details)
    elif status_code == 400:
        if error_data.get("code") == ErrorCode.VALIDATION_ERROR.value:
            error = ValidationError(message, details)
        else:
            error = BadRequestError(message, details)
    elif status_code >= 500:
        error = InternalServerError(message, details)
    else:
        error = InternalServerError(f"Unexpected error: {status_code}", details)

    logger.debug("HTTP %s mapped to %s", status_code, error.code.value)
    return error
