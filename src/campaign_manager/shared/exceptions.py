"""
Domain exceptions for the application.

Every operation either returns a value or raises exactly one ``AppError``
subclass; ``code`` is the closed error tag surfaced to API clients.
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Error tags returned to callers."""

    NOT_FOUND = "NotFound"
    INVALID_PAYLOAD = "InvalidPayload"
    UNAUTHORIZED = "Unauthorized"
    VALIDATION_ERROR = "ValidationError"


class AppError(Exception):
    """Base exception for application errors."""

    code: ErrorCode

    def __init__(self, message: str, code: ErrorCode) -> None:
        self.message = message
        self.code = code
        super().__init__(message)

    def to_dict(self) -> dict[str, str]:
        return {"code": self.code.value, "message": self.message}


class NotFoundError(AppError):
    """Lookup miss or empty result set."""

    def __init__(self, message: str) -> None:
        super().__init__(message, ErrorCode.NOT_FOUND)


class InvalidPayloadError(AppError):
    """Missing or empty required field, or non-positive amount."""

    def __init__(self, message: str) -> None:
        super().__init__(message, ErrorCode.INVALID_PAYLOAD)


class UnauthorizedError(AppError):
    """Caller could not be resolved or lacks the required role."""

    def __init__(self, message: str) -> None:
        super().__init__(message, ErrorCode.UNAUTHORIZED)


class ValidationError(AppError):
    """Uniqueness violation."""

    def __init__(self, message: str) -> None:
        super().__init__(message, ErrorCode.VALIDATION_ERROR)
