"""Custom exceptions for the Frinkiac client with proper HTTP status codes."""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Error codes for structured error responses."""

    # Generic errors
    FRINKIAC_ERROR = "FRINKIAC_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"

    # Upstream API errors
    FRINKIAC_API_ERROR = "FRINKIAC_API_ERROR"
    FRINKIAC_NETWORK_ERROR = "FRINKIAC_NETWORK_ERROR"
    FRINKIAC_PARSE_ERROR = "FRINKIAC_PARSE_ERROR"

    # Layout errors
    LAYOUT_ERROR = "LAYOUT_ERROR"
    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    DIVISION_BY_ZERO = "DIVISION_BY_ZERO"


class FrinkiacException(Exception):
    """Base exception for Frinkiac client errors with HTTP status code support.

    All custom exceptions should inherit from this class to ensure
    consistent error handling across the application.
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.FRINKIAC_ERROR,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        """Initialize Frinkiac exception.

        Args:
            message: Human-readable error message
            code: Error code from ErrorCode enum
            status_code: HTTP status code (default 500)
            details: Additional error context/details
        """
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)


class FrinkiacAPIException(FrinkiacException):
    """Frinkiac API request failed."""

    def __init__(self, message: str, status_code: int = 502, details: dict[str, Any] | None = None):
        super().__init__(
            message,
            code=ErrorCode.FRINKIAC_API_ERROR,
            status_code=status_code,
            details=details,
        )


class LayoutException(FrinkiacException):
    """Grid layout errors."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.LAYOUT_ERROR,
        status_code: int = 400,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code, status_code, details)


class InvalidArgumentError(LayoutException, ValueError):
    """A layout input is outside its valid domain."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(
            message,
            code=ErrorCode.INVALID_ARGUMENT,
            status_code=400,
            details=details,
        )


class DivisionByZeroError(LayoutException, ZeroDivisionError):
    """A scale factor would be computed against a zero denominator."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(
            message,
            code=ErrorCode.DIVISION_BY_ZERO,
            status_code=400,
            details=details,
        )
