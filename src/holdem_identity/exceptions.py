"""Identity and authentication exceptions.

These exceptions are raised by the holdem_identity package and should be
caught and handled by the presentation layer. Every exception carries a
stable error code so the API can map it to a response category.
"""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Stable error codes for API clients.

    These codes are part of the public API contract. Should not be changed.
    """

    # Validation Errors
    VALIDATION_ERROR = "VALIDATION_ERROR"
    MANDATORY_FIELDS_MISSING = "MANDATORY_FIELDS_MISSING"
    WEAK_PASSWORD = "WEAK_PASSWORD"

    # Conflict Errors
    CONFLICT = "CONFLICT"
    USER_ALREADY_EXISTS = "USER_ALREADY_EXISTS"

    # Authentication Errors
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    INVALID_TOKEN = "INVALID_TOKEN"

    # Not Found Errors
    USER_NOT_FOUND = "USER_NOT_FOUND"

    # General Errors
    INTERNAL_ERROR = "INTERNAL_ERROR"


class IdentityError(Exception):
    """Base exception for all identity-related errors.

    Attributes
    ----------
    message
        Human-readable error message (safe for end users)
    code
        Stable error code for programmatic handling
    details
        Optional additional context (logged but not exposed to users)
    """

    def __init__(
        self,
        message: str = "Identity error",
        code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"code={self.code.value!r}, "
            f"details={self.details!r})"
        )


class ValidationError(IdentityError):
    """Raised when input is malformed or incomplete."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.VALIDATION_ERROR,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)


class ConflictError(IdentityError):
    """Raised when an operation conflicts with existing state."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.CONFLICT,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)


class AuthError(IdentityError):
    """Base exception for all authentication errors."""

    def __init__(
        self,
        message: str = "Authentication error",
        code: ErrorCode = ErrorCode.INVALID_CREDENTIALS,
    ):
        super().__init__(message, code)


class InvalidCredentialsError(AuthError):
    """Raised when the user id or password is incorrect during sign in.

    The message is identical for an unknown id and a wrong password.
    """

    def __init__(self, message: str = "Wrong user name or password"):
        super().__init__(message, ErrorCode.INVALID_CREDENTIALS)


class InvalidTokenError(AuthError):
    """Raised when a session token is missing, invalid, expired, or malformed."""

    def __init__(self, message: str = "Invalid or expired token"):
        super().__init__(message, ErrorCode.INVALID_TOKEN)


class WeakPasswordError(ValidationError):
    """Raised when a password doesn't meet the hashing requirements."""

    def __init__(self, message: str = "Password does not meet requirements"):
        super().__init__(message, ErrorCode.WEAK_PASSWORD)
