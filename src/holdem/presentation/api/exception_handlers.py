"""Centralized exception handlers for the FastAPI application.

Identity exceptions are mapped to HTTP responses with a consistent
error format.

Error Response Format:
    {
        "detail": "Human-readable error message",
        "code": "MACHINE_READABLE_ERROR_CODE"
    }

Usage:
    from holdem.presentation.api.exception_handlers import setup_exception_handlers

    app = FastAPI()
    setup_exception_handlers(app)
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from holdem_identity.exceptions import (
    AuthError,
    ConflictError,
    ErrorCode,
    IdentityError,
    ValidationError,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Error Code to HTTP Status Mapping
# =============================================================================

ERROR_CODE_TO_STATUS: dict[ErrorCode, int] = {
    # 400 Bad Request - the client must fix the request
    ErrorCode.VALIDATION_ERROR: status.HTTP_400_BAD_REQUEST,
    ErrorCode.MANDATORY_FIELDS_MISSING: status.HTTP_400_BAD_REQUEST,
    ErrorCode.WEAK_PASSWORD: status.HTTP_400_BAD_REQUEST,
    # Sign up and sign in failures are reported as plain bad requests
    ErrorCode.CONFLICT: status.HTTP_400_BAD_REQUEST,
    ErrorCode.USER_ALREADY_EXISTS: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_CREDENTIALS: status.HTTP_400_BAD_REQUEST,
    # 401 Unauthorized - bad, missing or expired token
    ErrorCode.INVALID_TOKEN: status.HTTP_401_UNAUTHORIZED,
    # 404 Not Found
    ErrorCode.USER_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    # 500 Internal Server Error
    ErrorCode.INTERNAL_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def _get_status_for_exception(exc: IdentityError) -> int:
    """Determine HTTP status code for an identity exception.

    Uses the error code mapping, with fallback based on exception type.
    """
    if exc.code in ERROR_CODE_TO_STATUS:
        return ERROR_CODE_TO_STATUS[exc.code]

    if isinstance(exc, (ValidationError, ConflictError, AuthError)):
        return status.HTTP_400_BAD_REQUEST

    return status.HTTP_500_INTERNAL_SERVER_ERROR


def _create_error_response(
    status_code: int,
    message: str,
    code: str,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    """Create a standardized error response."""
    return JSONResponse(
        status_code=status_code,
        content={
            "detail": message,
            "code": code,
        },
        headers=headers,
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI application.

    Parameters
    ----------
    app
        The FastAPI application instance
    """

    @app.exception_handler(IdentityError)
    async def identity_exception_handler(
        request: Request,
        exc: IdentityError,
    ) -> JSONResponse:
        """Handle all identity exceptions with structured response.

        The details are logged, never returned to the client.
        """
        status_code = _get_status_for_exception(exc)

        logger.warning(
            "Identity exception on %s %s: %s (code=%s, details=%s)",
            request.method,
            request.url.path,
            exc.message,
            exc.code.value,
            exc.details,
        )

        headers = None
        if status_code == status.HTTP_401_UNAUTHORIZED:
            headers = {"WWW-Authenticate": "Bearer"}

        return _create_error_response(
            status_code=status_code,
            message=exc.message,
            code=exc.code.value,
            headers=headers,
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Handle unhandled exceptions with consistent error format."""
        logger.exception(
            "Unhandled exception on %s %s: %s",
            request.method,
            request.url.path,
            exc,
        )
        return _create_error_response(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            message="An internal error occurred",
            code=ErrorCode.INTERNAL_ERROR.value,
        )
