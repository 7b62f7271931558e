"""Application services for identity management."""

from holdem_identity.application.services.authentication_service import (
    AuthenticationService,
)

__all__ = ["AuthenticationService"]
