"""Holdem Identity - user registration, sign in and session tokens.

This package handles all identity-related concerns:
- User management (sign up, lookup, removal)
- Authentication (password verification, session tokens)
- Request gating (resolving a presented token to a user)

Architecture:
    holdem_identity/
    ├── domain/user/        # User aggregate, rules, repository contract
    ├── services/           # Pure logic (password hashing, JWT)
    ├── application/        # AuthenticationService, UserContext
    ├── infrastructure/     # Repository implementations by technology
    ├── schemas.py          # Token data classes
    └── exceptions.py       # Error taxonomy and codes

Usage:
    from holdem_identity import AuthenticationService, JWTService
    from holdem_identity.infrastructure.persistence.sqlalchemy import (
        UserRepositorySQLAlchemy,
    )
"""

from holdem_identity.application.context import UserContext
from holdem_identity.application.services import AuthenticationService
from holdem_identity.domain.user import (
    MissingMandatoryFieldsError,
    User,
    UserAlreadyExistsError,
    UserNotFoundError,
    UserRepository,
)
from holdem_identity.exceptions import (
    AuthError,
    ConflictError,
    ErrorCode,
    IdentityError,
    InvalidCredentialsError,
    InvalidTokenError,
    ValidationError,
    WeakPasswordError,
)
from holdem_identity.schemas import IssuedToken, TokenPayload
from holdem_identity.services import JWTService, PasswordHashingService

__all__ = [
    # Domain - User
    "MissingMandatoryFieldsError",
    "User",
    "UserAlreadyExistsError",
    "UserNotFoundError",
    "UserRepository",
    # Exceptions
    "AuthError",
    "ConflictError",
    "ErrorCode",
    "IdentityError",
    "InvalidCredentialsError",
    "InvalidTokenError",
    "ValidationError",
    "WeakPasswordError",
    # Schemas
    "IssuedToken",
    "TokenPayload",
    # Services
    "JWTService",
    "PasswordHashingService",
    # Application
    "AuthenticationService",
    "UserContext",
]
