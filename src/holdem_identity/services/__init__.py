"""Authentication services.

Provides password hashing and session token management.
"""

from holdem_identity.services.jwt_service import JWTService
from holdem_identity.services.password_service import PasswordHashingService

__all__ = [
    "JWTService",
    "PasswordHashingService",
]
