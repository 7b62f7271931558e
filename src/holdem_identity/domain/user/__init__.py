"""User domain manages registered identities.

This domain handles:
- User aggregate (id, name, date of birth, password hash)
- Sign up validation rules
- The repository contract for identity storage
"""

from holdem_identity.domain.user.aggregates import User
from holdem_identity.domain.user.exceptions import (
    MissingMandatoryFieldsError,
    UserAlreadyExistsError,
    UserNotFoundError,
)
from holdem_identity.domain.user.repositories import UserRepository

__all__ = [
    "MissingMandatoryFieldsError",
    "User",
    "UserAlreadyExistsError",
    "UserNotFoundError",
    "UserRepository",
]
