"""SQLAlchemy implementation for holdem_identity persistence.

Provides:
- IdentityBase: Declarative base for identity models
- UserModel: SQLAlchemy model for users
- UserRepositorySQLAlchemy: Repository implementation for users

Examples
--------
# When creating the schema:
from holdem_identity.infrastructure.persistence.sqlalchemy import IdentityBase
await conn.run_sync(IdentityBase.metadata.create_all)
"""

from holdem_identity.infrastructure.persistence.sqlalchemy.base import IdentityBase
from holdem_identity.infrastructure.persistence.sqlalchemy.models import UserModel
from holdem_identity.infrastructure.persistence.sqlalchemy.repositories import (
    UserRepositorySQLAlchemy,
)

__all__ = [
    "IdentityBase",
    "UserModel",
    "UserRepositorySQLAlchemy",
]
