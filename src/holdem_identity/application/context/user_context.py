"""User context for request-scoped user identity."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from holdem_identity.domain.user import User


@dataclass(frozen=True)
class UserContext:
    """Immutable context for the current authenticated user."""

    user_id: str
    name: str
    token_expires_at: datetime | None = None

    @classmethod
    def create(
        cls,
        user: User,
        token_expires_at: datetime | None = None,
    ) -> UserContext:
        return cls(
            user_id=user.id,
            name=user.name,
            token_expires_at=token_expires_at,
        )

    def __str__(self) -> str:
        return f"UserContext({self.user_id})"
