"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from holdem_identity.domain.user.aggregates.user import User


class UserRepository(ABC):
    """Repository interface for User aggregates.

    A plain keyed store: uniqueness of ids on sign up is decided by the
    caller through ``add``, which must insert atomically or not at all.
    Implementations may be durable or in-memory.
    """

    @abstractmethod
    async def find_by_id(self, user_id: str) -> Optional[User]:
        """Find a user by their ID."""

    @abstractmethod
    async def save(self, user: User) -> None:
        """Insert or overwrite a user."""

    @abstractmethod
    async def add(self, user: User) -> bool:
        """Insert a user only if the ID is free.

        Returns False, leaving the store unchanged, when a user with the
        same ID already exists.
        """

    @abstractmethod
    async def delete(self, user_id: str) -> bool:
        """Delete a user by ID. Returns True if a user was removed."""

    @abstractmethod
    async def delete_all(self) -> int:
        """Delete every user. Returns the number of removed users."""

    @abstractmethod
    async def count(self) -> int:
        """Count total users."""

    @abstractmethod
    async def list_all(self) -> list[User]:
        """List all users."""
