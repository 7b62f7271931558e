"""In-memory implementation of UserRepository.

Suitable for single-process deployments and tests. Nothing survives a
restart.
"""

import logging

from holdem_identity.domain.user import User, UserRepository

logger = logging.getLogger(__name__)


class InMemoryUserRepository(UserRepository):
    """Dictionary-backed UserRepository keyed by user id.

    None of the methods await between reading and writing the dict, so
    each operation is atomic with respect to other coroutines. ``add``
    relies on ``dict.setdefault`` to insert only when the id is free.
    """

    def __init__(self) -> None:
        self._users: dict[str, User] = {}

    async def find_by_id(self, user_id: str) -> User | None:
        return self._users.get(user_id)

    async def save(self, user: User) -> None:
        self._users[user.id] = user
        logger.debug("Stored user: %s", user.id)

    async def add(self, user: User) -> bool:
        stored = self._users.setdefault(user.id, user)
        return stored is user

    async def delete(self, user_id: str) -> bool:
        removed = self._users.pop(user_id, None)
        return removed is not None

    async def delete_all(self) -> int:
        removed, self._users = len(self._users), {}
        return removed

    async def count(self) -> int:
        return len(self._users)

    async def list_all(self) -> list[User]:
        return sorted(self._users.values(), key=lambda u: (u.created_at, u.id))
