"""SQLAlchemy implementation of UserRepository."""

import logging

from sqlalchemy import delete, func, insert, select
from sqlalchemy.dialects.postgresql import insert as postgresql_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from holdem_identity.domain.user import User, UserRepository
from holdem_identity.infrastructure.persistence.sqlalchemy.models import UserModel

logger = logging.getLogger(__name__)

# Dialects with a native single-statement insert-if-absent
_CONFLICT_FREE_INSERTS = {
    "postgresql": postgresql_insert,
    "sqlite": sqlite_insert,
}


class UserRepositorySQLAlchemy(UserRepository):
    """SQLAlchemy implementation of the UserRepository interface.

    Changes are flushed, not committed. The caller owns the transaction.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, user_id: str) -> User | None:
        model = await self._find_model_by_id(user_id)

        if model is None:
            return None

        return self._map_to_domain(model)

    async def save(self, user: User) -> None:
        existing = await self._find_model_by_id(user.id)

        if existing:
            self._update_model(existing, user)
            logger.debug("Updated user: %s", user.id)
        else:
            self._session.add(self._map_to_model(user))
            logger.info("Created user: %s", user.id)

        await self._session.flush()

    async def add(self, user: User) -> bool:
        values = self._map_to_row(user)
        insert_factory = _CONFLICT_FREE_INSERTS.get(self._dialect_name())

        if insert_factory is not None:
            stmt = insert_factory(UserModel.__table__).values(**values)
            stmt = stmt.on_conflict_do_nothing(index_elements=["id"])
            result = await self._session.execute(stmt)
            created = result.rowcount == 1
        else:
            # Other backends: the primary key rejects the duplicate and the
            # savepoint keeps the outer transaction usable.
            try:
                async with self._session.begin_nested():
                    await self._session.execute(
                        insert(UserModel.__table__).values(**values),
                    )
                created = True
            except IntegrityError:
                created = False

        if created:
            logger.info("Created user: %s", user.id)
        else:
            logger.debug("Insert rejected, user exists: %s", user.id)
        return created

    async def delete(self, user_id: str) -> bool:
        model = await self._find_model_by_id(user_id)

        if model is None:
            return False

        await self._session.delete(model)
        await self._session.flush()
        logger.info("Deleted user: %s", user_id)
        return True

    async def delete_all(self) -> int:
        result = await self._session.execute(delete(UserModel))
        await self._session.flush()
        removed = result.rowcount or 0
        logger.info("Deleted all users (%d rows)", removed)
        return removed

    async def count(self) -> int:
        stmt = select(func.count()).select_from(UserModel)
        result = await self._session.execute(stmt)
        return result.scalar_one()

    async def list_all(self) -> list[User]:
        stmt = select(UserModel).order_by(UserModel.created_at, UserModel.id)
        result = await self._session.execute(stmt)
        models = result.scalars().all()
        return [self._map_to_domain(model) for model in models]

    async def _find_model_by_id(self, user_id: str) -> UserModel | None:
        return await self._session.get(UserModel, user_id)

    def _map_to_domain(self, model: UserModel) -> User:
        return User.reconstitute(
            id=model.id,
            name=model.name,
            password_hash=model.password_hash,
            date_of_birth=model.date_of_birth,
            created_at=model.created_at,
        )

    def _dialect_name(self) -> str:
        return self._session.get_bind().dialect.name

    def _map_to_row(self, user: User) -> dict:
        return {
            "id": user.id,
            "name": user.name,
            "password_hash": user.password_hash,
            "date_of_birth": user.date_of_birth,
            "created_at": user.created_at,
            "updated_at": user.created_at,
        }

    def _map_to_model(self, user: User) -> UserModel:
        return UserModel(
            id=user.id,
            name=user.name,
            password_hash=user.password_hash,
            date_of_birth=user.date_of_birth,
            created_at=user.created_at,
        )

    def _update_model(self, model: UserModel, user: User) -> None:
        model.name = user.name
        model.password_hash = user.password_hash
        model.date_of_birth = user.date_of_birth
