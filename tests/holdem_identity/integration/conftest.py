"""Database fixtures for identity integration tests.

Each test gets a fresh SQLite file in its own temporary directory.
"""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from holdem_identity.infrastructure.persistence.sqlalchemy import IdentityBase


@pytest.fixture
async def db_engine(tmp_path):
    """Create a file-backed SQLite database with the identity schema."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'identity.db'}")

    async with engine.begin() as conn:
        await conn.run_sync(IdentityBase.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_maker(db_engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db_session(session_maker):
    """Create a test database session."""
    async with session_maker() as session:
        yield session
