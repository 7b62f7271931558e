"""FastAPI dependency injection for the holdem API.

Provides dependencies for:
- Database sessions and the user store
- Authentication services (password hashing, session tokens)
- The request gate resolving the current user from a bearer token
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Annotated, AsyncGenerator

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from holdem.presentation.api.config import get_api_settings
from holdem_config.settings import Settings
from holdem_identity import (
    AuthenticationService,
    InvalidTokenError,
    JWTService,
    PasswordHashingService,
    UserContext,
    UserRepository,
)
from holdem_identity.infrastructure.persistence.sqlalchemy import (
    IdentityBase,
    UserRepositorySQLAlchemy,
)

logger = logging.getLogger(__name__)

# Database URL selecting the process-local in-memory user store
MEMORY_DATABASE_URL = "memory://"

# Security scheme for bearer tokens in the Authorization header
security = HTTPBearer(auto_error=False)

SettingsDep = Annotated[Settings, Depends(get_api_settings)]


def uses_memory_store(settings: Settings) -> bool:
    return settings.database_url == MEMORY_DATABASE_URL


def _ensure_sqlite_directory(url: str) -> None:
    if url.startswith("sqlite") and ":memory:" not in url:
        db_path = url.split("///")[-1]
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)


# -----------------------------------------------------------------------------
# Database Engine & Session (one per database URL)
# -----------------------------------------------------------------------------


@lru_cache()
def get_engine(database_url: str) -> AsyncEngine:
    """
    Get the shared async database engine for a URL.

    The engine manages the connection pool and is reused across all requests.

    Returns
    -------
    AsyncEngine instance
    """
    _ensure_sqlite_directory(database_url)
    return create_async_engine(
        database_url,
        echo=False,
        pool_pre_ping=True,  # Verify connections before use
    )


@lru_cache()
def get_session_maker(database_url: str) -> async_sessionmaker[AsyncSession]:
    """Get the shared async session maker for a URL."""
    return async_sessionmaker(
        get_engine(database_url),
        class_=AsyncSession,
        expire_on_commit=False,
    )


# -----------------------------------------------------------------------------
# Database Schema Management
# -----------------------------------------------------------------------------


async def create_tables(engine: AsyncEngine) -> None:
    """
    Create all identity tables (idempotent).

    Uses SQLAlchemy's create_all() which only creates missing tables.
    """
    logger.info("Ensuring all database tables exist...")

    async with engine.begin() as conn:
        await conn.run_sync(IdentityBase.metadata.create_all)

    logger.info("Database schema is up to date (missing tables created if needed)")


# -----------------------------------------------------------------------------
# User Store
# -----------------------------------------------------------------------------


async def get_user_repository(
    request: Request,
    settings: SettingsDep,
) -> AsyncGenerator[UserRepository, None]:
    """
    User store dependency.

    The in-memory store lives on the application state. The SQL store
    gets a session per request that is committed when the request
    succeeds and rolled back when it raises. The commit finishes before
    the response is sent, so a 200 always means the change is stored.
    """
    if uses_memory_store(settings):
        yield request.app.state.user_repository
        return

    async with get_session_maker(settings.database_url)() as session:
        try:
            yield UserRepositorySQLAlchemy(session)
            await session.commit()
        except Exception:
            await session.rollback()
            raise


# "function" scope runs the commit when the handler returns, not after
# the response has gone out
UserRepo = Annotated[
    UserRepository,
    Depends(get_user_repository, scope="function"),
]


# -----------------------------------------------------------------------------
# Authentication Services
# -----------------------------------------------------------------------------


def get_jwt_service(settings: SettingsDep) -> JWTService:
    """Get JWT service configured with API settings."""
    return JWTService(
        secret_key=settings.jwt_secret_key.get_secret_value(),
        access_token_expire_hours=settings.jwt_access_token_expire_hours,
        algorithm=settings.jwt_algorithm,
    )


def get_password_service(settings: SettingsDep) -> PasswordHashingService:
    """Get password hashing service."""
    return PasswordHashingService(rounds=settings.password_hash_rounds)


def get_authentication_service(
    user_repo: UserRepo,
    jwt_service: JWTService = Depends(get_jwt_service),
    password_service: PasswordHashingService = Depends(get_password_service),
) -> AuthenticationService:
    """
    Get authentication service with all dependencies.

    This service orchestrates sign up, sign in, and token checks.
    """
    return AuthenticationService(
        user_repository=user_repo,
        password_service=password_service,
        jwt_service=jwt_service,
    )


# Type alias for injected auth service
AuthService = Annotated[AuthenticationService, Depends(get_authentication_service)]


# -----------------------------------------------------------------------------
# Current User (request gate)
# -----------------------------------------------------------------------------


async def get_current_user(
    auth_service: AuthService,
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
) -> UserContext:
    """
    FastAPI dependency to get the current authenticated user from a token.

    Extracts the bearer token from the Authorization header, verifies
    its signature and expiry, then resolves the user it was issued for.
    Protected handlers never run when this dependency rejects.

    Returns
    -------
    UserContext of the authenticated user

    Raises
    ------
    HTTPException
        401 if token is missing, invalid, expired, or the user is gone
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        return await auth_service.authenticate(credentials.credentials)
    except InvalidTokenError as e:
        logger.warning("Rejected token: %s", e)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"},
        ) from e


# Type alias for injected current user
CurrentUser = Annotated[UserContext, Depends(get_current_user)]
