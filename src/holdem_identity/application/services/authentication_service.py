"""Authentication service for user sign up, sign in and token checks."""

from __future__ import annotations

import asyncio
import logging
from datetime import date
from typing import TYPE_CHECKING

from holdem_identity.application.context import UserContext
from holdem_identity.domain.user import (
    User,
    UserAlreadyExistsError,
    UserNotFoundError,
)
from holdem_identity.exceptions import InvalidCredentialsError, InvalidTokenError
from holdem_identity.schemas import IssuedToken
from holdem_identity.services import JWTService, PasswordHashingService

if TYPE_CHECKING:
    from holdem_identity.domain.user import UserRepository

logger = logging.getLogger(__name__)


class AuthenticationService:
    """
    Application service for user authentication.

    Orchestrates password hashing and session tokens with the User
    domain to provide:
    - Sign up with uniqueness and mandatory field checks
    - Sign in with password, returning a session token
    - Resolving a presented token to the calling user
    - Administrative removal of users
    """

    def __init__(
        self,
        user_repository: UserRepository,
        password_service: PasswordHashingService,
        jwt_service: JWTService,
    ):
        self._user_repo = user_repository
        self._password_service = password_service
        self._jwt_service = jwt_service

    async def sign_up(
        self,
        user_id: str,
        password: str,
        name: str,
        date_of_birth: date | None = None,
    ) -> User:
        """Register a new user.

        Raises
        ------
        MissingMandatoryFieldsError
            If id, name or password is empty
        WeakPasswordError
            If the password cannot be hashed
        UserAlreadyExistsError
            If the id is already registered
        """
        User.check_mandatory_fields(user_id, name, password)

        # A taken id wins over every other problem with the request
        if await self._user_repo.find_by_id(user_id) is not None:
            logger.info("Sign up rejected, user already registered: %s", user_id)
            raise UserAlreadyExistsError(user_id)

        # bcrypt runs in a worker thread
        password_hash = await asyncio.to_thread(self._password_service.hash, password)
        user = User.create(
            user_id=user_id,
            name=name,
            password_hash=password_hash,
            date_of_birth=date_of_birth,
        )

        # Another sign up may have taken the id while we were hashing
        if not await self._user_repo.add(user):
            logger.info("Sign up rejected, user already registered: %s", user_id)
            raise UserAlreadyExistsError(user_id)

        logger.info("User signed up: %s", user_id)
        return user

    async def sign_in(
        self,
        user_id: str,
        password: str,
    ) -> tuple[User, IssuedToken]:
        """Check credentials and mint a session token.

        Unknown ids and wrong passwords raise the same error after the
        same amount of hashing work.
        """
        user = await self._user_repo.find_by_id(user_id) if user_id else None

        matched = await asyncio.to_thread(self._check_password, password, user)
        if user is None:
            logger.warning("Sign in failed for unknown user: %s", user_id)
            raise InvalidCredentialsError
        if not matched:
            logger.warning("Sign in failed for user: %s", user_id)
            raise InvalidCredentialsError

        issued = self._jwt_service.issue_token(user.id)

        logger.info("User signed in: %s", user_id)
        return user, issued

    def _check_password(self, password: str, user: User | None) -> bool:
        if user is None:
            self._password_service.verify(password, self._password_service.dummy_hash())
            return False
        return self._password_service.verify(password, user.password_hash)

    async def authenticate(self, token: str) -> UserContext:
        """Resolve a session token to the user it was issued for.

        Raises
        ------
        InvalidTokenError
            If the token is missing, invalid, expired, or its user is gone
        """
        if not token:
            msg = "Missing token"
            raise InvalidTokenError(msg)

        payload = self._jwt_service.verify_token(token)
        if not payload.is_access_token():
            msg = "Invalid token type"
            raise InvalidTokenError(msg)

        user = await self._user_repo.find_by_id(payload.user_id)
        if user is None:
            msg = "User not found"
            raise InvalidTokenError(msg)

        return UserContext.create(user, token_expires_at=payload.exp)

    async def get_user(self, user_id: str) -> User:
        user = await self._user_repo.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    async def delete_user(self, user_id: str) -> None:
        if not await self._user_repo.delete(user_id):
            raise UserNotFoundError(user_id)
        logger.info("User deleted: %s", user_id)

    async def delete_all_users(self) -> int:
        removed = await self._user_repo.delete_all()
        logger.warning("Deleted all users (%d removed)", removed)
        return removed

    async def list_users(self) -> list[User]:
        return await self._user_repo.list_all()
