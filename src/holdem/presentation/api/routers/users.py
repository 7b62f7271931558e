"""User router for sign up, sign in and identity lookup."""

import logging

from fastapi import APIRouter

from holdem.presentation.api.dependencies import AuthService, CurrentUser
from holdem.presentation.api.schemas.users import (
    SignInRequest,
    SignUpRequest,
    TokenResponse,
    UserResponse,
)
from holdem_identity import IssuedToken, User

logger = logging.getLogger(__name__)

router = APIRouter()


def _to_user_response(user: User) -> UserResponse:
    return UserResponse(
        id=user.id,
        name=user.name,
        date_of_birth=user.date_of_birth,
    )


def _to_token_response(issued: IssuedToken) -> TokenResponse:
    return TokenResponse(
        token=issued.token,
        user_id=issued.user_id,
        issued_at=issued.issued_at,
        expires_at=issued.expires_at,
        expires_in=issued.expires_in,
    )


@router.put(
    "/signup",
    summary="Register a new user",
    responses={
        200: {"description": "User registered successfully"},
        400: {"description": "Mandatory fields missing or user already registered"},
    },
)
async def sign_up(request: SignUpRequest, auth_service: AuthService) -> UserResponse:
    """
    Register a user with id, password, name and date of birth.

    The password is stored as a salted hash and never returned.
    """
    user = await auth_service.sign_up(
        user_id=request.id,
        password=request.pwd,
        name=request.name,
        date_of_birth=request.date_of_birth,
    )
    return _to_user_response(user)


@router.post(
    "/signin",
    summary="Authenticate user",
    responses={
        200: {"description": "Sign in successful, token issued"},
        400: {"description": "Wrong user name or password"},
    },
)
async def sign_in(request: SignInRequest, auth_service: AuthService) -> TokenResponse:
    """
    Authenticate with id and password.

    Returns a session token to send as ``Authorization: Bearer <token>``
    on later requests.
    """
    _, issued = await auth_service.sign_in(
        user_id=request.id,
        password=request.pwd,
    )
    return _to_token_response(issued)


@router.get(
    "/me",
    summary="Get current user",
    responses={
        200: {"description": "Current user data"},
        401: {"description": "Not authenticated"},
    },
)
async def get_me(current_user: CurrentUser, auth_service: AuthService) -> UserResponse:
    """Get the authenticated caller's own information."""
    user = await auth_service.get_user(current_user.user_id)
    return _to_user_response(user)


@router.get(
    "/{user_id}/info",
    summary="Get user information",
    responses={
        200: {"description": "User data"},
        401: {"description": "Not authenticated"},
        404: {"description": "User not found"},
    },
)
async def get_user_info(
    user_id: str,
    current_user: CurrentUser,
    auth_service: AuthService,
) -> UserResponse:
    """
    Get a user's public information.

    Requires a valid token in the Authorization header.
    """
    logger.debug("User info for %s requested by %s", user_id, current_user.user_id)
    user = await auth_service.get_user(user_id)
    return _to_user_response(user)
