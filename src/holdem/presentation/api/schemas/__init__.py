from holdem.presentation.api.schemas.users import (
    SignInRequest,
    SignUpRequest,
    TokenResponse,
    UserResponse,
)

__all__ = [
    "SignInRequest",
    "SignUpRequest",
    "TokenResponse",
    "UserResponse",
]
