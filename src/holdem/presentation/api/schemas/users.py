"""User schemas for request/response models."""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field


class SignUpRequest(BaseModel):
    """Request schema for user sign up.

    Empty strings are accepted here on purpose so that the service can
    answer with its own mandatory-fields error.
    """

    id: str = Field(default="", description="Unique user id, e.g. an email")
    pwd: str = Field(default="", description="Password", repr=False)
    name: str = Field(default="", description="Display name")
    date_of_birth: date | None = Field(default=None, alias="dateOfBirth")

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "id": "charizard@pokemon.com",
                "pwd": "Roarrr",
                "name": "Charizard",
                "dateOfBirth": "1995-08-30",
            },
        },
    )


class SignInRequest(BaseModel):
    """Request schema for user sign in."""

    id: str = ""
    pwd: str = Field(default="", repr=False)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "charizard@pokemon.com",
                "pwd": "Roarrr",
            },
        },
    )


class UserResponse(BaseModel):
    """Response schema for user data. Never carries the password."""

    id: str
    name: str
    date_of_birth: date | None = Field(default=None, alias="dateOfBirth")

    model_config = ConfigDict(populate_by_name=True)


class TokenResponse(BaseModel):
    """Response schema for an issued session token."""

    token: str
    token_type: str = Field(default="bearer")
    user_id: str
    issued_at: datetime
    expires_at: datetime
    expires_in: int

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
                "token_type": "bearer",
                "user_id": "charizard@pokemon.com",
                "issued_at": "2024-12-05T10:30:00Z",
                "expires_at": "2024-12-06T10:30:00Z",
                "expires_in": 86400,
            },
        },
    )
