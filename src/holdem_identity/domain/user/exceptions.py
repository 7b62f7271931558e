"""User domain exceptions.

Custom exceptions for the user domain, used for validation
and business rule violations.
"""

from holdem_identity.exceptions import (
    ConflictError,
    ErrorCode,
    IdentityError,
    ValidationError,
)


class MissingMandatoryFieldsError(ValidationError):
    """Id, name or password missing on sign up."""

    def __init__(self, fields: list[str] | None = None) -> None:
        self.fields = fields or []
        super().__init__(
            "User details are mandatory for sign up",
            ErrorCode.MANDATORY_FIELDS_MISSING,
            details={"missing": self.fields},
        )


class UserAlreadyExistsError(ConflictError):
    """User id already registered."""

    def __init__(self, user_id: str) -> None:
        self.user_id = user_id
        super().__init__(
            "User is already registered",
            ErrorCode.USER_ALREADY_EXISTS,
            details={"user_id": user_id},
        )


class UserNotFoundError(IdentityError):
    """User not found."""

    def __init__(self, user_id: str) -> None:
        self.user_id = user_id
        super().__init__(
            f"User not found: {user_id}",
            ErrorCode.USER_NOT_FOUND,
        )
