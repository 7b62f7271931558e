"""User aggregate for identity concerns only."""

from datetime import date, datetime, timezone

from holdem_identity.domain.user.exceptions import MissingMandatoryFieldsError


def _utc_now() -> datetime:
    return datetime.now(tz=timezone.utc)


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


class User:
    """
    User aggregate root.

    Holds the registered identity together with the hash of its secret.
    The hash is never part of ``repr`` and is never serialized outward.
    """

    def __init__(
        self,
        id: str,
        name: str,
        password_hash: str,
        date_of_birth: date | None = None,
        created_at: datetime | None = None,
    ):
        self._id = id
        self._name = name
        self._password_hash = password_hash
        self._date_of_birth = date_of_birth
        self._created_at = created_at or _utc_now()

    @property
    def id(self) -> str:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def password_hash(self) -> str:
        return self._password_hash

    @property
    def date_of_birth(self) -> date | None:
        return self._date_of_birth

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @staticmethod
    def check_mandatory_fields(
        user_id: str | None,
        name: str | None,
        secret: str | None,
    ) -> None:
        """Raise MissingMandatoryFieldsError if any field is empty."""
        missing = [
            field
            for field, value in (
                ("id", user_id),
                ("name", name),
                ("password", secret),
            )
            if _is_blank(value)
        ]
        if missing:
            raise MissingMandatoryFieldsError(missing)

    @classmethod
    def create(
        cls,
        user_id: str,
        name: str,
        password_hash: str,
        date_of_birth: date | None = None,
    ) -> "User":
        """Create a new user, rejecting empty mandatory fields."""
        cls.check_mandatory_fields(user_id, name, password_hash)

        return cls(
            id=user_id,
            name=name,
            password_hash=password_hash,
            date_of_birth=date_of_birth,
        )

    @classmethod
    def reconstitute(
        cls,
        id: str,
        name: str,
        password_hash: str,
        date_of_birth: date | None,
        created_at: datetime,
    ) -> "User":
        return cls(
            id=id,
            name=name,
            password_hash=password_hash,
            date_of_birth=date_of_birth,
            created_at=created_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"User(id={self._id!r}, name={self._name!r})"
