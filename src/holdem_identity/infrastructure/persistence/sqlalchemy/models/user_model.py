"""SQLAlchemy model for User aggregate."""

from datetime import date

from sqlalchemy import Date, String
from sqlalchemy.orm import Mapped, mapped_column

from holdem_identity.infrastructure.persistence.sqlalchemy.base import (
    IdentityBase,
    TimestampMixin,
)


class UserModel(IdentityBase, TimestampMixin):
    """SQLAlchemy model for persisting User aggregates.

    The user id is the primary key, so uniqueness is enforced by the
    database and a row is the only index to remove on delete.

    Table: users
    """

    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String(255), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)

    # Password hash (bcrypt format, ~60 chars)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)

    date_of_birth: Mapped[date | None] = mapped_column(Date, nullable=True)

    def __repr__(self) -> str:
        return f"<UserModel(id={self.id}, name={self.name})>"
