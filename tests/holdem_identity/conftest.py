"""
Pytest configuration for holdem_identity domain tests.

This conftest provides fixtures specific to the holdem_identity domain
(users, authentication).
"""

from datetime import date

import pytest

from holdem_identity.domain.user import User


@pytest.fixture
def test_user() -> User:
    """Create a standard test user."""
    return User.create(
        "charizard@pokemon.com",
        "Charizard",
        "$2b$04$hashed.placeholder.value",
        date(1995, 8, 30),
    )


@pytest.fixture
def other_user() -> User:
    """Create a second test user."""
    return User.create(
        "charmander@pokemon.com",
        "Charmander",
        "$2b$04$another.placeholder.value",
    )
