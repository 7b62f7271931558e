"""Unit tests for PasswordHashingService."""

import pytest

from holdem_identity.exceptions import ErrorCode, WeakPasswordError
from holdem_identity.services import PasswordHashingService


class TestPasswordHashingService:
    """Tests for password hashing and verification."""

    def setup_method(self):
        """Set up test fixtures."""
        self.service = PasswordHashingService(rounds=4)  # Low rounds for fast tests

    def test_hash_returns_bcrypt_format(self):
        """Test that hash returns a valid bcrypt hash."""
        hashed = self.service.hash("Roarrr")

        # bcrypt hashes start with $2b$ or $2a$
        assert hashed.startswith("$2")
        assert len(hashed) == 60
        assert "Roarrr" not in hashed

    def test_verify_correct_password(self):
        """Test that verify returns True for correct password."""
        hashed = self.service.hash("Charrr")

        assert self.service.verify("Charrr", hashed) is True

    def test_verify_incorrect_password(self):
        """Test that verify returns False for incorrect password."""
        hashed = self.service.hash("Charrr")

        assert self.service.verify("Roarrr", hashed) is False
        assert self.service.verify("charrr", hashed) is False

    def test_verify_invalid_hash_returns_false(self):
        """Test that verify returns False for invalid hash format."""
        assert self.service.verify("password", "not_a_valid_hash") is False
        assert self.service.verify("password", "") is False
        assert self.service.verify("password", None) is False

    def test_verify_empty_password_returns_false(self):
        """Test that an empty password never verifies."""
        hashed = self.service.hash("Charrr")

        assert self.service.verify("", hashed) is False

    def test_verify_oversized_password_returns_false(self):
        """Test that verify fails closed on input bcrypt cannot take."""
        hashed = self.service.hash("a" * 72)

        assert self.service.verify("a" * 73, hashed) is False

    def test_hash_produces_different_hashes(self):
        """Test that hashing same password twice produces different hashes."""
        hash1 = self.service.hash("same_password")
        hash2 = self.service.hash("same_password")

        # Due to random salt, hashes should differ
        assert hash1 != hash2
        # But both should verify
        assert self.service.verify("same_password", hash1)
        assert self.service.verify("same_password", hash2)


class TestPasswordValidation:
    """Tests for password acceptance rules."""

    def setup_method(self):
        """Set up test fixtures."""
        self.service = PasswordHashingService(rounds=4)

    def test_validate_empty_password_raises(self):
        """Test that empty password raises WeakPasswordError."""
        with pytest.raises(WeakPasswordError, match="cannot be empty") as exc_info:
            self.service.validate_strength("")

        assert exc_info.value.code == ErrorCode.WEAK_PASSWORD

    def test_validate_short_password_succeeds(self):
        """Test that short passwords are accepted."""
        self.service.validate_strength("pass")

    def test_validate_too_long_password_raises(self):
        """Test that password exceeding 72 bytes raises WeakPasswordError."""
        with pytest.raises(WeakPasswordError, match="cannot exceed 72"):
            self.service.validate_strength("a" * 73)

    def test_validate_counts_bytes_not_characters(self):
        """Test that multi-byte characters count by their encoded size."""
        # 25 characters, 75 bytes
        with pytest.raises(WeakPasswordError):
            self.service.validate_strength("€" * 25)

    def test_hash_validates_password(self):
        """Test that hash method validates the password."""
        with pytest.raises(WeakPasswordError):
            self.service.hash("")


class TestDummyHash:
    """Tests for the hash used when signing in with an unknown id."""

    def test_dummy_hash_uses_service_rounds(self):
        hashed = PasswordHashingService(rounds=4).dummy_hash()

        assert hashed.startswith("$2")
        assert hashed.split("$")[2] == "04"

    def test_dummy_hash_is_computed_once(self):
        service = PasswordHashingService(rounds=4)

        assert service.dummy_hash() == PasswordHashingService(rounds=4).dummy_hash()

    def test_dummy_hash_never_verifies_user_input(self):
        service = PasswordHashingService(rounds=4)

        assert service.verify("Roarrr", service.dummy_hash()) is False
