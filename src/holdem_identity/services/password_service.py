"""Password hashing service using bcrypt.

Secrets are never stored as given: a salted one-way hash is persisted
and sign in compares against that hash.
"""

from functools import lru_cache

import bcrypt

from holdem_identity.exceptions import WeakPasswordError


@lru_cache
def _dummy_hash(rounds: int) -> str:
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(b"holdem-unknown-user", salt).decode("utf-8")


class PasswordHashingService:
    """Service for secure password hashing and verification.

    Uses bcrypt for password hashing with configurable work factor.

    Examples
    --------
    >>> service = PasswordHashingService()
    >>> hash = service.hash("Roarrr")
    >>> service.verify("Roarrr", hash)
    True
    >>> service.verify("Charrr", hash)
    False
    """

    # bcrypt only looks at the first 72 bytes of its input
    MAX_BYTES = 72

    def __init__(self, rounds: int = 12):
        """Initialize the password hashing service.

        Parameters
        ----------
        rounds
            The bcrypt work factor (log2 of iterations). Default is 12,
            which is a good balance of security and performance.
            Higher values are more secure but slower.
        """
        self._rounds = rounds

    def hash(self, password: str) -> str:
        """Hash a plaintext password.

        Parameters
        ----------
        password
            The plaintext password to hash

        Returns
        -------
        The bcrypt hash as a string

        Raises
        ------
        WeakPasswordError
            If password doesn't meet requirements
        """
        self.validate_strength(password)
        salt = bcrypt.gensalt(rounds=self._rounds)
        hashed = bcrypt.hashpw(password.encode("utf-8"), salt)
        return hashed.decode("utf-8")

    def verify(self, password: str, password_hash: str | None) -> bool:
        """Verify a password against a hash.

        The comparison runs in constant time. A missing or empty hash
        never verifies.

        Parameters
        ----------
        password
            The plaintext password to check
        password_hash
            The bcrypt hash to verify against

        Returns
        -------
        True if password matches, False otherwise
        """
        if not password or not password_hash:
            return False
        try:
            return bcrypt.checkpw(
                password.encode("utf-8"),
                password_hash.encode("utf-8"),
            )
        except (ValueError, TypeError):
            # Invalid hash format or oversized input
            return False

    def validate_strength(self, password: str) -> None:
        """Validate that a password can be hashed.

        Current requirements:
        - Not empty
        - At most 72 bytes once UTF-8 encoded

        Parameters
        ----------
        password
            The password to validate

        Raises
        ------
        WeakPasswordError
            If password doesn't meet requirements
        """
        if not password:
            msg = "Password cannot be empty"
            raise WeakPasswordError(msg)

        if len(password.encode("utf-8")) > self.MAX_BYTES:
            msg = f"Password cannot exceed {self.MAX_BYTES} bytes"
            raise WeakPasswordError(msg)

    def dummy_hash(self) -> str:
        """Hash of a fixed throwaway secret at this service's work factor.

        Verifying against it costs the same as verifying a real hash, so a
        sign in for an unknown id takes as long as one with a wrong password.
        """
        return _dummy_hash(self._rounds)
