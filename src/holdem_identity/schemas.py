"""Identity schemas and data structures.

These are simple data classes used for transferring token
data between components.
"""

from dataclasses import dataclass
from datetime import datetime, timezone


@dataclass(frozen=True)
class TokenPayload:
    """Decoded session token payload.

    This represents the data extracted from a verified token.

    Attributes
    ----------
    user_id
        The identifier of the user the token is bound to
    iat
        Token issuance timestamp
    exp
        Token expiration timestamp
    token_type
        Always "access" for session tokens
    """

    user_id: str
    iat: datetime
    exp: datetime
    token_type: str = "access"

    def is_expired(self, now: datetime | None = None) -> bool:
        """Check if the token has expired."""
        now = now or datetime.now(tz=timezone.utc)
        return now >= self.exp

    def is_access_token(self) -> bool:
        """Check if this is an access token."""
        return self.token_type == "access"


@dataclass(frozen=True)
class IssuedToken:
    """A freshly minted session token with its readable claims."""

    token: str
    user_id: str
    issued_at: datetime
    expires_at: datetime

    @property
    def expires_in(self) -> int:
        """Lifetime of the token in whole seconds."""
        return int((self.expires_at - self.issued_at).total_seconds())
