"""JWT token service.

Mints and verifies the signed, time-bounded session tokens handed out
on sign in.
"""

from datetime import datetime, timedelta, timezone

import jwt

from holdem_identity.exceptions import InvalidTokenError
from holdem_identity.schemas import IssuedToken, TokenPayload


class JWTService:
    """Service for session token creation and verification.

    Holds nothing but the signing key and token lifetime, both fixed at
    construction. Every call is a pure function of its arguments, the
    key and the current time.

    Examples
    --------
    >>> service = JWTService(secret_key="your-secret-key")
    >>> issued = service.issue_token("charizard@pokemon.com")
    >>> payload = service.verify_token(issued.token)
    >>> print(payload.user_id)
    charizard@pokemon.com
    """

    DEFAULT_ACCESS_EXPIRE_HOURS = 24
    ALGORITHM = "HS256"
    TOKEN_TYPE = "access"

    def __init__(
        self,
        secret_key: str,
        access_token_expire_hours: int = DEFAULT_ACCESS_EXPIRE_HOURS,
        algorithm: str = ALGORITHM,
    ):
        """Initialize the JWT service.

        Parameters
        ----------
        secret_key
            Secret key for signing tokens. Must be kept secure.
        access_token_expire_hours
            Hours until a token expires (default 24)
        algorithm
            HMAC algorithm used for signing (default HS256)
        """
        if not secret_key:
            msg = "JWT secret key cannot be empty"
            raise ValueError(msg)
        if access_token_expire_hours <= 0:
            msg = "Token lifetime must be positive"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._algorithm = algorithm
        self._access_expire = timedelta(hours=access_token_expire_hours)

    @property
    def access_token_ttl(self) -> timedelta:
        return self._access_expire

    def issue_token(
        self,
        user_id: str,
        expires_delta: timedelta | None = None,
        now: datetime | None = None,
    ) -> IssuedToken:
        """Mint a session token bound to a verified user id.

        Parameters
        ----------
        user_id
            The identifier of the authenticated user
        expires_delta
            Custom expiration time (optional)
        now
            Issuance time (optional, defaults to the current UTC time)

        Returns
        -------
        IssuedToken with the encoded token and its readable claims
        """
        issued_at = (now or datetime.now(tz=timezone.utc)).replace(microsecond=0)
        expires_at = issued_at + (expires_delta or self._access_expire)

        payload = {
            "sub": user_id,
            "type": self.TOKEN_TYPE,
            "iat": issued_at,
            "exp": expires_at,
        }
        token = jwt.encode(payload, self._secret_key, algorithm=self._algorithm)

        return IssuedToken(
            token=token,
            user_id=user_id,
            issued_at=issued_at,
            expires_at=expires_at,
        )

    def verify_token(self, token: str) -> TokenPayload:
        """Verify and decode a session token.

        A token is valid only if its signature verifies against the
        signing key and the current time is before its expiry.

        Parameters
        ----------
        token
            The JWT token string to verify

        Returns
        -------
        TokenPayload containing the decoded data

        Raises
        ------
        InvalidTokenError
            If token is invalid, expired, or malformed
        """
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                options={"require": ["sub", "iat", "exp"]},
            )

            user_id = payload["sub"]
            if not isinstance(user_id, str) or not user_id:
                msg = "empty subject"
                raise ValueError(msg)

            return TokenPayload(
                user_id=user_id,
                iat=datetime.fromtimestamp(payload["iat"], tz=timezone.utc),
                exp=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
                token_type=payload.get("type", self.TOKEN_TYPE),
            )

        except jwt.ExpiredSignatureError as e:
            raise InvalidTokenError("Token has expired") from e
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(f"Invalid token: {e}") from e
        except (KeyError, TypeError, ValueError) as e:
            raise InvalidTokenError(f"Malformed token payload: {e}") from e
