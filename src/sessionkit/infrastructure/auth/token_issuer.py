"""JWT token issuance and verification.

Access tokens are short-lived and never stored. Refresh tokens are long-lived,
signed with a separate secret, and only honoured while a matching record
exists in the refresh token store.
"""

import uuid
from dataclasses import dataclass
from datetime import timedelta
from typing import Any

import jwt

from sessionkit.core.clock import Clock, utc_now
from sessionkit.core.config import Settings
from sessionkit.core.errors import AppError, ErrorCode
from sessionkit.core.logging import get_logger

logger = get_logger(__name__)

ACCESS_TOKEN_TYPE = "access"
REFRESH_TOKEN_TYPE = "refresh"

INVALID_ACCESS_TOKEN = "Invalid access token"
INVALID_REFRESH_TOKEN = "Invalid refresh token"


@dataclass(frozen=True)
class TokenConfig:
    """Signing keys and lifetimes for issued tokens.

    Attributes:
        access_secret: Key for signing access tokens.
        refresh_secret: Key for signing refresh tokens. Must differ from
            ``access_secret``.
        algorithm: JWS algorithm name.
        access_token_ttl: Lifetime of access tokens.
        refresh_token_ttl: Lifetime of refresh tokens.
        issuer: Value of the ``iss`` claim, checked on verification.
    """

    access_secret: str
    refresh_secret: str
    algorithm: str = "HS256"
    access_token_ttl: timedelta = timedelta(minutes=15)
    refresh_token_ttl: timedelta = timedelta(days=7)
    issuer: str = "sessionkit"

    def __post_init__(self) -> None:
        if not self.access_secret or not self.refresh_secret:
            raise ValueError("Token secrets must not be empty")
        if self.access_secret == self.refresh_secret:
            raise ValueError("Access and refresh token secrets must differ")

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenConfig":
        return cls(
            access_secret=settings.access_token_secret,
            refresh_secret=settings.refresh_token_secret,
            algorithm=settings.jwt_algorithm,
            access_token_ttl=timedelta(minutes=settings.access_token_expire_minutes),
            refresh_token_ttl=timedelta(days=settings.refresh_token_expire_days),
        )


@dataclass(frozen=True)
class AccessTokenClaims:
    """Identity carried by a verified access token."""

    user_id: str
    email: str


@dataclass(frozen=True)
class RefreshTokenClaims:
    """Identity carried by a verified refresh token."""

    user_id: str
    token_id: str


class TokenIssuer:
    """Creates and verifies signed access and refresh tokens."""

    def __init__(self, config: TokenConfig, clock: Clock = utc_now) -> None:
        """Initialize the issuer.

        Args:
            config: Signing keys and lifetimes.
            clock: Time source for ``iat`` and ``exp``.
        """
        self.config = config
        self._clock = clock

    @property
    def access_token_expires_in(self) -> int:
        """Access token lifetime in seconds."""
        return int(self.config.access_token_ttl.total_seconds())

    @property
    def refresh_token_expires_in(self) -> int:
        """Refresh token lifetime in seconds."""
        return int(self.config.refresh_token_ttl.total_seconds())

    def issue_access_token(self, user_id: str, email: str) -> str:
        """Create an access token for a user.

        Args:
            user_id: The user's unique identifier.
            email: The user's email address.

        Returns:
            Encoded JWT access token.
        """
        now = self._clock()
        payload = {
            "iss": self.config.issuer,
            "sub": user_id,
            "iat": now,
            "exp": now + self.config.access_token_ttl,
            "user_id": user_id,
            "email": email,
            "type": ACCESS_TOKEN_TYPE,
        }
        return jwt.encode(payload, self.config.access_secret, algorithm=self.config.algorithm)

    def issue_refresh_token(self, user_id: str) -> str:
        """Create a refresh token for a user.

        Each token carries a random ``jti`` so concurrent sessions of the
        same user never share a token value.

        Args:
            user_id: The user's unique identifier.

        Returns:
            Encoded JWT refresh token.
        """
        now = self._clock()
        payload = {
            "iss": self.config.issuer,
            "sub": user_id,
            "iat": now,
            "exp": now + self.config.refresh_token_ttl,
            "jti": str(uuid.uuid4()),
            "user_id": user_id,
            "type": REFRESH_TOKEN_TYPE,
        }
        return jwt.encode(payload, self.config.refresh_secret, algorithm=self.config.algorithm)

    def verify_access_token(self, token: str) -> AccessTokenClaims:
        """Verify an access token and return its claims.

        Raises:
            AppError: INVALID_TOKEN if the token is forged, expired,
                malformed or not an access token.
        """
        payload = self._decode(
            token,
            secret=self.config.access_secret,
            token_type=ACCESS_TOKEN_TYPE,
            required=["exp", "iat", "sub", "user_id", "email"],
            message=INVALID_ACCESS_TOKEN,
        )
        return AccessTokenClaims(user_id=payload["user_id"], email=payload["email"])

    def verify_refresh_token(self, token: str) -> RefreshTokenClaims:
        """Verify a refresh token and return its claims.

        Raises:
            AppError: INVALID_TOKEN if the token is forged, expired,
                malformed or not a refresh token.
        """
        payload = self._decode(
            token,
            secret=self.config.refresh_secret,
            token_type=REFRESH_TOKEN_TYPE,
            required=["exp", "iat", "sub", "user_id", "jti"],
            message=INVALID_REFRESH_TOKEN,
        )
        return RefreshTokenClaims(user_id=payload["user_id"], token_id=payload["jti"])

    def _decode(
        self,
        token: str,
        secret: str,
        token_type: str,
        required: list[str],
        message: str,
    ) -> dict[str, Any]:
        # Expired, forged and malformed tokens all surface with the same message
        try:
            payload = jwt.decode(
                token,
                secret,
                algorithms=[self.config.algorithm],
                issuer=self.config.issuer,
                options={"require": required},
            )
        except jwt.InvalidTokenError as e:
            logger.debug("Token rejected", token_type=token_type, reason=str(e))
            raise AppError(ErrorCode.INVALID_TOKEN, message) from e

        if payload.get("type") != token_type:
            logger.debug("Token rejected", token_type=token_type, reason="wrong token type")
            raise AppError(ErrorCode.INVALID_TOKEN, message)
        return payload
