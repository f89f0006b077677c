"""Authentication service.

Orchestrates registration, login, access token refresh and logout over a
user store, a refresh token store and a token issuer. Every operation lets
classified ``AppError`` failures through unchanged and converts anything else
into an INTERNAL_ERROR with an operation-specific message.
"""

from dataclasses import dataclass

from sessionkit.core.clock import Clock, utc_now
from sessionkit.core.errors import AppError, ErrorCode, normalize_errors
from sessionkit.core.logging import get_logger
from sessionkit.domain.entities import UserProfile
from sessionkit.domain.repositories import RefreshTokenStore, UserStore
from sessionkit.infrastructure.auth.password_hasher import (
    DUMMY_PASSWORD_HASH,
    hash_password,
    verify_password,
)
from sessionkit.infrastructure.auth.token_issuer import INVALID_REFRESH_TOKEN, TokenIssuer

logger = get_logger(__name__)

INVALID_CREDENTIALS = "Invalid credentials"


@dataclass(frozen=True)
class AuthTokens:
    access_token: str
    refresh_token: str


@dataclass(frozen=True)
class AuthenticatedUser:
    id: str
    email: str


@dataclass(frozen=True)
class LoginResult:
    """Outcome of a successful login."""

    user: AuthenticatedUser
    tokens: AuthTokens


@dataclass(frozen=True)
class RefreshResult:
    """Outcome of a successful refresh. The refresh token is not rotated."""

    access_token: str


class AuthService:
    """Service for authentication business logic."""

    def __init__(
        self,
        users: UserStore,
        refresh_tokens: RefreshTokenStore,
        token_issuer: TokenIssuer,
        clock: Clock = utc_now,
    ) -> None:
        """Initialize the auth service.

        Args:
            users: Store for user lookups and creation.
            refresh_tokens: Store for refresh token records.
            token_issuer: Signs and verifies access/refresh tokens.
            clock: Time source for refresh token expiry.
        """
        self.users = users
        self.refresh_tokens = refresh_tokens
        self.token_issuer = token_issuer
        self._clock = clock

    async def register(self, email: str, password: str) -> UserProfile:
        """Create a user account.

        Args:
            email: Email address for the new user.
            password: Plaintext password.

        Returns:
            The new user's profile, without the credential hash.

        Raises:
            AppError: RESOURCE_CONFLICT if the email is taken, INTERNAL_ERROR
                on unexpected failures.
        """
        with normalize_errors("register", "Error creating user"):
            if await self.users.find_by_email(email) is not None:
                logger.info("Registration failed: email already registered", email=email)
                raise AppError(
                    ErrorCode.RESOURCE_CONFLICT, "User with this email already exists"
                )

            user = await self.users.create(email=email, password_hash=hash_password(password))
            logger.info("User registered", user_id=user.id, email=user.email)
            return UserProfile.from_user(user)

    async def login(self, email: str, password: str) -> LoginResult:
        """Authenticate with email and password and open a session.

        Unknown email and wrong password fail identically so callers cannot
        probe which accounts exist.

        Args:
            email: User's email address.
            password: Plaintext password.

        Returns:
            The user identity and a fresh access/refresh token pair.

        Raises:
            AppError: AUTHENTICATION_ERROR on bad credentials, INTERNAL_ERROR
                on unexpected failures.
        """
        with normalize_errors("login", "Error logging user"):
            user = await self.users.find_by_email(email)
            if user is None:
                verify_password(password, DUMMY_PASSWORD_HASH)
                logger.info("Login failed: user not found", email=email)
                raise AppError(ErrorCode.AUTHENTICATION_ERROR, INVALID_CREDENTIALS)

            if not verify_password(password, user.password_hash):
                logger.info("Login failed: incorrect password", user_id=user.id)
                raise AppError(ErrorCode.AUTHENTICATION_ERROR, INVALID_CREDENTIALS)

            access_token = self.token_issuer.issue_access_token(user.id, user.email)
            refresh_token = self.token_issuer.issue_refresh_token(user.id)

            # Tokens are only handed out once the session record is stored
            expires_at = self._clock() + self.token_issuer.config.refresh_token_ttl
            await self.refresh_tokens.create(
                user_id=user.id,
                token=refresh_token,
                expires_at=expires_at,
            )

            logger.info("User logged in", user_id=user.id)
            return LoginResult(
                user=AuthenticatedUser(id=user.id, email=user.email),
                tokens=AuthTokens(access_token=access_token, refresh_token=refresh_token),
            )

    async def refresh(self, refresh_token: str) -> RefreshResult:
        """Issue a new access token for a live session.

        The token must both verify cryptographically and still have a
        matching, unexpired record; a logged-out token fails even while its
        signature is valid.

        Args:
            refresh_token: The refresh token handed out at login.

        Returns:
            A new access token.

        Raises:
            AppError: INVALID_TOKEN if the token is bad or revoked,
                RESOURCE_NOT_FOUND if the user no longer exists,
                INTERNAL_ERROR on unexpected failures.
        """
        with normalize_errors("refresh", "Error refreshing token"):
            claims = self.token_issuer.verify_refresh_token(refresh_token)

            record = await self.refresh_tokens.find_by_token(refresh_token)
            if (
                record is None
                or record.is_expired(self._clock())
                or record.user_id != claims.user_id
            ):
                logger.info("Refresh rejected: no live session", user_id=claims.user_id)
                raise AppError(ErrorCode.INVALID_TOKEN, INVALID_REFRESH_TOKEN)

            user = await self.users.find_by_id(claims.user_id)
            if user is None:
                logger.info("Refresh rejected: user not found", user_id=claims.user_id)
                raise AppError(ErrorCode.RESOURCE_NOT_FOUND, "User not found")

            return RefreshResult(
                access_token=self.token_issuer.issue_access_token(user.id, user.email)
            )

    async def logout(self, refresh_token: str) -> None:
        """End a session by deleting its refresh token record.

        The token's signature is not checked; an unknown or malformed value
        simply matches nothing.

        Args:
            refresh_token: The refresh token handed out at login.

        Raises:
            AppError: INVALID_TOKEN if no session matched, INTERNAL_ERROR on
                unexpected failures.
        """
        with normalize_errors("logout", "Error logging out user"):
            record = await self.refresh_tokens.delete_by_token(refresh_token)
            if record is None:
                raise AppError(ErrorCode.INVALID_TOKEN, INVALID_REFRESH_TOKEN)
            logger.info("User logged out", user_id=record.user_id)
