"""FastAPI dependencies for services and the authenticated user."""

from datetime import timedelta
from functools import lru_cache
from typing import Annotated

from fastapi import Cookie, Depends, Header
from sqlalchemy.ext.asyncio import AsyncSession

from sessionkit.core.config import get_settings
from sessionkit.core.errors import AppError, ErrorCode
from sessionkit.domain.services import AuthService, UserService
from sessionkit.infrastructure.auth import AccessTokenClaims, TokenConfig, TokenIssuer
from sessionkit.infrastructure.persistence.database import get_db_session
from sessionkit.infrastructure.persistence.repositories import (
    RefreshTokenRepository,
    UserRepository,
)

ACCESS_TOKEN_COOKIE = "access_token"
REFRESH_TOKEN_COOKIE = "refresh_token"


@lru_cache
def get_token_issuer() -> TokenIssuer:
    """Process-wide token issuer built from settings once."""
    return TokenIssuer(TokenConfig.from_settings(get_settings()))


async def get_auth_service(
    session: Annotated[AsyncSession, Depends(get_db_session)],
    token_issuer: Annotated[TokenIssuer, Depends(get_token_issuer)],
) -> AuthService:
    """Build an AuthService bound to the request's database session."""
    settings = get_settings()
    return AuthService(
        users=UserRepository(session),
        refresh_tokens=RefreshTokenRepository(
            session, retention=timedelta(days=settings.refresh_token_retention_days)
        ),
        token_issuer=token_issuer,
    )


async def get_user_service(
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> UserService:
    """Build a UserService bound to the request's database session."""
    return UserService(UserRepository(session))


async def get_current_user(
    token_issuer: Annotated[TokenIssuer, Depends(get_token_issuer)],
    access_token: Annotated[str | None, Cookie()] = None,
    authorization: Annotated[str | None, Header()] = None,
) -> AccessTokenClaims:
    """Resolve the caller from the access token cookie or Bearer header.

    Raises:
        AppError: AUTHENTICATION_ERROR if no token was sent, INVALID_TOKEN
            if it does not verify.
    """
    token = access_token
    if token is None and authorization and authorization.startswith("Bearer "):
        token = authorization.removeprefix("Bearer ").strip()

    if not token:
        raise AppError(ErrorCode.AUTHENTICATION_ERROR, "Authentication required")

    return token_issuer.verify_access_token(token)


AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]
UserServiceDep = Annotated[UserService, Depends(get_user_service)]
TokenIssuerDep = Annotated[TokenIssuer, Depends(get_token_issuer)]
CurrentUser = Annotated[AccessTokenClaims, Depends(get_current_user)]
