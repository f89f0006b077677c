"""Authentication API routes.

Provides endpoints for registration, login, access token refresh, logout and
the current user's identity. Tokens are carried in http-only cookies.
"""

from typing import Annotated

from fastapi import APIRouter, Cookie, Response, status

from sessionkit.core.config import get_settings
from sessionkit.core.errors import AppError, ErrorCode
from sessionkit.core.logging import get_logger
from sessionkit.infrastructure.api.dependencies import (
    ACCESS_TOKEN_COOKIE,
    REFRESH_TOKEN_COOKIE,
    AuthServiceDep,
    CurrentUser,
    TokenIssuerDep,
)
from sessionkit.infrastructure.api.schemas import (
    CredentialsRequest,
    CurrentUserResponse,
    ErrorResponse,
    LoginResponse,
    LoginUserResponse,
    MessageResponse,
    ProfileResponse,
    RegisterResponse,
    UserProfileResponse,
)

logger = get_logger(__name__)

router = APIRouter()


def _refresh_cookie_path() -> str:
    # Both /refresh-token and /logout need to receive the refresh cookie
    return f"{get_settings().api_prefix}/auth"


def _require_credentials(request: CredentialsRequest) -> tuple[str, str]:
    if not request.email or not request.password:
        raise AppError(ErrorCode.VALIDATION_ERROR, "Email and password are required")
    return request.email, request.password


def _set_access_cookie(response: Response, token: str, max_age: int) -> None:
    response.set_cookie(
        ACCESS_TOKEN_COOKIE,
        token,
        max_age=max_age,
        httponly=True,
        secure=get_settings().secure_cookies,
        samesite="strict",
    )


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    response_model=RegisterResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Missing email or password"},
        409: {"model": ErrorResponse, "description": "Email already registered"},
    },
)
async def register(request: CredentialsRequest, service: AuthServiceDep) -> RegisterResponse:
    """Register a new user."""
    email, password = _require_credentials(request)
    profile = await service.register(email, password)
    return RegisterResponse(
        message="User created successfully",
        user=UserProfileResponse.model_validate(profile),
    )


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Missing email or password"},
        401: {"model": ErrorResponse, "description": "Invalid credentials"},
    },
)
async def login(
    request: CredentialsRequest,
    response: Response,
    service: AuthServiceDep,
    token_issuer: TokenIssuerDep,
) -> LoginResponse:
    """Log in with email and password.

    Sets the ``access_token`` and ``refresh_token`` cookies.
    """
    email, password = _require_credentials(request)
    result = await service.login(email, password)

    _set_access_cookie(response, result.tokens.access_token, token_issuer.access_token_expires_in)
    response.set_cookie(
        REFRESH_TOKEN_COOKIE,
        result.tokens.refresh_token,
        max_age=token_issuer.refresh_token_expires_in,
        path=_refresh_cookie_path(),
        httponly=True,
        secure=get_settings().secure_cookies,
        samesite="strict",
    )
    return LoginResponse(user=LoginUserResponse.model_validate(result.user))


@router.post(
    "/refresh-token",
    response_model=MessageResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Missing refresh token"},
        401: {"model": ErrorResponse, "description": "Invalid refresh token"},
        404: {"model": ErrorResponse, "description": "User no longer exists"},
    },
)
async def refresh_access_token(
    response: Response,
    service: AuthServiceDep,
    token_issuer: TokenIssuerDep,
    refresh_token: Annotated[str | None, Cookie()] = None,
) -> MessageResponse:
    """Issue a new access token from the ``refresh_token`` cookie.

    The refresh token itself stays the same.
    """
    if not refresh_token:
        raise AppError(ErrorCode.VALIDATION_ERROR, "Refresh token is required")

    result = await service.refresh(refresh_token)
    _set_access_cookie(response, result.access_token, token_issuer.access_token_expires_in)
    return MessageResponse(message="Token refreshed successfully")


@router.post("/logout", response_model=MessageResponse)
async def logout(
    response: Response,
    service: AuthServiceDep,
    refresh_token: Annotated[str | None, Cookie()] = None,
) -> MessageResponse:
    """End the current session.

    Cookies are cleared even when the session was already gone.
    """
    if refresh_token:
        try:
            await service.logout(refresh_token)
        except AppError as e:
            if e.is_operational:
                logger.info("Logout with unknown session", code=e.code.value)
            else:
                logger.error("Error during logout", code=e.code.value, error=e.message)

    response.delete_cookie(ACCESS_TOKEN_COOKIE)
    response.delete_cookie(REFRESH_TOKEN_COOKIE, path=_refresh_cookie_path())
    return MessageResponse(message="Logged out successfully")


@router.get(
    "/profile",
    response_model=ProfileResponse,
    responses={401: {"model": ErrorResponse, "description": "Missing or invalid access token"}},
)
async def profile(current_user: CurrentUser) -> ProfileResponse:
    """Return the identity carried by the caller's access token."""
    return ProfileResponse(user=CurrentUserResponse.model_validate(current_user))
