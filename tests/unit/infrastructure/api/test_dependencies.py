"""Unit tests for API dependencies."""

import pytest

from sessionkit.core.errors import AppError, ErrorCode
from sessionkit.domain.services import AuthService
from sessionkit.infrastructure.api.dependencies import get_auth_service, get_current_user
from sessionkit.infrastructure.persistence.repositories import (
    RefreshTokenRepository,
    UserRepository,
)


@pytest.mark.asyncio
async def test_current_user_from_cookie(token_issuer):
    token = token_issuer.issue_access_token("user-1", "a@example.com")

    claims = await get_current_user(token_issuer, access_token=token, authorization=None)

    assert claims.user_id == "user-1"
    assert claims.email == "a@example.com"


@pytest.mark.asyncio
async def test_current_user_from_bearer_header(token_issuer):
    token = token_issuer.issue_access_token("user-1", "a@example.com")

    claims = await get_current_user(token_issuer, access_token=None, authorization=f"Bearer {token}")

    assert claims.user_id == "user-1"


@pytest.mark.asyncio
async def test_cookie_takes_precedence_over_header(token_issuer):
    cookie_token = token_issuer.issue_access_token("user-1", "a@example.com")
    header_token = token_issuer.issue_access_token("user-2", "b@example.com")

    claims = await get_current_user(
        token_issuer, access_token=cookie_token, authorization=f"Bearer {header_token}"
    )

    assert claims.user_id == "user-1"


@pytest.mark.asyncio
@pytest.mark.parametrize("authorization", [None, "", "Basic dXNlcjpwYXNz", "Bearer "])
async def test_missing_token(token_issuer, authorization):
    with pytest.raises(AppError) as exc_info:
        await get_current_user(token_issuer, access_token=None, authorization=authorization)

    assert exc_info.value.code == ErrorCode.AUTHENTICATION_ERROR


@pytest.mark.asyncio
async def test_invalid_token(token_issuer):
    refresh_token = token_issuer.issue_refresh_token("user-1")

    with pytest.raises(AppError) as exc_info:
        await get_current_user(token_issuer, access_token=refresh_token, authorization=None)

    assert exc_info.value.code == ErrorCode.INVALID_TOKEN


@pytest.mark.asyncio
async def test_auth_service_is_bound_to_session(db_session, token_issuer):
    service = await get_auth_service(db_session, token_issuer)

    assert isinstance(service, AuthService)
    assert isinstance(service.users, UserRepository)
    assert isinstance(service.refresh_tokens, RefreshTokenRepository)
    assert service.token_issuer is token_issuer
