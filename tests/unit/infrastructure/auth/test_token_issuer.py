"""Unit tests for JWT issuance and verification."""

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from sessionkit.core.errors import AppError, ErrorCode
from sessionkit.infrastructure.auth import TokenConfig, TokenIssuer
from sessionkit.infrastructure.auth.token_issuer import (
    INVALID_ACCESS_TOKEN,
    INVALID_REFRESH_TOKEN,
)


def test_access_token_round_trip(token_issuer):
    token = token_issuer.issue_access_token("user-1", "a@example.com")

    claims = token_issuer.verify_access_token(token)

    assert claims.user_id == "user-1"
    assert claims.email == "a@example.com"


def test_refresh_token_round_trip(token_issuer):
    token = token_issuer.issue_refresh_token("user-1")

    claims = token_issuer.verify_refresh_token(token)

    assert claims.user_id == "user-1"
    assert claims.token_id


def test_access_token_claims(token_issuer, token_config):
    token = token_issuer.issue_access_token("user-1", "a@example.com")

    payload = jwt.decode(token, token_config.access_secret, algorithms=["HS256"], issuer="sessionkit")

    assert payload["sub"] == "user-1"
    assert payload["type"] == "access"
    assert payload["exp"] - payload["iat"] == 15 * 60


def test_refresh_token_lifetime(token_issuer, token_config):
    token = token_issuer.issue_refresh_token("user-1")

    payload = jwt.decode(token, token_config.refresh_secret, algorithms=["HS256"], issuer="sessionkit")

    assert payload["type"] == "refresh"
    assert payload["exp"] - payload["iat"] == 7 * 24 * 60 * 60


def test_refresh_tokens_issued_together_are_distinct(token_issuer):
    first = token_issuer.issue_refresh_token("user-1")
    second = token_issuer.issue_refresh_token("user-1")

    assert first != second


def test_expires_in(token_issuer):
    assert token_issuer.access_token_expires_in == 900
    assert token_issuer.refresh_token_expires_in == 604800


def test_expired_access_token_is_rejected(token_config, token_issuer):
    past = datetime.now(timezone.utc) - timedelta(hours=1)
    stale_issuer = TokenIssuer(token_config, clock=lambda: past)
    token = stale_issuer.issue_access_token("user-1", "a@example.com")

    with pytest.raises(AppError) as exc_info:
        token_issuer.verify_access_token(token)

    assert exc_info.value.code == ErrorCode.INVALID_TOKEN
    assert exc_info.value.message == INVALID_ACCESS_TOKEN


def test_expired_refresh_token_is_rejected(token_config, token_issuer):
    past = datetime.now(timezone.utc) - timedelta(days=8)
    stale_issuer = TokenIssuer(token_config, clock=lambda: past)
    token = stale_issuer.issue_refresh_token("user-1")

    with pytest.raises(AppError) as exc_info:
        token_issuer.verify_refresh_token(token)

    assert exc_info.value.message == INVALID_REFRESH_TOKEN


def test_refresh_token_is_not_an_access_token(token_issuer):
    token = token_issuer.issue_refresh_token("user-1")

    with pytest.raises(AppError) as exc_info:
        token_issuer.verify_access_token(token)

    assert exc_info.value.code == ErrorCode.INVALID_TOKEN


def test_access_token_is_not_a_refresh_token(token_issuer):
    token = token_issuer.issue_access_token("user-1", "a@example.com")

    with pytest.raises(AppError) as exc_info:
        token_issuer.verify_refresh_token(token)

    assert exc_info.value.code == ErrorCode.INVALID_TOKEN


def test_token_signed_with_other_secret_is_rejected(token_issuer):
    other = TokenIssuer(TokenConfig(access_secret="other-access", refresh_secret="other-refresh"))
    token = other.issue_access_token("user-1", "a@example.com")

    with pytest.raises(AppError) as exc_info:
        token_issuer.verify_access_token(token)

    assert exc_info.value.code == ErrorCode.INVALID_TOKEN


def test_type_claim_is_checked_even_with_matching_secret(token_config, token_issuer):
    forged = jwt.encode(
        {
            "iss": "sessionkit",
            "sub": "user-1",
            "iat": datetime.now(timezone.utc),
            "exp": datetime.now(timezone.utc) + timedelta(minutes=5),
            "user_id": "user-1",
            "email": "a@example.com",
            "type": "refresh",
        },
        token_config.access_secret,
        algorithm="HS256",
    )

    with pytest.raises(AppError):
        token_issuer.verify_access_token(forged)


@pytest.mark.parametrize("token", ["", "not-a-jwt", "a.b.c"])
def test_malformed_token_is_rejected(token_issuer, token):
    with pytest.raises(AppError) as exc_info:
        token_issuer.verify_refresh_token(token)

    assert exc_info.value.code == ErrorCode.INVALID_TOKEN


def test_config_requires_distinct_secrets():
    with pytest.raises(ValueError):
        TokenConfig(access_secret="same", refresh_secret="same")


def test_config_requires_secrets():
    with pytest.raises(ValueError):
        TokenConfig(access_secret="", refresh_secret="refresh")
