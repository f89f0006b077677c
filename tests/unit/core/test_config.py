"""Unit tests for configuration loading."""

import pytest
from pydantic import ValidationError

from sessionkit.core.config import Settings, get_settings


def test_defaults():
    settings = Settings(_env_file=None)

    assert settings.api_prefix == "/api"
    assert settings.access_token_expire_minutes == 15
    assert settings.refresh_token_expire_days == 7
    assert settings.refresh_token_retention_days == 7
    assert settings.jwt_algorithm == "HS256"
    assert settings.access_token_secret != settings.refresh_token_secret


def test_environment_variables_use_prefix(monkeypatch):
    monkeypatch.setenv("SESSIONKIT_PORT", "9000")
    monkeypatch.setenv("SESSIONKIT_ACCESS_TOKEN_EXPIRE_MINUTES", "5")

    settings = Settings(_env_file=None)

    assert settings.port == 9000
    assert settings.access_token_expire_minutes == 5


def test_identical_token_secrets_are_rejected():
    with pytest.raises(ValidationError):
        Settings(
            _env_file=None,
            access_token_secret="same-secret",
            refresh_token_secret="same-secret",
        )


@pytest.mark.parametrize(
    "environment,cookie_secure,expected",
    [
        ("development", None, False),
        ("production", None, True),
        ("production", False, False),
        ("testing", True, True),
    ],
)
def test_secure_cookies(environment, cookie_secure, expected):
    settings = Settings(_env_file=None, environment=environment, cookie_secure=cookie_secure)

    assert settings.secure_cookies is expected


def test_environment_flags():
    settings = Settings(_env_file=None, environment="production")

    assert settings.is_production
    assert not settings.is_development
    assert not settings.is_testing


def test_get_settings_is_cached():
    assert get_settings() is get_settings()
