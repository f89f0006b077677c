"""Unit tests for PBKDF2 password hashing."""

import hashlib

import pytest

from sessionkit.infrastructure.auth.password_hasher import (
    DUMMY_PASSWORD_HASH,
    hash_password,
    verify_password,
)


def test_hash_format():
    hashed = hash_password("SecureP@ss123!")

    salt, hash_hex = hashed.split(":")
    assert len(salt) == 32
    assert len(hash_hex) == 128
    int(salt, 16)
    int(hash_hex, 16)


def test_hash_is_salted():
    assert hash_password("SecureP@ss123!") != hash_password("SecureP@ss123!")


def test_verify_round_trip():
    hashed = hash_password("SecureP@ss123!")

    assert verify_password("SecureP@ss123!", hashed) is True
    assert verify_password("securep@ss123!", hashed) is False


def test_verify_known_hash():
    """The hex salt string is the KDF salt, so existing stored hashes keep verifying."""
    salt = "00112233445566778899aabbccddeeff"
    derived = hashlib.pbkdf2_hmac(
        "sha512", b"hunter2", salt.encode("utf-8"), 1000, dklen=64
    ).hex()

    assert verify_password("hunter2", f"{salt}:{derived}") is True
    assert verify_password("hunter3", f"{salt}:{derived}") is False


@pytest.mark.parametrize(
    "stored",
    ["", "no-separator", ":abcdef", "abcdef:", "salt:not-hex-at-all"],
)
def test_malformed_stored_value_never_verifies(stored):
    assert verify_password("anything", stored) is False


def test_empty_password_hashes_and_verifies():
    hashed = hash_password("")

    assert verify_password("", hashed) is True
    assert verify_password(" ", hashed) is False


def test_dummy_hash_is_well_formed():
    assert verify_password("dummy_password_for_timing_safety", DUMMY_PASSWORD_HASH) is True
