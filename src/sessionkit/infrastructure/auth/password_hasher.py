"""Password hashing with PBKDF2-HMAC-SHA512.

Hashes are stored as ``<salt>:<hash>``, both hex encoded. The hex salt string
itself is fed to the key derivation, which keeps hashes written by earlier
deployments verifiable.
"""

import hashlib
import hmac
import secrets

SALT_BYTES = 16
ITERATIONS = 1000
KEY_LENGTH = 64
DIGEST = "sha512"
SEPARATOR = ":"


def _derive(password: str, salt: str) -> str:
    return hashlib.pbkdf2_hmac(
        DIGEST,
        password.encode("utf-8"),
        salt.encode("utf-8"),
        ITERATIONS,
        dklen=KEY_LENGTH,
    ).hex()


def hash_password(password: str) -> str:
    """Hash a password with a fresh random salt.

    Args:
        password: The plaintext password to hash.

    Returns:
        The ``salt:hash`` credential string.

    Example:
        >>> hashed = hash_password("SecureP@ss123!")
        >>> len(hashed.split(":")[1])
        128
    """
    salt = secrets.token_hex(SALT_BYTES)
    return f"{salt}{SEPARATOR}{_derive(password, salt)}"


def verify_password(password: str, hashed: str) -> bool:
    """Verify a password against a stored ``salt:hash`` string.

    Uses constant-time comparison to prevent timing attacks. A malformed
    stored value never verifies.

    Args:
        password: The plaintext password to verify.
        hashed: The stored credential string.

    Returns:
        True if the password matches, False otherwise.

    Example:
        >>> hashed = hash_password("SecureP@ss123!")
        >>> verify_password("SecureP@ss123!", hashed)
        True
        >>> verify_password("wrong", hashed)
        False
    """
    salt, sep, expected = hashed.partition(SEPARATOR)
    if not sep or not salt or not expected:
        return False
    return hmac.compare_digest(
        _derive(password, salt).encode("ascii"), expected.encode("utf-8")
    )


# Verified against when the email is unknown so both login failures cost the same
DUMMY_PASSWORD_HASH = hash_password("dummy_password_for_timing_safety")
