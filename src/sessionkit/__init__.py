"""SessionKit - user registration, login and JWT session refresh.

Password hashing, access/refresh token issuance, refresh-token persistence
and expiry cleanup behind a small FastAPI surface.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
