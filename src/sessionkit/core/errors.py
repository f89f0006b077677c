"""Application error taxonomy.

Every expected failure is an ``AppError`` tagged with an ``ErrorCode``. The
code decides the HTTP status at the transport boundary and whether the error
is operational (an expected outcome) or an internal fault worth alerting on.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from enum import Enum
from typing import Any

from sessionkit.core.logging import get_logger

logger = get_logger(__name__)


class ErrorCode(str, Enum):
    """Kinds of failure surfaced to callers."""

    VALIDATION_ERROR = "VALIDATION_ERROR"
    AUTHENTICATION_ERROR = "AUTHENTICATION_ERROR"
    RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"
    RESOURCE_CONFLICT = "RESOURCE_CONFLICT"
    INVALID_TOKEN = "INVALID_TOKEN"
    INTERNAL_ERROR = "INTERNAL_ERROR"


_STATUS_CODES: dict[ErrorCode, int] = {
    ErrorCode.VALIDATION_ERROR: 400,
    ErrorCode.AUTHENTICATION_ERROR: 401,
    ErrorCode.RESOURCE_NOT_FOUND: 404,
    ErrorCode.RESOURCE_CONFLICT: 409,
    ErrorCode.INVALID_TOKEN: 401,
    ErrorCode.INTERNAL_ERROR: 500,
}


class AppError(Exception):
    """A classified application failure.

    Attributes:
        code: The kind of failure.
        message: Human-readable message, safe to return to clients.
    """

    def __init__(self, code: ErrorCode, message: str) -> None:
        self.code = code
        self.message = message
        super().__init__(message)

    @property
    def status_code(self) -> int:
        """HTTP status the transport layer should answer with."""
        return _STATUS_CODES[self.code]

    @property
    def is_operational(self) -> bool:
        """False for internal faults, True for expected domain outcomes."""
        return self.code is not ErrorCode.INTERNAL_ERROR

    def to_dict(self) -> dict[str, Any]:
        return {"status": "error", "code": self.code.value, "message": self.message}

    def __repr__(self) -> str:
        return f"AppError(code={self.code.value!r}, message={self.message!r})"


@contextmanager
def normalize_errors(operation: str, message: str) -> Iterator[None]:
    """Let ``AppError`` through unchanged and turn anything else into INTERNAL_ERROR.

    The original exception is logged with its traceback and chained as the
    cause; callers only ever see ``message``.

    Args:
        operation: Name of the operation, for the log entry.
        message: Message of the INTERNAL_ERROR raised in place of the failure.

    Example:
        with normalize_errors("login", "Error logging user"):
            user = await users.find_by_email(email)
    """
    try:
        yield
    except AppError:
        raise
    except Exception as e:
        logger.exception(
            "Unexpected error",
            operation=operation,
            error=str(e),
            exc_type=type(e).__name__,
        )
        raise AppError(ErrorCode.INTERNAL_ERROR, message) from e
