"""Core SessionKit utilities.

This module exports core utilities for use throughout the application.
"""

from sessionkit.core.clock import Clock, as_utc, utc_now
from sessionkit.core.config import Settings, get_settings
from sessionkit.core.errors import AppError, ErrorCode, normalize_errors
from sessionkit.core.logging import (
    LoggingContext,
    bind_correlation_id,
    clear_context,
    configure_logging,
    get_logger,
)

__all__ = [
    "AppError",
    "Clock",
    "ErrorCode",
    "LoggingContext",
    "Settings",
    "as_utc",
    "bind_correlation_id",
    "clear_context",
    "configure_logging",
    "get_logger",
    "get_settings",
    "normalize_errors",
    "utc_now",
]
