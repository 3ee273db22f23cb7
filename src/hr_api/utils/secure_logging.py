"""Logging helpers that keep secrets and personal data out of production logs."""

import logging
import re
from functools import lru_cache

from hr_api.config import get_settings

MAX_LOGGED_MESSAGE_LENGTH = 200

# Applied in order; connection URLs go first since they contain path-like parts
REDACTIONS: list[tuple[re.Pattern[str], str]] = [
    (re.compile(r"(postgresql|postgres|sqlite|redis|https?)(\+\w+)?://\S+"), "[URL]"),
    (re.compile(r"['\"]?(/[\w./\-]+|[A-Z]:\\[^\s'\"]+)['\"]?"), "[PATH]"),
    (re.compile(r"[\w.+-]+@[\w-]+\.[\w.-]+"), "[EMAIL]"),
    # JWTs, bcrypt hashes, API keys
    (re.compile(r"[\w\-]{32,}"), "[TOKEN]"),
]


@lru_cache(maxsize=1)
def is_debug_mode() -> bool:
    return get_settings().debug


def sanitize_exception_message(error: Exception) -> str:
    """Redact an exception's text and cap its length.

    Args:
        error: The exception to describe

    Returns:
        Message safe for production logs
    """
    message = str(error)
    for pattern, replacement in REDACTIONS:
        message = pattern.sub(replacement, message)
    if len(message) > MAX_LOGGED_MESSAGE_LENGTH:
        message = message[: MAX_LOGGED_MESSAGE_LENGTH - 3] + "..."
    return message


def _log(logger: logging.Logger, level: int, message: str, error: Exception | None) -> None:
    if error is None:
        logger.log(level, message)
    elif is_debug_mode():
        logger.log(level, f"{message}: {error}", exc_info=error)
    else:
        logger.log(level, f"{message}: {sanitize_exception_message(error)}")


def log_error(logger: logging.Logger, message: str, error: Exception | None = None) -> None:
    """Log at ERROR; the exception is shown in full only in debug mode."""
    _log(logger, logging.ERROR, message, error)


def log_warning(logger: logging.Logger, message: str, error: Exception | None = None) -> None:
    """Log at WARNING; the exception is shown in full only in debug mode."""
    _log(logger, logging.WARNING, message, error)
