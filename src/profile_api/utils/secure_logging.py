"""Logging helpers that keep personal data out of production logs."""

import logging
import re

from profile_api.config import get_settings

_PATH_RE = re.compile(r"['\"]?(/[a-zA-Z0-9_./\-]+|[A-Z]:\\[^\s'\"]+)['\"]?")
_URL_RE = re.compile(r"(postgresql|postgres|sqlite|http|https)(\+\w+)?://[^\s]+")
_EMAIL_RE = re.compile(r"[a-zA-Z0-9_.+-]+@[a-zA-Z0-9-]+\.[a-zA-Z0-9-.]+")
# Long opaque strings: bearer tokens, API keys, password hashes
_TOKEN_RE = re.compile(r"[a-zA-Z0-9_\-$./]{32,}")

MAX_LOGGED_MESSAGE_LENGTH = 200


def sanitize_exception_message(error: Exception) -> str:
    """Strip paths, URLs, email addresses and tokens from an error message.

    Driver errors echo bound parameters, which for this service are profile
    values. The sanitised text keeps the error's shape without them.

    Args:
        error: The exception to sanitize

    Returns:
        Sanitized, truncated message
    """
    message = str(error)
    message = _URL_RE.sub("[URL]", message)
    message = _EMAIL_RE.sub("[EMAIL]", message)
    message = _TOKEN_RE.sub("[TOKEN]", message)
    message = _PATH_RE.sub("[PATH]", message)

    if len(message) > MAX_LOGGED_MESSAGE_LENGTH:
        message = message[: MAX_LOGGED_MESSAGE_LENGTH - 3] + "..."
    return message


def log_error(logger: logging.Logger, message: str, error: Exception | None = None) -> None:
    """Log an error with full detail in debug mode and sanitised otherwise.

    Args:
        logger: The logger instance to use
        message: Generic message without personal data
        error: Optional exception to include
    """
    if error is None:
        logger.error(message)
    elif get_settings().debug:
        logger.error("%s: %s", message, error, exc_info=error)
    else:
        logger.error("%s: %s", message, sanitize_exception_message(error))
