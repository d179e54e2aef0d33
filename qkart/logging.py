"""
Logging for the QKart cart service.

The root logger gets one stdout handler on import; modules then ask for their
own logger:

    from qkart.logging import get_logger
    logger = get_logger(__name__)

    logger.info("Created cart for crio-user@gmail.com")
    logger.error("Clearing cart after debit failed", exc_info=True)

Emails, product ids and addresses arrive from HTTP requests. Pass them through
sanitize_string_for_logging / sanitize_id_for_logging before they reach a log
line.
"""

import logging
import os
import sys
from functools import cache

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FORMAT_SIMPLE = "%(levelname)s - %(name)s - %(message)s"

# supabase-py talks to PostgREST through httpx; one INFO line per query otherwise
_NOISY_LOGGERS = ("httpx", "httpcore", "httpcore.http11", "httpcore.connection", "hpack")

_ID_LOG_LENGTH = 8


def _get_log_level() -> int:
    """LOG_LEVEL by name (DEBUG, INFO, ...); unknown names fall back to INFO."""
    level_name = os.environ.get("LOG_LEVEL", "INFO").upper()
    return getattr(logging, level_name, logging.INFO)


def configure_logging(force: bool = False) -> None:
    """Send cart service logs to stdout.

    Leaves an already configured root logger alone (pytest and ASGI servers
    install their own handlers) unless ``force`` is set, in which case the
    existing handlers are replaced.
    """
    root = logging.getLogger()
    if root.handlers and not force:
        return

    level = _get_log_level()
    root.setLevel(level)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    # Vercel stamps every line itself
    on_vercel = os.environ.get("VERCEL") == "1"
    handler.setFormatter(logging.Formatter(LOG_FORMAT_SIMPLE if on_vercel else LOG_FORMAT))

    if force:
        root.handlers = []
    root.addHandler(handler)

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


configure_logging()


@cache
def get_logger(name: str) -> logging.Logger:
    """Logger for a qkart module, usually ``get_logger(__name__)``."""
    return logging.getLogger(name)


def _escape_log_injection(value: str) -> str:
    """Neutralize line breaks and NULs so request data cannot forge log entries (CWE-117)."""
    return (
        value.replace("\n", "\\n")
        .replace("\r", "\\r")
        .replace("\t", "\\t")
        .replace("\x00", "")
    )


def sanitize_id_for_logging(id_value: str | None) -> str:
    """
    Short form of a product, user or cart id for log lines.

    Args:
        id_value: Identifier from storage or a request path (may be None)

    Returns:
        The escaped id cut to 8 characters, or "N/A" when empty
    """
    if not id_value:
        return "N/A"
    return _escape_log_injection(str(id_value))[:_ID_LOG_LENGTH]


def sanitize_string_for_logging(value: str | None, max_length: int = 50) -> str:
    """
    Escaped, length-capped form of free text such as a cart owner's email.

    Args:
        value: Text taken from a request or a stored record (may be None)
        max_length: Characters kept before "..." is appended

    Returns:
        The escaped text, or "N/A" when empty
    """
    if not value:
        return "N/A"
    safe_value = _escape_log_injection(str(value))
    if len(safe_value) > max_length:
        return f"{safe_value[:max_length]}..."
    return safe_value


__all__ = [
    "LOG_FORMAT",
    "LOG_FORMAT_SIMPLE",
    "configure_logging",
    "get_logger",
    "sanitize_id_for_logging",
    "sanitize_string_for_logging",
]
