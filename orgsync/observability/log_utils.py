"""
Logging utilities for safe structured logging.

Values are stringified and truncated, and credential-like keys are
redacted before they reach a handler.

Dependencies: logging (stdlib)
System role: Logging helper functions
"""

import logging
from typing import Any

REDACTED = "***"

SENSITIVE_KEYS = frozenset({
    "password",
    "password_hash",
    "current_password",
    "new_password",
    "api_token",
    "token",
    "authorization",
})


def safe_log_value(value: Any, max_length: int = 500) -> str:
    """
    Safely convert any value to a string for logging.

    Args:
        value: Value to convert
        max_length: Maximum length before truncating

    Returns:
        str: Safe string representation
    """
    try:
        if value is None:
            return "None"
        if isinstance(value, str):
            val_str = value
        elif isinstance(value, (list, tuple, set)):
            val_str = f"{type(value).__name__}({len(value)} items)"
        elif isinstance(value, dict):
            val_str = f"dict({len(value)} keys)"
        else:
            val_str = str(value)

        if len(val_str) > max_length:
            return val_str[:max_length] + f"... (truncated, {len(val_str)} total)"
        return val_str
    except Exception as e:
        return f"<unable to log: {type(e).__name__}>"


def sanitize_context(context: dict[str, Any]) -> dict[str, str]:
    """Stringify context values, replacing credentials with a placeholder."""
    return {
        key: REDACTED if key.lower() in SENSITIVE_KEYS else safe_log_value(val)
        for key, val in context.items()
    }


def log_with_context(
    logger: logging.Logger,
    level: int,
    message: str,
    **context,
) -> None:
    """
    Log a message with structured context, safely converting all values.

    Args:
        logger: Logger instance
        level: Log level (logging.INFO, etc.)
        message: Log message
        **context: Context dict with arbitrary key-value pairs
    """
    logger.log(level, message, extra=sanitize_context(context))


def log_exception_with_context(
    logger: logging.Logger,
    message: str,
    exc: Exception,
    **context,
) -> None:
    """
    Log an exception with full context.

    Args:
        logger: Logger instance
        message: Log message
        exc: Exception instance
        **context: Additional context dict
    """
    safe_context = sanitize_context(context)
    safe_context.update({
        "error_type": type(exc).__name__,
        "error_msg": safe_log_value(getattr(exc, "message", str(exc))),
    })
    logger.exception(message, extra=safe_context)
