"""
Logging utilities for safe structured logging.

Dependencies: logging (stdlib)
System role: Logging helper functions
"""

import logging
from typing import Any


def safe_log_value(value: Any, max_length: int = 500) -> str:
    """
    Convert any value to a bounded string for logging.

    Collections are summarised by size, long strings are truncated.
    """
    if value is None:
        return "None"
    if isinstance(value, str):
        text = value
    elif isinstance(value, (list, tuple)):
        text = f"{type(value).__name__}({len(value)} items)"
    elif isinstance(value, dict):
        text = f"dict({len(value)} keys)"
    else:
        text = str(value)

    if len(text) > max_length:
        return text[:max_length] + f"... (truncated, {len(text)} total)"
    return text


def log_exception_with_context(
    logger: logging.Logger,
    message: str,
    exc: BaseException,
    **context,
) -> None:
    """
    Log an exception with structured context.

    Args:
        logger: Logger instance
        message: Log message
        exc: Exception instance
        **context: Additional context
    """
    safe_context = {key: safe_log_value(val) for key, val in context.items()}
    safe_context.update({
        "error_type": type(exc).__name__,
        "error_msg": safe_log_value(str(exc)),
    })
    logger.error(message, exc_info=exc, extra=safe_context)
