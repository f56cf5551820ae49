"""
Structured Logging Utilities

Attaches query context (cache key, keyword, location) to log records so a single
search can be followed from the route down to the cache and upstream client.
"""

from __future__ import annotations

import logging
from typing import Any


class StructuredLoggerAdapter(logging.LoggerAdapter):
    """
    Logger adapter that prefixes every message with its query context.

    Usage:
        logger = get_structured_logger(__name__, cache_key="nurse-Texas")
        logger.info("Cache miss")  # [cache_key=nurse-Texas] Cache miss
    """

    def __init__(self, logger: logging.Logger, **context: Any):
        super().__init__(logger, context)

    def process(self, msg: str, kwargs: dict[str, Any]) -> tuple[str, dict[str, Any]]:
        """
        Add the context to the message and to the record's ``context`` field.

        Args:
            msg: Log message
            kwargs: Logging keyword arguments

        Returns:
            Tuple of (formatted message, updated kwargs)
        """
        parts = [f"{key}={value}" for key, value in self.extra.items() if value is not None]
        context_str = " | ".join(parts)

        kwargs.setdefault("extra", {})["context"] = context_str or "none"
        if context_str:
            msg = f"[{context_str}] {msg}"
        return msg, kwargs

    def bind(self, **context: Any) -> StructuredLoggerAdapter:
        """Return a new adapter with additional context fields."""
        return StructuredLoggerAdapter(self.logger, **{**self.extra, **context})


def get_structured_logger(name: str, **context: Any) -> StructuredLoggerAdapter:
    """
    Get a structured logger with context.

    Args:
        name: Logger name (typically __name__)
        **context: Context fields (e.g., cache_key="nurse-Texas")

    Returns:
        StructuredLoggerAdapter instance
    """
    return StructuredLoggerAdapter(logging.getLogger(name), **context)


def log_with_context(logger: logging.Logger, level: int, msg: str, **context: Any) -> None:
    """
    Log a single message with additional context fields.

    Args:
        logger: Logger instance
        level: Log level (logging.INFO, logging.ERROR, etc.)
        msg: Log message
        **context: Context fields; None values are left out
    """
    StructuredLoggerAdapter(logger, **context).log(level, msg)
