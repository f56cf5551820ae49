"""
Shared infrastructure for services.

This package contains building blocks used across multiple services,
such as the result cache and logging helpers.
"""

from .result_cache import CacheEntry, ResultCache
from .structured_logging import StructuredLoggerAdapter, get_structured_logger, log_with_context

__all__ = [
    "CacheEntry",
    "ResultCache",
    "StructuredLoggerAdapter",
    "get_structured_logger",
    "log_with_context",
]
