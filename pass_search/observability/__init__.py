"""
Observability module.

Logging configuration and safe structured logging helpers.
"""

from pass_search.observability.log_utils import (
    log_exception_with_context,
    log_with_context,
    safe_log_value,
)
from pass_search.observability.logger import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_logger",
    "log_exception_with_context",
    "log_with_context",
    "safe_log_value",
]
