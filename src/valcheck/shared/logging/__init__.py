"""
valcheck structured logging.

This module provides structured logging capabilities with:
- Masking of checked values in failure messages
- Run-scoped context tracking
- JSON or key/value rendering
"""

from .context import generate_run_id, get_run_id, run_context
from .factory import LOGGER_NAME, configure_logging, get_logger
from .sanitizers import CheckMessageProcessor, mask_check_message, sanitize_for_log

__all__ = [
    "LOGGER_NAME",
    "CheckMessageProcessor",
    "configure_logging",
    "generate_run_id",
    "get_logger",
    "get_run_id",
    "mask_check_message",
    "run_context",
    "sanitize_for_log",
]
