"""
Logging factory with structured logging.

Loggers are standard library loggers wrapped by structlog, so nothing is
emitted until the application configures logging, either through
configure_logging or its own logging setup.
"""

import logging

import structlog
from structlog.contextvars import merge_contextvars
from structlog.processors import (
    CallsiteParameter,
    CallsiteParameterAdder,
    JSONRenderer,
    KeyValueRenderer,
    TimeStamper,
    UnicodeDecoder,
    add_log_level,
)
from structlog.stdlib import (
    BoundLogger,
    ProcessorFormatter,
    add_logger_name,
    filter_by_level,
)

from ...version import __version__
from .sanitizers import CheckMessageProcessor

LOGGER_NAME = "valcheck"

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def get_logger(name: str) -> BoundLogger:
    """
    Get a structured logger with valcheck context.

    Args:
        name: Logger name (e.g., "valcheck.application.runner")

    Returns:
        Structured logger that masks checked values
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=[
            filter_by_level,
            merge_contextvars,
            add_log_level,
            add_logger_name,
            CheckMessageProcessor(),
            ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=BoundLogger,
    ).bind(service="valcheck", version=__version__)


def configure_logging(
    environment: str = "development",
    log_level: str = "INFO",
    json_logs: bool = True,
    include_caller_info: bool = True,
) -> logging.Logger:
    """
    Configure structured logging for valcheck.

    Only the "valcheck" logger is touched; the root logger is left to the
    application.

    Args:
        environment: Environment name (development, staging, production, test)
        log_level: Minimum log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_logs: Whether to output JSON formatted logs
        include_caller_info: Include file, function, and line number

    Returns:
        The configured "valcheck" logger
    """
    processors = []

    # Caller information is read from the log record, before it is dropped
    if include_caller_info and environment == "development":
        processors.append(
            CallsiteParameterAdder(
                parameters=[
                    CallsiteParameter.FILENAME,
                    CallsiteParameter.FUNC_NAME,
                    CallsiteParameter.LINENO,
                ],
                additional_ignores=["structlog", "logging"],
            )
        )

    processors.extend(
        [
            ProcessorFormatter.remove_processors_meta,
            TimeStamper(fmt="iso", utc=True),
            UnicodeDecoder(),
        ]
    )

    if json_logs:
        processors.append(JSONRenderer(sort_keys=True))
    else:
        processors.append(KeyValueRenderer(key_order=["timestamp", "level", "event", "logger"]))

    handler = logging.StreamHandler()
    handler.setFormatter(
        ProcessorFormatter(
            processors=processors,
            foreign_pre_chain=[add_log_level, add_logger_name],
        )
    )

    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel(get_log_level_int(log_level))
    logger.propagate = False
    return logger


def get_log_level_int(level: str) -> int:
    """Convert string log level to integer."""
    return _LEVELS.get(level.upper(), logging.INFO)


def is_valid_log_level(level: str) -> bool:
    """Check if a string names a log level."""
    return level.upper() in _LEVELS
