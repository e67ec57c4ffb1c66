"""Test log sanitizers, run context and the logging factory."""

import logging

import pytest
import structlog

from valcheck.shared.logging import (
    CheckMessageProcessor,
    configure_logging,
    generate_run_id,
    get_run_id,
    mask_check_message,
    run_context,
    sanitize_for_log,
)
from valcheck.shared.logging.factory import get_log_level_int, is_valid_log_level


class TestMaskCheckMessage:
    """Test masking of check failure messages."""

    @pytest.mark.parametrize(
        "message,masked",
        [
            (
                "`eq` comparison failed: `3` is not equal to `4`",
                "`eq` comparison failed: `***` is not equal to `***`",
            ),
            (
                "`not in` comparison failed: `a` in `['a', 'c']`",
                "`not in` comparison failed: `***` in `***`",
            ),
            (
                "invalid operation `lt` for values `[1]` and `[2]`",
                "invalid operation `lt` for values `***` and `***`",
            ),
            ("invalid comparison operator `7`", "invalid comparison operator `7`"),
            ("invalid IBAN `GB82WEST12345698765432`", "invalid IBAN `***`"),
            (
                "cannot convert `3` of type `str` to type int64",
                "cannot convert `***` of type `***` to type int64",
            ),
            ("empty argument", "empty argument"),
        ],
    )
    def test_masks_values_keeps_operators(self, message, masked):
        """Quoted values are masked; operator names stay readable."""
        assert mask_check_message(message) == masked


class TestSanitizeForLog:
    """Test event dict sanitizing."""

    def test_redacts_sensitive_fields(self):
        """Secret-looking fields are redacted."""
        sanitized = sanitize_for_log({"password": "hunter2", "api_key": "abc", "check": "Eq"})

        assert sanitized["password"] == "***REDACTED***"
        assert sanitized["api_key"] == "***REDACTED***"
        assert sanitized["check"] == "Eq"

    def test_masks_error_field(self):
        """Values quoted in the error field are masked; other fields are kept."""
        sanitized = sanitize_for_log(
            {
                "error": "invalid IP address `10.0.0.1`",
                "error_type": "FormatInvalidError",
                "position": 2,
            }
        )

        assert sanitized == {
            "error": "invalid IP address `***`",
            "error_type": "FormatInvalidError",
            "position": 2,
        }

    def test_nested_dicts(self):
        """Nested dicts are sanitized recursively."""
        sanitized = sanitize_for_log({"context": {"token": "t", "error": None}})
        assert sanitized == {"context": {"token": "***REDACTED***", "error": None}}

    def test_processor(self):
        """The structlog processor sanitizes event dicts."""
        processor = CheckMessageProcessor()
        event = processor(None, "debug", {"event": "check_failed", "error": "`1` does not match pattern `x`"})

        assert event["error"] == "`***` does not match pattern `***`"


class TestRunContext:
    """Test run-scoped context."""

    def test_generated_ids(self):
        """Run IDs are unique and prefixed."""
        first, second = generate_run_id(), generate_run_id()

        assert first.startswith("run_") and len(first) == 16
        assert first != second

    def test_binds_and_restores(self):
        """The run ID is bound inside the block only."""
        assert get_run_id() is None

        with run_context("run_outer") as run_id:
            assert run_id == "run_outer"
            assert get_run_id() == "run_outer"
            assert structlog.contextvars.get_contextvars()["run_id"] == "run_outer"

            with run_context() as inner:
                assert get_run_id() == inner != "run_outer"

            assert get_run_id() == "run_outer"

        assert get_run_id() is None
        assert "run_id" not in structlog.contextvars.get_contextvars()


class TestConfigureLogging:
    """Test logging factory."""

    def test_installs_handler_on_library_logger(self):
        """Only the valcheck logger is configured."""
        root_handlers = list(logging.getLogger().handlers)

        logger = configure_logging(environment="test", log_level="WARNING", json_logs=True)

        assert logger.name == "valcheck"
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0].formatter, structlog.stdlib.ProcessorFormatter)
        assert logger.level == logging.WARNING
        assert logger.propagate is False
        assert logging.getLogger().handlers == root_handlers

    def test_reconfiguring_replaces_handler(self):
        """Configuring twice leaves a single handler."""
        configure_logging(environment="test")
        logger = configure_logging(environment="test")

        assert len(logger.handlers) == 1

    def test_log_levels(self):
        """Level names map to logging levels."""
        assert get_log_level_int("debug") == logging.DEBUG
        assert get_log_level_int("nonsense") == logging.INFO
        assert is_valid_log_level("critical")
        assert not is_valid_log_level("verbose")
