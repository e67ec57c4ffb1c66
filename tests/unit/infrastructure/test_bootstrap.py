"""Test settings adapter and library bootstrap."""

import json
import logging

import pytest

from valcheck import configure, run
from valcheck.application import ConfigurationError, Environment
from valcheck.domain import Eq, Required
from valcheck.infrastructure.settings import EnvironmentSettings


class TestEnvironmentSettings:
    """Test environment-backed settings."""

    def test_reads_prefixed_variables(self):
        """Settings are read from VALCHECK_* variables."""
        settings = EnvironmentSettings({"VALCHECK_LOG_LEVEL": "debug", "LOG_LEVEL": "error"})

        assert settings.get("LOG_LEVEL") == "debug"
        assert settings.get("LOG_FORMAT") is None
        assert settings.get("LOG_FORMAT", "json") == "json"

    def test_defaults_to_process_environment(self, monkeypatch):
        """Without a mapping the process environment is read."""
        monkeypatch.setenv("VALCHECK_ENVIRONMENT", "staging")

        assert EnvironmentSettings().get("ENVIRONMENT") == "staging"

    def test_custom_prefix(self):
        """The prefix is configurable."""
        settings = EnvironmentSettings({"APP_LOG_LEVEL": "warning"}, prefix="APP_")
        assert settings.get("LOG_LEVEL") == "warning"


class TestConfigure:
    """Test configure()."""

    def test_configures_library_logger(self, settings_factory):
        """The valcheck logger gets one handler at the configured level."""
        config = configure(settings_factory(ENVIRONMENT="test", LOG_LEVEL="WARNING"))

        logger = logging.getLogger("valcheck")
        assert config.ENVIRONMENT is Environment.TEST
        assert len(logger.handlers) == 1
        assert logger.level == logging.WARNING
        assert logger.propagate is False

    def test_reads_environment_by_default(self, monkeypatch):
        """Environment variables are the default settings source."""
        monkeypatch.setenv("VALCHECK_ENVIRONMENT", "production")
        monkeypatch.setenv("VALCHECK_LOG_LEVEL", "error")

        config = configure()

        assert config.ENVIRONMENT is Environment.PRODUCTION
        assert logging.getLogger("valcheck").level == logging.ERROR

    def test_rejects_invalid_settings(self, settings_factory):
        """Invalid settings fail before logging is touched."""
        handlers = list(logging.getLogger("valcheck").handlers)

        with pytest.raises(ConfigurationError):
            configure(settings_factory(LOG_LEVEL="verbose"))

        assert logging.getLogger("valcheck").handlers == handlers

    def test_json_lines(self, settings_factory, capsys):
        """JSON logs carry the run context and masked failures."""
        configure(settings_factory(ENVIRONMENT="test", LOG_LEVEL="DEBUG", LOG_FORMAT="json"))

        run(Required("007"), Eq("bond@example.com", "q@example.com"))

        lines = [json.loads(line) for line in capsys.readouterr().err.strip().splitlines()]
        failed = lines[-1]
        assert failed["event"] == "check_failed"
        assert failed["level"] == "debug"
        assert failed["logger"] == "valcheck.application.runner"
        assert failed["error"] == "`eq` comparison failed: `***` is not equal to `***`"
        assert failed["run_id"].startswith("run_")
        assert "timestamp" in failed
        assert "_record" not in failed
        assert any(line["event"] == "valcheck_configured" for line in lines)

    def test_keyvalue_lines(self, settings_factory, capsys):
        """Key/value logs lead with timestamp, level and event."""
        configure(settings_factory(ENVIRONMENT="test", LOG_LEVEL="DEBUG", LOG_FORMAT="keyvalue"))

        run()

        last = capsys.readouterr().err.strip().splitlines()[-1]
        assert last.startswith("timestamp=")
        assert "level='debug' event='run_passed'" in last
