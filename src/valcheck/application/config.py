"""Library configuration for valcheck."""

from enum import Enum

from ..shared.logging.factory import is_valid_log_level
from .errors import ConfigurationError
from .ports import SettingsSource


class Environment(Enum):
    """Deployment environment of the host application."""

    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TEST = "test"


class LogFormat(Enum):
    """Rendering of log lines."""

    JSON = "json"
    KEYVALUE = "keyvalue"


_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


class Config:
    """Library configuration read from a settings source."""

    def __init__(self, settings: SettingsSource):
        """Initialize configuration from a settings source."""
        self.settings = settings
        self._load_config()

    def _load_config(self) -> None:
        """Load configuration from the settings source."""
        environment = (self.settings.get("ENVIRONMENT", "development") or "").strip().lower()
        try:
            self.ENVIRONMENT = Environment(environment)
        except ValueError:
            raise ConfigurationError(
                "ENVIRONMENT",
                f"unknown environment `{environment}`",
            ) from None

        # Logging
        self.LOG_LEVEL = (self.settings.get("LOG_LEVEL", "INFO") or "INFO").strip().upper()

        default_format = (
            LogFormat.KEYVALUE.value
            if self.ENVIRONMENT in (Environment.DEVELOPMENT, Environment.TEST)
            else LogFormat.JSON.value
        )
        log_format = (self.settings.get("LOG_FORMAT", default_format) or default_format).strip().lower()
        try:
            self.LOG_FORMAT = LogFormat(log_format)
        except ValueError:
            raise ConfigurationError(
                "LOG_FORMAT",
                f"expected one of {[f.value for f in LogFormat]}, got `{log_format}`",
            ) from None

        self.LOG_CALLER_INFO = self._get_bool(
            "LOG_CALLER_INFO",
            default=self.ENVIRONMENT == Environment.DEVELOPMENT,
        )

    def _get_bool(self, key: str, default: bool) -> bool:
        raw = self.settings.get(key)
        if raw is None or raw.strip() == "":
            return default

        value = raw.strip().lower()
        if value in _TRUE_VALUES:
            return True
        if value in _FALSE_VALUES:
            return False
        raise ConfigurationError(key, f"expected a boolean, got `{raw}`")

    @property
    def json_logs(self) -> bool:
        """Check if log lines are rendered as JSON."""
        return self.LOG_FORMAT == LogFormat.JSON

    def validate(self) -> None:
        """Validate configuration values."""
        if not is_valid_log_level(self.LOG_LEVEL):
            raise ConfigurationError(
                "LOG_LEVEL",
                f"unknown log level `{self.LOG_LEVEL}`",
            )

        # Caller information costs a stack walk per log line
        if self.ENVIRONMENT == Environment.PRODUCTION and self.LOG_CALLER_INFO:
            raise ConfigurationError(
                "LOG_CALLER_INFO",
                "caller information must be disabled in production",
            )
