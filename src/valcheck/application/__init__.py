"""valcheck application layer: runner, configuration and parser-backed checks."""

from .config import Config, Environment, LogFormat
from .errors import ApplicationError, ConfigurationError
from .formats import URL, Email, EmailList
from .ports import SettingsSource
from .runner import run

__all__ = [
    "ApplicationError",
    "Config",
    "ConfigurationError",
    "Email",
    "EmailList",
    "Environment",
    "LogFormat",
    "SettingsSource",
    "URL",
    "run",
]
