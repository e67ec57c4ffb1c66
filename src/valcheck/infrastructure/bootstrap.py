"""
Library bootstrap.
This is the composition root where settings, configuration and logging
are wired together.
"""

from typing import Optional

from ..application.config import Config
from ..application.ports import SettingsSource
from ..shared.logging import configure_logging, get_logger
from .settings import EnvironmentSettings

logger = get_logger(__name__)


def configure(settings: Optional[SettingsSource] = None) -> Config:
    """
    Configure valcheck from a settings source.

    Calling this is optional: without it the library logs nothing of its
    own accord.

    Args:
        settings: Settings source; VALCHECK_* environment variables when omitted

    Returns:
        The validated configuration

    Raises:
        ConfigurationError: If a setting holds an unusable value
    """
    config = Config(settings or EnvironmentSettings())
    config.validate()

    configure_logging(
        environment=config.ENVIRONMENT.value,
        log_level=config.LOG_LEVEL,
        json_logs=config.json_logs,
        include_caller_info=config.LOG_CALLER_INFO,
    )
    logger.debug(
        "valcheck_configured",
        environment=config.ENVIRONMENT.value,
        log_format=config.LOG_FORMAT.value,
    )
    return config
