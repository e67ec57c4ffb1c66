"""Test configuration and shared fixtures."""

import logging
from datetime import datetime, timedelta, timezone

import pytest

from tests.fakes import FakeSettings
from valcheck.shared.logging import LOGGER_NAME


@pytest.fixture(autouse=True)
def reset_valcheck_logger():
    """Restore the "valcheck" logger after tests that configure logging."""
    logger = logging.getLogger(LOGGER_NAME)
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate

    yield logger

    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate


@pytest.fixture
def settings_factory():
    """Build in-memory settings sources."""

    def _make(**values: str) -> FakeSettings:
        return FakeSettings(values)

    return _make


@pytest.fixture
def today() -> datetime:
    """Fixed aware timestamp for timestamp comparisons."""
    return datetime(2024, 3, 1, 9, 30, tzinfo=timezone.utc)


@pytest.fixture
def tomorrow(today: datetime) -> datetime:
    """One day after today."""
    return today + timedelta(days=1)
