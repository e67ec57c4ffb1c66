"""Settings adapter reading the process environment."""

import os
from typing import Mapping, Optional

from ..application.ports import SettingsSource

ENV_PREFIX = "VALCHECK_"


class EnvironmentSettings(SettingsSource):
    """Reads settings from VALCHECK_* environment variables."""

    def __init__(self, environ: Optional[Mapping[str, str]] = None, prefix: str = ENV_PREFIX):
        """
        Initialize the adapter.

        Args:
            environ: Mapping to read instead of os.environ (used by tests)
            prefix: Prefix prepended to every setting name
        """
        self._environ = os.environ if environ is None else environ
        self._prefix = prefix

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self._environ.get(f"{self._prefix}{key}", default)
