"""Application ports (interfaces) for valcheck.

Settings are read through this port so the application layer never
touches the process environment directly.
"""

from abc import ABC, abstractmethod
from typing import Optional


class SettingsSource(ABC):
    """Port for reading configuration settings."""

    @abstractmethod
    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """
        Read a setting.

        Args:
            key: Setting name without any source-specific prefix (e.g. "LOG_LEVEL")
            default: Value returned when the setting is absent

        Returns:
            The raw setting value, or default
        """
        pass
