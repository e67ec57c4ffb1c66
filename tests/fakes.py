"""Fake implementations for testing."""

from dataclasses import dataclass, field
from typing import Optional

from valcheck.application.ports import SettingsSource


@dataclass
class FakeSettings(SettingsSource):
    """In-memory settings source for testing."""

    values: dict[str, str] = field(default_factory=dict)

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """Get setting from fake storage."""
        return self.values.get(key, default)
