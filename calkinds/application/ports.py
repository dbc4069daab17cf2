"""Application ports (interfaces) for calkinds.

External configuration sources are reached only through these interfaces.
"""

from abc import ABC, abstractmethod
from typing import Optional


class SettingsSource(ABC):
    """Port for configuration lookup."""

    @abstractmethod
    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """
        Get a configuration value by key.

        Args:
            key: Configuration key
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        pass

    @abstractmethod
    def refresh(self) -> None:
        """Drop any cached values so the next lookup reads the source again."""
        pass
