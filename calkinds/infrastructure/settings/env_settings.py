"""
Environment-variable implementation of the SettingsSource port.

Keys are looked up with the CALKINDS_ prefix first and then bare, so
CALKINDS_LOG_LEVEL wins over LOG_LEVEL.
"""

import os
from typing import Mapping, Optional

from calkinds.application.ports import SettingsSource
from calkinds.shared.logging import get_logger

logger = get_logger("infrastructure.settings.env")

DEFAULT_PREFIX = "CALKINDS_"


class EnvironmentSettingsSource(SettingsSource):
    """Settings read from the process environment."""

    def __init__(
        self,
        environ: Optional[Mapping[str, str]] = None,
        prefix: str = DEFAULT_PREFIX,
    ):
        """
        Initialize the settings source.

        Args:
            environ: Mapping to read instead of os.environ
            prefix: Prefix tried before the bare key
        """
        self._environ = environ
        self.prefix = prefix
        self._cache: dict[str, Optional[str]] = {}
        self._overrides: dict[str, str] = {}

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """Get a configuration value by key."""
        if key in self._overrides:
            return self._overrides[key]

        if key not in self._cache:
            environ = os.environ if self._environ is None else self._environ
            value = environ.get(f"{self.prefix}{key}")
            if value is None:
                value = environ.get(key)
            self._cache[key] = value

        value = self._cache[key]
        return default if value is None else value

    def refresh(self) -> None:
        """Drop cached values."""
        self._cache.clear()
        logger.debug("settings_cache_cleared")

    def set_override(self, key: str, value: str) -> None:
        """
        Override a value in-process (tests and one-off tooling).

        Args:
            key: Configuration key
            value: Value to return for it
        """
        self._overrides[key] = value

    def clear_overrides(self) -> None:
        self._overrides.clear()


def get_settings_source() -> SettingsSource:
    """Factory function to create the settings source."""
    return EnvironmentSettingsSource()
