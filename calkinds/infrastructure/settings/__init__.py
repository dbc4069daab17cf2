"""Settings infrastructure."""

from .env_settings import EnvironmentSettingsSource, get_settings_source

__all__ = [
    "EnvironmentSettingsSource",
    "get_settings_source",
]
