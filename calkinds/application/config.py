"""Application configuration for calkinds."""

from enum import Enum

from calkinds.application.errors import ConfigurationError
from calkinds.application.ports import SettingsSource

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Environment(Enum):
    """Application environment."""

    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TEST = "test"


class ValueTypeMode(Enum):
    """How an illegal VALUE parameter is handled while parsing."""

    LENIENT = "lenient"  # Warn and fall back to the property default
    STRICT = "strict"  # Reject the property


class LogFormat(Enum):
    """Log output format."""

    JSON = "json"
    CONSOLE = "console"


class Config:
    """Application configuration loaded from a settings source."""

    def __init__(self, settings: SettingsSource):
        """Initialize configuration with a settings source."""
        self.settings = settings
        self._load_config()

    def _load_config(self) -> None:
        """Load configuration from the settings source."""
        self.ENVIRONMENT = self._enum(Environment, "ENVIRONMENT", "development")

        # Logging
        self.LOG_LEVEL = (self.settings.get("LOG_LEVEL", "INFO") or "INFO").upper()
        self.LOG_FORMAT = self._enum(LogFormat, "LOG_FORMAT", "json")

        # Value type handling
        self.VALUE_TYPE_MODE = self._enum(ValueTypeMode, "VALUE_TYPE_MODE", "lenient")

    def _enum(self, enum_type: type, key: str, default: str) -> Enum:
        raw = (self.settings.get(key, default) or default).strip().lower()
        try:
            return enum_type(raw)
        except ValueError:
            allowed = ", ".join(member.value for member in enum_type)
            raise ConfigurationError(key, f"'{raw}' is not one of: {allowed}") from None

    @property
    def json_logs(self) -> bool:
        return self.LOG_FORMAT == LogFormat.JSON

    def validate(self) -> None:
        """Validate critical configuration values."""
        if self.LOG_LEVEL not in VALID_LOG_LEVELS:
            raise ConfigurationError(
                "LOG_LEVEL", f"'{self.LOG_LEVEL}' is not one of: {', '.join(VALID_LOG_LEVELS)}"
            )

        if self.ENVIRONMENT == Environment.PRODUCTION:
            # Production never guesses a value type
            if self.VALUE_TYPE_MODE != ValueTypeMode.STRICT:
                raise ConfigurationError("VALUE_TYPE_MODE", "must be 'strict' in production")

    def reload(self) -> None:
        """Reload configuration from the settings source."""
        self.settings.refresh()
        self._load_config()
        self.validate()


# Global configuration instance
_config: Config | None = None


def get_config(settings: SettingsSource | None = None) -> Config:
    """
    Get or create global configuration instance.

    Args:
        settings: SettingsSource implementation. Required on first call.

    Returns:
        Configuration instance

    Raises:
        ValueError: If settings is None and no global config exists
    """
    global _config
    if _config is None:
        if settings is None:
            raise ValueError(
                "SettingsSource must be provided when creating Config for the first time; "
                "inject it from the composition root."
            )
        config = Config(settings)
        config.validate()
        _config = config
    return _config


def reset_config() -> None:
    """Forget the global configuration instance."""
    global _config
    _config = None
