"""
Application bootstrap and dependency wiring.
This is the composition root where all dependencies are wired together.
"""

from typing import Optional

from calkinds.application.config import Config, get_config
from calkinds.application.ports import SettingsSource
from calkinds.application.services import PropertyTypingService
from calkinds.domain.kinds import COMPATIBILITY_TABLE
from calkinds.infrastructure.settings import get_settings_source
from calkinds.shared.logging import configure_logging, get_logger

logger = get_logger("infrastructure.bootstrap")


def bootstrap_config(settings: Optional[SettingsSource] = None) -> Config:
    """
    Build the configuration and configure logging from it.

    Args:
        settings: Settings source; the environment when omitted

    Returns:
        Configured Config instance
    """
    config = get_config(settings or get_settings_source())
    configure_logging(
        environment=config.ENVIRONMENT.value,
        log_level=config.LOG_LEVEL,
        json_logs=config.json_logs,
    )
    logger.info(
        "calkinds_bootstrapped",
        value_type_mode=config.VALUE_TYPE_MODE.value,
        properties=len(COMPATIBILITY_TABLE),
    )
    return config


def build_property_typing_service(config: Optional[Config] = None) -> PropertyTypingService:
    """
    Build the property typing service for the configured mode.

    Args:
        config: Configuration; bootstrapped from the environment when omitted

    Returns:
        PropertyTypingService over the process-wide compatibility table
    """
    config = config or bootstrap_config()
    return PropertyTypingService(table=COMPATIBILITY_TABLE, mode=config.VALUE_TYPE_MODE)
