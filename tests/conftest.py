"""Test configuration and shared fixtures."""

import pytest

from calkinds.application.config import ValueTypeMode, reset_config
from calkinds.application.services import PropertyTypingService
from calkinds.domain.kinds import COMPATIBILITY_TABLE, KindCompatibilityTable
from calkinds.infrastructure.settings import EnvironmentSettingsSource


@pytest.fixture
def table() -> KindCompatibilityTable:
    """Process-wide compatibility table."""
    return COMPATIBILITY_TABLE


@pytest.fixture
def lenient_service(table) -> PropertyTypingService:
    """Service that falls back to the default on an illegal VALUE parameter."""
    return PropertyTypingService(table=table, mode=ValueTypeMode.LENIENT)


@pytest.fixture
def strict_service(table) -> PropertyTypingService:
    """Service that rejects an illegal VALUE parameter."""
    return PropertyTypingService(table=table, mode=ValueTypeMode.STRICT)


@pytest.fixture
def settings_factory():
    """Build settings sources over a plain dict instead of os.environ."""
    def factory(**values: str) -> EnvironmentSettingsSource:
        return EnvironmentSettingsSource(environ=dict(values))
    return factory


@pytest.fixture(autouse=True)
def _reset_global_config():
    """Keep the global Config from leaking between tests."""
    reset_config()
    yield
    reset_config()
