"""
Xpectate Test Configuration.

Pytest fixtures and configuration.
Requires Python 3.11+.
"""

import pytest
import structlog

from tests.helpers import FakeClock, RecordingRunner
from xpectate.utils.config import LoggingSettings, Settings, WatcherSettings


@pytest.fixture(autouse=True)
def unconfigured_logging():
    """Start and end every test with structlog's default configuration."""
    structlog.reset_defaults()
    yield
    structlog.reset_defaults()


@pytest.fixture
def clock() -> FakeClock:
    """Fake clock starting at an arbitrary time."""
    return FakeClock()


@pytest.fixture
def runner(clock: FakeClock) -> RecordingRunner:
    """Runner recording the time of each command."""
    return RecordingRunner(clock)


@pytest.fixture
def settings() -> Settings:
    """Default settings, independent of the environment."""
    return Settings(
        watcher=WatcherSettings(debounce_window_ms=1000, sticky_pending=False),
        logging=LoggingSettings(level="DEBUG", format="console"),
    )
