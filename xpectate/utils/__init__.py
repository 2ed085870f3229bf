"""
Xpectate Utilities Package.

Configuration and logging shared by the watcher and the CLI.
Requires Python 3.11+.
"""

from xpectate.utils.config import LoggingSettings, Settings, WatcherSettings, get_settings
from xpectate.utils.logger import LoggerMixin, configure_logging, get_logger

__all__ = [
    "Settings",
    "WatcherSettings",
    "LoggingSettings",
    "get_settings",
    "configure_logging",
    "get_logger",
    "LoggerMixin",
]
