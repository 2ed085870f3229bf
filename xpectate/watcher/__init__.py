"""
Xpectate File Watcher Package.

File system monitoring that runs a command on change.
Requires Python 3.11+.
"""

from xpectate.watcher.debouncer import Debouncer, TriggerState
from xpectate.watcher.errors import (
    ClassificationError,
    CommandError,
    SetupError,
    SourceError,
    XpectateError,
)
from xpectate.watcher.events import EventKind, NormalizedEvent, RawError, RawEvent, classify
from xpectate.watcher.file_watcher import ChangeWatcher, watch
from xpectate.watcher.filters import is_relevant
from xpectate.watcher.runner import CommandRunner
from xpectate.watcher.source import WatchdogEventSource

__all__ = [
    "ChangeWatcher",
    "ClassificationError",
    "CommandError",
    "CommandRunner",
    "Debouncer",
    "EventKind",
    "NormalizedEvent",
    "RawError",
    "RawEvent",
    "SetupError",
    "SourceError",
    "TriggerState",
    "WatchdogEventSource",
    "XpectateError",
    "classify",
    "is_relevant",
    "watch",
]
