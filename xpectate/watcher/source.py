"""
Xpectate Event Source.

Cross-platform file system notifications using watchdog, exposed as a
blocking stream of raw notifications.
Requires Python 3.11+.
"""

import os
import queue
import threading
from collections.abc import Iterator
from pathlib import Path
from typing import Any

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

from xpectate.utils.logger import LoggerMixin
from xpectate.watcher.errors import SetupError
from xpectate.watcher.events import RawError, RawEvent, RawNotification

# watchdog event_type -> structural kind
_WATCHDOG_KINDS: dict[str, str] = {
    "opened": "access",
    "closed": "access",
    "closed_no_write": "access",
    "created": "create",
    "modified": "modify",
    "moved": "modify",
    "deleted": "remove",
}

_CLOSED = object()


def to_raw_event(event: FileSystemEvent) -> RawEvent:
    """Translate a watchdog event into a raw notification."""
    kind = _WATCHDOG_KINDS.get(event.event_type, "other")
    paths = [Path(os.fsdecode(event.src_path))]

    dest_path = getattr(event, "dest_path", "")
    if dest_path:
        paths.append(Path(os.fsdecode(dest_path)))

    return RawEvent(kind=kind, paths=paths)


class QueueingHandler(FileSystemEventHandler, LoggerMixin):
    """
    Handles file system events by queueing them for the watch loop.

    Runs on the observer thread; the only shared state is the queue.
    """

    def __init__(self, events: "queue.Queue[Any]") -> None:
        """
        Initialize the handler.

        Args:
            events: Queue consumed by the watch loop
        """
        super().__init__()
        self._events = events

    def on_any_event(self, event: FileSystemEvent) -> None:
        """Queue every event, including directory events."""
        try:
            raw: RawNotification = to_raw_event(event)
        except (TypeError, ValueError) as e:
            raw = RawError(message=f"unreadable {event.event_type} event: {e}")
        self._events.put(raw)


class WatchdogEventSource(LoggerMixin):
    """
    Watches a path and yields raw notifications as they arrive.

    Iterating blocks until the next notification. The stream ends when the
    source is stopped, the stop event is set or the observer thread dies.
    It can be iterated only once.
    """

    def __init__(
        self,
        path: Path | str,
        recursive: bool = True,
        poll_interval: float = 0.5,
        stop_event: threading.Event | None = None,
    ) -> None:
        """
        Initialize the event source.

        Args:
            path: File or directory to watch
            recursive: Whether to watch subdirectories
            poll_interval: Seconds between checks for shutdown while blocked
            stop_event: Optional event that ends the stream when set
        """
        self._path = Path(path)
        self._recursive = recursive
        self._poll_interval = poll_interval
        self._stop_event = stop_event
        self._queue: queue.Queue[Any] = queue.Queue()
        self._handler = QueueingHandler(self._queue)
        self._observer: Observer | None = None
        self._stopping = False
        self._consumed = False

    @property
    def path(self) -> Path:
        """Watched path."""
        return self._path

    def start(self) -> None:
        """
        Start watching.

        Raises:
            SetupError: If the path does not exist or the observer cannot start
        """
        if self._observer is not None:
            raise SetupError("Event source is already running")

        if not self._path.exists():
            raise SetupError(f"Path does not exist: {self._path}")

        observer = Observer()
        try:
            observer.schedule(self._handler, str(self._path), recursive=self._recursive)
            observer.start()
        except OSError as e:
            raise SetupError(f"Cannot watch {self._path}: {e}") from e

        self._observer = observer
        self.log.debug("event_source_started", path=str(self._path), recursive=self._recursive)

    def stop(self) -> None:
        """Stop watching and close the stream."""
        if self._observer is None:
            return

        self._stopping = True
        self._observer.stop()
        self._observer.join(timeout=5.0)
        self._observer = None
        self._queue.put(_CLOSED)
        self.log.debug("event_source_stopped")

    @property
    def is_running(self) -> bool:
        """Check if the observer is alive."""
        return self._observer is not None and self._observer.is_alive()

    def __iter__(self) -> Iterator[RawNotification]:
        if self._consumed:
            raise RuntimeError("Event source cannot be iterated twice")
        self._consumed = True
        return self._notifications()

    def _notifications(self) -> Iterator[RawNotification]:
        while True:
            if self._stop_event is not None and self._stop_event.is_set():
                return

            try:
                item = self._queue.get(timeout=self._poll_interval)
            except queue.Empty:
                if self._stopping:
                    return
                if not self.is_running:
                    yield RawError(message="observer thread stopped unexpectedly", path=self._path)
                    return
                continue

            if item is _CLOSED:
                return
            yield item

    def __enter__(self) -> "WatchdogEventSource":
        """Context manager entry."""
        self.start()
        return self

    def __exit__(self, *args: Any) -> None:
        """Context manager exit."""
        self.stop()
