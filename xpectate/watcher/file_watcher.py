"""
Xpectate File Watcher.

Runs a command when files under a path change, at most once per
debounce window.
Requires Python 3.11+.
"""

import threading
import time
from collections.abc import Callable, Iterable, Sequence
from contextlib import nullcontext
from pathlib import Path

import structlog

from xpectate.utils.config import Settings, get_settings
from xpectate.utils.logger import LoggerMixin, configure_logging
from xpectate.watcher.debouncer import Debouncer
from xpectate.watcher.errors import SourceError
from xpectate.watcher.events import RawError, RawEvent, RawNotification, classify
from xpectate.watcher.filters import is_relevant
from xpectate.watcher.runner import CommandRunner, split_command
from xpectate.watcher.source import WatchdogEventSource


class ChangeWatcher(LoggerMixin):
    """
    Consumes raw notifications and fires the configured command.

    Processing is synchronous: each notification is filtered, classified
    and checked against the debouncer before the next one is read.
    """

    def __init__(
        self,
        extensions: Sequence[str] | None = None,
        command: str | None = None,
        debouncer: Debouncer | None = None,
        runner: CommandRunner | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """
        Initialize the watcher.

        Args:
            extensions: Bare extensions to accept, or None for all
            command: Command line to run on change
            debouncer: Trigger deciding when to fire
            runner: Launcher for the command
            clock: Monotonic time source for event timestamps
        """
        self._extensions = list(extensions) if extensions is not None else None
        self._command = command if split_command(command) else None
        self._clock = clock
        self._debouncer = debouncer or Debouncer(clock=clock)
        self._runner = runner or CommandRunner()

    @property
    def extensions(self) -> list[str] | None:
        """Extension allow-list, None when every event is accepted."""
        return self._extensions

    @property
    def command(self) -> str | None:
        """Configured command line, None when nothing runs."""
        return self._command

    @property
    def debouncer(self) -> Debouncer:
        """Trigger state for this watch."""
        return self._debouncer

    def process(self, notification: RawNotification) -> bool:
        """
        Handle one notification from the event source.

        Args:
            notification: Raw success or error notification

        Returns:
            True if the command was run for this notification
        """
        if isinstance(notification, RawError):
            self.log.error(
                "source_error",
                error=notification.message,
                path=str(notification.path) if notification.path else None,
            )
            return False

        return self._process_event(notification)

    def _process_event(self, raw: RawEvent) -> bool:
        if not is_relevant(raw.paths, self._extensions):
            self.log.debug("event_filtered", kind=raw.kind, paths=[str(p) for p in raw.paths])
            return False

        try:
            event = classify(raw)
        except SourceError as e:
            self.log.error("source_error", error=str(e))
            return False

        if self._debouncer.mark_pending():
            self.log.info("change_detected", kind=event.kind.value, path=event.path)

        if self._command is None:
            return False

        if not self._debouncer.on_event(self._clock()):
            return False

        self._runner.run(self._command)
        return True

    def run(
        self,
        notifications: Iterable[RawNotification],
        stop_event: threading.Event | None = None,
    ) -> None:
        """
        Process notifications until the stream ends or stop_event is set.

        Args:
            notifications: Blocking stream of raw notifications
            stop_event: Optional event checked between notifications
        """
        for notification in notifications:
            self.process(notification)
            if stop_event is not None and stop_event.is_set():
                break


def watch(
    path: str | Path,
    extensions: Sequence[str] | None = None,
    command: str | None = None,
    *,
    source: Iterable[RawNotification] | None = None,
    runner: CommandRunner | None = None,
    stop_event: threading.Event | None = None,
    settings: Settings | None = None,
    clock: Callable[[], float] = time.monotonic,
) -> None:
    """
    Watch a path and run a command when it changes.

    Blocks until the event stream ends or stop_event is set. Logging is
    configured from settings unless the caller already set up structlog.

    Args:
        path: File or directory to watch
        extensions: Bare extensions (no dot, case-sensitive) to accept
        command: Command line to run, split on whitespace
        source: Notification stream to use instead of a watchdog observer
        runner: Launcher for the command
        stop_event: Optional event that ends the watch when set
        settings: Settings to use instead of get_settings()
        clock: Monotonic time source

    Raises:
        SetupError: If the path cannot be watched
    """
    settings = settings or get_settings()
    if not structlog.is_configured():
        configure_logging(settings)

    debouncer = Debouncer(
        window=settings.watcher.debounce_window,
        clock=clock,
        sticky_pending=settings.watcher.sticky_pending,
    )
    watcher = ChangeWatcher(
        extensions=extensions,
        command=command,
        debouncer=debouncer,
        runner=runner,
        clock=clock,
    )

    if source is None:
        context = WatchdogEventSource(
            path,
            recursive=settings.watcher.recursive,
            poll_interval=settings.watcher.poll_interval,
            stop_event=stop_event,
        )
    else:
        context = nullcontext(source)

    with context as notifications:
        watcher.log.info(
            "watch_started",
            path=str(path),
            extensions=watcher.extensions,
            command=watcher.command,
            window=debouncer.window,
        )
        watcher.run(notifications, stop_event=stop_event)

    watcher.log.info("watch_stopped", path=str(path))
