"""Shared test doubles."""

from collections.abc import Iterator
from pathlib import Path

from xpectate.watcher.events import RawEvent, RawNotification
from xpectate.watcher.runner import CommandRunner


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, now: float = 100.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


class RecordingRunner(CommandRunner):
    """Command runner that records command lines instead of spawning them."""

    def __init__(self, clock: FakeClock | None = None) -> None:
        self.commands: list[str] = []
        self.times: list[float] = []
        self._clock = clock

    def run(self, command: str) -> None:
        self.commands.append(command)
        if self._clock is not None:
            self.times.append(self._clock())
        return None


def timed_source(
    clock: FakeClock, timed: list[tuple[float, RawNotification]]
) -> Iterator[RawNotification]:
    """Yield notifications, moving the clock to each one's offset first."""
    start = clock.now
    for offset, notification in timed:
        clock.now = start + offset
        yield notification


def modify(*paths: str) -> RawEvent:
    """Build a raw modify event."""
    return RawEvent(kind="modify", paths=[Path(p) for p in paths])

