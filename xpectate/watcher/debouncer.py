"""
Xpectate Debouncer.

Rate-limits the command triggered by bursts of file system events.
Requires Python 3.11+.
"""

import time
from collections.abc import Callable
from dataclasses import dataclass

from xpectate.utils.logger import LoggerMixin


@dataclass
class TriggerState:
    """Loop-local trigger state for a single watch."""

    has_pending_change: bool
    last_fire_time: float


class Debouncer(LoggerMixin):
    """
    Decides when a burst of changes should fire the command.

    Unlike a trailing-edge debouncer this fires on the leading edge: the
    first change fires at once, later changes fire only when at least
    ``window`` seconds have passed since the previous fire. Nothing runs
    in the background; every decision is made when an event arrives.
    """

    def __init__(
        self,
        window: float = 1.0,
        clock: Callable[[], float] = time.monotonic,
        sticky_pending: bool = False,
    ) -> None:
        """
        Initialize the debouncer.

        Args:
            window: Minimum seconds between two fires
            clock: Monotonic time source
            sticky_pending: Keep the pending flag set after a fire
        """
        self._window = window
        self._clock = clock
        self._sticky = sticky_pending
        self.state = TriggerState(
            has_pending_change=False,
            last_fire_time=clock() - window,
        )

    @property
    def window(self) -> float:
        """Debounce window in seconds."""
        return self._window

    @property
    def pending(self) -> bool:
        """Whether a change has been seen and not yet reported."""
        return self.state.has_pending_change

    def mark_pending(self) -> bool:
        """
        Record a relevant change.

        Returns:
            True only when this call moved the trigger from idle to pending
        """
        if self.state.has_pending_change:
            return False
        self.state.has_pending_change = True
        return True

    def on_event(self, now: float | None = None) -> bool:
        """
        Evaluate the firing condition for an incoming event.

        Advances the last fire time when it returns True.

        Args:
            now: Event time, read from the clock when omitted

        Returns:
            True if the command should run now
        """
        if not self.state.has_pending_change:
            return False

        if now is None:
            now = self._clock()

        elapsed = now - self.state.last_fire_time
        if elapsed < self._window:
            self.log.debug("fire_suppressed", elapsed=round(elapsed, 3))
            return False

        self.state.last_fire_time = now
        if not self._sticky:
            self.state.has_pending_change = False
        return True
