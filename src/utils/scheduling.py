"""Deferred callbacks (settle timers, debounce) on a pluggable event loop."""

import asyncio
import logging
import threading
from abc import ABC, abstractmethod
from typing import Any, Callable, Optional

logger = logging.getLogger(__name__)


class TimerHandle(ABC):
    """A scheduled callback that can still be cancelled."""

    @abstractmethod
    def cancel(self):
        """Prevent the callback from running if it has not run yet."""


class Scheduler(ABC):
    """Runs callbacks after a delay on some event loop."""

    @abstractmethod
    def call_later(self, delay_seconds: float, callback: Callable[[], None]) -> TimerHandle:
        """Schedule callback to run once after delay_seconds."""


class _ThreadingTimerHandle(TimerHandle):
    def __init__(self, timer: threading.Timer):
        self._timer = timer

    def cancel(self):
        self._timer.cancel()


class ThreadingScheduler(Scheduler):
    """Scheduler backed by daemon threading.Timer instances."""

    def call_later(self, delay_seconds: float, callback: Callable[[], None]) -> TimerHandle:
        timer = threading.Timer(delay_seconds, callback)
        timer.daemon = True
        timer.start()
        return _ThreadingTimerHandle(timer)


class AsyncioScheduler(Scheduler):
    """Scheduler that defers callbacks on an asyncio event loop."""

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None):
        self._loop = loop

    def call_later(self, delay_seconds: float, callback: Callable[[], None]) -> TimerHandle:
        loop = self._loop or asyncio.get_running_loop()
        # asyncio.TimerHandle already provides cancel()
        return loop.call_later(delay_seconds, callback)


class Debouncer:
    """Coalesces bursts of triggers into one call with the latest value.

    Each trigger restarts the quiet period; the callback runs once the input
    has been stable for delay_ms.
    """

    def __init__(
        self,
        callback: Callable[[Any], None],
        delay_ms: int = 300,
        scheduler: Optional[Scheduler] = None,
    ):
        self.callback = callback
        self.delay_ms = delay_ms
        self.scheduler = scheduler or ThreadingScheduler()
        self._lock = threading.Lock()
        self._pending: Optional[TimerHandle] = None
        self._generation = 0
        self._value: Any = None

    def trigger(self, value: Any = None):
        """Record value and restart the quiet period."""
        with self._lock:
            self._value = value
            self._generation += 1
            generation = self._generation
            if self._pending is not None:
                self._pending.cancel()
            self._pending = self.scheduler.call_later(self.delay_ms / 1000, lambda: self._fire(generation))

    def flush(self):
        """Run the pending callback immediately, if any."""
        with self._lock:
            if self._pending is None:
                return
            self._pending.cancel()
            generation = self._generation
        self._fire(generation)

    def cancel(self):
        """Drop the pending callback without running it."""
        with self._lock:
            if self._pending is not None:
                self._pending.cancel()
            self._pending = None
            self._generation += 1

    @property
    def is_pending(self) -> bool:
        return self._pending is not None

    def _fire(self, generation: int):
        with self._lock:
            # A newer trigger superseded this one
            if generation != self._generation or self._pending is None:
                return
            self._pending = None
            value = self._value

        logger.debug("Debounced callback firing")
        self.callback(value)
