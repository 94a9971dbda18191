"""Shared fixtures: a manually advanced scheduler and fake scrollable views."""

import pytest

from src.scroll_sync import ScrollTarget
from src.utils.scheduling import Scheduler, TimerHandle


class ManualTimerHandle(TimerHandle):
    def __init__(self, when: float, callback):
        self.when = when
        self.callback = callback
        self.cancelled = False

    def cancel(self):
        self.cancelled = True


class ManualScheduler(Scheduler):
    """Scheduler whose clock only moves when the test calls advance()."""

    def __init__(self):
        self.now = 0.0
        self.timers = []

    def call_later(self, delay_seconds, callback):
        handle = ManualTimerHandle(self.now + delay_seconds, callback)
        self.timers.append(handle)
        return handle

    def advance(self, seconds: float):
        self.now += seconds
        due = sorted(
            (timer for timer in self.timers if not timer.cancelled and timer.when <= self.now + 1e-9),
            key=lambda timer: timer.when,
        )
        for timer in due:
            self.timers.remove(timer)
            if not timer.cancelled:
                timer.callback()

    @property
    def pending(self) -> int:
        return sum(1 for timer in self.timers if not timer.cancelled)


class FakeScrollTarget(ScrollTarget):
    """In-memory scrollable view recording every offset written to it."""

    def __init__(self, scroll_top=0.0, scroll_height=0.0, client_height=0.0):
        self._scroll_top = scroll_top
        self._scroll_height = scroll_height
        self._client_height = client_height
        self.writes = []

    @property
    def scroll_top(self):
        return self._scroll_top

    @scroll_top.setter
    def scroll_top(self, value):
        self._scroll_top = value
        self.writes.append(value)

    @property
    def scroll_height(self):
        return self._scroll_height

    @property
    def client_height(self):
        return self._client_height


@pytest.fixture
def manual_scheduler():
    return ManualScheduler()


@pytest.fixture
def make_scroll_target():
    return FakeScrollTarget
