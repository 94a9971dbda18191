"""Keeps the editor and preview scroll positions aligned without feedback loops."""

import logging
import os
import threading
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from src.utils.scheduling import Scheduler, ThreadingScheduler, TimerHandle

from .accessor import ScrollAccessor
from .metrics import ScrollMetrics, compute_scroll_sync

logger = logging.getLogger(__name__)


class SyncState(Enum):
    """Which view, if any, is currently driving the other."""

    IDLE = "idle"
    DRIVEN_BY_EDITOR = "driven_by_editor"
    DRIVEN_BY_PREVIEW = "driven_by_preview"


@dataclass
class ScrollSyncConfig:
    """Configuration for scroll synchronization."""

    enabled: bool = True
    settle_delay_ms: int = 100

    @classmethod
    def from_env(cls) -> "ScrollSyncConfig":
        """Create configuration from environment variables."""
        return cls(
            enabled=os.getenv("SCROLL_SYNC_ENABLED", "true").lower() == "true",
            settle_delay_ms=int(os.getenv("SCROLL_SETTLE_DELAY_MS", "100")),
        )


class ScrollSyncController:
    """Two-state latch with a timed release around proportional scroll mapping.

    Scroll APIs do not tell programmatic scrolls from user scrolls, so after
    the controller writes one view's offset it ignores scroll events from that
    view until a settle timer returns it to IDLE. A fast second scroll inside
    the settle window can be dropped; the next event re-syncs.
    """

    def __init__(
        self,
        editor_accessor: ScrollAccessor,
        preview_accessor: ScrollAccessor,
        scheduler: Optional[Scheduler] = None,
        config: Optional[ScrollSyncConfig] = None,
    ):
        """
        Initialize the controller.

        Args:
            editor_accessor: Returns the editor's scrollable element or None
            preview_accessor: Returns the preview's scrollable element or None
            scheduler: Event loop used for the settle timer
            config: Enable flag and settle delay
        """
        self.editor_accessor = editor_accessor
        self.preview_accessor = preview_accessor
        self.scheduler = scheduler or ThreadingScheduler()
        self.config = config or ScrollSyncConfig()

        self._lock = threading.RLock()
        self._state = SyncState.IDLE
        self._settle_timer: Optional[TimerHandle] = None
        self._settle_generation = 0

    @property
    def state(self) -> SyncState:
        return self._state

    @property
    def enabled(self) -> bool:
        return self.config.enabled

    @enabled.setter
    def enabled(self, value: bool):
        self.config.enabled = value
        if not value:
            self.close()

    def on_editor_scroll(self) -> Optional[float]:
        """Handle a scroll event from the editor. Returns the preview offset written, if any."""
        return self._sync(
            driving_state=SyncState.DRIVEN_BY_EDITOR,
            blocked_by=SyncState.DRIVEN_BY_PREVIEW,
            source_accessor=self.editor_accessor,
            target_accessor=self.preview_accessor,
        )

    def on_preview_scroll(self) -> Optional[float]:
        """Handle a scroll event from the preview. Returns the editor offset written, if any."""
        return self._sync(
            driving_state=SyncState.DRIVEN_BY_PREVIEW,
            blocked_by=SyncState.DRIVEN_BY_EDITOR,
            source_accessor=self.preview_accessor,
            target_accessor=self.editor_accessor,
        )

    def close(self):
        """Cancel any pending settle timer and return to IDLE."""
        with self._lock:
            self._cancel_settle_timer()
            self._state = SyncState.IDLE

    def _sync(
        self,
        driving_state: SyncState,
        blocked_by: SyncState,
        source_accessor: ScrollAccessor,
        target_accessor: ScrollAccessor,
    ) -> Optional[float]:
        if not self.config.enabled:
            return None

        with self._lock:
            if self._state is blocked_by:
                # Echo of our own write to this view
                return None

            source = source_accessor()
            target = target_accessor()
            if source is None or target is None:
                logger.debug(
                    f"Scroll sync skipped: missing elements "
                    f"(source={source is not None}, target={target is not None})"
                )
                return None

            offset = compute_scroll_sync(ScrollMetrics.from_target(source), ScrollMetrics.from_target(target))
            if offset is None:
                return None

            # Latch before writing so the target's scroll event is ignored
            self._enter(driving_state)
            target.scroll_top = offset
            logger.debug(f"Scroll sync ({driving_state.value}): target offset {offset:.1f}")
            return offset

    def _enter(self, state: SyncState):
        self._cancel_settle_timer()
        self._state = state
        self._settle_generation += 1
        generation = self._settle_generation
        self._settle_timer = self.scheduler.call_later(
            self.config.settle_delay_ms / 1000, lambda: self._settle(generation)
        )

    def _settle(self, generation: int):
        with self._lock:
            if generation != self._settle_generation:
                return
            self._settle_timer = None
            self._state = SyncState.IDLE

    def _cancel_settle_timer(self):
        if self._settle_timer is not None:
            self._settle_timer.cancel()
            self._settle_timer = None
        self._settle_generation += 1
