"""Scroll geometry and proportional offset mapping between two views."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional


class ScrollTarget(ABC):
    """A scrollable view whose vertical offset can be read and written."""

    @property
    @abstractmethod
    def scroll_top(self) -> float:
        """Current vertical offset."""

    @scroll_top.setter
    @abstractmethod
    def scroll_top(self, value: float):
        """Scroll to the given vertical offset."""

    @property
    @abstractmethod
    def scroll_height(self) -> float:
        """Total height of the scrollable content."""

    @property
    @abstractmethod
    def client_height(self) -> float:
        """Height of the visible viewport."""


@dataclass(frozen=True)
class ScrollMetrics:
    """Snapshot of a view's scroll geometry."""

    scroll_top: float
    scroll_height: float
    client_height: float

    @property
    def scroll_range(self) -> float:
        """Maximum offset; zero or negative when the content fits the viewport."""
        return self.scroll_height - self.client_height

    @classmethod
    def from_target(cls, target: ScrollTarget) -> "ScrollMetrics":
        return cls(
            scroll_top=target.scroll_top,
            scroll_height=target.scroll_height,
            client_height=target.client_height,
        )


def compute_scroll_sync(source: ScrollMetrics, target: ScrollMetrics) -> Optional[float]:
    """
    Map the source view's relative position onto the target view.

    Args:
        source: Metrics of the view that scrolled
        target: Metrics of the view to follow

    Returns:
        New scroll offset for the target, or None when either view has no
        overflow and there is nothing to sync
    """
    if source.scroll_range <= 0 or target.scroll_range <= 0:
        return None

    percentage = source.scroll_top / source.scroll_range
    return percentage * target.scroll_range
