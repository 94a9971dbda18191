"""Scroll synchronization between the source editor and the rendered preview."""

from .accessor import (
    LayeredScrollAccessor,
    ScrollAccessor,
    ancestor_search,
    direct_handle,
    global_fallback,
    nested_property,
)
from .controller import ScrollSyncConfig, ScrollSyncController, SyncState
from .metrics import ScrollMetrics, ScrollTarget, compute_scroll_sync

__all__ = [
    "LayeredScrollAccessor",
    "ScrollAccessor",
    "ScrollMetrics",
    "ScrollSyncConfig",
    "ScrollSyncController",
    "ScrollTarget",
    "SyncState",
    "ancestor_search",
    "compute_scroll_sync",
    "direct_handle",
    "global_fallback",
    "nested_property",
]
