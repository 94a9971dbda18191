"""Locating the scrollable element of a view through layered lookup strategies."""

import logging
from typing import Any, Callable, List, Optional, Sequence

from .metrics import ScrollTarget

logger = logging.getLogger(__name__)

ScrollAccessor = Callable[[], Optional[ScrollTarget]]


class LayeredScrollAccessor:
    """Tries each lookup strategy in order and returns the first element found.

    The usual order is direct handle, nested property, ancestor search and a
    global fallback. Not finding anything is a valid outcome (None) that
    disables synchronization for that event.
    """

    def __init__(self, strategies: Sequence[ScrollAccessor], name: str = "view"):
        self.strategies: List[ScrollAccessor] = list(strategies)
        self.name = name

    def __call__(self) -> Optional[ScrollTarget]:
        for strategy in self.strategies:
            try:
                target = strategy()
            except Exception as e:
                logger.debug(f"Scroll lookup strategy for {self.name} failed: {e}")
                continue
            if target is not None:
                return target

        logger.debug(f"No scrollable element found for {self.name}")
        return None


def direct_handle(get_handle: Callable[[], Any]) -> ScrollAccessor:
    """Use the handle itself when it is already scrollable."""

    def lookup() -> Optional[ScrollTarget]:
        handle = get_handle()
        return handle if _is_scrollable(handle) else None

    return lookup


def nested_property(get_owner: Callable[[], Any], *attribute_path: str) -> ScrollAccessor:
    """Follow attribute_path from the owner (e.g. editor.view.scroller)."""

    def lookup() -> Optional[ScrollTarget]:
        current = get_owner()
        for attribute in attribute_path:
            if current is None:
                return None
            current = getattr(current, attribute, None)
        return current if _is_scrollable(current) else None

    return lookup


def ancestor_search(
    get_start: Callable[[], Any],
    find_in: Callable[[Any], Any],
    parent_attribute: str = "parent",
) -> ScrollAccessor:
    """Walk up the parent chain, asking find_in to locate the element at each level."""

    def lookup() -> Optional[ScrollTarget]:
        current = get_start()
        seen = set()
        while current is not None and id(current) not in seen:
            seen.add(id(current))
            found = find_in(current)
            if _is_scrollable(found):
                return found
            current = getattr(current, parent_attribute, None)
        return None

    return lookup


def global_fallback(find_anywhere: Callable[[], Any]) -> ScrollAccessor:
    """Last resort lookup that ignores the view hierarchy."""

    def lookup() -> Optional[ScrollTarget]:
        found = find_anywhere()
        return found if _is_scrollable(found) else None

    return lookup


def _is_scrollable(candidate: Any) -> bool:
    if candidate is None:
        return False
    if isinstance(candidate, ScrollTarget):
        return True
    return all(hasattr(candidate, name) for name in ("scroll_top", "scroll_height", "client_height"))
