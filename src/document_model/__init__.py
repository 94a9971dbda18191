"""Structured document representation used as the pivot between Markdown and JSON."""

from .models import (
    MAX_HEADING_LEVEL,
    MIN_HEADING_LEVEL,
    ContentNode,
    DocumentRoot,
    HeadingNode,
    ListNode,
    ParagraphNode,
    node_from_dict,
)

__all__ = [
    "ContentNode",
    "DocumentRoot",
    "HeadingNode",
    "ListNode",
    "ParagraphNode",
    "MAX_HEADING_LEVEL",
    "MIN_HEADING_LEVEL",
    "node_from_dict",
]
