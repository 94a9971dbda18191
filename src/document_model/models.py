"""Data classes for the structured document representation (JSON IR)."""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Union

logger = logging.getLogger(__name__)

MIN_HEADING_LEVEL = 1
MAX_HEADING_LEVEL = 6


@dataclass
class ParagraphNode:
    """A single paragraph line."""

    text: str
    type: str = field(default="paragraph", init=False)

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type, "text": self.text}


@dataclass
class ListNode:
    """A run of consecutive list items."""

    items: List[str] = field(default_factory=list)
    type: str = field(default="list", init=False)

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type, "items": list(self.items)}


@dataclass
class HeadingNode:
    """A heading plus the paragraphs that follow it up to the next heading."""

    level: int
    title: str
    children: List["ContentNode"] = field(default_factory=list)
    type: str = field(default="heading", init=False)

    def __post_init__(self):
        if not MIN_HEADING_LEVEL <= self.level <= MAX_HEADING_LEVEL:
            raise ValueError(
                f"Heading level must be between {MIN_HEADING_LEVEL} and {MAX_HEADING_LEVEL}, got {self.level}"
            )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type,
            "level": self.level,
            "title": self.title,
            "children": [child.to_dict() for child in self.children],
        }


ContentNode = Union[HeadingNode, ParagraphNode, ListNode]


@dataclass
class DocumentRoot:
    """Root of the IR: reserved metadata, structured content and the original text."""

    metadata: Dict[str, Any] = field(default_factory=dict)
    content: List[ContentNode] = field(default_factory=list)
    raw: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """Return the JSON-serializable wire shape."""
        return {
            "metadata": dict(self.metadata),
            "content": [node.to_dict() for node in self.content],
            "raw": self.raw,
        }

    def without_raw(self) -> "DocumentRoot":
        """Copy of this document with the raw text dropped, forcing structural rebuilds."""
        return DocumentRoot(metadata=dict(self.metadata), content=list(self.content), raw="")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DocumentRoot":
        """
        Build a document from its wire shape.

        Parsing is lenient: missing fields get defaults and nodes of unknown
        type are dropped.

        Args:
            data: Decoded JSON object

        Returns:
            DocumentRoot instance

        Raises:
            ValueError: If data is not a mapping
        """
        if not isinstance(data, dict):
            raise ValueError(f"Document must be a JSON object, got {type(data).__name__}")

        metadata = data.get("metadata") or {}
        if not isinstance(metadata, dict):
            metadata = {}

        raw = data.get("raw") or ""
        if not isinstance(raw, str):
            raw = str(raw)

        return cls(metadata=metadata, content=node_list_from_dicts(data.get("content")), raw=raw)


def node_list_from_dicts(nodes: Any) -> List[ContentNode]:
    """Convert a list of node dictionaries, skipping anything unrecognised."""
    if not isinstance(nodes, list):
        return []

    result = []
    for node_data in nodes:
        node = node_from_dict(node_data)
        if node is not None:
            result.append(node)
    return result


def node_from_dict(data: Any) -> Union[ContentNode, None]:
    """Convert a single node dictionary, returning None for unknown shapes."""
    if not isinstance(data, dict):
        logger.debug(f"Skipping non-object node: {data!r}")
        return None

    node_type = data.get("type")

    if node_type == "heading":
        level = _coerce_level(data.get("level"))
        return HeadingNode(
            level=level,
            title=_text(data.get("title")),
            children=node_list_from_dicts(data.get("children")),
        )
    if node_type == "paragraph":
        return ParagraphNode(text=_text(data.get("text")))
    if node_type == "list":
        items = data.get("items") or []
        if not isinstance(items, list):
            items = []
        return ListNode(items=[_text(item) for item in items if item is not None])

    logger.debug(f"Skipping node with unknown type: {node_type!r}")
    return None


def _text(value: Any) -> str:
    # JSON null reads as empty text
    return "" if value is None else str(value)


def _coerce_level(value: Any) -> int:
    try:
        level = int(value)
    except (TypeError, ValueError):
        return MIN_HEADING_LEVEL
    return max(MIN_HEADING_LEVEL, min(MAX_HEADING_LEVEL, level))
