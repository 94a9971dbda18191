"""Line-oriented builder turning markdown into the structured document IR."""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

import frontmatter

from src.document_model import MAX_HEADING_LEVEL, DocumentRoot, HeadingNode, ListNode, ParagraphNode

from .rules import (
    FENCE_LINE_PREFIX,
    HEADING_MARKER_PATTERN,
    HEADING_PREFIX,
    HEADING_STRIP_PATTERN,
    LIST_LINE_PATTERN,
    LIST_MARKER_STRIP_PATTERN,
)

logger = logging.getLogger(__name__)


@dataclass
class ParseState:
    """Mutable state carried from one line to the next while building the IR."""

    document: DocumentRoot
    current_heading: Optional[HeadingNode] = None
    pending_list: List[str] = field(default_factory=list)
    in_fence: bool = False

    def flush_list(self):
        """Close the pending list, pushing it to the top-level content."""
        if self.pending_list:
            self.document.content.append(ListNode(items=list(self.pending_list)))
            self.pending_list.clear()


def process_line(state: ParseState, line: str):
    """
    Apply one source line to the parse state.

    Args:
        state: Current parse state (mutated in place)
        line: Raw source line; it is trimmed before classification
    """
    line = line.strip()

    # Code fences: the fence lines and everything between them stay out of the tree
    if line.startswith(FENCE_LINE_PREFIX):
        if not state.in_fence:
            state.flush_list()
        state.in_fence = not state.in_fence
        return
    if state.in_fence:
        return

    if line.startswith(HEADING_PREFIX):
        state.flush_list()
        level = len(HEADING_MARKER_PATTERN.match(line).group(0))
        heading = HeadingNode(
            level=min(level, MAX_HEADING_LEVEL),
            title=HEADING_STRIP_PATTERN.sub("", line),
        )
        state.document.content.append(heading)
        state.current_heading = heading
        return

    if LIST_LINE_PATTERN.match(line):
        state.pending_list.append(LIST_MARKER_STRIP_PATTERN.sub("", line))
        return

    if not line:
        return

    state.flush_list()
    paragraph = ParagraphNode(text=line)
    if state.current_heading is not None:
        state.current_heading.children.append(paragraph)
    else:
        state.document.content.append(paragraph)


class MarkdownToJsonConverter:
    """Builds a DocumentRoot from markdown text. Never rejects input."""

    def __init__(self, extract_frontmatter: bool = False):
        """
        Initialize the converter.

        Args:
            extract_frontmatter: Read YAML frontmatter into the document metadata
                instead of treating it as content
        """
        self.extract_frontmatter = extract_frontmatter

    def convert(self, markdown: str) -> DocumentRoot:
        """
        Convert markdown text to the document IR.

        Args:
            markdown: Markdown source

        Returns:
            DocumentRoot whose raw field holds the input verbatim
        """
        metadata, body = self._split_frontmatter(markdown)

        state = ParseState(document=DocumentRoot(metadata=metadata, raw=markdown))
        for line in body.split("\n"):
            process_line(state, line)
        state.flush_list()

        return state.document

    def _split_frontmatter(self, markdown: str) -> Tuple[Dict[str, Any], str]:
        if not self.extract_frontmatter:
            return {}, markdown

        try:
            post = frontmatter.loads(markdown)
        except Exception as e:
            logger.warning(f"Invalid YAML frontmatter, parsing whole text as content: {e}")
            return {}, markdown

        metadata = dict(post.metadata) if isinstance(post.metadata, dict) else {}
        return metadata, post.content if metadata else markdown


def markdown_to_json(markdown: str, extract_frontmatter: bool = False) -> DocumentRoot:
    """Convert markdown to the document IR."""
    return MarkdownToJsonConverter(extract_frontmatter=extract_frontmatter).convert(markdown)
