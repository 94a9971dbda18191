"""Rebuild markdown from the structured document IR."""

import json
from typing import Any, Dict, List, Union

from src.document_model import ContentNode, DocumentRoot, HeadingNode, ListNode, ParagraphNode

from .errors import FormatError


def parse_document_json(json_text: str) -> DocumentRoot:
    """
    Decode JSON text into a DocumentRoot.

    Args:
        json_text: Serialized IR

    Returns:
        DocumentRoot

    Raises:
        FormatError: If the text is not valid JSON or not a JSON object
    """
    try:
        data = json.loads(json_text)
    except (json.JSONDecodeError, TypeError) as e:
        raise FormatError(f"Invalid JSON input: {e}") from e

    try:
        return DocumentRoot.from_dict(data)
    except ValueError as e:
        raise FormatError(str(e)) from e


class JsonToMarkdownConverter:
    """Turns a DocumentRoot back into markdown text."""

    def convert(self, document: Union[DocumentRoot, Dict[str, Any]]) -> str:
        """
        Convert a document to markdown.

        A non-empty raw field is returned verbatim; otherwise the content
        tree is walked depth-first.

        Args:
            document: DocumentRoot or its decoded wire shape

        Returns:
            Markdown string (right-trimmed when rebuilt from content)
        """
        if isinstance(document, dict):
            document = DocumentRoot.from_dict(document)

        if document.raw:
            return document.raw

        if not document.content:
            return ""

        parts: List[str] = []
        for node in document.content:
            self._render_node(node, parts)

        return "".join(parts).rstrip()

    def _render_node(self, node: ContentNode, parts: List[str]):
        if isinstance(node, HeadingNode):
            parts.append("#" * node.level + " " + node.title + "\n\n")
            for child in node.children:
                self._render_node(child, parts)
        elif isinstance(node, ParagraphNode):
            parts.append(node.text + "\n\n")
        elif isinstance(node, ListNode):
            for item in node.items:
                parts.append("* " + item + "\n")
            parts.append("\n")


def json_to_markdown(document: Union[DocumentRoot, Dict[str, Any]]) -> str:
    """Convert a document IR to markdown."""
    return JsonToMarkdownConverter().convert(document)
