"""Markdown to HTML conversion with protected code fragments."""

import html
import logging
from dataclasses import dataclass, field
from typing import List, Optional, Set

from .diagram import DIAGRAM_LANGUAGE, DiagramRenderer
from .rules import (
    BOLD_ITALIC_PATTERN,
    BOLD_PATTERN,
    BULLET_LINE_PATTERN,
    FENCED_CODE_PATTERN,
    HTML_HEADING_LINE_PATTERN,
    INLINE_CODE_PATTERN,
    ITALIC_PATTERN,
    LINK_PATTERN,
    PLACEHOLDER_PATTERN,
    make_placeholder,
    restore_placeholders,
    strip_placeholder_delimiters,
)

logger = logging.getLogger(__name__)


@dataclass
class ProtectedFragments:
    """Rendered fragments pulled out of the text before rewriting."""

    fragments: List[str] = field(default_factory=list)
    block_indexes: Set[int] = field(default_factory=set)

    def add(self, rendered: str, block: bool = False) -> str:
        index = len(self.fragments)
        self.fragments.append(rendered)
        if block:
            self.block_indexes.add(index)
        return make_placeholder(index)

    def is_block_placeholder(self, line: str) -> bool:
        match = PLACEHOLDER_PATTERN.fullmatch(line.strip())
        return bool(match) and int(match.group(1)) in self.block_indexes


class MarkdownToHtmlConverter:
    """Converts the markdown subset the editor produces into HTML.

    Conversion runs in stages:
    1. Fenced code blocks and inline code spans are rendered and replaced by
       placeholders so no later rule can touch their contents.
    2. Lines are classified (heading, bullet, block placeholder, text, blank)
       and grouped into blocks.
    3. Inline rules (emphasis, links) run on heading, item and paragraph text.
    4. Placeholders are restored.
    """

    def __init__(self, diagram_renderer: Optional[DiagramRenderer] = None):
        self.diagram_renderer = diagram_renderer

    def convert(self, markdown: str) -> str:
        """
        Convert markdown text to an HTML fragment.

        Args:
            markdown: Markdown source

        Returns:
            HTML string (blocks separated by newlines)
        """
        protected = ProtectedFragments()
        text = strip_placeholder_delimiters(markdown).replace("\r\n", "\n")

        text = FENCED_CODE_PATTERN.sub(
            lambda match: "\n" + protected.add(self._render_fenced_block(match), block=True) + "\n",
            text,
        )
        text = INLINE_CODE_PATTERN.sub(
            lambda match: protected.add(f"<code>{html.escape(match.group(1), quote=False)}</code>"),
            text,
        )

        blocks = self._build_blocks(text.split("\n"), protected)
        return restore_placeholders("\n".join(blocks), protected.fragments)

    def _render_fenced_block(self, match) -> str:
        language = match.group(1) or ""
        code = match.group(2)
        if code.endswith("\n"):
            code = code[:-1]

        if language == DIAGRAM_LANGUAGE:
            return self._render_diagram(code)

        return self._render_code_block(code, language)

    def _render_code_block(self, code: str, language: str) -> str:
        escaped = html.escape(code, quote=False)
        if language:
            return f'<pre><code class="language-{html.escape(language)}">{escaped}</code></pre>'
        return f"<pre><code>{escaped}</code></pre>"

    def _render_diagram(self, source: str) -> str:
        """Render a diagram block, degrading to a plain code block on failure."""
        if self.diagram_renderer is None:
            return f'<div class="mermaid">{html.escape(source, quote=False)}</div>'

        try:
            if not self.diagram_renderer.is_available():
                logger.warning("Diagram renderer not available, rendering diagram as code block")
                return self._render_code_block(source, DIAGRAM_LANGUAGE)
            return self.diagram_renderer.render(source)
        except Exception as e:
            logger.warning(f"Diagram rendering failed, rendering as code block: {e}")
            return self._render_code_block(source, DIAGRAM_LANGUAGE)

    def _build_blocks(self, lines: List[str], protected: ProtectedFragments) -> List[str]:
        blocks = []
        paragraph_lines = []
        list_items = []

        def flush_paragraph():
            if paragraph_lines:
                blocks.append("<p>" + "\n".join(paragraph_lines) + "</p>")
                paragraph_lines.clear()

        def flush_list():
            if list_items:
                blocks.append("<ul>\n" + "\n".join(list_items) + "\n</ul>")
                list_items.clear()

        for line in lines:
            if not line.strip():
                flush_paragraph()
                flush_list()
                continue

            if protected.is_block_placeholder(line):
                flush_paragraph()
                flush_list()
                blocks.append(line.strip())
                continue

            heading_match = HTML_HEADING_LINE_PATTERN.match(line)
            if heading_match:
                flush_paragraph()
                flush_list()
                level = len(heading_match.group(1))
                blocks.append(f"<h{level}>{self._render_inline(heading_match.group(2))}</h{level}>")
                continue

            bullet_match = BULLET_LINE_PATTERN.match(line)
            if bullet_match:
                flush_paragraph()
                list_items.append(f"<li>{self._render_inline(bullet_match.group(1))}</li>")
                continue

            flush_list()
            paragraph_lines.append(self._render_inline(line))

        flush_paragraph()
        flush_list()
        return blocks

    def _render_inline(self, text: str) -> str:
        text = BOLD_ITALIC_PATTERN.sub(r"<strong><em>\1</em></strong>", text)
        text = BOLD_PATTERN.sub(r"<strong>\1</strong>", text)
        text = ITALIC_PATTERN.sub(r"<em>\1</em>", text)
        return LINK_PATTERN.sub(r'<a href="\2">\1</a>', text)


def markdown_to_html(markdown: str, diagram_renderer: Optional[DiagramRenderer] = None) -> str:
    """Convert markdown to HTML."""
    return MarkdownToHtmlConverter(diagram_renderer).convert(markdown)
