"""Best-effort HTML to Markdown conversion for the tags the editor emits."""

import html

from .rules import (
    EXCESS_NEWLINES_PATTERN,
    HTML_EM_PATTERN,
    HTML_HEADING_PATTERN,
    HTML_INLINE_CODE_PATTERN,
    HTML_LANGUAGE_CLASS_PATTERN,
    HTML_LINE_BREAK_PATTERN,
    HTML_LINK_PATTERN,
    HTML_LIST_CLOSE_PATTERN,
    HTML_LIST_ITEM_PATTERN,
    HTML_LIST_OPEN_PATTERN,
    HTML_MERMAID_PATTERN,
    HTML_PARAGRAPH_PATTERN,
    HTML_PRE_CODE_PATTERN,
    HTML_STRONG_PATTERN,
    make_placeholder,
    restore_placeholders,
    strip_placeholder_delimiters,
)


class HtmlToMarkdownConverter:
    """Reverses the markdown to HTML rules. Unsupported tags are left as-is."""

    def convert(self, html_text: str) -> str:
        """
        Convert an HTML fragment to markdown.

        Args:
            html_text: HTML source

        Returns:
            Markdown string, trimmed, with at most one blank line between blocks
        """
        fragments = []

        def protect(rendered: str) -> str:
            fragments.append(rendered)
            return make_placeholder(len(fragments) - 1)

        text = strip_placeholder_delimiters(html_text)

        # Code first so formatting rules never rewrite code contents
        text = HTML_PRE_CODE_PATTERN.sub(
            lambda m: "\n\n" + protect(self._fenced_block(m.group(1), m.group(2))) + "\n\n", text
        )
        text = HTML_MERMAID_PATTERN.sub(
            lambda m: "\n\n" + protect(self._fenced_block('class="language-mermaid"', m.group(1))) + "\n\n",
            text,
        )
        text = HTML_INLINE_CODE_PATTERN.sub(lambda m: protect(f"`{html.unescape(m.group(1))}`"), text)

        text = HTML_HEADING_PATTERN.sub(lambda m: "#" * int(m.group(1)) + f" {m.group(2)}\n\n", text)
        text = HTML_STRONG_PATTERN.sub(r"**\2**", text)
        text = HTML_EM_PATTERN.sub(r"*\2*", text)
        text = HTML_LINK_PATTERN.sub(r"[\2](\1)", text)
        text = HTML_LIST_ITEM_PATTERN.sub(r"\n* \1", text)
        text = HTML_LIST_OPEN_PATTERN.sub("", text)
        text = HTML_LIST_CLOSE_PATTERN.sub("\n\n", text)
        text = HTML_PARAGRAPH_PATTERN.sub(r"\1\n\n", text)
        text = HTML_LINE_BREAK_PATTERN.sub("\n", text)

        # Collapse before restoring so blank lines inside code survive
        text = EXCESS_NEWLINES_PATTERN.sub("\n\n", text)
        return restore_placeholders(text, fragments).strip()

    def _fenced_block(self, code_attributes: str, code: str) -> str:
        language_match = HTML_LANGUAGE_CLASS_PATTERN.search(code_attributes)
        language = html.unescape(language_match.group(1)) if language_match else ""
        code = html.unescape(code)
        if code.endswith("\n"):
            code = code[:-1]
        return f"```{language}\n{code}\n```"


def html_to_markdown(html_text: str) -> str:
    """Convert HTML to markdown."""
    return HtmlToMarkdownConverter().convert(html_text)
