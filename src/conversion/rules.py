"""Pattern rules shared by the markdown, HTML and JSON converters."""

import re

# Placeholders use NUL delimiters, which are stripped from incoming text
PLACEHOLDER_TEMPLATE = "\x00{index}\x00"
PLACEHOLDER_PATTERN = re.compile(r"\x00(\d+)\x00")

# === MARKDOWN ===

FENCED_CODE_PATTERN = re.compile(r"```([^\s`]*)[^\S\n]*\n([\s\S]*?)```")
INLINE_CODE_PATTERN = re.compile(r"`([^`\n]+)`")
HTML_HEADING_LINE_PATTERN = re.compile(r"^(#{1,3}) (.*)$")
BULLET_LINE_PATTERN = re.compile(r"^\* (.+)$")

# Longest marker first so "**" is never split by the italic rule
BOLD_ITALIC_PATTERN = re.compile(r"\*\*\*(.+?)\*\*\*")
BOLD_PATTERN = re.compile(r"\*\*(.+?)\*\*")
ITALIC_PATTERN = re.compile(r"\*(.+?)\*")
LINK_PATTERN = re.compile(r"\[([^\]]+)\]\(([^)]+)\)")

# Used by the IR builder on trimmed lines
FENCE_LINE_PREFIX = "```"
HEADING_PREFIX = "#"
HEADING_MARKER_PATTERN = re.compile(r"^#+")
HEADING_STRIP_PATTERN = re.compile(r"^#+\s*")
LIST_LINE_PATTERN = re.compile(r"^(?:[*-]|\d+\.)")
LIST_MARKER_STRIP_PATTERN = re.compile(r"^(?:[*-]|\d+\.)\s*")

MERMAID_BLOCK_PATTERN = re.compile(r"```mermaid\n[\s\S]*?```")

# === HTML ===

HTML_PRE_CODE_PATTERN = re.compile(
    r"<pre[^>]*>\s*<code([^>]*)>(.*?)</code>\s*</pre>", re.IGNORECASE | re.DOTALL
)
HTML_MERMAID_PATTERN = re.compile(
    r"<div[^>]*class=\"[^\"]*\bmermaid\b[^\"]*\"[^>]*>(.*?)</div>", re.IGNORECASE | re.DOTALL
)
HTML_LANGUAGE_CLASS_PATTERN = re.compile(r"language-([^\s\"']+)", re.IGNORECASE)
HTML_INLINE_CODE_PATTERN = re.compile(r"<code[^>]*>(.*?)</code>", re.IGNORECASE | re.DOTALL)
HTML_HEADING_PATTERN = re.compile(r"<h([1-3])[^>]*>(.*?)</h\1>", re.IGNORECASE | re.DOTALL)
HTML_STRONG_PATTERN = re.compile(r"<(strong|b)(?:\s[^>]*)?>(.*?)</\1>", re.IGNORECASE | re.DOTALL)
HTML_EM_PATTERN = re.compile(r"<(em|i)(?:\s[^>]*)?>(.*?)</\1>", re.IGNORECASE | re.DOTALL)
HTML_LINK_PATTERN = re.compile(r"<a[^>]*href=\"([^\"]*)\"[^>]*>(.*?)</a>", re.IGNORECASE | re.DOTALL)
HTML_LIST_ITEM_PATTERN = re.compile(r"\s*<li[^>]*>(.*?)</li>", re.IGNORECASE | re.DOTALL)
HTML_LIST_OPEN_PATTERN = re.compile(r"<[uo]l[^>]*>", re.IGNORECASE)
HTML_LIST_CLOSE_PATTERN = re.compile(r"</[uo]l>", re.IGNORECASE)
HTML_PARAGRAPH_PATTERN = re.compile(r"<p(?:\s[^>]*)?>(.*?)</p>", re.IGNORECASE | re.DOTALL)
HTML_LINE_BREAK_PATTERN = re.compile(r"<br\s*/?>", re.IGNORECASE)
EXCESS_NEWLINES_PATTERN = re.compile(r"\n{3,}")


def make_placeholder(index: int) -> str:
    """Return the opaque placeholder token for a protected fragment."""
    return PLACEHOLDER_TEMPLATE.format(index=index)


def restore_placeholders(text: str, fragments: list) -> str:
    """Substitute every placeholder in text with its stored fragment."""
    return PLACEHOLDER_PATTERN.sub(lambda match: fragments[int(match.group(1))], text)


def strip_placeholder_delimiters(text: str) -> str:
    """Remove NUL characters so user text can never forge a placeholder."""
    return text.replace("\x00", "")
