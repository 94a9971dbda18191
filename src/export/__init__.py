"""Document export to files (HTML, Markdown, plain text, JSON)."""

from .exporter import (
    CHART_OMITTED_TEXT,
    DEFAULT_HTML_TITLE,
    ExportArtifact,
    FileSink,
    export_html,
    export_json,
    export_markdown,
    export_text,
    render_html_document,
    strip_diagrams,
)

__all__ = [
    "CHART_OMITTED_TEXT",
    "DEFAULT_HTML_TITLE",
    "ExportArtifact",
    "FileSink",
    "export_html",
    "export_json",
    "export_markdown",
    "export_text",
    "render_html_document",
    "strip_diagrams",
]
