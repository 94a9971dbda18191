"""Export of the markdown document as standalone HTML, Markdown, plain text or JSON."""

import html
import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Union

from src.conversion import markdown_to_html, markdown_to_json
from src.conversion.rules import MERMAID_BLOCK_PATTERN

logger = logging.getLogger(__name__)

DEFAULT_HTML_TITLE = "Exported Markdown Document"
CHART_OMITTED_TEXT = "[Chart content omitted]"

HTML_MIME_TYPE = "text/html;charset=utf-8"
MARKDOWN_MIME_TYPE = "text/markdown;charset=utf-8"
TEXT_MIME_TYPE = "text/plain;charset=utf-8"
JSON_MIME_TYPE = "application/json;charset=utf-8"

EXPORT_STYLESHEET = """
        body {
            font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', 'Noto Sans', Helvetica, Arial, sans-serif;
            line-height: 1.6;
            color: #1f2937;
            max-width: 800px;
            margin: 0 auto;
            padding: 40px 20px;
            background: #ffffff;
        }

        h1, h2, h3, h4, h5, h6 { margin-top: 24px; margin-bottom: 16px; font-weight: 600; line-height: 1.25; }
        h1 { font-size: 2em; border-bottom: 1px solid #e5e7eb; padding-bottom: 10px; }
        h2 { font-size: 1.5em; border-bottom: 1px solid #e5e7eb; padding-bottom: 8px; }
        h3 { font-size: 1.25em; }

        p { margin-bottom: 16px; }
        ul, ol { margin-bottom: 16px; padding-left: 2em; }
        li { margin-bottom: 4px; }

        blockquote { margin: 16px 0; padding: 0 16px; border-left: 4px solid #e5e7eb; color: #6b7280; font-style: italic; }

        code {
            background: #f3f4f6;
            padding: 2px 4px;
            border-radius: 4px;
            font-family: 'SFMono-Regular', Consolas, 'Liberation Mono', Menlo, monospace;
            font-size: 0.875em;
        }
        pre { background: #f3f4f6; padding: 16px; border-radius: 8px; overflow-x: auto; margin-bottom: 16px; }
        pre code { background: none; padding: 0; }

        table { border-collapse: collapse; width: 100%; margin-bottom: 16px; }
        th, td { border: 1px solid #e5e7eb; padding: 8px 12px; text-align: left; }
        th { background: #f9fafb; font-weight: 600; }

        a { color: #3b82f6; text-decoration: none; }
        a:hover { text-decoration: underline; }

        img { max-width: 100%; height: auto; border-radius: 8px; box-shadow: 0 1px 3px 0 rgba(0, 0, 0, 0.1); }

        .mermaid {
            text-align: center;
            margin: 20px 0;
            background: #f9fafb;
            padding: 20px;
            border-radius: 8px;
            border: 1px solid #e5e7eb;
        }

        hr { border: none; border-top: 1px solid #e5e7eb; margin: 24px 0; }
"""

HTML_DOCUMENT_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{title}</title>
    <style>{stylesheet}    </style>
</head>
<body>
{body}
</body>
</html>
"""


@dataclass
class ExportArtifact:
    """Bytes ready to be handed to a file-save sink."""

    filename: str
    mime_type: str
    data: bytes

    @property
    def text(self) -> str:
        return self.data.decode("utf-8")


def render_html_document(markdown: str, title: str = DEFAULT_HTML_TITLE) -> str:
    """Wrap the converted markdown in a complete, styled HTML document."""
    return HTML_DOCUMENT_TEMPLATE.format(
        title=html.escape(title),
        stylesheet=EXPORT_STYLESHEET,
        body=markdown_to_html(markdown),
    )


def strip_diagrams(markdown: str) -> str:
    """Replace mermaid blocks with a short notice for plain-text output."""
    return MERMAID_BLOCK_PATTERN.sub(CHART_OMITTED_TEXT, markdown)


def export_html(markdown: str, filename: str = "document.html", title: str = DEFAULT_HTML_TITLE) -> ExportArtifact:
    return ExportArtifact(
        filename=filename,
        mime_type=HTML_MIME_TYPE,
        data=render_html_document(markdown, title).encode("utf-8"),
    )


def export_markdown(markdown: str, filename: str = "document.md") -> ExportArtifact:
    return ExportArtifact(filename=filename, mime_type=MARKDOWN_MIME_TYPE, data=markdown.encode("utf-8"))


def export_text(markdown: str, filename: str = "document.txt") -> ExportArtifact:
    return ExportArtifact(
        filename=filename,
        mime_type=TEXT_MIME_TYPE,
        data=strip_diagrams(markdown).encode("utf-8"),
    )


def export_json(markdown: str, filename: str = "document.json", extract_frontmatter: bool = False) -> ExportArtifact:
    document = markdown_to_json(markdown, extract_frontmatter=extract_frontmatter)
    payload = json.dumps(document.to_dict(), indent=2, ensure_ascii=False, default=str)
    return ExportArtifact(filename=filename, mime_type=JSON_MIME_TYPE, data=payload.encode("utf-8"))


class FileSink:
    """Delivers export artifacts by writing them into a directory."""

    def __init__(self, directory: Union[str, Path]):
        self.directory = Path(directory)

    def deliver(self, artifact: ExportArtifact) -> Path:
        """
        Write the artifact to disk.

        Args:
            artifact: Export result to save

        Returns:
            Path of the written file

        Raises:
            ValueError: If the filename would escape the export directory
        """
        filename = Path(artifact.filename)
        if filename.is_absolute() or ".." in filename.parts or not filename.name:
            raise ValueError(f"Invalid export filename: {artifact.filename}")

        self.directory.mkdir(parents=True, exist_ok=True)
        path = self.directory / filename
        path.write_bytes(artifact.data)

        logger.info(f"💾 Saved {artifact.mime_type} export to {path} ({len(artifact.data)} bytes)")
        return path
