"""Export command - saves the document as HTML, Markdown, plain text or JSON."""

import logging
from typing import Optional

from src.cli.commands.input_reader import read_input
from src.cli.config import Config
from src.export import FileSink, export_html, export_json, export_markdown, export_text

logger = logging.getLogger(__name__)

EXPORT_FORMATS = ("html", "md", "txt", "json")


def export_command(
    config: Config,
    export_format: str,
    input_path: Optional[str] = None,
    filename: Optional[str] = None,
    export_dir: Optional[str] = None,
) -> int:
    """Export the document to a file. Returns the exit status."""
    if export_format not in EXPORT_FORMATS:
        logger.error(f"❌ Unsupported export format: {export_format}")
        return 1

    markdown = read_input(input_path)
    if markdown is None:
        return 1

    filename = filename or f"document.{export_format}"

    if export_format == "html":
        artifact = export_html(markdown, filename, title=config.export_html_title)
    elif export_format == "md":
        artifact = export_markdown(markdown, filename)
    elif export_format == "txt":
        artifact = export_text(markdown, filename)
    else:
        artifact = export_json(markdown, filename, extract_frontmatter=config.extract_frontmatter)

    sink = FileSink(export_dir or config.export_dir)
    try:
        path = sink.deliver(artifact)
    except (OSError, ValueError) as e:
        logger.error(f"❌ Export failed: {e}")
        return 1

    logger.info(f"✅ Exported {export_format} document to {path}")
    return 0
