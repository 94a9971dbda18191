"""Conversion dispatch with a non-throwing contract for the UI boundary."""

import json
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .diagram import DiagramRenderer
from .errors import FormatError, UnsupportedConversionError
from .html_to_markdown import HtmlToMarkdownConverter
from .json_to_markdown import JsonToMarkdownConverter, parse_document_json
from .markdown_to_html import MarkdownToHtmlConverter
from .markdown_to_json import MarkdownToJsonConverter

logger = logging.getLogger(__name__)

INVALID_JSON_MESSAGE = "JSON format error, please check your input"
UNSUPPORTED_CONVERSION_MESSAGE = "Unsupported conversion type"
CONVERSION_FAILED_PREFIX = "Conversion failed: "


class ConversionKind(str, Enum):
    """Supported conversion directions."""

    MD_TO_HTML = "md-to-html"
    HTML_TO_MD = "html-to-md"
    MD_TO_JSON = "md-to-json"
    JSON_TO_MD = "json-to-md"

    @property
    def label(self) -> str:
        source, target = self.value.split("-to-")
        names = {"md": "Markdown", "html": "HTML", "json": "JSON"}
        return f"{names[source]} → {names[target]}"


_INVERSE_KINDS = {
    ConversionKind.MD_TO_HTML: ConversionKind.HTML_TO_MD,
    ConversionKind.HTML_TO_MD: ConversionKind.MD_TO_HTML,
    ConversionKind.MD_TO_JSON: ConversionKind.JSON_TO_MD,
    ConversionKind.JSON_TO_MD: ConversionKind.MD_TO_JSON,
}


@dataclass
class ConversionResult:
    """Outcome of a conversion. output always holds something displayable."""

    kind: str
    output: str
    success: bool
    error: Optional[str] = None


def swap_kind(kind: str) -> str:
    """Return the inverse conversion direction, or kind itself if unknown."""
    try:
        return _INVERSE_KINDS[ConversionKind(kind)].value
    except ValueError:
        return kind


class ConversionService:
    """Runs any of the four conversions and turns failures into messages."""

    def __init__(
        self,
        diagram_renderer: Optional[DiagramRenderer] = None,
        extract_frontmatter: bool = False,
    ):
        self.markdown_to_html = MarkdownToHtmlConverter(diagram_renderer)
        self.html_to_markdown = HtmlToMarkdownConverter()
        self.markdown_to_json = MarkdownToJsonConverter(extract_frontmatter=extract_frontmatter)
        self.json_to_markdown = JsonToMarkdownConverter()

    def convert(self, kind: str, text: str) -> str:
        """Convert text and return the output or a displayable error message."""
        return self.convert_result(kind, text).output

    def convert_result(self, kind: str, text: str) -> ConversionResult:
        """
        Convert text, never raising.

        Args:
            kind: Conversion selector (see ConversionKind)
            text: Input text

        Returns:
            ConversionResult with the converted text or an error message
        """
        kind_value = kind.value if isinstance(kind, ConversionKind) else kind

        try:
            output = self._dispatch(kind_value, text)
            return ConversionResult(kind=kind_value, output=output, success=True)
        except FormatError as e:
            logger.info(f"Rejected JSON input: {e}")
            return ConversionResult(kind=kind_value, output=INVALID_JSON_MESSAGE, success=False, error=str(e))
        except UnsupportedConversionError as e:
            logger.info(str(e))
            return ConversionResult(
                kind=kind_value, output=UNSUPPORTED_CONVERSION_MESSAGE, success=False, error=str(e)
            )
        except Exception as e:
            logger.error(f"Conversion {kind_value} failed: {e}")
            message = str(e) or "Unknown error"
            return ConversionResult(
                kind=kind_value, output=CONVERSION_FAILED_PREFIX + message, success=False, error=message
            )

    def _dispatch(self, kind: str, text: str) -> str:
        try:
            conversion = ConversionKind(kind)
        except ValueError:
            raise UnsupportedConversionError(kind)

        if conversion is ConversionKind.MD_TO_HTML:
            return self.markdown_to_html.convert(text)
        if conversion is ConversionKind.HTML_TO_MD:
            return self.html_to_markdown.convert(text)
        if conversion is ConversionKind.MD_TO_JSON:
            document = self.markdown_to_json.convert(text)
            # default=str covers frontmatter values such as dates
            return json.dumps(document.to_dict(), indent=2, ensure_ascii=False, default=str)

        # JSON is decoded here so a parse failure never reaches the IR walker
        document = parse_document_json(text)
        return self.json_to_markdown.convert(document)
