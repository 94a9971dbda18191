"""Conversion engine between Markdown, HTML and the structured JSON document IR."""

from .diagram import DIAGRAM_LANGUAGE, DiagramRenderer
from .errors import DiagramRendererError, FormatError, TranscoderError, UnsupportedConversionError
from .html_to_markdown import HtmlToMarkdownConverter, html_to_markdown
from .json_to_markdown import JsonToMarkdownConverter, json_to_markdown, parse_document_json
from .markdown_to_html import MarkdownToHtmlConverter, markdown_to_html
from .markdown_to_json import MarkdownToJsonConverter, ParseState, markdown_to_json, process_line
from .service import (
    INVALID_JSON_MESSAGE,
    UNSUPPORTED_CONVERSION_MESSAGE,
    ConversionKind,
    ConversionResult,
    ConversionService,
    swap_kind,
)

__all__ = [
    "ConversionKind",
    "ConversionResult",
    "ConversionService",
    "DIAGRAM_LANGUAGE",
    "DiagramRenderer",
    "DiagramRendererError",
    "FormatError",
    "HtmlToMarkdownConverter",
    "INVALID_JSON_MESSAGE",
    "JsonToMarkdownConverter",
    "MarkdownToHtmlConverter",
    "MarkdownToJsonConverter",
    "ParseState",
    "TranscoderError",
    "UNSUPPORTED_CONVERSION_MESSAGE",
    "UnsupportedConversionError",
    "html_to_markdown",
    "json_to_markdown",
    "markdown_to_html",
    "markdown_to_json",
    "parse_document_json",
    "process_line",
    "swap_kind",
]
