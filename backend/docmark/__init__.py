"""Conversion between Office-like plain text documents and Markdown."""

from docmark.channels import Direction, DocumentKind
from docmark.conversion import ConversionResult, convert, convert_from_markdown, convert_to_markdown
from docmark.detection import detect_kind
from docmark.document_blocks import create_document_blocks, document_blocks_to_markdown
from docmark.markdown_html import markdown_to_html
from docmark.slides import markdown_to_slides, parse_slides_from_outline, slides_to_markdown, slides_to_outline
from docmark.tables import parse_markdown_table, parse_table, table_to_csv, table_to_markdown

__all__ = [
    "ConversionResult",
    "Direction",
    "DocumentKind",
    "convert",
    "convert_from_markdown",
    "convert_to_markdown",
    "create_document_blocks",
    "detect_kind",
    "document_blocks_to_markdown",
    "markdown_to_html",
    "markdown_to_slides",
    "parse_markdown_table",
    "parse_slides_from_outline",
    "parse_table",
    "slides_to_markdown",
    "slides_to_outline",
    "table_to_csv",
    "table_to_markdown",
]
