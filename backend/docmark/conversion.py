"""Dispatch a conversion request to the parser and formatter of a channel."""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from pathlib import PurePosixPath
from typing import Literal, Union

from .channels import (
    MARKDOWN_DOWNLOAD_EXTENSION,
    MARKDOWN_MIME_TYPE,
    Channel,
    Direction,
    DocumentKind,
    get_channel,
)
from .document_blocks import create_document_blocks, document_blocks_to_markdown
from .document_models import SlideOutline, SlideTitles, TableData
from .html_markdown import html_to_markdown, looks_like_html
from .markdown_html import build_word_document, markdown_to_html
from .slides import markdown_to_slides, parse_slides_from_outline, slides_to_markdown, slides_to_outline
from .tables import parse_markdown_table, parse_table, table_to_csv, table_to_markdown

logger = logging.getLogger(__name__)

_unsafe_name_re = re.compile(r"[\\/:*?\"<>|\x00-\x1f]+")


@dataclass(slots=True)
class EmptyPreview:
    kind: Literal["empty"] = "empty"


@dataclass(slots=True)
class MarkdownPreview:
    markdown: str
    html: str
    kind: Literal["markdown"] = "markdown"


@dataclass(slots=True)
class DocumentPreview:
    html: str
    kind: Literal["document"] = "document"


@dataclass(slots=True)
class TablePreview:
    table: TableData
    kind: Literal["table"] = "table"


@dataclass(slots=True)
class SlidesPreview:
    slides: list[SlideOutline] = field(default_factory=list)
    kind: Literal["slides"] = "slides"


@dataclass(slots=True)
class TextPreview:
    text: str
    kind: Literal["text"] = "text"


Preview = Union[EmptyPreview, MarkdownPreview, DocumentPreview, TablePreview, SlidesPreview, TextPreview]


@dataclass(slots=True)
class ConversionResult:
    """Output text for download plus a structured preview for display."""

    text: str
    preview: Preview

    @property
    def is_empty(self) -> bool:
        return not self.text


def _markdown_result(markdown: str) -> ConversionResult:
    return ConversionResult(text=markdown, preview=MarkdownPreview(markdown=markdown, html=markdown_to_html(markdown)))


def _fallback(text: str) -> ConversionResult:
    """Nothing recognisable was found; show the input as plain text."""

    return ConversionResult(text="", preview=TextPreview(text=text.strip()))


def convert_to_markdown(
    channel: Channel | DocumentKind | str,
    text: str,
    titles: SlideTitles | None = None,
) -> ConversionResult:
    """Read channel content and render it as Markdown."""

    channel = channel if isinstance(channel, Channel) else get_channel(channel)
    if not (text or "").strip():
        return ConversionResult(text="", preview=EmptyPreview())

    if channel.kind == DocumentKind.WORD and looks_like_html(text):
        markdown = html_to_markdown(text)
        if not markdown:
            return _fallback(text)
        return _markdown_result(markdown)

    if channel.kind == DocumentKind.WORD:
        blocks = create_document_blocks(text)
        if not blocks:
            return _fallback(text)
        return _markdown_result(document_blocks_to_markdown(blocks))

    if channel.kind == DocumentKind.EXCEL:
        table = parse_table(text)
        if table is None:
            return _fallback(text)
        return ConversionResult(text=table_to_markdown(table), preview=TablePreview(table=table))

    slides = parse_slides_from_outline(text, titles)
    if not slides:
        return _fallback(text)
    return ConversionResult(text=slides_to_markdown(slides), preview=SlidesPreview(slides=slides))


def convert_from_markdown(
    channel: Channel | DocumentKind | str,
    markdown: str,
    titles: SlideTitles | None = None,
    *,
    document_title: str = "Document",
) -> ConversionResult:
    """Render Markdown into the text format of ``channel``."""

    channel = channel if isinstance(channel, Channel) else get_channel(channel)
    if not (markdown or "").strip():
        return ConversionResult(text="", preview=EmptyPreview())

    if channel.kind == DocumentKind.WORD:
        fragment = markdown_to_html(markdown)
        if not fragment:
            return _fallback(markdown)
        return ConversionResult(
            text=build_word_document(markdown, title=document_title),
            preview=DocumentPreview(html=fragment),
        )

    if channel.kind == DocumentKind.EXCEL:
        table = parse_markdown_table(markdown)
        if table is None:
            logger.debug("No pipe table found in Markdown input")
            return _fallback(markdown)
        return ConversionResult(text=table_to_csv(table), preview=TablePreview(table=table))

    slides = markdown_to_slides(markdown, titles)
    if not slides:
        return _fallback(markdown)
    return ConversionResult(text=slides_to_outline(slides), preview=SlidesPreview(slides=slides))


def convert(
    channel: Channel | DocumentKind | str,
    direction: Direction | str,
    text: str,
    titles: SlideTitles | None = None,
) -> ConversionResult:
    if Direction(direction) == Direction.TO_MARKDOWN:
        return convert_to_markdown(channel, text, titles)
    return convert_from_markdown(channel, text, titles)


def output_format(channel: Channel | DocumentKind | str, direction: Direction | str) -> tuple[str, str]:
    """Return ``(mime_type, extension)`` of a conversion download."""

    if Direction(direction) == Direction.TO_MARKDOWN:
        return MARKDOWN_MIME_TYPE, MARKDOWN_DOWNLOAD_EXTENSION
    channel = channel if isinstance(channel, Channel) else get_channel(channel)
    return channel.mime_type, channel.download_extension


def output_file_name(
    channel: Channel | DocumentKind | str,
    direction: Direction | str,
    source_name: str | None = None,
) -> str:
    """Download name: the source stem (or the channel name) plus the target extension."""

    channel = channel if isinstance(channel, Channel) else get_channel(channel)
    _, extension = output_format(channel, direction)
    stem = PurePosixPath((source_name or "").replace("\\", "/")).stem
    stem = _unsafe_name_re.sub("_", stem).strip(" ._")
    return f"{stem or channel.kind.value}{extension}"


__all__ = [
    "ConversionResult",
    "DocumentPreview",
    "EmptyPreview",
    "MarkdownPreview",
    "Preview",
    "SlidesPreview",
    "TablePreview",
    "TextPreview",
    "convert",
    "convert_from_markdown",
    "convert_to_markdown",
    "output_file_name",
    "output_format",
]
