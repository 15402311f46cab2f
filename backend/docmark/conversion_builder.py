"""Helpers for converting conversion results into API schemas."""
from __future__ import annotations

from .channels import CHANNELS, Channel, Direction
from .conversion import (
    ConversionResult,
    DocumentPreview,
    MarkdownPreview,
    Preview,
    SlidesPreview,
    TablePreview,
    TextPreview,
    output_file_name,
    output_format,
)
from .schemas import ChannelInfo, ConvertResponse, PreviewPayload, SlidePayload, TablePayload


def _make_preview(preview: Preview) -> PreviewPayload:
    if isinstance(preview, MarkdownPreview):
        return PreviewPayload(kind=preview.kind, markdown=preview.markdown, html=preview.html)
    if isinstance(preview, DocumentPreview):
        return PreviewPayload(kind=preview.kind, html=preview.html)
    if isinstance(preview, TablePreview):
        table = TablePayload(headers=preview.table.headers, rows=preview.table.rows)
        return PreviewPayload(kind=preview.kind, table=table)
    if isinstance(preview, SlidesPreview):
        slides = [SlidePayload(title=slide.title, bullets=slide.bullets) for slide in preview.slides]
        return PreviewPayload(kind=preview.kind, slides=slides)
    if isinstance(preview, TextPreview):
        return PreviewPayload(kind=preview.kind, text=preview.text)
    return PreviewPayload(kind="empty")


def build_convert_response(
    channel: Channel,
    direction: Direction,
    result: ConversionResult,
    source_name: str | None = None,
) -> ConvertResponse:
    """Convert a :class:`ConversionResult` to an API response schema."""

    mime_type, _ = output_format(channel, direction)
    return ConvertResponse(
        channel=channel.kind.value,
        direction=direction,
        text=result.text,
        preview=_make_preview(result.preview),
        mime_type=mime_type,
        file_name=output_file_name(channel, direction, source_name),
    )


def build_channel_list() -> list[ChannelInfo]:
    return [
        ChannelInfo(
            kind=channel.kind.value,
            label=channel.label,
            extensions=sorted(channel.extensions),
            mime_type=channel.mime_type,
            download_extension=channel.download_extension,
        )
        for channel in CHANNELS
    ]


__all__ = ["build_channel_list", "build_convert_response"]
