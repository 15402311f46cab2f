from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from .channels import Direction, DocumentKind

ChannelName = Literal["word", "excel", "powerpoint"]
PreviewKind = Literal["empty", "markdown", "document", "table", "slides", "text"]


class HealthResponse(BaseModel):
    status: str = Field(..., description="Current API state")
    service: str = Field(..., description="Service name")
    version: str = Field(..., description="Service version")


class ChannelInfo(BaseModel):
    kind: ChannelName = Field(..., description="Channel identifier")
    label: str = Field(..., description="Human readable channel name")
    extensions: list[str] = Field(..., description="File extensions mapped to the channel")
    mime_type: str = Field(..., description="MIME type of Markdown converted into this channel")
    download_extension: str = Field(..., description="File extension of that download")


class SampleResponse(BaseModel):
    kind: DocumentKind = Field(..., description="Kind of the sample content")
    content: str = Field(..., description="Sample input text")


class DetectRequest(BaseModel):
    file_name: str = Field(default="", description="Original file name, used for its extension")
    content: str = Field(default="", description="Text content to classify")


class DetectResponse(BaseModel):
    kind: DocumentKind = Field(..., description="Detected content kind")
    channel: ChannelName | None = Field(
        default=None,
        description="Channel that reads this content; empty for Markdown input",
    )
    direction: Direction = Field(..., description="Suggested conversion direction")


class ConvertRequest(BaseModel):
    channel: ChannelName = Field(..., description="Office-like channel on the non-Markdown side")
    direction: Direction = Field(default=Direction.TO_MARKDOWN, description="Conversion direction")
    text: str = Field(default="", description="Input text")
    file_name: str | None = Field(default=None, description="Source file name used to name the download")


class TablePayload(BaseModel):
    headers: list[str] = Field(..., description="Header row")
    rows: list[list[str]] = Field(..., description="Body rows, padded to the header width")


class SlidePayload(BaseModel):
    title: str = Field(..., description="Slide title")
    bullets: list[str] = Field(default_factory=list, description="Slide bullet lines")


class PreviewPayload(BaseModel):
    kind: PreviewKind = Field(..., description="Preview variant")
    markdown: str | None = Field(default=None, description="Markdown text for markdown previews")
    html: str | None = Field(default=None, description="Rendered HTML fragment")
    table: TablePayload | None = Field(default=None, description="Parsed table")
    slides: list[SlidePayload] | None = Field(default=None, description="Parsed slides")
    text: str | None = Field(default=None, description="Plain text fallback")


class ConvertResponse(BaseModel):
    channel: ChannelName = Field(..., description="Channel that was converted")
    direction: Direction = Field(..., description="Conversion direction")
    text: str = Field(..., description="Output text, empty when nothing was recognised")
    preview: PreviewPayload = Field(..., description="Structured preview of the result")
    mime_type: str = Field(..., description="MIME type for downloading the output text")
    file_name: str = Field(..., description="Suggested download file name")


class MarginsPayload(BaseModel):
    top: int | None = Field(default=None, ge=0, le=7200, description="Top margin in twips")
    right: int | None = Field(default=None, ge=0, le=7200, description="Right margin in twips")
    bottom: int | None = Field(default=None, ge=0, le=7200, description="Bottom margin in twips")
    left: int | None = Field(default=None, ge=0, le=7200, description="Left margin in twips")


class DocxExportRequest(BaseModel):
    markdown: str = Field(..., description="Markdown source of the document")
    file_name: str | None = Field(default=None, description="Download name; .docx is appended")
    orientation: Literal["portrait", "landscape"] | None = Field(
        default=None,
        description="Page orientation, defaults to the configured one",
    )
    margin_twips: int | None = Field(
        default=None,
        ge=0,
        le=7200,
        description="Uniform page margin in twips, defaults to the configured one",
    )
    margins: MarginsPayload | None = Field(
        default=None,
        description="Per-side margins in twips; unset sides use margin_twips or the configured one",
    )


class FetchRequest(BaseModel):
    url: str = Field(..., min_length=1, description="http(s) URL of a text document")


class FetchResponse(BaseModel):
    url: str = Field(..., description="Requested URL")
    file_name: str = Field(..., description="File name taken from the URL path")
    content_type: str = Field(..., description="Content-Type reported by the server")
    content: str = Field(..., description="Decoded document text")
    kind: DocumentKind = Field(..., description="Detected content kind")
