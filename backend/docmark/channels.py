"""Registry of the document channels the converter understands."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class DocumentKind(str, Enum):
    """Classification label attached to a piece of input content."""

    WORD = "word"
    EXCEL = "excel"
    POWERPOINT = "powerpoint"
    MARKDOWN = "markdown"
    TEXT = "text"


class Direction(str, Enum):
    TO_MARKDOWN = "to_markdown"
    FROM_MARKDOWN = "from_markdown"


@dataclass(frozen=True, slots=True)
class Channel:
    """A document kind with its file extensions and download format.

    Parameters
    ----------
    kind:
        The :class:`DocumentKind` this channel converts.
    label:
        Human readable name shown to clients.
    extensions:
        Lower case file extensions without the dot that map to the channel.
    mime_type:
        MIME type used when Markdown is converted into this channel.
    download_extension:
        File extension (with the dot) of that download.
    """

    kind: DocumentKind
    label: str
    extensions: frozenset[str]
    mime_type: str
    download_extension: str


MARKDOWN_EXTENSIONS = frozenset({"md", "markdown", "mdown", "mkd"})
MARKDOWN_MIME_TYPE = "text/markdown"
MARKDOWN_DOWNLOAD_EXTENSION = ".md"

# Detection walks the channels in this order.
CHANNELS: tuple[Channel, ...] = (
    Channel(
        kind=DocumentKind.WORD,
        label="Word",
        extensions=frozenset({"doc", "docx", "rtf", "odt", "html", "htm"}),
        mime_type="application/msword",
        download_extension=".doc",
    ),
    Channel(
        kind=DocumentKind.EXCEL,
        label="Excel",
        extensions=frozenset({"csv", "tsv", "xls", "xlsx", "ods"}),
        mime_type="text/csv",
        download_extension=".csv",
    ),
    Channel(
        kind=DocumentKind.POWERPOINT,
        label="PowerPoint",
        extensions=frozenset({"ppt", "pptx", "odp"}),
        mime_type="text/plain",
        download_extension=".txt",
    ),
)

# Formats that would need a real Office parser.
BINARY_OFFICE_EXTENSIONS = frozenset({"doc", "docx", "odt", "xls", "xlsx", "ods", "ppt", "pptx", "odp"})


def get_channel(kind: DocumentKind | str) -> Channel:
    """Return the registered channel for ``kind``.

    Raises ``KeyError`` for ``markdown``/``text`` and unknown values.
    """

    value = DocumentKind(kind)
    for channel in CHANNELS:
        if channel.kind == value:
            return channel
    raise KeyError(value.value)


def channel_for_kind(kind: DocumentKind) -> Channel | None:
    """Map a detected kind to the channel that should read it.

    Plain text is handled as a Word-like document. Markdown has no source
    channel because it is the input of the opposite direction.
    """

    if kind == DocumentKind.MARKDOWN:
        return None
    if kind == DocumentKind.TEXT:
        return get_channel(DocumentKind.WORD)
    return get_channel(kind)


__all__ = [
    "BINARY_OFFICE_EXTENSIONS",
    "CHANNELS",
    "Channel",
    "Direction",
    "DocumentKind",
    "MARKDOWN_DOWNLOAD_EXTENSION",
    "MARKDOWN_EXTENSIONS",
    "MARKDOWN_MIME_TYPE",
    "channel_for_kind",
    "get_channel",
]
