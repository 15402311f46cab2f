"""Utilities for turning uploaded documents into plain text."""
from __future__ import annotations

from .channels import BINARY_OFFICE_EXTENSIONS
from .detection import file_extension
from .html_markdown import looks_like_html


class UnsupportedDocumentError(RuntimeError):
    """Raised when a document cannot be read as text."""


def decode_payload(payload: bytes, fallback_encoding: str = "gb18030") -> str:
    """Decode UTF-8 (with or without BOM), falling back to ``fallback_encoding``."""

    try:
        return payload.decode("utf-8-sig")
    except UnicodeDecodeError:
        return payload.decode(fallback_encoding, errors="ignore")


def document_to_text(filename: str, payload: bytes, fallback_encoding: str = "gb18030") -> str:
    """Return the text of an uploaded plain-text stand-in document.

    HTML documents saved under an Office extension are read as text; other
    binary Office formats are rejected with :class:`UnsupportedDocumentError`;
    an empty or whitespace-only document raises ``ValueError``.
    """

    extension = file_extension(filename)
    text = decode_payload(payload, fallback_encoding)
    # HTML saved as .doc (the Word download) is readable text
    if extension in BINARY_OFFICE_EXTENSIONS and not looks_like_html(text):
        raise UnsupportedDocumentError(
            f"Binary .{extension} files are not supported, upload a text or CSV export instead"
        )
    if not text.strip():
        raise ValueError("Uploaded file is empty or unreadable")
    return text


__all__ = ["UnsupportedDocumentError", "decode_payload", "document_to_text"]
