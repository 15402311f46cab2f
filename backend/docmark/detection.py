"""Guess which parser applies to a file from its name and content."""
from __future__ import annotations

import logging
import re
from pathlib import PurePosixPath

from .channels import CHANNELS, MARKDOWN_EXTENSIONS, DocumentKind
from .html_markdown import looks_like_html

logger = logging.getLogger(__name__)

_pipe_row_re = re.compile(r"^\s*\|.*\|\s*$", re.MULTILINE)
_bullet_then_blank_re = re.compile(r"^[ \t]*(?:[-*•]|\d+[.)])[ \t]+\S.*\n[ \t]*\n", re.MULTILINE)

_TABLE_LINE_RATIO = 0.6


def file_extension(file_name: str) -> str:
    """Lower case extension of ``file_name`` without the leading dot."""

    name = (file_name or "").replace("\\", "/")
    return PurePosixPath(name).suffix.lower().lstrip(".")


def _kind_from_extension(extension: str) -> DocumentKind | None:
    if not extension:
        return None
    if extension in MARKDOWN_EXTENSIONS:
        return DocumentKind.MARKDOWN
    for channel in CHANNELS:
        if extension in channel.extensions:
            return channel.kind
    return None


def _looks_like_table(lines: list[str]) -> bool:
    if len(lines) < 2:
        return False
    delimited = sum(1 for line in lines if "," in line or "\t" in line)
    return delimited / len(lines) >= _TABLE_LINE_RATIO


def detect_kind(file_name: str, content: str) -> DocumentKind:
    """Best-effort classification of ``content``.

    The extension wins when it is known. Otherwise the content checks run in a
    fixed order: an HTML document, Markdown markers, delimiter density, then a bullet followed by
    a blank line for slide outlines. Anything else is plain text.
    """

    by_extension = _kind_from_extension(file_extension(file_name))
    if by_extension is not None:
        return by_extension

    text = (content or "").replace("\r\n", "\n").replace("\r", "\n")
    stripped = text.strip()
    if not stripped:
        return DocumentKind.TEXT

    if looks_like_html(stripped):
        return DocumentKind.WORD

    if stripped.startswith("#") or _pipe_row_re.search(text):
        return DocumentKind.MARKDOWN

    lines = [line for line in stripped.split("\n") if line.strip()]
    if _looks_like_table(lines):
        return DocumentKind.EXCEL

    if _bullet_then_blank_re.search(text):
        return DocumentKind.POWERPOINT

    logger.debug("No structural markers found in '%s', treating as text", file_name)
    return DocumentKind.TEXT


__all__ = ["detect_kind", "file_extension"]
