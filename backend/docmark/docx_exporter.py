"""Utilities for exporting Markdown into standalone DOCX files."""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from io import BytesIO
from typing import Literal

from docx import Document
from docx.document import Document as _Document
from docx.enum.section import WD_ORIENT
from docx.shared import Pt, Twips
from docx.text.paragraph import Paragraph

from .tables import parse_markdown_table

logger = logging.getLogger(__name__)

Orientation = Literal["portrait", "landscape"]

_line_break_re = re.compile(r"\r\n|\r|\n")
_heading_re = re.compile(r"^(#{1,6})\s+(.+)$")
_bullet_re = re.compile(r"^[-*+•]\s+(.+)$")
_numbered_re = re.compile(r"^\d+[.)]\s+(.+)$")
_table_row_re = re.compile(r"^\|.*\|$")
_inline_re = re.compile(r"(\*\*[^*]+\*\*|`[^`]+`|\*[^*\s][^*]*\*)")

_CODE_FONT = "Courier New"


@dataclass(frozen=True, slots=True)
class PageMargins:
    """Page margins in twips (1440 twips = 1 inch)."""

    top: int = 1440
    right: int = 1440
    bottom: int = 1440
    left: int = 1440

    @classmethod
    def uniform(cls, value: int) -> "PageMargins":
        return cls(top=value, right=value, bottom=value, left=value)


def _remove_placeholder_paragraph(document: _Document) -> None:
    """Remove the placeholder paragraph that python-docx creates by default."""

    if document.paragraphs:
        paragraph = document.paragraphs[0]
        element = paragraph._element  # type: ignore[attr-defined]
        parent = element.getparent()
        if parent is not None:
            parent.remove(element)


def _configure_page(document: _Document, orientation: Orientation, margins: PageMargins) -> None:
    section = document.sections[0]
    width, height = section.page_width, section.page_height
    if orientation == "landscape":
        section.orientation = WD_ORIENT.LANDSCAPE
        if width is not None and height is not None and width < height:
            section.page_width, section.page_height = height, width
    else:
        section.orientation = WD_ORIENT.PORTRAIT
        if width is not None and height is not None and width > height:
            section.page_width, section.page_height = height, width

    section.top_margin = Twips(margins.top)
    section.right_margin = Twips(margins.right)
    section.bottom_margin = Twips(margins.bottom)
    section.left_margin = Twips(margins.left)


def _add_inline_runs(paragraph: Paragraph, text: str) -> None:
    """Add runs for ``**bold**``, ``*italic*`` and ```code``` fragments."""

    for fragment in _inline_re.split(text):
        if not fragment:
            continue
        if fragment.startswith("**") and fragment.endswith("**") and len(fragment) > 4:
            paragraph.add_run(fragment[2:-2]).bold = True
        elif fragment.startswith("`") and fragment.endswith("`") and len(fragment) > 2:
            run = paragraph.add_run(fragment[1:-1])
            run.font.name = _CODE_FONT
        elif fragment.startswith("*") and fragment.endswith("*") and len(fragment) > 2:
            paragraph.add_run(fragment[1:-1]).italic = True
        else:
            paragraph.add_run(fragment)


def _append_code(document: _Document, lines: list[str]) -> None:
    paragraph = document.add_paragraph()
    run = paragraph.add_run("\n".join(lines))
    run.font.name = _CODE_FONT
    run.font.size = Pt(10)


def _append_table(document: _Document, lines: list[str]) -> None:
    table = parse_markdown_table("\n".join(lines))
    if table is None:
        # Pipe lines without a separator row are kept as text.
        for line in lines:
            _add_inline_runs(document.add_paragraph(), line)
        return

    rows = [table.headers, *table.rows]
    docx_table = document.add_table(rows=len(rows), cols=table.column_count)
    docx_table.style = "Table Grid"

    for row_index, row in enumerate(rows):
        for column_index, value in enumerate(row):
            cell = docx_table.cell(row_index, column_index)
            cell.text = value or ""
            if row_index == 0:
                for run in cell.paragraphs[0].runs:
                    run.bold = True


def export_markdown_to_docx(
    markdown: str,
    *,
    orientation: Orientation = "portrait",
    margins: PageMargins | None = None,
) -> bytes:
    """Create a DOCX file from Markdown headings, lists, code, tables and prose."""

    document = Document()
    _remove_placeholder_paragraph(document)
    _configure_page(document, orientation, margins or PageMargins())

    code_lines: list[str] | None = None
    table_lines: list[str] = []

    for raw_line in _line_break_re.split(markdown or ""):
        line = raw_line.strip()

        if code_lines is not None:
            if line.startswith("```"):
                _append_code(document, code_lines)
                code_lines = None
            else:
                code_lines.append(raw_line)
            continue

        if _table_row_re.match(line):
            table_lines.append(line)
            continue
        if table_lines:
            _append_table(document, table_lines)
            table_lines = []

        if line.startswith("```"):
            code_lines = []
            continue
        if not line:
            continue

        heading = _heading_re.match(line)
        if heading:
            document.add_heading(heading.group(2).strip(), level=len(heading.group(1)))
            continue

        bullet = _bullet_re.match(line)
        if bullet:
            _add_inline_runs(document.add_paragraph(style="List Bullet"), bullet.group(1).strip())
            continue

        numbered = _numbered_re.match(line)
        if numbered:
            _add_inline_runs(document.add_paragraph(style="List Number"), numbered.group(1).strip())
            continue

        _add_inline_runs(document.add_paragraph(), line)

    if table_lines:
        _append_table(document, table_lines)
    if code_lines is not None:
        _append_code(document, code_lines)

    buffer = BytesIO()
    document.save(buffer)
    payload = buffer.getvalue()
    logger.debug("Exported DOCX of %s bytes", len(payload))
    return payload


__all__ = ["Orientation", "PageMargins", "export_markdown_to_docx"]
