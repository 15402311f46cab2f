"""Helpers for reading delimiter separated text and Markdown pipe tables."""
from __future__ import annotations

import logging
import re

from .document_models import TableData

logger = logging.getLogger(__name__)

_line_break_re = re.compile(r"\r\n|\r|\n")
_row_re = re.compile(r"^\|.*\|$")
_separator_re = re.compile(r"^\|(?:\s*:?-+:?\s*\|)+$")

_DELIMITERS = {",", "\t"}
_CSV_SPECIAL = (",", '"', "\n", "\r", "\t")


def _split_delimited_line(line: str) -> list[str]:
    """Split one line on commas or tabs that are not inside quotes."""

    cells: list[str] = []
    current: list[str] = []
    in_quotes = False

    for char in line:
        if char == '"':
            in_quotes = not in_quotes
            continue
        if char in _DELIMITERS and not in_quotes:
            cells.append("".join(current).strip())
            current.clear()
            continue
        current.append(char)

    cells.append("".join(current).strip())
    return cells


def _pad(row: list[str], width: int) -> list[str]:
    if len(row) >= width:
        return row[:width]
    return row + [""] * (width - len(row))


def parse_table(text: str) -> TableData | None:
    """Parse CSV or TSV like text; the first non-blank line becomes the header."""

    lines = [line for line in _line_break_re.split(text or "") if line.strip()]
    if not lines:
        return None

    parsed = [_split_delimited_line(line) for line in lines]
    width = max(len(row) for row in parsed)
    normalized = [_pad(row, width) for row in parsed]
    logger.debug("Parsed delimited table with %s rows and %s columns", len(normalized), width)
    return TableData(headers=normalized[0], rows=normalized[1:])


def _markdown_row(cells: list[str]) -> str:
    return "| " + " | ".join(cells) + " |"


def table_to_markdown(table: TableData) -> str:
    """Render a table as a Markdown pipe table."""

    lines = [
        _markdown_row(table.headers),
        _markdown_row(["---"] * len(table.headers)),
    ]
    lines.extend(_markdown_row(row) for row in table.rows)
    return "\n".join(lines)


def _csv_cell(value: str) -> str:
    if any(symbol in value for symbol in _CSV_SPECIAL):
        return '"' + value.replace('"', '""') + '"'
    return value


def table_to_csv(table: TableData) -> str:
    """Render a table as comma separated values, quoting only where needed."""

    rows = [table.headers, *table.rows]
    return "\n".join(",".join(_csv_cell(cell) for cell in row) for row in rows)


def _split_markdown_row(line: str) -> list[str]:
    """Split ``| a | b |`` into trimmed cells without the boundary fields."""

    inner = line.strip()[1:-1]
    return [cell.strip() for cell in inner.split("|")]


def parse_markdown_table(markdown: str) -> TableData | None:
    """Extract the first pipe table of a Markdown document."""

    lines = [line.strip() for line in _line_break_re.split(markdown or "")]

    start = next((index for index, line in enumerate(lines) if _row_re.match(line)), None)
    if start is None:
        return None
    if start + 1 >= len(lines) or not _separator_re.match(lines[start + 1]):
        logger.debug("Pipe row at line %s is not followed by a separator", start)
        return None

    headers = _split_markdown_row(lines[start])
    if not any(headers):
        logger.debug("Pipe table at line %s has no header text", start)
        return None

    rows: list[list[str]] = []
    for line in lines[start + 2:]:
        if not _row_re.match(line):
            break
        rows.append(_pad(_split_markdown_row(line), len(headers)))

    return TableData(headers=headers, rows=rows)


__all__ = [
    "parse_markdown_table",
    "parse_table",
    "table_to_csv",
    "table_to_markdown",
]
