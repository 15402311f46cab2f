"""Tests for the DOCX exporter."""

from __future__ import annotations

from io import BytesIO

import pytest
from docx import Document
from docx.enum.section import WD_ORIENT
from docx.shared import Twips

from docmark.docx_exporter import PageMargins, export_markdown_to_docx

MARKDOWN = """# 标题

- 项一
1. 第一

正文 **粗体** 和 `code`

| a | b |
| --- | --- |
| 1 | 2 |

```
x = 1
```
"""


@pytest.fixture
def document():
    return Document(BytesIO(export_markdown_to_docx(MARKDOWN)))


def test_blocks_are_exported(document) -> None:
    paragraphs = [(paragraph.style.name, paragraph.text) for paragraph in document.paragraphs]

    assert paragraphs == [
        ("Heading 1", "标题"),
        ("List Bullet", "项一"),
        ("List Number", "第一"),
        ("Normal", "正文 粗体 和 code"),
        ("Normal", "x = 1"),
    ]


def test_inline_bold_becomes_bold_run(document) -> None:
    runs = document.paragraphs[3].runs

    assert any(run.bold and run.text == "粗体" for run in runs)


def test_table_is_exported(document) -> None:
    assert len(document.tables) == 1
    table = document.tables[0]
    assert table.cell(0, 1).text == "b"
    assert table.cell(1, 0).text == "1"


def test_landscape_and_margins() -> None:
    payload = export_markdown_to_docx("text", orientation="landscape", margins=PageMargins.uniform(720))
    section = Document(BytesIO(payload)).sections[0]

    assert section.orientation == WD_ORIENT.LANDSCAPE
    assert section.page_width > section.page_height
    assert section.left_margin == Twips(720)
    assert section.top_margin == Twips(720)


def test_empty_markdown_still_produces_a_document() -> None:
    payload = export_markdown_to_docx("")

    assert payload.startswith(b"PK")
    assert Document(BytesIO(payload)).paragraphs == []
