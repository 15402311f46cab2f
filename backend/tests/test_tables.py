"""Tests for delimited text and Markdown pipe tables."""

from __future__ import annotations

import pytest

from docmark.document_models import TableData
from docmark.tables import parse_markdown_table, parse_table, table_to_csv, table_to_markdown


def test_parse_table_and_render_markdown() -> None:
    table = parse_table("模块,负责人\n产品文档,王一")

    assert table is not None
    assert table.headers == ["模块", "负责人"]
    assert table.rows == [["产品文档", "王一"]]
    assert table_to_markdown(table) == "| 模块 | 负责人 |\n| --- | --- |\n| 产品文档 | 王一 |"


def test_parse_table_respects_quotes_and_pads_rows() -> None:
    table = parse_table('name,notes\nA,"x, y"\nB')

    assert table is not None
    assert table.headers == ["name", "notes"]
    assert table.rows == [["A", "x, y"], ["B", ""]]


def test_parse_table_accepts_tabs_and_skips_blank_lines() -> None:
    table = parse_table("\n\na\tb\r\n\n1\t2\n")

    assert table is not None
    assert table.headers == ["a", "b"]
    assert table.rows == [["1", "2"]]


def test_header_is_padded_to_widest_row() -> None:
    table = parse_table("a\n1,2,3")

    assert table is not None
    assert table.headers == ["a", "", ""]
    assert all(len(row) == len(table.headers) for row in table.rows)


@pytest.mark.parametrize("text", ["", "   \n\t\n  "])
def test_parse_table_without_content_returns_none(text: str) -> None:
    assert parse_table(text) is None


def test_table_to_csv_quotes_only_when_needed() -> None:
    table = TableData(headers=["a", "b"], rows=[["x, y", 'say "hi"'], ["plain", ""]])

    assert table_to_csv(table) == 'a,b\n"x, y","say ""hi"""\nplain,'


def test_csv_round_trip_keeps_cell_values() -> None:
    source = 'name,notes\nA,"x, y"\nB,plain'
    table = parse_table(source)
    assert table is not None

    assert parse_table(table_to_csv(table)) == table


def test_markdown_round_trip() -> None:
    table = TableData(headers=["模块", "负责人"], rows=[["产品文档", "王一"], ["测试", ""]])

    assert parse_markdown_table(table_to_markdown(table)) == table


def test_parse_markdown_table_finds_first_table() -> None:
    markdown = "Intro\n\n| a | b |\n|:---|---:|\n| 1 | 2 |\n| 3 |\nAfter\n| x | y |"

    table = parse_markdown_table(markdown)

    assert table is not None
    assert table.headers == ["a", "b"]
    assert table.rows == [["1", "2"], ["3", ""]]


def test_wide_rows_are_cut_to_header_width() -> None:
    table = parse_markdown_table("| a |\n| --- |\n| 1 | 2 |")

    assert table is not None
    assert table.rows == [["1"]]


@pytest.mark.parametrize(
    "markdown",
    ["", "no table here", "| a | b |\n| 1 | 2 |", "| a | b |"],
)
def test_parse_markdown_table_rejects_non_tables(markdown: str) -> None:
    assert parse_markdown_table(markdown) is None


@pytest.mark.parametrize("markdown", ["||\n|---|", "|  |  |\n| --- | --- |\n| 1 | 2 |"])
def test_parse_markdown_table_without_header_text_returns_none(markdown: str) -> None:
    assert parse_markdown_table(markdown) is None


def test_table_to_csv_quotes_cells_with_tabs() -> None:
    table = TableData(headers=["a"], rows=[["x\ty"]])

    assert table_to_csv(table) == 'a\n"x\ty"'
    assert parse_table(table_to_csv(table)) == table
