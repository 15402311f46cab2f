"""Tests for the Markdown to HTML renderer."""

from __future__ import annotations

import pytest

from docmark.markdown_html import build_word_document, markdown_to_html, render_inline


def test_heading_gap_and_inline_formatting() -> None:
    html = markdown_to_html("# Title\n\nSome **bold** and *it* with `x<y` [link](https://e.com)")

    assert html == (
        "<h1>Title</h1>\n"
        "\n"
        "<p>Some <strong>bold</strong> and <em>it</em> with <code>x&lt;y</code> "
        '<a href="https://e.com" target="_blank" rel="noopener">link</a></p>'
    )


def test_switching_list_type_closes_previous_list() -> None:
    assert markdown_to_html("- a\n- b\n1. c") == (
        "<ul>\n<li>a</li>\n<li>b</li>\n</ul>\n<ol>\n<li>c</li>\n</ol>"
    )


def test_heading_closes_open_list() -> None:
    assert markdown_to_html("- a\n## H") == "<ul>\n<li>a</li>\n</ul>\n<h2>H</h2>"


def test_fenced_code_is_escaped_and_kept_verbatim() -> None:
    html = markdown_to_html("```python\nif a < b:\n    pass\n```")

    assert html == '<pre><code class="language-python">if a &lt; b:\n    pass</code></pre>'


def test_unclosed_code_block_is_closed_at_end() -> None:
    assert markdown_to_html("- item\n```\ncode") == "<ul>\n<li>item</li>\n</ul>\n<pre><code>code</code></pre>"


def test_raw_html_is_escaped() -> None:
    assert markdown_to_html("<script>alert(1)</script>") == "<p>&lt;script&gt;alert(1)&lt;/script&gt;</p>"


def test_code_span_content_is_not_formatted() -> None:
    assert render_inline("`**x**` and **y**") == "<code>**x**</code> and <strong>y</strong>"


def test_empty_markdown_renders_nothing() -> None:
    assert markdown_to_html("") == ""


def test_word_document_wraps_fragment() -> None:
    document = build_word_document("# T\n- a", title="Q1 <Report>")

    assert 'xmlns:w="urn:schemas-microsoft-com:office:word"' in document
    assert "<title>Q1 &lt;Report&gt;</title>" in document
    assert "<h1>T</h1>\n<ul>\n<li>a</li>\n</ul>" in document
    assert document.rstrip().endswith("</html>")


def test_emphasis_markers_inside_link_urls_stay_literal() -> None:
    assert markdown_to_html("[a](https://x.com/a*b*c)") == (
        '<p><a href="https://x.com/a*b*c" target="_blank" rel="noopener">a</a></p>'
    )


def test_link_label_and_surrounding_text_keep_emphasis() -> None:
    assert render_inline("**see [*docs*](https://e.com/**x**)**") == (
        '<strong>see <a href="https://e.com/**x**" target="_blank" rel="noopener"><em>docs</em></a></strong>'
    )


@pytest.mark.parametrize(
    "markdown",
    ["[click](JavaScript:alert)", "[click](data:text/html;base64,PHNjcmlwdD4=)", "[click](vbscript:msgbox)"],
)
def test_unsafe_link_schemes_render_as_text(markdown: str) -> None:
    assert markdown_to_html(markdown) == "<p>click</p>"


@pytest.mark.parametrize(
    ("markdown", "href"),
    [
        ("[mail](mailto:team@example.com)", "mailto:team@example.com"),
        ("[guide](/docs/guide.md)", "/docs/guide.md"),
        ("[top](#intro)", "#intro"),
    ],
)
def test_safe_and_relative_links_are_kept(markdown: str, href: str) -> None:
    assert f'href="{href}"' in markdown_to_html(markdown)


def test_blank_line_closes_open_list() -> None:
    assert markdown_to_html("- a\n\ntext") == "<ul>\n<li>a</li>\n</ul>\n\n<p>text</p>"
