"""Minimal Markdown to HTML rendering used for Word documents and previews."""
from __future__ import annotations

import html
import re
from enum import Enum

_line_break_re = re.compile(r"\r\n|\r|\n")
_heading_re = re.compile(r"^(#{1,6})\s+(.+)$")
_bullet_re = re.compile(r"^[-*+•]\s+(.+)$")
_numbered_re = re.compile(r"^\d+[.)]\s+(.+)$")
_fence_re = re.compile(r"^```\s*([\w+#.-]*)")

_code_span_re = re.compile(r"(`[^`]+`)")
_bold_re = re.compile(r"\*\*(.+?)\*\*")
_italic_re = re.compile(r"\*([^*\s](?:[^*]*[^*\s])?)\*")
_link_re = re.compile(r"\[([^\]]+)\]\(([^)\s]+)\)")
_placeholder_re = re.compile(r"\x00(\d+)\x00")
_scheme_re = re.compile(r"^([A-Za-z][A-Za-z0-9+.-]*):")

_SAFE_URL_SCHEMES = {"http", "https", "mailto"}

_WORD_STYLES = """
body { font-family: "Calibri", "Microsoft YaHei", "Arial", sans-serif; font-size: 11pt; line-height: 1.5; }
h1 { font-size: 22pt; color: #1F4E79; }
h2 { font-size: 16pt; color: #2E74B5; }
h3 { font-size: 13pt; color: #1F4D78; }
p { margin: 0 0 8pt 0; }
ul, ol { margin: 0 0 8pt 0; }
pre { font-family: "Consolas", "Courier New", monospace; font-size: 10pt; background-color: #F5F5F5; padding: 8px; white-space: pre-wrap; }
code { font-family: "Consolas", "Courier New", monospace; }
""".strip()


class RenderState(str, Enum):
    NORMAL = "normal"
    UNORDERED_LIST = "unordered_list"
    ORDERED_LIST = "ordered_list"
    CODE_BLOCK = "code_block"


def _is_safe_url(url: str) -> bool:
    scheme = _scheme_re.match(html.unescape(url).strip())
    return scheme is None or scheme.group(1).lower() in _SAFE_URL_SCHEMES


def _emphasis(segment: str) -> str:
    segment = _bold_re.sub(r"<strong>\1</strong>", segment)
    return _italic_re.sub(r"<em>\1</em>", segment)


def _format_plain(segment: str) -> str:
    links: list[str] = []

    def stash(match: re.Match[str]) -> str:
        label = _emphasis(match.group(1))
        url = match.group(2)
        if _is_safe_url(url):
            links.append(f'<a href="{url}" target="_blank" rel="noopener">{label}</a>')
        else:
            links.append(label)
        return f"\x00{len(links) - 1}\x00"

    # link targets are set aside so emphasis markers inside URLs stay literal
    segment = _emphasis(_link_re.sub(stash, segment))
    return _placeholder_re.sub(lambda match: links[int(match.group(1))], segment)


def render_inline(text: str) -> str:
    """Escape ``text`` and apply bold, italic, code and link formatting."""

    escaped = html.escape(text.replace("\x00", ""), quote=True)
    parts: list[str] = []
    # split() with a capturing group puts the code spans at odd positions
    for position, segment in enumerate(_code_span_re.split(escaped)):
        if position % 2:
            parts.append(f"<code>{segment[1:-1]}</code>")
        else:
            parts.append(_format_plain(segment))
    return "".join(parts)


class HtmlRenderer:
    """Line scanner that turns Markdown into an HTML fragment."""

    def __init__(self) -> None:
        self.state = RenderState.NORMAL
        self.output: list[str] = []
        self._code_lines: list[str] = []
        self._code_language = ""

    def feed(self, raw_line: str) -> None:
        fence = _fence_re.match(raw_line.strip())

        if self.state == RenderState.CODE_BLOCK:
            if fence:
                self._close_code()
            else:
                self._code_lines.append(html.escape(raw_line, quote=True))
            return

        if fence:
            self._close_list()
            self.state = RenderState.CODE_BLOCK
            self._code_language = fence.group(1)
            return

        line = raw_line.strip()
        if not line:
            self._close_list()
            self.output.append("")
            return

        heading = _heading_re.match(line)
        if heading:
            self._close_list()
            level = len(heading.group(1))
            self.output.append(f"<h{level}>{render_inline(heading.group(2).strip())}</h{level}>")
            return

        bullet = _bullet_re.match(line)
        if bullet:
            self._open_list(RenderState.UNORDERED_LIST)
            self.output.append(f"<li>{render_inline(bullet.group(1).strip())}</li>")
            return

        numbered = _numbered_re.match(line)
        if numbered:
            self._open_list(RenderState.ORDERED_LIST)
            self.output.append(f"<li>{render_inline(numbered.group(1).strip())}</li>")
            return

        self._close_list()
        self.output.append(f"<p>{render_inline(line)}</p>")

    def finish(self) -> str:
        if self.state == RenderState.CODE_BLOCK:
            self._close_code()
        self._close_list()
        return "\n".join(self.output).strip()

    def _open_list(self, target: RenderState) -> None:
        if self.state == target:
            return
        self._close_list()
        self.output.append("<ul>" if target == RenderState.UNORDERED_LIST else "<ol>")
        self.state = target

    def _close_list(self) -> None:
        if self.state == RenderState.UNORDERED_LIST:
            self.output.append("</ul>")
        elif self.state == RenderState.ORDERED_LIST:
            self.output.append("</ol>")
        else:
            return
        self.state = RenderState.NORMAL

    def _close_code(self) -> None:
        css_class = f' class="language-{self._code_language}"' if self._code_language else ""
        code = "\n".join(self._code_lines)
        self.output.append(f"<pre><code{css_class}>{code}</code></pre>")
        self._code_lines = []
        self._code_language = ""
        self.state = RenderState.NORMAL


def markdown_to_html(markdown: str) -> str:
    """Render a Markdown string as an HTML fragment."""

    renderer = HtmlRenderer()
    for line in _line_break_re.split(markdown or ""):
        renderer.feed(line)
    return renderer.finish()


def build_word_document(markdown: str, title: str = "Document") -> str:
    """Wrap rendered Markdown in an HTML document that Word opens natively."""

    body = markdown_to_html(markdown)
    return (
        '<html xmlns:o="urn:schemas-microsoft-com:office:office" '
        'xmlns:w="urn:schemas-microsoft-com:office:word" '
        'xmlns="http://www.w3.org/TR/REC-html40">\n'
        "<head>\n"
        '<meta charset="utf-8">\n'
        f"<title>{html.escape(title)}</title>\n"
        f"<style>\n{_WORD_STYLES}\n</style>\n"
        "</head>\n"
        f"<body>\n{body}\n</body>\n"
        "</html>\n"
    )


__all__ = [
    "HtmlRenderer",
    "RenderState",
    "build_word_document",
    "markdown_to_html",
    "render_inline",
]
