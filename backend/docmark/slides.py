"""Slide outline parsing and formatting."""
from __future__ import annotations

import logging
import re

from .document_models import SlideOutline, SlideTitles

logger = logging.getLogger(__name__)

_segment_split_re = re.compile(r"\n(?:[ \t]*\n)+")
_marker_re = re.compile(r"^(?:[-*+•]|\d+[.)])\s+")
_heading_re = re.compile(r"^#{1,6}\s+(.+)$")


def _strip_marker(line: str) -> str:
    return _marker_re.sub("", line, count=1).strip()


def parse_slides_from_outline(text: str, titles: SlideTitles | None = None) -> list[SlideOutline]:
    """Treat each blank-line separated segment as one slide.

    The first line of a segment is the slide title and the remaining lines are
    its bullets. A segment that starts straight away with a bullet has no title
    of its own and receives ``titles.untitled``.
    """

    titles = titles or SlideTitles()
    normalized = (text or "").replace("\r\n", "\n").replace("\r", "\n").strip()
    if not normalized:
        return []

    slides: list[SlideOutline] = []
    for segment in _segment_split_re.split(normalized):
        lines = [line.strip() for line in segment.split("\n") if line.strip()]
        if not lines:
            continue

        first = lines[0]
        heading = _heading_re.match(first)
        if heading:
            title, rest = heading.group(1).strip(), lines[1:]
        elif _marker_re.match(first):
            title, rest = "", lines
        else:
            title, rest = first, lines[1:]

        if not title:
            title = titles.for_index(len(slides) + 1)
        bullets = [bullet for bullet in (_strip_marker(line) for line in rest) if bullet]
        slides.append(SlideOutline(title=title, bullets=bullets))

    logger.debug("Outline split into %s slides", len(slides))
    return slides


def slides_to_markdown(slides: list[SlideOutline]) -> str:
    """First slide title becomes ``#``, the following ones ``##``."""

    sections: list[str] = []
    for index, slide in enumerate(slides):
        marker = "#" if index == 0 else "##"
        lines = [f"{marker} {slide.title}"]
        lines.extend(f"- {bullet}" for bullet in slide.bullets)
        sections.append("\n".join(lines))
    return "\n\n".join(sections)


def slides_to_outline(slides: list[SlideOutline]) -> str:
    """Plain outline: the title line followed by ``- bullet`` lines."""

    sections = [
        "\n".join([slide.title, *(f"- {bullet}" for bullet in slide.bullets)])
        for slide in slides
    ]
    return "\n\n".join(sections)


def markdown_to_slides(markdown: str, titles: SlideTitles | None = None) -> list[SlideOutline]:
    """Every Markdown heading starts a new slide; other lines become bullets."""

    titles = titles or SlideTitles()
    slides: list[SlideOutline] = []
    current: SlideOutline | None = None

    for raw_line in (markdown or "").splitlines():
        line = raw_line.strip()
        if not line:
            continue

        heading = _heading_re.match(line)
        if heading:
            if current is not None:
                slides.append(current)
            current = SlideOutline(title=heading.group(1).strip())
            continue

        if current is None:
            current = SlideOutline(title=titles.for_overview())

        if _marker_re.match(line):
            bullet = _strip_marker(line)
            if bullet:
                current.bullets.append(bullet)
        else:
            current.bullets.append(line)

    if current is not None:
        slides.append(current)
    return slides


__all__ = [
    "markdown_to_slides",
    "parse_slides_from_outline",
    "slides_to_markdown",
    "slides_to_outline",
]
