"""Common document model definitions used across parsing utilities."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union


@dataclass(slots=True)
class HeadingBlock:
    """A heading line such as ``## Schedule``."""

    text: str
    level: int = 1


@dataclass(slots=True)
class ParagraphBlock:
    """A run of prose lines, optionally introduced by a ``label: value`` prefix.

    Parameters
    ----------
    text:
        Space-joined paragraph text. For labelled paragraphs this is the value
        after the colon.
    label:
        Text before the first colon of a ``label: value`` line, ``None`` for
        ordinary prose.
    """

    text: str
    label: str | None = None


@dataclass(slots=True)
class ListBlock:
    """A bullet (unordered) or numbered (ordered) list."""

    ordered: bool
    items: list[str] = field(default_factory=list)


DocumentBlock = Union[HeadingBlock, ParagraphBlock, ListBlock]


@dataclass(slots=True)
class TableData:
    """Header row plus body rows, all of the same width."""

    headers: list[str]
    rows: list[list[str]] = field(default_factory=list)

    @property
    def column_count(self) -> int:
        return len(self.headers)


@dataclass(slots=True)
class SlideOutline:
    """A slide title with its bullet lines."""

    title: str
    bullets: list[str] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class SlideTitles:
    """Fallback titles for slides that have no title of their own.

    ``untitled`` may contain an ``{index}`` placeholder which receives the
    1-based position of the slide.
    """

    untitled: str = "Slide {index}"
    overview: str = "Overview"

    def for_index(self, index: int) -> str:
        title = self.untitled.replace("{index}", str(index)).strip()
        return title or f"Slide {index}"

    def for_overview(self) -> str:
        return self.overview.strip() or "Overview"


__all__ = [
    "DocumentBlock",
    "HeadingBlock",
    "ListBlock",
    "ParagraphBlock",
    "SlideOutline",
    "SlideTitles",
    "TableData",
]
