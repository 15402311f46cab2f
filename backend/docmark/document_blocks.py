"""Split free text into heading, paragraph and list blocks and back to Markdown."""
from __future__ import annotations

import logging
import re
from enum import Enum

from .document_models import DocumentBlock, HeadingBlock, ListBlock, ParagraphBlock

logger = logging.getLogger(__name__)

HEADING_RE = re.compile(r"^(#{1,6})\s+(.+)$")
BULLET_RE = re.compile(r"^[-*•]\s+(.+)$")
NUMBERED_RE = re.compile(r"^\d+[.)]\s+(.+)$")
# Everything up to the first ASCII or fullwidth colon is the label.
LABEL_RE = re.compile(r"^([^:：]{2,})[:：]\s*(.+)$")

_line_break_re = re.compile(r"\r\n|\r|\n")
_blank_run_re = re.compile(r"\n{3,}")


class ScanState(str, Enum):
    """What the block scanner is currently accumulating."""

    IDLE = "idle"
    PARAGRAPH = "paragraph"
    UNORDERED_LIST = "unordered_list"
    ORDERED_LIST = "ordered_list"


class BlockScanner:
    """Single pass line scanner producing :class:`DocumentBlock` objects.

    Lines are fed one at a time with :meth:`feed`; :meth:`finish` flushes
    whatever is still open and returns the collected blocks.
    """

    def __init__(self) -> None:
        self.state = ScanState.IDLE
        self.blocks: list[DocumentBlock] = []
        self._paragraph: list[str] = []
        self._items: list[str] = []

    def feed(self, raw_line: str) -> None:
        line = raw_line.strip()

        if not line:
            self._flush()
            return

        heading = HEADING_RE.match(line)
        if heading:
            self._flush()
            self.blocks.append(HeadingBlock(text=heading.group(2).strip(), level=len(heading.group(1))))
            return

        bullet = BULLET_RE.match(line)
        if bullet:
            self._append_item(ScanState.UNORDERED_LIST, bullet.group(1).strip())
            return

        numbered = NUMBERED_RE.match(line)
        if numbered:
            self._append_item(ScanState.ORDERED_LIST, numbered.group(1).strip())
            return

        labelled = LABEL_RE.match(line)
        if labelled:
            self._flush()
            self.blocks.append(
                ParagraphBlock(text=labelled.group(2).strip(), label=labelled.group(1).strip())
            )
            return

        if self.state in (ScanState.UNORDERED_LIST, ScanState.ORDERED_LIST):
            self._flush_list()
        self._paragraph.append(line)
        self.state = ScanState.PARAGRAPH

    def finish(self) -> list[DocumentBlock]:
        self._flush()
        return self.blocks

    def _append_item(self, target: ScanState, item: str) -> None:
        if self.state == ScanState.PARAGRAPH:
            self._flush_paragraph()
        elif self.state != target:
            self._flush_list()
        self._items.append(item)
        self.state = target

    def _flush(self) -> None:
        self._flush_paragraph()
        self._flush_list()

    def _flush_paragraph(self) -> None:
        if self._paragraph:
            self.blocks.append(ParagraphBlock(text=" ".join(self._paragraph)))
            self._paragraph = []
        if self.state == ScanState.PARAGRAPH:
            self.state = ScanState.IDLE

    def _flush_list(self) -> None:
        if self._items:
            ordered = self.state == ScanState.ORDERED_LIST
            self.blocks.append(ListBlock(ordered=ordered, items=self._items))
            self._items = []
        if self.state in (ScanState.UNORDERED_LIST, ScanState.ORDERED_LIST):
            self.state = ScanState.IDLE


def create_document_blocks(text: str) -> list[DocumentBlock]:
    """Return the heading, paragraph and list blocks found in ``text``."""

    scanner = BlockScanner()
    for line in _line_break_re.split(text or ""):
        scanner.feed(line)
    blocks = scanner.finish()
    logger.debug("Document scanner produced %s blocks", len(blocks))
    return blocks


def _render_block(block: DocumentBlock) -> str:
    if isinstance(block, HeadingBlock):
        return f"{'#' * block.level} {block.text}"
    if isinstance(block, ListBlock):
        if block.ordered:
            return "\n".join(f"{number}. {item}" for number, item in enumerate(block.items, start=1))
        return "\n".join(f"- {item}" for item in block.items)
    if block.label:
        return f"**{block.label}:** {block.text}"
    return block.text


def document_blocks_to_markdown(blocks: list[DocumentBlock]) -> str:
    """Render blocks as Markdown separated by single blank lines."""

    parts: list[str] = []
    for block in blocks:
        parts.append(_render_block(block))
        parts.append("")
    markdown = "\n".join(parts)
    return _blank_run_re.sub("\n\n", markdown).strip()


__all__ = [
    "BlockScanner",
    "ScanState",
    "create_document_blocks",
    "document_blocks_to_markdown",
]
