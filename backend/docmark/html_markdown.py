"""Read HTML documents (including the Word export of this service) as Markdown."""
from __future__ import annotations

import logging
import re
from typing import Any

import markdownify
from bs4 import BeautifulSoup

logger = logging.getLogger(__name__)

_html_document_re = re.compile(r"^\s*(?:<!doctype\s+html|<html[\s>]|<body[\s>])", re.IGNORECASE)
_scheme_re = re.compile(r"^([A-Za-z][A-Za-z0-9+.-]*):")
_blank_run_re = re.compile(r"\n{3,}")

_SAFE_URL_SCHEMES = {"http", "https", "mailto"}


class _WordMarkdownConverter(markdownify.MarkdownConverter):
    """markdownify with ATX headings and dash bullets, matching the text parsers."""

    def __init__(self, **options: Any) -> None:
        options["heading_style"] = options.get("heading_style", markdownify.ATX)
        options["bullets"] = options.get("bullets", "-")
        super().__init__(**options)


def looks_like_html(text: str) -> bool:
    """True for a full HTML document rather than prose that mentions a tag."""

    return bool(_html_document_re.search(text or ""))


def _drop_unsafe_links(soup: BeautifulSoup) -> None:
    for anchor in soup.find_all("a"):
        href = (anchor.get("href") or "").strip()
        scheme = _scheme_re.match(href)
        if scheme and scheme.group(1).lower() not in _SAFE_URL_SCHEMES:
            anchor.unwrap()


def html_to_markdown(html: str) -> str:
    """Convert the ``<body>`` of ``html`` to Markdown.

    Scripts, styles and the document head are dropped, as are links with a
    scheme other than http, https or mailto (their text is kept).
    """

    soup = BeautifulSoup(html or "", "html.parser")
    for element in soup(["script", "style", "head"]):
        element.extract()
    _drop_unsafe_links(soup)

    body = soup.find("body") or soup
    markdown = _WordMarkdownConverter().convert_soup(body)
    lines = [line.rstrip() for line in markdown.replace("\r\n", "\n").split("\n")]
    markdown = _blank_run_re.sub("\n\n", "\n".join(lines)).strip()
    logger.debug("Converted %s chars of HTML into %s chars of Markdown", len(html or ""), len(markdown))
    return markdown


__all__ = ["html_to_markdown", "looks_like_html"]
