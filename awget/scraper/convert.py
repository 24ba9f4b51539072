"""Output-format conversion, applied only where a page leaves the program."""

from __future__ import annotations

from markdownify import markdownify

from awget.scraper.models import SanitizedDocument


def to_markdown(html: str) -> str:
    return markdownify(html, heading_style="ATX")


def render(document: SanitizedDocument, markdown: bool) -> str:
    """Return the text to write out for *document*."""
    return to_markdown(document.html) if markdown else document.html
