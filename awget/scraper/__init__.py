"""Scraper package — page fetch, chrome removal and link extraction."""

from awget.scraper.extractor import candidate_from_url, extract_links
from awget.scraper.fetcher import fetch_page
from awget.scraper.models import (
    LinkCandidate,
    PageIdentifier,
    RawDocument,
    ResolutionKind,
    SanitizedDocument,
)
from awget.scraper.sanitizer import sanitize

__all__ = [
    "fetch_page",
    "sanitize",
    "extract_links",
    "candidate_from_url",
    "PageIdentifier",
    "ResolutionKind",
    "RawDocument",
    "SanitizedDocument",
    "LinkCandidate",
]
