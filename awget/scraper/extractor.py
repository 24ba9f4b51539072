"""Link extraction: finds same-site content links worth crawling."""

from __future__ import annotations

from typing import List

from bs4 import BeautifulSoup

from awget.config import settings
from awget.scraper.models import LinkCandidate

# Pages in these namespaces are media assets or generated views, not articles.
_ASSET_NAMESPACES = ("File:", "Special:", "Media:")


def _clean_path(path: str) -> str | None:
    """Strip query, fragment and outer slashes; reject anything that could leave the output root."""
    path = path.split("#", 1)[0].split("?", 1)[0].strip("/")
    if not path or path.startswith(_ASSET_NAMESPACES):
        return None
    segments = path.split("/")
    if any(segment in ("", ".", "..") for segment in segments):
        return None
    return path


def _normalise(href: str, prefix: str, base_url: str) -> str | None:
    """Return the candidate path for *href*, or ``None`` if it is not internal."""
    if base_url and href.startswith(base_url + "/"):
        href = href[len(base_url):]
    if not href.startswith(prefix):
        return None
    return _clean_path(href[len(prefix):])


def extract_links(html: str, prefix: str | None = None) -> List[LinkCandidate]:
    """Return the internal link candidates of *html* in document order.

    Hrefs under the content-path *prefix* (``settings.title_prefix`` by
    default) are kept, either site-relative or absolute on
    ``settings.base_url``; the prefix, any ``?query`` and any ``#fragment``
    are stripped.  Paths with empty, ``.`` or ``..`` segments are dropped.
    Duplicates are **not** removed here; the visited registry takes care of
    that across the whole crawl.
    """
    prefix = prefix or settings.title_prefix
    base_url = settings.base_url.rstrip("/")
    soup = BeautifulSoup(html, "html.parser")

    candidates: List[LinkCandidate] = []
    for anchor in soup.find_all("a", href=True):
        path = _normalise(anchor["href"].strip(), prefix, base_url)
        if path is not None:
            candidates.append(LinkCandidate(path))
    return candidates


def candidate_from_url(url: str, title_url_base: str | None = None) -> LinkCandidate | None:
    """Map an absolute wiki URL back to its candidate, if it is a content page."""
    title_url_base = title_url_base or settings.title_url_base
    if not url.startswith(title_url_base):
        return None
    path = _clean_path(url[len(title_url_base):])
    return LinkCandidate(path) if path else None
