"""Chrome removal: strips navigation, search and menus from a wiki page."""

from __future__ import annotations

from bs4 import BeautifulSoup

from awget.scraper.models import RawDocument, SanitizedDocument

# Element IDs of the non-content regions on a MediaWiki (Vector skin) page.
# The regions are disjoint subtrees, so removal order does not matter.
CHROME_REGION_IDS: tuple[str, ...] = (
    "archnavbar",                     # top navigation bar
    "mw-sidebar-button",              # hamburger toggle
    "mw-sidebar-checkbox",            # hidden toggle state
    "p-search",                       # search box
    "p-vector-menu-user-overflow",    # account button
    "p-personal",                     # overflow menu
    "mw-panel-toc",                   # table of contents panel
    "mw-navigation",                  # navigation container
    "vector-toc-collapsed-checkbox",
)


def _remove_regions(soup: BeautifulSoup, region_ids: tuple[str, ...]) -> int:
    """Decompose every element whose id is in *region_ids*; return how many went."""
    removed = 0
    for region_id in region_ids:
        element = soup.find(id=region_id)
        if element is None:
            continue
        element.decompose()
        removed += 1
    return removed


def sanitize(
    raw: RawDocument,
    enabled: bool = True,
    region_ids: tuple[str, ...] = CHROME_REGION_IDS,
) -> SanitizedDocument:
    """Return *raw* with its chrome regions removed.

    Missing regions are skipped.  If nothing was removed (or sanitizing is
    disabled) the markup is returned byte-for-byte unchanged, which makes a
    second pass over an already sanitized page a no-op.
    """
    if not enabled:
        return SanitizedDocument(url=raw.url, html=raw.html)

    soup = BeautifulSoup(raw.html, "html.parser")
    if not _remove_regions(soup, region_ids):
        return SanitizedDocument(url=raw.url, html=raw.html)
    return SanitizedDocument(url=raw.url, html=str(soup))
