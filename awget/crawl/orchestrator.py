"""Recursive crawl engine.

Each :meth:`CrawlOrchestrator.crawl` call walks one page through

    extract → filter → fetch → sanitize → persist → recurse

Pages found on one level are fetched **one after another** so a branch
never has more than one request in flight, then every new page gets its
own concurrent branch one level deeper.  A level returns only once all of
its branches have settled.
"""

from __future__ import annotations

import asyncio
import contextlib
import sys
from typing import List

import httpx

from awget.config import settings
from awget.crawl.options import CrawlOptions
from awget.crawl.persister import PagePersister
from awget.crawl.registry import VisitedRegistry, output_path
from awget.scraper.extractor import extract_links
from awget.scraper.fetcher import fetch_page
from awget.scraper.models import LinkCandidate, SanitizedDocument
from awget.scraper.sanitizer import sanitize


class CrawlOrchestrator:
    """Depth-bounded crawl over the links of already-sanitized pages.

    Args:
        options: Run options (depth limit, sanitize flag, output target).
        registry: Shared claim set; one per crawl run.
        persister: Writes each finished page.
        client: ``httpx.AsyncClient`` reused for every fetch of the run.
    """

    def __init__(
        self,
        options: CrawlOptions,
        registry: VisitedRegistry,
        persister: PagePersister,
        client: httpx.AsyncClient,
    ) -> None:
        self.options = options
        self.registry = registry
        self.persister = persister
        self.client = client
        limit = settings.max_concurrent_fetches
        self._fetch_slots = asyncio.Semaphore(limit) if limit > 0 else None

    async def crawl(self, document: SanitizedDocument, depth: int = 0) -> None:
        """Crawl the pages linked from *document*, starting at *depth*.

        A no-op once *depth* reaches ``options.max_depth``.  The first error
        raised on this level aborts it; an error from a child branch is
        re-raised after all sibling branches have finished.
        """
        if self.options.max_depth is not None and depth >= self.options.max_depth:
            return

        candidates = self.registry.filter_unseen(extract_links(document.html))
        if not candidates:
            return

        pages: List[SanitizedDocument] = []
        for candidate in candidates:
            pages.append(await self._process(candidate))

        branches = []
        for candidate, page in zip(candidates, pages):
            print(f"[CRAWL] depth {depth + 1}: {candidate.path}", file=sys.stderr)
            branches.append(asyncio.create_task(self.crawl(page, depth + 1)))

        results = await asyncio.gather(*branches, return_exceptions=True)
        errors = [r for r in results if isinstance(r, BaseException)]
        for extra in errors[1:]:
            print(f"[CRAWL] also failed: {extra}", file=sys.stderr)
        if errors:
            raise errors[0]

    async def _process(self, candidate: LinkCandidate) -> SanitizedDocument:
        """Fetch, sanitize and persist one candidate."""
        async with self._fetch_slots or contextlib.nullcontext():
            raw = await fetch_page(candidate.identifier(), self.client)
        page = sanitize(raw, enabled=self.options.sanitize)
        path = output_path(self.options.crawl_root, candidate, self.options.extension)
        await self.persister.persist(page, path)
        return page
