"""Crawl package — visited registry, persistence and the recursive orchestrator."""

from awget.crawl.options import CrawlOptions
from awget.crawl.orchestrator import CrawlOrchestrator
from awget.crawl.persister import PagePersister
from awget.crawl.registry import VisitedRegistry, output_path

__all__ = ["CrawlOptions", "CrawlOrchestrator", "PagePersister", "VisitedRegistry", "output_path"]
