"""Per-run crawl options, built once by the CLI and never mutated."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from awget.scraper.models import ResolutionKind


@dataclass(frozen=True)
class CrawlOptions:
    # None means no depth limit; the visited registry alone ends the crawl.
    max_depth: int | None = 0
    sanitize: bool = True
    output_dir: Path | None = None
    markdown: bool = False
    resolution: ResolutionKind = ResolutionKind.SLUG

    @property
    def extension(self) -> str:
        return ".md" if self.markdown else ".html"

    @property
    def crawl_root(self) -> Path:
        """Directory that recursively fetched pages are written under.

        In stdout mode linked pages still need a home, so they go to the
        current directory.
        """
        return self.output_dir if self.output_dir is not None else Path(".")
