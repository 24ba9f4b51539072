"""awget CLI — download pages from the Arch Wiki.

Usage:
    awget --help
    awget [options] <page-slugs>
    awget [options] -r <layers> <page-slugs>
    awget [options] -o <file-or-dir> <page-slugs>
    awget [options] -t <page-titles>

By default each page is fetched, stripped of its navigation chrome and
printed to stdout as HTML.
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from awget.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import asyncio
from typing import List, Optional

import typer

from awget.config import settings
from awget.crawl import CrawlOptions, CrawlOrchestrator, PagePersister, VisitedRegistry, output_path
from awget.errors import AwgetError, FetchError, NetworkError, PersistError
from awget.scraper import (
    LinkCandidate,
    PageIdentifier,
    ResolutionKind,
    SanitizedDocument,
    candidate_from_url,
    fetch_page,
    sanitize,
)
from awget.scraper.convert import render
from awget.scraper.fetcher import make_client

app = typer.Typer(
    name="awget",
    help="Download pages from the Arch Wiki.",
    add_completion=False,
)

_HINTS = {
    NetworkError: "this process probably does not have access to the internet.",
    FetchError: "the error may be described by the status code (404 means there is no such page).",
    PersistError: (
        "the requested file or directory probably does not exist "
        "or you do not have permission to access it."
    ),
}


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _depth_limit(layers: Optional[int]) -> Optional[int]:
    """Translate the ``-r`` value: no flag → 0, below 1 → unlimited."""
    if layers is None:
        return 0
    if layers < 1:
        return None
    return layers


def _page_candidate(document: SanitizedDocument, identifier: PageIdentifier) -> LinkCandidate:
    """Candidate a root page is filed under (its slug, or the last URL segment)."""
    candidate = candidate_from_url(document.url)
    if candidate is not None:
        return candidate
    return LinkCandidate(identifier.text.rstrip("/").rsplit("/", 1)[-1] or "index")


def _fail(exc: AwgetError) -> None:
    typer.secho(f"\nfatal: {exc}", fg=typer.colors.RED, err=True)
    for kind, hint in _HINTS.items():
        if isinstance(exc, kind):
            typer.echo(f"hint: {hint}", err=True)
            break
    raise typer.Exit(code=1)


# ---------------------------------------------------------------------------
# Pipeline
# ---------------------------------------------------------------------------

async def _download(
    identifiers: List[PageIdentifier],
    options: CrawlOptions,
    output_file: Optional[Path],
) -> None:
    persister = PagePersister(markdown=options.markdown)

    async with make_client() as client:
        documents: List[SanitizedDocument] = []
        for identifier in identifiers:
            raw = await fetch_page(identifier, client)
            documents.append(sanitize(raw, enabled=options.sanitize))

        roots = [_page_candidate(doc, ident) for doc, ident in zip(documents, identifiers)]

        for document, candidate in zip(documents, roots):
            if output_file is not None:
                await persister.persist(document, output_file)
            elif options.output_dir is not None:
                await persister.persist(
                    document, output_path(options.output_dir, candidate, options.extension)
                )
            else:
                typer.echo(render(document, options.markdown))

        if options.max_depth == 0:
            return

        registry = VisitedRegistry(options.crawl_root, options.extension)
        registry.filter_unseen(roots)
        orchestrator = CrawlOrchestrator(options, registry, persister, client)
        for document in documents:
            await orchestrator.crawl(document, 0)


# ---------------------------------------------------------------------------
# Entry-point command
# ---------------------------------------------------------------------------

@app.command()
def main(
    pages: List[str] = typer.Argument(..., help="Page slugs (or titles / URLs, see -t and -u)."),
    title: bool = typer.Option(False, "--title", "-t", help="Treat PAGES as article titles."),
    url: bool = typer.Option(False, "--url", "-u", help="Treat PAGES as full page URLs."),
    raw: bool = typer.Option(False, "--raw", "-p", help="Skip the HTML sanitization step."),
    markdown: bool = typer.Option(False, "--markdown", "-m", help="Output Markdown instead of HTML."),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help=(
            "Write to this file instead of stdout. With several pages or -r it is "
            "treated as a directory and pages are named after their slugs."
        ),
    ),
    recursive: Optional[int] = typer.Option(
        None,
        "--recursive",
        "-r",
        help=(
            "Also download pages linked from the downloaded pages, this many layers "
            "deep. A value below 1 keeps going until there is nothing left to fetch."
        ),
    ),
) -> None:
    """Download pages from the Arch Wiki, strip the site chrome and print them."""
    if title and url:
        raise typer.BadParameter("--title and --url cannot be combined.")

    if url:
        kind = ResolutionKind.URL
    elif title:
        kind = ResolutionKind.TITLE
    else:
        kind = ResolutionKind.SLUG

    max_depth = _depth_limit(recursive)
    as_directory = output is not None and (len(pages) > 1 or max_depth != 0)
    options = CrawlOptions(
        max_depth=max_depth,
        sanitize=not raw,
        output_dir=output if as_directory else None,
        markdown=markdown,
        resolution=kind,
    )
    output_file = output if output is not None and not as_directory else None
    identifiers = [PageIdentifier(page, options.resolution) for page in pages]

    if max_depth != 0:
        limit = "unlimited" if max_depth is None else str(max_depth)
        typer.echo(
            f"[awget] Recursive download from {settings.base_url} (layers: {limit}) "
            f"into {options.crawl_root}",
            err=True,
        )

    try:
        asyncio.run(_download(identifiers, options, output_file))
    except AwgetError as exc:
        _fail(exc)


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
