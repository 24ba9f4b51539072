"""HTTP fetcher: resolves a page identifier and downloads its markup."""

from __future__ import annotations

import sys

import httpx

from awget.config import settings
from awget.errors import FetchError, NetworkError
from awget.scraper.models import PageIdentifier, RawDocument


def _default_headers() -> dict[str, str]:
    return {"User-Agent": settings.user_agent}


def make_client() -> httpx.AsyncClient:
    """Return an ``AsyncClient`` configured for the wiki origin.

    Redirects are followed.  There is no timeout (httpx would otherwise give
    up after 5 s), so a non-responding origin blocks the fetch indefinitely,
    and there are no retries.
    """
    return httpx.AsyncClient(headers=_default_headers(), follow_redirects=True, timeout=None)


async def fetch_page(
    identifier: PageIdentifier,
    client: httpx.AsyncClient | None = None,
) -> RawDocument:
    """Issue a single GET for *identifier* and return a :class:`RawDocument`.

    A shared *client* may be passed in to reuse connections across a crawl;
    otherwise a short-lived one is opened for this call.

    Raises:
        FetchError: If the server returns a non-success status code.
        NetworkError: If the request cannot be completed at all.
    """
    url = identifier.resolve(settings.title_url_base)
    print(f"[FETCH] {url}", file=sys.stderr)

    if client is None:
        async with make_client() as own_client:
            return await _get(own_client, url)
    return await _get(client, url)


async def _get(client: httpx.AsyncClient, url: str) -> RawDocument:
    try:
        response = await client.get(url)
    except httpx.TransportError as exc:
        raise NetworkError(url, exc) from exc

    if not response.is_success:
        raise FetchError(url, response.status_code)

    # After redirects, so the page is filed under its canonical title.
    return RawDocument(url=str(response.url), html=response.text, status_code=response.status_code)
