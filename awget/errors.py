"""Error taxonomy for awget.

None of these are retried inside the core; they abort the current crawl
invocation and propagate to the caller.
"""

from __future__ import annotations

from pathlib import Path


class AwgetError(Exception):
    """Base class for all errors raised by awget."""


class NetworkError(AwgetError):
    """The request could not be completed (DNS, connection, timeout)."""

    def __init__(self, url: str, cause: Exception) -> None:
        super().__init__(f"could not reach {url}: {cause}")
        self.url = url
        self.cause = cause


class FetchError(AwgetError):
    """The origin answered with a non-success status code."""

    def __init__(self, url: str, status_code: int) -> None:
        super().__init__(f"the request for {url} returned HTTP {status_code}")
        self.url = url
        self.status_code = status_code


class PersistError(AwgetError, OSError):
    """Writing a page to disk failed."""

    def __init__(self, path: Path, cause: OSError) -> None:
        super().__init__(f"could not write {path}: {cause.strerror or cause}")
        self.path = path
        self.cause = cause
