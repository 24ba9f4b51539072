"""Data models for the fetch → sanitize → crawl pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ResolutionKind(str, Enum):
    """How a :class:`PageIdentifier` is turned into a URL."""

    URL = "url"
    TITLE = "title"
    SLUG = "slug"


@dataclass(frozen=True)
class PageIdentifier:
    """A page named by URL, human title, or URL slug."""

    text: str
    kind: ResolutionKind = ResolutionKind.SLUG

    def resolve(self, title_url_base: str) -> str:
        """Return the canonical URL for this identifier.

        ``title_url_base`` is the absolute URL slugs are appended to, e.g.
        ``https://wiki.archlinux.org/title/``.
        """
        if self.kind is ResolutionKind.URL:
            return self.text
        if self.kind is ResolutionKind.TITLE:
            return title_url_base + self.text.replace(" ", "_").lower()
        return title_url_base + self.text


@dataclass(frozen=True)
class RawDocument:
    """Unparsed markup for one page plus the URL it came from."""

    url: str
    html: str
    status_code: int = 200


@dataclass(frozen=True)
class SanitizedDocument:
    """A :class:`RawDocument` with its chrome regions removed."""

    url: str
    html: str


@dataclass(frozen=True)
class LinkCandidate:
    """A same-site page path with prefix and fragment stripped (``Foo``, ``Foo/Bar``)."""

    path: str

    def identifier(self) -> PageIdentifier:
        return PageIdentifier(self.path, ResolutionKind.SLUG)

