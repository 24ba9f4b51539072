"""Shared record of which link candidates a crawl run has already claimed."""

from __future__ import annotations

import os
import threading
from pathlib import Path
from typing import Iterable, List

from awget.scraper.models import LinkCandidate


def output_path(root: Path, candidate: LinkCandidate, extension: str) -> Path:
    """Where *candidate* is written: ``root/<path><extension>``.

    The registry's on-disk check and the persister must agree on this, so
    both go through here.

    Raises:
        ValueError: If the result would fall outside *root*.
    """
    path = root / f"{candidate.path}{extension}"
    inside = Path(os.path.abspath(path)).is_relative_to(os.path.abspath(root))
    if not inside or path.name == extension:
        raise ValueError(f"candidate {candidate.path!r} does not map to a file under {root}")
    return path


class VisitedRegistry:
    """Append-only set of claimed candidates, scoped to one crawl run.

    If *output_root* is given, candidates whose output file already exists
    are excluded as well, so a run can resume against a partially populated
    directory.  Partially written files are not detected.
    """

    def __init__(self, output_root: Path | None = None, extension: str = ".html") -> None:
        self._seen: set[LinkCandidate] = set()
        self._lock = threading.Lock()
        self.output_root = output_root
        self.extension = extension

    def __contains__(self, candidate: LinkCandidate) -> bool:
        with self._lock:
            return candidate in self._seen

    def __len__(self) -> int:
        with self._lock:
            return len(self._seen)

    def _on_disk(self, candidate: LinkCandidate) -> bool:
        if self.output_root is None:
            return False
        return output_path(self.output_root, candidate, self.extension).exists()

    def filter_unseen(self, candidates: Iterable[LinkCandidate]) -> List[LinkCandidate]:
        """Claim and return the candidates nobody has claimed yet.

        Membership test and claim happen under one lock, so a candidate
        offered by several concurrent callers (or several times in one call)
        survives exactly once.  Order of first appearance is preserved.
        """
        survivors: List[LinkCandidate] = []
        with self._lock:
            for candidate in candidates:
                if candidate in self._seen:
                    continue
                self._seen.add(candidate)
                if self._on_disk(candidate):
                    continue
                survivors.append(candidate)
        return survivors
