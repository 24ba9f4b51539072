"""Writes finished pages to disk, asking before overwriting."""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path
from typing import Callable

import typer

from awget.errors import PersistError
from awget.scraper.convert import render
from awget.scraper.models import SanitizedDocument


def ask_overwrite(path: Path) -> bool:
    """Interactive prompt; the default answer is No."""
    return typer.confirm(f'File "{path}" already exists. Overwrite?', default=False, err=True)


class PagePersister:
    """Persist sanitized documents, converting to Markdown if configured.

    *confirm* is called with the target path when a file already exists and
    must return ``True`` to overwrite.  Prompts from concurrent branches are
    serialised so they never interleave on the terminal.
    """

    def __init__(
        self,
        markdown: bool = False,
        confirm: Callable[[Path], bool] = ask_overwrite,
    ) -> None:
        self.markdown = markdown
        self.confirm = confirm
        self._prompt_lock = asyncio.Lock()

    async def persist(self, document: SanitizedDocument, path: Path) -> bool:
        """Write *document* to *path*; return ``False`` if the user declined.

        Raises:
            PersistError: On permission or other filesystem errors.
        """
        if path.exists():
            async with self._prompt_lock:
                overwrite = await asyncio.to_thread(self.confirm, path)
            if not overwrite:
                print(f"[SAVE] Kept existing {path}", file=sys.stderr)
                return False

        text = render(document, self.markdown)
        try:
            await asyncio.to_thread(_write, path, text)
        except OSError as exc:
            raise PersistError(path, exc) from exc

        print(f"[SAVE] {path}", file=sys.stderr)
        return True


def _write(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
