"""Centralised settings for awget.

Process-wide configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).

Per-run options live in :mod:`awget.crawl.options`.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the project root (two levels up from this file)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Origin
    # ------------------------------------------------------------------
    base_url: str = field(
        default_factory=lambda: os.environ.get("AWGET_BASE_URL", "https://wiki.archlinux.org")
    )
    title_prefix: str = field(
        default_factory=lambda: os.environ.get("AWGET_TITLE_PREFIX", "/title/")
    )

    @property
    def title_url_base(self) -> str:
        """Absolute URL that slugs and titles are appended to."""
        return self.base_url.rstrip("/") + self.title_prefix

    # ------------------------------------------------------------------
    # HTTP
    # ------------------------------------------------------------------
    user_agent: str = field(
        default_factory=lambda: os.environ.get(
            "AWGET_USER_AGENT",
            "Mozilla/5.0 (compatible; awget/0.1; +https://github.com/PilotGuy772/awget)",
        )
    )
    # 0 disables the cap.
    max_concurrent_fetches: int = field(
        default_factory=lambda: int(os.environ.get("AWGET_MAX_CONCURRENT_FETCHES", "0"))
    )


# Module-level singleton; import this everywhere:
#   from awget.config import settings
settings = Settings()
