"""Centralised settings for Page Digest.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).
"""

from __future__ import annotations

import logging
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
    # Workspace / storage
    # ------------------------------------------------------------------
    workspace_dir: Path = field(
        default_factory=lambda: Path(
            os.environ.get("PAGEDIGEST_WORKSPACE", Path.home() / ".pagedigest_data")
        )
    )
    summaries_db_override: str | None = field(
        default_factory=lambda: os.environ.get("PAGEDIGEST_SUMMARIES_DB")
    )
    contents_db_override: str | None = field(
        default_factory=lambda: os.environ.get("PAGEDIGEST_CONTENTS_DB")
    )

    @property
    def summaries_db_path(self) -> Path:
        """SQLite file backing the summary store."""
        if self.summaries_db_override:
            return Path(self.summaries_db_override)
        return self.workspace_dir / "summaries.db"

    @property
    def contents_db_path(self) -> Path:
        """SQLite file backing the full-text content store."""
        if self.contents_db_override:
            return Path(self.contents_db_override)
        return self.workspace_dir / "contents.db"

    # ------------------------------------------------------------------
    # Fetcher
    # ------------------------------------------------------------------
    request_timeout: float = field(
        default_factory=lambda: float(os.environ.get("REQUEST_TIMEOUT", "30.0"))
    )
    user_agent: str = field(
        default_factory=lambda: os.environ.get(
            "PAGEDIGEST_USER_AGENT",
            "Mozilla/5.0 (compatible; PageDigest-Bot/1.0)",
        )
    )

    # ------------------------------------------------------------------
    # Pipeline
    # ------------------------------------------------------------------
    content_preview_chars: int = field(
        default_factory=lambda: int(os.environ.get("CONTENT_PREVIEW_CHARS", "5000"))
    )

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------
    log_level: str = field(
        default_factory=lambda: os.environ.get("LOG_LEVEL", "INFO").upper()
    )

    def ensure_workspace(self) -> None:
        """Create the workspace directory if it does not exist."""
        self.workspace_dir.mkdir(parents=True, exist_ok=True)


# Module-level singleton — import this everywhere:
#   from pagedigest.config import settings
settings = Settings()


def configure_logging() -> None:
    """Apply ``settings.log_level`` to the root logger (idempotent)."""
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
