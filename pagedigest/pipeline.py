"""Digest pipeline — URL variant plus dual-store persistence.

``digest_url`` runs the full text pipeline for one page:

    fetch → extract → summarise → translate

``save_digest`` then writes the result to the two stores.  Each store is
attempted on its own; one failing never prevents the other from being
written, and the returned :class:`SaveReport` says which ones succeeded.
"""

from __future__ import annotations

import logging
import sqlite3
from dataclasses import dataclass, field
from typing import List, Optional

from pagedigest.config import settings
from pagedigest.db import contents, summaries
from pagedigest.scraper.extractor import extract_content
from pagedigest.scraper.fetcher import fetch_url
from pagedigest.summary.summarizer import summarize
from pagedigest.translator import translate_to_urdu

logger = logging.getLogger(__name__)


@dataclass
class Digest:
    """Everything the pipeline produces for a single page."""

    url: str
    title: str
    content: str
    full_text: str
    summary: str
    urdu_summary: str


@dataclass
class SaveReport:
    summary_saved: bool = False
    content_saved: bool = False
    summary_id: Optional[str] = None
    content_id: Optional[str] = None
    errors: List[str] = field(default_factory=list)

    @property
    def success(self) -> bool:
        """``True`` when at least one store accepted the record."""
        return self.summary_saved or self.content_saved


@dataclass
class StoreStatus:
    summaries: bool = False
    contents: bool = False
    errors: List[str] = field(default_factory=list)


# ---------------------------------------------------------------------------
# Pipeline
# ---------------------------------------------------------------------------

def digest_html(url: str, html: str) -> Digest:
    """Run extract → summarise → translate over already-fetched *html*.

    The summary is computed from the preview slice (``content``), capped at
    ``settings.content_preview_chars``.
    """
    document = extract_content(html)
    full_text = document.body_text
    content = full_text[: settings.content_preview_chars]
    summary = summarize(content)

    return Digest(
        url=url,
        title=document.title,
        content=content,
        full_text=full_text,
        summary=summary,
        urdu_summary=translate_to_urdu(summary),
    )


def digest_url(url: str) -> Digest:
    """Fetch *url* and digest it.

    Raises:
        InvalidUrlError: If *url* is not a valid http(s) URL.
        httpx.HTTPStatusError: On a 4xx/5xx response.
        httpx.RequestError: On connection failures and timeouts.
    """
    raw = fetch_url(url)
    digest = digest_html(raw.url, raw.html)
    logger.info(
        "Digested %s: %d chars of text, %d-char summary",
        raw.url, len(digest.full_text), len(digest.summary),
    )
    return digest


# ---------------------------------------------------------------------------
# Persistence
# ---------------------------------------------------------------------------

def save_digest(
    summary_conn: sqlite3.Connection,
    content_conn: sqlite3.Connection,
    digest: Digest,
) -> SaveReport:
    """Write *digest* to the summary store and the content store.

    Store errors are logged and recorded on the report instead of raised.
    """
    report = SaveReport()

    try:
        record = summaries.save_summary(
            summary_conn,
            title=digest.title,
            url=digest.url,
            summary=digest.summary,
            urdu_summary=digest.urdu_summary,
        )
    except sqlite3.Error as exc:
        logger.error("Summary store write failed for %s: %s", digest.url, exc)
        report.errors.append(f"Summary store error: {exc}")
    else:
        report.summary_saved = True
        report.summary_id = record.id

    try:
        content = contents.save_content(
            content_conn,
            title=digest.title,
            url=digest.url,
            full_text=digest.full_text,
        )
    except sqlite3.Error as exc:
        logger.error("Content store write failed for %s: %s", digest.url, exc)
        report.errors.append(f"Content store error: {exc}")
    else:
        report.content_saved = True
        report.content_id = content.id

    logger.info(
        "Saved %s (summary store: %s, content store: %s)",
        digest.url, report.summary_saved, report.content_saved,
    )
    return report


def check_stores(
    summary_conn: sqlite3.Connection,
    content_conn: sqlite3.Connection,
) -> StoreStatus:
    """Probe both stores with a trivial read and report each one's health."""
    status = StoreStatus()

    try:
        summaries.count_summaries(summary_conn)
    except sqlite3.Error as exc:
        status.errors.append(f"Summary store error: {exc}")
    else:
        status.summaries = True

    try:
        contents.count_contents(content_conn)
    except sqlite3.Error as exc:
        status.errors.append(f"Content store error: {exc}")
    else:
        status.contents = True

    return status
