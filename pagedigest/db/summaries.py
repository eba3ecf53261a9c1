"""CRUD operations for the ``blog_summaries`` table (summary store)."""

from __future__ import annotations

import sqlite3
import uuid
from time import time
from typing import List, Optional

from pagedigest.db.models import SummaryRecord


def _row_to_summary(row: sqlite3.Row) -> SummaryRecord:
    return SummaryRecord(
        id=row["id"],
        title=row["title"],
        url=row["url"],
        summary=row["summary"],
        urdu_summary=row["urdu_summary"],
        created_at=row["created_at"],
    )


def save_summary(
    conn: sqlite3.Connection,
    title: str,
    url: str,
    summary: str,
    urdu_summary: str = "",
) -> SummaryRecord:
    """Insert a summary row and return it."""
    sid = str(uuid.uuid4())
    now = int(time())
    with conn:
        conn.execute(
            """
            INSERT INTO blog_summaries (id, title, url, summary, urdu_summary, created_at)
            VALUES (?, ?, ?, ?, ?, ?)
            """,
            (sid, title, url, summary, urdu_summary, now),
        )
    return get_summary(conn, sid)  # type: ignore[return-value]


def get_summary(conn: sqlite3.Connection, summary_id: str) -> Optional[SummaryRecord]:
    """Fetch a single summary by its UUID.  Returns ``None`` if not found."""
    row = conn.execute(
        "SELECT * FROM blog_summaries WHERE id = ?", (summary_id,)
    ).fetchone()
    return _row_to_summary(row) if row else None


def list_summaries(conn: sqlite3.Connection, limit: int = 20) -> List[SummaryRecord]:
    """Return up to *limit* summaries, newest first."""
    rows = conn.execute(
        "SELECT * FROM blog_summaries ORDER BY created_at DESC, rowid DESC LIMIT ?",
        (limit,),
    ).fetchall()
    return [_row_to_summary(r) for r in rows]


def count_summaries(conn: sqlite3.Connection) -> int:
    row = conn.execute("SELECT COUNT(*) FROM blog_summaries").fetchone()
    return row[0] if row else 0
