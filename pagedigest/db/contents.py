"""CRUD operations for the ``blog_contents`` table (full-text store)."""

from __future__ import annotations

import sqlite3
import uuid
from time import time
from typing import Optional

from pagedigest.db.models import ContentRecord


def _row_to_content(row: sqlite3.Row) -> ContentRecord:
    return ContentRecord(
        id=row["id"],
        title=row["title"],
        url=row["url"],
        full_text=row["full_text"],
        created_at=row["created_at"],
    )


def save_content(
    conn: sqlite3.Connection,
    title: str,
    url: str,
    full_text: str,
) -> ContentRecord:
    """Insert a full-text row and return it."""
    cid = str(uuid.uuid4())
    now = int(time())
    with conn:
        conn.execute(
            """
            INSERT INTO blog_contents (id, title, url, full_text, created_at)
            VALUES (?, ?, ?, ?, ?)
            """,
            (cid, title, url, full_text, now),
        )
    return get_content(conn, cid)  # type: ignore[return-value]


def get_content(conn: sqlite3.Connection, content_id: str) -> Optional[ContentRecord]:
    """Fetch a single content row by its UUID.  Returns ``None`` if not found."""
    row = conn.execute(
        "SELECT * FROM blog_contents WHERE id = ?", (content_id,)
    ).fetchone()
    return _row_to_content(row) if row else None


def latest_content(conn: sqlite3.Connection, url: str) -> Optional[ContentRecord]:
    """Most recently stored full text for *url*, if any."""
    row = conn.execute(
        "SELECT * FROM blog_contents WHERE url = ? ORDER BY created_at DESC, rowid DESC LIMIT 1",
        (url,),
    ).fetchone()
    return _row_to_content(row) if row else None


def count_contents(conn: sqlite3.Connection) -> int:
    row = conn.execute("SELECT COUNT(*) FROM blog_contents").fetchone()
    return row[0] if row else 0
