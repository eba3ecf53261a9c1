"""Schema initialisation for the two stores.

Both ``init_*`` functions are idempotent: every DDL statement uses
``IF NOT EXISTS`` so calling them on an existing database is safe.
"""

from __future__ import annotations

import sqlite3

SUMMARIES_SCHEMA = """
CREATE TABLE IF NOT EXISTS blog_summaries (
    id            TEXT PRIMARY KEY,
    title         TEXT NOT NULL,
    url           TEXT NOT NULL,
    summary       TEXT NOT NULL,
    urdu_summary  TEXT NOT NULL DEFAULT '',
    created_at    INTEGER NOT NULL
);
CREATE INDEX IF NOT EXISTS idx_blog_summaries_created
    ON blog_summaries(created_at);
"""

CONTENTS_SCHEMA = """
CREATE TABLE IF NOT EXISTS blog_contents (
    id          TEXT PRIMARY KEY,
    title       TEXT NOT NULL,
    url         TEXT NOT NULL,
    full_text   TEXT NOT NULL,
    created_at  INTEGER NOT NULL
);
CREATE INDEX IF NOT EXISTS idx_blog_contents_url
    ON blog_contents(url);
"""


def init_summaries_db(conn: sqlite3.Connection) -> None:
    """Create the ``blog_summaries`` table and its index."""
    conn.executescript(SUMMARIES_SCHEMA)


def init_contents_db(conn: sqlite3.Connection) -> None:
    """Create the ``blog_contents`` table and its index."""
    conn.executescript(CONTENTS_SCHEMA)
