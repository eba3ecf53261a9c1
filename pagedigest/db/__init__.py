"""Database layer package.

Public re-exports so callers can write::

    from pagedigest.db import get_connection, init_summaries_db, init_contents_db
    from pagedigest.db import summaries, contents
"""

from pagedigest.db.connection import get_connection
from pagedigest.db.migrations import init_contents_db, init_summaries_db
from pagedigest.db import contents, summaries

__all__ = [
    "get_connection",
    "init_summaries_db",
    "init_contents_db",
    "summaries",
    "contents",
]
