"""SQLite connection factory.

Each store gets its own connection, opened and closed by the caller::

    from pagedigest.db.connection import get_connection

    conn = get_connection(settings.summaries_db_path)
    try:
        ...
    finally:
        conn.close()
"""

from __future__ import annotations

import sqlite3
from pathlib import Path
from typing import Union


def get_connection(db_path: Union[str, Path]) -> sqlite3.Connection:
    """Open and configure a SQLite connection.

    Args:
        db_path: Database file, or ``":memory:"`` for a throwaway store.  The
            parent directory is created when missing.

    Returns:
        A :class:`sqlite3.Connection` with ``row_factory`` set to
        :class:`sqlite3.Row` so columns can be accessed by name.
    """
    if str(db_path) != ":memory:":
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    conn = sqlite3.connect(str(db_path), check_same_thread=False)
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA journal_mode = WAL")
    return conn
