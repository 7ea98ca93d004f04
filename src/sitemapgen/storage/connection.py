"""SQLite connection management."""

from __future__ import annotations

import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Generator


@contextmanager
def get_connection(
    database_path: str, *, readonly: bool = False
) -> Generator[sqlite3.Connection, None, None]:
    """Open a SQLite connection with dict-like rows.

    Read-only connections are opened through a ``mode=ro`` URI so a missing
    database fails instead of being created. Commits on clean exit, rolls back
    on exception, and always closes.
    """
    if readonly:
        uri = f"{Path(database_path).resolve().as_uri()}?mode=ro"
        conn = sqlite3.connect(uri, uri=True)
    else:
        conn = sqlite3.connect(database_path)
    conn.row_factory = sqlite3.Row
    try:
        yield conn
        conn.commit()
    except BaseException:
        conn.rollback()
        raise
    finally:
        conn.close()
