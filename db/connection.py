from __future__ import annotations

import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional


def get_connection(db_path: str, timeout: Optional[float] = 30.0) -> sqlite3.Connection:
    """Open a SQLite connection for the share table.

    - WAL journal so page reads don't block share inserts
    - NORMAL synchronous for performance
    - creates the parent directory of db_path if needed
    """
    if db_path != ":memory:":
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(db_path, timeout=timeout or 30.0)
    conn.execute("PRAGMA journal_mode=WAL;")
    conn.execute("PRAGMA synchronous=NORMAL;")
    return conn


@contextmanager
def connection_scope(db_path: str) -> Iterator[sqlite3.Connection]:
    """Request-scoped connection; always closed on exit."""
    conn = get_connection(db_path)
    try:
        yield conn
    finally:
        conn.close()
