from __future__ import annotations

import sqlite3


def bootstrap(conn: sqlite3.Connection) -> None:
    """Create the share table and indexes (idempotent)."""
    cur = conn.cursor()

    # One row per share link; rows are never updated or deleted
    cur.execute(
        (
            "CREATE TABLE IF NOT EXISTS shared_recommendations (\n"
            "  id INTEGER PRIMARY KEY AUTOINCREMENT,\n"
            "  slug TEXT NOT NULL UNIQUE,\n"
            "  coaches_json TEXT NOT NULL,\n"
            "  request_summary TEXT,\n"
            "  created_at TEXT NOT NULL DEFAULT (datetime('now'))\n"
            ")"
        )
    )
    cur.execute(
        "CREATE INDEX IF NOT EXISTS idx_shared_recommendations_created ON shared_recommendations(created_at);"
    )

    conn.commit()
