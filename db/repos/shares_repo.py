from __future__ import annotations

import sqlite3
from typing import Optional, Tuple


class SharesRepo:
    def __init__(self, conn: sqlite3.Connection):
        self.conn = conn

    def insert(self, slug: str, coaches_json: str, request_summary: Optional[str] = None) -> int:
        """Insert one share row; returns its id.

        A duplicate slug raises sqlite3.IntegrityError from the UNIQUE constraint.
        """
        cur = self.conn.cursor()
        cur.execute(
            "INSERT INTO shared_recommendations (slug, coaches_json, request_summary) VALUES (?, ?, ?)",
            (slug, coaches_json, request_summary),
        )
        self.conn.commit()
        return int(cur.lastrowid)

    def get_by_slug(self, slug: str) -> Optional[Tuple]:
        """Return (slug, coaches_json, request_summary, created_at) or None."""
        cur = self.conn.cursor()
        cur.execute(
            "SELECT slug, coaches_json, request_summary, created_at FROM shared_recommendations WHERE slug = ? LIMIT 1",
            (slug,),
        )
        return cur.fetchone()

    def count(self) -> int:
        cur = self.conn.cursor()
        cur.execute("SELECT COUNT(*) FROM shared_recommendations")
        return int(cur.fetchone()[0])
