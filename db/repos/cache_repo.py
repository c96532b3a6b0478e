from __future__ import annotations

import sqlite3
from typing import Dict, Mapping, Optional


class CacheRepo:
    """Key-value slots in the `cache_entries` table.

    sqlite3 errors propagate; the cache store decides how to degrade.
    """

    def __init__(self, conn: sqlite3.Connection):
        self.conn = conn

    def get(self, key: str) -> Optional[str]:
        cur = self.conn.cursor()
        cur.execute("SELECT value FROM cache_entries WHERE key = ?", (key,))
        row = cur.fetchone()
        return row[0] if row else None

    def get_many(self, *keys: str) -> Dict[str, Optional[str]]:
        return {key: self.get(key) for key in keys}

    def set_many(self, items: Mapping[str, str]) -> None:
        """Upsert all items in one transaction; either every slot changes or none does."""
        sql = (
            "INSERT INTO cache_entries (key, value, updated_at) VALUES (?, ?, datetime('now')) "
            "ON CONFLICT(key) DO UPDATE SET value = excluded.value, updated_at = excluded.updated_at"
        )
        with self.conn:
            self.conn.executemany(sql, list(items.items()))

    def delete(self, *keys: str) -> None:
        with self.conn:
            self.conn.executemany("DELETE FROM cache_entries WHERE key = ?", [(k,) for k in keys])
