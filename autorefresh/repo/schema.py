"""Database schema for repository layer.

Defines SQL for the `extension_state` table and a helper to create it.
"""
from __future__ import annotations

from typing import Any


EXTENSION_STATE_TABLE_SQL = """
CREATE TABLE IF NOT EXISTS extension_state (
    component TEXT PRIMARY KEY,
    state_json TEXT,
    updated_at TEXT
);
"""


def create_tables(conn: Any) -> None:
    """Create all tables used by the repository layer (idempotent)."""
    cur = conn.cursor()
    cur.executescript(EXTENSION_STATE_TABLE_SQL)
    conn.commit()


__all__ = ["EXTENSION_STATE_TABLE_SQL", "create_tables"]
