"""Repository helpers for persisted extension state.

Each extension is stored as one JSON document keyed by its component id.
Errors from sqlite or from JSON serialisation are left to the caller.
"""
from __future__ import annotations

import json
from datetime import datetime, timezone
from typing import Any, Dict, Optional


def save_extension_state(conn: Any, component: str, state: Dict[str, Any]) -> None:
    """Create or replace the stored state for `component`.

    The function commits the transaction.
    """
    payload = json.dumps(state, sort_keys=True)
    updated_at = datetime.now(timezone.utc).isoformat()
    cur = conn.cursor()
    cur.execute(
        """
        INSERT INTO extension_state (component, state_json, updated_at)
        VALUES (?, ?, ?)
        ON CONFLICT(component) DO UPDATE SET
            state_json = excluded.state_json,
            updated_at = excluded.updated_at
        """,
        (component, payload, updated_at),
    )
    conn.commit()


def load_extension_state(conn: Any, component: str) -> Optional[Dict[str, Any]]:
    """Return the stored state for `component` or `None` if it was never saved."""
    cur = conn.cursor()
    cur.execute("SELECT state_json FROM extension_state WHERE component = ?", (component,))
    row = cur.fetchone()
    if not row or row[0] is None:
        return None
    return json.loads(row[0])


def delete_extension_state(conn: Any, component: str) -> bool:
    """Remove the stored state for `component`. Returns True if a row was deleted."""
    cur = conn.cursor()
    cur.execute("DELETE FROM extension_state WHERE component = ?", (component,))
    conn.commit()
    return cur.rowcount > 0


__all__ = ["save_extension_state", "load_extension_state", "delete_extension_state"]
