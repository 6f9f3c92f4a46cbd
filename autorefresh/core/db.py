"""Sqlite access for persisted extension state.

`open_connection` is what extensions use: the first call for a database
path creates the file and the `extension_state` table, later calls only
connect.
"""
from __future__ import annotations

import sqlite3
import threading
from pathlib import Path
from typing import Optional, Set, Union

from ..repo.schema import create_tables
from .config import settings

PathLike = Union[str, Path]

# resolved paths whose schema is already in place
_ready_paths: Set[str] = set()
_ready_lock = threading.Lock()


def _resolve(db_path: Optional[PathLike]) -> Path:
    return Path(db_path or settings.DB_PATH).resolve()


def get_connection(db_path: Optional[PathLike] = None) -> sqlite3.Connection:
    """Connect to `db_path` (default `settings.DB_PATH`) without touching the schema."""
    return sqlite3.connect(str(_resolve(db_path)))


def init_db(db_path: Optional[PathLike] = None) -> Path:
    """Create the database directory, file and tables. Idempotent."""
    path = _resolve(db_path)
    path.parent.mkdir(parents=True, exist_ok=True)

    conn = sqlite3.connect(str(path))
    try:
        create_tables(conn)
    finally:
        conn.close()

    with _ready_lock:
        _ready_paths.add(str(path))
    return path


def open_connection() -> sqlite3.Connection:
    """Return a connection to `settings.DB_PATH`, initializing it on first use.

    Caller is responsible for closing it.
    """
    path = _resolve(None)
    with _ready_lock:
        ready = str(path) in _ready_paths
    if not ready:
        init_db(path)
    return get_connection(path)


__all__ = ["get_connection", "init_db", "open_connection"]
