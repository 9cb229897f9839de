"""SQLite key-value persistence backend.

Updates:
  v0.1.0 - 2026-10-12 - Add single-table key-value store holding the JSON collection.
"""

from __future__ import annotations

import sqlite3
from contextlib import closing
from pathlib import Path
from typing import TYPE_CHECKING, Any

from .base import (
    RepositoryError,
    connect as _connect,
    ensure_directory as _ensure_directory,
    json_dumps_collection as _json_dumps_collection,
    json_loads_collection as _json_loads_collection,
)

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence


class SQLiteKeyValueBackend:
    """Persist the collection as one JSON value in a ``kv_store`` table."""

    def __init__(self, db_path: str | Path, *, key: str = "prompts") -> None:
        """Initialise storage and ensure the schema exists."""
        self._db_path = Path(db_path).expanduser()
        self._key = key
        try:
            _ensure_directory(self._db_path)
            with closing(_connect(self._db_path)) as conn, conn:
                conn.execute(
                    "CREATE TABLE IF NOT EXISTS kv_store ("
                    "key TEXT PRIMARY KEY, value TEXT NOT NULL);"
                )
        except (sqlite3.Error, OSError) as exc:
            raise RepositoryError("Failed to initialise SQLite schema") from exc

    def load(self) -> list[object]:
        try:
            with closing(_connect(self._db_path)) as conn:
                row = conn.execute(
                    "SELECT value FROM kv_store WHERE key = ?;", (self._key,)
                ).fetchone()
        except sqlite3.Error as exc:
            raise RepositoryError(f"Failed to load {self._key!r} from {self._db_path}") from exc
        if row is None:
            return []
        return _json_loads_collection(row["value"], source=self._db_path)

    def save(self, records: Sequence[Mapping[str, Any]]) -> None:
        payload = _json_dumps_collection(records)
        try:
            with closing(_connect(self._db_path)) as conn, conn:
                conn.execute(
                    "INSERT INTO kv_store (key, value) VALUES (?, ?) "
                    "ON CONFLICT(key) DO UPDATE SET value = excluded.value;",
                    (self._key, payload),
                )
        except sqlite3.Error as exc:
            raise RepositoryError(f"Failed to save {self._key!r} to {self._db_path}") from exc


__all__ = ["SQLiteKeyValueBackend"]
