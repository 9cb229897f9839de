"""Shared repository helpers, backend protocol, and error hierarchy.

Updates:
  v0.2.0 - 2026-10-13 - Add key-value backend protocol used by the record store.
  v0.1.0 - 2026-10-11 - Extract logger, helpers, and exceptions for storage backends.
"""

from __future__ import annotations

import json
import logging
import sqlite3
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence
    from pathlib import Path

logger = logging.getLogger("prompt_shelf.persistence")


class RepositoryError(Exception):
    """Base exception for persistence backend failures."""


class PersistenceBackend(Protocol):
    """Durable storage for the full record collection."""

    def load(self) -> Sequence[object]: ...

    def save(self, records: Sequence[Mapping[str, Any]]) -> None: ...


def ensure_directory(path: Path) -> None:
    """Ensure the parent directory for a storage file exists."""
    path.parent.mkdir(parents=True, exist_ok=True)


def connect(db_path: Path) -> sqlite3.Connection:
    """Return a configured SQLite connection."""
    conn = sqlite3.connect(str(db_path))
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA journal_mode = WAL;")
    conn.execute("PRAGMA synchronous = NORMAL;")
    return conn


def json_dumps_collection(records: Sequence[Mapping[str, Any]]) -> str:
    """Serialize the collection as a JSON array."""
    try:
        return json.dumps([dict(record) for record in records], ensure_ascii=False)
    except (TypeError, ValueError) as exc:
        raise RepositoryError("Collection is not JSON serialisable") from exc


def json_loads_collection(value: str | None, *, source: object) -> list[object]:
    """Deserialize a stored collection, degrading to an empty list on bad payloads."""
    if value is None or value.strip() in ("", "null"):
        return []
    try:
        parsed: object = json.loads(value)
    except json.JSONDecodeError:
        logger.warning("Ignoring unreadable collection payload in %s", source)
        return []
    if not isinstance(parsed, list):
        logger.warning("Ignoring non-list collection payload in %s", source)
        return []
    return list(parsed)


__all__ = [
    "PersistenceBackend",
    "RepositoryError",
    "connect",
    "ensure_directory",
    "json_dumps_collection",
    "json_loads_collection",
    "logger",
]
