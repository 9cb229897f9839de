"""Key-value persistence backends for the prompt collection.

Updates:
  v0.2.0 - 2026-10-13 - Add SQLite key-value backend alongside JSON and memory stores.
  v0.1.0 - 2026-10-11 - Begin modularization by extracting base helpers.
"""

from __future__ import annotations

from .base import PersistenceBackend, RepositoryError
from .json_file import JsonFileBackend
from .memory import InMemoryBackend
from .sqlite_kv import SQLiteKeyValueBackend

__all__ = [
    "InMemoryBackend",
    "JsonFileBackend",
    "PersistenceBackend",
    "RepositoryError",
    "SQLiteKeyValueBackend",
]
