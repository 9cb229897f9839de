"""JSON file persistence backend.

Updates:
  v0.1.1 - 2026-10-14 - Replace the target atomically via a sibling temp file.
  v0.1.0 - 2026-10-12 - Add JSON file backend storing the collection under a key.
"""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import TYPE_CHECKING, Any

from .base import (
    RepositoryError,
    ensure_directory as _ensure_directory,
    logger,
)

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence


class JsonFileBackend:
    """Store the collection inside a JSON object keyed by *key*.

    The file holds a key-value mapping so other state can share it; only the
    entry under ``key`` belongs to the record store.
    """

    def __init__(self, path: str | Path, *, key: str = "prompts") -> None:
        self._path = Path(path).expanduser()
        self._key = key

    @property
    def path(self) -> Path:
        return self._path

    def _read_document(self) -> dict[str, Any]:
        if not self._path.exists():
            return {}
        try:
            contents = self._path.read_text(encoding="utf-8")
        except OSError as exc:
            raise RepositoryError(f"Unable to read {self._path}") from exc
        if not contents.strip():
            return {}
        try:
            parsed: object = json.loads(contents)
        except json.JSONDecodeError:
            logger.warning("Ignoring invalid JSON in %s", self._path)
            return {}
        if not isinstance(parsed, dict):
            logger.warning("Ignoring non-object JSON document in %s", self._path)
            return {}
        return {str(key): value for key, value in parsed.items()}

    def load(self) -> list[object]:
        value = self._read_document().get(self._key)
        if value is None:
            return []
        if not isinstance(value, list):
            logger.warning("Entry %r in %s is not a list; starting empty", self._key, self._path)
            return []
        return list(value)

    def save(self, records: Sequence[Mapping[str, Any]]) -> None:
        document = self._read_document()
        document[self._key] = [dict(record) for record in records]
        try:
            payload = json.dumps(document, indent=2, ensure_ascii=False)
        except (TypeError, ValueError) as exc:
            raise RepositoryError("Collection is not JSON serialisable") from exc
        try:
            _ensure_directory(self._path)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self._path.name}.", suffix=".tmp", dir=self._path.parent
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as handle:
                    handle.write(payload)
                os.replace(tmp_name, self._path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as exc:
            raise RepositoryError(f"Unable to write {self._path}") from exc


__all__ = ["JsonFileBackend"]
