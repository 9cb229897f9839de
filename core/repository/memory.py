"""Volatile persistence backend.

Updates:
  v0.1.0 - 2026-10-11 - Add in-memory backend for tests and ephemeral sessions.
"""

from __future__ import annotations

import copy
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping, Sequence


class InMemoryBackend:
    """Keep the collection in process memory, recording every save."""

    def __init__(self, initial: Iterable[object] | None = None) -> None:
        self._payload: list[object] = copy.deepcopy(list(initial or []))
        self.save_count = 0

    def load(self) -> list[object]:
        return copy.deepcopy(self._payload)

    def save(self, records: Sequence[Mapping[str, Any]]) -> None:
        self._payload = [copy.deepcopy(dict(record)) for record in records]
        self.save_count += 1

    @property
    def payload(self) -> list[object]:
        """Return a copy of the last saved collection."""
        return copy.deepcopy(self._payload)


__all__ = ["InMemoryBackend"]
