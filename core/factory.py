"""Factories for constructing RecordStore instances from validated settings.

Updates:
  v0.1.1 - 2026-10-16 - Allow callers to inject an error reporter and event sink.
  v0.1.0 - 2026-10-13 - Initial store builder wiring backends from settings.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .collaborators import LocalizedMessageCatalog, LoggingErrorReporter, UuidIdGenerator
from .events import EventBus
from .record_store import RecordStore
from .repository import InMemoryBackend, JsonFileBackend, SQLiteKeyValueBackend

if TYPE_CHECKING:  # pragma: no cover - typing only
    from config import PromptShelfSettings

    from .collaborators import ErrorReporter
    from .events import EventSink
    from .repository import PersistenceBackend

factory_logger = logging.getLogger("prompt_shelf.factory")


def build_backend(settings: PromptShelfSettings) -> PersistenceBackend:
    """Return the persistence backend selected by *settings*."""
    backend = settings.storage_backend
    if backend == "memory":
        factory_logger.info("Using in-memory prompt storage; changes will not survive restarts")
        return InMemoryBackend()
    if settings.storage_path is None:
        raise ValueError(f"storage_path is required for the {backend} backend")
    if backend == "sqlite":
        return SQLiteKeyValueBackend(settings.storage_path, key=settings.storage_key)
    return JsonFileBackend(settings.storage_path, key=settings.storage_key)


def build_record_store(
    settings: PromptShelfSettings,
    *,
    backend: PersistenceBackend | None = None,
    events: EventSink | None = None,
    error_reporter: ErrorReporter | None = None,
    initialise: bool = True,
) -> RecordStore:
    """Wire a RecordStore from *settings*, hydrating it unless *initialise* is False."""
    store = RecordStore(
        backend=backend or build_backend(settings),
        id_generator=UuidIdGenerator(),
        events=events or EventBus(),
        error_reporter=error_reporter or LoggingErrorReporter(),
        messages=LocalizedMessageCatalog(settings.locale),
    )
    if initialise:
        store.init()
    return store


__all__ = ["build_backend", "build_record_store"]
