"""In-memory prompt collection with validated mutations and durable flushes.

The store is the single mutation authority for prompt records. Every mutation
that changes state performs a full-collection save through the persistence
backend and emits exactly one event. When the save fails the in-memory change
is rolled back, no event is emitted, and :class:`RecordStorageError` is raised.

Updates:
  v0.3.0 - 2026-10-15 - Roll back in-memory mutations when persistence fails.
  v0.2.0 - 2026-10-13 - Return MutationOutcome from delete/toggle/increment.
  v0.1.0 - 2026-10-12 - Introduce RecordStore with injected collaborators.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Mapping
from enum import Enum
from typing import TYPE_CHECKING, Any

from models.prompt_record import PromptRecord, is_number, now_ms

from .events import (
    RecordCopied,
    RecordCreated,
    RecordFavorited,
    RecordRemoved,
    RecordUpdated,
)
from .exceptions import (
    RecordNotFoundError,
    RecordStorageError,
    RecordValidationError,
)
from .query import QueryCriteria, filter_and_sort
from .repository import RepositoryError
from .validation import validate_new_record, validate_patch

if TYPE_CHECKING:
    from collections.abc import Iterator

    from .collaborators import ErrorReporter, IdGenerator, MessageCatalog
    from .events import EventSink, RecordEvent
    from .repository import PersistenceBackend

logger = logging.getLogger("prompt_shelf.store")


class MutationOutcome(str, Enum):
    """Result of an operation that silently skips missing ids."""

    APPLIED = "applied"
    SKIPPED_NOT_FOUND = "skipped_not_found"


class RecordStore:
    """Own the prompt collection and expose its state transitions."""

    def __init__(
        self,
        *,
        backend: PersistenceBackend,
        id_generator: IdGenerator,
        events: EventSink,
        error_reporter: ErrorReporter,
        messages: MessageCatalog,
        clock: Callable[[], int] = now_ms,
    ) -> None:
        self._backend = backend
        self._id_generator = id_generator
        self._events = events
        self._error_reporter = error_reporter
        self._messages = messages
        self._clock = clock
        self._records: list[PromptRecord] = []
        self._lock = threading.RLock()

    # ------------------------------------------------------------------
    # Hydration and reads
    # ------------------------------------------------------------------

    def init(self) -> None:
        """Replace the collection with normalized records from the backend."""
        try:
            raw_records = self._backend.load()
        except RepositoryError as exc:
            logger.error("Unable to load prompt collection", exc_info=True)
            raise RecordStorageError("Unable to load prompt collection") from exc
        if not isinstance(raw_records, (list, tuple)):
            logger.warning("Backend returned %s instead of a list", type(raw_records).__name__)
            raw_records = []
        records = [
            PromptRecord.normalize(raw, id_factory=self._id_generator.new_id, clock=self._clock)
            for raw in raw_records
        ]
        with self._lock:
            self._records = records
        logger.info("Loaded %d prompt(s)", len(records))

    def snapshot(self) -> list[PromptRecord]:
        """Return detached copies of every record in collection order."""
        with self._lock:
            return [record.copy() for record in self._records]

    def get(self, record_id: str) -> PromptRecord | None:
        """Return a copy of the record with *record_id*, or None."""
        with self._lock:
            index = self._index_of(record_id)
            return None if index is None else self._records[index].copy()

    def query(self, criteria: QueryCriteria | Mapping[str, Any] | None = None) -> list[PromptRecord]:
        """Filter and sort a point-in-time snapshot."""
        return filter_and_sort(self.snapshot(), criteria)  # type: ignore[return-value]

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def __contains__(self, record_id: object) -> bool:
        with self._lock:
            return any(record.id == record_id for record in self._records)

    def __iter__(self) -> Iterator[PromptRecord]:
        return iter(self.snapshot())

    # ------------------------------------------------------------------
    # Validated mutations
    # ------------------------------------------------------------------

    def create(self, record: PromptRecord | Mapping[str, Any] | None) -> bool:
        """Append *record* after validation; report and return False on failure."""
        with self._lock:
            try:
                validate_new_record(record, {item.id for item in self._records})
            except RecordValidationError as exc:
                self._report(exc)
                return False
            if isinstance(record, PromptRecord):
                created = record.copy()
                if not isinstance(created.id, str) or not created.id:
                    created.id = self._id_generator.new_id()
            else:
                created = PromptRecord.from_record(
                    record,  # type: ignore[arg-type]
                    id_factory=self._id_generator.new_id,
                    clock=self._clock,
                )
            previous = self._records
            self._records = [*previous, created]
            self._commit(previous, RecordCreated(record=created.copy()))
        logger.debug("Created prompt %s", created.id)
        return True

    def update(self, record_id: str, patch: Mapping[str, Any] | None = None) -> bool:
        """Merge *patch* into the stored record; report and return False on failure."""
        with self._lock:
            try:
                index = self._index_of(record_id)
                if index is None:
                    raise RecordNotFoundError(f"Record {record_id} not found")
                validate_patch(patch)
            except RecordValidationError as exc:
                self._report(exc)
                return False
            changes = dict(patch or {})
            current = self._records[index]
            # updatedAt must advance even when the clock has not.
            stamp = max(self._clock(), current.updated_at + 1)
            updated = current.merged(changes, updated_at=stamp)
            previous = self._records
            self._records = [*previous[:index], updated, *previous[index + 1 :]]
            self._commit(
                previous,
                RecordUpdated(id=record_id, record=updated.copy(), changes=changes),
            )
        logger.debug("Updated prompt %s", record_id)
        return True

    # ------------------------------------------------------------------
    # Idempotent-intent mutations
    # ------------------------------------------------------------------

    def delete(self, record_id: str) -> MutationOutcome:
        """Remove the record with *record_id*; missing ids are a silent no-op."""
        with self._lock:
            index = self._index_of(record_id)
            if index is None:
                logger.debug("Delete skipped; prompt %s not found", record_id)
                return MutationOutcome.SKIPPED_NOT_FOUND
            previous = self._records
            removed = previous[index]
            self._records = [*previous[:index], *previous[index + 1 :]]
            self._commit(previous, RecordRemoved(id=record_id, record=removed.copy()))
        logger.debug("Deleted prompt %s", record_id)
        return MutationOutcome.APPLIED

    def toggle_favorite(self, record_id: str) -> MutationOutcome:
        """Flip the favorite flag of *record_id*; missing ids are a silent no-op."""
        with self._lock:
            index = self._index_of(record_id)
            if index is None:
                logger.debug("Favorite toggle skipped; prompt %s not found", record_id)
                return MutationOutcome.SKIPPED_NOT_FOUND
            previous = self._records
            toggled = previous[index].copy()
            toggled.favorite = not toggled.favorite
            self._records = [*previous[:index], toggled, *previous[index + 1 :]]
            self._commit(
                previous,
                RecordFavorited(
                    id=record_id, record=toggled.copy(), is_favorite=toggled.favorite
                ),
            )
        return MutationOutcome.APPLIED

    def increment_usage(self, record_id: str) -> MutationOutcome:
        """Add one to the usage counter of *record_id*; missing ids are a silent no-op."""
        with self._lock:
            index = self._index_of(record_id)
            if index is None:
                logger.debug("Usage increment skipped; prompt %s not found", record_id)
                return MutationOutcome.SKIPPED_NOT_FOUND
            previous = self._records
            used = previous[index].copy()
            current = used.usage_count if is_number(used.usage_count) else 0
            used.usage_count = int(current) + 1
            self._records = [*previous[:index], used, *previous[index + 1 :]]
            self._commit(
                previous,
                RecordCopied(id=record_id, record=used.copy(), usage_count=used.usage_count),
            )
        return MutationOutcome.APPLIED

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _index_of(self, record_id: object) -> int | None:
        for index, record in enumerate(self._records):
            if record.id == record_id:
                return index
        return None

    def _report(self, error: RecordValidationError) -> None:
        logger.info("Rejected prompt mutation (%s): %s", error.kind.value, error)
        self._error_reporter.report(self._messages.message_for(error.kind))

    def _commit(self, previous: list[PromptRecord], event: RecordEvent) -> None:
        """Persist the current collection, restoring *previous* if the save fails."""
        try:
            self._backend.save([record.to_record() for record in self._records])
        except RepositoryError as exc:
            self._records = previous
            logger.error("Failed to persist prompt collection; change rolled back", exc_info=True)
            raise RecordStorageError("Failed to persist prompt collection") from exc
        except Exception:
            self._records = previous
            logger.exception("Persistence backend raised unexpectedly; change rolled back")
            raise
        self._events.emit(event)


__all__ = ["MutationOutcome", "RecordStore"]
