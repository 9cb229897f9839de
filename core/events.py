"""Domain events emitted by the record store and an in-process dispatch hub.

Updates:
  v0.2.0 - 2026-10-13 - Add per-event-type subscriptions and bounded history.
  v0.1.0 - 2026-10-11 - Introduce record events and the EventBus publish/subscribe hub.
"""

from __future__ import annotations

import logging
import threading
from collections import deque
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, ClassVar, Protocol

if TYPE_CHECKING:
    from collections.abc import Callable

    from models.prompt_record import PromptRecord

logger = logging.getLogger("prompt_shelf.events")


@dataclass(slots=True, frozen=True)
class RecordCreated:
    """A record was appended to the collection."""

    name: ClassVar[str] = "record_created"
    record: PromptRecord

    @property
    def id(self) -> str:
        return self.record.id


@dataclass(slots=True, frozen=True)
class RecordUpdated:
    """A record was merged with a patch."""

    name: ClassVar[str] = "record_updated"
    id: str
    record: PromptRecord
    changes: dict[str, Any] = field(default_factory=dict)


@dataclass(slots=True, frozen=True)
class RecordRemoved:
    """A record was deleted; ``record`` holds its value prior to removal."""

    name: ClassVar[str] = "record_removed"
    id: str
    record: PromptRecord


@dataclass(slots=True, frozen=True)
class RecordFavorited:
    """A record's favorite flag was flipped."""

    name: ClassVar[str] = "record_favorited"
    id: str
    record: PromptRecord
    is_favorite: bool


@dataclass(slots=True, frozen=True)
class RecordCopied:
    """A record was used (copied) and its usage counter incremented."""

    name: ClassVar[str] = "record_copied"
    id: str
    record: PromptRecord
    usage_count: int


RecordEvent = RecordCreated | RecordUpdated | RecordRemoved | RecordFavorited | RecordCopied


class EventSink(Protocol):
    """Anything that accepts record events; delivery is fire-and-forget."""

    def emit(self, event: RecordEvent) -> None: ...


class EventSubscription:
    """Disposable handle that removes its callback when closed."""

    def __init__(
        self,
        bus: EventBus,
        callback: Callable[[RecordEvent], None],
        event_type: type[RecordEvent] | None,
    ) -> None:
        self._bus = bus
        self._callback = callback
        self._event_type = event_type
        self._closed = False

    def close(self) -> None:
        """Detach the stored callback if it is still active."""
        if self._closed:
            return
        self._closed = True
        self._bus.unsubscribe(self._callback, self._event_type)

    def __enter__(self) -> EventSubscription:
        return self

    def __exit__(self, *_: object) -> None:
        self.close()


class EventBus:
    """Thread-safe publish/subscribe hub for record events."""

    def __init__(self, history_limit: int = 200) -> None:
        """Initialise the subscriber registry and bounded history queue."""
        self._subscribers: list[tuple[type[RecordEvent] | None, Callable[[RecordEvent], None]]] = []
        self._lock = threading.RLock()
        self._history: deque[RecordEvent] = deque(maxlen=history_limit)

    def subscribe(
        self,
        callback: Callable[[RecordEvent], None],
        event_type: type[RecordEvent] | None = None,
    ) -> EventSubscription:
        """Register *callback* for *event_type* (or every event when None)."""
        with self._lock:
            self._subscribers.append((event_type, callback))
        return EventSubscription(self, callback, event_type)

    def unsubscribe(
        self,
        callback: Callable[[RecordEvent], None],
        event_type: type[RecordEvent] | None = None,
    ) -> None:
        """Remove a previously subscribed callback if present."""
        with self._lock:
            try:
                self._subscribers.remove((event_type, callback))
            except ValueError:
                pass

    def emit(self, event: RecordEvent) -> None:
        """Deliver *event* to every matching subscriber."""
        with self._lock:
            self._history.append(event)
            subscribers = [
                callback
                for event_type, callback in self._subscribers
                if event_type is None or isinstance(event, event_type)
            ]

        logger.debug("Record event", extra={"event": event.name, "record_id": event.id})

        for callback in subscribers:
            try:
                callback(event)
            except Exception:
                logger.exception("Event subscriber raised an exception")

    def history(self) -> tuple[RecordEvent, ...]:
        """Return a snapshot of delivered events."""
        with self._lock:
            return tuple(self._history)


__all__ = [
    "EventBus",
    "EventSink",
    "EventSubscription",
    "RecordCopied",
    "RecordCreated",
    "RecordEvent",
    "RecordFavorited",
    "RecordRemoved",
    "RecordUpdated",
]
