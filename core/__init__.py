"""Core service layer for Prompt Shelf.

Updates:
  v0.2.0 - 2026-10-14 - Export query helpers and the store factory.
  v0.1.0 - 2026-10-12 - Surface RecordStore, events, and the exception hierarchy.
"""

from models.prompt_record import PromptRecord

from .collaborators import (
    CollectingErrorReporter,
    ErrorReporter,
    IdGenerator,
    LocalizedMessageCatalog,
    LoggingErrorReporter,
    MessageCatalog,
    UuidIdGenerator,
)
from .events import (
    EventBus,
    EventSink,
    EventSubscription,
    RecordCopied,
    RecordCreated,
    RecordEvent,
    RecordFavorited,
    RecordRemoved,
    RecordUpdated,
)
from .exceptions import (
    DuplicateRecordError,
    FailureKind,
    FolderRequiredError,
    InvalidRecordError,
    PromptShelfError,
    RecordNotFoundError,
    RecordStorageError,
    RecordValidationError,
)
from .factory import build_backend, build_record_store
from .query import QueryCriteria, SortOrder, collect_tags, filter_and_sort
from .record_store import MutationOutcome, RecordStore
from .repository import (
    InMemoryBackend,
    JsonFileBackend,
    PersistenceBackend,
    RepositoryError,
    SQLiteKeyValueBackend,
)

__all__ = [
    "CollectingErrorReporter",
    "DuplicateRecordError",
    "ErrorReporter",
    "EventBus",
    "EventSink",
    "EventSubscription",
    "FailureKind",
    "FolderRequiredError",
    "IdGenerator",
    "InMemoryBackend",
    "InvalidRecordError",
    "JsonFileBackend",
    "LocalizedMessageCatalog",
    "LoggingErrorReporter",
    "MessageCatalog",
    "MutationOutcome",
    "PersistenceBackend",
    "PromptRecord",
    "PromptShelfError",
    "QueryCriteria",
    "RecordCopied",
    "RecordCreated",
    "RecordEvent",
    "RecordFavorited",
    "RecordNotFoundError",
    "RecordRemoved",
    "RecordStorageError",
    "RecordStore",
    "RecordUpdated",
    "RecordValidationError",
    "RepositoryError",
    "SQLiteKeyValueBackend",
    "SortOrder",
    "UuidIdGenerator",
    "build_backend",
    "build_record_store",
    "collect_tags",
    "filter_and_sort",
]
