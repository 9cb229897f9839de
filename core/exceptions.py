"""Common exception classes for core package.

All exceptions ultimately inherit from :class:`PromptShelfError`, allowing
callers to catch a single base class for any store-related failure while
still distinguishing individual error categories when needed.

Validation errors carry a :class:`FailureKind` so the record store can resolve a
localized message for the error reporter without inspecting exception types.

Updates:
  v0.2.0 - 2026-10-15 - Add RecordStorageError for rolled-back persistence failures.
  v0.1.0 - 2026-10-10 - Created module with validation failure taxonomy.
"""

from __future__ import annotations

from enum import Enum


class FailureKind(str, Enum):
    """Enumerate caller-visible validation failures for create/update."""

    INVALID_RECORD = "invalid_record"
    FOLDER_REQUIRED = "folder_required"
    DUPLICATE_ID = "duplicate_id"
    NOT_FOUND = "not_found"


class PromptShelfError(Exception):
    """Base exception for Prompt Shelf failures."""


class RecordValidationError(PromptShelfError):
    """Raised when a record or patch fails a create/update precondition."""

    kind: FailureKind = FailureKind.INVALID_RECORD

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.kind.value)


class InvalidRecordError(RecordValidationError):
    """Raised when record text is missing or blank after trimming."""

    kind = FailureKind.INVALID_RECORD


class FolderRequiredError(RecordValidationError):
    """Raised when a record or patch lacks a concrete folder id."""

    kind = FailureKind.FOLDER_REQUIRED


class DuplicateRecordError(RecordValidationError):
    """Raised when creating a record whose id already exists."""

    kind = FailureKind.DUPLICATE_ID


class RecordNotFoundError(RecordValidationError):
    """Raised when an update targets an id that is not stored."""

    kind = FailureKind.NOT_FOUND


class RecordStorageError(PromptShelfError):
    """Raised when the persistence backend fails to load or save the collection."""


__all__ = [
    "DuplicateRecordError",
    "FailureKind",
    "FolderRequiredError",
    "InvalidRecordError",
    "PromptShelfError",
    "RecordNotFoundError",
    "RecordStorageError",
    "RecordValidationError",
]
