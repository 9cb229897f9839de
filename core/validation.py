"""Precondition checks shared by record creation and update.

Updates:
  v0.1.0 - 2026-10-12 - Extract create/update validation from the record store.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from models.prompt_record import PromptRecord, has_field, lookup_field

from .exceptions import (
    DuplicateRecordError,
    FolderRequiredError,
    InvalidRecordError,
)

if TYPE_CHECKING:
    from collections.abc import Container


def is_blank(value: Any) -> bool:
    """Return True unless *value* is a string with non-whitespace content."""
    return not isinstance(value, str) or not value.strip()


def has_folder(value: Any) -> bool:
    """Return True when *value* names a concrete folder."""
    return isinstance(value, str) and bool(value)


def _fields(record: PromptRecord | Mapping[str, Any]) -> tuple[Any, Any, Any]:
    if isinstance(record, PromptRecord):
        return record.text, record.folder_id, record.id
    return (
        lookup_field(record, "text"),
        lookup_field(record, "folder_id"),
        lookup_field(record, "id"),
    )


def validate_new_record(
    record: PromptRecord | Mapping[str, Any] | None,
    existing_ids: Container[str],
) -> None:
    """Raise the first failing creation precondition for *record*."""
    if record is None or not isinstance(record, (PromptRecord, Mapping)):
        raise InvalidRecordError("Record payload is missing")
    text, folder_id, record_id = _fields(record)
    if is_blank(text):
        raise InvalidRecordError("Record text is blank")
    if not has_folder(folder_id):
        raise FolderRequiredError("Record has no folder")
    if record_id not in (None, "") and str(record_id) in existing_ids:
        raise DuplicateRecordError(f"Record {record_id} already exists")


def validate_patch(patch: Mapping[str, Any] | None) -> None:
    """Raise the first failing update precondition for *patch*.

    A ``None`` patch is accepted and only refreshes the update timestamp.
    """
    if patch is None:
        return
    if has_field(patch, "text") and is_blank(lookup_field(patch, "text")):
        raise InvalidRecordError("Patch text is blank")
    if not has_folder(lookup_field(patch, "folder_id")):
        raise FolderRequiredError("Patch has no folder")


__all__ = ["has_folder", "is_blank", "validate_new_record", "validate_patch"]
