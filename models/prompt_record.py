"""Prompt record data model definitions.

Updates:
  v0.3.0 - 2026-10-14 - Accept snake_case keys alongside persisted camelCase keys.
  v0.2.0 - 2026-10-12 - Add lenient normalisation for raw persisted payloads.
  v0.1.0 - 2026-10-10 - Initial PromptRecord schema with serialization helpers.
"""

from __future__ import annotations

import copy
import math
import time
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field, replace
from typing import Any

# Persisted key -> dataclass attribute.
FIELD_KEYS: dict[str, str] = {
    "id": "id",
    "text": "text",
    "tags": "tags",
    "favorite": "favorite",
    "folderId": "folder_id",
    "createdAt": "created_at",
    "updatedAt": "updated_at",
    "usageCount": "usage_count",
}

_ATTRIBUTE_KEYS: dict[str, str] = {attr: key for key, attr in FIELD_KEYS.items()}

# Fields fixed at creation.
IMMUTABLE_FIELDS: frozenset[str] = frozenset({"id", "created_at"})

# Fields only the store itself advances; patches cannot set them.
STORE_MANAGED_FIELDS: frozenset[str] = IMMUTABLE_FIELDS | {"updated_at", "usage_count"}


def now_ms() -> int:
    """Return the current wall-clock time in epoch milliseconds."""
    return int(time.time() * 1000)


def is_number(value: Any) -> bool:
    """Return True for finite ints/floats, excluding booleans."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def lookup_field(data: Mapping[str, Any], attribute: str, default: Any = None) -> Any:
    """Return *attribute* from *data* using either its persisted or Python key."""
    persisted = _ATTRIBUTE_KEYS[attribute]
    if persisted in data:
        return data[persisted]
    return data.get(attribute, default)


def has_field(data: Mapping[str, Any], attribute: str) -> bool:
    """Return True when *data* carries *attribute* under either key style."""
    return _ATTRIBUTE_KEYS[attribute] in data or attribute in data


def canonical_patch(data: Mapping[str, Any]) -> dict[str, Any]:
    """Translate a patch mapping into dataclass attribute names.

    Unknown keys are dropped; persisted camelCase keys win over snake_case
    duplicates.
    """
    patch: dict[str, Any] = {}
    for attribute in _ATTRIBUTE_KEYS:
        if has_field(data, attribute):
            patch[attribute] = lookup_field(data, attribute)
    return patch


def _coerce_tags(value: Any) -> list[str]:
    if not isinstance(value, (list, tuple)):
        return []
    return [item for item in value if isinstance(item, str)]


def _coerce_timestamp(value: Any, fallback: int) -> int:
    return int(value) if is_number(value) else fallback


def _coerce_usage(value: Any) -> int:
    return max(0, int(value)) if is_number(value) else 0


@dataclass(slots=True)
class PromptRecord:
    """Dataclass representation of a stored prompt snippet."""

    id: str
    text: str
    tags: list[str] = field(default_factory=list)
    favorite: bool = False
    folder_id: str | None = None
    created_at: int = field(default_factory=now_ms)
    updated_at: int = field(default_factory=now_ms)
    usage_count: int = 0

    @classmethod
    def normalize(
        cls,
        raw: Any,
        *,
        id_factory: Callable[[], str],
        clock: Callable[[], int] = now_ms,
    ) -> PromptRecord:
        """Build a schema-conformant record from an arbitrary persisted value.

        Never raises for malformed input: every field that is missing or has
        the wrong type is replaced with its default. Non-mapping values are
        treated as empty payloads.
        """
        data: Mapping[str, Any] = raw if isinstance(raw, Mapping) else {}
        raw_id = lookup_field(data, "id")
        raw_text = lookup_field(data, "text")
        raw_folder = lookup_field(data, "folder_id")
        now = clock()
        return cls(
            id=raw_id if isinstance(raw_id, str) else id_factory(),
            text=raw_text if isinstance(raw_text, str) else "",
            tags=_coerce_tags(lookup_field(data, "tags")),
            favorite=bool(lookup_field(data, "favorite")),
            folder_id=raw_folder if raw_folder is None or isinstance(raw_folder, str) else None,
            created_at=_coerce_timestamp(lookup_field(data, "created_at"), now),
            updated_at=_coerce_timestamp(lookup_field(data, "updated_at"), now),
            usage_count=_coerce_usage(lookup_field(data, "usage_count")),
        )

    @classmethod
    def from_record(
        cls,
        data: Mapping[str, Any],
        *,
        id_factory: Callable[[], str],
        clock: Callable[[], int] = now_ms,
    ) -> PromptRecord:
        """Hydrate a record from a creation payload that already passed validation."""
        now = clock()
        raw_id = lookup_field(data, "id")
        return cls(
            id=str(raw_id) if raw_id not in (None, "") else id_factory(),
            text=str(lookup_field(data, "text", "")),
            tags=_coerce_tags(lookup_field(data, "tags")),
            favorite=bool(lookup_field(data, "favorite")),
            folder_id=lookup_field(data, "folder_id"),
            created_at=_coerce_timestamp(lookup_field(data, "created_at"), now),
            updated_at=_coerce_timestamp(lookup_field(data, "updated_at"), now),
            usage_count=_coerce_usage(lookup_field(data, "usage_count")),
        )

    def to_record(self) -> dict[str, Any]:
        """Return a mapping suitable for key-value persistence."""
        return {
            "id": self.id,
            "text": self.text,
            "tags": list(self.tags),
            "favorite": self.favorite,
            "folderId": self.folder_id,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
            "usageCount": self.usage_count,
        }

    def merged(self, patch: Mapping[str, Any], *, updated_at: int) -> PromptRecord:
        """Return a copy with *patch* applied and ``updated_at`` refreshed.

        Store-managed fields in *patch* are ignored; ``favorite`` is coerced to bool.
        """
        changes = {
            attribute: value
            for attribute, value in canonical_patch(patch).items()
            if attribute not in STORE_MANAGED_FIELDS
        }
        if "tags" in changes:
            changes["tags"] = _coerce_tags(changes["tags"])
        if "favorite" in changes:
            changes["favorite"] = bool(changes["favorite"])
        changes["updated_at"] = updated_at
        return replace(self, **changes)

    def copy(self) -> PromptRecord:
        """Return a deep copy detached from the store's instance."""
        return copy.deepcopy(self)


__all__ = [
    "FIELD_KEYS",
    "IMMUTABLE_FIELDS",
    "PromptRecord",
    "STORE_MANAGED_FIELDS",
    "canonical_patch",
    "has_field",
    "is_number",
    "lookup_field",
    "now_ms",
]
