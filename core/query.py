"""Filter and sort helpers applied to snapshots of the prompt collection.

Updates:
  v0.2.0 - 2026-10-14 - Accept raw mappings alongside PromptRecord instances.
  v0.1.0 - 2026-10-12 - Introduce QueryCriteria and the filter_and_sort pipeline.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from models.prompt_record import PromptRecord, is_number, lookup_field

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

RecordLike = PromptRecord | Mapping[str, Any]


class SortOrder(str, Enum):
    """Supported descending sort keys."""

    USAGE = "usage"
    UPDATED = "updatedAt"
    CREATED = "createdAt"


_SORT_ATTRIBUTES: dict[SortOrder, str] = {
    SortOrder.USAGE: "usage_count",
    SortOrder.UPDATED: "updated_at",
    SortOrder.CREATED: "created_at",
}

_ORDER_ALIASES: dict[str, SortOrder] = {
    "usage": SortOrder.USAGE,
    "usage_count": SortOrder.USAGE,
    "updatedAt": SortOrder.UPDATED,
    "updated_at": SortOrder.UPDATED,
}


def resolve_order(value: object) -> SortOrder:
    """Map a raw ``order`` criterion onto a sort key; unknown values sort by creation."""
    if isinstance(value, SortOrder):
        return value
    if isinstance(value, str):
        return _ORDER_ALIASES.get(value.strip(), SortOrder.CREATED)
    return SortOrder.CREATED


class QueryCriteria(BaseModel):
    """Optional filters combined with AND, plus the sort order."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    folder: str | None = None
    text: str | None = None
    favorite: bool = False
    tag: str | None = None
    order: SortOrder = Field(default=SortOrder.CREATED)

    @field_validator("favorite", mode="before")
    def _coerce_favorite(cls, value: object) -> bool:
        return bool(value)

    @field_validator("order", mode="before")
    def _coerce_order(cls, value: object) -> SortOrder:
        return resolve_order(value)


def _value(record: RecordLike, attribute: str) -> Any:
    if isinstance(record, PromptRecord):
        return getattr(record, attribute)
    return lookup_field(record, attribute)


def _sort_number(record: RecordLike, attribute: str) -> float:
    value = _value(record, attribute)
    return value if is_number(value) else 0


def _matches_text(record: RecordLike, needle: str) -> bool:
    text = _value(record, "text")
    return isinstance(text, str) and bool(text) and needle in text.lower()


def _has_tag(record: RecordLike, tag: str) -> bool:
    tags = _value(record, "tags")
    return isinstance(tags, (list, tuple)) and tag in tags


def filter_and_sort(
    records: Iterable[RecordLike],
    criteria: QueryCriteria | Mapping[str, Any] | None = None,
) -> list[RecordLike]:
    """Return a new filtered and ordered list; *records* and its elements are untouched.

    Filters apply in a fixed order (folder, text, favorite, tag). Sorting is
    descending and stable, so equal keys keep their input order.
    """
    if criteria is None:
        criteria = QueryCriteria()
    elif not isinstance(criteria, QueryCriteria):
        criteria = QueryCriteria.model_validate(dict(criteria))

    filtered = list(records)
    if criteria.folder:
        filtered = [item for item in filtered if _value(item, "folder_id") == criteria.folder]
    if criteria.text:
        needle = criteria.text.lower()
        filtered = [item for item in filtered if _matches_text(item, needle)]
    if criteria.favorite:
        filtered = [item for item in filtered if _value(item, "favorite")]
    if criteria.tag:
        filtered = [item for item in filtered if _has_tag(item, criteria.tag)]

    attribute = _SORT_ATTRIBUTES[criteria.order]
    filtered.sort(key=lambda item: _sort_number(item, attribute), reverse=True)
    return filtered


def collect_tags(records: Sequence[RecordLike]) -> list[str]:
    """Return the sorted distinct tags used across *records*."""
    tags: set[str] = set()
    for record in records:
        values = _value(record, "tags")
        if isinstance(values, (list, tuple)):
            tags.update(tag for tag in values if isinstance(tag, str))
    return sorted(tags)


__all__ = ["QueryCriteria", "SortOrder", "collect_tags", "filter_and_sort", "resolve_order"]
