"""Filter and sort pipeline tests.

Updates:
  v0.2.0 - 2026-10-14 - Cover raw mapping inputs and tag collection.
  v0.1.0 - 2026-10-12 - Cover filter composition, sort orders, and non-mutation.
"""

from __future__ import annotations

import copy

import pytest

from core.query import QueryCriteria, SortOrder, collect_tags, filter_and_sort
from models.prompt_record import PromptRecord


def _record(
    record_id: str,
    *,
    text: str = "",
    folder: str | None = "f1",
    tags: list[str] | None = None,
    favorite: bool = False,
    created: int = 0,
    updated: int = 0,
    usage: int = 0,
) -> PromptRecord:
    return PromptRecord(
        id=record_id,
        text=text,
        tags=tags or [],
        favorite=favorite,
        folder_id=folder,
        created_at=created,
        updated_at=updated,
        usage_count=usage,
    )


def _ordered_fixture() -> list[PromptRecord]:
    return [
        _record("a", created=3, updated=1, usage=2),
        _record("b", created=1, updated=3, usage=3),
        _record("c", created=2, updated=2, usage=1),
    ]


def test_folder_and_favorite_filters_compose() -> None:
    records = [
        _record("1", folder="f1", tags=["a"], favorite=True, text="Hello"),
        _record("2", folder="f1", tags=["b"], favorite=False, text="World"),
    ]

    result = filter_and_sort(records, {"folder": "f1", "favorite": True})

    assert result == [records[0]]


def test_text_filter_is_case_insensitive_substring() -> None:
    records = [
        _record("1", text="Write a HAIKU"),
        _record("2", text="Summarise"),
        _record("3", text=""),
    ]

    result = filter_and_sort(records, QueryCriteria(text="haiku"))

    assert [record.id for record in result] == ["1"]


def test_tag_filter_uses_exact_match() -> None:
    records = [
        _record("1", tags=["Code"]),
        _record("2", tags=["code", "review"]),
    ]

    result = filter_and_sort(records, {"tag": "code"})

    assert [record.id for record in result] == ["2"]


def test_empty_criteria_values_do_not_filter() -> None:
    records = [_record("1", folder="f1"), _record("2", folder=None)]

    result = filter_and_sort(records, {"folder": "", "text": "", "tag": None, "favorite": False})

    assert {record.id for record in result} == {"1", "2"}


@pytest.mark.parametrize(
    ("order", "expected"),
    [
        (None, ["a", "c", "b"]),
        ("createdAt", ["a", "c", "b"]),
        ("usage", ["b", "a", "c"]),
        ("updatedAt", ["b", "c", "a"]),
        ("updated_at", ["b", "c", "a"]),
        ("bogus", ["a", "c", "b"]),
    ],
)
def test_sort_orders(order: str | None, expected: list[str]) -> None:
    result = filter_and_sort(_ordered_fixture(), {"order": order})

    assert [record.id for record in result] == expected


def test_default_and_usage_orders_differ() -> None:
    records = _ordered_fixture()

    default = [record.id for record in filter_and_sort(records)]
    by_usage = [record.id for record in filter_and_sort(records, {"order": "usage"})]

    assert default != by_usage


def test_sort_is_stable_for_equal_keys() -> None:
    records = [_record(str(index), created=5) for index in range(6)]

    result = filter_and_sort(records)

    assert [record.id for record in result] == [str(index) for index in range(6)]


def test_input_sequence_and_elements_are_not_mutated() -> None:
    records = _ordered_fixture()
    identities = [id(record) for record in records]
    values = copy.deepcopy(records)

    result = filter_and_sort(records, {"order": "usage", "folder": "f1"})

    assert result is not records
    assert [id(record) for record in records] == identities
    assert records == values


def test_raw_mappings_with_missing_keys_sort_as_zero() -> None:
    records = [
        {"id": "x", "text": "one", "usageCount": "lots"},
        {"id": "y", "text": "two", "usageCount": 4},
        {"id": "z", "text": None},
    ]

    result = filter_and_sort(records, {"order": "usage", "text": "o"})

    assert [item["id"] for item in result] == ["y", "x"]


def test_criteria_normalise_order_and_favorite() -> None:
    criteria = QueryCriteria.model_validate({"order": "usage", "favorite": 1, "extra": "ignored"})

    assert criteria.order is SortOrder.USAGE
    assert criteria.favorite is True


def test_collect_tags_returns_sorted_distinct_values() -> None:
    records = [
        _record("1", tags=["b", "a"]),
        _record("2", tags=["a", "c"]),
        {"id": "3", "tags": "not-a-list"},
    ]

    assert collect_tags(records) == ["a", "b", "c"]
