# This test file validates the single-column sort stage.
# The cases cover key derivation, both directions, stable ties, and header indicators.

from __future__ import annotations

import pytest

from tests.table_engine.support import end_to_end_records, make_record, sample_records
from user_directory.table_engine.sorting import (
    DEFAULT_SORT,
    SortConfig,
    SortDirection,
    SortKey,
    aria_sort,
    sort_indicator,
    sort_records,
    sort_value,
)


def test_age_ascending_orders_numerically() -> None:
    result = sort_records(end_to_end_records(), SortKey.AGE, SortDirection.ASCENDING)

    assert [record.name.first for record in result] == ["Bo", "Amy"]


def test_text_keys_compare_lower_cased() -> None:
    records = [make_record("carl"), make_record("Bob"), make_record("alice")]

    result = sort_records(records, SortKey.FIRST_NAME, SortDirection.ASCENDING)

    assert [record.name.first for record in result] == ["alice", "Bob", "carl"]
    assert sort_value(records[1], SortKey.FIRST_NAME) == "bob"


def test_age_does_not_compare_as_text() -> None:
    records = [make_record("A", age=9), make_record("B", age=10), make_record("C", age=100)]

    result = sort_records(records, SortKey.AGE, SortDirection.DESCENDING)

    assert [record.dob.age for record in result] == [100, 10, 9]


@pytest.mark.parametrize("direction", [SortDirection.ASCENDING, SortDirection.DESCENDING])
def test_equal_keys_keep_input_order(direction: SortDirection) -> None:
    records = sample_records(8)

    result = sort_records(records, SortKey.GENDER, direction)

    females = [record for record in result if record.gender == "female"]
    males = [record for record in result if record.gender == "male"]
    assert females == [record for record in records if record.gender == "female"]
    assert males == [record for record in records if record.gender == "male"]


@pytest.mark.parametrize("key", list(SortKey))
def test_adjacent_pairs_respect_direction(key: SortKey) -> None:
    records = sample_records(7)[::-1] + end_to_end_records()

    ascending = sort_records(records, key, SortDirection.ASCENDING)
    descending = sort_records(records, key, SortDirection.DESCENDING)

    for left, right in zip(ascending, ascending[1:]):
        assert sort_value(left, key) <= sort_value(right, key)
    for left, right in zip(descending, descending[1:]):
        assert sort_value(left, key) >= sort_value(right, key)


def test_sort_never_mutates_input() -> None:
    records = end_to_end_records()
    before = list(records)

    sort_records(records, SortKey.AGE, SortDirection.ASCENDING)

    assert records == before


def test_missing_direction_returns_input() -> None:
    records = end_to_end_records()

    assert sort_records(records, SortKey.AGE, None) is records


def test_sort_accepts_raw_key_values() -> None:
    result = sort_records(end_to_end_records(), "dob.age", SortDirection.ASCENDING)  # type: ignore[arg-type]

    assert [record.name.first for record in result] == ["Bo", "Amy"]


def test_select_toggles_same_key_and_resets_new_key() -> None:
    toggled = DEFAULT_SORT.select(SortKey.FIRST_NAME)
    switched = toggled.select(SortKey.EMAIL)

    assert toggled == SortConfig(SortKey.FIRST_NAME, SortDirection.DESCENDING)
    assert toggled.select(SortKey.FIRST_NAME) == DEFAULT_SORT
    assert switched == SortConfig(SortKey.EMAIL, SortDirection.ASCENDING)
    assert switched.as_text == "email:asc"


def test_header_indicators() -> None:
    descending = SortConfig(SortKey.AGE, SortDirection.DESCENDING)

    assert sort_indicator(DEFAULT_SORT, SortKey.FIRST_NAME) == "↑"
    assert sort_indicator(DEFAULT_SORT, SortKey.AGE) == "↕"
    assert sort_indicator(descending, SortKey.AGE) == "↓"
    assert aria_sort(descending, SortKey.AGE) == "descending"
    assert aria_sort(descending, SortKey.EMAIL) == "none"
