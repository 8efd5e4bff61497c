# This file implements the single-column sort stage of the table pipeline.
# It exists so header clicks map to one deterministic ordering for every column.
# Text columns compare lower-cased by code point and age compares numerically.
# Ties keep input order through an explicit index tie-break, independent of sort primitive stability.

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from functools import cmp_to_key

from user_directory.table_engine.records import Record


class SortKey(str, Enum):
    FIRST_NAME = "name.first"
    GENDER = "gender"
    AGE = "dob.age"
    EMAIL = "email"


class SortDirection(str, Enum):
    ASCENDING = "asc"
    DESCENDING = "desc"

    def toggled(self) -> SortDirection:
        if self is SortDirection.ASCENDING:
            return SortDirection.DESCENDING
        return SortDirection.ASCENDING


@dataclass(frozen=True)
class SortConfig:
    key: SortKey
    direction: SortDirection

    @property
    def as_text(self) -> str:
        return f"{self.key.value}:{self.direction.value}"

    def select(self, key: SortKey) -> SortConfig:
        """Return the config after a header click on `key`."""

        key = SortKey(key)
        if key is self.key:
            return SortConfig(key=key, direction=self.direction.toggled())
        return SortConfig(key=key, direction=SortDirection.ASCENDING)


DEFAULT_SORT = SortConfig(key=SortKey.FIRST_NAME, direction=SortDirection.ASCENDING)


def sort_value(record: Record, key: SortKey) -> str | int:
    if key is SortKey.FIRST_NAME:
        return record.name.first.lower()
    if key is SortKey.GENDER:
        return record.gender.lower()
    if key is SortKey.AGE:
        return record.dob.age
    if key is SortKey.EMAIL:
        return record.email.lower()
    raise ValueError(f"Unsupported sort key: {key!r}")


def sort_records(
    records: Sequence[Record],
    key: SortKey,
    direction: SortDirection | None,
) -> Sequence[Record]:
    """Return a new, stably ordered sequence. The input is never mutated."""

    if direction is None:
        return records

    key = SortKey(key)
    decorated = [(sort_value(record, key), index, record) for index, record in enumerate(records)]
    sign = 1 if SortDirection(direction) is SortDirection.ASCENDING else -1

    def compare(
        left: tuple[str | int, int, Record], right: tuple[str | int, int, Record]
    ) -> int:
        order = (left[0] > right[0]) - (left[0] < right[0])
        if order:
            return sign * order
        return left[1] - right[1]

    return tuple(item[2] for item in sorted(decorated, key=cmp_to_key(compare)))


def sort_indicator(config: SortConfig, column: SortKey) -> str:
    """Header glyph for `column` under the active sort."""

    if config.key is not column:
        return "↕"
    return "↑" if config.direction is SortDirection.ASCENDING else "↓"


def aria_sort(config: SortConfig, column: SortKey) -> str:
    if config.key is not column:
        return "none"
    return "ascending" if config.direction is SortDirection.ASCENDING else "descending"
