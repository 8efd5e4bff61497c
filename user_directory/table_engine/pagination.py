# This file handles page slicing and page-count arithmetic for the directory table.
# It exists so the controller and the presentation agree on one set of paging rules.
# Out-of-range pages never raise; they yield a short or empty slice.
# The summary object carries everything the pagination footer needs to render.

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class PaginationSpec:
    page: int
    page_size: int

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size


def compute_total_pages(*, total_count: int, page_size: int) -> int:
    """Compute deterministic total page count."""

    if total_count <= 0:
        return 0
    return ((total_count - 1) // page_size) + 1


def clamp_page(page: int, *, total_pages: int) -> int:
    """Clamp into [1, total_pages]; zero pages still allow page 1."""

    return max(1, min(page, max(total_pages, 1)))


def paginate(items: Sequence[T], page: int, page_size: int) -> Sequence[T]:
    if page_size < 1:
        raise ValueError("page_size must be >= 1")
    spec = PaginationSpec(page=max(page, 1), page_size=page_size)
    return items[spec.offset : spec.offset + spec.page_size]


@dataclass(frozen=True)
class PageSummary:
    page: int
    page_size: int
    total_count: int
    total_pages: int

    @classmethod
    def build(cls, *, page: int, page_size: int, total_count: int) -> PageSummary:
        total_pages = compute_total_pages(total_count=total_count, page_size=page_size)
        return cls(
            page=page,
            page_size=page_size,
            total_count=total_count,
            total_pages=max(total_pages, 1),
        )

    @property
    def first_index(self) -> int:
        if self.total_count == 0:
            return 0
        return (self.page - 1) * self.page_size + 1

    @property
    def last_index(self) -> int:
        return min(self.page * self.page_size, self.total_count)

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    def describe(self) -> str:
        return f"Showing {self.first_index} to {self.last_index} of {self.total_count} records"
