# This file owns the mutable view state of the directory table and every rule coupling its fields.
# It exists so search, sort, and page changes are applied in one place with consistent page resets.
# Each transition swaps in a whole new ViewState value, so observers never see a half-applied change.
# Derived rows are recomputed from the current snapshot and cached on (records, state).

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, replace

from user_directory.table_engine.debounce import CancellableTimer, Scheduler
from user_directory.table_engine.filtering import filter_records
from user_directory.table_engine.pagination import (
    PageSummary,
    clamp_page,
    compute_total_pages,
    paginate,
)
from user_directory.table_engine.records import Record
from user_directory.table_engine.sorting import DEFAULT_SORT, SortConfig, SortKey, sort_records

LOGGER = logging.getLogger("user_directory.view_state")

DEFAULT_PAGE_SIZE = 5
DEFAULT_DEBOUNCE_SECONDS = 0.3

StateListener = Callable[["ViewState"], None]


@dataclass(frozen=True)
class ViewState:
    query: str = ""
    debounced_query: str = ""
    sort: SortConfig = DEFAULT_SORT
    page: int = 1


@dataclass(frozen=True)
class TableView:
    filtered: Sequence[Record]
    sorted: Sequence[Record]
    paged: Sequence[Record]
    summary: PageSummary

    @property
    def total_pages(self) -> int:
        """Raw page count; 0 when nothing matches."""

        return compute_total_pages(
            total_count=self.summary.total_count, page_size=self.summary.page_size
        )


class ViewStateController:
    """Single writer of ViewState for one mounted table.

    With the default scheduler and a positive debounce, construct it inside a running event loop;
    otherwise construction raises RuntimeError before any state exists.
    """

    def __init__(
        self,
        records: Sequence[Record] = (),
        *,
        page_size: int = DEFAULT_PAGE_SIZE,
        debounce_seconds: float = DEFAULT_DEBOUNCE_SECONDS,
        schedule: Scheduler | None = None,
    ) -> None:
        if page_size < 1:
            raise ValueError("page_size must be >= 1")
        self.page_size = page_size
        self._records: Sequence[Record] = records
        self._state = ViewState()
        self._timer = CancellableTimer(delay_seconds=debounce_seconds, schedule=schedule)
        self._listeners: list[StateListener] = []
        self._cache: tuple[Sequence[Record], ViewState, TableView] | None = None

    @property
    def state(self) -> ViewState:
        return self._state

    @property
    def records(self) -> Sequence[Record]:
        return self._records

    def add_listener(self, listener: StateListener) -> None:
        self._listeners.append(listener)

    def set_records(self, records: Sequence[Record]) -> None:
        self._records = records
        self._cache = None

    def set_query(self, query: str) -> None:
        """Record raw input and restart the quiet-period timer."""

        self._transition(replace(self._state, query=query))
        self._timer.schedule(self._commit_query)

    def flush_query(self) -> None:
        """Commit the pending query now instead of waiting for the quiet period."""

        self._timer.cancel()
        self._commit_query()

    def set_sort(self, key: SortKey) -> None:
        self._transition(replace(self._state, sort=self._state.sort.select(key), page=1))

    def set_page(self, page: int) -> None:
        total_pages = compute_total_pages(
            total_count=len(self.view().sorted), page_size=self.page_size
        )
        self._transition(replace(self._state, page=clamp_page(page, total_pages=total_pages)))

    def next_page(self) -> None:
        self.set_page(self._state.page + 1)

    def previous_page(self) -> None:
        self.set_page(self._state.page - 1)

    def close(self) -> None:
        """Tear down on unmount; a pending query commit will never fire."""

        self._timer.close()
        self._listeners.clear()

    def view(self) -> TableView:
        state = self._state
        if self._cache is not None:
            cached_records, cached_state, cached_view = self._cache
            if cached_records is self._records and cached_state == state:
                return cached_view

        filtered = filter_records(self._records, state.debounced_query)
        ordered = sort_records(filtered, state.sort.key, state.sort.direction)
        paged = paginate(ordered, state.page, self.page_size)
        view = TableView(
            filtered=filtered,
            sorted=ordered,
            paged=paged,
            summary=PageSummary.build(
                page=state.page, page_size=self.page_size, total_count=len(ordered)
            ),
        )
        self._cache = (self._records, state, view)
        return view

    def result_status(self) -> str:
        """Live-region text announcing how many rows match the committed query."""

        if not self._state.debounced_query:
            return ""
        count = len(self.view().sorted)
        return f"{count} results found for {self._state.debounced_query}"

    def _commit_query(self) -> None:
        if self._timer.closed:
            return
        LOGGER.debug("committing query=%r", self._state.query)
        self._transition(replace(self._state, debounced_query=self._state.query, page=1))

    def _transition(self, new_state: ViewState) -> None:
        if new_state == self._state:
            return
        self._state = new_state
        for listener in list(self._listeners):
            listener(new_state)
