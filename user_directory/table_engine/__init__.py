# This package is the client-side tabular engine behind the user directory.
# It exists so filtering, sorting, pagination, and view-state rules can be tested without any UI.
# Stages are pure functions; the controller and fetch coordinator are the only stateful pieces.

from user_directory.table_engine.fetch import FetchCoordinator, FetchState, FetchStatus
from user_directory.table_engine.filtering import filter_records
from user_directory.table_engine.pagination import PageSummary, paginate
from user_directory.table_engine.records import Record, parse_records
from user_directory.table_engine.sorting import SortConfig, SortDirection, SortKey, sort_records
from user_directory.table_engine.view_state import TableView, ViewState, ViewStateController

__all__ = [
    "FetchCoordinator",
    "FetchState",
    "FetchStatus",
    "PageSummary",
    "Record",
    "SortConfig",
    "SortDirection",
    "SortKey",
    "TableView",
    "ViewState",
    "ViewStateController",
    "filter_records",
    "paginate",
    "parse_records",
    "sort_records",
]
