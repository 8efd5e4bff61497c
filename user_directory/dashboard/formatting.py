# This file collects small formatting helpers for the directory table.
# It exists so rows and the pagination footer render consistently.
# The functions return plain strings and DataFrames that Streamlit can display directly.

from __future__ import annotations

from collections.abc import Sequence

import pandas as pd

from user_directory.table_engine.pagination import PageSummary
from user_directory.table_engine.records import Record
from user_directory.table_engine.sorting import SortConfig, SortKey, aria_sort, sort_indicator

COLUMN_LABELS: dict[SortKey, str] = {
    SortKey.FIRST_NAME: "First Name",
    SortKey.GENDER: "Gender",
    SortKey.AGE: "Age",
    SortKey.EMAIL: "Email",
}


def format_error(message: str) -> str:
    return f"Error: {message}"


def format_page_label(summary: PageSummary) -> str:
    return f"Page {summary.page} of {summary.total_pages}"


def format_header(column: SortKey, sort: SortConfig) -> str:
    return f"{COLUMN_LABELS[column]} {sort_indicator(sort, column)}"


def format_header_help(column: SortKey, sort: SortConfig) -> str:
    state = aria_sort(sort, column)
    if state == "none":
        return f"Sort by {COLUMN_LABELS[column]}"
    return f"Sorted {state}; click to reverse"


def records_to_frame(records: Sequence[Record]) -> pd.DataFrame:
    rows = [
        {
            COLUMN_LABELS[SortKey.FIRST_NAME]: record.name.first,
            COLUMN_LABELS[SortKey.GENDER]: record.gender,
            COLUMN_LABELS[SortKey.AGE]: record.dob.age,
            COLUMN_LABELS[SortKey.EMAIL]: record.email,
        }
        for record in records
    ]
    return pd.DataFrame(rows, columns=list(COLUMN_LABELS.values()))
