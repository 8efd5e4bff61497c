# This file renders the sortable user table.
# Header buttons forward sort intents to the controller; rows come from the controller's current page.
# The helper only handles presentation and never mutates view state directly.

from __future__ import annotations

import streamlit as st

from user_directory.dashboard.formatting import (
    COLUMN_LABELS,
    format_header,
    format_header_help,
    records_to_frame,
)
from user_directory.dashboard.ui_text import EMPTY_RESULTS
from user_directory.table_engine.view_state import ViewStateController


def render_sort_headers(controller: ViewStateController) -> bool:
    """Render one button per column; returns True when a sort intent was forwarded."""

    columns = st.columns(len(COLUMN_LABELS))
    clicked = False
    for column, key in zip(columns, COLUMN_LABELS, strict=True):
        label = format_header(key, controller.state.sort)
        if column.button(
            label,
            key=f"sort_{key.value}",
            help=format_header_help(key, controller.state.sort),
            use_container_width=True,
        ):
            controller.set_sort(key)
            clicked = True
    return clicked


def render_user_table(controller: ViewStateController, *, height: int = 240) -> None:
    paged = controller.view().paged
    if not paged:
        st.info(EMPTY_RESULTS)
        return
    st.dataframe(records_to_frame(paged), use_container_width=True, hide_index=True, height=height)
