# This file renders the pagination footer: range summary, page label, and previous/next controls.
# Buttons are disabled at the edges and forward page intents to the controller.

from __future__ import annotations

import streamlit as st

from user_directory.dashboard.formatting import format_page_label
from user_directory.dashboard.ui_text import NEXT_LABEL, PREVIOUS_LABEL
from user_directory.table_engine.view_state import ViewStateController


def render_pagination(controller: ViewStateController) -> bool:
    summary = controller.view().summary
    info_column, previous_column, next_column = st.columns([4, 1, 1])
    info_column.caption(f"{summary.describe()} | {format_page_label(summary)}")

    if previous_column.button(
        PREVIOUS_LABEL, key="page_previous", disabled=not summary.has_previous
    ):
        controller.previous_page()
        return True
    if next_column.button(NEXT_LABEL, key="page_next", disabled=not summary.has_next):
        controller.next_page()
        return True
    return False
