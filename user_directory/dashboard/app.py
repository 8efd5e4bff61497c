# This file is the Streamlit entrypoint for the user directory.
# It loads the user batch once per session, then drives the table through the view-state controller.
# Streamlit reruns the script on every interaction, so the controller lives in session state.
# st.text_input only reruns on submit, so queries are committed immediately rather than debounced.

from __future__ import annotations

import asyncio
from collections.abc import Sequence

import streamlit as st

from user_directory.common.logging import configure_logging
from user_directory.dashboard.api_client import RandomUserClient
from user_directory.dashboard.components.pagination import render_pagination
from user_directory.dashboard.components.tables import render_sort_headers, render_user_table
from user_directory.dashboard.dashboard_config import DashboardConfig, load_dashboard_config
from user_directory.dashboard.formatting import format_error
from user_directory.dashboard.ui_text import (
    APP_SUBTITLE,
    APP_TITLE,
    LOADING_MESSAGE,
    SEARCH_LABEL,
    SEARCH_PLACEHOLDER,
)
from user_directory.table_engine.fetch import (
    FetchCoordinator,
    FetchState,
    FetchStatus,
    threaded_loader,
)
from user_directory.table_engine.records import Record
from user_directory.table_engine.view_state import ViewStateController


@st.cache_resource
def get_client() -> RandomUserClient:
    config = load_dashboard_config()
    return RandomUserClient(
        base_url=config.source_url,
        results=config.source_results,
        timeout_seconds=config.request_timeout_seconds,
    )


def load_users() -> FetchState:
    coordinator = FetchCoordinator(threaded_loader(get_client().fetch_users))
    return asyncio.run(coordinator.load())


def build_controller(config: DashboardConfig, records: Sequence[Record]) -> ViewStateController:
    # No event loop survives between Streamlit reruns, so queries commit on submit.
    return ViewStateController(records, page_size=config.page_size, debounce_seconds=0)


def get_controller(config: DashboardConfig, records: Sequence[Record]) -> ViewStateController:
    controller = st.session_state.get("directory_controller")
    if controller is None:
        controller = build_controller(config, records)
        st.session_state["directory_controller"] = controller
    return controller


def main() -> None:
    configure_logging()
    st.set_page_config(page_title=APP_TITLE, layout="centered")
    config = load_dashboard_config()

    st.title(APP_TITLE)
    st.caption(APP_SUBTITLE)

    if "directory_fetch_state" not in st.session_state:
        with st.spinner(LOADING_MESSAGE):
            st.session_state["directory_fetch_state"] = load_users()
    fetch_state: FetchState = st.session_state["directory_fetch_state"]

    if fetch_state.status is FetchStatus.FAILED:
        st.error(format_error(fetch_state.error_message))
        return
    if fetch_state.status is FetchStatus.LOADING:
        st.info(LOADING_MESSAGE)
        return

    controller = get_controller(config, fetch_state.records)

    query = st.text_input(
        SEARCH_LABEL,
        value=controller.state.query,
        placeholder=SEARCH_PLACEHOLDER,
        label_visibility="collapsed",
    )
    if query != controller.state.query:
        controller.set_query(query)
    status_line = controller.result_status()
    if status_line:
        st.caption(status_line)

    if render_sort_headers(controller):
        st.rerun()
    render_user_table(controller)
    if render_pagination(controller):
        st.rerun()


if __name__ == "__main__":
    main()
