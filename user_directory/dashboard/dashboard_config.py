# This file defines runtime configuration for the user directory dashboard.
# It exists so the record source and page size can be tuned through environment variables.
# Keeping these values centralized avoids hard-coded behavior scattered across the app.

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_SOURCE_URL = "https://randomuser.me/api/"


@dataclass(frozen=True)
class DashboardConfig:
    source_url: str
    source_results: int
    request_timeout_seconds: int
    page_size: int


def _int_env(name: str, default: int, *, minimum: int) -> int:
    raw_value = os.getenv(name, str(default))
    try:
        value = int(raw_value)
    except ValueError as exc:
        raise RuntimeError(f"{name} must be an integer, got {raw_value!r}") from exc
    if value < minimum:
        raise RuntimeError(f"{name} must be >= {minimum}, got {value}")
    return value


def load_dashboard_config(*, load_env: bool = True) -> DashboardConfig:
    if load_env:
        load_dotenv()

    return DashboardConfig(
        source_url=os.getenv("USER_SOURCE_URL") or DEFAULT_SOURCE_URL,
        source_results=_int_env("USER_SOURCE_RESULTS", 40, minimum=1),
        request_timeout_seconds=_int_env("USER_SOURCE_TIMEOUT_SECONDS", 8, minimum=1),
        page_size=_int_env("DASHBOARD_PAGE_SIZE", 5, minimum=1),
    )
