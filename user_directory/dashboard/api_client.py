# This file implements the HTTP client that retrieves the user batch shown in the directory.
# It exists so request details and failure classification live in one place instead of the app.
# Transport, status, and payload failures are converted into the record-source error hierarchy.
# The client is blocking; the fetch coordinator runs it in a worker thread.

from __future__ import annotations

from typing import Any

import requests

from user_directory.table_engine.errors import BadResponse, MalformedPayload, NetworkFailure
from user_directory.table_engine.records import Record, parse_records

USER_FIELDS = ("gender", "name", "email", "dob")


class RandomUserClient:
    def __init__(
        self,
        *,
        base_url: str,
        results: int = 40,
        timeout_seconds: int = 8,
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/") + "/"
        self.results = results
        self.timeout_seconds = timeout_seconds
        self.session = session or requests.Session()

    def fetch_users(self) -> tuple[Record, ...]:
        payload = self._request_json(
            params={"inc": ",".join(USER_FIELDS), "results": self.results},
        )
        return parse_records(payload)

    def _request_json(self, params: dict[str, Any] | None) -> Any:
        url = self.base_url
        try:
            response = self.session.get(url, params=params, timeout=self.timeout_seconds)
        except requests.RequestException as exc:
            raise NetworkFailure(f"Failed to fetch data from {url}: {exc}") from exc

        if not 200 <= response.status_code < 300:
            raise BadResponse(
                f"Failed to fetch data: status {response.status_code} from {url}",
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as exc:
            raise MalformedPayload(f"User source did not return valid JSON for {url}") from exc
