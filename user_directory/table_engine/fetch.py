# This file coordinates the one-shot load of the user record set.
# It exists so loading, ready, and failed states come from one owner and superseded attempts stay silent.
# Each attempt carries its own cancellation token; results are applied only while that token is live.
# Cancellation on detach is not a failure and never touches the published state.

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass
from enum import Enum

from user_directory.table_engine.errors import FetchCancelledError, RecordSourceError
from user_directory.table_engine.records import Record

LOGGER = logging.getLogger("user_directory.fetch")


class FetchStatus(str, Enum):
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


@dataclass(frozen=True)
class FetchState:
    status: FetchStatus
    records: tuple[Record, ...] = ()
    error_message: str = ""

    @classmethod
    def loading(cls) -> FetchState:
        return cls(status=FetchStatus.LOADING)

    @classmethod
    def ready(cls, records: Sequence[Record]) -> FetchState:
        return cls(status=FetchStatus.READY, records=tuple(records))

    @classmethod
    def failed(cls, message: str) -> FetchState:
        return cls(status=FetchStatus.FAILED, error_message=message or "An error occurred")


class CancellationToken:
    def __init__(self) -> None:
        self._cancelled = False

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        self._cancelled = True

    def raise_if_cancelled(self) -> None:
        if self._cancelled:
            raise FetchCancelledError("fetch attempt was cancelled")


RecordLoader = Callable[[CancellationToken], Awaitable[Sequence[Record]]]
StateCallback = Callable[[FetchState], None]


def threaded_loader(fetch: Callable[[], Sequence[Record]]) -> RecordLoader:
    """Run a blocking fetch in a worker thread, honouring the token on both sides."""

    async def load(token: CancellationToken) -> Sequence[Record]:
        token.raise_if_cancelled()
        records = await asyncio.to_thread(fetch)
        token.raise_if_cancelled()
        return records

    return load


class FetchCoordinator:
    """Owns FetchState for one mounted consumer."""

    def __init__(self, loader: RecordLoader, *, on_change: StateCallback | None = None) -> None:
        self._loader = loader
        self._on_change = on_change
        self._state = FetchState.loading()
        self._token: CancellationToken | None = None
        self._task: asyncio.Task[None] | None = None

    @property
    def state(self) -> FetchState:
        return self._state

    def start(self) -> asyncio.Task[None]:
        """Begin a new attempt, invalidating any earlier one. Requires a running loop."""

        if self._invalidate():
            LOGGER.info("fetch superseded by a new attempt")
        token = CancellationToken()
        self._token = token
        self._apply(token, FetchState.loading())
        LOGGER.info("fetch started")
        self._task = asyncio.get_running_loop().create_task(self._run(token))
        return self._task

    async def load(self) -> FetchState:
        await self.start()
        return self._state

    def detach(self) -> None:
        """Invalidate the current attempt synchronously; its result will be dropped."""

        if self._invalidate():
            LOGGER.info("fetch detached")

    def _invalidate(self) -> bool:
        """Invalidate the current token and cancel its task; returns whether it was still running."""

        was_live = self._task is not None and not self._task.done()
        if self._token is not None:
            self._token.cancel()
        if self._task is not None and was_live:
            self._task.cancel()
        self._task = None
        return was_live

    async def _run(self, token: CancellationToken) -> None:
        try:
            records = await self._loader(token)
        except FetchCancelledError:
            LOGGER.info("fetch cancelled before completion")
            return
        except RecordSourceError as exc:
            if token.cancelled:
                return
            LOGGER.warning("fetch failed: %s", exc)
            self._apply(token, FetchState.failed(str(exc)))
            return

        if token.cancelled:
            LOGGER.info("dropping result of superseded fetch")
            return
        LOGGER.info("fetch ready records=%d", len(records))
        self._apply(token, FetchState.ready(records))

    def _apply(self, token: CancellationToken, state: FetchState) -> None:
        if token.cancelled or token is not self._token:
            return
        self._state = state
        if self._on_change is not None:
            self._on_change(state)
