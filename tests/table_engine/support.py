# This file holds record builders and a manual scheduler shared by the table engine tests.
# The scheduler lets debounce tests advance time explicitly instead of sleeping.

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from user_directory.table_engine.records import Record


def user_payload(
    first: str,
    *,
    last: str = "Doe",
    gender: str = "female",
    age: int = 30,
    email: str | None = None,
) -> dict[str, Any]:
    return {
        "gender": gender,
        "name": {"title": "Ms", "first": first, "last": last},
        "email": email or f"{first.lower()}@example.com",
        "dob": {"date": "1995-04-01T00:00:00.000Z", "age": age},
    }


def make_record(first: str, **kwargs: Any) -> Record:
    return Record.model_validate(user_payload(first, **kwargs))


def end_to_end_records() -> list[Record]:
    return [
        make_record("Amy", last="Adams", age=30, gender="female", email="a@x.com"),
        make_record("Bo", last="Brown", age=25, gender="male", email="b@x.com"),
    ]


def sample_records(count: int) -> list[Record]:
    genders = ("female", "male")
    return [
        make_record(
            f"User{index:02d}",
            last=f"Last{index:02d}",
            gender=genders[index % 2],
            age=20 + index,
            email=f"user{index:02d}@example.com",
        )
        for index in range(count)
    ]


class ManualHandle:
    def __init__(
        self, *, due: float, callback: Callable[[], None], honour_cancel: bool
    ) -> None:
        self.due = due
        self.callback = callback
        self.cancelled = False
        self.fired = False
        self._honour_cancel = honour_cancel

    def cancel(self) -> None:
        if self._honour_cancel:
            self.cancelled = True


class ManualScheduler:
    """Scheduler double; `honour_cancel=False` simulates a timer that fires after cancellation."""

    def __init__(self, *, honour_cancel: bool = True) -> None:
        self.now = 0.0
        self.handles: list[ManualHandle] = []
        self._honour_cancel = honour_cancel

    def __call__(self, delay_seconds: float, callback: Callable[[], None]) -> ManualHandle:
        handle = ManualHandle(
            due=self.now + delay_seconds, callback=callback, honour_cancel=self._honour_cancel
        )
        self.handles.append(handle)
        return handle

    def advance(self, seconds: float) -> None:
        self.now += seconds
        for handle in sorted(self.handles, key=lambda item: item.due):
            if handle.cancelled or handle.fired or handle.due > self.now:
                continue
            handle.fired = True
            handle.callback()
