# This file defines the immutable user record shown by the directory table.
# It exists so payload validation happens once, at the boundary, and stages can trust field types.
# Models are frozen so records compare and hash by value.
# Fields the table never shows (title, date of birth) are kept when present but are optional.

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError

from user_directory.table_engine.errors import MalformedPayload


class Name(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    first: str
    last: str
    title: str = ""

    @property
    def full(self) -> str:
        return f"{self.first} {self.last}"


class DateOfBirth(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    age: int
    date: str = ""


class Record(BaseModel):
    """One user entry in a fetched batch. `email` is the display key."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    gender: str
    name: Name
    email: str
    dob: DateOfBirth


def parse_records(payload: Any) -> tuple[Record, ...]:
    """Validate a random-user style payload and return its records in source order."""

    if not isinstance(payload, Mapping):
        raise MalformedPayload("Unexpected payload shape: expected a JSON object")

    results = payload.get("results")
    if not isinstance(results, list):
        raise MalformedPayload("Unexpected payload shape: missing 'results' list")

    try:
        return tuple(Record.model_validate(item) for item in results)
    except ValidationError as exc:
        raise MalformedPayload(f"Payload contains invalid user records: {exc}") from exc
