# This test file validates payload parsing into immutable user records.
# It covers extra fields, value equality, and the malformed payload failure mode.

from __future__ import annotations

import pytest
from pydantic import ValidationError

from tests.table_engine.support import user_payload
from user_directory.table_engine.errors import MalformedPayload
from user_directory.table_engine.records import Record, parse_records


def test_parse_records_keeps_source_order_and_ignores_extra_fields() -> None:
    first = user_payload("Amy", age=30)
    first["location"] = {"city": "Springfield"}
    payload = {"results": [first, user_payload("Bo", gender="male", age=25)], "info": {"seed": "x"}}

    records = parse_records(payload)

    assert [record.name.first for record in records] == ["Amy", "Bo"]
    assert records[0].dob.age == 30
    assert records[0].name.full == "Amy Doe"


def test_records_compare_and_hash_by_value() -> None:
    left = Record.model_validate(user_payload("Amy"))
    right = Record.model_validate(user_payload("Amy"))

    assert left == right
    assert len({left, right}) == 1


def test_records_are_frozen() -> None:
    record = Record.model_validate(user_payload("Amy"))

    with pytest.raises(ValidationError):
        record.email = "other@example.com"


@pytest.mark.parametrize(
    "payload",
    [
        ["not", "an", "object"],
        {"info": {}},
        {"results": "nope"},
        {"results": [{"gender": "male", "name": {"first": "Bo", "last": "B"}}]},
    ],
)
def test_parse_records_rejects_malformed_payloads(payload: object) -> None:
    with pytest.raises(MalformedPayload):
        parse_records(payload)
