# This file implements the free-text filter stage of the table pipeline.
# A record is kept when the query appears in any of its derived text fields.
# Matching is case-sensitive and does no whitespace or diacritic normalization.
# An empty query returns the input object itself so callers can memoize on identity.

from __future__ import annotations

from collections.abc import Sequence

from user_directory.table_engine.records import Record

# "female" contains "male"; an exact "male" query only matches the exact gender.
EXACT_GENDER_QUERY = "male"


def record_matches(record: Record, query: str) -> bool:
    if query == EXACT_GENDER_QUERY:
        gender_match = record.gender == EXACT_GENDER_QUERY
    else:
        gender_match = query in record.gender

    return (
        query in record.name.first
        or query in record.name.last
        or query in record.name.full
        or gender_match
        or query in record.email
        or query in str(record.dob.age)
    )


def filter_records(records: Sequence[Record], query: str) -> Sequence[Record]:
    """Return the records matching `query`, or `records` unchanged for a blank query."""

    search = query.strip()
    if not search:
        return records
    return tuple(record for record in records if record_matches(record, search))
