# This file defines the failure types raised while retrieving the user record set.
# Every retrieval failure derives from RecordSourceError so the fetch coordinator can map it to one state.
# Cancellation is deliberately outside that hierarchy because it is never reported as a failure.

from __future__ import annotations


class RecordSourceError(RuntimeError):
    """Base error for a failed retrieval of the record set."""


class NetworkFailure(RecordSourceError):
    """Raised when the record source cannot be reached."""


class BadResponse(RecordSourceError):
    """Raised when the record source answers with a non-success status."""

    def __init__(self, message: str, *, status_code: int) -> None:
        self.status_code = status_code
        super().__init__(message)


class MalformedPayload(RecordSourceError):
    """Raised when the response body cannot be parsed into records."""


class FetchCancelledError(Exception):
    """Raised when a fetch attempt notices its cancellation token was invalidated."""
