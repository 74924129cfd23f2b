from __future__ import annotations

from contextvars import ContextVar
from datetime import UTC, datetime

from pydantic import BaseModel


def utc_now() -> datetime:
    """Return current UTC time."""
    return datetime.now(UTC)


class ParseRecord(BaseModel):
    req_id: str = "-"
    transcript: str | None = None
    timestamp: str | None = None

    # classification
    intent: str | None = None
    extractor: str | None = None
    needs_more_info: bool | None = None

    # Optional short human-readable reason set by the extractor (for logs)
    why: str | None = None

    latency_ms: float | None = None


# Set by the HTTP layer for the duration of a request; the parser fills the
# record when one is present and does nothing otherwise.
parse_record_var: ContextVar[ParseRecord | None] = ContextVar("parse_record", default=None)
