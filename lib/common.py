"""
Common utility functions.
"""
import traceback
from datetime import datetime, timezone
from typing import Any


def ok(op: str, data: dict[str, Any] | None = None) -> dict[str, Any]:
    """Create a successful response."""
    return {"ok": True, "op": op, "data": data or {}}


def iso_timestamp(now: datetime) -> str:
    """
    Format an aware datetime as UTC ISO-8601 with milliseconds.

    >>> iso_timestamp(datetime(2025, 1, 1, tzinfo=timezone.utc))
    '2025-01-01T00:00:00.000Z'
    """
    utc = now.astimezone(timezone.utc)
    return utc.strftime("%Y-%m-%dT%H:%M:%S.") + f"{utc.microsecond // 1000:03d}Z"


def format_stack(exc: BaseException) -> str | None:
    """
    Render the traceback of an exception.
    Returns None when the exception was never raised (no traceback).
    """
    if exc.__traceback__ is None:
        return None
    return "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))


def stringify_bool(value: bool) -> str:
    """Serialize a boolean the way the API expects ("true"/"false")."""
    return "true" if value else "false"
