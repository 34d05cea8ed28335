"""Timestamp parsing and human-relative durations."""

from __future__ import annotations

from datetime import datetime, timezone

_MINUTE = 60
_HOUR = 60 * _MINUTE
_DAY = 24 * _HOUR
_WEEK = 7 * _DAY
_MONTH = 30 * _DAY
_YEAR = 365 * _DAY


def parse_rfc3339(raw: str) -> datetime | None:
    """Parse an RFC 3339 timestamp; returns None for anything else.

    Naive timestamps are rejected since RFC 3339 requires an offset.
    """
    if not raw:
        return None
    try:
        dt = datetime.fromisoformat(raw.replace("Z", "+00:00").replace("z", "+00:00"))
    except (ValueError, AttributeError):
        return None
    if dt.tzinfo is None:
        return None
    return dt


def _rough(seconds: float) -> str:
    if seconds < 45:
        return f"{int(seconds)} seconds"
    if seconds < 90:
        return "a minute"
    if seconds < 45 * _MINUTE:
        return f"{round(seconds / _MINUTE)} minutes"
    if seconds < 90 * _MINUTE:
        return "an hour"
    if seconds < 22 * _HOUR:
        return f"{round(seconds / _HOUR)} hours"
    if seconds < 36 * _HOUR:
        return "a day"
    if seconds < 6 * _DAY:
        return f"{round(seconds / _DAY)} days"
    if seconds < 11 * _DAY:
        return "a week"
    if seconds < 26 * _DAY:
        return f"{round(seconds / _WEEK)} weeks"
    if seconds < 45 * _DAY:
        return "a month"
    if seconds < 320 * _DAY:
        return f"{round(seconds / _MONTH)} months"
    if seconds < 548 * _DAY:
        return "a year"
    return f"{round(seconds / _YEAR)} years"


def humanize_since(then: datetime, now: datetime | None = None) -> str:
    """Describe ``then`` relative to ``now``, e.g. "3 hours ago" or "in 2 days"."""
    now = now or datetime.now(timezone.utc)
    delta = (then - now).total_seconds()
    if abs(delta) < 10:
        return "now"
    text = _rough(abs(delta))
    return f"{text} ago" if delta < 0 else f"in {text}"
