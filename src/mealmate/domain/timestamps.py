"""Timestamp helpers.

Timestamps are stored as ISO-8601 UTC strings with millisecond precision and a
trailing ``Z`` so that lexicographic order on the stored strings is the same
as chronological order.
"""

from datetime import UTC, datetime


def format_timestamp(value: datetime) -> str:
    """Render a datetime in the stored timestamp format."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    value = value.astimezone(UTC)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"


def normalize_timestamp(raw: str) -> str:
    """Parse an ISO-8601 string and re-render it in the stored format."""
    return format_timestamp(datetime.fromisoformat(raw.strip()))


def utc_now_iso() -> str:
    """Return the current time in the stored timestamp format."""
    return format_timestamp(datetime.now(tz=UTC))
