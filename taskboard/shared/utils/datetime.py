"""
UTC datetime utilities for consistent timezone handling.

All datetime values in the system should be timezone-aware UTC.
Use these helpers instead of datetime.now() or datetime.utcnow().
"""

from datetime import UTC, datetime


def utc_now() -> datetime:
    """
    Return the current UTC datetime with timezone info.

    Returns:
        Timezone-aware datetime in UTC
    """
    return datetime.now(UTC)


def to_utc(dt: datetime) -> datetime:
    """Return dt as a UTC-aware datetime (naive values are taken as UTC)."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)


def ensure_utc(dt: datetime | None) -> datetime | None:
    """
    Ensure a datetime is UTC-aware.

    - If None, returns None
    - If naive, assumes UTC and attaches timezone
    - If aware, converts to UTC

    SQLite drops tzinfo on the way in and out, so repositories call this on
    every datetime they read back.

    Args:
        dt: A datetime that may be naive or aware

    Returns:
        UTC-aware datetime or None
    """
    if dt is None:
        return None
    return to_utc(dt)


def parse_iso_datetime(value: str) -> datetime:
    """
    Parse an ISO 8601 date-time string into a UTC-aware datetime.

    A time component separated by 'T' is required; bare dates such as
    '2025-03-01' are rejected. Accepts a trailing 'Z' as well as explicit
    offsets; naive values are taken as UTC.

    Args:
        value: ISO 8601 string (e.g. '2025-03-01T12:00:00Z')

    Returns:
        UTC-aware datetime

    Raises:
        ValueError: If the string is not a valid ISO 8601 date-time
    """
    text = value.strip()
    if not text:
        raise ValueError("empty date-time string")
    if "T" not in text.upper():
        raise ValueError(f"date-time must include a time component: {value!r}")
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    return to_utc(datetime.fromisoformat(text))


def isoformat_utc(dt: datetime) -> str:
    """
    Format a datetime as ISO 8601 in UTC with a 'Z' suffix.

    Matches how the REST layer (pydantic) renders UTC datetimes, so push
    payloads and REST responses carry identical strings.
    """
    return to_utc(dt).isoformat().replace("+00:00", "Z")
