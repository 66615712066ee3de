"""Helpers for date normalization."""

from datetime import date, datetime


def coerce_date(value) -> date:
    """Normalize raw date values to a calendar date.

    Args:
        value: A date, datetime, or ISO 8601 string (date or timestamp).

    Returns:
        date: Calendar date of the value.

    Raises:
        ValueError: If the value is empty or not a recognizable date.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"Invalid date value: {value!r}")
    raw = value.strip()
    if raw.endswith("Z"):
        raw = raw[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(raw).date()
    except ValueError:
        return date.fromisoformat(raw[:10])


__all__ = ["coerce_date"]
