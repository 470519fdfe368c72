"""
Date Utilities
==============

UTC date helpers used to stamp collected rows.
"""

from datetime import UTC, datetime


def utc_now() -> datetime:
    """
    Get current time in UTC.

    Returns:
        Current UTC datetime
    """
    return datetime.now(UTC)


def utc_today() -> datetime:
    """
    Get today's date at midnight UTC.

    Returns:
        Today's date at 00:00:00 UTC
    """
    now = utc_now()
    return now.replace(hour=0, minute=0, second=0, microsecond=0)


def current_date_str() -> str:
    """Today's UTC calendar date as YYYY-MM-DD."""
    return utc_today().date().isoformat()


def is_iso_date(value: str) -> bool:
    """True when value is a YYYY-MM-DD calendar date."""
    if len(value) != 10:
        return False
    try:
        datetime.strptime(value, "%Y-%m-%d")
    except ValueError:
        return False
    return True
