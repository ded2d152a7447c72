"""
Datetime utilities for consistent timezone handling.

This module provides constants and helper functions for working
with dates in a consistent manner across the demos.
"""

import datetime
from typing import Optional
from zoneinfo import ZoneInfo

# Standard timezone for all application operations
UTC = ZoneInfo("UTC")

DATE_FORMAT = "%Y-%m-%d"


def now() -> datetime.datetime:
    """
    Get current datetime in UTC.

    Returns:
        datetime.datetime: Current time in UTC timezone
    """
    return datetime.datetime.now(UTC)


def today() -> datetime.date:
    """
    Get current date in UTC.

    Returns:
        datetime.date: Current date in UTC timezone
    """
    return now().date()


def days_from_today(days: int, reference: Optional[datetime.date] = None) -> datetime.date:
    """
    Shift a date by a whole number of days.

    Args:
        days: Offset in days; negative values move into the past
        reference: Date to shift. If None, today's UTC date is used.

    Returns:
        datetime.date: The shifted date
    """
    return (reference or today()) + datetime.timedelta(days=days)


def format_date(value: datetime.date) -> str:
    """Format a date as ``YYYY-MM-DD``."""
    return value.strftime(DATE_FORMAT)
