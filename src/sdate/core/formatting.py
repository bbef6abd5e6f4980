#!/usr/bin/env python3
"""
Canonical Date Formatting Helpers

Serialization and calendar-rollover helpers used by the SDate value type.

Canonical Form:
- Dates are stored as zero-padded "YYYY-MM-DD" strings
- Display format is "DD/MM/YYYY"

Key Principles:
- Calendar fields roll over instead of being clamped (day 0 is the last day
  of the previous month, month 13 is January of the next year)
- Stored strings carry no time of day, so arithmetic on them is plain
  calendar arithmetic and cannot be skewed by daylight saving
- Native datetimes are read with local fields on construction and UTC fields
  on comparison
"""

import re
from datetime import date, datetime, timedelta, timezone

from .errors import DateRangeError

CANONICAL_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)


def is_canonical(value: str) -> bool:
    """Check whether a string has the YYYY-MM-DD shape (format only)."""
    return CANONICAL_PATTERN.fullmatch(value) is not None


def pad2(value: int) -> str:
    """
    Zero-pad an integer to width 2.

    Example:
        pad2(7) -> "07"
    """
    return str(value).rjust(2, "0")


def to_canonical(year: int, month: int, day: int) -> str:
    """
    Assemble a canonical date string from calendar fields.

    Args:
        year: Four-digit year
        month: 1-based month
        day: Day of month

    Returns:
        String in YYYY-MM-DD format

    Example:
        to_canonical(2023, 2, 5) -> "2023-02-05"
    """
    return f"{str(year).rjust(4, '0')}-{pad2(month)}-{pad2(day)}"


def split_canonical(value: str) -> tuple[int, int, int]:
    """Split a canonical string into raw (year, month, day) integers."""
    year, month, day = value.split("-")
    return int(year), int(month), int(day)


def rollover_date(year: int, month: int, day: int) -> date:
    """
    Build a calendar date, rolling overflowing fields into neighbouring periods.

    Args:
        year: Year
        month: 1-based month, may be outside 1..12
        day: Day of month, may be outside the month's length

    Returns:
        Normalized date

    Raises:
        DateRangeError: If the normalized date is outside years 1..9999

    Examples:
        rollover_date(2023, 2, 30) -> date(2023, 3, 2)
        rollover_date(2023, 13, 1) -> date(2024, 1, 1)
        rollover_date(2023, 3, 0)  -> date(2023, 2, 28)
    """
    year += (month - 1) // 12
    month = (month - 1) % 12 + 1
    try:
        return date(year, month, 1) + timedelta(days=day - 1)
    except (ValueError, OverflowError) as e:
        raise DateRangeError(f"Date out of range: year={year} month={month} day={day}") from e


def shift_days(value: date, days: int) -> date:
    """Add whole days to a date, raising DateRangeError on overflow."""
    try:
        return value + timedelta(days=days)
    except OverflowError as e:
        raise DateRangeError(f"Date out of range: {value.isoformat()} + {days} days") from e


def native_to_local(value: date | datetime) -> str:
    """
    Serialize a native date/datetime using local calendar fields.

    Plain dates and naive datetimes are taken at face value. Aware datetimes
    are converted to the system's local timezone first.
    """
    if isinstance(value, datetime) and value.tzinfo is not None:
        value = value.astimezone()
    return to_canonical(value.year, value.month, value.day)


def native_to_utc(value: date | datetime) -> str:
    """
    Serialize a native date/datetime using UTC calendar fields.

    Naive datetimes are treated as local time before conversion to UTC.
    Plain dates have no time component and are taken at face value.
    """
    if isinstance(value, datetime):
        value = value.astimezone(timezone.utc)
    return to_canonical(value.year, value.month, value.day)


def format_dmy(value: str) -> str:
    """
    Reorder a canonical string into DD/MM/YYYY.

    Example:
        format_dmy("2023-10-26") -> "26/10/2023"
    """
    year, month, day = value.split("-")
    return f"{day}/{month}/{year}"
