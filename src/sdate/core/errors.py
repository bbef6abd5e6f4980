#!/usr/bin/env python3
"""
Exception Hierarchy

All errors raised by the date value type derive from SDateError so callers can
catch the whole family at once.
"""

INVALID_FORMAT_MESSAGE = "Invalid date format. Please use YYYY-MM-DD."


class SDateError(Exception):
    """Base exception for all sdate errors."""


class InvalidFormatError(SDateError, ValueError):
    """Raised at construction when a date string is not YYYY-MM-DD."""

    def __init__(self, message: str = INVALID_FORMAT_MESSAGE) -> None:
        super().__init__(message)


class DateRangeError(SDateError, OverflowError):
    """Raised when a calendar value falls outside years 1..9999."""
