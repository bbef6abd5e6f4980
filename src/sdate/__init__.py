"""
sdate - Immutable Calendar Dates over YYYY-MM-DD Strings

A small date value type for code that passes dates around as canonical
strings and wants calendar arithmetic without timezone surprises.

Key Features:
- Construction from today's date, a YYYY-MM-DD string, or a native date/datetime
- Day, month, and year arithmetic with calendar rollover
- DD/MM/YYYY formatting and field accessors
- Week (Monday to Sunday) and month range helpers
- Command-line interface (sdate)

Example Usage:
    from sdate import SDate

    d = SDate("2023-10-26")
    d.add_days(5)            # SDate('2023-10-31')
    d.days_in_week()[0]      # SDate('2023-10-23')

Version: 0.1.0
"""

__version__ = "0.1.0"
__author__ = "sdate contributors"

from .core.clock import fixed_clock, system_clock
from .core.dates import SDate, sdate
from .core.errors import DateRangeError, InvalidFormatError, SDateError

__all__ = [
    # Date values
    "SDate",
    "sdate",
    # Errors
    "SDateError",
    "InvalidFormatError",
    "DateRangeError",
    # Clocks
    "system_clock",
    "fixed_clock",
]
