#!/usr/bin/env python3
"""
SDate Primitive Type

Immutable calendar-date value over a canonical "YYYY-MM-DD" string.
Provides arithmetic, formatting, comparison, and week/month range helpers.
Every manipulation returns a new instance.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any

from .clock import Clock, system_clock
from .errors import InvalidFormatError
from .formatting import (
    format_dmy,
    is_canonical,
    native_to_local,
    native_to_utc,
    pad2,
    rollover_date,
    shift_days,
    split_canonical,
    to_canonical,
)

logger = logging.getLogger(__name__)


def _now_canonical() -> str:
    return native_to_local(system_clock())


@dataclass(frozen=True)
class SDate:
    """
    Immutable date wrapper holding a canonical YYYY-MM-DD string.

    Construction only checks the string's shape. Calendar-invalid values such
    as "2023-02-30" are accepted and rolled over (to 2023-03-02) whenever a
    real calendar date is needed.

    Examples:
        >>> d = SDate("2023-10-26")
        >>> d.add_days(5)
        SDate('2023-10-31')
        >>> d.f_date()
        '26/10/2023'
        >>> d.start_of_week()
        SDate('2023-10-23')
    """

    value: str = field(default_factory=_now_canonical)

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not is_canonical(self.value):
            raise InvalidFormatError()

    # Construction

    @classmethod
    def parse(cls, value: str) -> "SDate":
        """
        Parse a YYYY-MM-DD string.

        Raises:
            InvalidFormatError: If the string does not match YYYY-MM-DD
        """
        return cls(value)

    @classmethod
    def from_native(cls, value: date | datetime) -> "SDate":
        """
        Create from a native date or datetime using its local calendar fields.

        Aware datetimes are converted to the system's local timezone first.
        """
        return cls(native_to_local(value))

    @classmethod
    def today(cls, clock: Clock | None = None) -> "SDate":
        """
        Get today's local date.

        Args:
            clock: Zero-argument callable returning the current datetime
                (default: the system clock)

        Returns:
            SDate for the clock's local calendar day
        """
        return cls.from_native((clock or system_clock)())

    @classmethod
    def _from_date(cls, value: date) -> "SDate":
        return cls(to_canonical(value.year, value.month, value.day))

    def to_date(self) -> date:
        """
        Get the calendar date, rolling over out-of-range fields.

        Raises:
            DateRangeError: If the rolled-over date is outside years 1..9999
        """
        year, month, day = split_canonical(self.value)
        normalized = rollover_date(year, month, day)
        if (normalized.year, normalized.month, normalized.day) != (year, month, day):
            logger.debug("Rolled %s over to %s", self.value, normalized.isoformat())
        return normalized

    def _sort_key(self) -> tuple[date, str]:
        # Calendar date first, then the raw string so that <= and >= agree with ==
        return self.to_date(), self.value

    # Arithmetic

    def add_days(self, days: int) -> "SDate":
        """Return a new date shifted by whole days (negative to go back)."""
        return SDate._from_date(shift_days(self.to_date(), days))

    def add_months(self, months: int) -> "SDate":
        """
        Return a new date shifted by whole months.

        The day of month is kept and overflows into the following month
        rather than being clamped: 2023-01-31 plus one month is 2023-03-03.
        """
        current = self.to_date()
        return SDate._from_date(rollover_date(current.year, current.month + months, current.day))

    def add_years(self, years: int) -> "SDate":
        """
        Return a new date shifted by whole years.

        February 29th overflows in non-leap years: 2024-02-29 plus one year
        is 2025-03-01.
        """
        current = self.to_date()
        return SDate._from_date(rollover_date(current.year + years, current.month, current.day))

    # Comparison

    def difference(self, other: "SDate") -> int:
        """
        Calculate the number of days between two dates.

        Args:
            other: Date to compare to

        Returns:
            Absolute number of whole days between the dates
        """
        return abs((other.to_date() - self.to_date()).days)

    def equals(self, other: "SDate | date | datetime") -> bool:
        """
        Check whether another date denotes the same calendar day.

        Native datetimes are compared using their UTC calendar fields, unlike
        from_native() which reads local fields.
        """
        if isinstance(other, SDate):
            return self.value == other.value
        if isinstance(other, date):
            return native_to_utc(other) == self.value
        return False

    def is_in_strings(self, candidates: Iterable[str]) -> bool:
        """Check membership in a collection of canonical strings."""
        return any(candidate == self.value for candidate in candidates)

    def is_in_natives(self, candidates: Iterable[date | datetime]) -> bool:
        """Check membership in a collection of native dates, using UTC fields."""
        return any(native_to_utc(candidate) == self.value for candidate in candidates)

    def is_in_dates(self, candidates: Iterable["SDate"]) -> bool:
        """Check membership in a collection of SDate values."""
        return any(candidate.value == self.value for candidate in candidates)

    def is_in_array(self, candidates: Iterable[Any]) -> bool:
        """
        Check membership in a homogeneous collection.

        The first element alone decides how every element is compared:
        strings, native dates, or SDate values. Mixed collections are not
        supported.

        Args:
            candidates: Collection of strings, native dates, or SDate values;
                any iterable, including sets and generators

        Returns:
            True if this date is in the collection, False if not or if the
            collection is empty
        """
        candidates = list(candidates)
        if not candidates:
            return False

        first = candidates[0]
        if isinstance(first, str):
            return self.is_in_strings(candidates)
        if isinstance(first, date):
            return self.is_in_natives(candidates)
        if isinstance(first, SDate):
            return self.is_in_dates(candidates)
        return False

    def in_month(self, year: int | None = None, month: int | None = None) -> bool:
        """
        Check whether the date falls in a given month.

        Args:
            year: Year to check (default: this date's year)
            month: 1-based month to check (default: this date's month)

        Returns:
            True if the stored year and month fields match
        """
        if year is None:
            year = self.year()
        if month is None:
            month = self.month()
        stored_year, stored_month, _ = split_canonical(self.value)
        return stored_year == year and stored_month == month

    def is_today(self, clock: Clock | None = None) -> bool:
        """Check whether the date is today according to the clock."""
        return self.value == SDate.today(clock).value

    # Accessors

    def year(self) -> int:
        return self.to_date().year

    def year_short(self) -> str:
        """Last two digits of the year."""
        return str(self.year())[-2:]

    def month(self) -> int:
        """1-based month."""
        return self.to_date().month

    def month_pad(self) -> str:
        return pad2(self.month())

    def date(self) -> int:
        """Day of the month."""
        return self.to_date().day

    def date_pad(self) -> str:
        return pad2(self.date())

    def day(self) -> int:
        """Day of the week, 0 for Sunday through 6 for Saturday."""
        return self.to_date().isoweekday() % 7

    def ymd(self) -> dict[str, int]:
        """Year, month, and day of month."""
        return {"year": self.year(), "month": self.month(), "date": self.date()}

    def ymddt(self) -> dict[str, int]:
        """Year, month, day of month, and day of week."""
        return {**self.ymd(), "day": self.day()}

    def f_date(self) -> str:
        """Format as DD/MM/YYYY."""
        return format_dmy(self.value)

    def to_string(self) -> str:
        """Format as YYYY-MM-DD."""
        return self.value

    # Ranges

    def start_of_week(self) -> "SDate":
        """Monday on or before this date."""
        weekday = self.day()
        return self.add_days(-6 if weekday == 0 else -(weekday - 1))

    def days_in_week(self) -> list["SDate"]:
        """The seven dates from Monday through Sunday of this date's week."""
        dates = []
        current = self.start_of_week()
        for _ in range(7):
            dates.append(current)
            current = current.add_days(1)
        return dates

    def start_of_month(self) -> "SDate":
        return SDate(to_canonical(self.year(), self.month(), 1))

    def end_of_month(self) -> "SDate":
        """Last calendar day of this date's month (day 0 of the next month)."""
        return SDate._from_date(rollover_date(self.year(), self.month() + 1, 0))

    def days_in_month(self) -> list["SDate"]:
        """Every date of this date's month, in order."""
        year, month = self.year(), self.month()
        dates = []
        current = self.start_of_month()
        while current.in_month(year, month):
            dates.append(current)
            current = current.add_days(1)
        return dates

    def __str__(self) -> str:
        """String representation."""
        return self.value

    def __repr__(self) -> str:
        """Repr format."""
        return f"SDate({self.value!r})"

    def __lt__(self, other: "SDate") -> bool:
        """Less than comparison."""
        if not isinstance(other, SDate):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __le__(self, other: "SDate") -> bool:
        """Less than or equal comparison."""
        if not isinstance(other, SDate):
            return NotImplemented
        return self._sort_key() <= other._sort_key()

    def __gt__(self, other: "SDate") -> bool:
        """Greater than comparison."""
        if not isinstance(other, SDate):
            return NotImplemented
        return self._sort_key() > other._sort_key()

    def __ge__(self, other: "SDate") -> bool:
        """Greater than or equal comparison."""
        if not isinstance(other, SDate):
            return NotImplemented
        return self._sort_key() >= other._sort_key()


def sdate(value: "str | date | datetime | None" = None, *, clock: Clock | None = None) -> SDate:
    """
    Create an SDate from any supported input.

    Args:
        value: None for today, a YYYY-MM-DD string, or a native date/datetime
        clock: Clock used when value is None (default: the system clock)

    Returns:
        SDate object

    Raises:
        InvalidFormatError: If value is a malformed string or an unsupported type
    """
    if value is None:
        return SDate.today(clock)
    if isinstance(value, str):
        return SDate.parse(value)
    if isinstance(value, date):
        return SDate.from_native(value)
    raise InvalidFormatError()
