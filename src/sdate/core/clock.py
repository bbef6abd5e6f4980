#!/usr/bin/env python3
"""
Clock Sources

A clock is any zero-argument callable returning a datetime (or date). SDate
reads "today" through a clock so that tests and the CLI can pin the date.
"""

import logging
from collections.abc import Callable
from datetime import date, datetime

from .errors import InvalidFormatError
from .formatting import is_canonical, rollover_date, split_canonical

logger = logging.getLogger(__name__)

Clock = Callable[[], date | datetime]


def system_clock() -> datetime:
    """Current local time from the host clock."""
    return datetime.now()


def fixed_clock(today: date | str) -> Clock:
    """
    Build a clock that always reports the same day.

    Args:
        today: A date, or a YYYY-MM-DD string

    Returns:
        Zero-argument callable returning that date

    Raises:
        InvalidFormatError: If a string is not in YYYY-MM-DD format
    """
    if isinstance(today, str):
        if not is_canonical(today):
            raise InvalidFormatError()
        today = rollover_date(*split_canonical(today))

    logger.debug("Using fixed clock pinned to %s", today.isoformat())

    def clock() -> date:
        return today

    return clock
