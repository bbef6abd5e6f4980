"""
Core Package

The SDate value type and the utilities around it.

This package provides:
- SDate immutable date value over canonical YYYY-MM-DD strings
- Canonical formatting and calendar-rollover helpers
- Replaceable clocks for "today"
- Configuration management for environment-specific settings
"""

from .clock import Clock, fixed_clock, system_clock
from .config import (
    Config,
    Environment,
    get_config,
    is_development,
    is_production,
    is_test,
    reload_config,
)
from .dates import SDate, sdate
from .errors import DateRangeError, InvalidFormatError, SDateError

__all__ = [
    "Clock",
    # Configuration
    "Config",
    "DateRangeError",
    "Environment",
    "InvalidFormatError",
    # Date values
    "SDate",
    "SDateError",
    "fixed_clock",
    "get_config",
    "is_development",
    "is_production",
    "is_test",
    "reload_config",
    "sdate",
    "system_clock",
]
