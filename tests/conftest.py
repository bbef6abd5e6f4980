"""
Pytest Configuration and Shared Fixtures

Provides common test fixtures and configuration for the entire test suite.
"""

from datetime import date

import pytest

from sdate.core import config as config_module
from sdate.core.clock import fixed_clock


@pytest.fixture
def reference_date() -> str:
    """A Thursday in a 31-day month."""
    return "2023-10-26"


@pytest.fixture
def pinned_clock():
    """Clock pinned to the reference date."""
    return fixed_clock(date(2023, 10, 26))


@pytest.fixture
def month_length_cases() -> list[tuple[str, int]]:
    """Dates paired with the length of their month."""
    return [
        ("2023-02-15", 28),
        ("2024-02-10", 29),
        ("2023-04-30", 30),
        ("2023-10-26", 31),
        ("2023-12-01", 31),
    ]


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch):
    """Set up test environment variables."""
    monkeypatch.setenv("SDATE_ENV", "test")
    monkeypatch.setenv("LOG_LEVEL", "INFO")
    monkeypatch.delenv("SDATE_TODAY", raising=False)
    monkeypatch.delenv("SDATE_OUTPUT_FORMAT", raising=False)
    monkeypatch.delenv("DEBUG", raising=False)

    # Drop any configuration cached by a previous test
    monkeypatch.setattr(config_module, "_config", None)


# Test markers for categorizing tests
def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests for individual components"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests for complete workflows"
    )
    config.addinivalue_line(
        "markers", "cli: Tests for the command-line interface"
    )
