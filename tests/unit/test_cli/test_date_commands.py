#!/usr/bin/env python3
"""
Unit tests for date CLI commands.

Commands are invoked directly, without the main group, so configuration comes
from get_config() and is patched per test.
"""

import json
import logging
from unittest.mock import patch

import pytest
import yaml
from click.testing import CliRunner

from sdate.cli.dates import add, diff, month, show, today, week
from sdate.core.config import Config, Environment


@pytest.fixture
def pinned_config():
    """Configuration with today pinned to 2023-10-26."""
    return Config(environment=Environment.TEST, today="2023-10-26")


@pytest.mark.cli
class TestDateCommands:
    """Test each date command in isolation."""

    def setup_method(self):
        """Set up test runner."""
        self.runner = CliRunner()

    def invoke(self, command, args, config):
        with patch("sdate.cli.dates.get_config", return_value=config):
            return self.runner.invoke(command, args)

    def test_today_uses_configured_clock(self, pinned_config):
        result = self.invoke(today, [], pinned_config)

        assert result.exit_code == 0
        assert result.output == "2023-10-26\n"

    def test_today_out_of_range(self):
        config = Config(environment=Environment.TEST, today="0000-01-01")
        result = self.invoke(today, [], config)

        assert result.exit_code == 1
        assert "out of range" in result.output

    def test_show_text(self, pinned_config):
        result = self.invoke(show, ["2023-10-26"], pinned_config)

        assert result.exit_code == 0
        assert "Date: 2023-10-26" in result.output
        assert "Formatted: 26/10/2023" in result.output
        assert "Weekday: Thursday (4)" in result.output
        assert "Today: yes" in result.output

    def test_show_defaults_to_today(self, pinned_config):
        result = self.invoke(show, ["--format", "json"], pinned_config)

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["canonical"] == "2023-10-26"
        assert data["is_today"] is True

    def test_show_json(self, pinned_config):
        result = self.invoke(show, ["2024-02-29", "--format", "json"], pinned_config)

        assert result.exit_code == 0
        assert json.loads(result.output) == {
            "canonical": "2024-02-29",
            "formatted": "29/02/2024",
            "year": 2024,
            "month": 2,
            "date": 29,
            "day": 4,
            "is_today": False,
        }

    def test_show_uses_configured_output_format(self):
        config = Config(environment=Environment.TEST, today="2023-10-26", output_format="yaml")
        result = self.invoke(show, ["2023-10-26"], config)

        assert result.exit_code == 0
        assert yaml.safe_load(result.output)["formatted"] == "26/10/2023"

    def test_show_rejects_bad_format(self, pinned_config):
        result = self.invoke(show, ["26-10-2023"], pinned_config)

        assert result.exit_code == 1
        assert "Invalid date format. Please use YYYY-MM-DD." in result.output

    @pytest.mark.parametrize(
        "args,expected",
        [
            (["2023-10-26", "--days", "5"], "2023-10-31"),
            (["2023-10-26", "--months", "2"], "2023-12-26"),
            (["2023-10-26", "--years", "1"], "2024-10-26"),
            (["2023-01-31", "--months", "1"], "2023-03-03"),
            (["2023-10-26", "--days", "-26"], "2023-09-30"),
            (["2023-10-26", "--days", "6", "--months", "1"], "2023-12-01"),
            (["2023-10-26"], "2023-10-26"),
        ],
    )
    def test_add(self, pinned_config, args, expected):
        result = self.invoke(add, args, pinned_config)

        assert result.exit_code == 0
        assert result.output.strip() == expected

    def test_add_out_of_range(self, pinned_config):
        result = self.invoke(add, ["9999-12-31", "--days", "1"], pinned_config)

        assert result.exit_code == 1
        assert "out of range" in result.output

    def test_diff(self, pinned_config):
        forward = self.invoke(diff, ["2023-10-01", "2023-10-26"], pinned_config)
        backward = self.invoke(diff, ["2023-10-26", "2023-10-01"], pinned_config)

        assert forward.output.strip() == "25"
        assert backward.output.strip() == "25"

    def test_week_text(self, pinned_config):
        result = self.invoke(week, ["2023-10-26"], pinned_config)

        lines = result.output.strip().splitlines()
        assert result.exit_code == 0
        assert len(lines) == 7
        assert lines[0] == "2023-10-23  Mon"
        assert lines[-1] == "2023-10-29  Sun"

    def test_week_json_defaults_to_today(self, pinned_config):
        result = self.invoke(week, ["--format", "json"], pinned_config)

        data = json.loads(result.output)
        assert data["start"] == "2023-10-23"
        assert data["end"] == "2023-10-29"
        assert len(data["dates"]) == 7

    def test_month_yaml(self, pinned_config):
        result = self.invoke(month, ["2023-02-15", "--format", "yaml"], pinned_config)

        data = yaml.safe_load(result.output)
        assert result.exit_code == 0
        assert len(data["dates"]) == 28
        assert data["start"] == "2023-02-01"
        assert data["end"] == "2023-02-28"

    def test_month_text(self, pinned_config):
        result = self.invoke(month, ["2023-10-26"], pinned_config)

        assert len(result.output.strip().splitlines()) == 31

    @pytest.mark.parametrize(
        "command,message",
        [(week, "Could not list the week of 9999-12-31"), (month, "Could not list the month of 9999-12-31")],
        ids=["week", "month"],
    )
    def test_range_overflow_is_logged(self, pinned_config, caplog, command, message):
        with caplog.at_level(logging.DEBUG, logger="sdate.cli.dates"):
            result = self.invoke(command, ["9999-12-31"], pinned_config)

        assert result.exit_code == 1
        assert "out of range" in result.output
        assert message in caplog.text
