#!/usr/bin/env python3
"""Tests for JSON and YAML rendering."""

import json

import pytest
import yaml

from sdate.core.dates import SDate
from sdate.core.serialization import format_json, format_yaml, render


class TestRender:
    """Test structured output rendering."""

    def test_format_json_is_indented(self):
        text = format_json({"date": "2023-10-26"})
        assert text == '{\n  "date": "2023-10-26"\n}'

    def test_format_json_with_default(self):
        text = format_json({"date": SDate("2023-10-26")}, default=str)
        assert json.loads(text) == {"date": "2023-10-26"}

    def test_format_yaml_is_block_style(self):
        text = format_yaml({"dates": ["2023-10-26", "2023-10-27"]})
        assert text == "dates:\n- '2023-10-26'\n- '2023-10-27'\n"

    def test_render_round_trips_breakdown(self):
        breakdown = SDate("2023-10-26").ymddt()
        assert json.loads(render(breakdown, "json")) == breakdown
        assert yaml.safe_load(render(breakdown, "yaml")) == breakdown

    def test_render_unknown_format(self):
        with pytest.raises(ValueError, match="Unknown output format"):
            render({}, "xml")
