#!/usr/bin/env python3
"""
Serialization Utilities Module

Formats date breakdowns as JSON or YAML text with consistent settings, so
every command renders structured output the same way.
"""

import json
from typing import Any

import yaml


def format_json(data: Any, ensure_ascii: bool = False, sort_keys: bool = False, default: Any = None) -> str:
    """
    Format data as a pretty-printed JSON string.

    Args:
        data: Data to format
        ensure_ascii: If True, escape non-ASCII characters (default: False)
        sort_keys: If True, sort dictionary keys (default: False)
        default: Function to serialize non-JSON types (default: None)

    Returns:
        Pretty-printed JSON string
    """
    if default is not None:
        return json.dumps(data, indent=2, ensure_ascii=ensure_ascii, sort_keys=sort_keys, default=default)
    return json.dumps(data, indent=2, ensure_ascii=ensure_ascii, sort_keys=sort_keys)


def format_yaml(data: Any, sort_keys: bool = False) -> str:
    """
    Format data as a block-style YAML string.

    Args:
        data: Data to format (plain dicts, lists, and scalars)
        sort_keys: If True, sort dictionary keys (default: False)

    Returns:
        YAML document string
    """
    return yaml.safe_dump(data, default_flow_style=False, sort_keys=sort_keys)


def render(data: Any, output_format: str) -> str:
    """Render data as "json" or "yaml"."""
    if output_format == "json":
        return format_json(data)
    if output_format == "yaml":
        return format_yaml(data).rstrip("\n")
    raise ValueError(f"Unknown output format: {output_format}")
