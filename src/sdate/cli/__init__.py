"""
Command Line Interface Package

Command Structure:
- sdate: Main entry point with utility commands (version, config)
- sdate today / show / add / diff: Single-date operations
- sdate week / month: Calendar ranges, as text, JSON, or YAML
"""
