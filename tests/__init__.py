"""
Test Suite for sdate

Test Structure:
- unit/: Unit tests mirroring the src/ package structure
- integration/: End-to-end CLI tests through the main entry point

Test Categories:
- Core value type (construction, arithmetic, comparison, ranges)
- Formatting and rollover helpers
- Clocks and configuration
- Command-line interface
"""
