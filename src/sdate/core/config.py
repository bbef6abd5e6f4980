#!/usr/bin/env python3
"""
Configuration Management for sdate

Handles environment-based configuration with defaults and validation.
Supports multiple environments (development, test, production).
"""

import logging
import os
from dataclasses import dataclass
from enum import Enum
from typing import Any

from dotenv import load_dotenv

from .clock import Clock, fixed_clock, system_clock
from .errors import SDateError
from .formatting import is_canonical

# Load environment variables from .env file
load_dotenv()

OUTPUT_FORMATS = ("text", "json", "yaml")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Environment(Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TEST = "test"
    PRODUCTION = "production"


@dataclass
class Config:
    """
    Main configuration class for sdate.

    Loads configuration from environment variables. The library itself never
    reads it; the CLI uses it to pick a clock, an output format, and logging.
    """

    environment: Environment

    # Fixed "today" (YYYY-MM-DD) instead of the system clock
    today: str | None = None
    output_format: str = "text"

    # Application settings
    debug: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_environment(cls) -> "Config":
        """Create configuration from environment variables."""
        env = Environment(os.getenv("SDATE_ENV", "development"))

        return cls(
            environment=env,
            today=os.getenv("SDATE_TODAY") or None,
            output_format=os.getenv("SDATE_OUTPUT_FORMAT", "text").lower(),
            debug=os.getenv("DEBUG", "false").lower() == "true",
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )

    def validate(self) -> list:
        """Validate configuration and return list of errors."""
        errors = []

        if self.today is not None:
            if not is_canonical(self.today):
                errors.append(f"SDATE_TODAY must be YYYY-MM-DD: {self.today}")
            else:
                try:
                    fixed_clock(self.today)
                except SDateError as e:
                    errors.append(f"SDATE_TODAY is not a usable date: {e}")

        if self.output_format not in OUTPUT_FORMATS:
            errors.append(f"SDATE_OUTPUT_FORMAT must be one of {', '.join(OUTPUT_FORMATS)}: {self.output_format}")

        if self.log_level not in LOG_LEVELS:
            errors.append(f"Unknown LOG_LEVEL: {self.log_level}")

        return errors

    def clock(self) -> Clock:
        """Get the clock for "today": pinned if SDATE_TODAY is set, system otherwise."""
        if self.today:
            return fixed_clock(self.today)
        return system_clock

    def setup_logging(self) -> None:
        """Configure logging based on configuration."""
        level = getattr(logging, self.log_level, logging.INFO)

        # Configure format based on environment
        if self.environment == Environment.DEVELOPMENT:
            format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        else:
            format_str = "%(asctime)s - %(levelname)s - %(message)s"

        logging.basicConfig(level=level, format=format_str, datefmt="%Y-%m-%d %H:%M:%S")

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary."""
        result: dict[str, Any] = {}
        for field_name, field_value in self.__dict__.items():
            if isinstance(field_value, Enum):
                result[field_name] = field_value.value
            else:
                result[field_name] = field_value
        return result


# Global configuration instance
_config: Config | None = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = Config.from_environment()

        # Validate configuration
        errors = _config.validate()
        if errors:
            _config = None
            raise ValueError(f"Configuration validation failed: {'; '.join(errors)}")

        # Setup logging
        _config.setup_logging()

    return _config


def reload_config() -> Config:
    """Reload configuration from environment (useful for testing)."""
    global _config
    _config = None
    return get_config()


def is_development() -> bool:
    """Check if running in development environment."""
    return get_config().environment == Environment.DEVELOPMENT


def is_test() -> bool:
    """Check if running in test environment."""
    return get_config().environment == Environment.TEST


def is_production() -> bool:
    """Check if running in production environment."""
    return get_config().environment == Environment.PRODUCTION
