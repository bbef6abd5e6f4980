#!/usr/bin/env python3
"""
Main CLI Entry Point for sdate

Provides the command-line interface for date arithmetic and calendar ranges.
"""

import logging
import os

import click

from ..core.config import get_config, reload_config


@click.group()
@click.option(
    "--config-env",
    type=click.Choice(["development", "test", "production"]),
    help="Override environment configuration",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx: click.Context, config_env: str | None, verbose: bool, debug: bool) -> None:
    """
    sdate - Immutable calendar dates over YYYY-MM-DD strings

    Date arithmetic, formatting, and week/month ranges from the command line.
    """
    # Ensure context object exists
    ctx.ensure_object(dict)

    # Set environment if specified
    if config_env:
        os.environ["SDATE_ENV"] = config_env

    # Configure debug logging if requested
    if debug:
        os.environ["LOG_LEVEL"] = "DEBUG"

    try:
        config = reload_config() if (config_env or debug) else get_config()
    except ValueError as e:
        raise click.ClickException(str(e)) from e

    if debug:
        logging.getLogger().setLevel(logging.DEBUG)
        logging.getLogger("sdate").setLevel(logging.DEBUG)

    # Store global options
    ctx.obj["verbose"] = verbose
    ctx.obj["debug"] = debug
    ctx.obj["config"] = config

    if verbose:
        click.echo(f"Environment: {config.environment.value}")
        click.echo(f"Today: {config.today or 'system clock'}")

    if debug:
        click.echo("Debug logging enabled")


@main.command()
@click.pass_context
def version(ctx: click.Context) -> None:
    """Show version information."""
    from sdate import __author__, __version__

    click.echo(f"sdate v{__version__}")
    click.echo(f"Author: {__author__}")


@main.command()
@click.pass_context
def config(ctx: click.Context) -> None:
    """Show current configuration."""
    config_obj = ctx.obj["config"]

    click.echo("Current Configuration:")
    click.echo(f"  Environment: {config_obj.environment.value}")
    click.echo(f"  Today: {config_obj.today or 'system clock'}")
    click.echo(f"  Output Format: {config_obj.output_format}")
    click.echo(f"  Debug Mode: {config_obj.debug}")
    click.echo(f"  Log Level: {config_obj.log_level}")


# Import date commands
from .dates import add, diff, month, show, today, week  # noqa: E402

main.add_command(today)
main.add_command(show)
main.add_command(add)
main.add_command(diff)
main.add_command(week)
main.add_command(month)


if __name__ == "__main__":
    main()
