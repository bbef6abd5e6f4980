#!/usr/bin/env python3
"""
Date CLI - Arithmetic, Formatting, and Ranges

Command-line access to the SDate value type. DATE arguments default to today,
as reported by the configured clock (SDATE_TODAY pins it).
"""

import logging

import click

from ..core.config import Config, get_config
from ..core.dates import SDate, sdate
from ..core.errors import SDateError
from ..core.serialization import render

logger = logging.getLogger(__name__)

WEEKDAY_NAMES = ["Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"]

format_option = click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json", "yaml"]),
    help="Output format (default: SDATE_OUTPUT_FORMAT or text)",
)


def _get_config(ctx: click.Context) -> Config:
    if ctx.obj and "config" in ctx.obj:
        return ctx.obj["config"]
    return get_config()


def _parse_date(value: str | None, config: Config) -> SDate:
    """Parse a DATE argument, falling back to today from the configured clock."""
    try:
        return sdate(value, clock=config.clock())
    except SDateError as e:
        logger.debug("Rejected date argument %r: %s", value, e)
        raise click.ClickException(f"{e} Got: {value}") from e


def _weekday_name(value: SDate) -> str:
    return WEEKDAY_NAMES[value.day()]


def _echo_range(dates: list[SDate], output_format: str) -> None:
    if output_format == "text":
        for value in dates:
            click.echo(f"{value}  {_weekday_name(value)[:3]}")
        return

    data = {
        "start": str(dates[0]),
        "end": str(dates[-1]),
        "dates": [str(value) for value in dates],
    }
    click.echo(render(data, output_format))


@click.command()
@click.pass_context
def today(ctx: click.Context) -> None:
    """
    Print today's date as YYYY-MM-DD.

    Example:
      sdate today
    """
    config = _get_config(ctx)

    try:
        click.echo(SDate.today(config.clock()))
    except SDateError as e:
        logger.debug("Could not read today from the configured clock: %s", e)
        raise click.ClickException(str(e)) from e


@click.command()
@click.argument("date_str", metavar="[DATE]", required=False)
@format_option
@click.pass_context
def show(ctx: click.Context, date_str: str | None, output_format: str | None) -> None:
    """
    Show the breakdown of a date.

    Examples:
      sdate show 2023-10-26
      sdate show 2023-10-26 --format json
    """
    config = _get_config(ctx)
    value = _parse_date(date_str, config)
    output_format = output_format or config.output_format

    try:
        breakdown = value.ymddt()
        is_today = value.is_today(config.clock())
    except SDateError as e:
        logger.debug("Could not describe %s: %s", value, e)
        raise click.ClickException(str(e)) from e

    if output_format == "text":
        click.echo(f"Date: {value}")
        click.echo(f"Formatted: {value.f_date()}")
        click.echo(f"Weekday: {WEEKDAY_NAMES[breakdown['day']]} ({breakdown['day']})")
        click.echo(f"Year: {breakdown['year']}")
        click.echo(f"Month: {breakdown['month']}")
        click.echo(f"Day of month: {breakdown['date']}")
        if is_today:
            click.echo("Today: yes")
        return

    data = {"canonical": str(value), "formatted": value.f_date(), **breakdown, "is_today": is_today}
    click.echo(render(data, output_format))


@click.command()
@click.argument("date_str", metavar="DATE")
@click.option("--days", type=int, default=0, help="Days to add (negative to subtract)")
@click.option("--months", type=int, default=0, help="Months to add (negative to subtract)")
@click.option("--years", type=int, default=0, help="Years to add (negative to subtract)")
@click.pass_context
def add(ctx: click.Context, date_str: str, days: int, months: int, years: int) -> None:
    """
    Add days, then months, then years to a date.

    Examples:
      sdate add 2023-10-26 --days 5
      sdate add 2023-01-31 --months 1
    """
    config = _get_config(ctx)
    value = _parse_date(date_str, config)

    try:
        result = value.add_days(days).add_months(months).add_years(years)
    except SDateError as e:
        logger.debug("Date arithmetic failed for %s: %s", value, e)
        raise click.ClickException(str(e)) from e

    click.echo(result)


@click.command()
@click.argument("first", metavar="DATE")
@click.argument("second", metavar="OTHER")
@click.pass_context
def diff(ctx: click.Context, first: str, second: str) -> None:
    """
    Print the number of days between two dates.

    Example:
      sdate diff 2023-10-01 2023-10-26
    """
    config = _get_config(ctx)
    start = _parse_date(first, config)
    end = _parse_date(second, config)

    try:
        click.echo(start.difference(end))
    except SDateError as e:
        logger.debug("Could not compare %s and %s: %s", start, end, e)
        raise click.ClickException(str(e)) from e


@click.command()
@click.argument("date_str", metavar="[DATE]", required=False)
@format_option
@click.pass_context
def week(ctx: click.Context, date_str: str | None, output_format: str | None) -> None:
    """
    List the Monday-to-Sunday week containing a date.

    Example:
      sdate week 2023-10-26
    """
    config = _get_config(ctx)
    value = _parse_date(date_str, config)

    try:
        dates = value.days_in_week()
    except SDateError as e:
        logger.debug("Could not list the week of %s: %s", value, e)
        raise click.ClickException(str(e)) from e

    _echo_range(dates, output_format or config.output_format)


@click.command()
@click.argument("date_str", metavar="[DATE]", required=False)
@format_option
@click.pass_context
def month(ctx: click.Context, date_str: str | None, output_format: str | None) -> None:
    """
    List every date of the month containing a date.

    Example:
      sdate month 2023-02-15 --format yaml
    """
    config = _get_config(ctx)
    value = _parse_date(date_str, config)

    try:
        dates = value.days_in_month()
    except SDateError as e:
        logger.debug("Could not list the month of %s: %s", value, e)
        raise click.ClickException(str(e)) from e

    _echo_range(dates, output_format or config.output_format)
