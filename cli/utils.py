"""CLI helpers for argument parsing and calendar resolution."""

import logging
from datetime import date

import typer

from daymark.exceptions import DaymarkError, InvalidDateKeyError
from daymark.models import Calendar
from daymark.utils import parse_date_key
from cli.context import CLIContext

logger = logging.getLogger(__name__)


def parse_date_arg(value: str) -> date:
    """Parse a YYYY-MM-DD argument, accepting ``today`` as a shortcut.

    Raises:
        typer.BadParameter: If the date format is invalid.
    """
    if value.strip().lower() == "today":
        return date.today()
    try:
        return parse_date_key(value.strip())
    except InvalidDateKeyError:
        raise typer.BadParameter(f"Invalid date format: {value}. Use YYYY-MM-DD.")


def parse_month_arg(value: str) -> date:
    """Parse a YYYY-MM argument into the first day of that month.

    Raises:
        typer.BadParameter: If the month format is invalid.
    """
    try:
        return parse_date_key(f"{value.strip()}-01")
    except InvalidDateKeyError:
        raise typer.BadParameter(f"Invalid month format: {value}. Use YYYY-MM.")


def require_calendar(ctx: CLIContext, ref: str) -> Calendar:
    """Resolve a calendar by id or name, exiting with an error if missing."""
    try:
        return ctx.store.find_calendar(ref)
    except DaymarkError as e:
        logger.error(str(e))
        raise typer.Exit(1)


def activate_calendar(ctx: CLIContext, ref: str | None) -> Calendar:
    """Make ``ref`` (or the current active calendar) active for this command.

    Exits with an error when there is no calendar to work on.
    """
    if ref is not None:
        calendar = require_calendar(ctx, ref)
        ctx.session.select_calendar(calendar.id)
        return calendar

    calendar = ctx.store.active_calendar
    if calendar is None:
        logger.error("No calendars available. Create one with 'daymark new <name>'")
        raise typer.Exit(1)
    return calendar
