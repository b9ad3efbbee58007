"""Rename a calendar."""

import logging

import typer
from rich.markup import escape
from typing_extensions import Annotated

from cli.context import get_context
from cli.display import console
from cli.utils import require_calendar

logger = logging.getLogger(__name__)


def rename(
    calendar: Annotated[
        str,
        typer.Argument(help="Calendar id or name"),
    ],
    new_name: Annotated[
        str,
        typer.Argument(help="New display name"),
    ],
) -> None:
    """Rename a calendar."""
    ctx = get_context()
    target = require_calendar(ctx, calendar)

    if not new_name.strip():
        logger.error("Calendar name cannot be empty")
        raise typer.Exit(1)

    ctx.session.rename_calendar(target.id, new_name)
    console.print(
        f"[bold green]✓[/bold green] Renamed '{escape(target.name)}' "
        f"to '{escape(new_name.strip())}'"
    )
