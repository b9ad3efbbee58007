"""Create a new calendar."""

import logging

import typer
from rich.markup import escape
from typing_extensions import Annotated

from cli.context import get_context
from cli.display import console, format_swatch

logger = logging.getLogger(__name__)


def new(
    name: Annotated[
        str,
        typer.Argument(help="Calendar display name"),
    ],
) -> None:
    """Create a new calendar.

    The calendar gets a color not used by any other calendar while the
    palette lasts.

    Example:
        daymark new "Gimnasio"
    """
    ctx = get_context()

    calendar = ctx.store.create_calendar(name)
    if calendar is None:
        logger.error("Calendar name cannot be empty")
        raise typer.Exit(1)

    console.print(
        f"\n[bold green]✓[/bold green] Calendar '{escape(calendar.name)}' created"
    )
    console.print(f"  ID: {calendar.id}")
    console.print(f"  Color: {format_swatch(calendar.color)}")
