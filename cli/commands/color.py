"""Show the color palette and recolor calendars."""

import logging

import typer
from rich.markup import escape
from typing_extensions import Annotated

from cli.context import get_context
from cli.display import CalendarRenderer, console, format_swatch
from cli.utils import require_calendar

logger = logging.getLogger(__name__)


def palette() -> None:
    """List palette colors with the index used by 'color'."""
    ctx = get_context()
    CalendarRenderer().render_palette(ctx.store.palette)


def color(
    calendar: Annotated[
        str,
        typer.Argument(help="Calendar id or name"),
    ],
    index: Annotated[
        int,
        typer.Argument(help="Palette index (see 'palette')"),
    ],
) -> None:
    """Change a calendar's color to a palette entry."""
    ctx = get_context()
    store = ctx.store
    target = require_calendar(ctx, calendar)

    if not 0 <= index < len(store.palette):
        logger.error(
            f"Color index {index} out of range (0-{len(store.palette) - 1})"
        )
        raise typer.Exit(1)

    store.change_calendar_color(target.id, index)
    console.print(
        f"[bold green]✓[/bold green] '{escape(target.name)}' is now "
        f"{format_swatch(store.palette[index])}"
    )
