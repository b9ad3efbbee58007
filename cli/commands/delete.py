"""Delete a calendar."""

import logging

import typer
from rich.markup import escape
from typing_extensions import Annotated

from cli.context import get_context
from cli.display import console
from cli.utils import require_calendar

logger = logging.getLogger(__name__)


def delete(
    calendar: Annotated[
        str,
        typer.Argument(help="Calendar id or name to delete"),
    ],
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Skip confirmation prompt"),
    ] = False,
) -> None:
    """Delete a calendar and all of its day annotations."""
    ctx = get_context()
    target = require_calendar(ctx, calendar)

    # Show confirmation prompt unless --force is set
    if not force:
        console.print(f"\nDelete calendar '{escape(target.name)}'")
        console.print(f"  Annotated days: {len(target.data)}")
        console.print()
        if not typer.confirm("Continue?"):
            typer.echo("Delete cancelled.")
            return

    ctx.session.delete_calendar(target.id)
    console.print(
        f"[bold green]✓[/bold green] Calendar '{escape(target.name)}' deleted"
    )

    active = ctx.store.active_calendar
    if active is not None:
        console.print(f"  Active calendar: {escape(active.name)}")
