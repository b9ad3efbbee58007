"""Typer application and command routing."""

import logging

import typer
from typing_extensions import Annotated

from cli import setup_logging
from cli.commands import (
    color,
    delete,
    ls,
    mark,
    new,
    note,
    palette,
    rename,
    show,
    show_day,
    toggle,
    unmark,
)
from cli.context import CLIContext, set_context

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="daymark",
    help="Named calendars with per-day marks and notes.",
    no_args_is_help=True,
)


@app.callback()
def callback(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show info messages"),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Only show errors"),
    ] = False,
) -> None:
    """Set up logging and the shared command context."""
    ctx = CLIContext(verbose=verbose, quiet=quiet)
    setup_logging(verbose=verbose, quiet=quiet, config=ctx.config)
    set_context(ctx)


app.command("ls")(ls)
app.command("new")(new)
app.command("rename")(rename)
app.command("delete")(delete)
app.command("palette")(palette)
app.command("color")(color)
app.command("show")(show)
app.command("mark")(mark)
app.command("unmark")(unmark)
app.command("toggle")(toggle)
app.command("note")(note)
app.command("day")(show_day)


if __name__ == "__main__":
    app()
