"""Display a calendar month grid."""

from datetime import date

import typer
from typing_extensions import Annotated

from cli.context import get_context
from cli.display import CalendarRenderer
from cli.utils import activate_calendar, parse_date_arg, parse_month_arg


def show(
    calendar: Annotated[
        str | None,
        typer.Option("--calendar", "-c", help="Calendar id or name"),
    ] = None,
    month: Annotated[
        str | None,
        typer.Option("--month", "-m", help="Month to show (YYYY-MM)"),
    ] = None,
    offset: Annotated[
        int,
        typer.Option(
            "--offset", "-o", help="Months to move from the shown month (e.g. -1)"
        ),
    ] = 0,
    selected: Annotated[
        str | None,
        typer.Option("--select", "-s", help="Highlight a day (YYYY-MM-DD)"),
    ] = None,
    notes: Annotated[
        bool,
        typer.Option("--notes", "-n", help="List notes below the grid"),
    ] = False,
) -> None:
    """Display a six-week month grid.

    Marked days use the calendar color, today is underlined and days with a
    note carry a '*'.

    Examples:
        daymark show                       # Current month, active calendar
        daymark show -c Gimnasio -m 2024-02
        daymark show --offset -1 --notes   # Previous month with notes
    """
    ctx = get_context()
    activate_calendar(ctx, calendar)

    session = ctx.session
    if selected is not None:
        session.selected_date = parse_date_arg(selected)

    reference: date | None = parse_month_arg(month) if month else None
    view = session.month_view(reference)

    for _ in range(abs(offset)):
        if offset < 0:
            view.previous_month()
        else:
            view.next_month()

    renderer = CalendarRenderer()
    renderer.render_month(view)
    if notes:
        renderer.render_notes(view)
