"""Mark, unmark and annotate single days."""

from datetime import date

import typer
from typing_extensions import Annotated

from cli.context import CLIContext, get_context
from cli.display import CalendarRenderer
from cli.utils import activate_calendar, parse_date_arg

CalendarOption = Annotated[
    str | None,
    typer.Option("--calendar", "-c", help="Calendar id or name"),
]
DateArgument = Annotated[
    str,
    typer.Argument(help="Day (YYYY-MM-DD or 'today')"),
]


def _render(ctx: CLIContext, target: date) -> None:
    store = ctx.store
    CalendarRenderer().render_day(
        store.active_calendar, target, store.get_day_data(target)
    )


def mark(day: DateArgument, calendar: CalendarOption = None) -> None:
    """Mark a day."""
    ctx = get_context()
    activate_calendar(ctx, calendar)
    target = parse_date_arg(day)
    ctx.store.update_day(target, marked=True)
    _render(ctx, target)


def unmark(day: DateArgument, calendar: CalendarOption = None) -> None:
    """Clear a day's mark (the note is kept)."""
    ctx = get_context()
    activate_calendar(ctx, calendar)
    target = parse_date_arg(day)
    ctx.store.update_day(target, marked=False)
    _render(ctx, target)


def toggle(day: DateArgument, calendar: CalendarOption = None) -> None:
    """Flip a day's mark."""
    ctx = get_context()
    activate_calendar(ctx, calendar)
    target = parse_date_arg(day)

    # Picking the already selected day flips its mark
    session = ctx.session
    session.selected_date = target
    session.on_day_selected(target)
    _render(ctx, target)


def note(
    day: DateArgument,
    text: Annotated[
        str,
        typer.Argument(help="Note text (empty string clears the note)"),
    ],
    calendar: CalendarOption = None,
) -> None:
    """Set or clear a day's note."""
    ctx = get_context()
    activate_calendar(ctx, calendar)
    target = parse_date_arg(day)

    session = ctx.session
    session.selected_date = target
    session.set_note(text)
    _render(ctx, target)


def show_day(day: DateArgument, calendar: CalendarOption = None) -> None:
    """Show a day's mark and note."""
    ctx = get_context()
    activate_calendar(ctx, calendar)
    _render(ctx, parse_date_arg(day))
