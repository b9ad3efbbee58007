"""List calendars."""

from cli.context import get_context
from cli.display import CalendarRenderer


def ls() -> None:
    """List calendars in display order.

    The active calendar is marked with an arrow.
    """
    ctx = get_context()
    store = ctx.store
    CalendarRenderer().render_calendar_list(store.calendars, store.active_calendar_id)
