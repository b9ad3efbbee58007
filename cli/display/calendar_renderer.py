"""Renderer for calendar lists, the palette and month grids."""

from datetime import date

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from daymark.models import Calendar, CalendarColor, DayData
from daymark.utils import format_date_key
from daymark.view import MonthView
from cli.display.console import console as shared_console
from cli.display.formatters import (
    format_day_status,
    format_swatch,
    rich_color,
    truncate,
)


class CalendarRenderer:
    """Render calendars using Rich tables.

    Month grids use the calendar's color for marked days, underline today,
    reverse the selected day and flag days with notes with a trailing ``*``.
    Days outside the displayed month are dimmed.
    """

    def __init__(self, console: Console | None = None):
        """Initialize the renderer.

        Args:
            console: Rich Console instance (uses shared console if not provided).
        """
        self.console = console or shared_console

    def render_empty(self, message: str = "No calendars found") -> None:
        self.console.print(message)

    def render_calendar_list(
        self, calendars: tuple[Calendar, ...], active_id: str | None
    ) -> None:
        """Render calendars in display order.

        Args:
            calendars: Calendars to list.
            active_id: Id of the active calendar (marked with an arrow).
        """
        if not calendars:
            self.render_empty()
            return

        table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
        table.add_column("", width=1)
        table.add_column("NAME", style="cyan")
        table.add_column("COLOR")
        table.add_column("MARKED", justify="right")
        table.add_column("NOTES", justify="right")
        table.add_column("ID", style="dim")

        for cal in calendars:
            notes = sum(1 for day in cal.data.values() if day.note.strip())
            table.add_row(
                "[green]→[/green]" if cal.id == active_id else "",
                escape(cal.name),
                format_swatch(cal.color),
                str(cal.marked_count),
                str(notes),
                cal.id[:8],
            )

        self.console.print(table)

    def render_palette(self, palette: tuple[CalendarColor, ...]) -> None:
        table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
        table.add_column("#", justify="right", style="dim")
        table.add_column("COLOR")
        table.add_column("CLASS", style="dim")

        for index, color in enumerate(palette):
            table.add_row(str(index), format_swatch(color), color.bg)

        self.console.print(table)

    def render_month(self, view: MonthView) -> None:
        """Render the six-week grid of ``view`` with its marked-day count."""
        calendar = view.calendar
        accent = rich_color(calendar.color)

        table = Table(
            title=f"[bold]{escape(calendar.name)}[/bold] · {view.month_label}",
            caption=f"{view.marked_days_count} marked",
            show_header=True,
            header_style="bold",
            show_lines=False,
        )
        for name in view.weekdays:
            table.add_column(name, justify="right", min_width=4)

        for week in view.month_grid:
            table.add_row(
                *(
                    self._format_cell(view, day.date, day.is_current_month, accent)
                    for day in week
                )
            )

        self.console.print(table)

    def _format_cell(
        self, view: MonthView, value: date, is_current_month: bool, accent: str
    ) -> str:
        day = view.get_day_data(value)
        label = str(value.day)
        if day is not None and day.note.strip():
            label += "*"

        styles = []
        if not is_current_month:
            styles.append("dim")
        if day is not None and day.marked:
            styles.append(f"bold {accent}")
        if view.is_today(value):
            styles.append("underline")
        if view.is_selected(value):
            styles.append("reverse")

        if not styles:
            return label
        style = " ".join(styles)
        return f"[{style}]{label}[/]"

    def render_day(self, calendar: Calendar, value: date, day: DayData | None) -> None:
        self.console.print(
            f"[cyan]{escape(calendar.name)}[/cyan] {format_date_key(value)}: "
            f"{format_day_status(day)}"
        )

    def render_notes(self, view: MonthView) -> None:
        """List notes written in the displayed month."""
        rows = []
        for week in view.month_grid:
            for cell in week:
                day = view.get_day_data(cell.date)
                if cell.is_current_month and day is not None and day.note.strip():
                    note = escape(truncate(day.note))
                    rows.append((format_date_key(cell.date), note))

        if not rows:
            return

        self.console.print()
        for key, note in rows:
            self.console.print(f"  [dim]{key}[/dim]  {note}")
