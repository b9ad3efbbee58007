"""Pure formatting functions for display output."""

from rich.markup import escape

from daymark.models import CalendarColor, DayData

# Tailwind hue -> Rich color name
_RICH_COLORS = {
    "blue": "blue",
    "emerald": "green",
    "purple": "purple",
    "amber": "yellow",
    "red": "red",
    "pink": "hot_pink",
    "indigo": "slate_blue1",
    "teal": "dark_cyan",
    "orange": "dark_orange",
}


def rich_color(color: CalendarColor) -> str:
    """Map a calendar color token to a Rich color name.

    Args:
        color: Calendar color token.

    Returns:
        Rich color name (``white`` for hues outside the palette).
    """
    return _RICH_COLORS.get(color.hue, "white")


def format_swatch(color: CalendarColor) -> str:
    """Format a colored block followed by the hue name."""
    return f"[{rich_color(color)}]■[/] {color.hue}"


def format_day_status(day: DayData | None) -> str:
    """Summarize a day's annotation in one line."""
    if day is None:
        return "[dim]no annotation[/dim]"
    parts = ["[bold green]marked[/bold green]" if day.marked else "not marked"]
    if day.note.strip():
        parts.append(f"note: {escape(day.note)}")
    return " · ".join(parts)


def truncate(text: str, width: int = 40) -> str:
    """Shorten ``text`` to ``width`` characters with an ellipsis."""
    text = " ".join(text.split())
    if len(text) <= width:
        return text
    return text[: width - 1] + "…"
