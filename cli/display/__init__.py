"""Display module for rendering calendars in the terminal.

This module provides:
- console: Shared Rich console instance
- CalendarRenderer: calendar list, palette, month grid and day views
- Formatting functions for colors and day annotations
"""

from cli.display.calendar_renderer import CalendarRenderer
from cli.display.console import console
from cli.display.formatters import (
    format_day_status,
    format_swatch,
    rich_color,
    truncate,
)

__all__ = [
    # Console
    "console",
    # Renderers
    "CalendarRenderer",
    # Formatters
    "format_day_status",
    "format_swatch",
    "rich_color",
    "truncate",
]
