"""Pydantic models for daymark."""

from daymark.models.calendar import Calendar
from daymark.models.color import COLOR_PALETTES, CalendarColor
from daymark.models.day import DEFAULT_DAY, DayData
from daymark.models.state import CalendarState

__all__ = [
    "Calendar",
    "CalendarColor",
    "CalendarState",
    "COLOR_PALETTES",
    "DayData",
    "DEFAULT_DAY",
]
