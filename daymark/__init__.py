"""Daymark: named calendars with per-day marks and notes."""

from daymark.config import DaymarkConfig
from daymark.models import Calendar, CalendarColor, CalendarState, DayData
from daymark.session import CalendarSession
from daymark.store import CalendarStore

__all__ = [
    "Calendar",
    "CalendarColor",
    "CalendarSession",
    "CalendarState",
    "CalendarStore",
    "DayData",
    "DaymarkConfig",
]
