"""Immutable application state snapshot."""

from pydantic import BaseModel, ConfigDict

from daymark.models.calendar import Calendar


class CalendarState(BaseModel):
    """Ordered calendars plus the active selection.

    Calendar order is display order. ``active_calendar_id`` is not checked
    against the list; ``active_calendar`` resolves to None when it dangles.
    """

    model_config = ConfigDict(frozen=True)

    calendars: tuple[Calendar, ...] = ()
    active_calendar_id: str | None = None

    @property
    def active_calendar(self) -> Calendar | None:
        for calendar in self.calendars:
            if calendar.id == self.active_calendar_id:
                return calendar
        return None
