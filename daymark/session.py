"""Interactive session: calendar store plus the currently selected day."""

import logging
from datetime import date, datetime

from daymark.models import Calendar
from daymark.store import CalendarStore
from daymark.utils import same_day
from daymark.view.month_view import MonthView

logger = logging.getLogger(__name__)


class CalendarSession:
    """Translate user intents into store operations.

    Holds the selected day, which is UI state and never persisted.
    """

    def __init__(self, store: CalendarStore, locale: str = "es"):
        self.store = store
        self.locale = locale
        self.selected_date: date | None = None

    @property
    def active_calendar(self) -> Calendar | None:
        return self.store.active_calendar

    def add_calendar(self, name: str) -> Calendar | None:
        return self.store.create_calendar(name)

    def select_calendar(self, calendar_id: str) -> None:
        """Switch calendars and drop the day selection."""
        self.store.select_calendar(calendar_id)
        self.selected_date = None

    def rename_calendar(self, calendar_id: str, new_name: str) -> None:
        self.store.rename_calendar(calendar_id, new_name)

    def delete_calendar(self, calendar_id: str) -> None:
        self.store.delete_calendar(calendar_id)

    def on_day_selected(self, day: date | datetime) -> None:
        """Select a day.

        Picking the already selected day toggles its mark; picking another
        day marks it and makes it the selection.
        """
        if isinstance(day, datetime):
            day = day.date()

        if same_day(self.selected_date, day):
            current = self.store.get_day_data(day)
            marked = current.marked if current is not None else False
            self.store.update_day(day, marked=not marked)
        else:
            self.store.update_day(day, marked=True)
            self.selected_date = day

    def set_note(self, text: str) -> None:
        """Store ``text`` as the selected day's note."""
        if self.selected_date is None:
            logger.debug("No selected day; note ignored")
            return
        self.store.update_day(self.selected_date, note=text)

    def month_view(self, current_date: date | datetime | None = None) -> MonthView | None:
        """Month view following the active calendar, or None without one.

        The view reads the store and the selection on every access. If the
        store later has no active calendar it keeps showing the last one seen.
        """
        last_seen = self.active_calendar
        if last_seen is None:
            return None

        def current_calendar() -> Calendar:
            nonlocal last_seen
            calendar = self.store.active_calendar
            if calendar is not None:
                last_seen = calendar
            return last_seen

        return MonthView(
            current_calendar,
            current_date=current_date,
            selected_date=lambda: self.selected_date,
            locale=self.locale,
        )
