"""Month-grid view model for a single calendar."""

import calendar as pycalendar
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Callable

from daymark.constants import DAYS_PER_WEEK, GRID_CELLS
from daymark.models import Calendar, DayData
from daymark.utils import format_date_key, same_day, shift_month
from daymark.view.locale import month_label, weekday_names


@dataclass(frozen=True)
class CalendarDay:
    """One cell of the month grid."""

    date: date
    is_current_month: bool


def _as_date(value: date | datetime) -> date:
    return value.date() if isinstance(value, datetime) else value


def days_in_month(year: int, month: int) -> int:
    return pycalendar.monthrange(year, month)[1]


def build_month_grid(year: int, month: int) -> list[list[CalendarDay]]:
    """Build six Sunday-first weeks covering ``month``.

    The month is preceded by the tail of the previous month (one cell per
    weekday before the 1st) and followed by the next month's first days until
    the grid holds exactly 42 cells.
    """
    first = date(year, month, 1)
    # date.weekday() is Monday=0; shift so Sunday=0
    first_weekday = (first.weekday() + 1) % DAYS_PER_WEEK
    total_days = days_in_month(year, month)

    cells = [
        CalendarDay(date=first - timedelta(days=offset), is_current_month=False)
        for offset in range(first_weekday, 0, -1)
    ]
    cells.extend(
        CalendarDay(date=date(year, month, day), is_current_month=True)
        for day in range(1, total_days + 1)
    )
    next_first = shift_month(first, 1)
    cells.extend(
        CalendarDay(date=next_first + timedelta(days=offset), is_current_month=False)
        for offset in range(GRID_CELLS - len(cells))
    )

    return [
        cells[start : start + DAYS_PER_WEEK]
        for start in range(0, len(cells), DAYS_PER_WEEK)
    ]


def count_marked_days(calendar: Calendar, year: int, month: int) -> int:
    """Count marked days of ``month`` only, ignoring padding cells."""
    count = 0
    for day in range(1, days_in_month(year, month) + 1):
        data = calendar.data.get(format_date_key(date(year, month, day)))
        if data is not None and data.marked:
            count += 1
    return count


class MonthView:
    """Navigable month of one calendar.

    Derived values (grid, marked count, label) are computed on access from
    the current reference date. The calendar and the selected day may be given
    as callables, which are read on every access so the view follows a store
    that keeps changing.
    """

    def __init__(
        self,
        calendar: Calendar | Callable[[], Calendar],
        current_date: date | datetime | None = None,
        selected_date: date | datetime | Callable[[], date | None] | None = None,
        locale: str = "es",
        today: date | None = None,
    ):
        """
        Initialize month view.

        Args:
            calendar: Calendar whose annotations are displayed, or a callable
                returning the current one
            current_date: Reference date; its month is shown (defaults to today)
            selected_date: Day highlighted as selected (or a callable), if any
            locale: Display locale for labels
            today: Override for the real current date
        """
        self.calendar = calendar
        self.selected_date = selected_date
        self._today = today
        self.current_date = _as_date(current_date) if current_date else self.today
        self.locale = locale

    @property
    def calendar(self) -> Calendar:
        source = self._calendar
        return source() if callable(source) else source

    @calendar.setter
    def calendar(self, value: Calendar | Callable[[], Calendar]) -> None:
        self._calendar = value

    @property
    def selected_date(self) -> date | None:
        source = self._selected_date
        value = source() if callable(source) else source
        return _as_date(value) if value else None

    @selected_date.setter
    def selected_date(
        self, value: date | datetime | Callable[[], date | None] | None
    ) -> None:
        self._selected_date = value

    @property
    def today(self) -> date:
        return self._today or date.today()

    @property
    def year(self) -> int:
        return self.current_date.year

    @property
    def month(self) -> int:
        return self.current_date.month

    @property
    def month_grid(self) -> list[list[CalendarDay]]:
        return build_month_grid(self.year, self.month)

    @property
    def marked_days_count(self) -> int:
        return count_marked_days(self.calendar, self.year, self.month)

    @property
    def month_label(self) -> str:
        return month_label(self.year, self.month, self.locale)

    @property
    def weekdays(self) -> tuple[str, ...]:
        return weekday_names(self.locale)

    def previous_month(self) -> None:
        self.current_date = shift_month(self.current_date, -1)

    def next_month(self) -> None:
        self.current_date = shift_month(self.current_date, 1)

    def go_to_today(self) -> None:
        self.current_date = self.today

    def is_today(self, value: date | datetime) -> bool:
        return same_day(value, self.today)

    def is_selected(self, value: date | datetime | None) -> bool:
        return same_day(value, self.selected_date)

    def get_day_data(self, value: date | datetime) -> DayData | None:
        return self.calendar.data.get(format_date_key(value))

    def select_day(self, day: CalendarDay) -> date | None:
        """Return the cell's date if it can be selected (current month only)."""
        if not day.is_current_month:
            return None
        return day.date
