"""Tests for the month-grid view model."""

from datetime import date, datetime

import pytest

from daymark.models import COLOR_PALETTES, Calendar, DayData
from daymark.view import CalendarDay, MonthView, build_month_grid, count_marked_days
from daymark.view.locale import month_label, weekday_names


@pytest.fixture
def calendar():
    """Calendar with marks in and around March 2024."""
    return Calendar(
        id="cal-1",
        name="Gimnasio",
        color=COLOR_PALETTES[0],
        data={
            "2024-02-29": DayData(marked=True),
            "2024-03-01": DayData(marked=True),
            "2024-03-15": DayData(marked=True, note="pierna"),
            "2024-03-20": DayData(note="descanso"),
            "2024-03-31": DayData(marked=True),
            "2024-04-01": DayData(marked=True),
        },
    )


def _flatten(weeks):
    return [cell for week in weeks for cell in week]


@pytest.mark.parametrize(
    "year, month",
    [
        (2024, 2),  # leap February
        (2023, 2),  # non-leap February
        (2015, 2),  # February starting on Sunday, fits in four rows
        (2024, 12),
        (2025, 1),
        (2024, 3),
        (2026, 8),  # 31 days starting on Saturday
    ],
)
def test_grid_is_always_six_weeks(year, month):
    """Test every month renders as 42 cells in six weeks of seven."""
    weeks = build_month_grid(year, month)
    assert len(weeks) == 6
    assert all(len(week) == 7 for week in weeks)
    assert len(_flatten(weeks)) == 42


@pytest.mark.parametrize("year, month", [(2024, 2), (2023, 2), (2024, 12), (2025, 1)])
def test_grid_dates_are_consecutive_and_sunday_first(year, month):
    """Test cells are consecutive days and each week starts on Sunday."""
    cells = _flatten(build_month_grid(year, month))
    ordinals = [cell.date.toordinal() for cell in cells]
    assert ordinals == list(range(ordinals[0], ordinals[0] + 42))
    # isoweekday() is 7 for Sunday
    assert cells[0].date.isoweekday() == 7


def test_grid_march_2024():
    """Test padding and flags for March 2024 (1st is a Friday)."""
    cells = _flatten(build_month_grid(2024, 3))

    leading = cells[:5]
    assert [cell.date for cell in leading] == [
        date(2024, 2, 25),
        date(2024, 2, 26),
        date(2024, 2, 27),
        date(2024, 2, 28),
        date(2024, 2, 29),
    ]
    assert not any(cell.is_current_month for cell in leading)

    current = cells[5:36]
    assert current[0] == CalendarDay(date=date(2024, 3, 1), is_current_month=True)
    assert current[-1].date == date(2024, 3, 31)
    assert all(cell.is_current_month for cell in current)

    trailing = cells[36:]
    assert [cell.date for cell in trailing] == [date(2024, 4, d) for d in range(1, 7)]
    assert not any(cell.is_current_month for cell in trailing)


def test_grid_month_starting_on_sunday():
    """Test a month starting on Sunday has no leading padding."""
    cells = _flatten(build_month_grid(2015, 2))
    assert cells[0] == CalendarDay(date=date(2015, 2, 1), is_current_month=True)
    assert cells[27].date == date(2015, 2, 28)
    assert cells[28] == CalendarDay(date=date(2015, 3, 1), is_current_month=False)
    assert cells[-1].date == date(2015, 3, 14)


def test_grid_december_wraps_to_january():
    """Test December pads with the next year's January."""
    cells = _flatten(build_month_grid(2024, 12))
    assert cells[0].date == date(2024, 12, 1)
    assert cells[-1].date == date(2025, 1, 11)


def test_grid_january_pads_with_december():
    """Test January pads with the previous year's December."""
    cells = _flatten(build_month_grid(2025, 1))
    assert cells[0].date == date(2024, 12, 29)
    assert cells[3] == CalendarDay(date=date(2025, 1, 1), is_current_month=True)


def test_count_marked_days_ignores_padding(calendar):
    """Test only marked days of the displayed month are counted."""
    assert count_marked_days(calendar, 2024, 3) == 3
    assert count_marked_days(calendar, 2024, 2) == 1
    assert count_marked_days(calendar, 2024, 5) == 0


def test_month_view_properties(calendar):
    """Test derived values for the reference month."""
    view = MonthView(calendar, current_date=date(2024, 3, 10), today=date(2024, 3, 15))
    assert (view.year, view.month) == (2024, 3)
    assert view.marked_days_count == 3
    assert view.month_label == "marzo de 2024"
    assert view.weekdays[0] == "Dom"
    assert len(view.month_grid) == 6


def test_month_view_defaults_to_today(calendar):
    """Test the reference date defaults to today."""
    view = MonthView(calendar, today=date(2026, 10, 19))
    assert view.current_date == date(2026, 10, 19)


def test_month_view_navigation(calendar):
    """Test month navigation lands on the 1st and tracks the count."""
    view = MonthView(calendar, current_date=date(2024, 3, 31), today=date(2024, 6, 9))

    view.previous_month()
    assert view.current_date == date(2024, 2, 1)
    assert view.marked_days_count == 1

    view.next_month()
    view.next_month()
    assert view.current_date == date(2024, 4, 1)
    assert view.marked_days_count == 1

    view.go_to_today()
    assert view.current_date == date(2024, 6, 9)


def test_month_view_navigation_across_years(calendar):
    """Test navigation across year boundaries."""
    view = MonthView(calendar, current_date=date(2024, 12, 31))
    view.next_month()
    assert view.current_date == date(2025, 1, 1)
    view.previous_month()
    view.previous_month()
    assert view.current_date == date(2024, 11, 1)


def test_is_today(calendar):
    """Test is_today ignores the time of day."""
    view = MonthView(calendar, today=date(2024, 3, 15))
    assert view.is_today(date(2024, 3, 15))
    assert view.is_today(datetime(2024, 3, 15, 23, 59))
    assert not view.is_today(date(2023, 3, 15))


def test_is_today_uses_real_date(calendar):
    """Test is_today defaults to the real current date."""
    view = MonthView(calendar)
    assert view.is_today(date.today())


def test_is_selected(calendar):
    """Test selection matching and the null selection."""
    view = MonthView(calendar, selected_date=datetime(2024, 3, 15, 8, 0))
    assert view.is_selected(date(2024, 3, 15))
    assert not view.is_selected(date(2024, 3, 16))
    assert not view.is_selected(None)

    assert not MonthView(calendar).is_selected(date(2024, 3, 15))


def test_get_day_data(calendar):
    """Test day lookups on the view's calendar."""
    view = MonthView(calendar)
    assert view.get_day_data(date(2024, 3, 15)) == DayData(marked=True, note="pierna")
    assert view.get_day_data(date(2024, 3, 16)) is None


def test_select_day_only_current_month(calendar):
    """Test padding cells cannot be selected."""
    view = MonthView(calendar, current_date=date(2024, 3, 1))
    assert view.select_day(CalendarDay(date(2024, 3, 4), True)) == date(2024, 3, 4)
    assert view.select_day(CalendarDay(date(2024, 2, 29), False)) is None


def test_month_labels():
    """Test month labels in both locales."""
    assert month_label(2024, 1, "es") == "enero de 2024"
    assert month_label(2024, 12, "en") == "December 2024"
    assert month_label(2024, 5, "xx") == "mayo de 2024"
    assert weekday_names("en") == ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")


def test_view_follows_calendar_data(calendar):
    """Test derived values are recomputed for a new calendar snapshot."""
    view = MonthView(calendar, current_date=date(2024, 3, 1))
    view.calendar = calendar.with_day("2024-03-02", DayData(marked=True))
    assert view.marked_days_count == 4


def test_view_reads_calendar_callable(calendar):
    """Test a callable calendar source is read on every access."""
    current = {"calendar": calendar}
    view = MonthView(lambda: current["calendar"], current_date=date(2024, 3, 1))
    assert view.marked_days_count == 3

    current["calendar"] = calendar.with_day("2024-03-15", DayData(note="pierna"))
    assert view.marked_days_count == 2


def test_view_reads_selection_callable(calendar):
    """Test a callable selection source is read on every access."""
    selected = {"day": None}
    view = MonthView(calendar, selected_date=lambda: selected["day"])
    assert not view.is_selected(date(2024, 3, 15))

    selected["day"] = date(2024, 3, 15)
    assert view.is_selected(date(2024, 3, 15))
