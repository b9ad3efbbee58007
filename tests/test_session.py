"""Tests for the interactive calendar session."""

from datetime import date, datetime

import pytest

from daymark.models import DayData
from daymark.session import CalendarSession


@pytest.fixture
def session(store):
    """Session over a store with two calendars, the first active."""
    store.create_calendar("Gimnasio")
    store.create_calendar("Lectura")
    return CalendarSession(store)


def test_first_selection_marks_and_selects(session):
    """Test selecting a new day marks it and selects it."""
    day = date(2024, 3, 15)
    session.on_day_selected(day)

    assert session.selected_date == day
    assert session.store.get_day_data(day) == DayData(marked=True)


def test_reselecting_toggles_mark(session):
    """Test selecting the selected day again flips its mark."""
    day = date(2024, 3, 15)
    session.on_day_selected(day)
    session.on_day_selected(datetime(2024, 3, 15, 12, 0))
    assert session.store.get_day_data(day) is None
    assert session.selected_date == day

    session.on_day_selected(day)
    assert session.store.get_day_data(day) == DayData(marked=True)


def test_selecting_other_day_moves_selection(session):
    """Test selecting a different day marks it without touching the first."""
    session.on_day_selected(date(2024, 3, 15))
    session.on_day_selected(date(2024, 3, 16))

    assert session.selected_date == date(2024, 3, 16)
    assert session.store.get_day_data(date(2024, 3, 15)) == DayData(marked=True)
    assert session.store.get_day_data(date(2024, 3, 16)) == DayData(marked=True)


def test_toggle_keeps_note(session):
    """Test unmarking a day with a note keeps the note."""
    day = date(2024, 3, 15)
    session.on_day_selected(day)
    session.set_note("sentadillas")
    session.on_day_selected(day)

    assert session.store.get_day_data(day) == DayData(marked=False, note="sentadillas")


def test_set_note_without_selection(session):
    """Test notes are ignored without a selected day."""
    session.set_note("ignored")
    assert session.active_calendar.data == {}


def test_clearing_note_on_unmarked_day_removes_it(session):
    """Test a blank note on an unmarked day removes the entry."""
    day = date(2024, 3, 15)
    session.on_day_selected(day)
    session.on_day_selected(day)
    session.set_note("x")
    session.set_note("")
    assert session.store.get_day_data(day) is None


def test_select_calendar_clears_selection(session):
    """Test switching calendars drops the selected day."""
    session.on_day_selected(date(2024, 3, 15))
    second = session.store.calendars[1]

    session.select_calendar(second.id)
    assert session.selected_date is None
    assert session.active_calendar == second
    assert second.data == {}


def test_calendar_management_delegates(session):
    """Test add, rename and delete go through the store."""
    added = session.add_calendar("Agua")
    session.rename_calendar(added.id, "Hidratación")
    assert session.store.get_calendar(added.id).name == "Hidratación"

    session.delete_calendar(added.id)
    assert session.store.get_calendar(added.id) is None


def test_month_view_carries_selection(session):
    """Test the month view reflects the active calendar and selection."""
    session.on_day_selected(date(2024, 3, 15))
    view = session.month_view(date(2024, 3, 1))

    assert view.calendar == session.active_calendar
    assert view.is_selected(date(2024, 3, 15))
    assert view.marked_days_count == 1
    assert view.locale == "es"


def test_month_view_without_calendar(store):
    """Test no view is built without an active calendar."""
    assert CalendarSession(store).month_view() is None


def test_month_view_follows_store_changes(session):
    """Test a view built earlier reflects later day updates and selection."""
    view = session.month_view(date(2024, 3, 1))
    assert view.marked_days_count == 0

    session.on_day_selected(date(2024, 3, 15))
    assert view.marked_days_count == 1
    assert view.is_selected(date(2024, 3, 15))
    assert view.get_day_data(date(2024, 3, 15)) == DayData(marked=True)


def test_month_view_follows_active_calendar(session):
    """Test the view switches along with the active calendar."""
    session.on_day_selected(date(2024, 3, 15))
    view = session.month_view(date(2024, 3, 1))
    second = session.store.calendars[1]

    session.select_calendar(second.id)
    assert view.calendar == second
    assert view.marked_days_count == 0
    assert view.selected_date is None


def test_month_view_keeps_last_calendar_when_none_active(session):
    """Test the view keeps the last calendar once nothing is active."""
    view = session.month_view(date(2024, 3, 1))
    shown = view.calendar

    session.select_calendar("missing")
    assert view.calendar == shown
