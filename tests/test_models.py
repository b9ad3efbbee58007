"""Tests for Pydantic models."""

import pytest
from pydantic import ValidationError

from daymark.models import (
    COLOR_PALETTES,
    DEFAULT_DAY,
    Calendar,
    CalendarColor,
    CalendarState,
    DayData,
)


def test_day_data_defaults():
    """Test DayData default value."""
    day = DayData()
    assert day.marked is False
    assert day.note == ""
    assert day.is_default
    assert day == DEFAULT_DAY


def test_day_data_whitespace_note_is_default():
    """Test a whitespace-only note does not count as content."""
    assert DayData(note="   \n").is_default
    assert not DayData(note="run 5k").is_default
    assert not DayData(marked=True).is_default


def test_day_data_merge():
    """Test merging a partial update over an existing value."""
    day = DayData(marked=True, note="legs")
    assert day.merge(marked=False) == DayData(marked=False, note="legs")
    assert day.merge(note="arms") == DayData(marked=True, note="arms")
    assert day.merge() == day


def test_day_data_merge_unknown_field():
    """Test merging an unknown field is rejected."""
    with pytest.raises(TypeError):
        DEFAULT_DAY.merge(colour="red")


def test_day_data_is_frozen():
    """Test DayData cannot be mutated in place."""
    day = DayData()
    with pytest.raises(ValidationError):
        day.marked = True


def test_palette():
    """Test the palette has nine distinct colors."""
    assert len(COLOR_PALETTES) == 9
    assert len({color.bg for color in COLOR_PALETTES}) == 9
    assert COLOR_PALETTES[0] == CalendarColor(
        bg="bg-blue-500",
        text="text-blue-400",
        border="border-blue-500",
        ring="ring-blue-500",
    )
    assert COLOR_PALETTES[1].hue == "emerald"


def test_calendar_with_day_sets_and_removes():
    """Test with_day stores non-default values and drops default ones."""
    calendar = Calendar(id="a", name="Gym", color=COLOR_PALETTES[0])

    marked = calendar.with_day("2024-03-15", DayData(marked=True))
    assert marked.data == {"2024-03-15": DayData(marked=True)}
    assert calendar.data == {}

    cleared = marked.with_day("2024-03-15", DayData())
    assert cleared.data == {}


def test_calendar_drops_default_days_on_load():
    """Test default entries in loaded data are discarded."""
    calendar = Calendar.model_validate(
        {
            "id": "a",
            "name": "Gym",
            "color": COLOR_PALETTES[0].model_dump(),
            "data": {
                "2024-03-15": {"marked": True, "note": ""},
                "2024-03-16": {"marked": False, "note": "  "},
            },
        }
    )
    assert list(calendar.data) == ["2024-03-15"]


def test_calendar_rejects_bad_date_key():
    """Test malformed date keys fail validation."""
    with pytest.raises(ValidationError):
        Calendar.model_validate(
            {
                "id": "a",
                "name": "Gym",
                "color": COLOR_PALETTES[0].model_dump(),
                "data": {"March 15": {"marked": True, "note": ""}},
            }
        )


def test_calendar_marked_count():
    """Test marked_count ignores note-only days."""
    calendar = Calendar(
        id="a",
        name="Gym",
        color=COLOR_PALETTES[0],
        data={
            "2024-03-15": DayData(marked=True),
            "2024-03-16": DayData(note="rest"),
            "2024-04-01": DayData(marked=True, note="pb"),
        },
    )
    assert calendar.marked_count == 2


def test_calendar_json_field_names():
    """Test the serialized field names."""
    calendar = Calendar(
        id="a",
        name="Gym",
        color=COLOR_PALETTES[0],
        data={"2024-03-15": DayData(marked=True, note="x")},
    )
    assert calendar.model_dump(mode="json") == {
        "id": "a",
        "name": "Gym",
        "color": {
            "bg": "bg-blue-500",
            "text": "text-blue-400",
            "border": "border-blue-500",
            "ring": "ring-blue-500",
        },
        "data": {"2024-03-15": {"marked": True, "note": "x"}},
    }


def test_state_active_calendar():
    """Test active_calendar resolves the id and tolerates dangling ids."""
    cal = Calendar(id="a", name="Gym", color=COLOR_PALETTES[0])
    assert CalendarState(calendars=(cal,), active_calendar_id="a").active_calendar == cal
    assert CalendarState(calendars=(cal,), active_calendar_id="zz").active_calendar is None
    assert CalendarState().active_calendar is None
