"""Calendar model with Pydantic v2 validation."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from daymark.exceptions import InvalidDateKeyError
from daymark.models.color import CalendarColor
from daymark.models.day import DayData
from daymark.utils import parse_date_key


class Calendar(BaseModel):
    """Named calendar holding sparse per-day annotations.

    ``data`` maps ``YYYY-MM-DD`` keys to non-default DayData values. Instances
    are frozen; updates go through ``model_copy`` so every change yields a new
    calendar.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)
    name: str
    color: CalendarColor
    data: dict[str, DayData] = Field(default_factory=dict)

    @field_validator("data")
    @classmethod
    def _drop_default_days(cls, value: dict[str, DayData]) -> dict[str, DayData]:
        for key in value:
            try:
                parse_date_key(key)
            except InvalidDateKeyError as e:
                raise ValueError(str(e)) from e
        return {key: day for key, day in value.items() if not day.is_default}

    def with_day(self, key: str, day: DayData) -> "Calendar":
        """Return a copy with ``day`` stored under ``key`` (or removed if default)."""
        data = dict(self.data)
        if day.is_default:
            data.pop(key, None)
        else:
            data[key] = day
        return self.model_copy(update={"data": data})

    @property
    def marked_count(self) -> int:
        """Number of marked days across the whole calendar."""
        return sum(1 for day in self.data.values() if day.marked)
