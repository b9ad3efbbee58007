"""Per-day annotation model."""

from pydantic import BaseModel, ConfigDict


class DayData(BaseModel):
    """Annotation for one calendar date.

    The default value (unmarked, blank note) is never stored; writing it back
    removes the date from its calendar.
    """

    model_config = ConfigDict(frozen=True)

    marked: bool = False
    note: str = ""

    @property
    def is_default(self) -> bool:
        """True when the day carries no mark and no visible note."""
        return not self.marked and self.note.strip() == ""

    def merge(self, **changes) -> "DayData":
        """Return a copy with ``changes`` applied over this value."""
        unknown = set(changes) - set(type(self).model_fields)
        if unknown:
            raise TypeError(f"Unknown day fields: {', '.join(sorted(unknown))}")
        return type(self).model_validate({**self.model_dump(), **changes})


DEFAULT_DAY = DayData()
