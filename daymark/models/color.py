"""Calendar color tokens and the fixed palette they are drawn from."""

from pydantic import BaseModel, ConfigDict


class CalendarColor(BaseModel):
    """Opaque style token; carries no behaviour."""

    model_config = ConfigDict(frozen=True)

    bg: str
    text: str
    border: str
    ring: str

    @property
    def hue(self) -> str:
        """Hue name embedded in the background class (``bg-blue-500`` -> ``blue``)."""
        parts = self.bg.split("-")
        return parts[1] if len(parts) >= 3 else self.bg


def _tailwind(hue: str) -> CalendarColor:
    return CalendarColor(
        bg=f"bg-{hue}-500",
        text=f"text-{hue}-400",
        border=f"border-{hue}-500",
        ring=f"ring-{hue}-500",
    )


COLOR_PALETTES: tuple[CalendarColor, ...] = tuple(
    _tailwind(hue)
    for hue in (
        "blue",
        "emerald",
        "purple",
        "amber",
        "red",
        "pink",
        "indigo",
        "teal",
        "orange",
    )
)
