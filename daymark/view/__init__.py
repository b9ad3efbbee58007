"""View models consumed by the presentation layer."""

from daymark.view.month_view import (
    CalendarDay,
    MonthView,
    build_month_grid,
    count_marked_days,
)

__all__ = ["CalendarDay", "MonthView", "build_month_grid", "count_marked_days"]
