"""Date-key helpers shared by the store and the month view."""

from datetime import date, datetime

from daymark.constants import DATE_KEY_FORMAT
from daymark.exceptions import InvalidDateKeyError


def format_date_key(value: date | datetime) -> str:
    """Format a calendar date as its storage key.

    Args:
        value: Date (or datetime; the time of day is ignored).

    Returns:
        Zero-padded ``YYYY-MM-DD`` string.
    """
    if isinstance(value, datetime):
        value = value.date()
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def parse_date_key(key: str) -> date:
    """Parse a ``YYYY-MM-DD`` key back into a date.

    Raises:
        InvalidDateKeyError: If the key is not a valid date key.
    """
    try:
        parsed = datetime.strptime(key, DATE_KEY_FORMAT).date()
    except (TypeError, ValueError) as e:
        raise InvalidDateKeyError(f"Invalid date key: {key!r}") from e
    # strptime tolerates missing zero padding
    if format_date_key(parsed) != key:
        raise InvalidDateKeyError(f"Invalid date key: {key!r}")
    return parsed


def same_day(a: date | datetime | None, b: date | datetime | None) -> bool:
    """Compare two dates on year, month and day only."""
    if a is None or b is None:
        return False
    return (a.year, a.month, a.day) == (b.year, b.month, b.day)


def shift_month(value: date, months: int) -> date:
    """Move to the first day of the month ``months`` away from ``value``."""
    index = value.year * 12 + (value.month - 1) + months
    return date(index // 12, index % 12 + 1, 1)
