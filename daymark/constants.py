"""Shared constants for daymark."""

# Storage slot holding the serialized calendar list
STORAGE_KEY = "customCalendars"

# Calendar seeded on first run when storage is empty
DEFAULT_CALENDAR_NAME = "Gimnasio"

# Month grid is always six Sunday-first weeks
DAYS_PER_WEEK = 7
WEEKS_PER_GRID = 6
GRID_CELLS = DAYS_PER_WEEK * WEEKS_PER_GRID

DATE_KEY_FORMAT = "%Y-%m-%d"
