"""Storage layer for calendar persistence."""

from daymark.storage.backends import JSONFileStore, KeyValueStore, MemoryStore
from daymark.storage.calendar_storage import CalendarStorage

__all__ = [
    "CalendarStorage",
    "JSONFileStore",
    "KeyValueStore",
    "MemoryStore",
]
