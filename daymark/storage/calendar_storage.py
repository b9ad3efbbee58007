"""Persistence adapter for the calendar list."""

import json
import logging
from typing import Iterable

from pydantic import TypeAdapter, ValidationError

from daymark.constants import STORAGE_KEY
from daymark.exceptions import StorageError
from daymark.models.calendar import Calendar
from daymark.storage.backends import KeyValueStore

logger = logging.getLogger(__name__)

_CALENDAR_LIST = TypeAdapter(list[Calendar])


class CalendarStorage:
    """Serialize calendars to a single key-value slot.

    Failures never reach the caller: ``save`` reports False and ``load``
    degrades to an empty list, logging the cause in both cases.
    """

    def __init__(self, store: KeyValueStore, key: str = STORAGE_KEY):
        """
        Initialize storage.

        Args:
            store: Slot backend (dependency injection)
            key: Slot holding the serialized calendar list
        """
        self.store = store
        self.key = key

    def serialize(self, calendars: Iterable[Calendar]) -> str:
        """Encode calendars as a JSON array."""
        return _CALENDAR_LIST.dump_json(list(calendars)).decode("utf-8")

    def deserialize(self, payload: str) -> list[Calendar]:
        """Decode a JSON array of calendars."""
        return _CALENDAR_LIST.validate_json(payload)

    def save(self, calendars: Iterable[Calendar]) -> bool:
        """
        Write the full calendar list to the slot.

        Returns:
            True if the slot was written, False if the write failed
        """
        try:
            payload = self.serialize(calendars)
            self.store.set_item(self.key, payload)
        except (StorageError, OSError, TypeError, ValueError):
            logger.exception("Error saving calendars to storage")
            return False
        return True

    def load(self) -> list[Calendar] | None:
        """
        Read the calendar list from the slot.

        Returns:
            None if the slot is absent or empty, the stored calendars otherwise, or an
            empty list if the slot could not be read or decoded
        """
        try:
            payload = self.store.get_item(self.key)
            if not payload:
                logger.info(f"No calendars stored under '{self.key}'")
                return None
            calendars = self.deserialize(payload)
        except (StorageError, OSError, ValidationError, json.JSONDecodeError):
            logger.exception("Error loading calendars from storage")
            return []

        logger.debug(f"Loaded {len(calendars)} calendar(s) from '{self.key}'")
        return calendars
