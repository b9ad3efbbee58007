"""Calendar store owning the calendar list and the active selection."""

import logging
import random
import uuid
from datetime import date, datetime
from typing import Callable, Sequence

from daymark.constants import DEFAULT_CALENDAR_NAME
from daymark.exceptions import CalendarNotFoundError
from daymark.models import (
    COLOR_PALETTES,
    DEFAULT_DAY,
    Calendar,
    CalendarColor,
    CalendarState,
    DayData,
)
from daymark.storage.calendar_storage import CalendarStorage
from daymark.utils import format_date_key

logger = logging.getLogger(__name__)

Listener = Callable[[CalendarState], None]


class CalendarStore:
    """State store for calendars with persist-on-commit.

    Every operation builds a new CalendarState and commits it. A commit that
    changes the calendar list is written to storage before listeners run; a
    failed write is logged by the storage and never undoes the change.
    Invalid input (blank names, out-of-range color index, no active calendar)
    leaves the state untouched.
    """

    def __init__(
        self,
        storage: CalendarStorage | None = None,
        palette: Sequence[CalendarColor] = COLOR_PALETTES,
        rng: random.Random | None = None,
        id_factory: Callable[[], str] | None = None,
        state: CalendarState | None = None,
    ):
        """
        Initialize store.

        Args:
            storage: Persistence adapter; None keeps state in memory only
            palette: Colors new calendars are drawn from
            rng: Random source for color choice
            id_factory: Produces unique calendar ids
            state: Initial state (not persisted)
        """
        self.storage = storage
        self.palette: tuple[CalendarColor, ...] = tuple(palette)
        self.rng = rng or random.Random()
        self.id_factory = id_factory or (lambda: str(uuid.uuid4()))
        self._state = state or CalendarState()
        self._listeners: list[Listener] = []

    @classmethod
    def load(
        cls,
        storage: CalendarStorage,
        default_calendar_name: str = DEFAULT_CALENDAR_NAME,
        **kwargs,
    ) -> "CalendarStore":
        """Create a store and restore its calendars from storage."""
        store = cls(storage=storage, **kwargs)
        store.restore(default_calendar_name)
        return store

    # State access

    @property
    def state(self) -> CalendarState:
        return self._state

    @property
    def calendars(self) -> tuple[Calendar, ...]:
        return self._state.calendars

    @property
    def active_calendar_id(self) -> str | None:
        return self._state.active_calendar_id

    @property
    def active_calendar(self) -> Calendar | None:
        return self._state.active_calendar

    def get_calendar(self, calendar_id: str) -> Calendar | None:
        for calendar in self.calendars:
            if calendar.id == calendar_id:
                return calendar
        return None

    def find_calendar(self, ref: str) -> Calendar:
        """Resolve a calendar by id, then by case-insensitive name.

        Raises:
            CalendarNotFoundError: If nothing matches
        """
        calendar = self.get_calendar(ref)
        if calendar is not None:
            return calendar
        wanted = ref.strip().casefold()
        for calendar in self.calendars:
            if calendar.name.casefold() == wanted:
                return calendar
        raise CalendarNotFoundError(f"Calendar '{ref}' not found")

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener called with each committed state.

        Returns:
            Callable that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # Lifecycle

    def restore(self, default_calendar_name: str = DEFAULT_CALENDAR_NAME) -> None:
        """Replace state with the stored calendars.

        An absent slot seeds a single default calendar. A corrupted slot
        leaves the store empty. The restored list is written back at once, so
        unreadable content does not outlive startup.
        """
        loaded = self.storage.load() if self.storage is not None else None
        if loaded is None:
            self._commit(CalendarState(), persist=False)
            self.create_calendar(default_calendar_name)
        else:
            self._commit(
                CalendarState(
                    calendars=tuple(loaded),
                    active_calendar_id=self.active_calendar_id,
                ),
                persist=False,
            )
            self.storage.save(self.calendars)

        if self.calendars and self.active_calendar is None:
            self.select_calendar(self.calendars[0].id)

    def _commit(self, new_state: CalendarState, persist: bool = True) -> None:
        if new_state == self._state:
            return
        calendars_changed = new_state.calendars != self._state.calendars
        self._state = new_state

        if persist and calendars_changed and self.storage is not None:
            self.storage.save(new_state.calendars)

        for listener in list(self._listeners):
            listener(new_state)

    def _replace_calendar(self, calendar_id: str, **changes) -> None:
        calendars = tuple(
            cal.model_copy(update=changes) if cal.id == calendar_id else cal
            for cal in self.calendars
        )
        self._commit(self._state.model_copy(update={"calendars": calendars}))

    # Operations

    def _pick_color(self) -> CalendarColor:
        used = {cal.color.bg for cal in self.calendars}
        available = [color for color in self.palette if color.bg not in used]
        if available:
            return self.rng.choice(available)
        # Every palette entry is taken
        return self.palette[len(self.calendars) % len(self.palette)]

    def create_calendar(self, name: str) -> Calendar | None:
        """Append a new calendar; it becomes active if none is.

        Returns:
            The new calendar, or None if ``name`` is blank
        """
        name = name.strip()
        if not name:
            logger.debug("Ignoring calendar with blank name")
            return None

        calendar = Calendar(id=self.id_factory(), name=name, color=self._pick_color())
        active_id = self.active_calendar_id or calendar.id
        self._commit(
            CalendarState(
                calendars=self.calendars + (calendar,),
                active_calendar_id=active_id,
            )
        )
        logger.info(f"Created calendar '{calendar.name}' ({calendar.id})")
        return calendar

    def select_calendar(self, calendar_id: str | None) -> None:
        """Set the active calendar id; existence is not checked."""
        self._commit(
            self._state.model_copy(update={"active_calendar_id": calendar_id})
        )

    def rename_calendar(self, calendar_id: str, new_name: str) -> None:
        new_name = new_name.strip()
        if not new_name:
            logger.debug(f"Ignoring blank rename for calendar {calendar_id}")
            return
        self._replace_calendar(calendar_id, name=new_name)

    def delete_calendar(self, calendar_id: str) -> None:
        """Remove a calendar; deleting the active one activates the first left."""
        calendars = tuple(cal for cal in self.calendars if cal.id != calendar_id)
        if len(calendars) == len(self.calendars):
            logger.debug(f"No calendar {calendar_id} to delete")
            return

        active_id = self.active_calendar_id
        if active_id == calendar_id:
            active_id = calendars[0].id if calendars else None
        self._commit(
            CalendarState(calendars=calendars, active_calendar_id=active_id)
        )
        logger.info(f"Deleted calendar {calendar_id}")

    def change_calendar_color(self, calendar_id: str, color_index: int) -> None:
        if not 0 <= color_index < len(self.palette):
            logger.debug(f"Ignoring color index {color_index} outside the palette")
            return
        self._replace_calendar(calendar_id, color=self.palette[color_index])

    def update_day(self, day: date | datetime, **changes) -> None:
        """Merge ``changes`` (``marked``, ``note``) into the active calendar's day.

        A result equal to the default value removes the date from the calendar.
        """
        calendar = self.active_calendar
        if calendar is None:
            logger.debug("No active calendar; day update ignored")
            return

        key = format_date_key(day)
        merged = calendar.data.get(key, DEFAULT_DAY).merge(**changes)
        updated = calendar.with_day(key, merged)

        calendars = tuple(
            updated if cal.id == calendar.id else cal for cal in self.calendars
        )
        self._commit(self._state.model_copy(update={"calendars": calendars}))

    def get_day_data(self, day: date | datetime) -> DayData | None:
        calendar = self.active_calendar
        if calendar is None:
            return None
        return calendar.data.get(format_date_key(day))
