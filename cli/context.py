"""Shared CLI context with lazy-initialized dependencies."""

from daymark.config import DaymarkConfig
from daymark.session import CalendarSession
from daymark.storage import CalendarStorage, JSONFileStore, KeyValueStore
from daymark.store import CalendarStore


class CLIContext:
    """Shared context with lazy-initialized dependencies for CLI commands.

    Usage:
        ctx = CLIContext()
        calendars = ctx.store.calendars
    """

    def __init__(
        self,
        verbose: bool = False,
        quiet: bool = False,
        config: DaymarkConfig | None = None,
        key_value_store: KeyValueStore | None = None,
    ):
        """Initialize CLI context.

        Args:
            verbose: If True, enable info logging on the console
            quiet: If True, suppress non-error output
            config: Configuration (loaded from the environment when omitted)
            key_value_store: Slot backend (file store under data_dir when omitted)
        """
        self.verbose = verbose
        self.quiet = quiet

        # Lazy-loaded dependencies
        self._config: DaymarkConfig | None = config
        self._key_value_store: KeyValueStore | None = key_value_store
        self._storage: CalendarStorage | None = None
        self._store: CalendarStore | None = None
        self._session: CalendarSession | None = None

    @property
    def config(self) -> DaymarkConfig:
        """Get configuration (lazy-loaded)."""
        if self._config is None:
            self._config = DaymarkConfig.from_env()
        return self._config

    @property
    def key_value_store(self) -> KeyValueStore:
        """Get the slot backend (lazy-loaded)."""
        if self._key_value_store is None:
            self._key_value_store = JSONFileStore(self.config.storage_path)
        return self._key_value_store

    @property
    def storage(self) -> CalendarStorage:
        """Get calendar storage (lazy-loaded)."""
        if self._storage is None:
            self._storage = CalendarStorage(
                self.key_value_store, key=self.config.storage_key
            )
        return self._storage

    @property
    def store(self) -> CalendarStore:
        """Get the calendar store restored from storage (lazy-loaded)."""
        if self._store is None:
            self._store = CalendarStore.load(
                self.storage,
                default_calendar_name=self.config.default_calendar_name,
            )
        return self._store

    @property
    def session(self) -> CalendarSession:
        """Get the interactive session over the store (lazy-loaded)."""
        if self._session is None:
            self._session = CalendarSession(self.store, locale=self.config.locale)
        return self._session


# Global context instance (set by Typer callback)
_ctx: CLIContext | None = None


def get_context() -> CLIContext:
    """Get the current CLI context.

    Returns:
        The global CLI context instance

    Raises:
        RuntimeError: If context not initialized
    """
    if _ctx is None:
        raise RuntimeError("CLI context not initialized. This should not happen.")
    return _ctx


def set_context(ctx: CLIContext) -> None:
    """Set the global CLI context.

    Args:
        ctx: The CLI context instance to set
    """
    global _ctx
    _ctx = ctx
