"""Exception hierarchy for daymark operations."""


class DaymarkError(Exception):
    """Base exception for daymark operations."""

    pass


class CalendarNotFoundError(DaymarkError):
    """Calendar not found."""

    pass


class InvalidDateKeyError(DaymarkError):
    """Date key is not a valid YYYY-MM-DD string."""

    pass


class StorageError(DaymarkError):
    """Base exception for storage slot access."""

    pass


class StorageReadError(StorageError):
    """Storage slot could not be read or decoded."""

    pass


class StorageWriteError(StorageError):
    """Storage slot could not be written."""

    pass
