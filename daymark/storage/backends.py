"""Key-value slot backends (local-storage analog)."""

import json
import logging
import os
from pathlib import Path
from typing import Protocol

from daymark.exceptions import StorageReadError, StorageWriteError

logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    """Protocol for durable string slots addressed by key."""

    def get_item(self, key: str) -> str | None:
        """Return the slot value, or None if the slot is absent."""
        ...

    def set_item(self, key: str, value: str) -> None:
        """Write the slot value."""
        ...

    def remove_item(self, key: str) -> None:
        """Remove the slot if present."""
        ...


class MemoryStore:
    """In-process slots; nothing survives the process."""

    def __init__(self, items: dict[str, str] | None = None):
        self.items: dict[str, str] = dict(items or {})

    def get_item(self, key: str) -> str | None:
        return self.items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self.items[key] = value

    def remove_item(self, key: str) -> None:
        self.items.pop(key, None)


class JSONFileStore:
    """Slots kept as one JSON object in a single file.

    Each slot value is an opaque string. Writes go to a temporary file that
    replaces the original, so a failed write leaves the previous contents.
    """

    def __init__(self, path: Path):
        """
        Initialize file store.

        Args:
            path: JSON file holding all slots (created on first write)
        """
        self.path = path

    def _read_all(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            raw = self.path.read_text(encoding="utf-8")
        except OSError as e:
            raise StorageReadError(f"Failed to read {self.path}: {e}") from e
        if not raw.strip():
            return {}
        try:
            items = json.loads(raw)
        except json.JSONDecodeError as e:
            raise StorageReadError(f"Storage file {self.path} is not JSON: {e}") from e
        if not isinstance(items, dict):
            raise StorageReadError(f"Storage file {self.path} is not a JSON object")
        return items

    def _write_all(self, items: dict[str, str]) -> None:
        tmp = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(json.dumps(items, indent=2, ensure_ascii=False), encoding="utf-8")
            os.replace(tmp, self.path)
        except OSError as e:
            raise StorageWriteError(f"Failed to write {self.path}: {e}") from e
        logger.debug(f"Wrote {len(items)} slot(s) to {self.path}")

    def get_item(self, key: str) -> str | None:
        value = self._read_all().get(key)
        if value is not None and not isinstance(value, str):
            raise StorageReadError(f"Slot '{key}' in {self.path} is not a string")
        return value

    def set_item(self, key: str, value: str) -> None:
        try:
            items = self._read_all()
        except StorageReadError:
            # An unreadable file is replaced rather than blocking every write
            logger.warning(f"Overwriting unreadable storage file {self.path}")
            items = {}
        items[key] = value
        self._write_all(items)

    def remove_item(self, key: str) -> None:
        items = self._read_all()
        if key in items:
            del items[key]
            self._write_all(items)
