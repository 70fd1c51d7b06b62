"""Storage backends for the record store.

The store hands a backend its complete state on every mutation and reads it
back once at startup. ``JsonFileBackend`` keeps that state in a single JSON
file; ``MemoryBackend`` keeps it in process for tests.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Protocol

from apphub.errors.exceptions import PersistenceError

logger = logging.getLogger(__name__)


class StorageBackend(Protocol):
    def load(self) -> dict[str, Any] | None:
        """Return the last saved state, or None when there is nothing usable."""
        ...

    def save(self, state: dict[str, Any]) -> None:
        """Replace the saved state with ``state``."""
        ...


class JsonFileBackend:
    """Whole-file JSON persistence: every save rewrites the entire file."""

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def load(self) -> dict[str, Any] | None:
        if not self.path.exists():
            logger.info("No data file at %s, starting empty", self.path)
            return None
        try:
            state = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
            logger.warning("Unreadable data file %s, starting empty: %s", self.path, exc)
            return None
        if not isinstance(state, dict):
            logger.warning("Data file %s does not hold a JSON object, starting empty", self.path)
            return None
        return state

    def save(self, state: dict[str, Any]) -> None:
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(json.dumps(state, indent=2), encoding="utf-8")
            os.replace(tmp_path, self.path)
        except OSError as exc:
            logger.error("Failed to write data file %s: %s", self.path, exc)
            raise PersistenceError() from exc


class MemoryBackend:
    """Keeps the serialized state in memory; counts saves."""

    def __init__(self, state: dict[str, Any] | None = None):
        self._data = json.dumps(state) if state is not None else None
        self.save_count = 0

    def load(self) -> dict[str, Any] | None:
        if self._data is None:
            return None
        return json.loads(self._data)

    def save(self, state: dict[str, Any]) -> None:
        self._data = json.dumps(state)
        self.save_count += 1
