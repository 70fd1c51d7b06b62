"""In-memory record store with whole-state persistence.

One ``RecordStore`` is built per process at startup and injected into
request handlers. It owns every entity; callers receive copies. Each
mutation rewrites the complete state through the backend, so two processes
pointed at the same file will overwrite each other. Run a single instance.
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from apphub.models.common import RecordModel
from apphub.models.enums import EntityKind
from apphub.schemas.registry import SCHEMA_REGISTRY
from apphub.store.backend import StorageBackend

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class RecordStore:
    """Typed entity collections keyed by integer ID, in insertion order."""

    def __init__(self, backend: StorageBackend):
        self._backend = backend
        self._records: dict[EntityKind, dict[int, RecordModel]] = {kind: {} for kind in EntityKind}
        self._next_ids: dict[EntityKind, int] = {kind: 1 for kind in EntityKind}
        self._batch_depth = 0
        self._dirty = False
        self._load()

    # ── Startup ───────────────────────────────────────────────────────────────

    def _load(self) -> None:
        state = self._backend.load()
        if state is None:
            return

        for kind, schema in SCHEMA_REGISTRY.items():
            raw_records = state.get(kind.value) or []
            if not isinstance(raw_records, list):
                logger.warning("Ignoring non-list %s collection in saved state", kind.value)
                raw_records = []

            collection = self._records[kind]
            for raw in raw_records:
                try:
                    record = schema.record.model_validate(raw)
                except PydanticValidationError as exc:
                    logger.warning(
                        "Skipping malformed %s record (%d errors)", schema.label, exc.error_count()
                    )
                    continue
                collection[record.id] = record

            stored_next = state.get(schema.counter_key)
            if not isinstance(stored_next, int) or isinstance(stored_next, bool):
                stored_next = 1
            self._next_ids[kind] = max(stored_next, max(collection, default=0) + 1)

        logger.info(
            "Record store loaded: %s",
            ", ".join(f"{kind.value}={len(records)}" for kind, records in self._records.items()),
        )

    # ── CRUD ──────────────────────────────────────────────────────────────────

    def create(self, kind: EntityKind, data: dict[str, Any]) -> RecordModel:
        """Assign the next ID, fill defaults and timestamps, store and persist."""
        schema = SCHEMA_REGISTRY[kind]
        now = _utcnow()
        record_id = self._next_ids[kind]

        fields = {**data, "id": record_id, "created_at": now}
        if schema.has_updated_at:
            fields["updated_at"] = now
        record = schema.record.model_validate(fields)

        self._next_ids[kind] = record_id + 1
        self._records[kind][record_id] = record
        self._persist()
        return record.model_copy(deep=True)

    def get(self, kind: EntityKind, record_id: int) -> RecordModel | None:
        record = self._records[kind].get(record_id)
        return record.model_copy(deep=True) if record else None

    def update(self, kind: EntityKind, record_id: int, partial: dict[str, Any]) -> RecordModel | None:
        """Shallow-merge ``partial`` onto an existing record and persist."""
        current = self._records[kind].get(record_id)
        if current is None:
            return None

        schema = SCHEMA_REGISTRY[kind]
        merged = {**current.model_dump(), **partial, "id": record_id}
        if schema.has_updated_at:
            merged["updated_at"] = _utcnow()
        record = schema.record.model_validate(merged)

        self._records[kind][record_id] = record
        self._persist()
        return record.model_copy(deep=True)

    def delete(self, kind: EntityKind, record_id: int) -> bool:
        if self._records[kind].pop(record_id, None) is None:
            return False
        self._persist()
        return True

    def list_all(self, kind: EntityKind) -> list[RecordModel]:
        """Every record of ``kind``, inactive ones included."""
        return [record.model_copy(deep=True) for record in self._records[kind].values()]

    def count(self, kind: EntityKind) -> int:
        return len(self._records[kind])

    # ── Persistence ───────────────────────────────────────────────────────────

    @contextmanager
    def batch(self) -> Iterator["RecordStore"]:
        """Defer persistence until the outermost batch exits, then write once."""
        self._batch_depth += 1
        try:
            yield self
        finally:
            self._batch_depth -= 1
            if self._batch_depth == 0 and self._dirty:
                self._flush()

    def snapshot(self) -> dict[str, Any]:
        """Full serializable state in the on-disk layout."""
        state: dict[str, Any] = {}
        for kind, schema in SCHEMA_REGISTRY.items():
            state[kind.value] = [record.to_json() for record in self._records[kind].values()]
            state[schema.counter_key] = self._next_ids[kind]
        return state

    def _persist(self) -> None:
        if self._batch_depth:
            self._dirty = True
            return
        self._flush()

    def _flush(self) -> None:
        self._dirty = False
        self._backend.save(self.snapshot())
