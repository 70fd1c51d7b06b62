"""Base repository with common CRUD operations."""

from typing import Any, Generic, TypeVar

from apphub.models.common import RecordModel
from apphub.models.enums import EntityKind
from apphub.store.record_store import RecordStore

T = TypeVar("T", bound=RecordModel)


class BaseRepository(Generic[T]):
    """Typed view of one entity collection in the record store."""

    kind: EntityKind

    def __init__(self, store: RecordStore):
        self.store = store

    def get(self, record_id: int) -> T | None:
        return self.store.get(self.kind, record_id)

    def create(self, data: dict[str, Any]) -> T:
        return self.store.create(self.kind, data)

    def update(self, record_id: int, partial: dict[str, Any]) -> T | None:
        return self.store.update(self.kind, record_id, partial)

    def delete(self, record_id: int) -> bool:
        return self.store.delete(self.kind, record_id)

    def list_all(self) -> list[T]:
        return self.store.list_all(self.kind)

    def list_by_field(self, field: str, value: Any) -> list[T]:
        """List records whose attribute ``field`` equals ``value``."""
        return [row for row in self.list_all() if getattr(row, field) == value]
