"""Bulk export and best-effort import of the catalog."""

import logging
from datetime import datetime, timezone
from typing import Any

from apphub.errors.exceptions import ValidationError
from apphub.models.enums import EntityKind
from apphub.models.transfer import EXPORT_VERSION, ExportEnvelope, ImportRequest, ImportResult, SkippedRecord
from apphub.repositories.category_repo import CategoryRepository, SubcategoryRepository
from apphub.repositories.requisition_repo import RequisitionRepository
from apphub.repositories.web_app_repo import WebAppRepository
from apphub.schemas.validator import validate_entity
from apphub.store.record_store import RecordStore

logger = logging.getLogger(__name__)


def export_catalog(store: RecordStore) -> ExportEnvelope:
    """Dump every app, category, subcategory and requisition, inactive ones included."""
    return ExportEnvelope(
        export_date=datetime.now(timezone.utc),
        version=EXPORT_VERSION,
        apps=[row.to_json() for row in WebAppRepository(store).list_all()],
        categories=[row.to_json() for row in CategoryRepository(store).list_all()],
        subcategories=[row.to_json() for row in SubcategoryRepository(store).list_all()],
        project_requisitions=[row.to_json() for row in RequisitionRepository(store).list_all()],
    )


def _describe(exc: ValidationError) -> str:
    if not exc.errors:
        return exc.message
    details = "; ".join(f"{err['field'] or 'record'}: {err['message']}" for err in exc.errors)
    return f"{exc.message}: {details}"


def _old_id(raw: Any) -> int | None:
    """Exported ID of a raw record, or None when it cannot key the remap table."""
    old_id = raw.get("id") if isinstance(raw, dict) else None
    return old_id if isinstance(old_id, int) else None


class CatalogImporter:
    """Imports an export envelope one record at a time.

    Categories go first so subcategory ``categoryId`` values can be remapped
    to the newly assigned IDs; IDs with no mapping are passed through
    unchanged. A record that fails is skipped with a reason and never stops
    the rest of the import.
    """

    def __init__(self, store: RecordStore):
        self.categories = CategoryRepository(store)
        self.subcategories = SubcategoryRepository(store)
        self.apps = WebAppRepository(store)
        self.requisitions = RequisitionRepository(store)
        self.result = ImportResult()
        self._category_ids: dict[int, int] = {}

    def run(self, payload: ImportRequest) -> ImportResult:
        self._each("categories", payload.categories, self._import_category)
        self._each("subcategories", payload.subcategories, self._import_subcategory)
        self._each("apps", payload.apps, self._import_app)
        self._each("requisitions", payload.project_requisitions or [], self._import_requisition)

        counts = self.result.imported
        logger.info(
            "Import finished: %d categories, %d subcategories, %d apps, %d requisitions, %d skipped",
            counts.categories,
            counts.subcategories,
            counts.apps,
            counts.requisitions,
            len(self.result.skipped),
        )
        return self.result

    def _each(self, entity: str, records: list[Any], handler) -> None:
        for index, raw in enumerate(records):
            try:
                handler(raw)
            except ValidationError as exc:
                self._skip(entity, index, _describe(exc))
                continue
            setattr(self.result.imported, entity, getattr(self.result.imported, entity) + 1)

    def _skip(self, entity: str, index: int, reason: str) -> None:
        self.result.skipped.append(SkippedRecord(entity=entity, index=index, reason=reason))

    def _import_category(self, raw: Any) -> None:
        data = validate_entity(EntityKind.CATEGORY, raw)
        existing = next((row for row in self.categories.list_all() if row.name == data["name"]), None)
        if existing is not None:
            # Reuse the existing category so its subcategories still attach.
            if _old_id(raw) is not None:
                self._category_ids[_old_id(raw)] = existing.id
            raise ValidationError(f"Category '{data['name']}' already exists")

        created = self.categories.create(data)
        if _old_id(raw) is not None:
            self._category_ids[_old_id(raw)] = created.id

    def _import_subcategory(self, raw: Any) -> None:
        if isinstance(raw, dict) and isinstance(raw.get("categoryId"), int):
            raw = {**raw, "categoryId": self._category_ids.get(raw["categoryId"], raw["categoryId"])}
        data = validate_entity(EntityKind.SUBCATEGORY, raw)

        duplicate = any(
            row.name == data["name"] and row.category_id == data["category_id"]
            for row in self.subcategories.list_all()
        )
        if duplicate:
            raise ValidationError(f"Subcategory '{data['name']}' already exists")
        self.subcategories.create(data)

    def _import_app(self, raw: Any) -> None:
        self.apps.create(validate_entity(EntityKind.WEB_APP, raw))

    def _import_requisition(self, raw: Any) -> None:
        data = validate_entity(EntityKind.REQUISITION, raw)
        triage = {key: raw[key] for key in ("status", "deployedLink") if raw.get(key)}
        triage = validate_entity(EntityKind.REQUISITION, triage, partial=True) if triage else {}

        created = self.requisitions.create(data)
        if triage:
            self.requisitions.update(created.id, triage)


def import_catalog(store: RecordStore, payload: ImportRequest) -> ImportResult:
    return CatalogImporter(store).run(payload)
