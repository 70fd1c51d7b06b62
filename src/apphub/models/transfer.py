"""Pydantic models for bulk export and import."""

from datetime import datetime
from typing import Any

from pydantic import Field

from apphub.models.common import ApiModel

EXPORT_VERSION = "1.0"


class ExportEnvelope(ApiModel):
    export_date: datetime
    version: str = EXPORT_VERSION
    apps: list[dict[str, Any]]
    categories: list[dict[str, Any]]
    subcategories: list[dict[str, Any]]
    project_requisitions: list[dict[str, Any]] = Field(default_factory=list)


class ImportRequest(ApiModel):
    """Records are validated one at a time during import, not here."""

    version: str | None = None
    apps: list[Any]
    categories: list[Any]
    subcategories: list[Any]
    project_requisitions: list[Any] | None = None


class ImportCounts(ApiModel):
    apps: int = 0
    categories: int = 0
    subcategories: int = 0
    requisitions: int = 0


class SkippedRecord(ApiModel):
    entity: str
    index: int
    reason: str


class ImportResult(ApiModel):
    message: str = "Import completed successfully"
    imported: ImportCounts = Field(default_factory=ImportCounts)
    skipped: list[SkippedRecord] = Field(default_factory=list)
