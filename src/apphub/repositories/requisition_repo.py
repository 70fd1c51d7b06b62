"""Project requisition repository."""

from typing import Any

from apphub.models.enums import EntityKind, RequisitionStatus
from apphub.models.requisition import ProjectRequisition
from apphub.repositories.base import BaseRepository


class RequisitionRepository(BaseRepository[ProjectRequisition]):
    kind = EntityKind.REQUISITION

    def create(self, data: dict[str, Any]) -> ProjectRequisition:
        # New submissions always enter triage as pending.
        return super().create({**data, "status": RequisitionStatus.PENDING})

    def list_newest_first(self) -> list[ProjectRequisition]:
        return sorted(self.list_all(), key=lambda row: (row.created_at, row.id), reverse=True)
