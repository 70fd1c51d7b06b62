"""Project requisition API routes."""

from typing import Any

from fastapi import APIRouter, Body

from apphub.dependencies import Store
from apphub.errors.exceptions import NotFoundError
from apphub.models.enums import EntityKind
from apphub.repositories.requisition_repo import RequisitionRepository
from apphub.schemas.validator import validate_entity

router = APIRouter(tags=["Requisitions"])


@router.get("/requisitions")
async def list_requisitions(store: Store) -> list[dict]:
    return [row.to_json() for row in RequisitionRepository(store).list_newest_first()]


@router.post("/requisitions", status_code=201)
async def create_requisition(store: Store, body: Any = Body(...)) -> dict:
    data = validate_entity(EntityKind.REQUISITION, body)
    return RequisitionRepository(store).create(data).to_json()


@router.get("/requisitions/{requisition_id}")
async def get_requisition(requisition_id: int, store: Store) -> dict:
    row = RequisitionRepository(store).get(requisition_id)
    if not row:
        raise NotFoundError("Requisition", requisition_id)
    return row.to_json()


@router.patch("/requisitions/{requisition_id}")
async def update_requisition(requisition_id: int, store: Store, body: Any = Body(...)) -> dict:
    """Edit a request or move it to any status; no transition rules apply."""
    data = validate_entity(EntityKind.REQUISITION, body, partial=True)
    row = RequisitionRepository(store).update(requisition_id, data)
    if not row:
        raise NotFoundError("Requisition", requisition_id)
    return row.to_json()


@router.delete("/requisitions/{requisition_id}")
async def delete_requisition(requisition_id: int, store: Store) -> dict:
    if not RequisitionRepository(store).delete(requisition_id):
        raise NotFoundError("Requisition", requisition_id)
    return {"message": "Requisition deleted successfully"}
