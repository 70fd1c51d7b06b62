"""Catalog export/import API routes."""

from typing import Any

from fastapi import APIRouter, Body
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError

from apphub.dependencies import Store
from apphub.errors.exceptions import ValidationError
from apphub.models.transfer import ImportRequest
from apphub.schemas.validator import field_errors
from apphub.services.transfer import export_catalog, import_catalog

router = APIRouter(tags=["Transfer"])


@router.get("/export")
async def export_data(store: Store) -> JSONResponse:
    envelope = export_catalog(store)
    filename = f"apphub-export-{envelope.export_date:%Y-%m-%d}.json"
    return JSONResponse(
        content=envelope.to_json(),
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.post("/import")
async def import_data(store: Store, body: Any = Body(...)) -> dict:
    """Best-effort import: bad records are skipped and reported, never fatal."""
    try:
        payload = ImportRequest.model_validate(body)
    except PydanticValidationError as exc:
        raise ValidationError("Invalid import data format", field_errors(exc.errors())) from None
    return import_catalog(store, payload).to_json()
