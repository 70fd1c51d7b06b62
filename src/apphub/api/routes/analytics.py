"""Usage analytics API routes."""

from typing import Any

from fastapi import APIRouter, Body, Request

from apphub.dependencies import Store
from apphub.models.enums import EntityKind
from apphub.repositories.analytics_repo import AnalyticsRepository
from apphub.schemas.validator import validate_entity

router = APIRouter(tags=["Analytics"])


@router.post("/analytics", status_code=201)
async def record_view(request: Request, store: Store, body: Any = Body(...)) -> dict:
    data = validate_entity(EntityKind.ANALYTICS_EVENT, body)
    if not data.get("ip_address") and request.client:
        data["ip_address"] = request.client.host
    return AnalyticsRepository(store).create(data).to_json()


@router.get("/analytics/summary")
async def analytics_summary(store: Store) -> dict:
    return AnalyticsRepository(store).summary().to_json()
