"""Web app catalog API routes."""

from typing import Any

from fastapi import APIRouter, Body
from pydantic import ValidationError as PydanticValidationError

from apphub.dependencies import Store
from apphub.errors.exceptions import NotFoundError, ValidationError
from apphub.models.enums import EntityKind
from apphub.models.web_app import ReorderRequest
from apphub.repositories.web_app_repo import WebAppRepository
from apphub.schemas.validator import field_errors, validate_entity

router = APIRouter(tags=["Apps"])


@router.get("/apps")
async def list_web_apps(
    store: Store,
    search: str | None = None,
    category: str | None = None,
    subcategory: str | None = None,
) -> list[dict]:
    """List active apps, filtered when any query parameter is given."""
    repo = WebAppRepository(store)
    if search or category or subcategory:
        apps = repo.search(search, category, subcategory)
    else:
        apps = repo.list_active()
    return [app.to_json() for app in apps]


@router.post("/apps", status_code=201)
async def create_web_app(store: Store, body: Any = Body(...)) -> dict:
    data = validate_entity(EntityKind.WEB_APP, body)
    app = WebAppRepository(store).create(data)
    return app.to_json()


# Declared before /apps/{app_id} so "reorder" is not parsed as an id.
@router.patch("/apps/reorder")
async def reorder_web_apps(store: Store, body: Any = Body(...)) -> dict:
    try:
        request = ReorderRequest.model_validate(body)
    except PydanticValidationError as exc:
        raise ValidationError("Invalid reorder data", field_errors(exc.errors())) from None

    updated = WebAppRepository(store).reorder(request.reordered_ids)
    return {"message": "Apps reordered successfully", "updated": updated}


@router.get("/apps/{app_id}")
async def get_web_app(app_id: int, store: Store) -> dict:
    """Fetch one app by id, whether or not it is active."""
    app = WebAppRepository(store).get(app_id)
    if not app:
        raise NotFoundError("App", app_id)
    return app.to_json()


@router.patch("/apps/{app_id}")
async def update_web_app(app_id: int, store: Store, body: Any = Body(...)) -> dict:
    data = validate_entity(EntityKind.WEB_APP, body, partial=True)
    app = WebAppRepository(store).update(app_id, data)
    if not app:
        raise NotFoundError("App", app_id)
    return app.to_json()


@router.delete("/apps/{app_id}")
async def delete_web_app(app_id: int, store: Store) -> dict:
    if not WebAppRepository(store).delete(app_id):
        raise NotFoundError("App", app_id)
    return {"message": "App deleted successfully"}
