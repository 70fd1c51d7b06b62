"""Category and subcategory API routes."""

from typing import Any

from fastapi import APIRouter, Body, Query

from apphub.dependencies import Store
from apphub.errors.exceptions import NotFoundError
from apphub.models.enums import EntityKind
from apphub.repositories.category_repo import CategoryRepository, SubcategoryRepository
from apphub.schemas.validator import validate_entity

router = APIRouter(tags=["Categories"])


# ── Categories ────────────────────────────────────────────────────────────────

@router.get("/categories")
async def list_categories(store: Store) -> list[dict]:
    return [row.to_json() for row in CategoryRepository(store).list_active()]


@router.post("/categories", status_code=201)
async def create_category(store: Store, body: Any = Body(...)) -> dict:
    data = validate_entity(EntityKind.CATEGORY, body)
    return CategoryRepository(store).create(data).to_json()


@router.get("/categories/{category_id}")
async def get_category(category_id: int, store: Store) -> dict:
    row = CategoryRepository(store).get(category_id)
    if not row:
        raise NotFoundError("Category", category_id)
    return row.to_json()


@router.patch("/categories/{category_id}")
async def update_category(category_id: int, store: Store, body: Any = Body(...)) -> dict:
    data = validate_entity(EntityKind.CATEGORY, body, partial=True)
    row = CategoryRepository(store).update(category_id, data)
    if not row:
        raise NotFoundError("Category", category_id)
    return row.to_json()


@router.delete("/categories/{category_id}")
async def delete_category(category_id: int, store: Store) -> dict:
    """Hard delete. Apps naming this category keep the name."""
    if not CategoryRepository(store).delete(category_id):
        raise NotFoundError("Category", category_id)
    return {"message": "Category deleted successfully"}


# ── Subcategories ─────────────────────────────────────────────────────────────

@router.get("/subcategories")
async def list_subcategories(
    store: Store,
    category_id: int | None = Query(None, alias="categoryId"),
) -> list[dict]:
    rows = SubcategoryRepository(store).list_active(category_id=category_id)
    return [row.to_json() for row in rows]


@router.post("/subcategories", status_code=201)
async def create_subcategory(store: Store, body: Any = Body(...)) -> dict:
    data = validate_entity(EntityKind.SUBCATEGORY, body)
    return SubcategoryRepository(store).create(data).to_json()


@router.get("/subcategories/{subcategory_id}")
async def get_subcategory(subcategory_id: int, store: Store) -> dict:
    row = SubcategoryRepository(store).get(subcategory_id)
    if not row:
        raise NotFoundError("Subcategory", subcategory_id)
    return row.to_json()


@router.patch("/subcategories/{subcategory_id}")
async def update_subcategory(subcategory_id: int, store: Store, body: Any = Body(...)) -> dict:
    data = validate_entity(EntityKind.SUBCATEGORY, body, partial=True)
    row = SubcategoryRepository(store).update(subcategory_id, data)
    if not row:
        raise NotFoundError("Subcategory", subcategory_id)
    return row.to_json()


@router.delete("/subcategories/{subcategory_id}")
async def delete_subcategory(subcategory_id: int, store: Store) -> dict:
    if not SubcategoryRepository(store).delete(subcategory_id):
        raise NotFoundError("Subcategory", subcategory_id)
    return {"message": "Subcategory deleted successfully"}
