"""Pydantic models for categories and subcategories."""

from datetime import datetime

from pydantic import Field

from apphub.models.common import ApiModel, RecordModel


class CategoryCreate(ApiModel):
    name: str = Field(..., min_length=1, max_length=100)
    is_active: bool = True


class CategoryUpdate(ApiModel):
    name: str = Field(None, min_length=1, max_length=100)
    is_active: bool = None


class Category(RecordModel):
    name: str
    is_active: bool = True
    created_at: datetime


class SubcategoryCreate(ApiModel):
    name: str = Field(..., min_length=1, max_length=100)
    # Weak reference: the category is not required to exist.
    category_id: int = Field(..., ge=1)
    is_active: bool = True


class SubcategoryUpdate(ApiModel):
    name: str = Field(None, min_length=1, max_length=100)
    category_id: int = Field(None, ge=1)
    is_active: bool = None


class Subcategory(RecordModel):
    name: str
    category_id: int
    is_active: bool = True
    created_at: datetime
