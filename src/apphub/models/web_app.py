"""Pydantic models for the WebApp entity."""

from datetime import datetime

from pydantic import Field, field_validator

from apphub.models.common import ApiModel, RecordModel, check_absolute_url

DEFAULT_ICON = "fas fa-globe"


class WebAppCreate(ApiModel):
    name: str = Field(..., min_length=1, max_length=200)
    short_description: str | None = Field(None, max_length=500)
    description: str | None = None
    url: str
    category: str = Field(..., min_length=1)
    subcategory: str | None = None
    icon: str = Field(DEFAULT_ICON, min_length=1)
    is_active: bool = True
    attachments: list[str] = Field(default_factory=list)
    rating: int = Field(0, ge=0, le=5)

    @field_validator("url")
    @classmethod
    def _absolute_url(cls, value: str) -> str:
        return check_absolute_url(value)


class WebAppUpdate(ApiModel):
    """Partial update: omitted fields pass, explicit nulls only where nullable."""

    name: str = Field(None, min_length=1, max_length=200)
    short_description: str | None = Field(None, max_length=500)
    description: str | None = None
    url: str = None
    category: str = Field(None, min_length=1)
    subcategory: str | None = None
    icon: str = Field(None, min_length=1)
    is_active: bool = None
    attachments: list[str] = None
    rating: int = Field(None, ge=0, le=5)

    @field_validator("url")
    @classmethod
    def _absolute_url(cls, value: str) -> str:
        return check_absolute_url(value)


class WebApp(RecordModel):
    name: str
    short_description: str | None = None
    description: str | None = None
    url: str
    category: str
    subcategory: str | None = None
    icon: str = DEFAULT_ICON
    is_active: bool = True
    attachments: list[str] = Field(default_factory=list)
    rating: int = 0
    sort_order: int = 0
    created_at: datetime
    updated_at: datetime


class ReorderRequest(ApiModel):
    reordered_ids: list[int] = Field(..., min_length=1)
