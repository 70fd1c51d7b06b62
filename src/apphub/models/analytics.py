"""Pydantic models for usage analytics."""

from datetime import datetime

from pydantic import Field

from apphub.models.common import ApiModel, RecordModel
from apphub.models.enums import ViewType


class AnalyticsEventCreate(ApiModel):
    # Weak reference; name and category are copied so history survives app deletion.
    app_id: int | None = None
    app_name: str = Field(..., min_length=1)
    app_category: str = Field(..., min_length=1)
    view_type: ViewType
    user_agent: str | None = None
    session_id: str | None = None
    ip_address: str | None = None


class AnalyticsEvent(RecordModel):
    app_id: int | None = None
    app_name: str
    app_category: str
    view_type: ViewType
    user_agent: str | None = None
    session_id: str | None = None
    ip_address: str | None = None
    created_at: datetime


class AppViewCount(ApiModel):
    app_id: int | None
    app_name: str
    app_category: str
    view_count: int


class CategoryViewCount(ApiModel):
    category: str
    view_count: int


class AnalyticsSummary(ApiModel):
    total_views: int
    most_viewed_apps: list[AppViewCount]
    views_by_category: list[CategoryViewCount]
    recent_views: list[AnalyticsEvent]
