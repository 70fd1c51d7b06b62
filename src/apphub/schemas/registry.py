"""Registry mapping each entity kind to its models and on-disk counter."""

from dataclasses import dataclass

from apphub.models.analytics import AnalyticsEvent, AnalyticsEventCreate
from apphub.models.category import (
    Category,
    CategoryCreate,
    CategoryUpdate,
    Subcategory,
    SubcategoryCreate,
    SubcategoryUpdate,
)
from apphub.models.common import ApiModel, RecordModel
from apphub.models.enums import EntityKind
from apphub.models.requisition import ProjectRequisition, RequisitionCreate, RequisitionUpdate
from apphub.models.user import User, UserCreate
from apphub.models.web_app import WebApp, WebAppCreate, WebAppUpdate


@dataclass(frozen=True)
class EntitySchema:
    label: str
    record: type[RecordModel]
    create: type[ApiModel]
    update: type[ApiModel] | None
    counter_key: str

    @property
    def has_updated_at(self) -> bool:
        return "updated_at" in self.record.model_fields


SCHEMA_REGISTRY: dict[EntityKind, EntitySchema] = {
    EntityKind.USER: EntitySchema("user", User, UserCreate, None, "nextUserId"),
    EntityKind.WEB_APP: EntitySchema("app", WebApp, WebAppCreate, WebAppUpdate, "nextAppId"),
    EntityKind.CATEGORY: EntitySchema(
        "category", Category, CategoryCreate, CategoryUpdate, "nextCategoryId"
    ),
    EntityKind.SUBCATEGORY: EntitySchema(
        "subcategory", Subcategory, SubcategoryCreate, SubcategoryUpdate, "nextSubcategoryId"
    ),
    EntityKind.REQUISITION: EntitySchema(
        "requisition", ProjectRequisition, RequisitionCreate, RequisitionUpdate, "nextRequisitionId"
    ),
    EntityKind.ANALYTICS_EVENT: EntitySchema(
        "analytics", AnalyticsEvent, AnalyticsEventCreate, None, "nextAnalyticsId"
    ),
}
