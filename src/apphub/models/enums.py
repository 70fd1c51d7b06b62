"""String enums for AppHub entities."""

from enum import StrEnum


class EntityKind(StrEnum):
    """Record collections held by the store; values double as on-disk keys."""

    USER = "users"
    WEB_APP = "webApps"
    CATEGORY = "categories"
    SUBCATEGORY = "subcategories"
    REQUISITION = "projectRequisitions"
    ANALYTICS_EVENT = "analyticsEvents"


class Priority(StrEnum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"


class RequisitionStatus(StrEnum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"


class ViewType(StrEnum):
    CARD_VIEW = "card_view"
    DETAIL_VIEW = "detail_view"
    LAUNCH = "launch"
