"""Pydantic models for project requisitions."""

from datetime import datetime

from pydantic import EmailStr, Field, field_validator

from apphub.models.common import ApiModel, RecordModel, check_absolute_url
from apphub.models.enums import Priority, RequisitionStatus


def _blank_to_none(value: str | None) -> str | None:
    if value is None or not value.strip():
        return None
    return value


class RequisitionCreate(ApiModel):
    """Submission form. Status is not accepted here; new requests start pending."""

    title: str = Field(..., min_length=1, max_length=200)
    description: str = Field(..., min_length=1)
    requester_name: str = Field(..., min_length=1, max_length=200)
    requester_email: EmailStr
    priority: Priority = Priority.MEDIUM
    category: str = Field(..., min_length=1)
    expected_delivery: str | None = None
    attachments: list[str] = Field(default_factory=list)
    logo: str | None = None
    is_private: bool = False

    @field_validator("expected_delivery", "logo")
    @classmethod
    def _optional_text(cls, value: str | None) -> str | None:
        return _blank_to_none(value)


class RequisitionUpdate(ApiModel):
    title: str = Field(None, min_length=1, max_length=200)
    description: str = Field(None, min_length=1)
    requester_name: str = Field(None, min_length=1, max_length=200)
    requester_email: EmailStr = None
    priority: Priority = None
    category: str = Field(None, min_length=1)
    expected_delivery: str | None = None
    attachments: list[str] = None
    logo: str | None = None
    is_private: bool = None
    status: RequisitionStatus = None
    deployed_link: str | None = None

    @field_validator("expected_delivery", "logo")
    @classmethod
    def _optional_text(cls, value: str | None) -> str | None:
        return _blank_to_none(value)

    @field_validator("deployed_link")
    @classmethod
    def _deployed_link(cls, value: str | None) -> str | None:
        value = _blank_to_none(value)
        if value is None:
            return None
        return check_absolute_url(value)


class ProjectRequisition(RecordModel):
    title: str
    description: str
    requester_name: str
    requester_email: str
    priority: Priority = Priority.MEDIUM
    category: str
    expected_delivery: str | None = None
    attachments: list[str] = Field(default_factory=list)
    logo: str | None = None
    status: RequisitionStatus = RequisitionStatus.PENDING
    deployed_link: str | None = None
    is_private: bool = False
    created_at: datetime
    updated_at: datetime
