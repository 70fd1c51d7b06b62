"""Shared pydantic bases, validators and response shapes."""

from typing import Any

from pydantic import AnyUrl, BaseModel, ConfigDict, TypeAdapter
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

_url_adapter = TypeAdapter(AnyUrl)


class ApiModel(BaseModel):
    """Base for every wire/disk model: snake_case in Python, camelCase in JSON."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_json(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


class RecordModel(ApiModel):
    """Stored entity with its store-assigned integer key."""

    id: int


def check_absolute_url(value: str) -> str:
    """Return ``value`` unchanged if it parses as an absolute URL."""
    try:
        _url_adapter.validate_python(value)
    except PydanticValidationError:
        raise ValueError("Invalid URL") from None
    return value


class FieldError(BaseModel):
    """One violated field constraint."""

    field: str
    message: str
    type: str | None = None


class ErrorResponse(BaseModel):
    """Body of every non-2xx response."""

    message: str
    errors: list[FieldError] | None = None
