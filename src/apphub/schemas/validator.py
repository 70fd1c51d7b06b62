"""Entity validation: raw input in, normalized field dict or ValidationError out."""

from collections.abc import Iterable
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from apphub.errors.exceptions import ValidationError
from apphub.models.enums import EntityKind
from apphub.schemas.registry import SCHEMA_REGISTRY

_REQUEST_LOCATIONS = {"body", "query", "path", "header", "cookie"}


def field_errors(errors: Iterable[dict[str, Any]]) -> list[dict[str, Any]]:
    """Flatten pydantic error dicts into ``{field, message, type}`` entries."""
    result = []
    for err in errors:
        loc = list(err.get("loc", ()))
        if loc and loc[0] in _REQUEST_LOCATIONS:
            loc = loc[1:]
        result.append({
            "field": ".".join(str(part) for part in loc),
            "message": err.get("msg", "Invalid value"),
            "type": err.get("type"),
        })
    return result


def validate_entity(kind: EntityKind, data: Any, partial: bool = False) -> dict[str, Any]:
    """Validate ``data`` against the create (or, when ``partial``, update) rules.

    Every violated constraint is reported, not just the first. For partial
    validation only the fields present in ``data`` are returned, so callers
    can merge the result without touching omitted fields.

    Raises:
        ValidationError: If any field fails, or ``data`` is not an object.
        KeyError: If ``kind`` has no update model and ``partial`` is set.
    """
    schema = SCHEMA_REGISTRY[kind]
    model_class = schema.update if partial else schema.create
    if model_class is None:
        raise KeyError(f"{schema.label} records cannot be updated")

    message = f"Invalid {schema.label} data"
    if not isinstance(data, dict):
        raise ValidationError(
            message,
            [{"field": "", "message": "Expected a JSON object", "type": "dict_type"}],
        )

    try:
        model = model_class.model_validate(data)
    except PydanticValidationError as exc:
        raise ValidationError(message, field_errors(exc.errors())) from None

    return model.model_dump(exclude_unset=partial)
