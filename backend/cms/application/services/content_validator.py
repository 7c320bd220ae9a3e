"""Payload validation and title derivation against a content type's field definitions."""

from datetime import date, datetime
from functools import lru_cache
from typing import Annotated, Any, Literal

from pydantic import (
    EmailStr,
    Field,
    HttpUrl,
    StrictBool,
    StrictStr,
    StringConstraints,
    TypeAdapter,
)
from pydantic import ValidationError as PydanticValidationError

from cms.domain.entities import ContentField, ContentType, FieldType
from cms.domain.exceptions import ValidationError

_TITLE_MAX_LENGTH = 500

_FiniteNumber = Annotated[float, Field(allow_inf_nan=False)]

_TYPE_MESSAGES = {
    FieldType.TEXT: "must be text",
    FieldType.TEXTAREA: "must be text",
    FieldType.EMAIL: "is not a valid email",
    FieldType.URL: "is not a valid URL",
    FieldType.NUMBER: "must be a number",
    FieldType.DATE: "is not a valid date",
    FieldType.BOOLEAN: "must be true or false",
}


def validate_payload(
    content_type: ContentType,
    data: Any,
    *,
    require_complete: bool,
) -> None:
    """Check ``data`` against the declared fields, collecting every problem.

    Type checks always apply. Required fields are only enforced when
    ``require_complete`` is set, i.e. when the payload is about to go live;
    drafts may be saved half-finished.
    """
    if not isinstance(data, dict):
        raise ValidationError("Payload must be an object")

    errors: list[str] = []
    if require_complete:
        errors.extend(
            f"{name} is required"
            for name in content_type.required_fields
            if _is_blank(data.get(name))
        )
    for field_def in content_type.fields:
        value = data.get(field_def.name)
        if not _is_blank(value):
            errors.extend(_check_value(field_def, value))

    if errors:
        raise ValidationError(f"Invalid {content_type.name} payload", errors)


def derive_title(
    content_type: ContentType,
    data: dict[str, Any],
    supplied: str | None = None,
) -> str:
    """Denormalized display title for an item holding ``data``."""
    if content_type.title_field:
        candidate = data.get(content_type.title_field)
    else:
        candidate = supplied
    if isinstance(candidate, str) and candidate.strip():
        return candidate.strip()[:_TITLE_MAX_LENGTH]
    return content_type.default_title


def _is_blank(value: Any) -> bool:
    return value is None or value == ""


@lru_cache(maxsize=None)
def _adapter_for(field_def: ContentField) -> TypeAdapter:
    """Pydantic adapter enforcing one field's declared type and constraints."""
    if field_def.type in (FieldType.TEXT, FieldType.TEXTAREA):
        return TypeAdapter(
            Annotated[
                StrictStr,
                StringConstraints(
                    min_length=field_def.min_length,
                    max_length=field_def.max_length,
                    pattern=field_def.pattern,
                ),
            ]
        )
    if field_def.type == FieldType.EMAIL:
        return TypeAdapter(EmailStr)
    if field_def.type == FieldType.URL:
        return TypeAdapter(HttpUrl)
    if field_def.type == FieldType.NUMBER:
        return TypeAdapter(_FiniteNumber)
    if field_def.type == FieldType.DATE:
        return TypeAdapter(datetime | date)
    if field_def.type == FieldType.SELECT and field_def.options:
        return TypeAdapter(Literal[field_def.options])
    if field_def.type == FieldType.BOOLEAN:
        return TypeAdapter(StrictBool)
    return TypeAdapter(Any)


def _check_value(field_def: ContentField, value: Any) -> list[str]:
    # Lax float parsing turns True into 1.0
    if field_def.type == FieldType.NUMBER and isinstance(value, bool):
        return [_message(field_def, "float_type")]
    try:
        _adapter_for(field_def).validate_python(value)
    except PydanticValidationError as exc:
        return [_message(field_def, err["type"]) for err in exc.errors()[:1]]
    return []


def _message(field_def: ContentField, error_type: str) -> str:
    """Translate a pydantic error type into the field-level message clients see."""
    name = field_def.name
    if error_type == "string_too_short":
        return f"{name} must be at least {field_def.min_length} characters"
    if error_type == "string_too_long":
        return f"{name} must be at most {field_def.max_length} characters"
    if error_type == "string_pattern_mismatch":
        return f"{name} format is invalid"
    if field_def.type == FieldType.SELECT:
        return f"{name} must be one of: {', '.join(field_def.options)}"
    return f"{name} {_TYPE_MESSAGES[field_def.type]}"
