"""Domain entities describing content types: the field schema behind each kind of content."""

import copy
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class FieldType(str, Enum):
    """Value kinds a content field may declare."""

    TEXT = "text"
    TEXTAREA = "textarea"
    NUMBER = "number"
    EMAIL = "email"
    URL = "url"
    DATE = "date"
    SELECT = "select"
    BOOLEAN = "boolean"


@dataclass(frozen=True)
class ContentField:
    """A single declared field of a content type."""

    name: str
    type: FieldType = FieldType.TEXT
    required: bool = False
    min_length: int | None = None
    max_length: int | None = None
    pattern: str | None = None
    options: tuple[str, ...] = ()


@dataclass(frozen=True)
class ContentType:
    """A kind of content (projects, team, …) and the rules for its payloads.

    ``title_field`` names the payload key the display title is derived from;
    when it is ``None`` the title is whatever the caller supplies, or
    ``default_title``. Singleton types hold at most one item per site and
    carry ``defaults`` used before anything has been saved.
    """

    content_type_id: str
    name: str
    description: str = ""
    singleton: bool = False
    title_field: str | None = None
    default_title: str = "Untitled"
    fields: tuple[ContentField, ...] = ()
    defaults: dict[str, Any] = field(default_factory=dict)

    @property
    def required_fields(self) -> list[str]:
        return [f.name for f in self.fields if f.required]

    def default_payload(self) -> dict[str, Any]:
        return copy.deepcopy(self.defaults)
