"""Content type registry: parses content type definitions from YAML.

Loaded once at startup; the definitions are immutable for the lifetime of
the process.
"""

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Any

import yaml

from cms.domain.entities import ContentField, ContentType, FieldType
from cms.domain.exceptions import NotFoundError

logger = logging.getLogger(__name__)


class ContentTypeRegistry:
    """Lookup of the content types a site can store."""

    def __init__(self, content_types: Iterable[ContentType]):
        self._types: dict[str, ContentType] = {}
        for content_type in content_types:
            if content_type.content_type_id in self._types:
                raise ValueError(
                    f"Content type '{content_type.content_type_id}' is defined twice"
                )
            self._types[content_type.content_type_id] = content_type

    @classmethod
    def from_yaml(cls, path: str | Path) -> "ContentTypeRegistry":
        """Build a registry from a YAML file with a top-level ``content_types`` list."""
        path = Path(path)
        raw = yaml.safe_load(path.read_text("utf-8")) or {}
        entries = raw.get("content_types", [])
        registry = cls(_parse_content_type(entry) for entry in entries)
        logger.info("Loaded %d content types from %s", len(registry), path.name)
        return registry

    def get(self, content_type_id: str) -> ContentType:
        content_type = self._types.get(content_type_id)
        if content_type is None:
            raise NotFoundError("ContentType", content_type_id)
        return content_type

    def all(self) -> list[ContentType]:
        return list(self._types.values())

    def __contains__(self, content_type_id: object) -> bool:
        return content_type_id in self._types

    def __len__(self) -> int:
        return len(self._types)


def _parse_content_type(entry: dict[str, Any]) -> ContentType:
    content_type_id = entry.get("content_type_id")
    if not content_type_id:
        raise ValueError("Content type entry is missing 'content_type_id'")

    return ContentType(
        content_type_id=content_type_id,
        name=entry.get("name", content_type_id),
        description=entry.get("description", ""),
        singleton=bool(entry.get("singleton", False)),
        title_field=entry.get("title_field"),
        default_title=entry.get("default_title", "Untitled"),
        fields=tuple(_parse_field(content_type_id, f) for f in entry.get("fields", [])),
        defaults=dict(entry.get("defaults") or {}),
    )


def _parse_field(content_type_id: str, entry: dict[str, Any]) -> ContentField:
    try:
        field_type = FieldType(entry.get("type", FieldType.TEXT.value))
    except ValueError as exc:
        raise ValueError(
            f"Content type '{content_type_id}' field '{entry.get('name')}' "
            f"has unknown type '{entry.get('type')}'"
        ) from exc

    return ContentField(
        name=entry["name"],
        type=field_type,
        required=bool(entry.get("required", False)),
        min_length=entry.get("min_length"),
        max_length=entry.get("max_length"),
        pattern=entry.get("pattern"),
        options=tuple(entry.get("options") or ()),
    )
