from .content_item import (
    ContentItem,
    ContentStatus,
    generate_content_id,
    next_timestamp,
    utc_now,
)
from .content_type import ContentField, ContentType, FieldType
from .activity import ActivityAction, ActivityEntry

__all__ = [
    "ContentItem",
    "ContentStatus",
    "generate_content_id",
    "next_timestamp",
    "utc_now",
    "ContentField",
    "ContentType",
    "FieldType",
    "ActivityAction",
    "ActivityEntry",
]
