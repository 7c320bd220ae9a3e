from .content import (
    ActivityEntryResponse,
    ActivityLogResponse,
    ContentCreate,
    ContentFieldResponse,
    ContentItemResponse,
    ContentListResponse,
    ContentTypeResponse,
    ContentUpdate,
    EditableContentResponse,
    PublicContentListResponse,
    PublicContentResponse,
    SiteContentResponse,
)

__all__ = [
    "ActivityEntryResponse",
    "ActivityLogResponse",
    "ContentCreate",
    "ContentFieldResponse",
    "ContentItemResponse",
    "ContentListResponse",
    "ContentTypeResponse",
    "ContentUpdate",
    "EditableContentResponse",
    "PublicContentListResponse",
    "PublicContentResponse",
    "SiteContentResponse",
]
