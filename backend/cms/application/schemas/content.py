"""Pydantic DTOs (Data Transfer Objects) for content items and content types."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from cms.domain.entities import ActivityAction, ContentStatus, FieldType


class ContentCreate(BaseModel):
    """Schema for creating a new content item."""

    content_id: str | None = Field(
        None, min_length=1, max_length=255,
        description="Client-chosen id; generated when omitted",
    )
    title: str | None = Field(
        None, max_length=500,
        description="Used only by content types without a title field",
    )
    data: dict[str, Any] = Field(
        default_factory=dict, examples=[{"title": "Solar Farm Foundations"}],
    )
    status: ContentStatus = ContentStatus.DRAFT


class ContentUpdate(BaseModel):
    """Schema for saving an editor's form. ``status`` picks draft, publish or archive."""

    title: str | None = Field(None, max_length=500)
    data: dict[str, Any] = Field(default_factory=dict)
    status: ContentStatus = ContentStatus.DRAFT


class ContentItemResponse(BaseModel):
    """Full editor view of a stored item, including the pending overlay."""

    content_id: str
    site_id: str
    content_type_id: str
    title: str
    status: ContentStatus
    data: dict[str, Any]
    draft_data: dict[str, Any] | None
    draft_title: str | None
    has_draft: bool
    created_at: datetime
    updated_at: datetime
    published_at: datetime | None

    model_config = {"from_attributes": True}


class PublicContentResponse(BaseModel):
    """What the public site reads. Never carries draft fields."""

    content_id: str
    content_type_id: str
    title: str
    data: dict[str, Any]
    created_at: datetime
    published_at: datetime | None

    model_config = {"from_attributes": True}


class EditableContentResponse(BaseModel):
    """The snapshot an editor continues from.

    ``content_id`` is null for a singleton that has never been saved.
    """

    content_id: str | None
    content_type_id: str
    title: str
    status: ContentStatus
    data: dict[str, Any]
    has_draft: bool
    is_persisted: bool
    updated_at: datetime | None
    published_at: datetime | None


class ContentListResponse(BaseModel):
    items: list[ContentItemResponse]
    total: int
    limit: int
    skip: int
    has_more: bool


class PublicContentListResponse(BaseModel):
    items: list[PublicContentResponse]
    total: int
    limit: int
    skip: int
    has_more: bool


class ActivityEntryResponse(BaseModel):
    id: str
    action: ActivityAction
    timestamp: datetime
    details: str | None = None

    model_config = {"from_attributes": True}


class ActivityLogResponse(BaseModel):
    content_id: str
    entries: list[ActivityEntryResponse]


class ContentFieldResponse(BaseModel):
    name: str
    type: FieldType
    required: bool
    min_length: int | None = None
    max_length: int | None = None
    pattern: str | None = None
    options: list[str] = Field(default_factory=list)

    model_config = {"from_attributes": True}


class ContentTypeResponse(BaseModel):
    """A registered content type and its declared fields."""

    content_type_id: str
    name: str
    description: str
    singleton: bool
    title_field: str | None
    default_title: str
    fields: list[ContentFieldResponse]

    model_config = {"from_attributes": True}


class SiteContentResponse(BaseModel):
    """Public singleton payload: documented defaults overlaid with the published data."""

    site_id: str
    data: dict[str, Any]
