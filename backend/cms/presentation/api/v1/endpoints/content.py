"""Content item endpoints: public reads, editor reads and lifecycle writes."""

from typing import Literal

from fastapi import APIRouter, Depends, Query, status

from cms.application.schemas import (
    ActivityEntryResponse,
    ActivityLogResponse,
    ContentCreate,
    ContentItemResponse,
    ContentListResponse,
    ContentUpdate,
    EditableContentResponse,
    PublicContentListResponse,
    PublicContentResponse,
)
from cms.application.services import (
    ContentItemService,
    ContentResolutionPolicy,
    build_activity_log,
)
from cms.domain.exceptions import ContentError
from cms.infrastructure.dependencies import get_content_item_service, get_resolution_policy
from cms.presentation.api.v1.endpoints.common import editable_response, to_http_exception

router = APIRouter(prefix="/cms/{site_id}/content/{content_type_id}", tags=["Content"])

Visibility = Literal["published", "all"]


@router.get("", response_model=None)
async def list_content(
    site_id: str,
    content_type_id: str,
    visibility: Visibility = Query(
        "published", alias="status", description="'published' for the public site, 'all' for editors"
    ),
    q: str | None = Query(None, description="Case-insensitive title search"),
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
    policy: ContentResolutionPolicy = Depends(get_resolution_policy),
) -> ContentListResponse | PublicContentListResponse:
    """List items of one content type, newest first."""
    try:
        if visibility == "all":
            items = await policy.list_admin(site_id, content_type_id, search=q, skip=skip, limit=limit)
            total = await policy.count_admin(site_id, content_type_id, search=q)
            return ContentListResponse(
                items=[ContentItemResponse.model_validate(i, from_attributes=True) for i in items],
                total=total,
                limit=limit,
                skip=skip,
                has_more=skip + len(items) < total,
            )
        items = await policy.list_public(site_id, content_type_id, search=q, skip=skip, limit=limit)
        total = await policy.count_public(site_id, content_type_id, search=q)
    except ContentError as e:
        raise to_http_exception(e) from e
    return PublicContentListResponse(
        items=[PublicContentResponse.model_validate(i, from_attributes=True) for i in items],
        total=total,
        limit=limit,
        skip=skip,
        has_more=skip + len(items) < total,
    )


@router.post("", response_model=ContentItemResponse, status_code=status.HTTP_201_CREATED)
async def create_content(
    site_id: str,
    content_type_id: str,
    body: ContentCreate,
    service: ContentItemService = Depends(get_content_item_service),
) -> ContentItemResponse:
    """Create an item as a draft or directly as published."""
    try:
        item = await service.create_item(
            site_id,
            content_type_id,
            body.data,
            body.status,
            content_id=body.content_id,
            title=body.title,
        )
    except ContentError as e:
        raise to_http_exception(e) from e
    return ContentItemResponse.model_validate(item, from_attributes=True)


@router.get("/{content_id}", response_model=None)
async def get_content(
    site_id: str,
    content_type_id: str,
    content_id: str,
    visibility: Visibility = Query("published", alias="status"),
    policy: ContentResolutionPolicy = Depends(get_resolution_policy),
    service: ContentItemService = Depends(get_content_item_service),
) -> ContentItemResponse | PublicContentResponse:
    """Retrieve one item. The public view 404s unless the item is published."""
    try:
        if visibility == "all":
            item = await service.get_item(site_id, content_type_id, content_id)
            return ContentItemResponse.model_validate(item, from_attributes=True)
        item = await policy.get_public(site_id, content_type_id, content_id)
    except ContentError as e:
        raise to_http_exception(e) from e
    return PublicContentResponse.model_validate(item, from_attributes=True)


@router.put("/{content_id}", response_model=ContentItemResponse)
async def update_content(
    site_id: str,
    content_type_id: str,
    content_id: str,
    body: ContentUpdate,
    service: ContentItemService = Depends(get_content_item_service),
) -> ContentItemResponse:
    """Save an editor's form: ``draft`` keeps the live data, ``published`` replaces it."""
    try:
        item = await service.update_item(
            site_id, content_type_id, content_id, body.data, body.status, title=body.title
        )
    except ContentError as e:
        raise to_http_exception(e) from e
    return ContentItemResponse.model_validate(item, from_attributes=True)


@router.delete("/{content_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_content(
    site_id: str,
    content_type_id: str,
    content_id: str,
    service: ContentItemService = Depends(get_content_item_service),
) -> None:
    """Permanently delete an item."""
    try:
        await service.delete_item(site_id, content_type_id, content_id)
    except ContentError as e:
        raise to_http_exception(e) from e


@router.get("/{content_id}/edit", response_model=EditableContentResponse)
async def load_content_for_edit(
    site_id: str,
    content_type_id: str,
    content_id: str,
    policy: ContentResolutionPolicy = Depends(get_resolution_policy),
) -> EditableContentResponse:
    """The snapshot an editor continues from (pending draft if any)."""
    try:
        item, snapshot = await policy.load_for_edit(site_id, content_type_id, content_id)
    except ContentError as e:
        raise to_http_exception(e) from e
    return editable_response(item, snapshot)


@router.post("/{content_id}/discard-draft", response_model=ContentItemResponse)
async def discard_content_draft(
    site_id: str,
    content_type_id: str,
    content_id: str,
    service: ContentItemService = Depends(get_content_item_service),
) -> ContentItemResponse:
    """Throw away unpublished changes of a published item."""
    try:
        item = await service.discard_draft(site_id, content_type_id, content_id)
    except ContentError as e:
        raise to_http_exception(e) from e
    return ContentItemResponse.model_validate(item, from_attributes=True)


@router.get("/{content_id}/activity", response_model=ActivityLogResponse)
async def get_content_activity(
    site_id: str,
    content_type_id: str,
    content_id: str,
    service: ContentItemService = Depends(get_content_item_service),
) -> ActivityLogResponse:
    """Lifecycle events of an item, newest first."""
    try:
        item = await service.get_item(site_id, content_type_id, content_id)
    except ContentError as e:
        raise to_http_exception(e) from e
    return ActivityLogResponse(
        content_id=content_id,
        entries=[
            ActivityEntryResponse.model_validate(entry, from_attributes=True)
            for entry in build_activity_log(item)
        ],
    )
