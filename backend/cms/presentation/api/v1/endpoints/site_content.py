"""Homepage site-content endpoints: the one singleton content type per site."""

from fastapi import APIRouter, Depends

from cms.application.schemas import (
    ContentItemResponse,
    ContentUpdate,
    EditableContentResponse,
    SiteContentResponse,
)
from cms.application.services import ContentResolutionPolicy
from cms.domain.exceptions import ContentError
from cms.infrastructure.dependencies import get_resolution_policy
from cms.presentation.api.v1.endpoints.common import editable_response, to_http_exception

SITE_CONTENT_TYPE = "site-content"

router = APIRouter(prefix="/cms/{site_id}/site-content", tags=["Site Content"])


@router.get("", response_model=SiteContentResponse)
async def get_site_content(
    site_id: str,
    policy: ContentResolutionPolicy = Depends(get_resolution_policy),
) -> SiteContentResponse:
    """Published homepage content with defaults filled in for unset keys."""
    try:
        data = await policy.get_singleton_public(site_id, SITE_CONTENT_TYPE)
    except ContentError as e:
        raise to_http_exception(e) from e
    return SiteContentResponse(site_id=site_id, data=data)


@router.get("/edit", response_model=EditableContentResponse)
async def load_site_content_for_edit(
    site_id: str,
    policy: ContentResolutionPolicy = Depends(get_resolution_policy),
) -> EditableContentResponse:
    """Editor view; an unsaved default item when nothing has been stored yet."""
    try:
        item, snapshot = await policy.get_singleton_for_edit(site_id, SITE_CONTENT_TYPE)
    except ContentError as e:
        raise to_http_exception(e) from e
    return editable_response(item, snapshot)


@router.put("", response_model=ContentItemResponse)
async def save_site_content(
    site_id: str,
    body: ContentUpdate,
    policy: ContentResolutionPolicy = Depends(get_resolution_policy),
) -> ContentItemResponse:
    """Create the homepage content on first save, update it afterwards."""
    try:
        item = await policy.save_singleton(
            site_id, SITE_CONTENT_TYPE, body.data, body.status, title=body.title
        )
    except ContentError as e:
        raise to_http_exception(e) from e
    return ContentItemResponse.model_validate(item, from_attributes=True)
