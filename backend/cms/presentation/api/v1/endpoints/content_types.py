"""Content type catalogue endpoints (read-only; types are defined in YAML)."""

from fastapi import APIRouter, Depends

from cms.application.schemas import ContentFieldResponse, ContentTypeResponse
from cms.application.services import ContentTypeRegistry
from cms.domain.exceptions import ContentError
from cms.infrastructure.dependencies import get_content_type_registry
from cms.presentation.api.v1.endpoints.common import to_http_exception

router = APIRouter(prefix="/cms/{site_id}/content-types", tags=["Content Types"])


@router.get("", response_model=list[ContentTypeResponse])
async def list_content_types(
    site_id: str,
    registry: ContentTypeRegistry = Depends(get_content_type_registry),
) -> list[ContentTypeResponse]:
    """All content types a site can store, with their field definitions."""
    return [
        ContentTypeResponse.model_validate(ct, from_attributes=True) for ct in registry.all()
    ]


@router.get("/{content_type_id}", response_model=ContentTypeResponse)
async def get_content_type(
    site_id: str,
    content_type_id: str,
    registry: ContentTypeRegistry = Depends(get_content_type_registry),
) -> ContentTypeResponse:
    """A single content type by id."""
    try:
        content_type = registry.get(content_type_id)
    except ContentError as e:
        raise to_http_exception(e) from e
    return ContentTypeResponse.model_validate(content_type, from_attributes=True)


@router.get("/{content_type_id}/fields", response_model=list[ContentFieldResponse])
async def list_content_type_fields(
    site_id: str,
    content_type_id: str,
    registry: ContentTypeRegistry = Depends(get_content_type_registry),
) -> list[ContentFieldResponse]:
    try:
        content_type = registry.get(content_type_id)
    except ContentError as e:
        raise to_http_exception(e) from e
    return [
        ContentFieldResponse.model_validate(f, from_attributes=True) for f in content_type.fields
    ]
