"""Shared helpers for the content endpoints."""

from typing import Any

from fastapi import HTTPException, status

from cms.application.schemas import EditableContentResponse
from cms.domain.entities import ContentItem
from cms.domain.exceptions import (
    ContentError,
    DuplicateEntityError,
    InvalidStateError,
    NotFoundError,
    StorageError,
    ValidationError,
)


def to_http_exception(exc: ContentError) -> HTTPException:
    """Translate a domain error into the matching HTTP status."""
    if isinstance(exc, NotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
    if isinstance(exc, DuplicateEntityError):
        return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc))
    if isinstance(exc, ValidationError):
        return HTTPException(
            status_code=422,
            detail={"message": exc.message, "errors": exc.errors},
        )
    if isinstance(exc, InvalidStateError):
        return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc))
    if isinstance(exc, StorageError):
        return HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Content storage is unavailable, please retry",
        )
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc))


def editable_response(item: ContentItem, snapshot: dict[str, Any]) -> EditableContentResponse:
    return EditableContentResponse(
        content_id=item.content_id,
        content_type_id=item.content_type_id,
        title=item.edit_title,
        status=item.status,
        data=snapshot,
        has_draft=item.has_draft,
        is_persisted=item.is_persisted,
        updated_at=item.updated_at,
        published_at=item.published_at,
    )
