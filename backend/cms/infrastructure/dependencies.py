"""FastAPI dependency injection: wires infrastructure to application layer."""

from collections.abc import AsyncGenerator
from functools import lru_cache

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from cms.config import get_settings
from cms.application.services import (
    ContentItemService,
    ContentResolutionPolicy,
    ContentTypeRegistry,
)
from cms.infrastructure.database.session import get_db_session
from cms.infrastructure.database.repositories import SQLAlchemyContentItemRepository


@lru_cache
def get_content_type_registry() -> ContentTypeRegistry:
    """Content types are read from YAML once per process."""
    return ContentTypeRegistry.from_yaml(get_settings().content_types_path)


async def get_content_item_service(
    session: AsyncSession = Depends(get_db_session),
    registry: ContentTypeRegistry = Depends(get_content_type_registry),
) -> AsyncGenerator[ContentItemService, None]:
    """Provides a ContentItemService with its repository wired up."""
    repository = SQLAlchemyContentItemRepository(session)
    yield ContentItemService(repository, registry)


async def get_resolution_policy(
    service: ContentItemService = Depends(get_content_item_service),
    registry: ContentTypeRegistry = Depends(get_content_type_registry),
) -> AsyncGenerator[ContentResolutionPolicy, None]:
    """Provides the read-side policy sharing the request's service and session."""
    yield ContentResolutionPolicy(service, registry)
