"""Read-side policy: which snapshot each audience sees.

Public readers only ever see published ``data``. Editors see everything,
including the pending overlay. Singleton types (one item per site) read from
their declared defaults until something has been saved.
"""

import copy
from typing import Any

from cms.application.services.content_item_service import ContentItemService
from cms.application.services.content_type_registry import ContentTypeRegistry
from cms.domain.entities import ContentItem, ContentStatus, ContentType
from cms.domain.exceptions import NotFoundError, ValidationError


class ContentResolutionPolicy:
    def __init__(self, service: ContentItemService, registry: ContentTypeRegistry):
        self._service = service
        self._registry = registry

    # ── Public reads ─────────────────────────────────────────────────

    async def list_public(
        self,
        site_id: str,
        content_type_id: str,
        *,
        search: str | None = None,
        skip: int = 0,
        limit: int = 100,
    ) -> list[ContentItem]:
        return await self._service.list_items(
            site_id,
            content_type_id,
            status=ContentStatus.PUBLISHED,
            search=search,
            skip=skip,
            limit=limit,
        )

    async def count_public(
        self, site_id: str, content_type_id: str, *, search: str | None = None
    ) -> int:
        return await self._service.count_items(
            site_id, content_type_id, status=ContentStatus.PUBLISHED, search=search
        )

    async def get_public(self, site_id: str, content_type_id: str, content_id: str) -> ContentItem:
        """A published item; anything else is indistinguishable from missing."""
        item = await self._service.get_item(site_id, content_type_id, content_id)
        if item.status != ContentStatus.PUBLISHED:
            raise NotFoundError("ContentItem", content_id)
        return item

    # ── Editor reads ─────────────────────────────────────────────────

    async def list_admin(
        self,
        site_id: str,
        content_type_id: str,
        *,
        search: str | None = None,
        skip: int = 0,
        limit: int = 100,
    ) -> list[ContentItem]:
        return await self._service.list_items(
            site_id, content_type_id, search=search, skip=skip, limit=limit
        )

    async def count_admin(
        self, site_id: str, content_type_id: str, *, search: str | None = None
    ) -> int:
        return await self._service.count_items(site_id, content_type_id, search=search)

    async def load_for_edit(
        self, site_id: str, content_type_id: str, content_id: str
    ) -> tuple[ContentItem, dict[str, Any]]:
        """The stored item together with the snapshot the editor continues from."""
        item = await self._service.get_item(site_id, content_type_id, content_id)
        return item, item.resolve_for_edit()

    # ── Singletons ───────────────────────────────────────────────────

    async def get_singleton_for_edit(
        self, site_id: str, content_type_id: str
    ) -> tuple[ContentItem, dict[str, Any]]:
        """Existing singleton resolved for edit, or an unsaved item built from defaults."""
        content_type = self._singleton_type(content_type_id)
        item = await self._service.find_singleton(site_id, content_type_id)
        if item is None:
            item = ContentItem(
                site_id=site_id,
                content_type_id=content_type_id,
                content_id=None,
                title=content_type.default_title,
                data=content_type.default_payload(),
                status=ContentStatus.DRAFT,
                created_at=None,
                updated_at=None,
            )
        return item, item.resolve_for_edit()

    async def get_singleton_public(self, site_id: str, content_type_id: str) -> dict[str, Any]:
        """Defaults overlaid with the published payload, so every declared key has a value."""
        content_type = self._singleton_type(content_type_id)
        payload = content_type.default_payload()
        item = await self._service.find_singleton(site_id, content_type_id)
        if item is not None and item.status == ContentStatus.PUBLISHED:
            payload.update(copy.deepcopy(item.data))
        return payload

    async def save_singleton(
        self,
        site_id: str,
        content_type_id: str,
        fields: dict[str, Any],
        status: ContentStatus,
        *,
        title: str | None = None,
    ) -> ContentItem:
        """Get-or-create write: the first save creates the row, later saves update it."""
        self._singleton_type(content_type_id)
        item = await self._service.find_singleton(site_id, content_type_id)
        if item is None:
            return await self._service.create_item(
                site_id, content_type_id, fields, status, title=title
            )
        return await self._service.update_item(
            site_id, content_type_id, item.content_id, fields, status, title=title
        )

    def _singleton_type(self, content_type_id: str) -> ContentType:
        content_type = self._registry.get(content_type_id)
        if not content_type.singleton:
            raise ValidationError(
                f"Content type '{content_type_id}' is not a singleton",
                [f"{content_type_id} holds many items per site"],
            )
        return content_type
