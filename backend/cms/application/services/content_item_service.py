"""Application service (use case) for the content draft/publish lifecycle.

Every operation loads a fresh entity, applies one transition in memory and
persists it with a single repository write. Nothing is written when a
transition or validation fails, so callers may safely retry.
"""

from typing import Any

from cms.application.interfaces import ContentRepository
from cms.application.services.content_type_registry import ContentTypeRegistry
from cms.application.services.content_validator import derive_title, validate_payload
from cms.domain.entities import ContentItem, ContentStatus, generate_content_id
from cms.domain.exceptions import DuplicateEntityError, NotFoundError
from cms.infrastructure.logging.colored_logger import TransitionLogger, TransitionStage

tlog = TransitionLogger("ContentItemService")


def _target(content_type_id: str, content_id: str | None) -> str:
    return f"{content_type_id}/{content_id}"


class ContentItemService:
    """Owns the state transitions of content items. Depends on the repository port (DI)."""

    def __init__(self, repository: ContentRepository, registry: ContentTypeRegistry):
        self._repository = repository
        self._registry = registry

    # ── Reads ────────────────────────────────────────────────────────

    async def get_item(self, site_id: str, content_type_id: str, content_id: str) -> ContentItem:
        self._registry.get(content_type_id)
        item = await self._repository.get(site_id, content_type_id, content_id)
        if item is None:
            raise NotFoundError("ContentItem", content_id)
        return item

    async def list_items(
        self,
        site_id: str,
        content_type_id: str,
        *,
        status: ContentStatus | None = None,
        search: str | None = None,
        skip: int = 0,
        limit: int = 100,
    ) -> list[ContentItem]:
        self._registry.get(content_type_id)
        return await self._repository.get_all(
            site_id,
            content_type_id,
            status=status,
            search=search,
            skip=skip,
            limit=limit,
        )

    async def count_items(
        self,
        site_id: str,
        content_type_id: str,
        *,
        status: ContentStatus | None = None,
        search: str | None = None,
    ) -> int:
        self._registry.get(content_type_id)
        return await self._repository.count(
            site_id, content_type_id, status=status, search=search
        )

    async def find_singleton(self, site_id: str, content_type_id: str) -> ContentItem | None:
        """The one stored item of a singleton type, if it has been saved yet."""
        self._registry.get(content_type_id)
        items = await self._repository.get_all(site_id, content_type_id, limit=1)
        return items[0] if items else None

    async def resolve_for_edit(
        self, site_id: str, content_type_id: str, content_id: str
    ) -> dict[str, Any]:
        """The snapshot an editor continues from: pending draft if any, else live data."""
        item = await self.get_item(site_id, content_type_id, content_id)
        return item.resolve_for_edit()

    # ── Transitions ──────────────────────────────────────────────────

    async def create_item(
        self,
        site_id: str,
        content_type_id: str,
        fields: dict[str, Any],
        status: ContentStatus,
        *,
        content_id: str | None = None,
        title: str | None = None,
    ) -> ContentItem:
        content_type = self._registry.get(content_type_id)

        if content_type.singleton:
            if await self.find_singleton(site_id, content_type_id):
                raise DuplicateEntityError(content_type.name, "site_id", site_id)
            # One fixed id per site so the unique constraint rejects a concurrent second insert
            content_id = content_type.content_type_id
        elif content_id is None:
            content_id = generate_content_id()
        elif await self._repository.get(site_id, content_type_id, content_id) is not None:
            raise DuplicateEntityError("ContentItem", "content_id", content_id)

        item = ContentItem.new(
            site_id=site_id,
            content_type_id=content_type_id,
            content_id=content_id,
            title=derive_title(content_type, fields, title),
            data=fields,
            status=status,
        )
        validate_payload(content_type, fields, require_complete=status == ContentStatus.PUBLISHED)

        with tlog.track(TransitionStage.CREATE, _target(content_type_id, content_id), status=status.value):
            return await self._repository.create(item)

    async def save_draft(
        self,
        site_id: str,
        content_type_id: str,
        content_id: str,
        fields: dict[str, Any],
        *,
        title: str | None = None,
    ) -> ContentItem:
        content_type = self._registry.get(content_type_id)
        item = await self.get_item(site_id, content_type_id, content_id)
        validate_payload(content_type, fields, require_complete=False)

        item.save_draft(fields, derive_title(content_type, fields, title))
        with tlog.track(
            TransitionStage.DRAFT, _target(content_type_id, content_id), has_draft=item.has_draft
        ):
            return await self._repository.update(item)

    async def publish(
        self,
        site_id: str,
        content_type_id: str,
        content_id: str,
        fields: dict[str, Any],
        *,
        title: str | None = None,
    ) -> ContentItem:
        content_type = self._registry.get(content_type_id)
        item = await self.get_item(site_id, content_type_id, content_id)
        validate_payload(content_type, fields, require_complete=True)

        item.publish(fields, derive_title(content_type, fields, title))
        with tlog.track(TransitionStage.PUBLISH, _target(content_type_id, content_id)):
            return await self._repository.update(item)

    async def discard_draft(
        self, site_id: str, content_type_id: str, content_id: str
    ) -> ContentItem:
        item = await self.get_item(site_id, content_type_id, content_id)
        item.discard_draft()
        with tlog.track(TransitionStage.DISCARD, _target(content_type_id, content_id)):
            return await self._repository.update(item)

    async def archive(self, site_id: str, content_type_id: str, content_id: str) -> ContentItem:
        item = await self.get_item(site_id, content_type_id, content_id)
        item.archive()
        with tlog.track(TransitionStage.ARCHIVE, _target(content_type_id, content_id)):
            return await self._repository.update(item)

    async def update_item(
        self,
        site_id: str,
        content_type_id: str,
        content_id: str,
        fields: dict[str, Any],
        status: ContentStatus,
        *,
        title: str | None = None,
    ) -> ContentItem:
        """Route an editor's save by the requested status."""
        if status == ContentStatus.PUBLISHED:
            return await self.publish(site_id, content_type_id, content_id, fields, title=title)
        if status == ContentStatus.ARCHIVED:
            return await self.archive(site_id, content_type_id, content_id)
        return await self.save_draft(site_id, content_type_id, content_id, fields, title=title)

    async def delete_item(self, site_id: str, content_type_id: str, content_id: str) -> None:
        self._registry.get(content_type_id)
        with tlog.track(TransitionStage.DELETE, _target(content_type_id, content_id)):
            deleted = await self._repository.delete(site_id, content_type_id, content_id)
            if not deleted:
                raise NotFoundError("ContentItem", content_id)
