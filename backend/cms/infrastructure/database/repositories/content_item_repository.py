"""Concrete repository implementation for ContentItem backed by SQLAlchemy."""

import copy
import logging
from datetime import datetime, timezone

from sqlalchemy import Select, func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from cms.application.interfaces import ContentRepository
from cms.domain.entities import ContentItem, ContentStatus
from cms.domain.exceptions import DuplicateEntityError, StorageError
from cms.infrastructure.database.models import ContentItemModel

logger = logging.getLogger(__name__)


def _as_utc(value: datetime | None) -> datetime | None:
    """SQLite hands back naive datetimes; everything stored is UTC."""
    if value is None or value.tzinfo is not None:
        return value
    return value.replace(tzinfo=timezone.utc)


def _contains_pattern(search: str) -> str:
    """LIKE pattern matching ``search`` literally anywhere in the column."""
    escaped = search.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


class SQLAlchemyContentItemRepository(ContentRepository):
    """Implements the ContentRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: ContentItemModel) -> ContentItem:
        """Map ORM model → domain entity."""
        return ContentItem(
            id=model.id,
            site_id=model.site_id,
            content_type_id=model.content_type_id,
            content_id=model.content_id,
            title=model.title,
            status=ContentStatus(model.status),
            data=copy.deepcopy(model.data) if model.data is not None else {},
            draft_data=copy.deepcopy(model.draft_data),
            draft_title=model.draft_title,
            created_at=_as_utc(model.created_at),
            updated_at=_as_utc(model.updated_at),
            published_at=_as_utc(model.published_at),
        )

    def _to_model(self, entity: ContentItem) -> ContentItemModel:
        """Map domain entity → ORM model (for creation)."""
        return ContentItemModel(
            site_id=entity.site_id,
            content_type_id=entity.content_type_id,
            content_id=entity.content_id,
            title=entity.title,
            status=entity.status.value,
            data=copy.deepcopy(entity.data),
            draft_data=copy.deepcopy(entity.draft_data),
            draft_title=entity.draft_title,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
            published_at=entity.published_at,
        )

    def _scoped(
        self,
        stmt: Select,
        site_id: str,
        content_type_id: str,
        status: ContentStatus | None,
        search: str | None,
    ) -> Select:
        stmt = stmt.where(
            ContentItemModel.site_id == site_id,
            ContentItemModel.content_type_id == content_type_id,
        )
        if status is not None:
            stmt = stmt.where(ContentItemModel.status == status.value)
        if search:
            stmt = stmt.where(
                ContentItemModel.title.ilike(_contains_pattern(search), escape="\\")
            )
        return stmt

    async def _find(
        self, site_id: str, content_type_id: str, content_id: str
    ) -> ContentItemModel | None:
        stmt = select(ContentItemModel).where(
            ContentItemModel.site_id == site_id,
            ContentItemModel.content_type_id == content_type_id,
            ContentItemModel.content_id == content_id,
        )
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def get(
        self, site_id: str, content_type_id: str, content_id: str
    ) -> ContentItem | None:
        try:
            model = await self._find(site_id, content_type_id, content_id)
        except SQLAlchemyError as exc:
            raise StorageError("get", str(exc)) from exc
        return self._to_entity(model) if model else None

    async def get_all(
        self,
        site_id: str,
        content_type_id: str,
        *,
        status: ContentStatus | None = None,
        search: str | None = None,
        skip: int = 0,
        limit: int = 100,
    ) -> list[ContentItem]:
        stmt = self._scoped(select(ContentItemModel), site_id, content_type_id, status, search)
        stmt = stmt.order_by(
            ContentItemModel.created_at.desc(), ContentItemModel.id.desc()
        ).offset(skip).limit(limit)
        try:
            result = await self._session.execute(stmt)
        except SQLAlchemyError as exc:
            raise StorageError("list", str(exc)) from exc
        return [self._to_entity(row) for row in result.scalars().all()]

    async def count(
        self,
        site_id: str,
        content_type_id: str,
        *,
        status: ContentStatus | None = None,
        search: str | None = None,
    ) -> int:
        stmt = self._scoped(
            select(func.count()).select_from(ContentItemModel),
            site_id,
            content_type_id,
            status,
            search,
        )
        try:
            result = await self._session.execute(stmt)
        except SQLAlchemyError as exc:
            raise StorageError("count", str(exc)) from exc
        return int(result.scalar_one())

    async def create(self, item: ContentItem) -> ContentItem:
        model = self._to_model(item)
        try:
            self._session.add(model)
            await self._session.flush()
        except IntegrityError as exc:
            raise DuplicateEntityError("ContentItem", "content_id", item.content_id or "") from exc
        except SQLAlchemyError as exc:
            logger.error("Failed to create content %s: %s", item.content_id, exc)
            raise StorageError("create", str(exc)) from exc
        return self._to_entity(model)

    async def update(self, item: ContentItem) -> ContentItem:
        try:
            model = await self._find(item.site_id, item.content_type_id, item.content_id or "")
            if model is None:
                raise StorageError("update", f"ContentItem {item.content_id} vanished before write")
            # All columns change in one UPDATE; a failed flush leaves the row as it was.
            model.title = item.title
            model.status = item.status.value
            model.data = copy.deepcopy(item.data)
            model.draft_data = copy.deepcopy(item.draft_data)
            model.draft_title = item.draft_title
            model.updated_at = item.updated_at
            model.published_at = item.published_at
            await self._session.flush()
        except SQLAlchemyError as exc:
            logger.error("Failed to update content %s: %s", item.content_id, exc)
            raise StorageError("update", str(exc)) from exc
        return self._to_entity(model)

    async def delete(self, site_id: str, content_type_id: str, content_id: str) -> bool:
        try:
            model = await self._find(site_id, content_type_id, content_id)
            if model is None:
                return False
            await self._session.delete(model)
            await self._session.flush()
        except SQLAlchemyError as exc:
            logger.error("Failed to delete content %s: %s", content_id, exc)
            raise StorageError("delete", str(exc)) from exc
        return True
