"""Abstract repository interface (port) for ContentItem persistence."""

from abc import ABC, abstractmethod

from cms.domain.entities import ContentItem, ContentStatus


class ContentRepository(ABC):
    """Port for content item persistence: implemented in the infrastructure layer.

    Items are addressed by (site_id, content_type_id, content_id). Each write
    method must apply as one atomic record write; implementations raise
    ``StorageError`` when the backing store fails.
    """

    @abstractmethod
    async def get(
        self, site_id: str, content_type_id: str, content_id: str
    ) -> ContentItem | None:
        """Retrieve a single item, or None when it does not exist."""
        ...

    @abstractmethod
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
        """Retrieve a filtered, paginated list of items, newest first."""
        ...

    @abstractmethod
    async def count(
        self,
        site_id: str,
        content_type_id: str,
        *,
        status: ContentStatus | None = None,
        search: str | None = None,
    ) -> int:
        """Count items matching the same filters as get_all."""
        ...

    @abstractmethod
    async def create(self, item: ContentItem) -> ContentItem:
        """Persist a new item and return it."""
        ...

    @abstractmethod
    async def update(self, item: ContentItem) -> ContentItem:
        """Replace the stored record with the given item state."""
        ...

    @abstractmethod
    async def delete(self, site_id: str, content_type_id: str, content_id: str) -> bool:
        """Delete an item. Returns True if deleted, False if not found."""
        ...
