"""Shared test configuration.

The environment is pinned before any ``cms`` module is imported, because the
database engine is created from settings at import time.
"""

import copy
import os
from pathlib import Path

os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["APP_ENV"] = "test"
os.environ["CONTENT_TYPES_FILE"] = "data/content-types.yaml"

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402

from cms.application.interfaces import ContentRepository  # noqa: E402
from cms.application.services import (  # noqa: E402
    ContentItemService,
    ContentResolutionPolicy,
    ContentTypeRegistry,
)
from cms.domain.entities import ContentItem, ContentStatus  # noqa: E402
from cms.domain.exceptions import DuplicateEntityError  # noqa: E402
from cms.infrastructure.database import Base, engine  # noqa: E402

CONTENT_TYPES_YAML = Path(__file__).resolve().parents[1] / "data" / "content-types.yaml"


class FakeContentRepository(ContentRepository):
    """In-memory fake repository for unit testing.

    Stores copies so tests observe only what was explicitly written, like a
    real database would.
    """

    def __init__(self):
        self._items: dict[tuple[str, str, str], ContentItem] = {}
        self._next_id = 1
        self.writes = 0

    def _matching(self, site_id, content_type_id, status, search) -> list[ContentItem]:
        items = [
            item
            for (site, type_id, _), item in self._items.items()
            if site == site_id and type_id == content_type_id
        ]
        if status is not None:
            items = [i for i in items if i.status == status]
        if search:
            items = [i for i in items if search.lower() in i.title.lower()]
        return items

    async def get(self, site_id, content_type_id, content_id) -> ContentItem | None:
        item = self._items.get((site_id, content_type_id, content_id))
        return copy.deepcopy(item)

    async def get_all(
        self, site_id, content_type_id, *, status=None, search=None, skip=0, limit=100
    ) -> list[ContentItem]:
        items = self._matching(site_id, content_type_id, status, search)
        items.sort(key=lambda i: (i.created_at, i.id), reverse=True)
        return [copy.deepcopy(i) for i in items[skip : skip + limit]]

    async def count(self, site_id, content_type_id, *, status=None, search=None) -> int:
        return len(self._matching(site_id, content_type_id, status, search))

    async def create(self, item: ContentItem) -> ContentItem:
        key = (item.site_id, item.content_type_id, item.content_id)
        if key in self._items:
            raise DuplicateEntityError("ContentItem", "content_id", item.content_id)
        item.id = self._next_id
        self._next_id += 1
        self._items[key] = copy.deepcopy(item)
        self.writes += 1
        return item

    async def update(self, item: ContentItem) -> ContentItem:
        key = (item.site_id, item.content_type_id, item.content_id)
        if key not in self._items:
            raise ValueError(f"ContentItem {item.content_id} not found")
        self._items[key] = copy.deepcopy(item)
        self.writes += 1
        return item

    async def delete(self, site_id, content_type_id, content_id) -> bool:
        key = (site_id, content_type_id, content_id)
        if key in self._items:
            del self._items[key]
            self.writes += 1
            return True
        return False


@pytest.fixture
def registry() -> ContentTypeRegistry:
    return ContentTypeRegistry.from_yaml(CONTENT_TYPES_YAML)


@pytest.fixture
def repository() -> FakeContentRepository:
    return FakeContentRepository()


@pytest.fixture
def service(repository, registry) -> ContentItemService:
    return ContentItemService(repository, registry)


@pytest.fixture
def policy(service, registry) -> ContentResolutionPolicy:
    return ContentResolutionPolicy(service, registry)


@pytest.fixture
def make_item():
    """Factory for entities built directly, bypassing the service."""

    def _make(status: ContentStatus = ContentStatus.DRAFT, **overrides) -> ContentItem:
        fields = overrides.pop("data", {"title": "Solar Farm"})
        item = ContentItem.new(
            site_id=overrides.pop("site_id", "main"),
            content_type_id=overrides.pop("content_type_id", "projects"),
            content_id=overrides.pop("content_id", "p1"),
            title=overrides.pop("title", "Solar Farm"),
            data=fields,
            status=status,
        )
        for name, value in overrides.items():
            setattr(item, name, value)
        return item

    return _make


@pytest_asyncio.fixture
async def database():
    """Fresh schema in the shared in-memory database for one test."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
