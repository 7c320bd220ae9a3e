"""Domain entity for versioned site content: a published snapshot plus an optional draft overlay."""

import copy
import secrets
import time
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Any

from cms.domain.exceptions import InvalidStateError, ValidationError

_ID_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"


class ContentStatus(str, Enum):
    """Lifecycle states of a content item."""

    DRAFT = "draft"
    PUBLISHED = "published"
    ARCHIVED = "archived"


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def next_timestamp(previous: datetime | None) -> datetime:
    """Return the current time, nudged forward so it is strictly after ``previous``."""
    now = utc_now()
    if previous is not None and now <= previous:
        return previous + timedelta(microseconds=1)
    return now


def generate_content_id() -> str:
    """Server-side id: ``content_<epoch millis>_<9 base36 chars>``."""
    millis = int(time.time() * 1000)
    suffix = "".join(secrets.choice(_ID_ALPHABET) for _ in range(9))
    return f"content_{millis}_{suffix}"


@dataclass
class ContentItem:
    """Core domain entity: one editable piece of site content.

    ``data`` always holds what the public site may show once the item is
    published. Edits made to a published item go to ``draft_data`` until they
    are published or discarded; a never-published item is edited in ``data``
    directly.

    An item whose ``content_id`` is ``None`` was synthesized in memory (the
    singleton default) and has never been stored.
    """

    site_id: str
    content_type_id: str
    content_id: str | None
    title: str
    data: dict[str, Any] = field(default_factory=dict)
    status: ContentStatus = ContentStatus.DRAFT
    draft_data: dict[str, Any] | None = None
    draft_title: str | None = None
    id: int | None = None
    created_at: datetime | None = field(default_factory=utc_now)
    updated_at: datetime | None = field(default_factory=utc_now)
    published_at: datetime | None = None

    @classmethod
    def new(
        cls,
        *,
        site_id: str,
        content_type_id: str,
        content_id: str,
        title: str,
        data: dict[str, Any],
        status: ContentStatus,
    ) -> "ContentItem":
        """Build a freshly created item in the requested initial status."""
        if status not in (ContentStatus.DRAFT, ContentStatus.PUBLISHED):
            raise ValidationError(
                "Invalid initial status",
                [f"status must be 'draft' or 'published', got '{status.value}'"],
            )
        now = utc_now()
        return cls(
            site_id=site_id,
            content_type_id=content_type_id,
            content_id=content_id,
            title=title,
            data=copy.deepcopy(data),
            status=status,
            created_at=now,
            updated_at=now,
            published_at=now if status == ContentStatus.PUBLISHED else None,
        )

    # ── Derived state ────────────────────────────────────────────────

    @property
    def has_draft(self) -> bool:
        return self.draft_data is not None and self.status == ContentStatus.PUBLISHED

    @property
    def is_persisted(self) -> bool:
        return self.content_id is not None

    @property
    def edit_title(self) -> str:
        """Title matching the snapshot returned by :meth:`resolve_for_edit`."""
        if self.draft_data is not None and self.draft_title:
            return self.draft_title
        return self.title

    def resolve_for_edit(self) -> dict[str, Any]:
        """The snapshot an editor should load: the draft if present, else the live data."""
        source = self.draft_data if self.draft_data is not None else self.data
        return copy.deepcopy(source)

    # ── Transitions ──────────────────────────────────────────────────

    def save_draft(self, fields: dict[str, Any], title: str) -> None:
        """Record edits without changing what the public site reads."""
        self._ensure_editable("save a draft of")
        if self.status == ContentStatus.PUBLISHED:
            self.draft_data = copy.deepcopy(fields)
            self.draft_title = title
        else:
            self.data = copy.deepcopy(fields)
            self.title = title
            self.draft_data = None
            self.draft_title = None
        self.updated_at = next_timestamp(self._latest_timestamp())

    def publish(self, fields: dict[str, Any], title: str) -> None:
        """Promote ``fields`` to the live snapshot and drop any pending draft."""
        self._ensure_editable("publish")
        stamp = next_timestamp(self._latest_timestamp())
        self.data = copy.deepcopy(fields)
        self.title = title
        self.draft_data = None
        self.draft_title = None
        self.status = ContentStatus.PUBLISHED
        self.published_at = stamp
        self.updated_at = stamp

    def discard_draft(self) -> None:
        """Throw away the pending overlay, leaving the live snapshot as it was."""
        if not self.has_draft:
            raise InvalidStateError(
                self.content_id or "", self.status.value, "discard a missing draft of"
            )
        self.draft_data = None
        self.draft_title = None
        self.updated_at = next_timestamp(self._latest_timestamp())

    def archive(self) -> None:
        """Move the item to the terminal ``archived`` state."""
        if self.status == ContentStatus.ARCHIVED:
            raise InvalidStateError(self.content_id or "", self.status.value, "archive")
        self.status = ContentStatus.ARCHIVED
        self.draft_data = None
        self.draft_title = None
        self.updated_at = next_timestamp(self._latest_timestamp())

    def _ensure_editable(self, operation: str) -> None:
        if self.status == ContentStatus.ARCHIVED:
            raise InvalidStateError(self.content_id or "", self.status.value, operation)

    def _latest_timestamp(self) -> datetime | None:
        stamps = [t for t in (self.updated_at, self.published_at) if t is not None]
        return max(stamps) if stamps else None
