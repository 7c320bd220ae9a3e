"""SQLAlchemy ORM model for the ContentItem entity."""

from datetime import datetime, timezone
from typing import Any

from sqlalchemy import JSON, DateTime, Index, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from cms.infrastructure.database.base import Base


class ContentItemModel(Base):
    """ORM model: maps to the 'content_items' table.

    One row holds both the live snapshot (``data``) and the pending overlay
    (``draft_data``), so every lifecycle transition is a single-row write.
    """

    __tablename__ = "content_items"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    site_id: Mapped[str] = mapped_column(String(255), nullable=False)
    content_type_id: Mapped[str] = mapped_column(String(255), nullable=False)
    content_id: Mapped[str] = mapped_column(String(255), nullable=False)
    title: Mapped[str] = mapped_column(String(500), nullable=False)
    status: Mapped[str] = mapped_column(String(50), nullable=False, default="draft")
    data: Mapped[dict[str, Any]] = mapped_column(nullable=False, default=dict)
    draft_title: Mapped[str | None] = mapped_column(String(500), nullable=True)
    draft_data: Mapped[dict[str, Any] | None] = mapped_column(
        JSON(none_as_null=True), nullable=True
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )
    published_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )

    __table_args__ = (
        UniqueConstraint(
            "site_id", "content_type_id", "content_id", name="uq_content_items_scope_id"
        ),
        Index("ix_content_items_scope_status", "site_id", "content_type_id", "status"),
    )

    def __repr__(self) -> str:
        return (
            f"<ContentItemModel(id={self.id}, type='{self.content_type_id}', "
            f"content_id='{self.content_id}', status='{self.status}')>"
        )
