"""Unit tests for activity trail reconstruction."""

from datetime import datetime, timedelta, timezone

from cms.application.services import DRAFT_PENDING_DETAILS, build_activity_log
from cms.domain.entities import ActivityAction, ContentItem, ContentStatus

T0 = datetime(2024, 1, 1, 9, 0, tzinfo=timezone.utc)


def _item(**overrides) -> ContentItem:
    values = dict(
        site_id="main",
        content_type_id="projects",
        content_id="p1",
        title="Solar Farm",
        data={"title": "Solar Farm"},
        created_at=T0,
        updated_at=T0,
    )
    values.update(overrides)
    return ContentItem(**values)


def test_fresh_draft_only_shows_creation():
    entries = build_activity_log(_item())
    assert [e.action for e in entries] == [ActivityAction.CREATED]
    assert entries[0].timestamp == T0


def test_created_as_published_lists_publish_before_creation():
    entries = build_activity_log(_item(status=ContentStatus.PUBLISHED, published_at=T0))
    assert [e.id for e in entries] == ["published", "created"]


def test_pending_draft_entry_comes_first():
    item = _item(
        status=ContentStatus.PUBLISHED,
        published_at=T0 + timedelta(minutes=1),
        updated_at=T0 + timedelta(minutes=5),
        draft_data={"title": "Pending"},
    )

    entries = build_activity_log(item)

    assert [e.action for e in entries] == [
        ActivityAction.UNPUBLISHED_CHANGES,
        ActivityAction.MODIFIED,
        ActivityAction.PUBLISHED,
        ActivityAction.CREATED,
    ]
    assert entries[0].timestamp == T0 + timedelta(minutes=5)
    assert entries[0].details == DRAFT_PENDING_DETAILS


def test_draft_entry_never_predates_publish():
    item = _item(
        status=ContentStatus.PUBLISHED,
        published_at=T0 + timedelta(minutes=10),
        updated_at=T0 + timedelta(minutes=5),
        draft_data={"title": "Pending"},
    )
    entries = build_activity_log(item)
    assert entries[0].id == "draft_pending"
    assert entries[0].timestamp == T0 + timedelta(minutes=10)


def test_publishing_removes_pending_entry():
    item = _item(status=ContentStatus.PUBLISHED, published_at=T0)
    item.save_draft({"title": "Pending"}, "Pending")
    assert any(e.action == ActivityAction.UNPUBLISHED_CHANGES for e in build_activity_log(item))

    item.publish({"title": "Pending"}, "Pending")
    entries = build_activity_log(item)

    assert all(e.action != ActivityAction.UNPUBLISHED_CHANGES for e in entries)
    assert entries[0].id == "published"


def test_at_most_one_pending_entry():
    item = _item(status=ContentStatus.PUBLISHED, published_at=T0)
    item.save_draft({"title": "one"}, "one")
    item.save_draft({"title": "two"}, "two")
    pending = [e for e in build_activity_log(item) if e.id == "draft_pending"]
    assert len(pending) == 1


def test_entries_are_newest_first():
    item = _item(
        status=ContentStatus.PUBLISHED,
        published_at=T0 + timedelta(days=2),
        updated_at=T0 + timedelta(days=1),
    )
    stamps = [e.timestamp for e in build_activity_log(item)]
    assert stamps == sorted(stamps, reverse=True)


def test_item_without_timestamps_has_no_activity():
    item = _item(created_at=None, updated_at=None)
    assert build_activity_log(item) == []
