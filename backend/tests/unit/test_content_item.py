"""Unit tests for ContentItem state transitions."""

import re
from datetime import timedelta

import pytest

from cms.domain.entities import ContentItem, ContentStatus, generate_content_id, next_timestamp, utc_now
from cms.domain.exceptions import InvalidStateError, ValidationError


def test_new_draft_has_no_publish_timestamp(make_item):
    item = make_item()
    assert item.status == ContentStatus.DRAFT
    assert item.published_at is None
    assert item.created_at == item.updated_at
    assert item.has_draft is False


def test_new_published_stamps_publish_time(make_item):
    item = make_item(ContentStatus.PUBLISHED)
    assert item.published_at == item.created_at


def test_new_rejects_archived_status():
    with pytest.raises(ValidationError):
        ContentItem.new(
            site_id="main",
            content_type_id="projects",
            content_id="p1",
            title="X",
            data={},
            status=ContentStatus.ARCHIVED,
        )


def test_save_draft_on_never_published_item_edits_data(make_item):
    item = make_item()
    before = item.updated_at

    item.save_draft({"title": "Renamed"}, "Renamed")

    assert item.data == {"title": "Renamed"}
    assert item.title == "Renamed"
    assert item.draft_data is None
    assert item.status == ContentStatus.DRAFT
    assert item.updated_at > before


def test_save_draft_on_published_item_leaves_live_data(make_item):
    item = make_item(ContentStatus.PUBLISHED, data={"title": "Live"}, title="Live")

    item.save_draft({"title": "Pending"}, "Pending")

    assert item.data == {"title": "Live"}
    assert item.title == "Live"
    assert item.draft_data == {"title": "Pending"}
    assert item.draft_title == "Pending"
    assert item.has_draft is True
    assert item.status == ContentStatus.PUBLISHED


def test_publish_promotes_fields_and_clears_overlay(make_item):
    item = make_item(ContentStatus.PUBLISHED)
    item.save_draft({"title": "Pending"}, "Pending")

    item.publish({"title": "Different"}, "Different")

    assert item.data == {"title": "Different"}
    assert item.draft_data is None
    assert item.draft_title is None
    assert item.has_draft is False
    assert item.published_at == item.updated_at


def test_publish_of_draft_item_changes_status(make_item):
    item = make_item()
    item.publish({"title": "Go live"}, "Go live")
    assert item.status == ContentStatus.PUBLISHED
    assert item.published_at is not None


def test_discard_draft_restores_published_view(make_item):
    item = make_item(ContentStatus.PUBLISHED, data={"title": "Live"})
    published_at = item.published_at
    item.save_draft({"title": "Pending"}, "Pending")
    saved_at = item.updated_at

    item.discard_draft()

    assert item.data == {"title": "Live"}
    assert item.has_draft is False
    assert item.published_at == published_at
    assert item.updated_at > saved_at


def test_discard_without_draft_is_rejected(make_item):
    with pytest.raises(InvalidStateError):
        make_item(ContentStatus.PUBLISHED).discard_draft()


def test_archived_item_is_terminal(make_item):
    item = make_item(ContentStatus.PUBLISHED)
    item.save_draft({"title": "Pending"}, "Pending")

    item.archive()

    assert item.status == ContentStatus.ARCHIVED
    assert item.draft_data is None
    with pytest.raises(InvalidStateError):
        item.save_draft({"title": "x"}, "x")
    with pytest.raises(InvalidStateError):
        item.publish({"title": "x"}, "x")
    with pytest.raises(InvalidStateError):
        item.archive()


def test_resolve_for_edit_prefers_draft_and_returns_a_copy(make_item):
    item = make_item(ContentStatus.PUBLISHED, data={"title": "Live", "tags": ["a"]})
    assert item.resolve_for_edit() == {"title": "Live", "tags": ["a"]}

    item.save_draft({"title": "Pending", "tags": ["b"]}, "Pending")
    snapshot = item.resolve_for_edit()
    snapshot["tags"].append("mutated")

    assert item.draft_data == {"title": "Pending", "tags": ["b"]}
    assert item.edit_title == "Pending"


def test_timestamps_stay_monotonic_when_clock_lags(make_item):
    item = make_item(ContentStatus.PUBLISHED)
    future = utc_now() + timedelta(hours=1)
    item.updated_at = future
    item.published_at = future

    item.save_draft({"title": "x"}, "x")
    assert item.updated_at > future

    previous = item.updated_at
    item.publish({"title": "y"}, "y")
    assert item.published_at > previous
    assert item.updated_at == item.published_at


def test_next_timestamp_is_strictly_after_previous():
    ahead = utc_now() + timedelta(seconds=5)
    assert next_timestamp(ahead) == ahead + timedelta(microseconds=1)
    assert next_timestamp(None) <= utc_now()


def test_generated_ids_follow_content_prefix_format():
    first, second = generate_content_id(), generate_content_id()
    assert re.fullmatch(r"content_\d+_[0-9a-z]{9}", first)
    assert first != second
