"""Activity trail reconstructed from a content item's current timestamps.

No history is stored; the trail is recomputed on every read, so a pending
draft entry vanishes as soon as the draft is published or discarded.
"""

from cms.domain.entities import ActivityAction, ActivityEntry, ContentItem

DRAFT_PENDING_DETAILS = "Draft saved. Publish to make changes live."


def build_activity_log(item: ContentItem) -> list[ActivityEntry]:
    """Newest-first list of lifecycle events derivable from ``item``.

    Entries are collected latest-lifecycle-first so that the stable sort keeps
    that order when two events share a timestamp (e.g. create-as-published).
    """
    entries: list[ActivityEntry] = []

    if item.has_draft:
        stamps = [t for t in (item.updated_at, item.published_at) if t is not None]
        if stamps:
            entries.append(
                ActivityEntry(
                    id="draft_pending",
                    action=ActivityAction.UNPUBLISHED_CHANGES,
                    timestamp=max(stamps),
                    details=DRAFT_PENDING_DETAILS,
                )
            )

    if item.published_at is not None:
        entries.append(
            ActivityEntry(id="published", action=ActivityAction.PUBLISHED, timestamp=item.published_at)
        )

    if item.updated_at is not None and item.updated_at != item.created_at:
        entries.append(
            ActivityEntry(id="modified", action=ActivityAction.MODIFIED, timestamp=item.updated_at)
        )

    if item.created_at is not None:
        entries.append(
            ActivityEntry(id="created", action=ActivityAction.CREATED, timestamp=item.created_at)
        )

    return sorted(entries, key=lambda entry: entry.timestamp, reverse=True)
