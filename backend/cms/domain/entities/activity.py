"""Domain entity for derived activity-log entries."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class ActivityAction(str, Enum):
    """Lifecycle events shown in an item's activity trail."""

    CREATED = "created"
    MODIFIED = "modified"
    PUBLISHED = "published"
    UNPUBLISHED_CHANGES = "unpublished changes"


@dataclass(frozen=True)
class ActivityEntry:
    """One human-readable event, reconstructed from an item's timestamps."""

    id: str
    action: ActivityAction
    timestamp: datetime
    details: str | None = None
