from .activity_log import DRAFT_PENDING_DETAILS, build_activity_log
from .content_item_service import ContentItemService
from .content_type_registry import ContentTypeRegistry
from .content_validator import derive_title, validate_payload
from .resolution_policy import ContentResolutionPolicy

__all__ = [
    "DRAFT_PENDING_DETAILS",
    "build_activity_log",
    "ContentItemService",
    "ContentTypeRegistry",
    "derive_title",
    "validate_payload",
    "ContentResolutionPolicy",
]
