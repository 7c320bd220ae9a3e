from .content_repository import ContentRepository

__all__ = [
    "ContentRepository",
]
