from .content_item import ContentItemModel

__all__ = [
    "ContentItemModel",
]
