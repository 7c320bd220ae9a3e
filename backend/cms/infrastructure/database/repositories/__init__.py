from .content_item_repository import SQLAlchemyContentItemRepository

__all__ = [
    "SQLAlchemyContentItemRepository",
]
