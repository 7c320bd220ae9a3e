"""SQLAlchemy ORM base and model registry."""

from typing import Any

from sqlalchemy import JSON
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy ORM models.

    Content payloads are opaque mappings, stored as JSON on every backend.
    """

    type_annotation_map = {
        dict[str, Any]: JSON,
    }
