"""SQLAlchemy models for persistence layer."""

from stockroom.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)
from stockroom.infrastructure.persistence.sqlalchemy.models.inventory import (
    InventoryItemModel,
)
from stockroom.infrastructure.persistence.sqlalchemy.models.user import UserModel

__all__ = [
    "Base",
    "InventoryItemModel",
    "TimestampMixin",
    "UserModel",
]
