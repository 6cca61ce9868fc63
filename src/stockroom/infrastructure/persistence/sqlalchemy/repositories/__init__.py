"""SQLAlchemy repository implementations."""

from stockroom.infrastructure.persistence.sqlalchemy.repositories.factory import (
    SQLAlchemyRepositoryFactory,
)
from stockroom.infrastructure.persistence.sqlalchemy.repositories.inventory import (
    InventoryItemRepositorySQLAlchemy,
)
from stockroom.infrastructure.persistence.sqlalchemy.repositories.user import (
    UserRepositorySQLAlchemy,
)

__all__ = [
    "InventoryItemRepositorySQLAlchemy",
    "SQLAlchemyRepositoryFactory",
    "UserRepositorySQLAlchemy",
]
