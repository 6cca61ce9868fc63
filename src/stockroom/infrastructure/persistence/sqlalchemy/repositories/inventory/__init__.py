from stockroom.infrastructure.persistence.sqlalchemy.repositories.inventory.inventory_item_repository import (  # NOQA: E501
    InventoryItemRepositorySQLAlchemy,
)

__all__ = ["InventoryItemRepositorySQLAlchemy"]
