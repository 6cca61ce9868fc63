from stockroom.domain.inventory.repositories.inventory_item_repository import (
    InventoryItemRepository,
)

__all__ = ["InventoryItemRepository"]
