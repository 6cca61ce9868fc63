from stockroom.domain.inventory.entities.inventory_item import InventoryItem

__all__ = ["InventoryItem"]
