from stockroom.infrastructure.persistence.sqlalchemy.models.inventory.inventory_item_model import (  # NOQA: E501
    InventoryItemModel,
)

__all__ = ["InventoryItemModel"]
