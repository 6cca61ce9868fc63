"""Inventory domain - per-user stock records.

This domain handles:
- InventoryItem entity (name, quantity, category, derived status)
- Stock status derivation from quantity
- Repository interface (implementation in infrastructure)

Design notes:
- Every item belongs to exactly one user; the owner never changes
- Status is never set directly: it is derived from quantity whenever
  an item is created or changed
- Repositories are user-scoped; an item owned by someone else is
  indistinguishable from an item that does not exist
"""

from stockroom.domain.inventory.entities import InventoryItem
from stockroom.domain.inventory.exceptions import (
    InvalidInventoryItemError,
    InventoryItemNotFoundError,
)
from stockroom.domain.inventory.repositories import InventoryItemRepository
from stockroom.domain.inventory.value_objects import (
    LOW_STOCK_THRESHOLD,
    StockStatus,
    derive_stock_status,
)

__all__ = [
    "LOW_STOCK_THRESHOLD",
    "InvalidInventoryItemError",
    "InventoryItem",
    "InventoryItemNotFoundError",
    "InventoryItemRepository",
    "StockStatus",
    "derive_stock_status",
]
