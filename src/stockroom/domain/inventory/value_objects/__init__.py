"""Value objects for the inventory domain."""

from stockroom.domain.inventory.value_objects.stock_status import (
    LOW_STOCK_THRESHOLD,
    StockStatus,
    derive_stock_status,
)

__all__ = ["LOW_STOCK_THRESHOLD", "StockStatus", "derive_stock_status"]
