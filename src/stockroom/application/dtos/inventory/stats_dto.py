"""DTO for the inventory stats query."""

from dataclasses import dataclass


@dataclass(frozen=True)
class InventoryStatsResult:
    total_items: int
    low_stock_items: int
