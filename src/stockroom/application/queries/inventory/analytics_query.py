"""Inventory analytics query - overview, top items and stock health."""

from __future__ import annotations

from typing import TYPE_CHECKING

from stockroom.application.dtos.inventory import (
    AnalyticsResult,
    InventoryHealth,
    InventoryOverview,
)
from stockroom.domain.inventory import InventoryItemRepository, StockStatus

if TYPE_CHECKING:
    from stockroom.application.factories import RepositoryFactory

TOP_PERFORMING_LIMIT = 3


class InventoryAnalyticsQuery:
    """Query to summarize the current user's inventory.

    This query calculates:
    - Total value (sum of quantities)
    - Items sold (number of items currently out of stock)
    - The items with the highest quantity
    - Item counts per stock status
    """

    def __init__(self, item_repository: InventoryItemRepository):
        self._item_repo = item_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> InventoryAnalyticsQuery:
        return cls(item_repository=factory.inventory_item_repository())

    async def execute(self) -> AnalyticsResult:
        total_value = await self._item_repo.total_quantity()
        out_of_stock = await self._item_repo.count(status=StockStatus.OUT_OF_STOCK)
        low_stock = await self._item_repo.count(status=StockStatus.LOW_STOCK)
        in_stock = await self._item_repo.count(status=StockStatus.IN_STOCK)
        top = await self._item_repo.find_top_by_quantity(TOP_PERFORMING_LIMIT)

        return AnalyticsResult(
            overview=InventoryOverview(
                total_value=total_value,
                items_sold=out_of_stock,
            ),
            health=InventoryHealth(
                low_stock=low_stock,
                out_of_stock=out_of_stock,
                in_stock=in_stock,
            ),
            top_performing=top,
        )
