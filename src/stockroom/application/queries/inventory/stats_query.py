"""Inventory stats query - item counts for the dashboard."""

from __future__ import annotations

from typing import TYPE_CHECKING

from stockroom.application.dtos.inventory import InventoryStatsResult
from stockroom.domain.inventory import InventoryItemRepository, StockStatus

if TYPE_CHECKING:
    from stockroom.application.factories import RepositoryFactory


class InventoryStatsQuery:
    """Count all items and the ones running low."""

    def __init__(self, item_repository: InventoryItemRepository):
        self._item_repo = item_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> InventoryStatsQuery:
        return cls(item_repository=factory.inventory_item_repository())

    async def execute(self) -> InventoryStatsResult:
        total = await self._item_repo.count()
        low = await self._item_repo.count(status=StockStatus.LOW_STOCK)
        return InventoryStatsResult(total_items=total, low_stock_items=low)
