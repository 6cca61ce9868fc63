"""List the current user's inventory items."""

from __future__ import annotations

from typing import TYPE_CHECKING

from stockroom.domain.inventory import InventoryItem, InventoryItemRepository

if TYPE_CHECKING:
    from stockroom.application.factories import RepositoryFactory


class ListInventoryItemsQuery:
    def __init__(self, item_repository: InventoryItemRepository):
        self._item_repo = item_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> ListInventoryItemsQuery:
        return cls(item_repository=factory.inventory_item_repository())

    async def execute(self) -> list[InventoryItem]:
        """Return all items, most recently created first."""
        return await self._item_repo.find_all()
