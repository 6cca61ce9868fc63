"""Inventory item repository interface."""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from stockroom.domain.inventory.entities import InventoryItem
from stockroom.domain.inventory.value_objects import StockStatus


class InventoryItemRepository(ABC):
    """Repository interface for inventory items.

    Implementations are bound to a single user. Every lookup, mutation and
    aggregate only ever sees that user's items.
    """

    @abstractmethod
    async def save(self, item: InventoryItem) -> None:
        """Insert or update an item."""

    @abstractmethod
    async def find_by_id(self, item_id: UUID) -> Optional[InventoryItem]:
        """
        Find an item by id within the current user's items.

        Returns
        -------
        The item, or None if it does not exist or belongs to another user
        """

    @abstractmethod
    async def find_all(self) -> list[InventoryItem]:
        """Return all items, most recently created first."""

    @abstractmethod
    async def find_recently_updated(
        self,
        limit: Optional[int] = None,
    ) -> list[InventoryItem]:
        """Return items ordered by last update (newest first), optionally capped."""

    @abstractmethod
    async def find_top_by_quantity(self, limit: int) -> list[InventoryItem]:
        """Return up to ``limit`` items with the highest quantity."""

    @abstractmethod
    async def delete(self, item_id: UUID) -> bool:
        """
        Delete an item by id within the current user's items.

        Returns
        -------
        True if a row was removed, False if nothing matched
        """

    @abstractmethod
    async def count(self, status: Optional[StockStatus] = None) -> int:
        """Count items, optionally only those with the given status."""

    @abstractmethod
    async def total_quantity(self) -> int:
        """Sum of quantities over all items (0 when there are none)."""
