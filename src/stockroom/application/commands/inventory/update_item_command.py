"""Partially update an inventory item."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional, Union
from uuid import UUID

from stockroom.application.commands.inventory._item_id import parse_item_id
from stockroom.domain.inventory import (
    InventoryItem,
    InventoryItemNotFoundError,
    InventoryItemRepository,
)

if TYPE_CHECKING:
    from stockroom.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class UpdateInventoryItemCommand:
    """Merge supplied fields into an item owned by the current user.

    Omitted fields keep their current value. The status is recomputed
    from the resulting quantity on every update, including an empty one.
    """

    def __init__(self, item_repository: InventoryItemRepository):
        self._item_repo = item_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> UpdateInventoryItemCommand:
        return cls(item_repository=factory.inventory_item_repository())

    async def execute(
        self,
        item_id: Union[UUID, str],
        name: Optional[str] = None,
        quantity: Optional[int] = None,
        category: Optional[str] = None,
    ) -> InventoryItem:
        item_uuid = parse_item_id(item_id)
        item = await self._item_repo.find_by_id(item_uuid)
        if item is None:
            raise InventoryItemNotFoundError(item_uuid)

        item.apply_changes(name=name, quantity=quantity, category=category)
        await self._item_repo.save(item)

        logger.info(
            "Item updated: %s (quantity=%d, status=%s)",
            item.id,
            item.quantity,
            item.status.value,
        )
        return item
