"""Delete an inventory item."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Union
from uuid import UUID

from stockroom.application.commands.inventory._item_id import parse_item_id
from stockroom.domain.inventory import (
    InventoryItemNotFoundError,
    InventoryItemRepository,
)

if TYPE_CHECKING:
    from stockroom.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class DeleteInventoryItemCommand:
    """Command to permanently delete an item of the current user."""

    def __init__(self, item_repository: InventoryItemRepository):
        self._item_repo = item_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> DeleteInventoryItemCommand:
        return cls(item_repository=factory.inventory_item_repository())

    async def execute(self, item_id: Union[UUID, str]) -> None:
        item_uuid = parse_item_id(item_id)
        deleted = await self._item_repo.delete(item_uuid)
        if not deleted:
            raise InventoryItemNotFoundError(item_uuid)

        logger.info("Item deleted: %s", item_uuid)
