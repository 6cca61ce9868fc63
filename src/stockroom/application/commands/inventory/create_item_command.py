"""Create a new inventory item for the current user."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from stockroom.domain.inventory import InventoryItem, InventoryItemRepository

if TYPE_CHECKING:
    from stockroom.application.context import UserContext
    from stockroom.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class CreateInventoryItemCommand:
    """Validate and persist a new item owned by the current user."""

    def __init__(
        self,
        item_repository: InventoryItemRepository,
        current_user: UserContext,
    ):
        self._item_repo = item_repository
        self._user_id = current_user.user_id

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> CreateInventoryItemCommand:
        return cls(
            item_repository=factory.inventory_item_repository(),
            current_user=factory.current_user,
        )

    async def execute(
        self,
        name: str,
        quantity: int,
        category: str,
    ) -> InventoryItem:
        item = InventoryItem.create(
            user_id=self._user_id,
            name=name,
            quantity=quantity,
            category=category,
        )
        await self._item_repo.save(item)

        logger.info(
            "Item created: %s (quantity=%d, status=%s)",
            item.id,
            item.quantity,
            item.status.value,
        )
        return item
