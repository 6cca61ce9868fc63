"""Activity feed query.

There is no movement log: each entry is a snapshot of an item as it is
now, ordered by when it was last changed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from stockroom.application.dtos.inventory import ActivityEntry
from stockroom.domain.inventory import InventoryItemRepository

if TYPE_CHECKING:
    from stockroom.application.factories import RepositoryFactory

DEFAULT_ACTIVITY_LIMIT = 3


class InventoryActivityQuery:
    def __init__(self, item_repository: InventoryItemRepository):
        self._item_repo = item_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> InventoryActivityQuery:
        return cls(item_repository=factory.inventory_item_repository())

    async def execute(
        self,
        limit: Optional[int] = DEFAULT_ACTIVITY_LIMIT,
    ) -> list[ActivityEntry]:
        """Return activity entries, newest update first.

        Parameters
        ----------
        limit
            Maximum number of entries; ``None`` returns the full feed.
        """
        items = await self._item_repo.find_recently_updated(limit=limit)
        return [ActivityEntry.from_item(item) for item in items]
