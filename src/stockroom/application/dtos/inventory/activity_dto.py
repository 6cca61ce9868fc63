"""DTOs for the activity feed."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from uuid import UUID

from stockroom.domain.inventory import InventoryItem


class ActivityType(str, Enum):
    """Direction label of an activity entry.

    Derived from the item's current status, not from a stock movement
    history: an item that is out of stock is reported as ``out``, every
    other item as ``in``.
    """

    IN = "in"
    OUT = "out"


@dataclass(frozen=True)
class ActivityEntry:
    """One entry of the activity feed, built from an item snapshot."""

    id: UUID
    item_name: str
    quantity: int
    type: ActivityType
    timestamp: datetime

    @classmethod
    def from_item(cls, item: InventoryItem) -> ActivityEntry:
        return cls(
            id=item.id,
            item_name=item.name,
            quantity=item.quantity,
            type=ActivityType.OUT if item.is_out_of_stock else ActivityType.IN,
            timestamp=item.updated_at,
        )
