from typing import Union
from uuid import UUID

from stockroom.domain.inventory import InventoryItemNotFoundError


def parse_item_id(item_id: Union[UUID, str]) -> UUID:
    """Convert a path id to a UUID; an unparseable id is simply not found."""
    if isinstance(item_id, UUID):
        return item_id
    try:
        return UUID(item_id)
    except (ValueError, TypeError, AttributeError) as e:
        raise InventoryItemNotFoundError(item_id) from e
