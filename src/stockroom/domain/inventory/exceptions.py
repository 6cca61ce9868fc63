"""Inventory domain exceptions."""

from typing import Any
from uuid import UUID

from stockroom.domain.shared.exceptions import (
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)


class InvalidInventoryItemError(ValidationError):
    """Raised when an item field violates its constraints."""

    def __init__(self, message: str, field: str, value: Any = None) -> None:
        self.field = field
        super().__init__(
            message,
            code=ErrorCode.INVALID_ITEM,
            details={"field": field, "value": value},
        )


class InventoryItemNotFoundError(EntityNotFoundError):
    """Raised when an item does not exist for the current user.

    Used for both unknown ids and items owned by another user.
    """

    def __init__(self, item_id: UUID | str) -> None:
        self.item_id = item_id
        super().__init__(
            "Item not found",
            code=ErrorCode.ITEM_NOT_FOUND,
            details={"item_id": str(item_id)},
        )
