"""Inventory item entity."""

from datetime import datetime
from typing import Any, Optional
from uuid import UUID, uuid4

from stockroom.domain.inventory.exceptions import InvalidInventoryItemError
from stockroom.domain.inventory.value_objects import StockStatus, derive_stock_status
from stockroom.domain.shared.time import utc_now

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 100
CATEGORY_MIN_LENGTH = 2
CATEGORY_MAX_LENGTH = 50
# Largest value a 32-bit INTEGER column holds
QUANTITY_MAX = 2_147_483_647


def _validate_text(value: Any, field: str, label: str, min_len: int, max_len: int) -> str:
    if not isinstance(value, str) or not value.strip():
        msg = f"{label} is required"
        raise InvalidInventoryItemError(msg, field=field, value=value)
    cleaned = value.strip()
    if not min_len <= len(cleaned) <= max_len:
        msg = f"{label} must be between {min_len} and {max_len} characters"
        raise InvalidInventoryItemError(msg, field=field, value=value)
    return cleaned


def _validate_quantity(value: Any) -> int:
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        msg = "Quantity must be a positive number"
        raise InvalidInventoryItemError(msg, field="quantity", value=value)
    if value > QUANTITY_MAX:
        msg = f"Quantity cannot exceed {QUANTITY_MAX}"
        raise InvalidInventoryItemError(msg, field="quantity", value=value)
    return value


class InventoryItem:
    """
    A stock record owned by a single user.

    Multi-User Support:
    - Each item belongs to exactly one user, fixed at creation
    - Item IDs are random UUIDs

    The status is always derived from the quantity; there is no setter.
    """

    def __init__(  # NOQA: PLR0913
        self,
        user_id: UUID,
        name: str,
        quantity: int,
        category: str,
        id: Optional[UUID] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
    ):
        self._user_id = user_id
        self._id = id if id is not None else uuid4()
        self._name = _validate_text(
            name, "name", "Item name", NAME_MIN_LENGTH, NAME_MAX_LENGTH
        )
        self._category = _validate_text(
            category, "category", "Category", CATEGORY_MIN_LENGTH, CATEGORY_MAX_LENGTH
        )
        self._quantity = _validate_quantity(quantity)
        self._status = derive_stock_status(self._quantity)
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or self._created_at

    @classmethod
    def create(
        cls,
        user_id: UUID,
        name: str,
        quantity: int,
        category: str,
    ) -> "InventoryItem":
        return cls(user_id=user_id, name=name, quantity=quantity, category=category)

    @classmethod
    def reconstitute(  # NOQA: PLR0913
        cls,
        id: UUID,
        user_id: UUID,
        name: str,
        quantity: int,
        category: str,
        created_at: datetime,
        updated_at: datetime,
    ) -> "InventoryItem":
        return cls(
            id=id,
            user_id=user_id,
            name=name,
            quantity=quantity,
            category=category,
            created_at=created_at,
            updated_at=updated_at,
        )

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def user_id(self) -> UUID:
        return self._user_id

    @property
    def name(self) -> str:
        return self._name

    @property
    def quantity(self) -> int:
        return self._quantity

    @property
    def category(self) -> str:
        return self._category

    @property
    def status(self) -> StockStatus:
        return self._status

    @property
    def is_out_of_stock(self) -> bool:
        return self._status == StockStatus.OUT_OF_STOCK

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def apply_changes(
        self,
        name: Optional[str] = None,
        quantity: Optional[int] = None,
        category: Optional[str] = None,
    ) -> None:
        """Merge a partial update; omitted (None) fields keep their value.

        All supplied fields are validated before any of them is applied, so
        a rejected update leaves the item untouched.
        """
        new_name = (
            _validate_text(name, "name", "Item name", NAME_MIN_LENGTH, NAME_MAX_LENGTH)
            if name is not None
            else self._name
        )
        new_category = (
            _validate_text(
                category,
                "category",
                "Category",
                CATEGORY_MIN_LENGTH,
                CATEGORY_MAX_LENGTH,
            )
            if category is not None
            else self._category
        )
        new_quantity = (
            _validate_quantity(quantity) if quantity is not None else self._quantity
        )

        self._name = new_name
        self._category = new_category
        self._quantity = new_quantity
        self._status = derive_stock_status(new_quantity)
        self._updated_at = utc_now()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, InventoryItem):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return (
            f"InventoryItem(id={self._id}, name={self._name!r}, "
            f"quantity={self._quantity}, status={self._status.value!r})"
        )
