"""DTOs for the inventory analytics query."""

from dataclasses import dataclass, field

from stockroom.domain.inventory import InventoryItem


@dataclass(frozen=True)
class InventoryOverview:
    """Headline numbers.

    ``total_value`` is the sum of all quantities and ``items_sold`` the
    number of items currently out of stock; both are approximations
    computed from current state.
    """

    total_value: int
    items_sold: int


@dataclass(frozen=True)
class InventoryHealth:
    low_stock: int
    out_of_stock: int
    in_stock: int


@dataclass(frozen=True)
class AnalyticsResult:
    """Result of the analytics query."""

    overview: InventoryOverview
    health: InventoryHealth
    top_performing: list[InventoryItem] = field(default_factory=list)
