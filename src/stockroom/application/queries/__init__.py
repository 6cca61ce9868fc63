"""Query layer - read-only operations.

Queries never mutate state; they read through the same user-scoped
repositories as commands and return domain entities or DTOs.
"""

from stockroom.application.queries.inventory import (
    InventoryActivityQuery,
    InventoryAnalyticsQuery,
    InventoryStatsQuery,
    ListInventoryItemsQuery,
)

__all__ = [
    "InventoryActivityQuery",
    "InventoryAnalyticsQuery",
    "InventoryStatsQuery",
    "ListInventoryItemsQuery",
]
