from stockroom.application.queries.inventory.activity_query import (
    DEFAULT_ACTIVITY_LIMIT,
    InventoryActivityQuery,
)
from stockroom.application.queries.inventory.analytics_query import (
    TOP_PERFORMING_LIMIT,
    InventoryAnalyticsQuery,
)
from stockroom.application.queries.inventory.list_items_query import (
    ListInventoryItemsQuery,
)
from stockroom.application.queries.inventory.stats_query import InventoryStatsQuery

__all__ = [
    "DEFAULT_ACTIVITY_LIMIT",
    "TOP_PERFORMING_LIMIT",
    "InventoryActivityQuery",
    "InventoryAnalyticsQuery",
    "InventoryStatsQuery",
    "ListInventoryItemsQuery",
]
