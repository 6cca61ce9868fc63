from stockroom.application.dtos.inventory.activity_dto import (
    ActivityEntry,
    ActivityType,
)
from stockroom.application.dtos.inventory.analytics_dto import (
    AnalyticsResult,
    InventoryHealth,
    InventoryOverview,
)
from stockroom.application.dtos.inventory.stats_dto import InventoryStatsResult

__all__ = [
    "ActivityEntry",
    "ActivityType",
    "AnalyticsResult",
    "InventoryHealth",
    "InventoryOverview",
    "InventoryStatsResult",
]
