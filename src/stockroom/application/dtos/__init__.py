"""Data transfer objects returned by application queries."""

from stockroom.application.dtos.inventory import (
    ActivityEntry,
    ActivityType,
    AnalyticsResult,
    InventoryHealth,
    InventoryOverview,
    InventoryStatsResult,
)

__all__ = [
    "ActivityEntry",
    "ActivityType",
    "AnalyticsResult",
    "InventoryHealth",
    "InventoryOverview",
    "InventoryStatsResult",
]
