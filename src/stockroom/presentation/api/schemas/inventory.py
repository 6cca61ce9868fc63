"""Inventory schemas for request/response models."""

from datetime import datetime
from uuid import UUID

from pydantic import ConfigDict

from stockroom.application.dtos.inventory import (
    ActivityEntry,
    AnalyticsResult,
    InventoryStatsResult,
)
from stockroom.domain.inventory import InventoryItem
from stockroom.presentation.api.schemas.common import CamelModel


class ItemCreateRequest(CamelModel):
    """Request schema for adding an item.

    A ``status`` sent by the client is ignored; it is always derived from
    the quantity.
    """

    name: str | None = None
    quantity: int | None = None
    category: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"name": "Widget", "quantity": 5, "category": "Tools"},
        },
    )


class ItemUpdateRequest(CamelModel):
    """Request schema for a partial update. Omitted fields are kept."""

    name: str | None = None
    quantity: int | None = None
    category: str | None = None

    model_config = ConfigDict(
        json_schema_extra={"example": {"quantity": 0}},
    )


class ItemResponse(CamelModel):
    id: UUID
    user_id: UUID
    name: str
    quantity: int
    category: str
    status: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, item: InventoryItem) -> "ItemResponse":
        return cls(
            id=item.id,
            user_id=item.user_id,
            name=item.name,
            quantity=item.quantity,
            category=item.category,
            status=item.status.value,
            created_at=item.created_at,
            updated_at=item.updated_at,
        )


class StatsResponse(CamelModel):
    total_items: int
    low_stock_items: int

    @classmethod
    def from_result(cls, result: InventoryStatsResult) -> "StatsResponse":
        return cls(
            total_items=result.total_items,
            low_stock_items=result.low_stock_items,
        )


class ActivityEntryResponse(CamelModel):
    """One activity feed entry; ``type`` is "in" or "out"."""

    id: UUID
    item_name: str
    quantity: int
    type: str
    timestamp: datetime

    @classmethod
    def from_dto(cls, entry: ActivityEntry) -> "ActivityEntryResponse":
        return cls(
            id=entry.id,
            item_name=entry.item_name,
            quantity=entry.quantity,
            type=entry.type.value,
            timestamp=entry.timestamp,
        )


class OverviewResponse(CamelModel):
    total_value: int
    items_sold: int


class HealthBreakdownResponse(CamelModel):
    low_stock: int
    out_of_stock: int
    in_stock: int


class AnalyticsResponse(CamelModel):
    overview: OverviewResponse
    top_performing: list[ItemResponse]
    health: HealthBreakdownResponse

    @classmethod
    def from_result(cls, result: AnalyticsResult) -> "AnalyticsResponse":
        return cls(
            overview=OverviewResponse(
                total_value=result.overview.total_value,
                items_sold=result.overview.items_sold,
            ),
            top_performing=[
                ItemResponse.from_domain(item) for item in result.top_performing
            ],
            health=HealthBreakdownResponse(
                low_stock=result.health.low_stock,
                out_of_stock=result.health.out_of_stock,
                in_stock=result.health.in_stock,
            ),
        )
