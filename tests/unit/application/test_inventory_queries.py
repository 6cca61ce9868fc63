"""Unit tests for inventory queries."""

from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock, Mock
from uuid import uuid4

import pytest

from stockroom.application.dtos.inventory import ActivityType
from stockroom.application.queries.inventory import (
    InventoryActivityQuery,
    InventoryAnalyticsQuery,
    InventoryStatsQuery,
    ListInventoryItemsQuery,
)
from stockroom.domain.inventory import InventoryItem, StockStatus

OWNER_ID = uuid4()


def _item(name: str, quantity: int, minutes_ago: int = 0) -> InventoryItem:
    timestamp = datetime.now(tz=timezone.utc) - timedelta(minutes=minutes_ago)
    return InventoryItem.reconstitute(
        id=uuid4(),
        user_id=OWNER_ID,
        name=name,
        quantity=quantity,
        category="Tools",
        created_at=timestamp,
        updated_at=timestamp,
    )


@pytest.fixture
def item_repo() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def factory(item_repo) -> Mock:
    factory = Mock()
    factory.inventory_item_repository.return_value = item_repo
    return factory


class TestListInventoryItemsQuery:
    async def test_returns_repository_items(self, factory, item_repo):
        items = [_item("Widget", 5), _item("Gadget", 50)]
        item_repo.find_all.return_value = items

        result = await ListInventoryItemsQuery.from_factory(factory).execute()

        assert result == items


class TestInventoryStatsQuery:
    async def test_counts_total_and_low_stock(self, factory, item_repo):
        counts = {None: 7, StockStatus.LOW_STOCK: 2}
        item_repo.count.side_effect = lambda status=None: counts[status]

        result = await InventoryStatsQuery.from_factory(factory).execute()

        assert result.total_items == 7
        assert result.low_stock_items == 2


class TestInventoryActivityQuery:
    async def test_maps_items_to_entries(self, factory, item_repo):
        sold_out = _item("Widget", 0, minutes_ago=1)
        stocked = _item("Gadget", 40, minutes_ago=2)
        item_repo.find_recently_updated.return_value = [sold_out, stocked]

        entries = await InventoryActivityQuery.from_factory(factory).execute()

        item_repo.find_recently_updated.assert_awaited_once_with(limit=3)
        assert [e.item_name for e in entries] == ["Widget", "Gadget"]
        assert entries[0].type == ActivityType.OUT
        assert entries[1].type == ActivityType.IN
        assert entries[0].timestamp == sold_out.updated_at
        assert entries[0].id == sold_out.id

    async def test_low_stock_counts_as_in(self, factory, item_repo):
        item_repo.find_recently_updated.return_value = [_item("Widget", 1)]

        entries = await InventoryActivityQuery.from_factory(factory).execute()

        assert entries[0].type == ActivityType.IN

    async def test_unbounded_feed(self, factory, item_repo):
        item_repo.find_recently_updated.return_value = []

        await InventoryActivityQuery.from_factory(factory).execute(limit=None)

        item_repo.find_recently_updated.assert_awaited_once_with(limit=None)


class TestInventoryAnalyticsQuery:
    async def test_builds_overview_health_and_top_items(self, factory, item_repo):
        # Arrange
        top = [_item("Bolts", 50), _item("Nuts", 20), _item("Widget", 5)]
        counts = {
            StockStatus.OUT_OF_STOCK: 1,
            StockStatus.LOW_STOCK: 1,
            StockStatus.IN_STOCK: 2,
        }
        item_repo.total_quantity.return_value = 75
        item_repo.count.side_effect = lambda status=None: counts[status]
        item_repo.find_top_by_quantity.return_value = top

        # Act
        result = await InventoryAnalyticsQuery.from_factory(factory).execute()

        # Assert
        assert result.overview.total_value == 75
        assert result.overview.items_sold == 1
        assert result.health.low_stock == 1
        assert result.health.out_of_stock == 1
        assert result.health.in_stock == 2
        assert result.top_performing == top
        item_repo.find_top_by_quantity.assert_awaited_once_with(3)
