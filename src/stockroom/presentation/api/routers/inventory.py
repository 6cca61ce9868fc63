"""Inventory router for item management, activity and analytics."""

import logging
from typing import Annotated

from fastapi import APIRouter, Query, status

from stockroom.application.commands.inventory import (
    CreateInventoryItemCommand,
    DeleteInventoryItemCommand,
    UpdateInventoryItemCommand,
)
from stockroom.application.queries.inventory import (
    DEFAULT_ACTIVITY_LIMIT,
    InventoryActivityQuery,
    InventoryAnalyticsQuery,
    InventoryStatsQuery,
    ListInventoryItemsQuery,
)
from stockroom.presentation.api.dependencies import RepoFactory
from stockroom.presentation.api.schemas import (
    ActivityEntryResponse,
    AnalyticsResponse,
    DataResponse,
    ItemCreateRequest,
    ItemResponse,
    ItemUpdateRequest,
    MessageResponse,
    StatsResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()

ActivityLimit = Annotated[
    int,
    Query(description="Number of entries to return", ge=1, le=50),
]


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Add an item",
    responses={
        201: {"description": "Item created"},
        400: {"description": "Invalid item data"},
    },
)
async def create_item(
    request: ItemCreateRequest,
    factory: RepoFactory,
) -> DataResponse[ItemResponse]:
    """Create an item for the current user. The status is derived from quantity."""
    command = CreateInventoryItemCommand.from_factory(factory)

    try:
        item = await command.execute(
            name=request.name,  # type: ignore[arg-type]
            quantity=request.quantity,  # type: ignore[arg-type]
            category=request.category,  # type: ignore[arg-type]
        )
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return DataResponse(data=ItemResponse.from_domain(item))


@router.get(
    "",
    summary="List items",
)
async def list_items(factory: RepoFactory) -> DataResponse[list[ItemResponse]]:
    """List the current user's items, newest first."""
    query = ListInventoryItemsQuery.from_factory(factory)
    items = await query.execute()
    return DataResponse(data=[ItemResponse.from_domain(item) for item in items])


@router.get(
    "/stats",
    summary="Item counts",
)
async def get_stats(factory: RepoFactory) -> DataResponse[StatsResponse]:
    query = InventoryStatsQuery.from_factory(factory)
    result = await query.execute()
    return DataResponse(data=StatsResponse.from_result(result))


@router.get(
    "/activity",
    summary="Recent activity",
)
async def get_recent_activity(
    factory: RepoFactory,
    limit: ActivityLimit = DEFAULT_ACTIVITY_LIMIT,
) -> DataResponse[list[ActivityEntryResponse]]:
    """
    Most recently changed items as activity entries.

    An entry is labelled "out" when the item is out of stock and "in"
    otherwise.
    """
    query = InventoryActivityQuery.from_factory(factory)
    entries = await query.execute(limit=limit)
    return DataResponse(data=[ActivityEntryResponse.from_dto(e) for e in entries])


@router.get(
    "/activity/all",
    summary="Full activity feed",
)
async def get_all_activity(
    factory: RepoFactory,
) -> DataResponse[list[ActivityEntryResponse]]:
    query = InventoryActivityQuery.from_factory(factory)
    entries = await query.execute(limit=None)
    return DataResponse(data=[ActivityEntryResponse.from_dto(e) for e in entries])


@router.get(
    "/analytics",
    summary="Inventory analytics",
)
async def get_analytics(factory: RepoFactory) -> DataResponse[AnalyticsResponse]:
    """
    Overview, top items by quantity and stock health.

    ``totalValue`` is the sum of quantities and ``itemsSold`` the number of
    items that are currently out of stock.
    """
    query = InventoryAnalyticsQuery.from_factory(factory)
    result = await query.execute()
    return DataResponse(data=AnalyticsResponse.from_result(result))


@router.put(
    "/{item_id}",
    summary="Update an item",
    responses={
        200: {"description": "Item updated"},
        400: {"description": "Invalid item data"},
        404: {"description": "Item not found"},
    },
)
async def update_item(
    item_id: str,
    request: ItemUpdateRequest,
    factory: RepoFactory,
) -> DataResponse[ItemResponse]:
    """Partially update an item. Omitted fields keep their current value."""
    command = UpdateInventoryItemCommand.from_factory(factory)

    try:
        item = await command.execute(
            item_id=item_id,
            name=request.name,
            quantity=request.quantity,
            category=request.category,
        )
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return DataResponse(data=ItemResponse.from_domain(item))


@router.delete(
    "/{item_id}",
    summary="Delete an item",
    responses={
        200: {"description": "Item deleted"},
        404: {"description": "Item not found"},
    },
)
async def delete_item(item_id: str, factory: RepoFactory) -> MessageResponse:
    command = DeleteInventoryItemCommand.from_factory(factory)

    try:
        await command.execute(item_id=item_id)
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return MessageResponse(message="Item deleted successfully")
