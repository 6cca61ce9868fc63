"""SQLAlchemy implementation of InventoryItemRepository."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional
from uuid import UUID

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from stockroom.domain.inventory import (
    InventoryItem,
    InventoryItemRepository,
    StockStatus,
)
from stockroom.domain.shared.time import ensure_tz_aware
from stockroom.infrastructure.persistence.sqlalchemy.models import InventoryItemModel

if TYPE_CHECKING:
    from stockroom.application.context import UserContext

logger = logging.getLogger(__name__)


class InventoryItemRepositorySQLAlchemy(InventoryItemRepository):
    """SQLAlchemy implementation of the inventory item repository.

    Every statement is filtered by the owning user, so items of other
    users are never loaded, changed or counted.
    """

    def __init__(self, session: AsyncSession, user_context: UserContext):
        self._session = session
        self._user_id = user_context.user_id

    async def save(self, item: InventoryItem) -> None:
        model = await self._find_model_by_id(item.id)

        if model:
            logger.debug("Updating existing item: %s", item.id)
            self._update_model_from_domain(model, item)
        else:
            logger.debug("Creating new item: %s", item.id)
            model = self._create_model_from_domain(item)
            self._session.add(model)

        await self._session.flush()

    async def find_by_id(self, item_id: UUID) -> Optional[InventoryItem]:
        model = await self._find_model_by_id(item_id)

        if not model:
            return None

        return self._map_to_domain(model)

    async def find_all(self) -> list[InventoryItem]:
        stmt = (
            select(InventoryItemModel)
            .where(InventoryItemModel.user_id == self._user_id)
            .order_by(InventoryItemModel.created_at.desc())
        )
        result = await self._session.execute(stmt)
        return [self._map_to_domain(model) for model in result.scalars().all()]

    async def find_recently_updated(
        self,
        limit: Optional[int] = None,
    ) -> list[InventoryItem]:
        stmt = (
            select(InventoryItemModel)
            .where(InventoryItemModel.user_id == self._user_id)
            .order_by(InventoryItemModel.updated_at.desc())
        )
        if limit is not None:
            stmt = stmt.limit(limit)

        result = await self._session.execute(stmt)
        return [self._map_to_domain(model) for model in result.scalars().all()]

    async def find_top_by_quantity(self, limit: int) -> list[InventoryItem]:
        stmt = (
            select(InventoryItemModel)
            .where(InventoryItemModel.user_id == self._user_id)
            .order_by(
                InventoryItemModel.quantity.desc(),
                InventoryItemModel.created_at.desc(),
            )
            .limit(limit)
        )
        result = await self._session.execute(stmt)
        return [self._map_to_domain(model) for model in result.scalars().all()]

    async def delete(self, item_id: UUID) -> bool:
        stmt = delete(InventoryItemModel).where(
            InventoryItemModel.id == item_id,
            InventoryItemModel.user_id == self._user_id,
        )
        result = await self._session.execute(stmt)
        await self._session.flush()

        deleted = result.rowcount > 0
        if deleted:
            logger.debug("Item deleted: %s", item_id)
        return deleted

    async def count(self, status: Optional[StockStatus] = None) -> int:
        stmt = (
            select(func.count())
            .select_from(InventoryItemModel)
            .where(InventoryItemModel.user_id == self._user_id)
        )
        if status is not None:
            stmt = stmt.where(InventoryItemModel.status == status.value)

        result = await self._session.execute(stmt)
        return result.scalar_one()

    async def total_quantity(self) -> int:
        stmt = select(func.coalesce(func.sum(InventoryItemModel.quantity), 0)).where(
            InventoryItemModel.user_id == self._user_id,
        )
        result = await self._session.execute(stmt)
        return int(result.scalar_one())

    async def _find_model_by_id(self, item_id: UUID) -> Optional[InventoryItemModel]:
        stmt = select(InventoryItemModel).where(
            InventoryItemModel.id == item_id,
            InventoryItemModel.user_id == self._user_id,
        )
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _map_to_domain(self, model: InventoryItemModel) -> InventoryItem:
        return InventoryItem.reconstitute(
            id=model.id,
            user_id=model.user_id,
            name=model.name,
            quantity=model.quantity,
            category=model.category,
            created_at=ensure_tz_aware(model.created_at),
            updated_at=ensure_tz_aware(model.updated_at),
        )

    def _create_model_from_domain(self, item: InventoryItem) -> InventoryItemModel:
        return InventoryItemModel(
            id=item.id,
            user_id=item.user_id,
            name=item.name,
            quantity=item.quantity,
            category=item.category,
            status=item.status.value,
            created_at=item.created_at,
            updated_at=item.updated_at,
        )

    def _update_model_from_domain(
        self,
        model: InventoryItemModel,
        item: InventoryItem,
    ) -> None:
        # user_id and created_at never change after creation
        model.name = item.name
        model.quantity = item.quantity
        model.category = item.category
        model.status = item.status.value
        model.updated_at = item.updated_at
