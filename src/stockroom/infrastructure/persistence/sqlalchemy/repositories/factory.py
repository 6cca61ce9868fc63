"""SQLAlchemy repository factory for creating user-scoped repositories."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy.ext.asyncio import AsyncSession

from stockroom.infrastructure.persistence.sqlalchemy.repositories.inventory import (
    InventoryItemRepositorySQLAlchemy,
)

if TYPE_CHECKING:
    from stockroom.application.context import UserContext


class SQLAlchemyRepositoryFactory:
    """SQLAlchemy implementation of the RepositoryFactory Protocol."""

    def __init__(self, session: AsyncSession, user_context: UserContext):
        self._session = session
        self._user_context = user_context

        # Cached instances (created on demand)
        self._item_repo: InventoryItemRepositorySQLAlchemy | None = None

    @property
    def current_user(self) -> UserContext:
        return self._user_context

    @property
    def session(self) -> AsyncSession:
        return self._session

    def inventory_item_repository(self) -> InventoryItemRepositorySQLAlchemy:
        if self._item_repo is None:
            self._item_repo = InventoryItemRepositorySQLAlchemy(
                self._session,
                self._user_context,
            )
        return self._item_repo
