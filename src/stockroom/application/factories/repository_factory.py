"""Repository factory protocol for application layer."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

from stockroom.domain.inventory.repositories import InventoryItemRepository

if TYPE_CHECKING:
    from stockroom.application.context import UserContext


class RepositoryFactory(Protocol):
    """Protocol for creating user-scoped repositories."""

    @property
    def current_user(self) -> UserContext:
        """Get the current user for repository scoping."""
        ...

    @property
    def session(self) -> Any:
        """Get the database session for transaction management.

        Typed as `Any` so the application layer does not depend on a
        particular database library. Use this for commit/rollback at the
        presentation layer.
        """
        ...

    def inventory_item_repository(self) -> InventoryItemRepository:
        """Get the inventory item repository for the current user."""
        ...
