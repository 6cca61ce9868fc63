"""SQLAlchemy model for inventory items."""

from uuid import UUID

from sqlalchemy import ForeignKey, Index, Integer, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from stockroom.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)


class InventoryItemModel(Base, TimestampMixin):
    """Database model for inventory items.

    ``status`` is a denormalized copy of the status derived from
    ``quantity`` so counts per status can be done in SQL. It is always
    written from the domain entity, never from request input.
    """

    __tablename__ = "inventory_items"

    __table_args__ = (
        # Composite indexes for user-scoped listings and aggregates
        Index("ix_inventory_items_user_created", "user_id", "created_at"),
        Index("ix_inventory_items_user_updated", "user_id", "updated_at"),
        Index("ix_inventory_items_user_status", "user_id", "status"),
    )

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)

    # User ownership (immutable after creation)
    user_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )

    name: Mapped[str] = mapped_column(String(100), nullable=False)
    quantity: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    category: Mapped[str] = mapped_column(String(50), nullable=False)
    status: Mapped[str] = mapped_column(String(20), nullable=False)

    def __repr__(self) -> str:
        return (
            f"<InventoryItemModel(id={self.id}, name={self.name}, "
            f"quantity={self.quantity}, status={self.status})>"
        )
