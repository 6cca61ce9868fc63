"""Declarative base and shared columns for the stockroom tables."""

from datetime import datetime

from sqlalchemy import DateTime
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from stockroom.domain.shared.time import utc_now


class Base(DeclarativeBase):
    pass


class TimestampMixin:
    """Adds ``created_at`` / ``updated_at``.

    Entities set both values themselves; the column defaults only cover
    rows written without going through an entity.
    """

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        onupdate=utc_now,
        nullable=False,
    )
