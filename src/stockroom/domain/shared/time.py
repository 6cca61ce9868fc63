"""Timestamps used by entities and repositories.

All domain timestamps are aware datetimes in UTC.
"""

from datetime import datetime, timezone


def utc_now() -> datetime:
    return datetime.now(tz=timezone.utc)


def ensure_tz_aware(dt: datetime) -> datetime:
    """Attach UTC to a naive datetime read back from the database.

    SQLite drops the offset of ``DateTime(timezone=True)`` columns, so
    values loaded from it come back naive even though they were stored
    as UTC. Aware values pass through unchanged.
    """
    return dt if dt.tzinfo is not None else dt.replace(tzinfo=timezone.utc)
