"""SQLAlchemy declarative base for stockroom_auth models.

This provides a separate Base for auth models so the package stays
independent of the application's model registry.

Examples
--------
async with engine.begin() as conn:
    await conn.run_sync(Base.metadata.create_all)
    await conn.run_sync(AuthBase.metadata.create_all)
"""

from sqlalchemy.orm import DeclarativeBase


class AuthBase(DeclarativeBase):
    """Declarative base for stockroom_auth models."""
