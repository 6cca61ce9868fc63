"""SQLAlchemy implementation for stockroom_auth persistence.

Provides:
- AuthBase: Declarative base for auth models
- UserCredentialModel: SQLAlchemy model for credentials
- UserCredentialRepositorySQLAlchemy: Repository implementation

The consuming application must create AuthBase.metadata alongside its own
metadata (see stockroom.infrastructure.persistence.sqlalchemy.init_db).
"""

from stockroom_auth.persistence.sqlalchemy.base import AuthBase
from stockroom_auth.persistence.sqlalchemy.models import UserCredentialModel
from stockroom_auth.persistence.sqlalchemy.repositories import (
    UserCredentialRepositorySQLAlchemy,
)

__all__ = [
    "AuthBase",
    "UserCredentialModel",
    "UserCredentialRepositorySQLAlchemy",
]
