"""Stockroom Auth - Generic authentication infrastructure.

This package provides authentication infrastructure that is independent
of the inventory domain. It handles:
- Password hashing (bcrypt)
- JWT token creation and verification
- User credential storage (with pluggable persistence)

Architecture:
    stockroom_auth/
    ├── services/           # Pure logic (password hashing, JWT)
    ├── repositories/       # Abstract interfaces
    ├── persistence/        # Implementations by technology
    │   └── sqlalchemy/     # SQLAlchemy implementation
    ├── schemas.py          # Data classes
    └── exceptions.py       # Auth exceptions

Usage:
    from stockroom_auth import PasswordHashingService, JWTService

    from stockroom_auth.persistence.sqlalchemy import (
        UserCredentialRepositorySQLAlchemy,
        UserCredentialModel,
        AuthBase,
    )
"""

from stockroom_auth.exceptions import (
    AuthenticationRequiredError,
    AuthError,
    ConfigurationError,
    InvalidCredentialsError,
    InvalidTokenError,
    WeakPasswordError,
)
from stockroom_auth.repositories import UserCredentialRepository
from stockroom_auth.schemas import TokenPayload
from stockroom_auth.services import JWTService, PasswordHashingService

__all__ = [
    # Services
    "PasswordHashingService",
    "JWTService",
    # Repositories (interfaces)
    "UserCredentialRepository",
    # Schemas
    "TokenPayload",
    # Exceptions
    "AuthError",
    "AuthenticationRequiredError",
    "ConfigurationError",
    "InvalidTokenError",
    "WeakPasswordError",
    "InvalidCredentialsError",
]
