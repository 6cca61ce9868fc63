"""FastAPI dependency injection for the Stockroom API.

Provides dependencies for:
- Database sessions
- Authentication (user context from JWT)
- Repository factory for user-scoped data access
- Service instances
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Annotated, AsyncGenerator

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from stockroom.application.context import UserContext
from stockroom.application.services import AuthenticationService
from stockroom.infrastructure.persistence.sqlalchemy.repositories import (
    SQLAlchemyRepositoryFactory,
)
from stockroom.infrastructure.persistence.sqlalchemy.repositories.user import (
    UserRepositorySQLAlchemy,
)
from stockroom_auth import (
    AuthenticationRequiredError,
    InvalidTokenError,
    JWTService,
    PasswordHashingService,
)
from stockroom_auth.persistence.sqlalchemy import UserCredentialRepositorySQLAlchemy
from stockroom_config.settings import get_settings

logger = logging.getLogger(__name__)

# Security scheme for JWT Bearer tokens
security = HTTPBearer(auto_error=False)


@lru_cache()
def get_database_url() -> str:
    """
    Get database URL from application settings.

    Returns
    -------
    Database URL string
    """
    url = get_settings().database_url

    # Ensure data directory exists for file-based SQLite
    if url.startswith("sqlite") and ":memory:" not in url:
        db_path = url.split("///")[-1]
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    return url


# -----------------------------------------------------------------------------
# Database Engine & Session (Singleton)
# -----------------------------------------------------------------------------


@lru_cache(maxsize=1)
def get_engine() -> AsyncEngine:
    """
    Get the shared async database engine (singleton).

    The engine manages the connection pool and is reused across all requests.

    Returns
    -------
    AsyncEngine instance
    """
    return create_async_engine(
        get_database_url(),
        echo=False,
        pool_pre_ping=True,  # Verify connections before use
    )


@lru_cache(maxsize=1)
def get_session_maker() -> async_sessionmaker[AsyncSession]:
    """
    Get the shared async session maker (singleton).

    Returns
    -------
    async_sessionmaker configured with the shared engine
    """
    return async_sessionmaker(
        get_engine(),
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Database session dependency.

    Creates an async session for the request using the shared engine/pool.

    Yields
    ------
    AsyncSession for database operations
    """
    async with get_session_maker()() as session:
        yield session


# Type alias for injected session
DBSession = Annotated[AsyncSession, Depends(get_db_session)]


# -----------------------------------------------------------------------------
# Authentication Services
# -----------------------------------------------------------------------------


def get_jwt_service(request: Request) -> JWTService:
    """Get the JWT service built once by the app factory."""
    return request.app.state.jwt_service


def get_password_service(request: Request) -> PasswordHashingService:
    """Get the password hashing service built once by the app factory."""
    return request.app.state.password_service


async def get_authentication_service(
    session: DBSession,
    jwt_service: JWTService = Depends(get_jwt_service),
    password_service: PasswordHashingService = Depends(get_password_service),
) -> AuthenticationService:
    """
    Get authentication service with all dependencies.

    This service orchestrates user registration, login, and profile lookup.
    """
    user_repo = UserRepositorySQLAlchemy(session)
    credential_repo = UserCredentialRepositorySQLAlchemy(session)

    return AuthenticationService(
        user_repository=user_repo,
        credential_repository=credential_repo,
        password_service=password_service,
        jwt_service=jwt_service,
    )


# Type alias for injected auth service
AuthService = Annotated[AuthenticationService, Depends(get_authentication_service)]


# -----------------------------------------------------------------------------
# User Context (JWT Authentication)
# -----------------------------------------------------------------------------


async def get_user_context(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    jwt_service: JWTService = Depends(get_jwt_service),
) -> UserContext:
    """
    FastAPI dependency that turns a bearer token into a UserContext.

    The token is verified statelessly; the database is not consulted.

    Raises
    ------
    AuthenticationRequiredError
        If there is no Authorization header
    InvalidTokenError
        If the header is not a Bearer token, or the token signature,
        claims or expiry are invalid
    """
    if credentials is None:
        # HTTPBearer also yields None for a non-Bearer scheme
        if request.headers.get("Authorization"):
            raise InvalidTokenError
        raise AuthenticationRequiredError

    try:
        payload = jwt_service.verify_token(credentials.credentials)
    except InvalidTokenError as e:
        logger.warning("Rejected token: %s", e.message)
        raise InvalidTokenError from e

    return UserContext.from_token(payload)


# Type alias for injected user context
CurrentUserContext = Annotated[UserContext, Depends(get_user_context)]


async def get_repository_factory(
    session: DBSession,
    user_context: CurrentUserContext,
) -> SQLAlchemyRepositoryFactory:
    """
    Get repository factory for the current user.

    The factory creates user-scoped repositories for domain operations.
    """
    return SQLAlchemyRepositoryFactory(session=session, user_context=user_context)


# Type alias for injected repository factory
RepoFactory = Annotated[SQLAlchemyRepositoryFactory, Depends(get_repository_factory)]


# -----------------------------------------------------------------------------
# Application Queries & Commands
# -----------------------------------------------------------------------------
# Application layer classes have from_factory() classmethods that encapsulate
# their dependency knowledge. Use them directly in routers:
#
#   async def list_items(factory: RepoFactory):
#       query = ListInventoryItemsQuery.from_factory(factory)  # NOQA: ERA001
