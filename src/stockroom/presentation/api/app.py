"""FastAPI application factory.

Creates and configures the FastAPI application with all routers,
middleware, and exception handlers.
"""

import logging
import sys
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.ext.asyncio import AsyncEngine

from stockroom import __version__
from stockroom.infrastructure.persistence.sqlalchemy.init_db import create_tables
from stockroom.presentation.api.dependencies import get_engine
from stockroom.presentation.api.exception_handlers import setup_exception_handlers
from stockroom.presentation.api.routers import auth_router, inventory_router
from stockroom.presentation.api.schemas import HealthResponse
from stockroom_auth import JWTService, PasswordHashingService
from stockroom_config.settings import Settings, get_settings


@lru_cache(maxsize=1)
def _configure_logging(log_level_str: str) -> None:
    """Configure application logging.

    Sets up logging for the stockroom application with:
    - Console output with timestamps and module names
    - Configurable log level for stockroom modules (from settings)
    - WARNING level for noisy third-party libraries
    """
    log_level = getattr(logging, log_level_str.upper(), logging.INFO)

    log_format = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    logging.basicConfig(
        level=log_level,
        format=log_format,
        datefmt=date_format,
        stream=sys.stdout,
        force=True,  # Override any existing config
    )

    logging.getLogger("stockroom").setLevel(log_level)
    logging.getLogger("stockroom_auth").setLevel(log_level)

    # Quiet down noisy third-party loggers
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)


logger = logging.getLogger(__name__)

API_PREFIX = "/api"

OPENAPI_TAGS = [
    {
        "name": "Authentication",
        "description": """User registration, login and profile.

- Passwords are hashed with bcrypt
- Bearer tokens (JWT, HS256) expire after a fixed lifetime
- There is no logout or token revocation
""",
    },
    {
        "name": "Inventory",
        "description": """Per-user inventory items.

**Status** is derived from quantity and cannot be set directly:
- `Out of Stock`: quantity 0
- `Low Stock`: quantity 1 to 10
- `In Stock`: quantity above 10

Activity and analytics are computed from the current items.
""",
    },
    {
        "name": "Health",
        "description": "Service health monitoring endpoints.",
    },
]


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    logger.info("Starting Stockroom API v%s...", __version__)
    engine = get_engine()
    await _init_database_schema(engine)
    yield

    # Shutdown - dispose the shared engine and its connection pool
    logger.info("Shutting down Stockroom API...")
    await engine.dispose()
    logger.info("Database connections closed")


async def _init_database_schema(engine: AsyncEngine) -> None:
    """Initialize database schema (if not existent) and verify connectivity."""
    try:
        await create_tables(engine)
    except ConnectionRefusedError:
        logger.critical("Could not connect to the database.")
        raise SystemExit(1) from None


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    settings
        Optional settings override for testing.

    Returns
    -------
    Configured FastAPI application instance.

    Raises
    ------
    ConfigurationError
        If no JWT signing secret is configured
    """
    if settings is None:
        settings = get_settings()

    _configure_logging(settings.log_level)

    secret = settings.jwt_secret_key
    jwt_service = JWTService(
        secret_key=secret.get_secret_value() if secret is not None else None,
        access_token_expire_days=settings.jwt_access_token_expire_days,
    )
    password_service = PasswordHashingService(rounds=settings.password_hash_rounds)

    app = FastAPI(
        title=f"{settings.app_name} API",
        description="Multi-user **inventory tracking** with stock status analytics.",
        version=__version__,
        docs_url="/docs" if settings.api_debug else None,
        redoc_url="/redoc" if settings.api_debug else None,
        openapi_url="/openapi.json" if settings.api_debug else None,
        lifespan=lifespan,
        openapi_tags=OPENAPI_TAGS,
    )

    # Shared, immutable services used by request dependencies
    app.state.settings = settings
    app.state.jwt_service = jwt_service
    app.state.password_service = password_service

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    setup_exception_handlers(app)

    app.include_router(
        auth_router,
        prefix=f"{API_PREFIX}/auth",
        tags=["Authentication"],
    )
    app.include_router(
        inventory_router,
        prefix=f"{API_PREFIX}/inventory",
        tags=["Inventory"],
    )

    @app.get("/health", tags=["Health"])
    async def health_check() -> HealthResponse:
        """Health check endpoint.

        Returns service status and version info.
        """
        return HealthResponse(status="healthy", version=__version__)

    return app
