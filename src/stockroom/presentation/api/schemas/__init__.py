"""Pydantic schemas for API request/response models."""

from stockroom.presentation.api.schemas.auth import (
    AuthPayload,
    LoginRequest,
    RegisterRequest,
    UserResponse,
)
from stockroom.presentation.api.schemas.common import (
    CamelModel,
    DataResponse,
    HealthResponse,
    MessageResponse,
)
from stockroom.presentation.api.schemas.inventory import (
    ActivityEntryResponse,
    AnalyticsResponse,
    ItemCreateRequest,
    ItemResponse,
    ItemUpdateRequest,
    StatsResponse,
)

__all__ = [
    "ActivityEntryResponse",
    "AnalyticsResponse",
    "AuthPayload",
    "CamelModel",
    "DataResponse",
    "HealthResponse",
    "ItemCreateRequest",
    "ItemResponse",
    "ItemUpdateRequest",
    "LoginRequest",
    "MessageResponse",
    "RegisterRequest",
    "StatsResponse",
    "UserResponse",
]
