"""Common schemas shared across API endpoints.

Every response uses one of two envelopes:

    {"success": true, "data": ...}
    {"success": false, "message": "..."}

JSON keys are camelCase; Python attributes stay snake_case.
"""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
    """Base model that reads and writes camelCase JSON keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class DataResponse(CamelModel, Generic[T]):
    """Success envelope wrapping the payload."""

    success: bool = True
    data: T


class MessageResponse(CamelModel):
    """Success envelope for operations without a payload."""

    success: bool = True
    message: str


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str = Field(..., description="Health status")
    version: str = Field(..., description="API version")
