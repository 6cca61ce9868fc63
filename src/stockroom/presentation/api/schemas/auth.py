"""Authentication schemas for request/response models."""

from datetime import datetime
from uuid import UUID

from pydantic import ConfigDict, Field

from stockroom.domain.user import User
from stockroom.presentation.api.schemas.common import CamelModel


class RegisterRequest(CamelModel):
    """Request schema for user registration.

    Fields are optional here so that missing values reach the service,
    which rejects them with a single "All fields are required" message.
    """

    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    password: str | None = Field(
        default=None,
        description="Password (8 characters to 72 bytes)",
    )
    phone: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "firstName": "Ada",
                "lastName": "Lovelace",
                "email": "ada@example.com",
                "password": "securepassword123",
                "phone": "+44 20 7946 0000",
            },
        },
    )


class LoginRequest(CamelModel):
    """Request schema for user login."""

    email: str | None = None
    password: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "ada@example.com",
                "password": "securepassword123",
            },
        },
    )


class UserResponse(CamelModel):
    """Public user representation. Never includes the password digest."""

    id: UUID
    first_name: str
    last_name: str
    email: str
    phone: str
    role: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id,
            first_name=user.first_name,
            last_name=user.last_name,
            email=user.email,
            phone=user.phone,
            role=user.role.value,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


class AuthPayload(CamelModel):
    """Payload returned by register and login."""

    token: str
    user: UserResponse
