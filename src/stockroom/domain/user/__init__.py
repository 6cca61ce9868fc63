"""User domain manages user identity.

This domain handles:
- User aggregate (identity: id, email, names, phone, role)
- Email and role value objects
- Repository interface (implementation in infrastructure)

Design notes:
- User ID is a random UUID4 generated at creation (opaque, unpredictable)
- Email is normalized to lowercase and unique across users
- Password credentials live in stockroom_auth, never on the aggregate
"""

from stockroom.domain.user.aggregates import User
from stockroom.domain.user.exceptions import (
    EmailAlreadyExistsError,
    InvalidEmailError,
    UserNotFoundError,
)
from stockroom.domain.user.repositories import UserRepository
from stockroom.domain.user.value_objects import Email, UserRole

__all__ = [
    "Email",
    "EmailAlreadyExistsError",
    "InvalidEmailError",
    "User",
    "UserNotFoundError",
    "UserRepository",
    "UserRole",
]
