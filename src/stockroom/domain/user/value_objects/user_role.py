from enum import Enum


class UserRole(str, Enum):
    """User roles carried in every issued token."""

    USER = "user"
    ADMIN = "admin"
