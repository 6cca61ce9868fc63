"""User context for request-scoped user identity."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING
from uuid import UUID

if TYPE_CHECKING:
    from stockroom_auth import TokenPayload


@dataclass(frozen=True)
class UserContext:
    """
    Immutable context for the current authenticated user.

    This is created once per request from a verified bearer token and
    passed to repositories. Repositories use the user_id to automatically
    filter all queries to the current user's data.
    """

    user_id: UUID
    email: str
    role: str = "user"

    @classmethod
    def from_token(cls, payload: TokenPayload) -> UserContext:
        return cls(user_id=payload.user_id, email=payload.email, role=payload.role)

    def __str__(self) -> str:
        return f"UserContext({self.email})"

    def __repr__(self) -> str:
        return (
            f"UserContext(user_id={self.user_id}, "
            f"email={self.email!r}, role={self.role!r})"
        )
