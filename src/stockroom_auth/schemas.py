"""Auth schemas and data structures.

These are simple data classes used for transferring identity
data between components.
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class TokenPayload:
    """Decoded JWT token payload.

    This represents the claims extracted from a verified JWT token.

    Attributes
    ----------
    user_id
        The unique identifier of the user (``sub`` claim)
    email
        The user's email address
    role
        The user's role at the time the token was issued
    issued_at
        Token issue timestamp (``iat`` claim)
    expires_at
        Token expiration timestamp (``exp`` claim)
    """

    user_id: UUID
    email: str
    role: str
    issued_at: datetime
    expires_at: datetime

    def is_expired(self) -> bool:
        """Check if the token has expired."""
        return datetime.now(tz=self.expires_at.tzinfo) > self.expires_at
