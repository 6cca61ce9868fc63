"""Repository interfaces for stockroom_auth.

This package defines abstract repository interfaces that can be implemented
by different persistence technologies.
"""

from stockroom_auth.repositories.user_credential_repository import (
    UserCredentialData,
    UserCredentialRepository,
)

__all__ = ["UserCredentialData", "UserCredentialRepository"]
