from stockroom_auth.persistence.sqlalchemy.models.user_credential_model import (
    UserCredentialModel,
)

__all__ = ["UserCredentialModel"]
