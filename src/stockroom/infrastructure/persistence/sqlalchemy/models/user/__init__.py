from stockroom.infrastructure.persistence.sqlalchemy.models.user.user_model import (
    UserModel,
)

__all__ = ["UserModel"]
