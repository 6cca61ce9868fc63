from stockroom.application.services.authentication_service import (
    AuthenticationService,
)

__all__ = ["AuthenticationService"]
