from stockroom.presentation.api.routers.auth import router as auth_router
from stockroom.presentation.api.routers.inventory import router as inventory_router

__all__ = [
    "auth_router",
    "inventory_router",
]
