"""ASGI entry point.

Run with::

    uvicorn stockroom.presentation.api.main:app

Settings are read from the environment when this module is imported; a
missing JWT_SECRET_KEY stops the process here.
"""

import uvicorn

from stockroom.presentation.api.app import create_app
from stockroom_config.settings import get_settings

# Application instance for uvicorn
app = create_app()


def run() -> None:
    """Serve the API with the configured host and port."""
    settings = get_settings()
    uvicorn.run(
        "stockroom.presentation.api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_debug,
    )
