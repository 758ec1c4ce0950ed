"""Main entry point for the Storefront Service."""

import uvicorn

from storefront_service.config import Settings
from storefront_service.server import create_app


def run() -> None:
    """Serve the app on the configured interface and port."""
    settings = Settings.from_env()
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
