"""Entry point for the Warehouse Inventory API.

Serves the FastAPI application with uvicorn.  Host, port and log
level come from the environment (``HOST``, ``PORT``, ``LOG_LEVEL``);
see ``warehouse_inventory_api/app/core/config.py`` for every
supported variable.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from warehouse_inventory_api.app.core.config import settings
from warehouse_inventory_api.app.main import app


async def run_api() -> None:
    """Start the API server and block until it shuts down."""
    # log_config=None keeps the handlers installed by setup_logging.
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
        log_config=None,
    )
    server = Server(config)
    logging.getLogger(__name__).info("Serving on %s:%d", settings.host, settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(run_api())
    except (KeyboardInterrupt, SystemExit):
        pass
