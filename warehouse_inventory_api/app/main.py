"""
Main entrypoint for the Warehouse Inventory API.

This module assembles the FastAPI application.  ``create_app`` sets
up logging, creates the inventory store the application owns,
installs the error handlers that render failures in the response
envelope, enables CORS and mounts the API router.  An instance is
created at import time as ``app`` so it can be served directly::

    uvicorn warehouse_inventory_api.app.main:app --reload
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api.router import router as api_router
from .core.config import Settings, settings as default_settings
from .core.logging_config import setup_logging
from .services.inventory_service import InventoryService

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    service: InventoryService = app.state.inventory_service
    logger.info(
        "Inventory store ready (capacity %d per category, low stock threshold %d)",
        service.max_items_per_category,
        service.low_stock_threshold,
    )
    yield
    # Contents are never persisted; drop them with the process.
    service.clear_inventory()
    logger.info("Inventory store released")


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Render malformed bodies and query parameters as HTTP 400."""
    errors = exc.errors()
    if errors:
        first = errors[0]
        # JSON decode errors carry an integer offset in loc; keep field names only.
        location = ".".join(
            part for part in first.get("loc", ()) if isinstance(part, str) and part != "body"
        )
        message = f"{location}: {first.get('msg')}" if location else str(first.get("msg"))
    else:
        message = "Invalid request"
    logger.warning("Rejected request to %s: %s", request.url.path, message)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"success": False, "message": message},
    )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use.  Defaults to the module‑level settings
        read from the environment.

    Returns
    -------
    FastAPI
        A configured application with its own empty inventory store
        available as ``app.state.inventory_service``.
    """
    settings = settings or default_settings
    log_level = setup_logging(settings.log_level, settings.log_file or None)
    logger.debug("Logging configured at %s", logging.getLevelName(log_level))

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.inventory_service = InventoryService(
        max_items_per_category=settings.max_items_per_category,
        low_stock_threshold=settings.low_stock_threshold,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    app.include_router(api_router, prefix="/api")
    return app


app = create_app()
