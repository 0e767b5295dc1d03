"""
FastAPI dependencies shared by the endpoint modules.

The inventory store is owned by the application (``app.state``) and
handed to route handlers through ``get_inventory_service``, so each
app instance, including the ones built by tests, has its own store.
"""

from fastapi import Request

from warehouse_inventory_api.app.services.inventory_service import InventoryService


def get_inventory_service(request: Request) -> InventoryService:
    """Return the store attached to the running application."""
    return request.app.state.inventory_service
