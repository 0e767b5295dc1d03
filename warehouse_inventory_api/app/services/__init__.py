"""
Service layer.

``InventoryService`` keeps the inventory in memory and implements all
add, remove, query and aggregation logic.  The API handlers only
translate between HTTP and these calls.
"""

from .inventory_service import InventoryService  # noqa: F401
