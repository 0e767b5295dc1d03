"""
Top‑level package for the Warehouse Inventory API.

All functionality lives in the ``app`` subpackage; import the ASGI
application as ``warehouse_inventory_api.app.main:app``.
"""

__all__ = []
