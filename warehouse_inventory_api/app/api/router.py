"""
Top‑level API router.

Aggregates resource routers under their prefixes.  The application
mounts this router under ``/api``, which places the inventory routes
at ``/api/inventory/...``.
"""

from fastapi import APIRouter

from .endpoints import inventory

router = APIRouter()

router.include_router(inventory.router, prefix="/inventory", tags=["inventory"])
