"""
Application package for the Warehouse Inventory API.

The package is split into the usual layers:

* ``core`` holds settings and logging setup;
* ``schemas`` holds the Pydantic models used on the wire and in the store;
* ``services`` holds the in‑memory inventory store;
* ``api`` holds the FastAPI routers that expose the store over HTTP.
"""

from .main import app, create_app  # noqa: F401
