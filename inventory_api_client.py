"""Warehouse inventory API client.

A thin wrapper around the inventory HTTP API built on the ``requests``
library.  Scripts and other services can use it to add and remove
stock and to run the inventory queries without dealing with URLs or
the response envelope themselves.

Every public method returns a tuple ``(data, error)``:

* on success ``data`` holds the relevant part of the response
  envelope (a list of items, a single item, the statistics ...) and
  ``error`` is ``None``;
* on failure ``data`` is empty (``None``, ``[]`` or ``False``) and
  ``error`` is a dictionary with ``status_code`` and ``message``.
  ``status_code`` is ``None`` when the server could not be reached.

Example::

    client = InventoryAPIClient(base_url="http://localhost:8080")
    client.add_item({"productId": "A1", "quantity": 5, "category": "produce"})
    items, error = client.list_low_stock_items(threshold=10)
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import quote

import requests


logger = logging.getLogger(__name__)

API_PREFIX = "/api/inventory"

Error = Dict[str, Any]


class InventoryAPIClient:
    """Client for the warehouse inventory API."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the service, e.g. ``http://localhost:8080``.
            session: Optional requests session.  One is created when
                omitted.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Perform an HTTP request against the inventory API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``DELETE``).
            path: Path relative to the inventory prefix, e.g. ``/all``.
            params: Query parameters; ``None`` values are dropped.
            json_body: JSON body to send (for ``POST``).
        Returns:
            ``(envelope, None)`` on success or ``(None, error)``.
        """
        url = f"{self.base_url}{API_PREFIX}{path}"
        if params:
            params = {k: v for k, v in params.items() if v is not None}
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params or None,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return {}, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("message") or err_json.get("detail") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("Inventory API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("Inventory API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    def _get_items(
        self, path: str, params: Dict[str, Any] | None = None
    ) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", path, params=params)
        if error:
            return [], error
        return data.get("items", []), None

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------
    def add_item(self, item: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Add an item or merge it into an existing one.

        Args:
            item: Item fields using the API's camelCase names
                (``productId``, ``productName``, ``quantity``,
                ``expirationDate``, ``category``, ``unitPrice``).
        Returns:
            ``(item, error)``; ``item`` is the item echoed by the server.
            A full category is reported with ``status_code`` 409.
        """
        data, error = self._request("POST", "/add", json_body=item)
        if error:
            return None, error
        return data.get("item"), None

    def remove_item(
        self, product_id: str, quantity: Optional[int] = None
    ) -> Tuple[bool, Optional[Error]]:
        """Remove an item, or ``quantity`` units of it.

        Returns:
            ``(True, None)`` on success; an unknown product is reported
            with ``status_code`` 404.
        """
        path = f"/remove/{quote(str(product_id), safe='')}"
        data, error = self._request("DELETE", path, params={"quantity": quantity})
        if error:
            return False, error
        return bool(data.get("success")), None

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def list_items(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Return every item."""
        return self._get_items("/all")

    def list_items_sorted_by_quantity(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._get_items("/sorted/quantity")

    def list_items_sorted_by_expiration(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._get_items("/sorted/expiration")

    def list_items_by_category(self, category: str) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._get_items(f"/category/{quote(category, safe='')}")

    def list_low_stock_items(
        self, threshold: Optional[int] = None
    ) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Return items at or below ``threshold`` (server default when ``None``)."""
        return self._get_items("/low-stock", params={"threshold": threshold})

    def get_item(self, product_id: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Retrieve a single item by product id."""
        data, error = self._request("GET", f"/{quote(str(product_id), safe='')}")
        if error:
            return None, error
        return data.get("item"), None

    def get_inventory_2d(self) -> Tuple[Dict[str, Any], Optional[Error]]:
        """Return the per-category ``[[item, ...]]`` view."""
        data, error = self._request("GET", "/2d-array")
        if error:
            return {}, error
        return data.get("inventory2D", {}), None

    def get_statistics(self) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", "/statistics")
        if error:
            return None, error
        return data.get("statistics"), None
