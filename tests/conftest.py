import pytest
from fastapi.testclient import TestClient

from warehouse_inventory_api.app.core.config import Settings
from warehouse_inventory_api.app.main import create_app
from warehouse_inventory_api.app.schemas.inventory import InventoryItem
from warehouse_inventory_api.app.services.inventory_service import InventoryService


@pytest.fixture()
def service():
    return InventoryService()


@pytest.fixture()
def make_item():
    def _make_item(product_id="A1", quantity=5, category="produce", **overrides):
        return InventoryItem(
            product_id=product_id,
            quantity=quantity,
            category=category,
            **overrides,
        )

    return _make_item


@pytest.fixture()
def app():
    return create_app(Settings(max_items_per_category=3, low_stock_threshold=10))


@pytest.fixture()
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def add(client):
    """Helper: POST /api/inventory/add and return the response."""

    def _add(**fields):
        payload = {"productId": "A1", "productName": "Apples", "quantity": 5, "category": "produce"}
        payload.update(fields)
        return client.post("/api/inventory/add", json=payload)

    return _add
