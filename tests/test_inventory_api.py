"""Integration tests for the inventory API endpoints via TestClient."""

import logging

import pytest
from fastapi.testclient import TestClient

from warehouse_inventory_api.app.core.config import Settings
from warehouse_inventory_api.app.main import create_app


class TestAddEndpoint:
    def test_add_item(self, add):
        response = add(productId="A1", quantity=5, expirationDate="2026-11-30", unitPrice=0.5)

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["message"] == "Item added successfully"
        assert data["item"]["productId"] == "A1"
        assert data["item"]["quantity"] == 5
        assert data["item"]["expirationDate"] == "2026-11-30"
        assert data["item"]["unitPrice"] == 0.5

    def test_echo_carries_default_category(self, client):
        response = client.post("/api/inventory/add", json={"productId": "X1", "quantity": 1})

        assert response.status_code == 200
        assert response.json()["item"]["category"] == "UNCATEGORIZED"

    def test_add_same_product_merges(self, client, add):
        add(productId="A1", quantity=5)
        add(productId="A1", quantity=3)

        data = client.get("/api/inventory/category/produce").json()
        assert data["count"] == 1
        assert data["items"][0]["quantity"] == 8

    def test_missing_product_id_is_bad_request(self, client):
        response = client.post("/api/inventory/add", json={"quantity": 1, "category": "produce"})

        assert response.status_code == 400
        assert response.json() == {"success": False, "message": "Item and productId cannot be null"}

    def test_null_body_is_bad_request(self, client):
        response = client.post(
            "/api/inventory/add",
            content="null",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json()["success"] is False

    def test_malformed_field_is_bad_request(self, add):
        response = add(quantity="lots")

        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert "quantity" in body["message"]

    def test_unparseable_json_names_no_offset(self, client):
        response = client.post(
            "/api/inventory/add",
            content="{bad",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert not body["message"][0].isdigit()
        assert body["message"] == "JSON decode error"

    def test_null_quantity_and_price_count_as_zero(self, client):
        response = client.post(
            "/api/inventory/add",
            json={"productId": "N1", "quantity": None, "unitPrice": None},
        )

        assert response.status_code == 200
        item = response.json()["item"]
        assert item["quantity"] == 0
        assert item["unitPrice"] == 0.0

    def test_full_category_is_conflict(self, add):
        for pid in ("A1", "A2", "A3"):
            assert add(productId=pid).status_code == 200

        response = add(productId="A4")

        assert response.status_code == 409
        assert response.json() == {
            "success": False,
            "message": "Failed to add item: Category capacity exceeded",
        }


class TestRemoveEndpoint:
    def test_reduce_quantity(self, client, add):
        add(productId="A1", quantity=8)

        response = client.delete("/api/inventory/remove/A1", params={"quantity": 2})

        assert response.status_code == 200
        assert response.json() == {"success": True, "message": "Quantity reduced successfully"}
        assert client.get("/api/inventory/A1").json()["item"]["quantity"] == 6

    def test_remove_whole_item(self, client, add):
        add(productId="A1", quantity=8)

        response = client.delete("/api/inventory/remove/A1")

        assert response.status_code == 200
        assert response.json()["message"] == "Item removed successfully"
        assert client.get("/api/inventory/A1").status_code == 404

    def test_remove_unknown_item(self, client):
        response = client.delete("/api/inventory/remove/ghost")

        assert response.status_code == 404
        assert response.json() == {"success": False, "message": "Item not found"}

    def test_non_integer_quantity_is_bad_request(self, client, add):
        add(productId="A1")

        response = client.delete("/api/inventory/remove/A1", params={"quantity": "two"})

        assert response.status_code == 400
        assert response.json()["success"] is False


class TestListEndpoints:
    @pytest.fixture(autouse=True)
    def _seed(self, add):
        add(productId="A1", quantity=12, category="produce", expirationDate="2027-01-10")
        add(productId="A2", quantity=4, category="produce")
        add(productId="B1", quantity=7, category="dairy", expirationDate="2026-11-02")

    def test_all(self, client):
        data = client.get("/api/inventory/all").json()

        assert data["success"] is True
        assert data["count"] == 3
        assert {i["productId"] for i in data["items"]} == {"A1", "A2", "B1"}

    def test_sorted_by_quantity(self, client):
        data = client.get("/api/inventory/sorted/quantity").json()

        assert data["sortBy"] == "quantity"
        assert [i["quantity"] for i in data["items"]] == [4, 7, 12]

    def test_sorted_by_expiration(self, client):
        data = client.get("/api/inventory/sorted/expiration").json()

        assert data["sortBy"] == "expirationDate"
        assert [i["productId"] for i in data["items"]] == ["B1", "A1", "A2"]
        assert data["items"][-1]["expirationDate"] is None

    def test_by_category(self, client):
        data = client.get("/api/inventory/category/produce").json()

        assert data["category"] == "produce"
        assert data["count"] == 2
        assert [i["productId"] for i in data["items"]] == ["A1", "A2"]

    def test_unknown_category_is_empty(self, client):
        response = client.get("/api/inventory/category/frozen")

        assert response.status_code == 200
        assert response.json() == {"success": True, "items": [], "count": 0, "category": "frozen"}

    def test_get_item(self, client):
        data = client.get("/api/inventory/B1").json()

        assert data["success"] is True
        assert data["item"]["productId"] == "B1"
        assert data["item"]["category"] == "dairy"

    def test_get_missing_item(self, client):
        response = client.get("/api/inventory/ZZ")

        assert response.status_code == 404
        assert response.json()["success"] is False

    def test_2d_array(self, client):
        data = client.get("/api/inventory/2d-array").json()

        assert data["success"] is True
        assert "structure" in data
        grid = data["inventory2D"]
        assert set(grid) == {"produce", "dairy"}
        assert len(grid["produce"]) == 1
        assert [i["productId"] for i in grid["produce"][0]] == ["A1", "A2"]

    def test_low_stock_default(self, client):
        data = client.get("/api/inventory/low-stock").json()

        assert data["threshold"] == 10
        assert [i["productId"] for i in data["items"]] == ["A2", "B1"]

    def test_low_stock_zero_threshold_falls_back(self, client):
        data = client.get("/api/inventory/low-stock", params={"threshold": 0}).json()

        assert data["threshold"] == 10
        assert data["count"] == 2

    def test_low_stock_explicit_threshold(self, client):
        data = client.get("/api/inventory/low-stock", params={"threshold": 5}).json()

        assert data["threshold"] == 5
        assert [i["productId"] for i in data["items"]] == ["A2"]

    def test_statistics(self, client):
        data = client.get("/api/inventory/statistics").json()

        assert data["success"] is True
        assert data["statistics"] == {
            "totalItems": 3,
            "totalQuantity": 23,
            "categoriesCount": 2,
            "lowStockCount": 2,
            "lowStockThreshold": 10,
            "categories": ["produce", "dairy"],
        }


class TestApplication:
    def test_each_app_owns_its_store(self, add):
        add(productId="A1")

        other = create_app(Settings())
        with TestClient(other) as other_client:
            assert other_client.get("/api/inventory/all").json()["count"] == 0

    def test_store_is_cleared_on_shutdown(self, app):
        with TestClient(app) as test_client:
            test_client.post("/api/inventory/add", json={"productId": "A1", "quantity": 1})
            assert app.state.inventory_service.get_item_by_id("A1") is not None

        assert app.state.inventory_service.get_all_items() == []

    def test_unknown_route_uses_envelope(self, client):
        response = client.get("/api/nothing-here")

        assert response.status_code == 404
        assert response.json()["success"] is False

    def test_log_level_applies_to_service_loggers(self):
        package_logger = logging.getLogger("warehouse_inventory_api")
        previous = package_logger.level
        try:
            create_app(Settings(log_level="debug"))
            assert package_logger.level == logging.DEBUG

            create_app(Settings(log_level="nonsense"))
            assert package_logger.level == logging.INFO
        finally:
            package_logger.setLevel(previous)
