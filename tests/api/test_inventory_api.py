"""API tests for inventory read endpoints."""

from urllib.parse import quote

from httpx import AsyncClient

MANAGER = {"X-User-Role": "manager"}
WAREHOUSE = {"X-User-Role": "warehouse"}


class TestInventoryAPI:
    async def test_overview_manager(self, client: AsyncClient):
        response = await client.get("/api/inventory", headers=MANAGER)
        assert response.status_code == 200

        data = response.json()
        assert data["total"] == 2
        widget = next(i for i in data["items"] if i["name"] == "Widget")
        assert widget["total_quantity"] == 8
        assert widget["total_value"] == 17.5
        assert widget["batch_count"] == 2
        assert data["summary"]["total_value"] == 30.0

    async def test_overview_defaults_to_warehouse(self, client: AsyncClient):
        response = await client.get("/api/inventory")
        data = response.json()
        assert all(i["total_value"] is None for i in data["items"])
        assert data["summary"]["total_value"] is None

    async def test_unknown_role_rejected(self, client: AsyncClient):
        response = await client.get("/api/inventory", headers={"X-User-Role": "admin"})
        assert response.status_code == 400
        assert response.json()["error_code"] == "VALIDATION_ERROR"

    async def test_query_filter(self, client: AsyncClient):
        response = await client.get("/api/inventory", params={"q": "acme"}, headers=MANAGER)
        assert [i["name"] for i in response.json()["items"]] == ["Gadget"]

    async def test_summary(self, client: AsyncClient):
        response = await client.get("/api/inventory/summary", headers=MANAGER)
        assert response.status_code == 200
        assert response.json() == {
            "item_count": 2,
            "batch_count": 3,
            "total_quantity": 18.0,
            "total_value": 30.0,
        }

    async def test_suggestions(self, client: AsyncClient):
        response = await client.get("/api/inventory/suggestions", params={"q": "wid"})
        assert response.json()["names"] == ["Widget"]

    async def test_item_history(self, client: AsyncClient):
        response = await client.get(f"/api/inventory/items/{quote('Widget')}/history")
        assert response.status_code == 200
        data = response.json()
        assert [b["id"] for b in data["batches"]] == ["b2", "b1"]
        assert data["withdrawals"] == []

    async def test_item_history_unknown_name(self, client: AsyncClient):
        response = await client.get("/api/inventory/items/Sprocket/history")
        assert response.status_code == 404
        assert response.json()["error_code"] == "ITEM_NOT_FOUND"


class TestExportAPI:
    async def test_manager_export(self, client: AsyncClient):
        response = await client.get("/api/inventory/export", headers=MANAGER)

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/csv")
        assert "inventory_full_" in response.headers["content-disposition"]
        assert response.content.startswith(b"\xef\xbb\xbf")
        body = response.content.decode("utf-8-sig")
        assert body.splitlines()[0] == "Item Name,Total Quantity,Total Value,Average Price"
        assert "Widget,8,17.50,2.1875" in body

    async def test_warehouse_export_redacted(self, client: AsyncClient):
        response = await client.get("/api/inventory/export", headers=WAREHOUSE)

        assert "inventory_redacted_" in response.headers["content-disposition"]
        body = response.content.decode("utf-8-sig")
        assert body.splitlines()[0] == "Item Name,Total Quantity"
        assert "Widget,8" in body
