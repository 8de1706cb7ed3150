"""API tests for batch endpoints."""

from httpx import AsyncClient

MANAGER = {"X-User-Role": "manager"}
WAREHOUSE = {"X-User-Role": "warehouse"}


class TestBatchesAPI:
    async def test_create_batch(self, client: AsyncClient):
        response = await client.post(
            "/api/batches",
            json={
                "name": "Cable",
                "quantity": 4,
                "purchase_date": "2024-04-01",
                "price_mode": "total",
                "total_price": 10,
            },
            headers=MANAGER,
        )

        assert response.status_code == 201
        data = response.json()
        assert data["created"] is True
        assert data["batch"]["price"] == 2.5
        assert data["batch"]["line_value"] == 10.0

    async def test_create_batch_warehouse_price_hidden(self, client: AsyncClient):
        response = await client.post(
            "/api/batches",
            json={"name": "Cable", "quantity": 4, "purchase_date": "2024-04-01", "unit_price": 3},
            headers=WAREHOUSE,
        )
        assert response.status_code == 201
        assert response.json()["batch"]["price"] is None

    async def test_bad_date_rejected(self, client: AsyncClient):
        response = await client.post(
            "/api/batches",
            json={"name": "Cable", "quantity": 4, "purchase_date": "01/04/2024"},
            headers=MANAGER,
        )
        assert response.status_code == 422
        assert response.json()["error_code"] == "VALIDATION_ERROR"

    async def test_oversized_quantity_rejected(self, client: AsyncClient):
        response = await client.post(
            "/api/batches",
            json={"name": "Cable", "quantity": "1E+30", "purchase_date": "2024-04-01"},
            headers=MANAGER,
        )
        assert response.status_code == 422

    async def test_negative_quantity_rejected(self, client: AsyncClient):
        response = await client.post(
            "/api/batches",
            json={"name": "Cable", "quantity": -1, "purchase_date": "2024-04-01"},
        )
        assert response.status_code == 422

    async def test_update_batch(self, client: AsyncClient, batch_store):
        response = await client.put(
            "/api/batches/b1",
            json={"name": "Widget", "quantity": 4, "purchase_date": "2024-01-01"},
            headers=WAREHOUSE,
        )
        assert response.status_code == 200
        assert response.json()["created"] is False
        assert (await batch_store.get_batch("b1")).quantity == 4

    async def test_update_missing_batch(self, client: AsyncClient):
        response = await client.put(
            "/api/batches/missing",
            json={"name": "Widget", "quantity": 4, "purchase_date": "2024-01-01"},
            headers=MANAGER,
        )
        assert response.status_code == 404
        assert response.json()["error_code"] == "BATCH_NOT_FOUND"

    async def test_delete_batch_manager(self, client: AsyncClient, batch_store):
        response = await client.delete("/api/batches/b1", headers=MANAGER)
        assert response.status_code == 204
        assert await batch_store.get_batch("b1") is None

    async def test_delete_batch_warehouse_forbidden(self, client: AsyncClient, batch_store):
        response = await client.delete("/api/batches/b1", headers=WAREHOUSE)
        assert response.status_code == 403
        assert response.json()["error_code"] == "PERMISSION_DENIED"
        assert await batch_store.get_batch("b1") is not None
