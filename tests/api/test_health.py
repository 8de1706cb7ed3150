"""Tests for health endpoints."""

from httpx import AsyncClient


async def test_health_check(client: AsyncClient):
    response = await client.get("/api/health")
    assert response.status_code == 200

    data = response.json()
    assert data["status"] == "healthy"
    assert data["version"] == "1.0.0"
    assert "uptime_seconds" in data


async def test_db_health_memory_backend(client: AsyncClient):
    response = await client.get("/api/health/db")
    assert response.status_code == 200
    assert response.json()["database"]["name"] == "memory"


async def test_request_id_header(client: AsyncClient):
    response = await client.get("/api/health", headers={"X-Request-ID": "abc123"})
    assert response.headers["X-Request-ID"] == "abc123"
    assert "X-Response-Time" in response.headers
