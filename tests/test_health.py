"""Tests for health and root endpoints."""

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_health_check(client: AsyncClient) -> None:
    """Test basic health check."""
    response = await client.get("/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["version"] == "0.1.0"
    assert response.headers["access-control-allow-origin"] == "*"


@pytest.mark.asyncio
async def test_ping(client: AsyncClient) -> None:
    """Test ping."""
    response = await client.get("/ping")

    assert response.status_code == 200
    assert response.json() == {"message": "pong"}


@pytest.mark.asyncio
async def test_root(client: AsyncClient) -> None:
    """Test root endpoint points at the docs."""
    response = await client.get("/")

    assert response.status_code == 200
    assert response.json()["docs"] == "/docs"


@pytest.mark.asyncio
async def test_unknown_route_has_error_body(client: AsyncClient) -> None:
    """Test a 404 uses the shared error body and CORS headers."""
    response = await client.get("/does-not-exist")

    assert response.status_code == 404
    assert response.json() == {"error": "Not Found"}
    assert response.headers["access-control-allow-origin"] == "*"
