"""Tests for health check endpoints."""

import pytest
from httpx import AsyncClient

from cardledger.api.health import APP_VERSION
from cardledger.db.store import CardStore
from cardledger.models.errors import StorageError


class TestHealthEndpoint:
    async def test_health_returns_ok(self, client: AsyncClient) -> None:
        response = await client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok", "version": APP_VERSION}


class TestReadyEndpoint:
    async def test_ready_with_database(self, client: AsyncClient) -> None:
        response = await client.get("/ready")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ready"
        assert data["database"] == "reachable"

    async def test_not_ready_without_database(
        self, client: AsyncClient, store: CardStore, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        async def failing_ping() -> None:
            raise StorageError("unable to open database file")

        monkeypatch.setattr(store, "ping", failing_ping)

        response = await client.get("/ready")

        assert response.status_code == 503
        data = response.json()
        assert data["status"] == "not ready"
        assert data["database"] == "unreachable"
