"""Tests for card API endpoints."""

import json

import pytest
from httpx import AsyncClient

from cardledger.db.store import CardStore
from cardledger.models.errors import StorageError
from cardledger.parsers.series_file import parse_series_file


@pytest.fixture
async def seeded_store(store: CardStore, series_file_data: dict) -> CardStore:
    """Store holding the LOB test series."""
    await store.import_series(parse_series_file(json.dumps(series_file_data)))
    return store


class TestListCards:
    async def test_empty(self, client: AsyncClient) -> None:
        response = await client.get("/cards")

        assert response.status_code == 200
        assert response.json() == []

    async def test_lists_cards_with_metadata(
        self, client: AsyncClient, seeded_store: CardStore
    ) -> None:
        response = await client.get("/cards")

        assert response.status_code == 200
        data = response.json()
        assert len(data) == 4

        first = data[0]
        assert first["name"] == "Blue-Eyes White Dragon"
        assert first["number"] == "LOB-001"
        assert first["collection_number"] == 1
        assert first["in_collection"] == 0
        assert first["series"]["name"] == "Legend of Blue Eyes White Dragon"
        assert first["series"]["release_date"] == "2002-03-08"
        assert first["rarity"]["name"] == "Ultra Rare"
        assert first["cardtype"] == {"main": "Monster", "sub": "Normal"}
        assert first["cardtype_display"] == "Normal Monster"


class TestSearchCards:
    async def test_search_by_name(self, client: AsyncClient, seeded_store: CardStore) -> None:
        response = await client.post("/cards", json={"name": "dark"})

        assert response.status_code == 200
        assert [card["name"] for card in response.json()] == ["Dark Hole"]

    async def test_search_no_match(self, client: AsyncClient, seeded_store: CardStore) -> None:
        response = await client.post("/cards", json={"name": "exodia"})

        assert response.status_code == 200
        assert response.json() == []

    @pytest.mark.parametrize("body", [{}, {"name": None}, {"name": "   "}])
    async def test_name_required(self, client: AsyncClient, body: dict) -> None:
        response = await client.post("/cards", json=body)

        assert response.status_code == 400
        assert response.json()["detail"] == "name is required"


class TestUpdateCard:
    async def test_collect_one(self, client: AsyncClient, seeded_store: CardStore) -> None:
        response = await client.put("/cards", json={"id": "LOB-001"})

        assert response.status_code == 200
        assert response.json() == 1

    async def test_collect_many(self, client: AsyncClient, seeded_store: CardStore) -> None:
        response = await client.put("/cards", json={"id": "LOB-001", "number": 3})

        assert response.status_code == 200
        assert response.json() == 3

    async def test_collect_range(self, client: AsyncClient, seeded_store: CardStore) -> None:
        response = await client.put("/cards", json={"id": "LOB-001-004"})

        assert response.status_code == 200
        assert response.json() == 4

    async def test_sell_one(self, client: AsyncClient, seeded_store: CardStore) -> None:
        await client.put("/cards", json={"id": "LOB-002", "number": 2})

        response = await client.put("/cards", json={"id": "LOB-002", "number": -1})

        assert response.status_code == 200
        assert response.json() == 1

    async def test_sell_below_zero(self, client: AsyncClient, seeded_store: CardStore) -> None:
        response = await client.put("/cards", json={"id": "LOB-002", "number": -1})

        assert response.status_code == 400
        assert "LOB-002" in response.json()["detail"]

        cards = await seeded_store.get_cards("Hitotsu")
        assert cards[0].in_collection == 0

    async def test_unknown_card(self, client: AsyncClient, seeded_store: CardStore) -> None:
        response = await client.put("/cards", json={"id": "NOPE-001"})

        assert response.status_code == 500
        assert response.json()["detail"] == "Encountered undefined card: NOPE-001"

    async def test_storage_fault(
        self, client: AsyncClient, seeded_store: CardStore, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        async def failing_collect(identifier: str, delta: int | None = None) -> int:
            raise StorageError("database is locked")

        monkeypatch.setattr(seeded_store, "collect_card", failing_collect)

        response = await client.put("/cards", json={"id": "LOB-001"})

        assert response.status_code == 500
        assert response.json()["detail"] == "SQLite error: database is locked"

    @pytest.mark.parametrize("number", [0, -2])
    async def test_invalid_number(
        self, client: AsyncClient, seeded_store: CardStore, number: int
    ) -> None:
        response = await client.put("/cards", json={"id": "LOB-001", "number": number})

        assert response.status_code == 400

    async def test_missing_id(self, client: AsyncClient) -> None:
        response = await client.put("/cards", json={"number": 1})

        assert response.status_code == 422
