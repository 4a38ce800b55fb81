"""Tests for the API server launcher."""

from pathlib import Path

import pytest

from cardledger import server
from cardledger.config import settings


@pytest.fixture
def uvicorn_calls(monkeypatch: pytest.MonkeyPatch) -> list[dict]:
    calls: list[dict] = []
    monkeypatch.setattr(server.uvicorn, "run", lambda app, **kwargs: calls.append(kwargs))
    monkeypatch.setattr(settings, "database_url", settings.database_url)
    return calls


def test_defaults(uvicorn_calls: list[dict]) -> None:
    server.main([])

    assert uvicorn_calls == [{"host": "0.0.0.0", "port": 3000, "log_level": "info"}]


def test_database_argument(uvicorn_calls: list[dict], tmp_path: Path) -> None:
    db_path = tmp_path / "cards.db"

    server.main([str(db_path), "--port", "8000"])

    assert settings.database_url == f"sqlite+aiosqlite:///{db_path}"
    assert uvicorn_calls[0]["port"] == 8000
