"""Tests for bulk series import."""

import logging

import pytest
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from cardledger.db.operations import get_series_by_id
from cardledger.models.db import CardDB
from cardledger.models.errors import UnknownCardTypeError
from cardledger.parsers.series_file import SeriesFile
from cardledger.services.series_import import ImportResult, import_series


class TestImportSeries:
    async def test_inserts_cards(self, session: AsyncSession, series_file_data: dict) -> None:
        result = await import_series(session, SeriesFile.model_validate(series_file_data))

        assert result.inserted == 4
        assert result.skipped == 0
        assert result.total == 4

        rows = (await session.execute(select(CardDB).order_by(CardDB.id))).scalars().all()
        assert [row.number for row in rows] == ["LOB-001", "LOB-002", "LOB-003", "LOB-004"]
        assert [row.collection_number for row in rows] == [1, 2, 3, 4]
        assert all(row.series_id == result.series_id for row in rows)

    async def test_series_metadata(self, session: AsyncSession, series_file_data: dict) -> None:
        result = await import_series(session, SeriesFile.model_validate(series_file_data))

        db_series = await get_series_by_id(session, result.series_id)

        assert db_series.name == "Legend of Blue Eyes White Dragon"
        assert db_series.n_cards == 4
        assert db_series.prefix == "LOB"
        assert db_series.release_date.year == 2002

    async def test_derives_missing_prefix(
        self, session: AsyncSession, series_file_data: dict
    ) -> None:
        del series_file_data["prefix"]

        result = await import_series(session, SeriesFile.model_validate(series_file_data))

        assert (await get_series_by_id(session, result.series_id)).prefix == "LOB"

    async def test_counts_duplicates_as_skipped(
        self, session: AsyncSession, series_file_data: dict
    ) -> None:
        series_file_data["cards"].append(dict(series_file_data["cards"][0]))

        result = await import_series(session, SeriesFile.model_validate(series_file_data))

        assert result == ImportResult(series_id=result.series_id, inserted=4, skipped=1)

    async def test_unknown_category(self, session: AsyncSession, series_file_data: dict) -> None:
        series_file_data["cards"][1]["category"] = "Flip Monster"

        with pytest.raises(UnknownCardTypeError):
            await import_series(session, SeriesFile.model_validate(series_file_data))

    async def test_logs_summary(
        self,
        session: AsyncSession,
        series_file_data: dict,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        with caplog.at_level(logging.INFO, logger="cardledger.services.series_import"):
            await import_series(session, SeriesFile.model_validate(series_file_data))

        assert "4 cards inserted" in caplog.text
