"""
Card store: the single entry point callers use to reach the database.

A CardStore owns one engine with one connection and an asyncio.Lock.
Every public method holds the lock for its whole duration and runs as
its own unit of work, so operations never interleave.
"""

import asyncio
import logging
from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import asynccontextmanager
from types import TracebackType

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from cardledger.db import operations
from cardledger.db.database import create_store_engine, init_db
from cardledger.db.seed import seed_reference_data
from cardledger.models.card import Card, CardDetails, CardType, Rarity, Series
from cardledger.models.errors import InvalidOperationError, StorageError
from cardledger.parsers.card_number import expand_card_range
from cardledger.parsers.series_file import SeriesFile
from cardledger.services.series_import import ImportResult, import_series

logger = logging.getLogger(__name__)

# collect_card_number / sell_card_number
CountOperation = Callable[[AsyncSession, str, int], Awaitable[int]]


class CardStore:
    """
    Serialized access to the card database.

    Usage:
        async with CardStore("sqlite+aiosqlite:///cards.db") as store:
            await store.collect_card("LOB-001")
    """

    def __init__(self, database_url: str, *, echo: bool = False) -> None:
        self.database_url = database_url
        self._engine = create_store_engine(database_url, echo=echo)
        self._session_factory = async_sessionmaker(
            self._engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )
        self._lock = asyncio.Lock()

    async def __aenter__(self) -> "CardStore":
        await self.initialize()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.close()

    @asynccontextmanager
    async def _unit_of_work(self) -> AsyncIterator[AsyncSession]:
        """
        Hold the lock and provide a session for one store operation.

        Commits on success. Rolls back on any error; database faults are
        re-raised as StorageError.
        """
        async with self._lock, self._session_factory() as session:
            try:
                yield session
                await session.commit()
            except SQLAlchemyError as e:
                await session.rollback()
                logger.error("Database error: %s", e)
                raise StorageError(str(e)) from e
            except Exception:
                await session.rollback()
                raise

    async def initialize(self) -> None:
        """Create missing tables and insert the standard reference data."""
        try:
            await init_db(self._engine)
        except SQLAlchemyError as e:
            raise StorageError(str(e)) from e

        async with self._unit_of_work() as session:
            await seed_reference_data(session)
        logger.info("Initialized card store at %s", self.database_url)

    async def close(self) -> None:
        """Release the database connection."""
        await self._engine.dispose()

    async def ping(self) -> None:
        """Run a trivial query. Raises StorageError if the database is unreachable."""
        async with self._unit_of_work() as session:
            await session.execute(text("SELECT 1"))

    # --- Reference data ---

    async def insert_rarity(self, name: str) -> None:
        async with self._unit_of_work() as session:
            await operations.insert_rarity(session, name)

    async def insert_card_type(self, main: str, sub: str) -> None:
        async with self._unit_of_work() as session:
            await operations.insert_card_type(session, main, sub)

    async def insert_card_type_label(self, label: str) -> CardType:
        """
        Insert a card type from a "SUBTYPE MAINTYPE" label.

        Raises:
            ValueError: If the label has no space
        """
        card_type = CardType.from_label(label)
        await self.insert_card_type(card_type.main, card_type.sub)
        return card_type

    async def get_rarity_id(self, name: str) -> int:
        async with self._unit_of_work() as session:
            return await operations.get_rarity_id(session, name)

    async def get_card_type_id(self, label: str) -> int:
        async with self._unit_of_work() as session:
            return await operations.get_card_type_id(session, label)

    async def get_rarities(self) -> list[Rarity]:
        async with self._unit_of_work() as session:
            rows = await operations.get_rarities(session)
            return [operations.rarity_to_model(row) for row in rows]

    async def get_card_types(self) -> list[CardType]:
        async with self._unit_of_work() as session:
            rows = await operations.get_card_types(session)
            return [operations.card_type_to_model(row) for row in rows]

    # --- Series ---

    async def insert_series(self, series: Series) -> int:
        """Insert a series if absent and return its id."""
        async with self._unit_of_work() as session:
            return await operations.insert_series(session, series)

    async def get_series_by_id(self, series_id: int) -> Series:
        async with self._unit_of_work() as session:
            return operations.series_to_model(
                await operations.get_series_by_id(session, series_id)
            )

    async def get_series_by_name(self, name: str) -> Series:
        async with self._unit_of_work() as session:
            return operations.series_to_model(await operations.get_series_by_name(session, name))

    async def get_unique_series(self) -> list[Series]:
        """All series, oldest release first."""
        async with self._unit_of_work() as session:
            rows = await operations.get_unique_series(session)
            return [operations.series_to_model(row) for row in rows]

    async def import_series(self, series_file: SeriesFile) -> ImportResult:
        """
        Import a series file.

        Runs as one unit of work: if any card fails, nothing is stored.
        """
        async with self._unit_of_work() as session:
            return await import_series(session, series_file)

    # --- Cards ---

    async def insert_card(self, card: Card) -> int:
        """Insert a card. Returns its id, or 0 if the number already existed."""
        async with self._unit_of_work() as session:
            return await operations.insert_card(session, card)

    async def get_cards(self, name: str | None = None) -> list[CardDetails]:
        """Cards whose name contains `name` (ignoring case), or all cards."""
        async with self._unit_of_work() as session:
            rows = await operations.get_cards(session, name)
            return [operations.card_to_model(row) for row in rows]

    async def get_cards_by_series_name(self, series_name: str) -> list[CardDetails]:
        async with self._unit_of_work() as session:
            rows = await operations.get_cards_by_series_name(session, series_name)
            return [operations.card_to_model(row) for row in rows]

    async def collect_card(self, identifier: str, delta: int | None = None) -> int:
        """
        Add owned copies to a card or to every card of a range.

        Args:
            identifier: Card number ("LOB-001") or range ("LOB-001-010")
            delta: Copies to add per card, 1 when omitted

        Returns:
            The new count, or the sum of new counts across a range.
        """
        return await self._apply_to_range(identifier, delta, operations.collect_card_number)

    async def sell_card(self, identifier: str, delta: int | None = None) -> int:
        """
        Remove owned copies from a card or from every card of a range.

        A card never goes below zero copies. In a range, cards are updated
        in order and each success is committed; the first failure stops
        the call and earlier cards keep their new counts.

        Returns:
            The new count, or the sum of new counts across a range.
        """
        return await self._apply_to_range(identifier, delta, operations.sell_card_number)

    async def _apply_to_range(
        self, identifier: str, delta: int | None, apply: CountOperation
    ) -> int:
        amount = 1 if delta is None else delta
        if amount < 1:
            raise InvalidOperationError(f"copy count must be positive, got {amount}")

        numbers = expand_card_range(identifier)
        if not numbers:
            raise InvalidOperationError(f"range '{identifier}' contains no cards")

        total = 0
        async with self._unit_of_work() as session:
            for number in numbers:
                total += await apply(session, number, amount)
                await session.commit()
        return total


def get_store(request: Request) -> CardStore:
    """
    Dependency that provides the application's card store.

    The store is created by the app lifespan and kept on app.state.

    Usage in FastAPI:
        @app.get("/cards")
        async def list_cards(store: Annotated[CardStore, Depends(get_store)]):
            ...
    """
    store: CardStore = request.app.state.store
    return store
