"""
Database engine management.

The store talks to a single SQLite file over one connection. Engines are
built here with a StaticPool so every session shares that connection.
"""

from typing import Any

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.pool import StaticPool

from cardledger.models.db import Base


def create_store_engine(database_url: str, *, echo: bool = False) -> AsyncEngine:
    """
    Create an async engine holding exactly one connection.

    Foreign keys are switched on for SQLite, which leaves them off by default.
    """
    engine = create_async_engine(database_url, echo=echo, poolclass=StaticPool)

    if engine.dialect.name == "sqlite":

        @event.listens_for(engine.sync_engine, "connect")
        def _enable_foreign_keys(dbapi_connection: Any, _connection_record: Any) -> None:
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return engine


async def init_db(engine: AsyncEngine) -> None:
    """
    Initialize database tables.

    Creates all tables defined in the ORM models. Safe to call on an
    existing database: tables that already exist are left alone.
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def drop_db(engine: AsyncEngine) -> None:
    """
    Drop all database tables.

    WARNING: Destroys all data. Use only for testing.
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
