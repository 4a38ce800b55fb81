import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from cardledger.db.database import create_store_engine, drop_db, init_db
from cardledger.db.seed import seed_reference_data
from cardledger.db.store import CardStore, get_store
from cardledger.main import app

MEMORY_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
async def async_engine():
    """Create an in-memory SQLite engine with all tables."""
    engine = create_store_engine(MEMORY_URL)
    await init_db(engine)
    yield engine
    await drop_db(engine)
    await engine.dispose()


@pytest.fixture
async def session(async_engine) -> AsyncSession:
    """Provide a database session with the standard rarities and card types."""
    async_session = async_sessionmaker(async_engine, class_=AsyncSession, expire_on_commit=False)
    async with async_session() as session:
        await seed_reference_data(session)
        await session.commit()
        yield session


@pytest.fixture
async def store() -> CardStore:
    """Provide an initialized in-memory card store."""
    card_store = CardStore(MEMORY_URL)
    await card_store.initialize()
    yield card_store
    await card_store.close()


@pytest.fixture
def series_file_data() -> dict:
    """A small series file as produced by the wiki scraper."""
    return {
        "name": "Legend of Blue Eyes White Dragon",
        "ncards": 4,
        "release_date": "March 8, 2002",
        "prefix": "LOB",
        "cards": [
            {
                "card_number": "LOB-EN001",
                "name": "Blue-Eyes White Dragon",
                "rarity": "Ultra Rare",
                "category": "Normal Monster",
            },
            {
                "card_number": "LOB-EN002",
                "name": "Hitotsu-Me Giant",
                "rarity": "Common",
                "category": "Normal Monster",
            },
            {
                "card_number": "LOB-EN003",
                "name": "Flame Swordsman",
                "rarity": "Super Rare",
                "category": "Fusion Monster",
            },
            {
                "card_number": "LOB-EN004",
                "name": "Dark Hole",
                "rarity": "Super Rare",
                "category": "Normal Spell Card",
            },
        ],
    }


@pytest.fixture
async def client(store: CardStore):
    """Provide an async test client backed by the in-memory store."""
    app.dependency_overrides[get_store] = lambda: store

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()
