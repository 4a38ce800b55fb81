from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from importlib.metadata import version as pkg_version

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from cardledger.api import cards_router, health_router, series_router
from cardledger.config import settings
from cardledger.db.store import CardStore


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Open the card store on startup and close it on shutdown."""
    store = CardStore(settings.database_url, echo=settings.debug)
    await store.initialize()
    app.state.store = store
    try:
        yield
    finally:
        await store.close()


app = FastAPI(
    title=settings.app_name,
    version=pkg_version("cardledger"),
    lifespan=lifespan,
)

app.include_router(cards_router)
app.include_router(health_router)
app.include_router(series_router)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Frontend dev server runs on another port
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)
