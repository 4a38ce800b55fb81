"""
Database CRUD operations.

Provides async functions for inserting and reading rarities, card types,
series and cards, and for changing owned-copy counts. Functions flush but
never commit; the caller owns the transaction.
"""

import logging
from datetime import date, datetime

from sqlalchemy import Select, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import contains_eager, joinedload

from cardledger.models.card import Card, CardDetails, CardType, Rarity, Series
from cardledger.models.db import CardDB, CardTypeDB, RarityDB, SeriesDB
from cardledger.models.errors import (
    InvalidOperationError,
    UnknownCardError,
    UnknownCardTypeError,
    UnknownRarityError,
    UnknownSeriesError,
)

logger = logging.getLogger(__name__)

# "September 5, 2025" is what the wiki scraper produces; ISO is what people type
RELEASE_DATE_FORMATS = ("%B %d, %Y", "%Y-%m-%d")
DEFAULT_RELEASE_DATE = date(1970, 1, 1)


def parse_release_date(value: str) -> date:
    """
    Parse a human release date string.

    Never fails: unparseable input falls back to 1970-01-01 and a warning
    is logged.
    """
    text = value.strip()
    for fmt in RELEASE_DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue

    logger.warning(
        "Could not parse release date %r, using %s", value, DEFAULT_RELEASE_DATE.isoformat()
    )
    return DEFAULT_RELEASE_DATE


# --- Rarity Operations ---


async def insert_rarity(session: AsyncSession, name: str) -> None:
    """Insert a rarity. Does nothing if the name already exists."""
    existing = await session.scalar(select(RarityDB.id).where(RarityDB.name == name))
    if existing is not None:
        return

    session.add(RarityDB(name=name))
    await session.flush()


async def get_rarity_id(session: AsyncSession, name: str) -> int:
    """
    Get a rarity id by exact name.

    Raises UnknownRarityError if no rarity has this name.
    """
    rarity_id = await session.scalar(select(RarityDB.id).where(RarityDB.name == name))
    if rarity_id is None:
        raise UnknownRarityError(name)
    return rarity_id


async def get_rarities(session: AsyncSession) -> list[RarityDB]:
    """Get all rarities in insertion order."""
    result = await session.execute(select(RarityDB).order_by(RarityDB.id))
    return list(result.scalars().all())


def rarity_to_model(db_rarity: RarityDB) -> Rarity:
    """Convert a database rarity to a domain model."""
    return Rarity(id=db_rarity.id, name=db_rarity.name)


# --- Card Type Operations ---


async def insert_card_type(session: AsyncSession, main: str, sub: str) -> None:
    """Insert a card type. Does nothing if the (main, sub) pair already exists."""
    existing = await session.scalar(
        select(CardTypeDB.id).where(CardTypeDB.maintype == main, CardTypeDB.subtype == sub)
    )
    if existing is not None:
        return

    session.add(CardTypeDB(maintype=main, subtype=sub))
    await session.flush()


async def get_card_type_id(session: AsyncSession, label: str) -> int:
    """
    Get a card type id from a "SUBTYPE MAINTYPE" label.

    Raises UnknownCardTypeError if the label is malformed or unknown.
    """
    try:
        card_type = CardType.from_label(label)
    except ValueError as e:
        raise UnknownCardTypeError(label) from e

    card_type_id = await session.scalar(
        select(CardTypeDB.id).where(
            CardTypeDB.maintype == card_type.main,
            CardTypeDB.subtype == card_type.sub,
        )
    )
    if card_type_id is None:
        raise UnknownCardTypeError(label)
    return card_type_id


async def get_card_types(session: AsyncSession) -> list[CardTypeDB]:
    """Get all card types ordered by main then sub category."""
    result = await session.execute(
        select(CardTypeDB).order_by(CardTypeDB.maintype, CardTypeDB.id)
    )
    return list(result.scalars().all())


def card_type_to_model(db_card_type: CardTypeDB) -> CardType:
    """Convert a database card type to a domain model."""
    return CardType(main=db_card_type.maintype, sub=db_card_type.subtype, id=db_card_type.id)


# --- Series Operations ---


async def insert_series(session: AsyncSession, series: Series) -> int:
    """
    Insert a series if no series has its name yet.

    Returns the id of the series row, whether it was just inserted or
    already existed.
    """
    series_id = await session.scalar(select(SeriesDB.id).where(SeriesDB.name == series.name))
    if series_id is not None:
        return series_id

    db_series = SeriesDB(
        name=series.name,
        release_date=parse_release_date(series.release_date),
        n_cards=series.n_cards,
        prefix=series.prefix,
    )
    session.add(db_series)
    await session.flush()
    return db_series.id


async def get_series_by_id(session: AsyncSession, series_id: int) -> SeriesDB:
    """
    Get a series by id.

    Raises UnknownSeriesError if it does not exist.
    """
    db_series = await session.get(SeriesDB, series_id)
    if db_series is None:
        raise UnknownSeriesError(str(series_id))
    return db_series


async def get_series_by_name(session: AsyncSession, name: str) -> SeriesDB:
    """
    Get a series by name, ignoring case.

    Both sides are folded by SQLite, whose lower() only folds ASCII, so a
    name is always found by its exact stored spelling.

    Raises UnknownSeriesError if it does not exist.
    """
    result = await session.execute(
        select(SeriesDB).where(func.lower(SeriesDB.name) == func.lower(name))
    )
    db_series = result.scalars().first()
    if db_series is None:
        raise UnknownSeriesError(name)
    return db_series


async def get_unique_series(session: AsyncSession) -> list[SeriesDB]:
    """Get all series ordered by release date, oldest first."""
    result = await session.execute(select(SeriesDB).order_by(SeriesDB.release_date, SeriesDB.id))
    return list(result.scalars().all())


def series_to_model(db_series: SeriesDB) -> Series:
    """Convert a database series to a domain model."""
    return Series(
        id=db_series.id,
        name=db_series.name,
        release_date=db_series.release_date.isoformat(),
        n_cards=db_series.n_cards,
        prefix=db_series.prefix,
    )


# --- Card Operations ---


async def insert_card(session: AsyncSession, card: Card) -> int:
    """
    Insert a card.

    The series, rarity and card type must exist. A card whose number is
    already stored is skipped with a warning. New cards always start with
    zero owned copies.

    Returns:
        The new card id, or 0 if the number already existed.

    Raises:
        UnknownSeriesError, UnknownRarityError, UnknownCardTypeError
    """
    series = await get_series_by_id(session, card.series_id)

    if await session.get(RarityDB, card.rarity_id) is None:
        raise UnknownRarityError(str(card.rarity_id))
    if await session.get(CardTypeDB, card.card_type_id) is None:
        raise UnknownCardTypeError(str(card.card_type_id))

    existing = await session.scalar(select(CardDB.id).where(CardDB.number == card.number))
    if existing is not None:
        logger.warning("Card '%s' already exists in series '%s'.", card.number, series.name)
        return 0

    db_card = CardDB(
        name=card.name,
        number=card.number,
        series_id=card.series_id,
        collection_number=card.collection_number,
        in_collection=0,
        rarity_id=card.rarity_id,
        card_type_id=card.card_type_id,
    )
    session.add(db_card)
    await session.flush()
    return db_card.id


async def collect_card_number(session: AsyncSession, number: str, delta: int = 1) -> int:
    """
    Add `delta` owned copies to a card.

    The increment and the read of the new value are one statement.

    Returns:
        The new owned-copy count.

    Raises:
        UnknownCardError: If no card has this number
    """
    result = await session.execute(
        update(CardDB)
        .where(CardDB.number == number)
        .values(in_collection=CardDB.in_collection + delta)
        .returning(CardDB.in_collection)
        .execution_options(synchronize_session=False)
    )
    new_count = result.scalar_one_or_none()
    if new_count is None:
        raise UnknownCardError(number)
    return new_count


async def sell_card_number(session: AsyncSession, number: str, delta: int = 1) -> int:
    """
    Remove `delta` owned copies from a card.

    The row only changes if the count stays at or above zero.

    Returns:
        The new owned-copy count.

    Raises:
        UnknownCardError: If no card has this number
        InvalidOperationError: If fewer than `delta` copies are owned
    """
    result = await session.execute(
        update(CardDB)
        .where(CardDB.number == number, CardDB.in_collection >= delta)
        .values(in_collection=CardDB.in_collection - delta)
        .returning(CardDB.in_collection)
        .execution_options(synchronize_session=False)
    )
    new_count = result.scalar_one_or_none()
    if new_count is not None:
        return new_count

    owned = await session.scalar(select(CardDB.in_collection).where(CardDB.number == number))
    if owned is None:
        raise UnknownCardError(number)
    raise InvalidOperationError(f"cannot sell {delta} of card '{number}', {owned} in collection")


def _card_details_query() -> Select:
    """Select cards with series, rarity and card type loaded in the same query."""
    return (
        select(CardDB)
        .join(CardDB.series)
        .options(
            contains_eager(CardDB.series),
            joinedload(CardDB.rarity),
            joinedload(CardDB.card_type),
        )
        .order_by(SeriesDB.release_date, SeriesDB.id, CardDB.collection_number, CardDB.number)
        .execution_options(populate_existing=True)
    )


async def get_cards(session: AsyncSession, name: str | None = None) -> list[CardDB]:
    """
    Get cards whose name contains `name`, ignoring case.

    Returns all cards when `name` is None or empty.
    """
    query = _card_details_query()
    if name:
        query = query.where(CardDB.name.icontains(name, autoescape=True))

    result = await session.execute(query)
    return list(result.scalars().all())


async def get_cards_by_series_name(session: AsyncSession, series_name: str) -> list[CardDB]:
    """
    Get all cards of a series, matching the series name ignoring case.

    Raises UnknownSeriesError if nothing matches. A series without cards
    is reported the same way as a missing series.
    """
    result = await session.execute(
        _card_details_query().where(func.lower(SeriesDB.name) == func.lower(series_name))
    )
    cards = list(result.scalars().all())
    if not cards:
        raise UnknownSeriesError(series_name)
    return cards


def card_to_model(db_card: CardDB) -> CardDetails:
    """Convert a database card with loaded relations to a domain model."""
    return CardDetails(
        card=Card(
            name=db_card.name,
            number=db_card.number,
            series_id=db_card.series_id,
            rarity_id=db_card.rarity_id,
            card_type_id=db_card.card_type_id,
            collection_number=db_card.collection_number,
            in_collection=db_card.in_collection,
        ),
        series=series_to_model(db_card.series),
        rarity=rarity_to_model(db_card.rarity),
        card_type=card_type_to_model(db_card.card_type),
    )
