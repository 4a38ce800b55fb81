"""
Bulk import of a series card list.

Inserts the series, then every card of the file. Rarities and card types
must already exist: the first card referencing an unknown one fails the
whole import. Cards whose number is already stored are skipped.
"""

import logging
from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from cardledger.db.operations import (
    get_card_type_id,
    get_rarity_id,
    insert_card,
    insert_series,
)
from cardledger.models.card import Card
from cardledger.parsers.card_number import normalize_card_number, split_card_number
from cardledger.parsers.series_file import SeriesFile

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ImportResult:
    """Outcome of a series import."""

    series_id: int
    inserted: int
    skipped: int

    @property
    def total(self) -> int:
        return self.inserted + self.skipped


async def import_series(session: AsyncSession, series_file: SeriesFile) -> ImportResult:
    """
    Import a series and its cards.

    Card numbers are stored in normalised "PREFIX-###" form.

    Raises:
        UnknownRarityError: If a card names a rarity that does not exist
        UnknownCardTypeError: If a card category is not a known card type
    """
    series_id = await insert_series(session, series_file.to_series())

    # Cache lookups: a series reuses a handful of rarities and types
    rarity_ids: dict[str, int] = {}
    card_type_ids: dict[str, int] = {}

    inserted = 0
    skipped = 0
    for entry in series_file.cards:
        if entry.rarity not in rarity_ids:
            rarity_ids[entry.rarity] = await get_rarity_id(session, entry.rarity)
        if entry.category not in card_type_ids:
            card_type_ids[entry.category] = await get_card_type_id(session, entry.category)

        _, collection_number = split_card_number(entry.card_number)
        card = Card(
            name=entry.name,
            number=normalize_card_number(entry.card_number),
            series_id=series_id,
            rarity_id=rarity_ids[entry.rarity],
            card_type_id=card_type_ids[entry.category],
            collection_number=collection_number,
        )

        if await insert_card(session, card):
            inserted += 1
        else:
            skipped += 1

    logger.info(
        "Imported series '%s': %d cards inserted, %d already present",
        series_file.name,
        inserted,
        skipped,
    )
    return ImportResult(series_id=series_id, inserted=inserted, skipped=skipped)
