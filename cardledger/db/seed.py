"""
Fixed reference data inserted when a store is initialized.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from cardledger.db.operations import insert_card_type, insert_rarity

STANDARD_RARITIES: tuple[str, ...] = (
    "Common",
    "Rare",
    "Super Rare",
    "Ultra Rare",
    "Secret Rare",
    "Ultimate Rare",
    "Ghost Rare",
    "Starlight Rare",
    "Quarter Century Rare",
)

# (main, sub) pairs
STANDARD_CARD_TYPES: tuple[tuple[str, str], ...] = (
    ("Monster", "Normal"),
    ("Monster", "Effect"),
    ("Monster", "Ritual"),
    ("Monster", "Fusion"),
    ("Monster", "Synchro"),
    ("Monster", "Xyz"),
    ("Monster", "Pendulum"),
    ("Monster", "Link"),
    ("Monster", "Token"),
    ("Spell Card", "Normal"),
    ("Spell Card", "Continuous"),
    ("Spell Card", "Equip"),
    ("Spell Card", "Field"),
    ("Spell Card", "Quick-Play"),
    ("Spell Card", "Ritual"),
    ("Trap Card", "Normal"),
    ("Trap Card", "Continuous"),
    ("Trap Card", "Counter"),
)


async def seed_reference_data(session: AsyncSession) -> None:
    """Insert the standard rarities and card types. Idempotent."""
    for name in STANDARD_RARITIES:
        await insert_rarity(session, name)

    for main, sub in STANDARD_CARD_TYPES:
        await insert_card_type(session, main, sub)
