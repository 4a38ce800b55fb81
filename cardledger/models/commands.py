"""
Closed sets of entity kinds accepted by the CLI command families.

Each enum is paired with a handler table in cardledger.cli; the tables
are checked against these enums so a new kind cannot go unhandled.
"""

from enum import Enum


class AddKind(str, Enum):
    """Entities that can be added with `cardledger add`."""

    SERIES = "series"
    CARD = "card"
    JSON = "json"
    RARITY = "rarity"
    CARD_TYPE = "card-type"


class ListKind(str, Enum):
    """Entities that can be listed with `cardledger list`."""

    CARDS = "cards"
    SERIE = "serie"
    SERIES = "series"
    RARITIES = "rarities"
    CARD_TYPES = "card-types"


class FindKind(str, Enum):
    """Lookups supported by `cardledger find`."""

    CARDS = "cards"
    SERIE = "serie"
