from cardledger.models.card import Card, CardDetails, CardType, Rarity, Series
from cardledger.models.commands import AddKind, FindKind, ListKind
from cardledger.models.errors import (
    ErrorKind,
    InvalidOperationError,
    StorageError,
    StoreError,
    UnknownCardError,
    UnknownCardTypeError,
    UnknownRarityError,
    UnknownSeriesError,
)

__all__ = [
    "AddKind",
    "Card",
    "CardDetails",
    "CardType",
    "ErrorKind",
    "FindKind",
    "InvalidOperationError",
    "ListKind",
    "Rarity",
    "Series",
    "StorageError",
    "StoreError",
    "UnknownCardError",
    "UnknownCardTypeError",
    "UnknownRarityError",
    "UnknownSeriesError",
]
