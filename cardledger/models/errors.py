"""
Typed errors raised by the card store.

Lookups on natural keys fail with the specific "unknown X" error rather
than a generic not-found. Duplicate inserts are not errors. Anything the
database driver raises is wrapped in StorageError.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Classification of store failures."""

    UNKNOWN_RARITY = "unknown_rarity"
    UNKNOWN_SERIES = "unknown_series"
    UNKNOWN_CARD_TYPE = "unknown_card_type"
    UNKNOWN_CARD = "unknown_card"
    INVALID_OPERATION = "invalid_operation"
    STORAGE_FAULT = "storage_fault"


class StoreError(Exception):
    """
    Base class for all store failures.

    Carries the HTTP status the API layer should answer with.
    """

    kind: ErrorKind = ErrorKind.STORAGE_FAULT
    status_code: int = 500

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class UnknownRarityError(StoreError):
    """Raised when a rarity name or id does not exist."""

    kind = ErrorKind.UNKNOWN_RARITY
    status_code = 404

    def __init__(self, rarity: str) -> None:
        self.rarity = rarity
        super().__init__(f"Encountered undefined rarity: {rarity}")


class UnknownSeriesError(StoreError):
    """Raised when a series name or id does not exist (or has no cards)."""

    kind = ErrorKind.UNKNOWN_SERIES
    status_code = 404

    def __init__(self, series: str) -> None:
        self.series = series
        super().__init__(f"Encountered undefined series: {series}")


class UnknownCardTypeError(StoreError):
    """Raised when a card type label or id does not exist."""

    kind = ErrorKind.UNKNOWN_CARD_TYPE
    status_code = 404

    def __init__(self, card_type: str) -> None:
        self.card_type = card_type
        super().__init__(f"Encountered undefined card type: {card_type}")


class UnknownCardError(StoreError):
    """
    Raised when collect/sell targets a card number with no row.

    The update affected nothing, so the HTTP surface reports it as a failed
    write (500) like other store faults rather than as a lookup miss.
    """

    kind = ErrorKind.UNKNOWN_CARD
    status_code = 500

    def __init__(self, number: str) -> None:
        self.number = number
        super().__init__(f"Encountered undefined card: {number}")


class InvalidOperationError(StoreError):
    """Raised when an operation would break an invariant, e.g. selling past zero."""

    kind = ErrorKind.INVALID_OPERATION
    status_code = 400

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Invalid DB operation: {reason}")


class StorageError(StoreError):
    """Wraps an underlying database fault. The original is kept as __cause__."""

    kind = ErrorKind.STORAGE_FAULT
    status_code = 500

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"SQLite error: {detail}")
