from cardledger.parsers.card_number import (
    expand_card_range,
    is_card_range,
    normalize_card_number,
    split_card_number,
)
from cardledger.parsers.series_file import (
    CardEntry,
    SeriesFile,
    SeriesFileError,
    load_series_file,
    parse_series_file,
)

__all__ = [
    "CardEntry",
    "SeriesFile",
    "SeriesFileError",
    "expand_card_range",
    "is_card_range",
    "load_series_file",
    "normalize_card_number",
    "parse_series_file",
    "split_card_number",
]
