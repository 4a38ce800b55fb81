"""
CardLedger services.

Bulk series import and CLI output formatting.
"""

from cardledger.services.formatting import (
    format_card,
    format_series,
    series_wiki_title,
    series_wiki_url,
)
from cardledger.services.series_import import ImportResult, import_series

__all__ = [
    "ImportResult",
    "format_card",
    "format_series",
    "import_series",
    "series_wiki_title",
    "series_wiki_url",
]
