"""
Parser for series card list files.

The file is the JSON document produced by the wiki scraper script:

    {
      "name": "Legend of Blue Eyes White Dragon",
      "ncards": 126,
      "release_date": "March 8, 2002",
      "prefix": "LOB",
      "cards": [
        {"card_number": "LOB-EN001", "name": "Blue-Eyes White Dragon",
         "rarity": "Ultra Rare", "category": "Normal Monster"}
      ]
    }

`prefix` is optional.
"""

from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from cardledger.models.card import Series
from cardledger.parsers.card_number import split_card_number


class SeriesFileError(Exception):
    """Raised when a series file cannot be read or has the wrong shape."""

    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"Invalid series file {source}: {reason}")


class CardEntry(BaseModel):
    """One card row of a series file."""

    card_number: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    rarity: str
    category: str


class SeriesFile(BaseModel):
    """A series with its full card list."""

    name: str = Field(..., min_length=1)
    ncards: int = Field(default=0, ge=0)
    release_date: str
    prefix: str | None = None
    cards: list[CardEntry] = Field(default_factory=list)

    def resolved_prefix(self) -> str | None:
        """Return the declared prefix, or derive it from the first card number."""
        if self.prefix:
            return self.prefix
        if self.cards:
            prefix, _ = split_card_number(self.cards[0].card_number)
            return prefix or None
        return None

    def to_series(self) -> Series:
        return Series(
            name=self.name,
            release_date=self.release_date,
            n_cards=self.ncards,
            prefix=self.resolved_prefix(),
        )


def parse_series_file(text: str, source: str = "<string>") -> SeriesFile:
    """
    Parse series file JSON text.

    Raises:
        SeriesFileError: If the text is not valid JSON or misses fields
    """
    try:
        return SeriesFile.model_validate_json(text)
    except ValidationError as e:
        raise SeriesFileError(source, str(e)) from e


def load_series_file(path: Path) -> SeriesFile:
    """
    Read and parse a series file from disk.

    Raises:
        SeriesFileError: If the file cannot be read or parsed
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise SeriesFileError(str(path), str(e)) from e
    return parse_series_file(text, source=str(path))
