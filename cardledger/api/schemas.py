"""
Response models shared by the card and series endpoints.

Field names follow what the web frontend reads (`cardtype`,
`cardtype_display`, `in_collection`).
"""

from pydantic import BaseModel, Field

from cardledger.models.card import CardDetails, Series


class RarityResponse(BaseModel):
    """Response model for a rarity."""

    id: int
    name: str


class CardTypeResponse(BaseModel):
    """Response model for a card type."""

    main: str
    sub: str


class SeriesResponse(BaseModel):
    """Response model for a series."""

    id: int | None = None
    name: str
    release_date: str = Field(..., description="ISO date (YYYY-MM-DD)")
    n_cards: int = 0
    prefix: str | None = None

    @classmethod
    def from_model(cls, series: Series) -> "SeriesResponse":
        return cls(
            id=series.id,
            name=series.name,
            release_date=series.release_date,
            n_cards=series.n_cards,
            prefix=series.prefix,
        )


class CardResponse(BaseModel):
    """Response model for a card with its resolved metadata."""

    name: str
    number: str
    collection_number: int
    in_collection: int = Field(..., description="Owned copies")
    series: SeriesResponse
    rarity: RarityResponse
    cardtype: CardTypeResponse
    cardtype_display: str = Field(..., examples=["Effect Monster"])

    @classmethod
    def from_details(cls, details: CardDetails) -> "CardResponse":
        return cls(
            name=details.card.name,
            number=details.card.number,
            collection_number=details.card.collection_number,
            in_collection=details.card.in_collection,
            series=SeriesResponse.from_model(details.series),
            rarity=RarityResponse(id=details.rarity.id, name=details.rarity.name),
            cardtype=CardTypeResponse(main=details.card_type.main, sub=details.card_type.sub),
            cardtype_display=details.card_type.display(),
        )
