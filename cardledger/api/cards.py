"""
Card API endpoints.

Lists and searches cards and changes owned-copy counts.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, Field

from cardledger.api.schemas import CardResponse
from cardledger.db.store import CardStore, get_store
from cardledger.models.errors import StorageError, StoreError

router = APIRouter(prefix="/cards", tags=["cards"])

# `number` value in an update request that means "sell one copy"
SELL_ONE = -1


class SearchRequest(BaseModel):
    """Request model for searching cards by name."""

    name: str | None = Field(
        default=None,
        description="Case-insensitive substring of the card name",
        examples=["dragon"],
    )


class UpdateRequest(BaseModel):
    """Request model for collecting or selling a card."""

    id: str = Field(
        ...,
        description="Card number or range, e.g. LOB-001 or LOB-001-010",
        examples=["LOB-001"],
    )
    number: int | None = Field(
        default=None,
        description="Copies to collect (default 1), or -1 to sell one copy",
    )


def _http_error(e: StoreError) -> HTTPException:
    """
    Translate a store error into an HTTP error.

    InvalidOperationError -> 400. UnknownCardError and StorageError -> 500.
    """
    return HTTPException(status_code=e.status_code, detail=e.message)


@router.get("", response_model=list[CardResponse])
async def list_cards(
    store: Annotated[CardStore, Depends(get_store)],
) -> list[CardResponse]:
    """Get all cards with their series, rarity and card type."""
    try:
        cards = await store.get_cards()
    except StorageError as e:
        raise _http_error(e) from e

    return [CardResponse.from_details(details) for details in cards]


@router.post("", response_model=list[CardResponse])
async def search_cards(
    request: SearchRequest,
    store: Annotated[CardStore, Depends(get_store)],
) -> list[CardResponse]:
    """
    Search cards by name.

    Matches cards whose name contains the query, ignoring case.
    """
    if not request.name or not request.name.strip():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="name is required",
        )

    try:
        cards = await store.get_cards(request.name.strip())
    except StorageError as e:
        raise _http_error(e) from e

    return [CardResponse.from_details(details) for details in cards]


@router.put("", response_model=int)
async def update_card(
    request: UpdateRequest,
    store: Annotated[CardStore, Depends(get_store)],
) -> int:
    """
    Collect or sell copies of a card.

    - `number` omitted or null: collect one copy
    - `number` positive: collect that many copies
    - `number` -1: sell one copy

    Returns the new owned-copy count (summed over a range). Selling below
    zero returns 400. An unknown card or a storage fault returns 500.
    """
    if request.number is not None and request.number != SELL_ONE and request.number < 1:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"number must be positive or {SELL_ONE}",
        )

    try:
        if request.number == SELL_ONE:
            return await store.sell_card(request.id)
        return await store.collect_card(request.id, request.number)
    except StoreError as e:
        raise _http_error(e) from e
