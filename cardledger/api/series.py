"""
Series API endpoints.

Lists series and the cards of one series.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from cardledger.api.schemas import CardResponse, SeriesResponse
from cardledger.db.store import CardStore, get_store
from cardledger.models.errors import StorageError, UnknownSeriesError

router = APIRouter(prefix="/series", tags=["series"])


@router.get("", response_model=list[SeriesResponse])
async def list_series(
    store: Annotated[CardStore, Depends(get_store)],
) -> list[SeriesResponse]:
    """
    Get all series.

    Ordered by release date, oldest first.
    """
    try:
        series_list = await store.get_unique_series()
    except StorageError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=e.message,
        ) from e

    return [SeriesResponse.from_model(series) for series in series_list]


@router.get("/{series_name}/cards", response_model=list[CardResponse])
async def list_series_cards(
    series_name: str,
    store: Annotated[CardStore, Depends(get_store)],
) -> list[CardResponse]:
    """
    Get the cards of one series.

    The series name is matched ignoring case. Returns 404 if the series
    is unknown or has no cards.
    """
    try:
        cards = await store.get_cards_by_series_name(series_name)
    except UnknownSeriesError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=e.message,
        ) from e
    except StorageError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=e.message,
        ) from e

    return [CardResponse.from_details(details) for details in cards]
