"""
Daily challenge endpoint.

Everyone gets the same set and the same sealed pool on a given UTC day.
"""

from datetime import date
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from sealedforge.api.dependencies import (
    get_booster_resolver,
    get_scryfall_client,
    get_set_list,
)
from sealedforge.api.schemas import CardResponse, PoolResponse
from sealedforge.booster.resolver import BoosterDataResolver
from sealedforge.config import DEFAULT_NUM_PACKS
from sealedforge.errors import FetchError
from sealedforge.services.catalog import fetch_all_catalog
from sealedforge.services.scryfall_client import ScryfallClient
from sealedforge.services.sealed_pool import generate_pool
from sealedforge.services.seeding import (
    daily_candidates,
    daily_seed,
    pick_daily_set,
    utc_day,
)
from sealedforge.services.sets import SetInfo

router = APIRouter(prefix="/daily", tags=["daily"])


class DailyResponse(PoolResponse):
    """The daily challenge set and its pool."""

    day: date
    set_name: str


@router.get("", response_model=DailyResponse)
async def get_daily_challenge(
    sets: Annotated[list[SetInfo], Depends(get_set_list)],
    client: Annotated[ScryfallClient, Depends(get_scryfall_client)],
    resolver: Annotated[BoosterDataResolver, Depends(get_booster_resolver)],
    day: date | None = None,
) -> DailyResponse:
    """Daily challenge for a day (today, UTC, when omitted)."""
    if not daily_candidates(sets):
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="No sets eligible for the daily challenge",
        )

    today = utc_day(day)
    seed = daily_seed(today)
    chosen = pick_daily_set(sets, today)

    try:
        catalog = await fetch_all_catalog(chosen.code, client=client, resolver=resolver)
    except FetchError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"Card provider unavailable: {e}",
        ) from e

    pool = await generate_pool(chosen.code, catalog, DEFAULT_NUM_PACKS, seed, resolver=resolver)
    return DailyResponse(
        day=today,
        set_code=chosen.code,
        set_name=chosen.name,
        num_packs=DEFAULT_NUM_PACKS,
        seed=seed,
        cards=[CardResponse.from_card(card) for card in pool],
    )
