"""
Set booster API endpoints.

Booster availability, booster catalogs and sealed pool generation per set.
"""

from datetime import date
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status
from pydantic import BaseModel

from sealedforge.api.dependencies import get_booster_resolver, get_scryfall_client
from sealedforge.api.schemas import CardResponse, PoolResponse
from sealedforge.booster.classifier import (
    BoosterEra,
    BoosterType,
    available_booster_types,
    booster_era,
    has_foils,
    is_single_booster_set,
)
from sealedforge.booster.resolver import BoosterDataResolver
from sealedforge.config import DEFAULT_NUM_PACKS, MAX_PACKS
from sealedforge.errors import FetchError
from sealedforge.services.catalog import fetch_all_catalog, fetch_catalog
from sealedforge.services.scryfall_client import ScryfallClient
from sealedforge.services.sealed_pool import generate_pool

router = APIRouter(prefix="/sets", tags=["sets"])


class BoosterInfoResponse(BaseModel):
    """Booster products offered by a set."""

    set_code: str
    era: BoosterEra
    booster_types: list[BoosterType]
    has_foils: bool
    single_booster_type: bool
    booster_data_types: list[str]


class CatalogResponse(BaseModel):
    """Printings that can be opened in a booster type."""

    set_code: str
    booster_type: BoosterType
    count: int
    cards: list[CardResponse]


def _upstream_error(e: FetchError) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_502_BAD_GATEWAY,
        detail=f"Card provider unavailable: {e}",
    )


@router.get("/{set_code}/boosters", response_model=BoosterInfoResponse)
async def get_booster_info(
    set_code: str,
    released: date,
    resolver: Annotated[BoosterDataResolver, Depends(get_booster_resolver)],
) -> BoosterInfoResponse:
    """Booster era, available products and booster data coverage for a set."""
    set_code = set_code.lower()
    return BoosterInfoResponse(
        set_code=set_code,
        era=booster_era(released),
        booster_types=available_booster_types(set_code, released),
        has_foils=has_foils(released),
        single_booster_type=is_single_booster_set(set_code),
        booster_data_types=await resolver.get_booster_types(set_code),
    )


@router.get("/{set_code}/cards", response_model=CatalogResponse)
async def get_catalog(
    set_code: str,
    client: Annotated[ScryfallClient, Depends(get_scryfall_client)],
    resolver: Annotated[BoosterDataResolver, Depends(get_booster_resolver)],
    booster_type: BoosterType = BoosterType.PLAY,
    min_price: Annotated[float, Query(ge=0)] = 0.0,
    special_guests: bool = False,
) -> CatalogResponse:
    """Cards a booster type can contain, most valuable first."""
    set_code = set_code.lower()
    try:
        cards = await fetch_catalog(
            set_code,
            booster_type,
            min_price=min_price,
            include_special_guests=special_guests,
            client=client,
            resolver=resolver,
        )
    except FetchError as e:
        raise _upstream_error(e) from e

    return CatalogResponse(
        set_code=set_code,
        booster_type=booster_type,
        count=len(cards),
        cards=[CardResponse.from_card(card) for card in cards],
    )


@router.get("/{set_code}/sealed", response_model=PoolResponse)
async def get_sealed_pool(
    set_code: str,
    client: Annotated[ScryfallClient, Depends(get_scryfall_client)],
    resolver: Annotated[BoosterDataResolver, Depends(get_booster_resolver)],
    packs: Annotated[int, Query(ge=1, le=MAX_PACKS)] = DEFAULT_NUM_PACKS,
    seed: str | None = None,
    booster_type: BoosterType | None = None,
) -> PoolResponse:
    """
    Open a sealed pool for a set.

    Pass a seed to get the same pool on every request. Packs follow the
    set's play booster (or draft booster) unless booster_type is given.
    """
    set_code = set_code.lower()
    try:
        catalog = await fetch_all_catalog(
            set_code, booster_type or BoosterType.PLAY, client=client, resolver=resolver
        )
    except FetchError as e:
        raise _upstream_error(e) from e

    if not catalog:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"No booster cards found for set '{set_code}'",
        )

    pool = await generate_pool(
        set_code, catalog, packs, seed, booster_type=booster_type, resolver=resolver
    )
    return PoolResponse(
        set_code=set_code,
        num_packs=packs,
        seed=seed,
        cards=[CardResponse.from_card(card) for card in pool],
    )
