"""
Shared FastAPI dependencies.

Tests override these with app.dependency_overrides.
"""

import httpx
from fastapi import HTTPException, status

from sealedforge.booster.resolver import BoosterDataResolver, get_resolver
from sealedforge.services.scryfall_client import ScryfallClient
from sealedforge.services.sets import SetInfo, fetch_sets


def get_scryfall_client() -> ScryfallClient:
    return ScryfallClient()


def get_booster_resolver() -> BoosterDataResolver:
    return get_resolver()


async def get_set_list() -> list[SetInfo]:
    try:
        return await fetch_sets()
    except httpx.HTTPError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"Set list unavailable: {e}",
        ) from e
