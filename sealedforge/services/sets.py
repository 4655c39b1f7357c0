"""
Set list loader.

The set list is a JSON array of {code, name, released} objects used to
pick the daily challenge set.
"""

import logging
from dataclasses import dataclass
from typing import Any

import httpx

from sealedforge.config import settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SetInfo:
    """
    A card set.

    Attributes:
        code: Lowercase set code (e.g., "mkm")
        name: Set name
        released: Release date as "YYYY-MM-DD", None if unknown
    """

    code: str
    name: str
    released: str | None = None


def parse_sets(payload: list[dict[str, Any]]) -> list[SetInfo]:
    """
    Parse set list entries.

    Accepts both "released" and Scryfall's "released_at". Entries without a
    code are skipped.
    """
    sets: list[SetInfo] = []
    for entry in payload:
        code = entry.get("code")
        if not code:
            continue
        sets.append(
            SetInfo(
                code=code.lower(),
                name=entry.get("name", code),
                released=entry.get("released") or entry.get("released_at"),
            )
        )
    return sets


async def fetch_sets(url: str | None = None) -> list[SetInfo]:
    """
    Download the set list.

    Raises:
        httpx.HTTPError: If the request fails
    """
    async with httpx.AsyncClient(
        timeout=settings.request_timeout,
        headers={"User-Agent": settings.user_agent},
        follow_redirects=True,
    ) as client:
        response = await client.get(url or settings.sets_url)
        response.raise_for_status()
        payload = response.json()

    sets = parse_sets(payload)
    logger.info("Loaded %d sets", len(sets))
    return sets
