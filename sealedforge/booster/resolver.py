"""
Booster data resolver.

Loads the booster structure dataset (an index plus one file per set and
booster type) and derives a SetBoosterConfig per set. Loaded documents are
cached for the lifetime of the process and never refreshed: the dataset is
versioned and changes rarely. A failed load is cached as "no data" so
callers fall back to the generic rules instead of raising.
"""

import logging
from functools import lru_cache
from typing import Any

import httpx

from sealedforge.booster.classifier import BoosterType
from sealedforge.config import settings
from sealedforge.models.booster import (
    COLLECTOR_EXCLUSIVE_SLOT,
    PLAY_BOOSTER_FINISHES,
    BoosterFileDef,
    BoosterIndex,
    SetBoosterConfig,
    parse_booster_file,
    parse_booster_index,
)

logger = logging.getLogger(__name__)


def _type_name(booster_type: BoosterType | str) -> str:
    return booster_type.value if isinstance(booster_type, BoosterType) else booster_type


def _dedupe(ranges: list[str]) -> tuple[str, ...]:
    """Drop repeated range expressions, keeping first-seen order."""
    return tuple(dict.fromkeys(ranges))


class BoosterDataResolver:
    """
    Read-through cache over the booster data dataset.

    Cache entries are assigned only after a fetch completes, so concurrent
    callers may fetch the same document twice but never see a partial entry.
    """

    def __init__(
        self,
        base_url: str | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """
        Initialize resolver.

        Args:
            base_url: Root of the booster data dataset. Defaults to settings.
            client: Optional shared HTTP client. A short-lived client is
                    created per request when omitted.
        """
        self.base_url = (base_url or settings.booster_data_url).rstrip("/")
        self._client = client
        self._index: BoosterIndex | None = None
        self._files: dict[str, BoosterFileDef | None] = {}

    async def _get_json(self, url: str) -> Any:
        if self._client is not None:
            response = await self._client.get(url)
        else:
            async with httpx.AsyncClient(
                timeout=settings.request_timeout,
                headers={"User-Agent": settings.user_agent},
                follow_redirects=True,
            ) as client:
                response = await client.get(url)
        response.raise_for_status()
        return response.json()

    async def load_index(self) -> BoosterIndex:
        """Load the dataset index. Any failure yields an empty index."""
        if self._index is not None:
            return self._index

        url = f"{self.base_url}/index.json"
        try:
            index = parse_booster_index(await self._get_json(url), source=url)
        except (httpx.HTTPError, ValueError) as e:
            logger.warning("Booster data index unavailable, using generic rules: %s", e)
            index = BoosterIndex()
        else:
            logger.info(
                "Loaded booster data index v%s (%d sets)", index.version, len(index.boosters)
            )

        self._index = index
        return index

    async def load_booster_file(
        self, set_code: str, booster_type: BoosterType | str
    ) -> BoosterFileDef | None:
        """Load the slot layout for one set and booster type. Failure yields None."""
        key = f"{set_code.lower()}-{_type_name(booster_type)}"
        if key in self._files:
            return self._files[key]

        url = f"{self.base_url}/boosters/{key}.json"
        booster_file: BoosterFileDef | None
        try:
            booster_file = parse_booster_file(await self._get_json(url), source=url)
        except (httpx.HTTPError, ValueError) as e:
            logger.warning("Booster file %s unavailable: %s", key, e)
            booster_file = None

        self._files[key] = booster_file
        return booster_file

    async def get_booster_types(self, set_code: str) -> list[str]:
        index = await self.load_index()
        return index.types_for(set_code) or []

    async def has_booster_data(self, set_code: str) -> bool:
        index = await self.load_index()
        return index.types_for(set_code) is not None

    async def play_booster_type(self, set_code: str) -> BoosterType | None:
        """The standard product listed for a set: play if present, else draft."""
        types = await self.get_booster_types(set_code)
        if BoosterType.PLAY.value in types:
            return BoosterType.PLAY
        if BoosterType.DRAFT.value in types:
            return BoosterType.DRAFT
        return None

    async def get_booster_pools(
        self, set_code: str, booster_type: BoosterType | str
    ) -> dict[str, list[str]] | None:
        """
        Merge every slot's ranges per finish.

        Returns:
            Dict like {"nonfoil": [...], "foil": [...]} with repeats removed,
            or None when the booster file is unavailable
        """
        booster_file = await self.load_booster_file(set_code, booster_type)
        if booster_file is None:
            return None

        pools: dict[str, list[str]] = {}
        for slot in booster_file.slots:
            if slot.pool is None:
                continue
            for finish, ranges in slot.pool.items():
                pools.setdefault(finish, []).extend(ranges)

        return {finish: list(_dedupe(ranges)) for finish, ranges in pools.items()}

    async def resolve_config(self, set_code: str) -> SetBoosterConfig | None:
        """
        Derive the booster eligibility config for a set.

        Returns:
            SetBoosterConfig, or None when there is no structured data for
            the set (callers then use the generic rules)
        """
        play_type = await self.play_booster_type(set_code)
        if play_type is None:
            return None

        play_file = await self.load_booster_file(set_code, play_type)
        if play_file is None:
            return None

        play_ranges: list[str] = []
        for slot in play_file.slots:
            play_ranges.extend(slot.ranges(PLAY_BOOSTER_FINISHES))

        collector_ranges: tuple[str, ...] | None = None
        if BoosterType.COLLECTOR.value in await self.get_booster_types(set_code):
            collector_file = await self.load_booster_file(set_code, BoosterType.COLLECTOR)
            if collector_file is not None:
                exclusive: list[str] = []
                for slot in collector_file.slots:
                    if slot.name == COLLECTOR_EXCLUSIVE_SLOT:
                        exclusive.extend(slot.ranges())
                if exclusive:
                    collector_ranges = _dedupe(exclusive)

        return SetBoosterConfig(
            set_name=play_file.set_name,
            source_label=play_file.source,
            play_booster_ranges=_dedupe(play_ranges),
            collector_exclusive_ranges=collector_ranges,
        )

    def clear(self) -> None:
        """Drop every cached document."""
        self._index = None
        self._files.clear()


@lru_cache(maxsize=1)
def get_resolver() -> BoosterDataResolver:
    """
    Get the process-wide resolver.

    Created on first access; its caches live until the process exits.
    """
    return BoosterDataResolver()
