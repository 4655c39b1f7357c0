from collections.abc import Callable
from typing import Any

import pytest

from sealedforge.booster.classifier import BoosterType
from sealedforge.booster.resolver import get_resolver
from sealedforge.models.booster import BoosterFileDef, SetBoosterConfig
from sealedforge.models.card import Card
from sealedforge.services.scryfall_client import ScryfallClient


@pytest.fixture(autouse=True)
def reset_process_resolver():
    """Each test starts with an empty process-wide booster data cache."""
    get_resolver.cache_clear()
    yield
    get_resolver.cache_clear()


def make_card(
    collector_number: str,
    rarity: str = "common",
    *,
    card_id: str | None = None,
    set_code: str = "tst",
    promo_types: tuple[str, ...] = (),
    frame_effects: tuple[str, ...] = (),
    booster_eligible: bool = True,
    frame: str | None = "2015",
) -> Card:
    return Card(
        id=card_id or f"{set_code}-{collector_number}",
        name=f"Card {collector_number}",
        set_code=set_code,
        collector_number=collector_number,
        rarity=rarity,
        promo_types=frozenset(promo_types),
        frame_effects=frozenset(frame_effects),
        booster_eligible=booster_eligible,
        frame=frame,
    )


def scryfall_record(
    collector_number: str,
    rarity: str = "common",
    *,
    set_code: str = "tst",
    **extra: Any,
) -> dict[str, Any]:
    """Raw card object shaped like the Scryfall API."""
    record: dict[str, Any] = {
        "object": "card",
        "id": f"{set_code}-{collector_number}",
        "name": f"Card {collector_number}",
        "set": set_code,
        "collector_number": collector_number,
        "rarity": rarity,
        "booster": True,
        "frame": "2015",
        "lang": "en",
    }
    record.update(extra)
    return record


@pytest.fixture
def card_factory() -> Callable[..., Card]:
    return make_card


@pytest.fixture
def full_catalog() -> list[Card]:
    """Set with every rarity: 1-60 common, 61-90 uncommon, 91-110 rare, 111-118 mythic."""
    cards = [make_card(str(n), "common") for n in range(1, 61)]
    cards += [make_card(str(n), "uncommon") for n in range(61, 91)]
    cards += [make_card(str(n), "rare") for n in range(91, 111)]
    cards += [make_card(str(n), "mythic") for n in range(111, 119)]
    return cards


@pytest.fixture
def play_booster_file() -> BoosterFileDef:
    """Play booster template matching full_catalog's numbering."""
    return BoosterFileDef.model_validate(
        {
            "setName": "Test Set",
            "source": "test",
            "slots": [
                {
                    "name": "common",
                    "count": 7,
                    "rarities": ["common"],
                    "pool": {"nonfoil": ["1-60"]},
                },
                {
                    "name": "uncommon",
                    "count": 3,
                    "rarities": ["uncommon"],
                    "pool": {"nonfoil": ["61-90"]},
                },
                {
                    "name": "rare",
                    "count": 1,
                    "rarities": ["rare", "mythic"],
                    "pool": {"nonfoil": ["91-118"]},
                },
                {"name": "wildcard", "count": 1, "pool": {"foil": ["1-118"]}},
                {"name": "notes"},
            ],
        }
    )


@pytest.fixture
def fast_client() -> ScryfallClient:
    """Scryfall client that never sleeps between retries or pages."""
    return ScryfallClient(
        retry_backoff=0.0,
        rate_limit_delay=0.0,
        page_delay=0.0,
        max_rate_limit_retries=3,
    )


class FakeResolver:
    """In-memory stand-in for BoosterDataResolver."""

    def __init__(
        self,
        files: dict[str, BoosterFileDef] | None = None,
        config: SetBoosterConfig | None = None,
    ) -> None:
        self.files = files or {}
        self.config = config

    async def get_booster_types(self, set_code: str) -> list[str]:
        return [key.split("-", 1)[1] for key in self.files if key.startswith(f"{set_code}-")]

    async def play_booster_type(self, set_code: str) -> BoosterType | None:
        types = await self.get_booster_types(set_code)
        if "play" in types:
            return BoosterType.PLAY
        if "draft" in types:
            return BoosterType.DRAFT
        return None

    async def load_booster_file(
        self, set_code: str, booster_type: BoosterType | str
    ) -> BoosterFileDef | None:
        name = booster_type.value if isinstance(booster_type, BoosterType) else booster_type
        return self.files.get(f"{set_code}-{name}")

    async def resolve_config(self, set_code: str) -> SetBoosterConfig | None:
        return self.config


class FakeScryfallClient:
    """Scryfall client returning canned records and recording queries."""

    def __init__(self, results: dict[str, list[dict[str, Any]]] | None = None) -> None:
        self.results = results or {}
        self.queries: list[str] = []

    async def search(self, query: str, **params: str) -> list[dict[str, Any]]:
        self.queries.append(query)
        for prefix, records in self.results.items():
            if query.startswith(prefix):
                return records
        return []


@pytest.fixture
def record_factory() -> Callable[..., dict[str, Any]]:
    return scryfall_record


@pytest.fixture
def resolver_factory() -> Callable[..., FakeResolver]:
    return FakeResolver


@pytest.fixture
def scryfall_factory() -> Callable[..., FakeScryfallClient]:
    return FakeScryfallClient
