"""
Sealed pool generator.

Simulates opening a number of boosters from a set's catalog. When booster
data describes the set's slots, each pack follows that template
(structured). Otherwise each pack is a simplified 1 rare/mythic,
3 uncommons, 10 commons (legacy).

Empty buckets skip their draw rather than failing, so packs can come up
short when the catalog is incomplete. Given a seed, the same catalog always
produces the same pool.
"""

import logging
import random
from collections.abc import Iterable, Sequence

from sealedforge.booster.classifier import BoosterType
from sealedforge.booster.ranges import in_any_range
from sealedforge.booster.resolver import BoosterDataResolver, get_resolver
from sealedforge.config import DEFAULT_MYTHIC_RATE, DEFAULT_NUM_PACKS
from sealedforge.models.booster import BoosterFileDef, BoosterSlotDef
from sealedforge.models.card import Card
from sealedforge.services.seeding import RandomSource, seeded_generator

logger = logging.getLogger(__name__)

RARITIES = ("common", "uncommon", "rare", "mythic")

# Legacy pack layout (after the rare/mythic slot)
LEGACY_UNCOMMONS_PER_PACK = 3
LEGACY_COMMONS_PER_PACK = 10


def pick_random(cards: Sequence[Card], rng: RandomSource) -> Card:
    """Pick one card uniformly. The sequence must not be empty."""
    return cards[int(rng() * len(cards))]


def _unique(cards: Iterable[Card]) -> list[Card]:
    """Remove repeated printings by id, keeping first-seen order."""
    return list({card.id: card for card in cards}.values())


def group_by_rarity(catalog: Iterable[Card]) -> dict[str, list[Card]]:
    buckets: dict[str, list[Card]] = {rarity: [] for rarity in RARITIES}
    for card in catalog:
        if card.rarity in buckets:
            buckets[card.rarity].append(card)
    return buckets


def slot_rarity_buckets(
    booster_file: BoosterFileDef, catalog: Sequence[Card]
) -> dict[str, list[Card]]:
    """
    Bucket the catalog by rarity, limited to the slots declaring each rarity.

    A card lands in a rarity's bucket when its collector number is in the
    ranges of any slot that lists that rarity.
    """
    ranges_by_rarity: dict[str, list[str]] = {}
    for slot in booster_file.slots:
        if slot.pool is None or slot.rarities is None:
            continue
        for rarity in slot.rarities:
            ranges_by_rarity.setdefault(rarity, []).extend(slot.ranges())

    return {
        rarity: _unique(
            card
            for card in catalog
            if card.rarity == rarity and in_any_range(card.collector_number, ranges)
        )
        for rarity, ranges in ranges_by_rarity.items()
    }


def slot_wildcard_buckets(
    booster_file: BoosterFileDef, catalog: Sequence[Card]
) -> dict[int, list[Card]]:
    """Cards eligible for each rarity-less slot, keyed by slot position."""
    return {
        position: _unique(
            card for card in catalog if in_any_range(card.collector_number, slot.ranges())
        )
        for position, slot in enumerate(booster_file.slots)
        if slot.produces_cards and slot.is_wildcard
    }


def _roll_rarity(
    slot: BoosterSlotDef, buckets: dict[str, list[Card]], rng: RandomSource
) -> str | None:
    if slot.rolls_mythic:
        roll = rng()
        if buckets.get("mythic") and roll < slot.effective_mythic_rate:
            return "mythic"
        return "rare"
    if not slot.rarities:
        return None
    return slot.rarities[int(rng() * len(slot.rarities))]


def generate_structured_pool(
    booster_file: BoosterFileDef,
    catalog: Sequence[Card],
    num_packs: int = DEFAULT_NUM_PACKS,
    rng: RandomSource = random.random,
) -> list[Card]:
    """
    Open packs following a booster file's slot template.

    Args:
        booster_file: Slot layout for the set's standard booster
        catalog: Booster-eligible cards of the set
        num_packs: Number of packs to open
        rng: Random source returning floats in [0, 1)

    Returns:
        Cards in pack, slot, draw order
    """
    by_rarity = slot_rarity_buckets(booster_file, catalog)
    wildcards = slot_wildcard_buckets(booster_file, catalog)

    pool: list[Card] = []
    for _ in range(num_packs):
        for position, slot in enumerate(booster_file.slots):
            if not slot.produces_cards:
                continue
            for _ in range(slot.count or 0):
                if slot.is_wildcard:
                    bucket = wildcards[position]
                else:
                    rarity = _roll_rarity(slot, by_rarity, rng)
                    bucket = by_rarity.get(rarity, []) if rarity else []
                if bucket:
                    pool.append(pick_random(bucket, rng))

    return pool


def generate_legacy_pool(
    catalog: Sequence[Card],
    num_packs: int = DEFAULT_NUM_PACKS,
    rng: RandomSource = random.random,
) -> list[Card]:
    """
    Open simplified packs: 1 rare or mythic, 3 uncommons, 10 commons.

    The rare slot upgrades to mythic at DEFAULT_MYTHIC_RATE when the
    catalog has mythics.
    """
    by_rarity = group_by_rarity(catalog)

    pool: list[Card] = []
    for _ in range(num_packs):
        is_mythic = rng() < DEFAULT_MYTHIC_RATE and bool(by_rarity["mythic"])
        rare_bucket = by_rarity["mythic"] if is_mythic else by_rarity["rare"]
        if rare_bucket:
            pool.append(pick_random(rare_bucket, rng))

        for rarity, count in (
            ("uncommon", LEGACY_UNCOMMONS_PER_PACK),
            ("common", LEGACY_COMMONS_PER_PACK),
        ):
            bucket = by_rarity[rarity]
            for _ in range(count):
                if bucket:
                    pool.append(pick_random(bucket, rng))

    return pool


async def generate_pool(
    set_code: str,
    catalog: Sequence[Card],
    num_packs: int = DEFAULT_NUM_PACKS,
    seed: int | str | None = None,
    *,
    booster_type: BoosterType | None = None,
    resolver: BoosterDataResolver | None = None,
) -> list[Card]:
    """
    Generate a sealed pool for a set.

    Uses the booster data slot template for the set when one is available,
    otherwise the legacy pack layout.

    Args:
        set_code: Set being opened
        catalog: Booster-eligible cards (see fetch_all_catalog)
        num_packs: Number of packs to open
        seed: Seed for a reproducible pool. None draws from the global random source.
        booster_type: Template to use. Defaults to the set's play booster,
                      or its draft booster when it has none.
        resolver: Booster data resolver. Defaults to the process-wide one.

    Returns:
        Cards in pack, slot, draw order
    """
    rng = seeded_generator(seed) if seed is not None else random.random
    resolver = resolver or get_resolver()

    template_type = booster_type or await resolver.play_booster_type(set_code)
    booster_file = None
    if template_type is not None:
        booster_file = await resolver.load_booster_file(set_code, template_type)

    if booster_file is None or not booster_file.slots:
        logger.info("No booster data for %s, using legacy pack layout", set_code)
        return generate_legacy_pool(catalog, num_packs, rng)

    logger.debug("Generating %d %s packs for %s", num_packs, template_type.value, set_code)
    return generate_structured_pool(booster_file, catalog, num_packs, rng)
