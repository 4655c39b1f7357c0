"""
Card acquisition pipeline.

Fetches a set's printings from Scryfall and keeps only the cards that can
be opened in the requested booster product. Booster data from the resolver
decides eligibility when available; otherwise Scryfall's booster flag and
the generic collector-exclusive heuristic are used.
"""

import logging

from sealedforge.booster.classifier import (
    BONUS_SHEET_SETS,
    SETS_WITH_RETRO_IN_BOOSTERS,
    SPECIAL_GUESTS_RANGES,
    SPECIAL_GUESTS_SET,
    BoosterType,
    has_special_guests,
    is_booster_eligible,
    is_jumpstart_set,
)
from sealedforge.booster.resolver import BoosterDataResolver, get_resolver
from sealedforge.models.booster import SetBoosterConfig
from sealedforge.models.card import Card
from sealedforge.parsers.scryfall import parse_cards
from sealedforge.services.scryfall_client import ScryfallClient

logger = logging.getLogger(__name__)


def _price_clause(min_price: float) -> str:
    return f"(usd>={min_price:g} OR usd_foil>={min_price:g})"


def build_search_query(
    set_code: str,
    *,
    restrict_to_booster: bool,
    exclude_booster_fun: bool = False,
    min_price: float = 0.0,
) -> str:
    """
    Build a Scryfall query for a set's English printings.

    Args:
        set_code: Set to search
        restrict_to_booster: Only printings Scryfall marks as found in boosters
        exclude_booster_fun: Also drop showcase/borderless "boosterfun" printings
        min_price: Keep printings whose regular or foil price reaches this (0 disables)

    Returns:
        Query string in Scryfall search syntax
    """
    parts = [f"set:{set_code.lower()}", "lang:en"]
    if restrict_to_booster:
        parts.append("is:booster")
        if exclude_booster_fun:
            parts.append("-is:boosterfun")
    if min_price > 0:
        parts.append(_price_clause(min_price))
    return " ".join(parts)


def _restrict_query(
    set_code: str, booster_type: BoosterType, config: SetBoosterConfig | None
) -> bool:
    """Whether the query itself can restrict results to booster printings."""
    if booster_type == BoosterType.COLLECTOR or is_jumpstart_set(set_code):
        return False
    # Booster data and the retro frame exception are applied client-side
    return config is None and set_code.lower() not in SETS_WITH_RETRO_IN_BOOSTERS


def filter_for_booster(
    cards: list[Card],
    set_code: str,
    booster_type: BoosterType,
    config: SetBoosterConfig | None,
) -> list[Card]:
    """Drop printings that cannot be opened in the requested booster type."""
    if booster_type == BoosterType.COLLECTOR:
        return cards
    kept = [card for card in cards if is_booster_eligible(card, set_code, config)]
    logger.debug(
        "Kept %d of %d %s printings for %s boosters",
        len(kept),
        len(cards),
        set_code,
        booster_type.value,
    )
    return kept


async def fetch_side_catalog(
    set_code: str,
    *,
    min_price: float = 0.0,
    client: ScryfallClient | None = None,
) -> list[Card]:
    """
    Fetch the Special Guests and bonus sheet cards opened in a set's boosters.

    A sheet Scryfall has no cards for contributes nothing.

    Raises:
        UnrecoverableFetchError: If Scryfall keeps failing
    """
    client = client or ScryfallClient()
    set_code = set_code.lower()
    queries: list[str] = []

    guest_range = SPECIAL_GUESTS_RANGES.get(set_code)
    if guest_range is not None:
        start, end = guest_range
        queries.append(f"set:{SPECIAL_GUESTS_SET} cn>={start} cn<={end}")

    queries.extend(f"set:{bonus_code}" for bonus_code in BONUS_SHEET_SETS.get(set_code, ()))

    cards: list[Card] = []
    for query in queries:
        if min_price > 0:
            query = f"{query} {_price_clause(min_price)}"
        cards.extend(parse_cards(await client.search(query)))
    return cards


async def fetch_catalog(
    set_code: str,
    booster_type: BoosterType = BoosterType.PLAY,
    *,
    min_price: float = 0.0,
    include_special_guests: bool = False,
    client: ScryfallClient | None = None,
    resolver: BoosterDataResolver | None = None,
) -> list[Card]:
    """
    Fetch the printings a booster type can contain, most valuable first.

    Args:
        set_code: Set to fetch
        booster_type: Booster product the cards must belong to
        min_price: Keep printings whose regular or foil price reaches this
        include_special_guests: Append Special Guests and bonus sheet cards
        client: Scryfall client. Defaults to a new client.
        resolver: Booster data resolver. Defaults to the process-wide one.

    Returns:
        Cards ordered by USD price, descending

    Raises:
        UnrecoverableFetchError: If Scryfall keeps failing
    """
    client = client or ScryfallClient()
    resolver = resolver or get_resolver()
    config = await resolver.resolve_config(set_code)

    query = build_search_query(
        set_code,
        restrict_to_booster=_restrict_query(set_code, booster_type, config),
        exclude_booster_fun=True,
        min_price=min_price,
    )
    records = await client.search(query, unique="prints", order="usd", dir="desc")
    cards = filter_for_booster(parse_cards(records), set_code, booster_type, config)

    if include_special_guests and (
        has_special_guests(set_code) or set_code.lower() in BONUS_SHEET_SETS
    ):
        cards.extend(await fetch_side_catalog(set_code, min_price=min_price, client=client))

    logger.info("Fetched %d %s cards for %s boosters", len(cards), set_code, booster_type.value)
    return cards


async def fetch_all_catalog(
    set_code: str,
    booster_type: BoosterType = BoosterType.PLAY,
    *,
    client: ScryfallClient | None = None,
    resolver: BoosterDataResolver | None = None,
) -> list[Card]:
    """
    Fetch every printing a booster type can contain, for sealed pool generation.

    Same eligibility filtering as fetch_catalog, without a price threshold.

    Raises:
        UnrecoverableFetchError: If Scryfall keeps failing
    """
    client = client or ScryfallClient()
    resolver = resolver or get_resolver()
    config = await resolver.resolve_config(set_code)

    query = build_search_query(
        set_code,
        restrict_to_booster=_restrict_query(set_code, booster_type, config),
    )
    records = await client.search(query, unique="prints")
    cards = filter_for_booster(parse_cards(records), set_code, booster_type, config)

    logger.info("Fetched %d %s cards for sealed pools", len(cards), set_code)
    return cards
