"""
SealedForge services.

Card acquisition, sealed pool generation and daily seeding.
"""

from sealedforge.services.catalog import (
    build_search_query,
    fetch_all_catalog,
    fetch_catalog,
    fetch_side_catalog,
    filter_for_booster,
)
from sealedforge.services.scryfall_client import ScryfallClient
from sealedforge.services.sealed_pool import (
    generate_legacy_pool,
    generate_pool,
    generate_structured_pool,
)
from sealedforge.services.seeding import (
    daily_candidates,
    daily_seed,
    hash_string,
    pick_daily_set,
    seeded_generator,
)
from sealedforge.services.sets import SetInfo, fetch_sets, parse_sets

__all__ = [
    # Card acquisition
    "ScryfallClient",
    "build_search_query",
    "fetch_all_catalog",
    "fetch_catalog",
    "fetch_side_catalog",
    "filter_for_booster",
    # Sealed pools
    "generate_legacy_pool",
    "generate_pool",
    "generate_structured_pool",
    # Seeding
    "daily_candidates",
    "daily_seed",
    "hash_string",
    "pick_daily_set",
    "seeded_generator",
    # Sets
    "SetInfo",
    "fetch_sets",
    "parse_sets",
]
