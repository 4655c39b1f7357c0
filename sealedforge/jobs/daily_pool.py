"""
Generate the daily challenge pool.

Picks the day's set, opens its sealed pool and logs a rarity summary.
Useful for checking a day's challenge ahead of time.

Usage:
    python -m sealedforge.jobs.daily_pool --date 2025-06-01
"""

import argparse
import asyncio
import logging
from collections import Counter
from datetime import date

from sealedforge.config import DEFAULT_NUM_PACKS
from sealedforge.models.card import Card
from sealedforge.services.catalog import fetch_all_catalog
from sealedforge.services.sealed_pool import generate_pool
from sealedforge.services.seeding import daily_candidates, daily_seed, pick_daily_set, utc_day
from sealedforge.services.sets import SetInfo, fetch_sets

logger = logging.getLogger(__name__)


async def run_daily_pool(
    day: date | None = None,
    num_packs: int = DEFAULT_NUM_PACKS,
    sets: list[SetInfo] | None = None,
) -> tuple[SetInfo, list[Card]]:
    """
    Build the daily challenge pool.

    Args:
        day: UTC day to build. Defaults to today.
        num_packs: Packs to open
        sets: Set list. Downloaded when omitted.

    Returns:
        The chosen set and its pool

    Raises:
        ValueError: If no set is eligible for the daily challenge
    """
    day = utc_day(day)
    if sets is None:
        sets = await fetch_sets()
    if not daily_candidates(sets):
        raise ValueError("No sets eligible for the daily challenge")

    seed = daily_seed(day)
    chosen = pick_daily_set(sets, day)
    logger.info("Daily set for %s: %s (%s)", day, chosen.name, chosen.code)

    catalog = await fetch_all_catalog(chosen.code)
    pool = await generate_pool(chosen.code, catalog, num_packs, seed)

    counts = Counter(card.rarity for card in pool)
    logger.info(
        "Opened %d cards: %s",
        len(pool),
        ", ".join(f"{count} {rarity}" for rarity, count in sorted(counts.items())),
    )
    return chosen, pool


def main() -> None:
    """CLI entry point for generating the daily pool."""
    parser = argparse.ArgumentParser(description="Generate the daily challenge pool")
    parser.add_argument(
        "--date",
        type=date.fromisoformat,
        default=None,
        help="Day to generate, YYYY-MM-DD (default: today, UTC)",
    )
    parser.add_argument(
        "--packs",
        type=int,
        default=DEFAULT_NUM_PACKS,
        help=f"Number of packs (default: {DEFAULT_NUM_PACKS})",
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    _, pool = asyncio.run(run_daily_pool(args.date, args.packs))
    for card in pool:
        print(f"{card.collector_number:>5}  {card.rarity:<8}  {card.name}")


if __name__ == "__main__":
    main()
