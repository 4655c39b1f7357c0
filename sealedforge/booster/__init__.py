from sealedforge.booster.classifier import (
    BoosterEra,
    BoosterType,
    available_booster_types,
    booster_era,
    is_booster_eligible,
    is_collector_exclusive,
)
from sealedforge.booster.ranges import in_any_range, in_range
from sealedforge.booster.resolver import BoosterDataResolver, get_resolver

__all__ = [
    "BoosterDataResolver",
    "BoosterEra",
    "BoosterType",
    "available_booster_types",
    "booster_era",
    "get_resolver",
    "in_any_range",
    "in_range",
    "is_booster_eligible",
    "is_collector_exclusive",
]
