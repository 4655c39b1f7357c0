from sealedforge.models.booster import (
    COLLECTOR_EXCLUSIVE_SLOT,
    BoosterFileDef,
    BoosterIndex,
    BoosterSlotDef,
    SetBoosterConfig,
    parse_booster_file,
    parse_booster_index,
)
from sealedforge.models.card import Card

__all__ = [
    "COLLECTOR_EXCLUSIVE_SLOT",
    "BoosterFileDef",
    "BoosterIndex",
    "BoosterSlotDef",
    "Card",
    "SetBoosterConfig",
    "parse_booster_file",
    "parse_booster_index",
]
