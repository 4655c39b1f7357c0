"""
Booster structure models.

The booster data dataset is a read-only JSON resource: an index listing the
booster types per set, and one file per (set, booster type) describing its
slots. Every optional field has an explicit fallback here so callers never
probe raw dicts.
"""

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from sealedforge.config import DEFAULT_MYTHIC_RATE
from sealedforge.errors import MalformedConfigError

# Slot name used in collector booster files for collector-only printings
COLLECTOR_EXCLUSIVE_SLOT = "collectorExclusive"

# Finishes that count toward the play booster ranges
PLAY_BOOSTER_FINISHES = ("nonfoil", "foil")


class BoosterSlotDef(BaseModel):
    """
    One slot of a booster template.

    A slot without rarities is a wildcard: any card in its pool ranges is
    eligible. A slot without a pool or count is informational only.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: str | None = None
    count: int | None = None
    rarities: list[str] | None = None
    mythic_rate: float | None = Field(default=None, alias="mythicRate")
    pool: dict[str, list[str]] | None = None

    @property
    def produces_cards(self) -> bool:
        """True when the slot both defines a pool and draws at least one card."""
        return self.pool is not None and bool(self.count)

    @property
    def is_wildcard(self) -> bool:
        return self.rarities is None

    @property
    def rolls_mythic(self) -> bool:
        """True when the slot picks between rare and mythic."""
        return self.rarities is not None and "rare" in self.rarities and "mythic" in self.rarities

    @property
    def effective_mythic_rate(self) -> float:
        return DEFAULT_MYTHIC_RATE if self.mythic_rate is None else self.mythic_rate

    def ranges(self, finishes: tuple[str, ...] | None = None) -> list[str]:
        """
        Collect the range expressions of this slot's pool.

        Args:
            finishes: Only include these finishes. None means every finish.

        Returns:
            Range expressions in declaration order (may contain repeats)
        """
        if self.pool is None:
            return []
        ranges: list[str] = []
        for finish, finish_ranges in self.pool.items():
            if finishes is None or finish in finishes:
                ranges.extend(finish_ranges)
        return ranges


class BoosterFileDef(BaseModel):
    """Slot layout for one booster type of one set."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    set_name: str = Field(alias="setName")
    source: str | None = None
    slots: list[BoosterSlotDef]


class BoosterIndex(BaseModel):
    """Top-level dataset manifest: which booster types exist per set."""

    model_config = ConfigDict(extra="ignore")

    version: str = "0.0.0"
    boosters: dict[str, list[str]] = Field(default_factory=dict)

    def types_for(self, set_code: str) -> list[str] | None:
        """Booster types listed for a set, or None if the set has no entry."""
        return self.boosters.get(set_code.lower())


def parse_booster_index(data: Any, source: str = "index.json") -> BoosterIndex:
    """
    Validate a raw booster index document.

    Raises:
        MalformedConfigError: If the document does not match the expected shape
    """
    try:
        return BoosterIndex.model_validate(data)
    except ValidationError as e:
        raise MalformedConfigError(source, str(e)) from e


def parse_booster_file(data: Any, source: str) -> BoosterFileDef:
    """
    Validate a raw booster file document.

    Raises:
        MalformedConfigError: If the document does not match the expected shape
    """
    try:
        return BoosterFileDef.model_validate(data)
    except ValidationError as e:
        raise MalformedConfigError(source, str(e)) from e


@dataclass(frozen=True, slots=True)
class SetBoosterConfig:
    """
    Normalized booster eligibility for one set.

    Attributes:
        set_name: Display name from the booster file
        source_label: Where the booster data was sourced from
        play_booster_ranges: Collector number ranges that appear in the standard product
        collector_exclusive_ranges: Ranges only found in collector boosters.
            None when the set has no collector booster data.
    """

    set_name: str
    source_label: str | None
    play_booster_ranges: tuple[str, ...]
    collector_exclusive_ranges: tuple[str, ...] | None = None
