from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class Card:
    """
    A single printing from a set's catalog.

    Attributes:
        id: Scryfall printing ID (identity of the card)
        name: Card name
        set_code: Lowercase set code the printing belongs to (e.g., "mkm")
        collector_number: Collector number as printed; may carry suffixes ("123a", "★")
        rarity: common, uncommon, rare, mythic (other Scryfall rarities kept verbatim)
        promo_types: Scryfall promo types ("halofoil", "surgefoil", ...)
        frame_effects: Scryfall frame effects ("extendedart", "showcase", ...)
        booster_eligible: Scryfall's "booster" flag
        frame: Frame edition ("1997", "2015", ...)
        image_uri: Normal-size image URL, when Scryfall provides one
    """

    id: str
    name: str
    set_code: str
    collector_number: str
    rarity: str
    promo_types: frozenset[str] = field(default_factory=frozenset)
    frame_effects: frozenset[str] = field(default_factory=frozenset)
    booster_eligible: bool = True
    frame: str | None = None
    image_uri: str | None = None
