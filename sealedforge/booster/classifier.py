"""
Booster era and collector-exclusivity rules.

Two policies decide whether a printing is collector-booster exclusive:
explicit collector number ranges from booster data (authoritative), and a
generic promo/frame heuristic used when booster data is silent. The
heuristic is imprecise for older sets without booster data.
"""

from datetime import date
from enum import Enum

from sealedforge.booster.ranges import in_any_range
from sealedforge.models.booster import SetBoosterConfig
from sealedforge.models.card import Card


class BoosterType(str, Enum):
    """Booster products a set can ship in."""

    PLAY = "play"
    DRAFT = "draft"
    COLLECTOR = "collector"
    JUMPSTART = "jumpstart"


class BoosterEra(str, Enum):
    """Booster product era, ordered chronologically."""

    DRAFT = "draft"
    COLLECTOR_ERA = "collector-era"
    SET = "set"
    PLAY = "play"


# =============================================================================
# ERA THRESHOLDS
# =============================================================================

COLLECTOR_BOOSTER_START = date(2019, 10, 4)  # Throne of Eldraine
SET_BOOSTER_START = date(2020, 9, 25)  # Zendikar Rising
PLAY_BOOSTER_START = date(2024, 2, 9)  # Murders at Karlov Manor
FOIL_START = date(1999, 2, 15)  # Urza's Legacy


# =============================================================================
# SET EXCEPTIONS
# =============================================================================

# Themed half-deck products with their own booster type
JUMPSTART_SETS = frozenset({"jmp", "j22", "j25"})

# Special products with a single booster type and no collector variant
SINGLE_BOOSTER_SETS = frozenset(
    {
        "mb2", "mh1", "mh2", "cmm", "clb", "2xm", "2x2", "tsr",
        "uma", "ima", "a25", "mm3", "ema", "mm2", "mma",
    }
)

# Special Guests live in the shared "spg" set; each main set owns a range of it
SPECIAL_GUESTS_SET = "spg"
SPECIAL_GUESTS_RANGES: dict[str, tuple[int, int]] = {
    "lci": (1, 18),
    "mkm": (19, 28),
    "otj": (29, 38),
    "mh3": (39, 53),
    "blb": (54, 63),
    "dsk": (64, 73),
    "fdn": (74, 83),
    "dft": (84, 103),
    "tdm": (104, 118),
    "eoe": (119, 128),
    "fin": (129, 148),
}

# Bonus sheets printed under their own set code but opened in the main set's boosters
BONUS_SHEET_SETS: dict[str, tuple[str, ...]] = {
    "otj": ("otp", "big"),  # Breaking News, The Big Score
    "tla": ("tle",),  # Avatar Eternal
    "spm": ("mar",),  # Marvel Universe
    "eoe": ("eos",),  # Stellar Sights
    "fin": ("fca",),  # Through the Ages
}

# Retro frame printings in the play booster that Scryfall marks booster:false
SETS_WITH_RETRO_IN_BOOSTERS = frozenset({"mh3"})
RETRO_FRAME = "1997"


# =============================================================================
# COLLECTOR BOOSTER EXCLUSIVES
# =============================================================================

COLLECTOR_EXCLUSIVE_PROMOS = frozenset(
    {
        "fracturefoil",
        "texturedfoil",
        "ripplefoil",
        "halofoil",
        "confettifoil",
        "galaxyfoil",
        "surgefoil",
        "raisedfoil",
        "headliner",
    }
)

COLLECTOR_EXCLUSIVE_FRAMES = frozenset({"inverted", "extendedart"})


def _as_date(value: date | str) -> date:
    """Accept a date or an ISO string ("2024-02-09" or a full timestamp)."""
    if isinstance(value, date):
        return value
    return date.fromisoformat(value[:10])


def booster_era(release_date: date | str) -> BoosterEra:
    """Classify a set's booster era from its release date."""
    released = _as_date(release_date)
    if released >= PLAY_BOOSTER_START:
        return BoosterEra.PLAY
    if released >= SET_BOOSTER_START:
        return BoosterEra.SET
    if released >= COLLECTOR_BOOSTER_START:
        return BoosterEra.COLLECTOR_ERA
    return BoosterEra.DRAFT


def has_collector_boosters(release_date: date | str) -> bool:
    return _as_date(release_date) >= COLLECTOR_BOOSTER_START


def has_foils(release_date: date | str) -> bool:
    return _as_date(release_date) >= FOIL_START


def is_jumpstart_set(set_code: str) -> bool:
    return set_code.lower() in JUMPSTART_SETS


def is_single_booster_set(set_code: str) -> bool:
    return set_code.lower() in SINGLE_BOOSTER_SETS


def has_special_guests(set_code: str) -> bool:
    return set_code.lower() in SPECIAL_GUESTS_RANGES


def available_booster_types(set_code: str, release_date: date | str) -> list[BoosterType]:
    """
    Booster products a set offers.

    Jumpstart sets only ship jumpstart boosters. Otherwise the standard
    product is a play booster from Murders at Karlov Manor on, a draft
    booster before that, with collector boosters from Throne of Eldraine on.
    """
    if is_jumpstart_set(set_code):
        return [BoosterType.JUMPSTART]

    released = _as_date(release_date)
    if released >= PLAY_BOOSTER_START:
        return [BoosterType.PLAY, BoosterType.COLLECTOR]
    if released >= COLLECTOR_BOOSTER_START:
        return [BoosterType.DRAFT, BoosterType.COLLECTOR]
    return [BoosterType.DRAFT]


def is_in_play_booster(card: Card, config: SetBoosterConfig | None) -> bool | None:
    """
    Check the card against the play booster ranges.

    Returns:
        None when there is no config to consult, otherwise whether
        the card's collector number is in a play booster range
    """
    if config is None:
        return None
    return in_any_range(card.collector_number, config.play_booster_ranges)


def is_collector_exclusive_by_config(card: Card, config: SetBoosterConfig | None) -> bool | None:
    """
    Check the card against the collector-exclusive ranges.

    Returns:
        None when the config has no collector-exclusive ranges, otherwise
        whether the card's collector number is in one of them
    """
    if config is None or config.collector_exclusive_ranges is None:
        return None
    return in_any_range(card.collector_number, config.collector_exclusive_ranges)


def has_exclusive_treatment(card: Card) -> bool:
    """Generic heuristic: premium foil promo or premium frame effect."""
    return bool(
        card.promo_types & COLLECTOR_EXCLUSIVE_PROMOS
        or card.frame_effects & COLLECTOR_EXCLUSIVE_FRAMES
    )


def is_collector_exclusive(card: Card, config: SetBoosterConfig | None = None) -> bool:
    """
    Decide whether a printing only appears in collector boosters.

    Booster data wins outright: a card in the play booster ranges is never
    exclusive, and a card in the collector-exclusive ranges always is. Only
    when the config is silent does the generic heuristic apply.
    """
    if is_in_play_booster(card, config) is True:
        return False
    if is_collector_exclusive_by_config(card, config) is True:
        return True
    return has_exclusive_treatment(card)


def _reported_booster(card: Card, set_code: str) -> bool:
    """Scryfall's booster flag, corrected for retro frames opened in play boosters."""
    if card.booster_eligible:
        return True
    return set_code.lower() in SETS_WITH_RETRO_IN_BOOSTERS and card.frame == RETRO_FRAME


def is_booster_eligible(card: Card, set_code: str, config: SetBoosterConfig | None = None) -> bool:
    """
    Decide whether a printing can be opened in a set's standard booster.

    Without a config the catalog query already limited results to booster
    printings, so only the generic heuristic is applied (plus the booster
    flag for sets whose query is left unrestricted).
    """
    in_play = is_in_play_booster(card, config)
    if in_play is True:
        return True
    if is_collector_exclusive_by_config(card, config) is True:
        return False
    if config is not None or set_code.lower() in SETS_WITH_RETRO_IN_BOOSTERS:
        return _reported_booster(card, set_code) and not has_exclusive_treatment(card)
    return not has_exclusive_treatment(card)
