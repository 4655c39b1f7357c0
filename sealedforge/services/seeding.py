"""
Deterministic seed derivation.

Reproducible pools (e.g., the daily challenge) must be identical for every
user and independent of any other randomness in the process. The seeded
generator is mulberry32 with explicitly threaded 32-bit state; string seeds
are reduced with a 31-multiplier rolling hash over UTF-16 code units.
"""

from collections.abc import Callable, Sequence
from datetime import UTC, date, datetime

from sealedforge.config import DAILY_SEED_PREFIX, DAILY_SET_CUTOFF
from sealedforge.services.sets import SetInfo

RandomSource = Callable[[], float]

_MASK_32 = 0xFFFFFFFF
_MULBERRY_INCREMENT = 0x6D2B79F5


def _to_int32(value: int) -> int:
    value &= _MASK_32
    return value - 0x100000000 if value & 0x80000000 else value


def _utf16_code_units(text: str) -> list[int]:
    encoded = text.encode("utf-16-le")
    return [int.from_bytes(encoded[i : i + 2], "little") for i in range(0, len(encoded), 2)]


def hash_string(text: str) -> int:
    """
    Reduce a string to a signed 32-bit integer.

    hash = hash * 31 + code_unit, truncated to 32 bits at every step.
    """
    value = 0
    for unit in _utf16_code_units(text):
        value = _to_int32(value * 31 + unit)
    return value


def mulberry32(state: int) -> tuple[int, float]:
    """
    Advance mulberry32 by one step.

    Args:
        state: Current 32-bit state

    Returns:
        (next state, value in [0, 1))
    """
    state = (state + _MULBERRY_INCREMENT) & _MASK_32
    t = ((state ^ (state >> 15)) * (state | 1)) & _MASK_32
    t = ((t + (((t ^ (t >> 7)) * (t | 61)) & _MASK_32)) & _MASK_32) ^ t
    return state, ((t ^ (t >> 14)) & _MASK_32) / 4294967296


def seeded_generator(seed: int | str) -> RandomSource:
    """
    Create a deterministic random source.

    Args:
        seed: Integer seed, or any string (hashed with hash_string)

    Returns:
        Callable returning floats in [0, 1); each call advances its own state
    """
    state = (hash_string(seed) if isinstance(seed, str) else seed) & _MASK_32

    def next_value() -> float:
        nonlocal state
        state, value = mulberry32(state)
        return value

    return next_value


def utc_day(day: date | datetime | None = None) -> date:
    """Calendar day in UTC. None means today."""
    if day is None:
        return datetime.now(UTC).date()
    if isinstance(day, datetime):
        if day.tzinfo is not None:
            day = day.astimezone(UTC)
        return day.date()
    return day


def daily_seed(day: date | datetime | None = None) -> str:
    """
    Seed shared by everyone on a UTC calendar day.

    Aware datetimes are converted to UTC first; naive ones are taken as UTC.

    Returns:
        "daily-YYYY-MM-DD"
    """
    return f"{DAILY_SEED_PREFIX}{utc_day(day).isoformat()}"


def daily_candidates(sets: Sequence[SetInfo]) -> list[SetInfo]:
    """Sets eligible for the daily pick: released on or after the cutoff."""
    return [s for s in sets if s.released and s.released >= DAILY_SET_CUTOFF]


def pick_daily_set(sets: Sequence[SetInfo], day: date | datetime | None = None) -> SetInfo:
    """
    Pick the daily challenge set.

    Only sets released on or after the cutoff are candidates. The caller must
    make sure at least one exists.

    Raises:
        ZeroDivisionError: If no set passes the release date cutoff
    """
    day_text = daily_seed(day).removeprefix(DAILY_SEED_PREFIX)
    candidates = daily_candidates(sets)
    return candidates[abs(hash_string(day_text)) % len(candidates)]
