"""
Collector number range matching.

Range expressions come from booster data files and look like "342" or
"262-281". Bounds are inclusive. Collector numbers are matched by their
leading integer, so "123a" and "123★" both match "123".
"""

import re
from collections.abc import Iterable

_LEADING_INT = re.compile(r"\s*(\d+)")


def _leading_int(text: str) -> int | None:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else None


def in_range(collector_number: str, range_expr: str) -> bool:
    """
    Check whether a collector number falls within a range expression.

    Args:
        collector_number: Printed collector number (e.g., "7", "123a")
        range_expr: "N" or "N-M"

    Returns:
        True if the leading integer of the collector number is in range.
        False if either side has no parseable integer.
    """
    number = _leading_int(collector_number)
    if number is None:
        return False

    if "-" in range_expr:
        start_text, _, end_text = range_expr.partition("-")
        start = _leading_int(start_text)
        end = _leading_int(end_text)
        if start is None or end is None:
            return False
        return start <= number <= end

    return number == _leading_int(range_expr)


def in_any_range(collector_number: str, ranges: Iterable[str]) -> bool:
    """True if the collector number is in at least one of the ranges."""
    return any(in_range(collector_number, range_expr) for range_expr in ranges)
