"""
Numeric and matching helpers shared by the scoring formulas.
"""
from __future__ import annotations

import math
from typing import Iterable, Sequence


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def mean(values: Sequence[float], default: float = 0.0) -> float:
    """Arithmetic mean, or `default` for an empty sequence."""
    if not values:
        return default
    return sum(values) / len(values)


def population_stddev(values: Sequence[float]) -> float:
    if len(values) < 2:
        return 0.0
    avg = mean(values)
    return math.sqrt(sum((v - avg) ** 2 for v in values) / len(values))


def round_half_up(value: float) -> int:
    """Round .5 away from zero for positives (Python's round() is banker's)."""
    return int(math.floor(value + 0.5))


def text_matches(a: str, b: str) -> bool:
    """
    Bidirectional case-insensitive substring containment.

    Partial words match too ("react" matches "reaction").
    """
    if not a or not b:
        return False
    a_low = a.lower()
    b_low = b.lower()
    return a_low in b_low or b_low in a_low


def matches_any(candidate: str, pool: Iterable[str]) -> bool:
    return any(text_matches(candidate, item) for item in pool)
