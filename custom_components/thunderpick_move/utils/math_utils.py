# File: utils/math_utils.py
"""Math and calculation utilities for Thunderpick Move.

Pure Python math functions with ZERO Home Assistant dependencies.

DIRECTIVE - UTILS PURITY: NO `homeassistant.*` imports allowed.

Functions:
    - clamp: Bound a value to an inclusive range
    - saturating_add: Integer add that sticks at the range limits
    - average: Arithmetic mean of score inputs
    - bucket_index: Fixed-width bucket lookup tolerant of float drift
    - scaled_floor: floor(value * factor) with the same drift tolerance
    - capped_ratio: count / saturation, capped at 1.0
"""

from __future__ import annotations

import logging
import math

# Module-level logger (no HA dependency)
_LOGGER = logging.getLogger(__name__)

# Precision used before flooring bucket positions (absorbs 0.1 + 0.2 style drift)
BUCKET_PRECISION = 9


def clamp(value: float, lower: float, upper: float) -> float:
    """Bound `value` to the inclusive range [lower, upper].

    Examples:
        clamp(1.4, 0.0, 1.0) → 1.0
        clamp(-3, 0, 100) → 0
    """
    return max(lower, min(upper, value))


def saturating_add(current: int, delta: int, lower: int, upper: int) -> int:
    """Add `delta` to `current`, never leaving [lower, upper].

    The current value is clamped first so corrupted stored values heal on
    the next mutation.

    Examples:
        saturating_add(98, 5, 0, 100) → 100
        saturating_add(2, -5, 0, 100) → 0
    """
    base = int(clamp(current, lower, upper))
    return int(clamp(base + delta, lower, upper))


def average(*values: float) -> float:
    """Return the arithmetic mean of the given values (0.0 when empty)."""
    if not values:
        return 0.0
    return sum(values) / len(values)


def bucket_index(value: float, width: float, bucket_count: int) -> int:
    """Return the index of the fixed-width bucket containing `value`.

    Buckets are lower-inclusive: bucket i covers [i * width, (i + 1) * width).
    Values below zero fall in the first bucket; values past the last
    boundary fall in the last bucket.

    Examples:
        bucket_index(0.6, 0.1, 10) → 6
        bucket_index(0.95, 0.1, 10) → 9
        bucket_index(1.0, 0.1, 10) → 9
    """
    if bucket_count <= 0:
        raise ValueError("bucket_count must be positive")
    position = round(value / width, BUCKET_PRECISION)
    index = math.floor(position)
    return int(clamp(index, 0, bucket_count - 1))


def scaled_floor(value: float, factor: float) -> int:
    """Return floor(value * factor), rounding away float drift first.

    Uses the same precision as bucket_index, so a value that lands in a
    bucket also scales from that bucket's boundary.

    Examples:
        scaled_floor(0.6, 5) → 3
        scaled_floor((0.2 + 0.3 + 0.1) / 3, 5) → 1
    """
    return math.floor(round(value * factor, BUCKET_PRECISION))


def capped_ratio(count: float, saturation: float) -> float:
    """Return count / saturation capped to [0.0, 1.0].

    Examples:
        capped_ratio(0, 5) → 0.0
        capped_ratio(2, 5) → 0.4
        capped_ratio(9, 5) → 1.0
    """
    if saturation <= 0 or count <= 0:
        return 0.0
    return min(count / saturation, 1.0)
