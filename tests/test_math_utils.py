"""Tests for utils/math_utils.py."""

from __future__ import annotations

import pytest

from custom_components.thunderpick_move.utils.math_utils import (
    average,
    bucket_index,
    capped_ratio,
    clamp,
    saturating_add,
    scaled_floor,
)


def test_clamp() -> None:
    assert clamp(1.4, 0.0, 1.0) == 1.0
    assert clamp(-3, 0, 100) == 0
    assert clamp(0.5, 0.0, 1.0) == 0.5


@pytest.mark.parametrize(
    ("current", "delta", "expected"),
    [(98, 5, 100), (2, -5, 0), (50, 10, 60), (140, 5, 100), (-7, 5, 5)],
)
def test_saturating_add(current: int, delta: int, expected: int) -> None:
    assert saturating_add(current, delta, 0, 100) == expected


def test_average() -> None:
    assert average(0.3, 0.6, 0.9) == pytest.approx(0.6)
    assert average() == 0.0


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (0.0, 0),
        (0.05, 0),
        (0.1, 1),
        (0.3, 3),
        (0.6, 6),
        (0.95, 9),
        (1.0, 9),
        (7.0, 9),
        (-0.2, 0),
    ],
)
def test_bucket_index(value: float, expected: int) -> None:
    assert bucket_index(value, 0.1, 10) == expected


def test_bucket_index_absorbs_float_drift() -> None:
    # 0.7 / 0.1 is 6.999999999999999 without rounding
    assert bucket_index(0.7, 0.1, 10) == 7


def test_bucket_index_rejects_empty_ladder() -> None:
    with pytest.raises(ValueError):
        bucket_index(0.5, 0.1, 0)


@pytest.mark.parametrize(
    ("value", "expected"),
    [(0.6, 3), ((0.2 + 0.3 + 0.1) / 3, 1), ((0.7 + 0.7 + 0.7) / 3, 3), (0.0, 0)],
)
def test_scaled_floor_absorbs_float_drift(value: float, expected: int) -> None:
    assert scaled_floor(value, 5) == expected


def test_capped_ratio() -> None:
    assert capped_ratio(0, 5) == 0.0
    assert capped_ratio(2, 5) == 0.4
    assert capped_ratio(9, 5) == 1.0
    assert capped_ratio(3, 0) == 0.0
