"""Selection Engine - Deterministic day-seeded content selection.

Pure logic, NO Home Assistant dependencies. Every selection is a function of
the local day-of-year (1..366) and a static content pool only, so all users
see the same content on a given calendar day and repeated calls (in any
process) return identical results.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

from .. import const

T = TypeVar("T")


class SelectionEngine:
    """Static selection helpers over fixed content pools."""

    @staticmethod
    def _require_pool(pool: Sequence[T]) -> int:
        pool_size = len(pool)
        if pool_size == 0:
            raise ValueError("content pool is empty")
        return pool_size

    @staticmethod
    def daily_power_move(day_of_year: int, pool: Sequence[T]) -> T:
        """Return pool[(day_of_year - 1) % len(pool)]."""
        pool_size = SelectionEngine._require_pool(pool)
        return pool[(day_of_year - 1) % pool_size]

    @staticmethod
    def daily_pose(day_of_year: int, pool: Sequence[T]) -> T:
        """Return pool[day_of_year % len(pool)]."""
        pool_size = SelectionEngine._require_pool(pool)
        return pool[day_of_year % pool_size]

    @staticmethod
    def daily_battle_questions(
        day_of_year: int,
        pool: Sequence[T],
        count: int = const.BATTLE_QUESTIONS_PER_DAY,
    ) -> list[T]:
        """Return `count` questions, slot i = pool[(day * 7 + i * 13) % len(pool)].

        Duplicates across slots are kept and slot order is preserved.

        Example:
            With a 22-question pool on day 1 the first slots are indices
            7, 20, 11, 2, ...
        """
        pool_size = SelectionEngine._require_pool(pool)
        base = day_of_year * const.BATTLE_DAY_MULTIPLIER
        return [
            pool[(base + slot * const.BATTLE_SLOT_STRIDE) % pool_size]
            for slot in range(count)
        ]
