"""Gamification Engine - Pure logic for badge evaluation.

This engine provides stateless, pure Python functions for:
- Badge rule evaluation against a progress record
- Additive badge application (union into unlocked_badges, never revoked)
- Per-rule progress toward each threshold

ARCHITECTURE: This is a pure logic engine with NO Home Assistant dependencies.
`evaluate()` is re-derivable from the progress record alone; there is no hidden
state. The ProgressManager calls `apply_badges()` after every mutation that can
move a qualifying counter and emits BADGE_UNLOCKED for each new id.

Badge rules (checked independently, in this order):
- Writer: total_journal_entries >= 5
- Steel Eyes: activities_completed >= 10
- Alpha: body_score >= 90
- Consistent: activities_completed >= 15
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final, NamedTuple

from .. import const
from ..utils.math_utils import capped_ratio

if TYPE_CHECKING:
    from ..type_defs import BadgeProgress, UserProgressData


class BadgeRule(NamedTuple):
    """A threshold rule over one progress counter."""

    badge_id: str
    counter: str
    threshold: int


# Order is the unlock order when several badges qualify at once
BADGE_RULES: Final[tuple[BadgeRule, ...]] = (
    BadgeRule(
        const.BADGE_WRITER,
        const.DATA_PROGRESS_TOTAL_JOURNAL_ENTRIES,
        const.BADGE_WRITER_JOURNAL_ENTRIES,
    ),
    BadgeRule(
        const.BADGE_STEEL_EYES,
        const.DATA_PROGRESS_ACTIVITIES_COMPLETED,
        const.BADGE_STEEL_EYES_ACTIVITIES,
    ),
    BadgeRule(
        const.BADGE_ALPHA,
        const.DATA_PROGRESS_BODY_SCORE,
        const.BADGE_ALPHA_BODY_SCORE,
    ),
    BadgeRule(
        const.BADGE_CONSISTENT,
        const.DATA_PROGRESS_ACTIVITIES_COMPLETED,
        const.BADGE_CONSISTENT_ACTIVITIES,
    ),
)


class GamificationEngine:
    """Pure logic engine for badge evaluation.

    All methods are static - no instance state. This enables easy unit testing
    without any Home Assistant mocking.
    """

    @staticmethod
    def _counter_value(progress: UserProgressData, counter: str) -> int:
        value = progress.get(counter, const.DEFAULT_ZERO)  # type: ignore[misc]
        return int(value) if isinstance(value, int) else const.DEFAULT_ZERO

    @staticmethod
    def evaluate(progress: UserProgressData) -> set[str]:
        """Return the set of badge ids whose rule currently holds.

        Example:
            journals=5, activities=0, body_score=0 → {"Writer"}
        """
        return {
            rule.badge_id
            for rule in BADGE_RULES
            if GamificationEngine._counter_value(progress, rule.counter)
            >= rule.threshold
        }

    @staticmethod
    def apply_badges(progress: UserProgressData) -> list[str]:
        """Union the evaluated set into unlocked_badges.

        New ids are appended in rule order. Existing ids are never removed,
        even if their rule no longer holds.

        Returns:
            The newly unlocked badge ids (empty if nothing changed).
        """
        earned = GamificationEngine.evaluate(progress)
        unlocked = progress[const.DATA_PROGRESS_UNLOCKED_BADGES]
        newly_unlocked: list[str] = []
        for rule in BADGE_RULES:
            if rule.badge_id in earned and rule.badge_id not in unlocked:
                unlocked.append(rule.badge_id)
                newly_unlocked.append(rule.badge_id)
        return newly_unlocked

    @staticmethod
    def badge_progress(progress: UserProgressData) -> list[BadgeProgress]:
        """Return per-rule progress toward each badge, in rule order."""
        unlocked = progress.get(const.DATA_PROGRESS_UNLOCKED_BADGES) or []
        results: list[BadgeProgress] = []
        for rule in BADGE_RULES:
            current = GamificationEngine._counter_value(progress, rule.counter)
            results.append(
                {
                    "badge_id": rule.badge_id,
                    "counter": rule.counter,
                    "current_value": current,
                    "threshold": rule.threshold,
                    "progress": capped_ratio(current, rule.threshold),
                    "unlocked": rule.badge_id in unlocked,
                }
            )
        return results
