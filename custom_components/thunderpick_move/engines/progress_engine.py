"""Progress Engine - Pure logic for user progress arithmetic.

This engine provides stateless, pure Python functions for:
- The body status ladder (composite check-in score -> BodyStatus)
- Saturating body score and skill level arithmetic
- Reward application for check-ins, daily moves/quests, activities,
  journal entries and battle sessions
- "Already done today" gating at local-day granularity

ARCHITECTURE: This is a pure logic engine with NO Home Assistant dependencies.
All functions are static methods that operate on a passed-in UserProgressData
dict, mutate it in place, and return it. The current time is always passed
in by the caller. State management and persistence belong in ProgressManager.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .. import const
from ..utils.dt_utils import dt_is_same_local_day
from ..utils.math_utils import (
    average,
    bucket_index,
    clamp,
    saturating_add,
    scaled_floor,
)

if TYPE_CHECKING:
    from datetime import datetime

    from ..type_defs import UserProgressData


class ProgressEngine:
    """Pure logic engine for body score, status and skill calculations.

    All methods are static - no instance state. None of these methods touch
    the activity history or badges; the manager chains StatisticsEngine and
    GamificationEngine after them.
    """

    # =========================================================================
    # STATUS LADDER
    # =========================================================================

    @staticmethod
    def status_from_score(score: float) -> str:
        """Map a composite score in [0, 1] to its BodyStatus.

        Buckets are lower-inclusive with width 0.1; the top bucket also holds
        1.0 and anything above it.

        Examples:
            status_from_score(0.6) → "Present"
            status_from_score(0.95) → "Alpha Mode"
            status_from_score(1.0) → "Alpha Mode"
        """
        index = bucket_index(
            score, const.BODY_STATUS_BUCKET_WIDTH, len(const.BODY_STATUS_LADDER)
        )
        return const.BODY_STATUS_LADDER[index]

    @staticmethod
    def normalize_check_in_score(value: float) -> float:
        """Clamp a single check-in input to [0, 1]."""
        return clamp(
            float(value), const.CHECK_IN_SCORE_MIN, const.CHECK_IN_SCORE_MAX
        )

    # =========================================================================
    # SATURATING ARITHMETIC
    # =========================================================================

    @staticmethod
    def add_body_score(progress: UserProgressData, delta: int) -> UserProgressData:
        """Add `delta` to the body score, saturating at [0, 100]."""
        progress[const.DATA_PROGRESS_BODY_SCORE] = saturating_add(
            progress[const.DATA_PROGRESS_BODY_SCORE],
            delta,
            const.SCORE_MIN,
            const.SCORE_MAX,
        )
        return progress

    @staticmethod
    def boost_skill(
        progress: UserProgressData, skill: str, delta: int
    ) -> UserProgressData:
        """Add `delta` to one skill level, saturating at [0, 100].

        A skill missing from the map starts from 0, matching a freshly
        added skill type.
        """
        skills = progress[const.DATA_PROGRESS_SKILL_LEVELS]
        skills[skill] = saturating_add(
            skills.get(skill, const.SCORE_MIN),
            delta,
            const.SCORE_MIN,
            const.SCORE_MAX,
        )
        return progress

    # =========================================================================
    # DAY GATING
    # =========================================================================

    @staticmethod
    def is_daily_move_completed(progress: UserProgressData, now: datetime) -> bool:
        """Return True if the daily power move was already done on now's day."""
        return dt_is_same_local_day(
            progress.get(const.DATA_PROGRESS_LAST_DAILY_MOVE_DATE), now
        )

    @staticmethod
    def is_daily_quest_completed(progress: UserProgressData, now: datetime) -> bool:
        """Return True if the daily quest was already done on now's day."""
        return dt_is_same_local_day(
            progress.get(const.DATA_PROGRESS_LAST_DAILY_QUEST_DATE), now
        )

    # =========================================================================
    # REWARD APPLICATION
    # =========================================================================

    @staticmethod
    def apply_check_in(
        progress: UserProgressData,
        posture_score: float,
        face_score: float,
        energy_score: float,
        now: datetime,
    ) -> UserProgressData:
        """Apply a self-assessment check-in.

        Inputs are clamped to [0, 1] and averaged. The average sets the
        status and adds floor(average * 5) to the body score.
        """
        composite = average(
            ProgressEngine.normalize_check_in_score(posture_score),
            ProgressEngine.normalize_check_in_score(face_score),
            ProgressEngine.normalize_check_in_score(energy_score),
        )
        progress[const.DATA_PROGRESS_CURRENT_STATUS] = (
            ProgressEngine.status_from_score(composite)
        )
        ProgressEngine.add_body_score(
            progress, scaled_floor(composite, const.CHECK_IN_BODY_SCORE_MULTIPLIER)
        )
        progress[const.DATA_PROGRESS_LAST_CHECK_IN_DATE] = now.isoformat()
        return progress

    @staticmethod
    def apply_daily_move(
        progress: UserProgressData, now: datetime
    ) -> UserProgressData | None:
        """Apply the daily power move reward, or return None if already done today."""
        if ProgressEngine.is_daily_move_completed(progress, now):
            return None
        ProgressEngine.add_body_score(progress, const.DAILY_MOVE_BODY_SCORE_BONUS)
        progress[const.DATA_PROGRESS_ACTIVITIES_COMPLETED] += 1
        ProgressEngine.boost_skill(
            progress, const.DAILY_MOVE_SKILL, const.DAILY_SKILL_BOOST
        )
        progress[const.DATA_PROGRESS_LAST_DAILY_MOVE_DATE] = now.isoformat()
        return progress

    @staticmethod
    def apply_daily_quest(
        progress: UserProgressData, now: datetime
    ) -> UserProgressData | None:
        """Apply the daily quest reward, or return None if already done today."""
        if ProgressEngine.is_daily_quest_completed(progress, now):
            return None
        ProgressEngine.add_body_score(progress, const.DAILY_QUEST_BODY_SCORE_BONUS)
        progress[const.DATA_PROGRESS_ACTIVITIES_COMPLETED] += 1
        ProgressEngine.boost_skill(
            progress, const.DAILY_QUEST_SKILL, const.DAILY_SKILL_BOOST
        )
        progress[const.DATA_PROGRESS_LAST_DAILY_QUEST_DATE] = now.isoformat()
        return progress

    @staticmethod
    def apply_activity(
        progress: UserProgressData, activity_type: str
    ) -> UserProgressData:
        """Apply an activity completion. Never day-gated.

        quest -> Mimicry, training -> Posture, battle -> Gestures.
        """
        progress[const.DATA_PROGRESS_ACTIVITIES_COMPLETED] += 1
        skill = const.ACTIVITY_TYPE_SKILL.get(activity_type)
        if skill is not None:
            ProgressEngine.boost_skill(progress, skill, const.ACTIVITY_SKILL_BOOST)
        return progress

    @staticmethod
    def apply_journal_entry(
        progress: UserProgressData, has_audio: bool
    ) -> UserProgressData:
        """Count a new journal entry; an audio note also trains the voice."""
        progress[const.DATA_PROGRESS_TOTAL_JOURNAL_ENTRIES] += 1
        if has_audio:
            ProgressEngine.boost_skill(
                progress, const.JOURNAL_AUDIO_SKILL, const.JOURNAL_AUDIO_SKILL_BOOST
            )
        return progress

    @staticmethod
    def battle_xp(score: int) -> int:
        """XP earned by a battle session with `score` correct answers."""
        return max(score, 0) * const.BATTLE_XP_PER_CORRECT_ANSWER

    @staticmethod
    def apply_battle_bonus(
        progress: UserProgressData, score: int, total: int
    ) -> UserProgressData:
        """Grant the perfect-score body score bonus (no-op otherwise)."""
        if total > 0 and score == total:
            ProgressEngine.add_body_score(progress, const.BATTLE_PERFECT_SCORE_BONUS)
        return progress
