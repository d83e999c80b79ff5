"""Progress Manager - User progress mutations.

This manager owns every mutation of the `userStats` record:
- Check-ins (status ladder + body score)
- Daily power move / daily quest (once per local calendar day)
- Activity completions (never day-gated), training games, battle sessions
- Journal entry add/delete (counter is a one-way ratchet)

ARCHITECTURE:
- ProgressManager = STATEFUL orchestration (read-modify-persist, events)
- ProgressEngine / StatisticsEngine / GamificationEngine = pure arithmetic
- Every mutation runs synchronously between awaits on the event loop, so two
  mutations never interleave.

Each successful mutation ends with `_finalize()`: log the action in the
activity history, re-scan badges, persist, then emit PROGRESS_UPDATED (and
BADGE_UNLOCKED once per new badge).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .. import const, data_builders as db
from ..content import BATTLE_QUESTIONS, DAILY_POWER_MOVES, POWER_POSES, TRAINING_GAMES
from ..engines.gamification_engine import GamificationEngine
from ..engines.progress_engine import ProgressEngine
from ..engines.selection_engine import SelectionEngine
from ..engines.statistics_engine import StatisticsEngine
from ..utils import dt_utils
from .base_manager import BaseManager

if TYPE_CHECKING:
    from datetime import datetime

    from ..type_defs import (
        ActivityData,
        BadgeProgress,
        BattleQuestion,
        HeatmapCell,
        JournalEntryData,
        MoodDayStats,
        PowerMove,
        PowerPose,
        UserProgressData,
    )


class ProgressManager(BaseManager):
    """Manager for user progress mutations and derived read models."""

    async def async_setup(self) -> None:
        """Nothing to subscribe to; all mutations arrive through services."""

    # =========================================================================
    # Accessors
    # =========================================================================

    @property
    def progress(self) -> UserProgressData:
        """The live progress record."""
        return self.coordinator.progress

    def _now(self) -> datetime:
        return dt_utils.dt_now_local()

    def _finalize(self, source: str, now: datetime) -> UserProgressData:
        """Log the action, re-scan badges, persist and notify listeners."""
        progress = self.progress
        StatisticsEngine.log_activity(progress, now)
        new_badges = GamificationEngine.apply_badges(progress)

        self.coordinator._persist_and_update()

        self.emit(
            const.SIGNAL_SUFFIX_PROGRESS_UPDATED,
            source=source,
            body_score=progress[const.DATA_PROGRESS_BODY_SCORE],
            current_status=progress[const.DATA_PROGRESS_CURRENT_STATUS],
        )
        for badge_id in new_badges:
            const.LOGGER.info("Badge unlocked: %s (source=%s)", badge_id, source)
            self.emit(
                const.SIGNAL_SUFFIX_BADGE_UNLOCKED, badge_id=badge_id, source=source
            )
        return progress

    # =========================================================================
    # Mutations
    # =========================================================================

    def check_in(
        self, posture_score: float, face_score: float, energy_score: float
    ) -> UserProgressData:
        """Record a self-assessment check-in (scores in [0, 1], clamped)."""
        now = self._now()
        ProgressEngine.apply_check_in(
            self.progress, posture_score, face_score, energy_score, now
        )
        const.LOGGER.debug(
            "Check-in recorded: status=%s body_score=%s",
            self.progress[const.DATA_PROGRESS_CURRENT_STATUS],
            self.progress[const.DATA_PROGRESS_BODY_SCORE],
        )
        return self._finalize(const.PROGRESS_SOURCE_CHECK_IN, now)

    def complete_daily_move(self) -> UserProgressData | None:
        """Complete today's power move. Returns None if already done today."""
        now = self._now()
        if ProgressEngine.apply_daily_move(self.progress, now) is None:
            const.LOGGER.debug("Daily move already completed today")
            return None
        return self._finalize(const.PROGRESS_SOURCE_DAILY_MOVE, now)

    def complete_daily_quest(self) -> UserProgressData | None:
        """Complete today's quest. Returns None if already done today."""
        now = self._now()
        if ProgressEngine.apply_daily_quest(self.progress, now) is None:
            const.LOGGER.debug("Daily quest already completed today")
            return None
        return self._finalize(const.PROGRESS_SOURCE_DAILY_QUEST, now)

    def complete_activity(self, activity: ActivityData) -> UserProgressData:
        """Complete an activity. Repeat completions on the same day all count."""
        now = self._now()
        ProgressEngine.apply_activity(
            self.progress, activity[const.DATA_ACTIVITY_TYPE]
        )
        const.LOGGER.debug(
            "Activity completed: %s (%s)",
            activity[const.DATA_ACTIVITY_TITLE],
            activity[const.DATA_ACTIVITY_TYPE],
        )
        return self._finalize(const.PROGRESS_SOURCE_ACTIVITY, now)

    def complete_training_game(self, title: str) -> UserProgressData | None:
        """Complete one of the training games by title. None if unknown."""
        for template in TRAINING_GAMES:
            if template[const.DATA_ACTIVITY_TITLE] == title:
                activity = db.build_activity(
                    {**template, const.DATA_ACTIVITY_IS_COMPLETED: True}
                )
                return self.complete_activity(activity)
        const.LOGGER.warning("Unknown training game: %s", title)
        return None

    def complete_battle_session(self, score: int, total: int) -> UserProgressData:
        """Record a finished battle session.

        Counts as a battle activity worth score * 15 XP; a perfect score also
        adds 5 to the body score.
        """
        now = self._now()
        activity = db.build_activity(
            {
                const.DATA_ACTIVITY_TYPE: const.ACTIVITY_TYPE_BATTLE,
                const.DATA_ACTIVITY_TITLE: const.BATTLE_SESSION_TITLE,
                const.DATA_ACTIVITY_DESCRIPTION: const.BATTLE_SESSION_DESCRIPTION,
                const.DATA_ACTIVITY_DIFFICULTY: const.BATTLE_SESSION_DIFFICULTY,
                const.DATA_ACTIVITY_IS_COMPLETED: True,
                const.DATA_ACTIVITY_XP_REWARD: ProgressEngine.battle_xp(score),
            }
        )
        ProgressEngine.apply_activity(self.progress, activity[const.DATA_ACTIVITY_TYPE])
        ProgressEngine.apply_battle_bonus(self.progress, score, total)
        const.LOGGER.debug(
            "Battle session completed: %s/%s (%s XP)",
            score,
            total,
            activity[const.DATA_ACTIVITY_XP_REWARD],
        )
        return self._finalize(const.PROGRESS_SOURCE_BATTLE, now)

    def build_journal_entry(self, user_input: dict[str, Any]) -> JournalEntryData:
        """Build a journal entry stamped with the current time.

        Raises:
            EntityValidationError: If the entry fails validation
        """
        return db.build_journal_entry(user_input, self._now().isoformat())

    def add_journal_entry(self, entry: JournalEntryData) -> UserProgressData:
        """Append a journal entry and count it; audio also trains the voice."""
        now = self._now()
        self.coordinator.journal_manager.append(entry)
        ProgressEngine.apply_journal_entry(
            self.progress, entry.get(const.DATA_JOURNAL_ENTRY_AUDIO_PATH) is not None
        )
        return self._finalize(const.PROGRESS_SOURCE_JOURNAL, now)

    def delete_journal_entry(self, entry_id: str) -> bool:
        """Delete a journal entry. Counters and badges are left untouched."""
        if not self.coordinator.journal_manager.remove(entry_id):
            return False
        self.coordinator._persist_and_update()
        return True

    # =========================================================================
    # Queries
    # =========================================================================

    def is_daily_move_completed(self) -> bool:
        """True if today's power move is already done."""
        return ProgressEngine.is_daily_move_completed(self.progress, self._now())

    def is_daily_quest_completed(self) -> bool:
        """True if today's quest is already done."""
        return ProgressEngine.is_daily_quest_completed(self.progress, self._now())

    def daily_power_move(self) -> PowerMove:
        """Power move of the current local day."""
        return SelectionEngine.daily_power_move(
            dt_utils.dt_day_of_year(self._now()), DAILY_POWER_MOVES
        )

    def daily_pose(self) -> PowerPose:
        """Power pose of the current local day."""
        return SelectionEngine.daily_pose(
            dt_utils.dt_day_of_year(self._now()), POWER_POSES
        )

    def daily_battle_questions(self) -> list[BattleQuestion]:
        """The ten battle questions of the current local day."""
        return SelectionEngine.daily_battle_questions(
            dt_utils.dt_day_of_year(self._now()), BATTLE_QUESTIONS
        )

    def heatmap(self) -> list[HeatmapCell]:
        """Activity intensity for the trailing 28 days."""
        return StatisticsEngine.heatmap_series(self.progress, self._now().date())

    def mood_stats(self) -> list[MoodDayStats]:
        """Confidence vs stress journal counts for the trailing 7 days."""
        return StatisticsEngine.mood_stats(
            self.coordinator.journal_manager.list_entries(), self._now().date()
        )

    def badge_progress(self) -> list[BadgeProgress]:
        """Progress toward every badge."""
        return GamificationEngine.badge_progress(self.progress)
