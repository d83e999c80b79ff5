"""Statistics Engine - Activity ledger and derived series.

Pure logic, NO Home Assistant dependencies:
- Activity logging into the date-keyed history map
- Heatmap intensity for a single day and for a trailing window
- Confidence vs stress mood counts per day from the journal

History keys are local calendar days (YYYY-MM-DD) computed by dt_utils, so
every action on the same local day lands on the same key.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import TYPE_CHECKING

from .. import const
from ..utils.dt_utils import dt_day_key, dt_local_date, dt_recent_days
from ..utils.math_utils import capped_ratio

if TYPE_CHECKING:
    from ..type_defs import (
        HeatmapCell,
        JournalEntryData,
        MoodDayStats,
        UserProgressData,
    )


class StatisticsEngine:
    """Static helpers over the activity history and journal."""

    @staticmethod
    def log_activity(progress: UserProgressData, now: datetime) -> UserProgressData:
        """Increment the history count for the local day of `now`.

        Creates the entry with value 1 if absent.
        """
        day_key = dt_day_key(now)
        history = progress[const.DATA_PROGRESS_ACTIVITY_HISTORY]
        history[day_key] = history.get(day_key, 0) + 1
        return progress

    @staticmethod
    def activity_count(progress: UserProgressData, day: date | datetime) -> int:
        """Number of logged actions on the given local day."""
        history = progress.get(const.DATA_PROGRESS_ACTIVITY_HISTORY) or {}
        return int(history.get(dt_day_key(day), 0))

    @staticmethod
    def heatmap_intensity(progress: UserProgressData, day: date | datetime) -> float:
        """Return 0.0 for an idle day, else min(count / 5, 1.0)."""
        return capped_ratio(
            StatisticsEngine.activity_count(progress, day),
            const.HEATMAP_SATURATION_COUNT,
        )

    @staticmethod
    def heatmap_series(
        progress: UserProgressData,
        today: date,
        days: int = const.HEATMAP_DAYS,
    ) -> list[HeatmapCell]:
        """Return one cell per day for the trailing window, oldest first."""
        series: list[HeatmapCell] = []
        for day in dt_recent_days(today, days):
            count = StatisticsEngine.activity_count(progress, day)
            series.append(
                {
                    "date": day.isoformat(),
                    "count": count,
                    "intensity": capped_ratio(count, const.HEATMAP_SATURATION_COUNT),
                }
            )
        return series

    @staticmethod
    def mood_stats(
        journal: list[JournalEntryData],
        today: date,
        days: int = const.MOOD_STATS_DAYS,
    ) -> list[MoodDayStats]:
        """Count confident vs stressed journal entries per day, oldest first.

        Confidence and Dominance count toward "confidence"; Stress toward
        "stress". Entries outside the window are ignored.
        """
        window = dt_recent_days(today, days)
        counts: dict[date, list[int]] = {day: [0, 0] for day in window}

        for entry in journal:
            entry_day = dt_local_date(entry.get(const.DATA_JOURNAL_ENTRY_DATE))
            if entry_day not in counts:
                continue
            mood = entry.get(const.DATA_JOURNAL_ENTRY_MOOD)
            if mood in const.MOODS_CONFIDENT:
                counts[entry_day][0] += 1
            elif mood == const.MOOD_STRESS:
                counts[entry_day][1] += 1

        return [
            {
                "date": day.isoformat(),
                "confidence": counts[day][0],
                "stress": counts[day][1],
            }
            for day in window
        ]
