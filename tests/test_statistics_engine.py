"""Tests for StatisticsEngine - activity history, heatmap and mood stats."""

from __future__ import annotations

from datetime import UTC, date, datetime

from custom_components.thunderpick_move import const, data_builders as db
from custom_components.thunderpick_move.engines.statistics_engine import (
    StatisticsEngine,
)


def test_log_activity_counts_per_day() -> None:
    progress = db.build_user_progress()
    StatisticsEngine.log_activity(progress, datetime(2026, 3, 10, 8, tzinfo=UTC))
    StatisticsEngine.log_activity(progress, datetime(2026, 3, 10, 22, tzinfo=UTC))
    StatisticsEngine.log_activity(progress, datetime(2026, 3, 11, 1, tzinfo=UTC))

    assert progress[const.DATA_PROGRESS_ACTIVITY_HISTORY] == {
        "2026-03-10": 2,
        "2026-03-11": 1,
    }
    assert StatisticsEngine.activity_count(progress, date(2026, 3, 10)) == 2
    assert StatisticsEngine.activity_count(progress, date(2026, 3, 9)) == 0


def test_heatmap_intensity() -> None:
    progress = db.build_user_progress()
    progress[const.DATA_PROGRESS_ACTIVITY_HISTORY] = {
        "2026-03-08": 2,
        "2026-03-09": 5,
        "2026-03-10": 12,
    }
    assert StatisticsEngine.heatmap_intensity(progress, date(2026, 3, 7)) == 0.0
    assert StatisticsEngine.heatmap_intensity(progress, date(2026, 3, 8)) == 0.4
    assert StatisticsEngine.heatmap_intensity(progress, date(2026, 3, 9)) == 1.0
    assert StatisticsEngine.heatmap_intensity(progress, date(2026, 3, 10)) == 1.0


def test_heatmap_series_window() -> None:
    progress = db.build_user_progress()
    progress[const.DATA_PROGRESS_ACTIVITY_HISTORY] = {
        "2026-02-10": 4,  # outside the 28 day window
        "2026-02-11": 1,
        "2026-03-10": 3,
    }
    series = StatisticsEngine.heatmap_series(progress, date(2026, 3, 10))

    assert len(series) == const.HEATMAP_DAYS
    assert series[0] == {"date": "2026-02-11", "count": 1, "intensity": 0.2}
    assert series[-1] == {"date": "2026-03-10", "count": 3, "intensity": 0.6}
    assert sum(cell["count"] for cell in series) == 4


def test_mood_stats() -> None:
    journal = [
        {"id": "a", "date": "2026-03-10T09:00:00+00:00", "mood": const.MOOD_CONFIDENCE},
        {"id": "b", "date": "2026-03-10T10:00:00+00:00", "mood": const.MOOD_DOMINANCE},
        {"id": "c", "date": "2026-03-10T11:00:00+00:00", "mood": const.MOOD_STRESS},
        {"id": "d", "date": "2026-03-05T11:00:00+00:00", "mood": const.MOOD_STRESS},
        {"id": "e", "date": "2026-02-01T11:00:00+00:00", "mood": const.MOOD_CONFIDENCE},
    ]
    stats = StatisticsEngine.mood_stats(journal, date(2026, 3, 10))

    assert [day["date"] for day in stats] == [
        "2026-03-04",
        "2026-03-05",
        "2026-03-06",
        "2026-03-07",
        "2026-03-08",
        "2026-03-09",
        "2026-03-10",
    ]
    assert stats[-1] == {"date": "2026-03-10", "confidence": 2, "stress": 1}
    assert stats[1] == {"date": "2026-03-05", "confidence": 0, "stress": 1}
    assert sum(day["confidence"] for day in stats) == 2
