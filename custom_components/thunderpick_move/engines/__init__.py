"""Engine modules for Thunderpick Move integration.

Contains pure computation engines (no Home Assistant imports):
- progress_engine: Status ladder, saturating score/skill arithmetic, rewards
- statistics_engine: Activity ledger, heatmap and mood series
- gamification_engine: Badge rules and additive badge application
- selection_engine: Day-seeded daily content selection
"""

# Use relative imports within package to avoid mypy module resolution issues
from .gamification_engine import BADGE_RULES, BadgeRule, GamificationEngine
from .progress_engine import ProgressEngine
from .selection_engine import SelectionEngine
from .statistics_engine import StatisticsEngine

__all__ = [
    "BADGE_RULES",
    "BadgeRule",
    "GamificationEngine",
    "ProgressEngine",
    "SelectionEngine",
    "StatisticsEngine",
]
