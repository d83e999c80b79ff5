"""Type definitions for Thunderpick Move data structures.

TypedDict is used for records with fixed keys (progress, journal entries,
activities, products). Maps keyed at runtime (activity history by day, skill
levels by skill name) stay plain ``dict`` aliases.

IMPORTANT: This file must NOT import from coordinator.py or any manager to
avoid circular dependencies. Only import from typing.

NOTE: TypedDict is STATIC ANALYSIS ONLY. Runtime normalization of stored
records happens in data_builders.py.
"""

from typing import TypedDict

# =============================================================================
# Type Aliases (for readability)
# =============================================================================

EntryId = str  # uuid4 hex string
ActivityId = str  # uuid4 hex string
ProductId = str  # e.g. "premium_theme_neon"
BadgeId = str  # e.g. "Writer"
ISODatetime = str  # ISO 8601 datetime string "2026-01-18T12:30:00-08:00"
ISODate = str  # ISO 8601 date string (no time) "2026-01-18"

ActivityHistory = dict[ISODate, int]
SkillLevels = dict[str, int]


# =============================================================================
# Persisted Records
# =============================================================================


class UserProgressData(TypedDict):
    """Root aggregate stored under the ``userStats`` key."""

    body_score: int
    current_status: str
    total_journal_entries: int
    activities_completed: int
    activity_history: ActivityHistory
    last_check_in_date: ISODatetime | None
    last_daily_move_date: ISODatetime | None
    last_daily_quest_date: ISODatetime | None
    skill_levels: SkillLevels
    unlocked_badges: list[BadgeId]


class JournalEntryData(TypedDict):
    """A single journal entry. Immutable once created."""

    id: EntryId
    date: ISODatetime
    mood: str
    notes: str
    photo_path: str | None
    audio_path: str | None
    voice_text: str | None


class ActivityData(TypedDict):
    """Catalog entry for a quest, training game or battle."""

    id: ActivityId
    type: str
    title: str
    description: str
    difficulty: int
    is_completed: bool
    xp_reward: int


class ProductData(TypedDict):
    """Purchasable product as exposed to the presentation layer."""

    product_id: ProductId
    display_name: str
    display_price: str


# =============================================================================
# Static Content
# =============================================================================


class PowerMove(TypedDict):
    """Daily power move shown on the home screen."""

    id: int
    title: str
    description: str
    image_name: str


class PowerPose(TypedDict):
    """Daily pose for the power posing game."""

    title: str
    description: str
    image_name: str


class BattleQuestion(TypedDict):
    """Multiple-choice body language question."""

    scenario: str
    description: str
    options: list[str]
    correct_answer: str


# =============================================================================
# Derived Views (never persisted)
# =============================================================================


class BadgeProgress(TypedDict):
    """Progress of one badge rule toward its threshold."""

    badge_id: BadgeId
    counter: str
    current_value: int
    threshold: int
    progress: float
    unlocked: bool


class HeatmapCell(TypedDict):
    """One day in the activity heatmap."""

    date: ISODate
    count: int
    intensity: float


class MoodDayStats(TypedDict):
    """Confidence versus stress entry counts for one day."""

    date: ISODate
    confidence: int
    stress: int


class ProgressSummary(TypedDict):
    """Read model returned by the ``get_summary`` service."""

    progress: UserProgressData
    selected_theme: str
    is_onboarding_complete: bool
    daily_move_completed: bool
    daily_quest_completed: bool
    daily_move: PowerMove
    daily_pose: PowerPose
    battle_questions: list[BattleQuestion]
    heatmap: list[HeatmapCell]
    mood_stats: list[MoodDayStats]
    badges: list[BadgeProgress]
    owned_product_ids: list[ProductId]
    products: list[ProductData]
    entitlements_loaded: bool
