# File: const.py
"""Constants for the Thunderpick Move integration.

This file centralizes storage keys, field names, reward amounts, thresholds,
signal suffixes, service names and translation keys so every module refers
to the same values.
"""

import logging
from typing import Final

# ------------------------------------------------------------------------------------------------
# General / Integration Information
# ------------------------------------------------------------------------------------------------
THUNDERPICK_MOVE_TITLE = "Thunderpick Move"

# Integration Domain
DOMAIN = "thunderpick_move"

# Logger
LOGGER = logging.getLogger(__package__)

# Coordinator
COORDINATOR = "coordinator"
COORDINATOR_SUFFIX = "_coordinator"

# Config Flow
CONFIG_FLOW_STEP_USER = "user"

# Storage and Versioning
STORE = "store"
STORAGE_KEY = "thunderpick_move_data"
STORAGE_VERSION = 1
SCHEMA_VERSION_CURRENT = 1

# Purchase ledger kept by the bundled local purchase provider
PURCHASES_STORAGE_KEY = "thunderpick_move_purchases"
PURCHASES_STORAGE_VERSION = 1

# Media files (relative to the Home Assistant config directory)
MEDIA_DIRECTORY = "thunderpick_move_media"
MEDIA_IMAGE_EXTENSION = ".jpg"
MEDIA_AUDIO_EXTENSION = ".m4a"

# ------------------------------------------------------------------------------------------------
# Storage Records (top-level keys, one record per key)
# ------------------------------------------------------------------------------------------------
DATA_META = "meta"
DATA_META_SCHEMA_VERSION = "schema_version"

DATA_USER_STATS = "userStats"
DATA_JOURNAL = "journal"
DATA_ACTIVITIES = "activities"
DATA_SELECTED_THEME_ID = "selectedThemeID"
DATA_IS_PREMIUM = "isPremium"  # Legacy flag, not authoritative
DATA_IS_ONBOARDING_COMPLETE = "isOnboardingComplete"

# ------------------------------------------------------------------------------------------------
# User Progress Fields
# ------------------------------------------------------------------------------------------------
DATA_PROGRESS_BODY_SCORE = "body_score"
DATA_PROGRESS_CURRENT_STATUS = "current_status"
DATA_PROGRESS_TOTAL_JOURNAL_ENTRIES = "total_journal_entries"
DATA_PROGRESS_ACTIVITIES_COMPLETED = "activities_completed"
DATA_PROGRESS_ACTIVITY_HISTORY = "activity_history"
DATA_PROGRESS_LAST_CHECK_IN_DATE = "last_check_in_date"
DATA_PROGRESS_LAST_DAILY_MOVE_DATE = "last_daily_move_date"
DATA_PROGRESS_LAST_DAILY_QUEST_DATE = "last_daily_quest_date"
DATA_PROGRESS_SKILL_LEVELS = "skill_levels"
DATA_PROGRESS_UNLOCKED_BADGES = "unlocked_badges"

# ------------------------------------------------------------------------------------------------
# Journal Entry Fields
# ------------------------------------------------------------------------------------------------
DATA_JOURNAL_ENTRY_ID = "id"
DATA_JOURNAL_ENTRY_DATE = "date"
DATA_JOURNAL_ENTRY_MOOD = "mood"
DATA_JOURNAL_ENTRY_NOTES = "notes"
DATA_JOURNAL_ENTRY_PHOTO_PATH = "photo_path"
DATA_JOURNAL_ENTRY_AUDIO_PATH = "audio_path"
DATA_JOURNAL_ENTRY_VOICE_TEXT = "voice_text"

# ------------------------------------------------------------------------------------------------
# Activity Fields
# ------------------------------------------------------------------------------------------------
DATA_ACTIVITY_ID = "id"
DATA_ACTIVITY_TYPE = "type"
DATA_ACTIVITY_TITLE = "title"
DATA_ACTIVITY_DESCRIPTION = "description"
DATA_ACTIVITY_DIFFICULTY = "difficulty"
DATA_ACTIVITY_IS_COMPLETED = "is_completed"
DATA_ACTIVITY_XP_REWARD = "xp_reward"

ACTIVITY_DIFFICULTY_MIN = 1
ACTIVITY_DIFFICULTY_MAX = 3

# ------------------------------------------------------------------------------------------------
# Product Fields
# ------------------------------------------------------------------------------------------------
DATA_PRODUCT_ID = "product_id"
DATA_PRODUCT_DISPLAY_NAME = "display_name"
DATA_PRODUCT_DISPLAY_PRICE = "display_price"

# ------------------------------------------------------------------------------------------------
# Body Status Ladder
# ------------------------------------------------------------------------------------------------
BODY_STATUS_COLLAPSED = "Collapsed"
BODY_STATUS_GUARDED = "Guarded"
BODY_STATUS_INVISIBLE = "Invisible"
BODY_STATUS_OBSERVER = "Observer"
BODY_STATUS_NEUTRAL = "Neutral"
BODY_STATUS_STEADY = "Steady"
BODY_STATUS_PRESENT = "Present"
BODY_STATUS_MAGNETIC = "Magnetic"
BODY_STATUS_DOMINANT = "Dominant"
BODY_STATUS_ALPHA = "Alpha Mode"

# Index i covers scores in [i * 0.1, (i + 1) * 0.1); the last bucket is open-ended.
BODY_STATUS_LADDER: Final[tuple[str, ...]] = (
    BODY_STATUS_COLLAPSED,
    BODY_STATUS_GUARDED,
    BODY_STATUS_INVISIBLE,
    BODY_STATUS_OBSERVER,
    BODY_STATUS_NEUTRAL,
    BODY_STATUS_STEADY,
    BODY_STATUS_PRESENT,
    BODY_STATUS_MAGNETIC,
    BODY_STATUS_DOMINANT,
    BODY_STATUS_ALPHA,
)
BODY_STATUS_BUCKET_WIDTH = 0.1
DEFAULT_BODY_STATUS = BODY_STATUS_NEUTRAL

# ------------------------------------------------------------------------------------------------
# Skills, Moods, Activity Types
# ------------------------------------------------------------------------------------------------
SKILL_MIMICRY = "Mimicry"
SKILL_POSTURE = "Posture"
SKILL_GESTURES = "Gestures"
SKILL_VOICE = "Voice"
SKILL_TYPES: Final[tuple[str, ...]] = (
    SKILL_MIMICRY,
    SKILL_POSTURE,
    SKILL_GESTURES,
    SKILL_VOICE,
)

MOOD_CONFIDENCE = "Confidence"
MOOD_STRESS = "Stress"
MOOD_DOMINANCE = "Dominance"
MOOD_TYPES: Final[tuple[str, ...]] = (MOOD_CONFIDENCE, MOOD_STRESS, MOOD_DOMINANCE)

# Moods counted on the "confidence" side of the weekly mood chart
MOODS_CONFIDENT: Final[frozenset[str]] = frozenset({MOOD_CONFIDENCE, MOOD_DOMINANCE})

ACTIVITY_TYPE_QUEST = "quest"
ACTIVITY_TYPE_TRAINING = "training"
ACTIVITY_TYPE_BATTLE = "battle"
ACTIVITY_TYPES: Final[tuple[str, ...]] = (
    ACTIVITY_TYPE_QUEST,
    ACTIVITY_TYPE_TRAINING,
    ACTIVITY_TYPE_BATTLE,
)

# Skill boosted when an activity of the given type is completed
ACTIVITY_TYPE_SKILL: Final[dict[str, str]] = {
    ACTIVITY_TYPE_QUEST: SKILL_MIMICRY,
    ACTIVITY_TYPE_TRAINING: SKILL_POSTURE,
    ACTIVITY_TYPE_BATTLE: SKILL_GESTURES,
}

# ------------------------------------------------------------------------------------------------
# Themes & Products
# ------------------------------------------------------------------------------------------------
THEME_STANDARD = "standard"
THEME_NEON_CYBER = "neonCyber"
THEME_STEALTH_OPS = "stealthOps"
THEME_TYPES: Final[tuple[str, ...]] = (
    THEME_STANDARD,
    THEME_NEON_CYBER,
    THEME_STEALTH_OPS,
)
DEFAULT_THEME = THEME_STANDARD

PRODUCT_ID_THEME_NEON = "premium_theme_neon"
PRODUCT_ID_THEME_STEALTH = "premium_theme_stealth"

# Premium themes only; a theme missing here is free.
THEME_PRODUCT_IDS: Final[dict[str, str]] = {
    THEME_NEON_CYBER: PRODUCT_ID_THEME_NEON,
    THEME_STEALTH_OPS: PRODUCT_ID_THEME_STEALTH,
}
PREMIUM_PRODUCT_IDS: Final[frozenset[str]] = frozenset(THEME_PRODUCT_IDS.values())

# Catalog served by the bundled local purchase provider
LOCAL_PRODUCT_CATALOG: Final[dict[str, dict[str, str]]] = {
    PRODUCT_ID_THEME_NEON: {
        DATA_PRODUCT_DISPLAY_NAME: "Neon Cyber Theme",
        DATA_PRODUCT_DISPLAY_PRICE: "$1.99",
    },
    PRODUCT_ID_THEME_STEALTH: {
        DATA_PRODUCT_DISPLAY_NAME: "Stealth Ops Theme",
        DATA_PRODUCT_DISPLAY_PRICE: "$1.99",
    },
}

PURCHASE_OUTCOME_SUCCESS = "success"
PURCHASE_OUTCOME_PENDING = "pending"
PURCHASE_OUTCOME_CANCELLED = "cancelled"
PURCHASE_OUTCOME_FAILED = "failed"
PURCHASE_OUTCOMES: Final[tuple[str, ...]] = (
    PURCHASE_OUTCOME_SUCCESS,
    PURCHASE_OUTCOME_PENDING,
    PURCHASE_OUTCOME_CANCELLED,
    PURCHASE_OUTCOME_FAILED,
)

# ------------------------------------------------------------------------------------------------
# Badges
# ------------------------------------------------------------------------------------------------
BADGE_WRITER = "Writer"
BADGE_STEEL_EYES = "Steel Eyes"
BADGE_ALPHA = "Alpha"
BADGE_CONSISTENT = "Consistent"

BADGE_WRITER_JOURNAL_ENTRIES = 5
BADGE_STEEL_EYES_ACTIVITIES = 10
BADGE_ALPHA_BODY_SCORE = 90
BADGE_CONSISTENT_ACTIVITIES = 15

# ------------------------------------------------------------------------------------------------
# Scores & Rewards
# ------------------------------------------------------------------------------------------------
SCORE_MIN = 0
SCORE_MAX = 100
DEFAULT_BODY_SCORE = 0
DEFAULT_SKILL_LEVEL = 10
DEFAULT_ZERO = 0

CHECK_IN_SCORE_MIN = 0.0
CHECK_IN_SCORE_MAX = 1.0
CHECK_IN_BODY_SCORE_MULTIPLIER = 5

DAILY_MOVE_BODY_SCORE_BONUS = 10
DAILY_MOVE_SKILL = SKILL_POSTURE
DAILY_QUEST_BODY_SCORE_BONUS = 5
DAILY_QUEST_SKILL = SKILL_MIMICRY
DAILY_SKILL_BOOST = 5

ACTIVITY_SKILL_BOOST = 5
JOURNAL_AUDIO_SKILL = SKILL_VOICE
JOURNAL_AUDIO_SKILL_BOOST = 3

BATTLE_XP_PER_CORRECT_ANSWER = 15
BATTLE_PERFECT_SCORE_BONUS = 5
BATTLE_SESSION_TITLE = "Body Language Battle"
BATTLE_SESSION_DESCRIPTION = "Completed a battle session"
BATTLE_SESSION_DIFFICULTY = 2

# ------------------------------------------------------------------------------------------------
# Activity Ledger & Daily Selection
# ------------------------------------------------------------------------------------------------
HEATMAP_SATURATION_COUNT = 5
HEATMAP_DAYS = 28
MOOD_STATS_DAYS = 7

BATTLE_QUESTIONS_PER_DAY = 10
BATTLE_DAY_MULTIPLIER = 7
BATTLE_SLOT_STRIDE = 13

# ------------------------------------------------------------------------------------------------
# Event Signals (instance-scoped via BaseManager.emit/listen)
# ------------------------------------------------------------------------------------------------
SIGNAL_SUFFIX_PROGRESS_UPDATED = "progress_updated"
SIGNAL_SUFFIX_BADGE_UNLOCKED = "badge_unlocked"
SIGNAL_SUFFIX_JOURNAL_UPDATED = "journal_updated"
SIGNAL_SUFFIX_ENTITLEMENTS_LOADED = "entitlements_loaded"
SIGNAL_SUFFIX_ENTITLEMENTS_CHANGED = "entitlements_changed"
SIGNAL_SUFFIX_THEME_CHANGED = "theme_changed"

# Progress update sources (payload "source" field)
PROGRESS_SOURCE_CHECK_IN = "check_in"
PROGRESS_SOURCE_DAILY_MOVE = "daily_move"
PROGRESS_SOURCE_DAILY_QUEST = "daily_quest"
PROGRESS_SOURCE_ACTIVITY = "activity"
PROGRESS_SOURCE_BATTLE = "battle"
PROGRESS_SOURCE_JOURNAL = "journal"

# ------------------------------------------------------------------------------------------------
# Services
# ------------------------------------------------------------------------------------------------
SERVICE_ADD_JOURNAL_ENTRY = "add_journal_entry"
SERVICE_CHECK_IN = "check_in"
SERVICE_COMPLETE_ACTIVITY = "complete_activity"
SERVICE_COMPLETE_BATTLE_SESSION = "complete_battle_session"
SERVICE_COMPLETE_DAILY_MOVE = "complete_daily_move"
SERVICE_COMPLETE_DAILY_QUEST = "complete_daily_quest"
SERVICE_COMPLETE_ONBOARDING = "complete_onboarding"
SERVICE_COMPLETE_TRAINING_GAME = "complete_training_game"
SERVICE_DELETE_JOURNAL_ENTRY = "delete_journal_entry"
SERVICE_GET_SUMMARY = "get_summary"
SERVICE_PURCHASE_PRODUCT = "purchase_product"
SERVICE_RESTORE_PURCHASES = "restore_purchases"
SERVICE_SET_THEME = "set_theme"

SERVICES: Final[tuple[str, ...]] = (
    SERVICE_ADD_JOURNAL_ENTRY,
    SERVICE_CHECK_IN,
    SERVICE_COMPLETE_ACTIVITY,
    SERVICE_COMPLETE_BATTLE_SESSION,
    SERVICE_COMPLETE_DAILY_MOVE,
    SERVICE_COMPLETE_DAILY_QUEST,
    SERVICE_COMPLETE_ONBOARDING,
    SERVICE_COMPLETE_TRAINING_GAME,
    SERVICE_DELETE_JOURNAL_ENTRY,
    SERVICE_GET_SUMMARY,
    SERVICE_PURCHASE_PRODUCT,
    SERVICE_RESTORE_PURCHASES,
    SERVICE_SET_THEME,
)

FIELD_ACTIVITY_ID = "activity_id"
FIELD_AUDIO_PATH = "audio_path"
FIELD_ENERGY_SCORE = "energy_score"
FIELD_ENTRY_ID = "entry_id"
FIELD_FACE_SCORE = "face_score"
FIELD_GAME = "game"
FIELD_MOOD = "mood"
FIELD_NOTES = "notes"
FIELD_PHOTO_PATH = "photo_path"
FIELD_POSTURE_SCORE = "posture_score"
FIELD_PRODUCT_ID = "product_id"
FIELD_SCORE = "score"
FIELD_THEME = "theme"
FIELD_TOTAL = "total"
FIELD_VOICE_TEXT = "voice_text"

# ------------------------------------------------------------------------------------------------
# Translation Keys
# ------------------------------------------------------------------------------------------------
TRANS_KEY_ERROR_SINGLE_INSTANCE = "single_instance_allowed"
TRANS_KEY_ERROR_NO_ENTRY = "no_entry_found"
TRANS_KEY_ERROR_ACTIVITY_NOT_FOUND = "activity_not_found"
TRANS_KEY_ERROR_JOURNAL_ENTRY_NOT_FOUND = "journal_entry_not_found"
TRANS_KEY_ERROR_THEME_LOCKED = "theme_locked"
TRANS_KEY_ERROR_INVALID_MOOD = "invalid_mood"
TRANS_KEY_ERROR_INVALID_ACTIVITY_TYPE = "invalid_activity_type"
TRANS_KEY_ERROR_INVALID_ACTIVITY_TITLE = "invalid_activity_title"
TRANS_KEY_ERROR_INVALID_DIFFICULTY = "invalid_difficulty"
TRANS_KEY_ERROR_INVALID_XP_REWARD = "invalid_xp_reward"
TRANS_KEY_ERROR_INVALID_BATTLE_SCORE = "invalid_battle_score"
TRANS_KEY_ERROR_INVALID_DATE = "invalid_date"
TRANS_KEY_ERROR_TRAINING_GAME_NOT_FOUND = "training_game_not_found"
TRANS_KEY_ERROR_PATH_NOT_ALLOWED = "path_not_allowed"
