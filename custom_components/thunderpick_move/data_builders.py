"""Record building and normalization helpers.

This module is the SINGLE SOURCE OF TRUTH for:
- Record field defaults
- Business logic validation of user supplied records
- Complete record structure building
- Normalization of records read back from storage

### Build Functions
Each record type has a `build_<record>()` function that:
- Takes user_input with DATA_* keys
- Generates the id (uuid4 hex) for new records
- Applies field defaults
- Returns a complete record dict ready for storage

### Validation Functions
`validate_<record>_data()` returns a dict of errors (empty if valid) so the
service layer can report every failing field; `build_<record>()` raises
`EntityValidationError` on the first failure.

### Normalize Functions
`normalize_<record>()` takes whatever came back from storage (possibly an
older or hand-edited file) and returns a well-formed record: missing fields
defaulted, out-of-range values clamped, duplicates dropped.

Consumers:
- store.py (default structure)
- coordinator.py (normalization on load)
- managers (record creation)
- services.py (validation at the service boundary)
"""

from __future__ import annotations

from typing import Any, cast
import uuid

from . import const
from .content import SEED_ACTIVITIES
from .type_defs import ActivityData, JournalEntryData, UserProgressData
from .utils.dt_utils import dt_local_date, dt_parse
from .utils.math_utils import clamp

# ==============================================================================
# HELPER FUNCTIONS FOR FIELD NORMALIZATION
# ==============================================================================


def _normalize_int_field(value: Any, default: int, lower: int, upper: int) -> int:
    """Coerce a stored value to an int within [lower, upper].

    Non-numeric values fall back to `default`.
    """
    if isinstance(value, bool):
        return default
    try:
        number = int(value)
    except (TypeError, ValueError):
        return default
    return int(clamp(number, lower, upper))


def _normalize_counter_field(value: Any) -> int:
    """Coerce a stored counter to a non-negative int."""
    if isinstance(value, bool):
        return const.DEFAULT_ZERO
    try:
        return max(int(value), const.DEFAULT_ZERO)
    except (TypeError, ValueError):
        return const.DEFAULT_ZERO


def _normalize_optional_str(value: Any) -> str | None:
    """Return a non-empty string or None."""
    if isinstance(value, str) and value.strip():
        return value
    return None


def _normalize_timestamp(value: Any) -> str | None:
    """Return the value as an ISO timestamp string if it parses, else None."""
    parsed = dt_parse(value) if isinstance(value, str) else None
    return parsed.isoformat() if parsed is not None else None


# ==============================================================================
# EXCEPTIONS
# ==============================================================================


class EntityValidationError(Exception):
    """Validation error with field-specific information.

    Raised when business logic validation fails while building a record. The
    service layer turns it into a ServiceValidationError carrying the
    translation key.

    Attributes:
        field: The DATA_* / FIELD_* constant identifying the failing field
        translation_key: The TRANS_KEY_* constant for the error message
        placeholders: Optional dict for translation string placeholders

    Example:
        raise EntityValidationError(
            field=const.DATA_JOURNAL_ENTRY_MOOD,
            translation_key=const.TRANS_KEY_ERROR_INVALID_MOOD,
            placeholders={"value": mood},
        )
    """

    def __init__(
        self,
        field: str,
        translation_key: str,
        placeholders: dict[str, str] | None = None,
    ) -> None:
        """Initialize EntityValidationError."""
        self.field = field
        self.translation_key = translation_key
        self.placeholders = placeholders or {}
        super().__init__(translation_key)


# ==============================================================================
# USER PROGRESS
# ==============================================================================


def build_default_skill_levels() -> dict[str, int]:
    """Return the four fixed skills, each at the starting level."""
    return dict.fromkeys(const.SKILL_TYPES, const.DEFAULT_SKILL_LEVEL)


def build_user_progress() -> UserProgressData:
    """Return a fresh progress record for a new installation."""
    return UserProgressData(
        body_score=const.DEFAULT_BODY_SCORE,
        current_status=const.DEFAULT_BODY_STATUS,
        total_journal_entries=const.DEFAULT_ZERO,
        activities_completed=const.DEFAULT_ZERO,
        activity_history={},
        last_check_in_date=None,
        last_daily_move_date=None,
        last_daily_quest_date=None,
        skill_levels=build_default_skill_levels(),
        unlocked_badges=[],
    )


def normalize_user_progress(raw: Any) -> UserProgressData:
    """Normalize a stored progress record.

    - Scores and skill levels are clamped to [SCORE_MIN, SCORE_MAX]
    - Missing skills are restored at the starting level; unknown skills dropped
    - Unknown statuses fall back to DEFAULT_BODY_STATUS
    - History keys that are not ISO dates are dropped; counts are non-negative
    - Badge ids are de-duplicated, keeping first-unlock order

    Returns:
        A complete UserProgressData. `raw` is never mutated.
    """
    data: dict[str, Any] = raw if isinstance(raw, dict) else {}
    progress = build_user_progress()

    progress[const.DATA_PROGRESS_BODY_SCORE] = _normalize_int_field(
        data.get(const.DATA_PROGRESS_BODY_SCORE),
        const.DEFAULT_BODY_SCORE,
        const.SCORE_MIN,
        const.SCORE_MAX,
    )

    status = data.get(const.DATA_PROGRESS_CURRENT_STATUS)
    if status in const.BODY_STATUS_LADDER:
        progress[const.DATA_PROGRESS_CURRENT_STATUS] = status

    progress[const.DATA_PROGRESS_TOTAL_JOURNAL_ENTRIES] = _normalize_counter_field(
        data.get(const.DATA_PROGRESS_TOTAL_JOURNAL_ENTRIES)
    )
    progress[const.DATA_PROGRESS_ACTIVITIES_COMPLETED] = _normalize_counter_field(
        data.get(const.DATA_PROGRESS_ACTIVITIES_COMPLETED)
    )

    raw_history = data.get(const.DATA_PROGRESS_ACTIVITY_HISTORY)
    if isinstance(raw_history, dict):
        history = progress[const.DATA_PROGRESS_ACTIVITY_HISTORY]
        for day_key, count in raw_history.items():
            local_day = dt_local_date(day_key) if isinstance(day_key, str) else None
            if local_day is None:
                const.LOGGER.debug("Dropping invalid history key: %s", day_key)
                continue
            normalized_count = _normalize_counter_field(count)
            if normalized_count > 0:
                normalized_key = local_day.isoformat()
                history[normalized_key] = (
                    history.get(normalized_key, 0) + normalized_count
                )

    for field in (
        const.DATA_PROGRESS_LAST_CHECK_IN_DATE,
        const.DATA_PROGRESS_LAST_DAILY_MOVE_DATE,
        const.DATA_PROGRESS_LAST_DAILY_QUEST_DATE,
    ):
        progress[field] = _normalize_timestamp(data.get(field))

    raw_skills = data.get(const.DATA_PROGRESS_SKILL_LEVELS)
    if isinstance(raw_skills, dict):
        for skill in const.SKILL_TYPES:
            if skill in raw_skills:
                progress[const.DATA_PROGRESS_SKILL_LEVELS][skill] = (
                    _normalize_int_field(
                        raw_skills[skill],
                        const.DEFAULT_SKILL_LEVEL,
                        const.SCORE_MIN,
                        const.SCORE_MAX,
                    )
                )

    raw_badges = data.get(const.DATA_PROGRESS_UNLOCKED_BADGES)
    if isinstance(raw_badges, list):
        badges: list[str] = []
        for badge_id in raw_badges:
            if isinstance(badge_id, str) and badge_id not in badges:
                badges.append(badge_id)
        progress[const.DATA_PROGRESS_UNLOCKED_BADGES] = badges

    return progress


# ==============================================================================
# JOURNAL ENTRIES
# ==============================================================================


def validate_journal_entry_data(data: dict[str, Any]) -> dict[str, str]:
    """Validate journal entry business rules.

    Args:
        data: Entry data with DATA_JOURNAL_ENTRY_* keys

    Returns:
        Dict of errors: {field: translation_key}. Empty dict means valid.

    Validation Rules:
        1. Mood is one of MOOD_TYPES
        2. Date (if provided) parses as an ISO timestamp
    """
    errors: dict[str, str] = {}

    mood = data.get(const.DATA_JOURNAL_ENTRY_MOOD)
    if mood not in const.MOOD_TYPES:
        errors[const.DATA_JOURNAL_ENTRY_MOOD] = const.TRANS_KEY_ERROR_INVALID_MOOD

    if const.DATA_JOURNAL_ENTRY_DATE in data and (
        dt_parse(data[const.DATA_JOURNAL_ENTRY_DATE]) is None
    ):
        errors[const.DATA_JOURNAL_ENTRY_DATE] = const.TRANS_KEY_ERROR_INVALID_DATE

    return errors


def build_journal_entry(user_input: dict[str, Any], now_iso: str) -> JournalEntryData:
    """Build a new, immutable journal entry.

    Args:
        user_input: Data with DATA_JOURNAL_ENTRY_* keys
        now_iso: Timestamp used when user_input carries no date

    Raises:
        EntityValidationError: If mood or date validation fails

    Example:
        entry = build_journal_entry(
            {DATA_JOURNAL_ENTRY_MOOD: "Confidence", DATA_JOURNAL_ENTRY_NOTES: "Nailed it"},
            "2026-03-02T09:15:00+00:00",
        )
    """
    errors = validate_journal_entry_data(user_input)
    if errors:
        field, translation_key = next(iter(errors.items()))
        raise EntityValidationError(
            field=field,
            translation_key=translation_key,
            placeholders={"value": str(user_input.get(field))},
        )

    entry_date = user_input.get(const.DATA_JOURNAL_ENTRY_DATE) or now_iso
    parsed = dt_parse(entry_date)

    return JournalEntryData(
        id=uuid.uuid4().hex,
        date=parsed.isoformat() if parsed is not None else now_iso,
        mood=str(user_input[const.DATA_JOURNAL_ENTRY_MOOD]),
        notes=str(user_input.get(const.DATA_JOURNAL_ENTRY_NOTES) or ""),
        photo_path=_normalize_optional_str(
            user_input.get(const.DATA_JOURNAL_ENTRY_PHOTO_PATH)
        ),
        audio_path=_normalize_optional_str(
            user_input.get(const.DATA_JOURNAL_ENTRY_AUDIO_PATH)
        ),
        voice_text=_normalize_optional_str(
            user_input.get(const.DATA_JOURNAL_ENTRY_VOICE_TEXT)
        ),
    )


def normalize_journal(raw: Any) -> list[JournalEntryData]:
    """Normalize the stored journal, keeping insertion order.

    Entries without an id or with an unknown mood are dropped (logged).
    """
    if not isinstance(raw, list):
        return []

    entries: list[JournalEntryData] = []
    seen_ids: set[str] = set()
    for item in raw:
        if not isinstance(item, dict):
            continue
        entry_id = item.get(const.DATA_JOURNAL_ENTRY_ID)
        if not isinstance(entry_id, str) or not entry_id or entry_id in seen_ids:
            const.LOGGER.warning("Dropping journal entry without a unique id")
            continue
        if item.get(const.DATA_JOURNAL_ENTRY_MOOD) not in const.MOOD_TYPES:
            const.LOGGER.warning(
                "Dropping journal entry %s with unknown mood: %s",
                entry_id,
                item.get(const.DATA_JOURNAL_ENTRY_MOOD),
            )
            continue
        seen_ids.add(entry_id)
        entries.append(
            JournalEntryData(
                id=entry_id,
                date=_normalize_timestamp(item.get(const.DATA_JOURNAL_ENTRY_DATE))
                or "",
                mood=item[const.DATA_JOURNAL_ENTRY_MOOD],
                notes=str(item.get(const.DATA_JOURNAL_ENTRY_NOTES) or ""),
                photo_path=_normalize_optional_str(
                    item.get(const.DATA_JOURNAL_ENTRY_PHOTO_PATH)
                ),
                audio_path=_normalize_optional_str(
                    item.get(const.DATA_JOURNAL_ENTRY_AUDIO_PATH)
                ),
                voice_text=_normalize_optional_str(
                    item.get(const.DATA_JOURNAL_ENTRY_VOICE_TEXT)
                ),
            )
        )
    return entries


# ==============================================================================
# ACTIVITIES
# ==============================================================================


def validate_activity_data(data: dict[str, Any]) -> dict[str, str]:
    """Validate activity business rules.

    Validation Rules:
        1. Type is one of ACTIVITY_TYPES
        2. Title is not blank
        3. Difficulty is an int in [ACTIVITY_DIFFICULTY_MIN, ACTIVITY_DIFFICULTY_MAX]
        4. XP reward is an int >= 0
    """
    errors: dict[str, str] = {}

    if data.get(const.DATA_ACTIVITY_TYPE) not in const.ACTIVITY_TYPES:
        errors[const.DATA_ACTIVITY_TYPE] = const.TRANS_KEY_ERROR_INVALID_ACTIVITY_TYPE

    title = data.get(const.DATA_ACTIVITY_TITLE)
    if not isinstance(title, str) or not title.strip():
        errors[const.DATA_ACTIVITY_TITLE] = const.TRANS_KEY_ERROR_INVALID_ACTIVITY_TITLE

    difficulty = data.get(const.DATA_ACTIVITY_DIFFICULTY, const.ACTIVITY_DIFFICULTY_MIN)
    if (
        isinstance(difficulty, bool)
        or not isinstance(difficulty, int)
        or not const.ACTIVITY_DIFFICULTY_MIN
        <= difficulty
        <= const.ACTIVITY_DIFFICULTY_MAX
    ):
        errors[const.DATA_ACTIVITY_DIFFICULTY] = const.TRANS_KEY_ERROR_INVALID_DIFFICULTY

    xp_reward = data.get(const.DATA_ACTIVITY_XP_REWARD, const.DEFAULT_ZERO)
    if isinstance(xp_reward, bool) or not isinstance(xp_reward, int) or xp_reward < 0:
        errors[const.DATA_ACTIVITY_XP_REWARD] = const.TRANS_KEY_ERROR_INVALID_XP_REWARD

    return errors


def build_activity(
    user_input: dict[str, Any],
    existing: ActivityData | None = None,
) -> ActivityData:
    """Build activity data for create or update operations.

    One function handles both create (existing=None) and update.

    Raises:
        EntityValidationError: If any activity field is invalid
    """

    def get_field(data_key: str, default: Any) -> Any:
        """Get field value: user_input > existing > default."""
        if data_key in user_input:
            return user_input[data_key]
        if existing is not None:
            return existing.get(data_key, default)
        return default

    merged = {
        const.DATA_ACTIVITY_TYPE: get_field(const.DATA_ACTIVITY_TYPE, None),
        const.DATA_ACTIVITY_TITLE: get_field(const.DATA_ACTIVITY_TITLE, ""),
        const.DATA_ACTIVITY_DIFFICULTY: get_field(
            const.DATA_ACTIVITY_DIFFICULTY, const.ACTIVITY_DIFFICULTY_MIN
        ),
        const.DATA_ACTIVITY_XP_REWARD: get_field(
            const.DATA_ACTIVITY_XP_REWARD, const.DEFAULT_ZERO
        ),
    }
    errors = validate_activity_data(merged)
    if errors:
        field, translation_key = next(iter(errors.items()))
        raise EntityValidationError(
            field=field,
            translation_key=translation_key,
            placeholders={"value": str(merged.get(field))},
        )

    if existing is None:
        activity_id = uuid.uuid4().hex
    else:
        activity_id = existing.get(const.DATA_ACTIVITY_ID) or uuid.uuid4().hex

    return ActivityData(
        id=activity_id,
        type=merged[const.DATA_ACTIVITY_TYPE],
        title=str(merged[const.DATA_ACTIVITY_TITLE]).strip(),
        description=str(get_field(const.DATA_ACTIVITY_DESCRIPTION, "")),
        difficulty=merged[const.DATA_ACTIVITY_DIFFICULTY],
        is_completed=bool(get_field(const.DATA_ACTIVITY_IS_COMPLETED, False)),
        xp_reward=merged[const.DATA_ACTIVITY_XP_REWARD],
    )


def default_activity_catalog() -> list[ActivityData]:
    """Return a freshly built seed catalog (new ids on every call)."""
    return [build_activity(dict(template)) for template in SEED_ACTIVITIES]


def normalize_activity_catalog(raw: Any) -> list[ActivityData]:
    """Normalize the stored catalog, dropping records that fail validation."""
    if not isinstance(raw, list):
        return []

    catalog: list[ActivityData] = []
    for item in raw:
        if not isinstance(item, dict):
            continue
        try:
            catalog.append(build_activity({}, existing=cast("ActivityData", item)))
        except EntityValidationError as err:
            const.LOGGER.warning(
                "Dropping stored activity %s: %s",
                item.get(const.DATA_ACTIVITY_ID),
                err.translation_key,
            )
    return catalog


# ==============================================================================
# SETTINGS
# ==============================================================================


def normalize_theme_id(raw: Any) -> str:
    """Return a known theme id, falling back to DEFAULT_THEME."""
    if raw in const.THEME_TYPES:
        return cast("str", raw)
    if raw is not None:
        const.LOGGER.warning("Unknown stored theme '%s', using default", raw)
    return const.DEFAULT_THEME
