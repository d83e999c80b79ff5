"""Tests for data_builders - record construction, validation and normalization."""

from __future__ import annotations

from typing import Any
from zoneinfo import ZoneInfo

import pytest

from custom_components.thunderpick_move import const, data_builders as db
from custom_components.thunderpick_move.utils import dt_utils

NOW_ISO = "2026-03-10T12:00:00+00:00"


# =============================================================================
# TEST: USER PROGRESS
# =============================================================================


class TestUserProgress:
    """build_user_progress / normalize_user_progress."""

    def test_defaults(self) -> None:
        progress = db.build_user_progress()
        assert progress[const.DATA_PROGRESS_BODY_SCORE] == 0
        assert progress[const.DATA_PROGRESS_CURRENT_STATUS] == const.BODY_STATUS_NEUTRAL
        assert progress[const.DATA_PROGRESS_SKILL_LEVELS] == {
            const.SKILL_MIMICRY: 10,
            const.SKILL_POSTURE: 10,
            const.SKILL_GESTURES: 10,
            const.SKILL_VOICE: 10,
        }
        assert progress[const.DATA_PROGRESS_UNLOCKED_BADGES] == []

    @pytest.mark.parametrize("raw", [None, [], "garbage", 7])
    def test_non_dict_gives_defaults(self, raw: Any) -> None:
        assert db.normalize_user_progress(raw) == db.build_user_progress()

    def test_clamps_and_repairs(self) -> None:
        raw = {
            const.DATA_PROGRESS_BODY_SCORE: 250,
            const.DATA_PROGRESS_CURRENT_STATUS: "Sleepy",
            const.DATA_PROGRESS_TOTAL_JOURNAL_ENTRIES: -4,
            const.DATA_PROGRESS_ACTIVITIES_COMPLETED: "12",
            const.DATA_PROGRESS_SKILL_LEVELS: {
                const.SKILL_POSTURE: -20,
                const.SKILL_VOICE: 77,
                "Juggling": 50,
            },
            const.DATA_PROGRESS_UNLOCKED_BADGES: [
                const.BADGE_ALPHA,
                const.BADGE_WRITER,
                const.BADGE_ALPHA,
                3,
            ],
            const.DATA_PROGRESS_LAST_DAILY_MOVE_DATE: "not a date",
        }
        progress = db.normalize_user_progress(raw)

        assert progress[const.DATA_PROGRESS_BODY_SCORE] == 100
        assert progress[const.DATA_PROGRESS_CURRENT_STATUS] == const.BODY_STATUS_NEUTRAL
        assert progress[const.DATA_PROGRESS_TOTAL_JOURNAL_ENTRIES] == 0
        assert progress[const.DATA_PROGRESS_ACTIVITIES_COMPLETED] == 12
        assert progress[const.DATA_PROGRESS_SKILL_LEVELS] == {
            const.SKILL_MIMICRY: 10,
            const.SKILL_POSTURE: 0,
            const.SKILL_GESTURES: 10,
            const.SKILL_VOICE: 77,
        }
        assert progress[const.DATA_PROGRESS_UNLOCKED_BADGES] == [
            const.BADGE_ALPHA,
            const.BADGE_WRITER,
        ]
        assert progress[const.DATA_PROGRESS_LAST_DAILY_MOVE_DATE] is None

    def test_history_keys_normalized(self) -> None:
        raw = {
            const.DATA_PROGRESS_ACTIVITY_HISTORY: {
                "2026-03-09": 2,
                "2026-03-10T00:00:00": 1,
                "2026-03-10": 3,
                "someday": 4,
                "2026-03-11": 0,
            }
        }
        history = db.normalize_user_progress(raw)[const.DATA_PROGRESS_ACTIVITY_HISTORY]
        assert history == {"2026-03-09": 2, "2026-03-10": 4}

    def test_history_keys_use_local_day(self) -> None:
        dt_utils.set_default_timezone(ZoneInfo("America/Los_Angeles"))
        raw = {
            const.DATA_PROGRESS_ACTIVITY_HISTORY: {
                # 19:00 on the 9th in Pacific time
                "2026-03-10T02:00:00+00:00": 1,
                "2026-03-08": 2,
            }
        }
        history = db.normalize_user_progress(raw)[const.DATA_PROGRESS_ACTIVITY_HISTORY]
        assert history == {"2026-03-09": 1, "2026-03-08": 2}

    def test_raw_is_not_mutated(self) -> None:
        raw = {const.DATA_PROGRESS_BODY_SCORE: 500}
        db.normalize_user_progress(raw)
        assert raw == {const.DATA_PROGRESS_BODY_SCORE: 500}


# =============================================================================
# TEST: JOURNAL
# =============================================================================


class TestJournalEntry:
    """build_journal_entry / normalize_journal."""

    def test_build_uses_now_when_no_date(self) -> None:
        entry = db.build_journal_entry(
            {
                const.DATA_JOURNAL_ENTRY_MOOD: const.MOOD_CONFIDENCE,
                const.DATA_JOURNAL_ENTRY_NOTES: "Nailed the pitch",
            },
            NOW_ISO,
        )
        assert entry[const.DATA_JOURNAL_ENTRY_DATE] == NOW_ISO
        assert entry[const.DATA_JOURNAL_ENTRY_NOTES] == "Nailed the pitch"
        assert entry[const.DATA_JOURNAL_ENTRY_AUDIO_PATH] is None
        assert len(entry[const.DATA_JOURNAL_ENTRY_ID]) == 32

    def test_build_ids_are_unique(self) -> None:
        user_input = {const.DATA_JOURNAL_ENTRY_MOOD: const.MOOD_STRESS}
        first = db.build_journal_entry(user_input, NOW_ISO)
        second = db.build_journal_entry(user_input, NOW_ISO)
        assert first[const.DATA_JOURNAL_ENTRY_ID] != second[const.DATA_JOURNAL_ENTRY_ID]

    def test_build_rejects_unknown_mood(self) -> None:
        with pytest.raises(db.EntityValidationError) as err:
            db.build_journal_entry({const.DATA_JOURNAL_ENTRY_MOOD: "Sleepy"}, NOW_ISO)
        assert err.value.field == const.DATA_JOURNAL_ENTRY_MOOD
        assert err.value.translation_key == const.TRANS_KEY_ERROR_INVALID_MOOD
        assert err.value.placeholders == {"value": "Sleepy"}

    def test_build_rejects_bad_date(self) -> None:
        with pytest.raises(db.EntityValidationError) as err:
            db.build_journal_entry(
                {
                    const.DATA_JOURNAL_ENTRY_MOOD: const.MOOD_STRESS,
                    const.DATA_JOURNAL_ENTRY_DATE: "last tuesday",
                },
                NOW_ISO,
            )
        assert err.value.translation_key == const.TRANS_KEY_ERROR_INVALID_DATE

    def test_normalize_drops_broken_entries(self) -> None:
        raw = [
            {"id": "a", "date": NOW_ISO, "mood": const.MOOD_CONFIDENCE},
            {"id": "a", "date": NOW_ISO, "mood": const.MOOD_STRESS},
            {"date": NOW_ISO, "mood": const.MOOD_STRESS},
            {"id": "b", "date": NOW_ISO, "mood": "Bored"},
            "junk",
            {"id": "c", "date": NOW_ISO, "mood": const.MOOD_DOMINANCE, "notes": None},
        ]
        journal = db.normalize_journal(raw)
        assert [entry["id"] for entry in journal] == ["a", "c"]
        assert journal[0]["mood"] == const.MOOD_CONFIDENCE
        assert journal[1]["notes"] == ""


# =============================================================================
# TEST: ACTIVITIES
# =============================================================================


class TestActivities:
    """build_activity and the seeded catalog."""

    def test_seed_catalog(self) -> None:
        catalog = db.default_activity_catalog()
        assert [a[const.DATA_ACTIVITY_TITLE] for a in catalog] == [
            "Mirror Check",
            "Magnetic Walk",
            "Negotiation Face",
        ]
        assert len({a[const.DATA_ACTIVITY_ID] for a in catalog}) == 3

    @pytest.mark.parametrize(
        ("override", "translation_key"),
        [
            ({const.DATA_ACTIVITY_TYPE: "nap"}, const.TRANS_KEY_ERROR_INVALID_ACTIVITY_TYPE),
            ({const.DATA_ACTIVITY_TITLE: "  "}, const.TRANS_KEY_ERROR_INVALID_ACTIVITY_TITLE),
            ({const.DATA_ACTIVITY_DIFFICULTY: 4}, const.TRANS_KEY_ERROR_INVALID_DIFFICULTY),
            ({const.DATA_ACTIVITY_XP_REWARD: -1}, const.TRANS_KEY_ERROR_INVALID_XP_REWARD),
        ],
    )
    def test_build_activity_validation(
        self, override: dict[str, Any], translation_key: str
    ) -> None:
        user_input = {
            const.DATA_ACTIVITY_TYPE: const.ACTIVITY_TYPE_QUEST,
            const.DATA_ACTIVITY_TITLE: "Eye Contact Drill",
            const.DATA_ACTIVITY_DIFFICULTY: 2,
            const.DATA_ACTIVITY_XP_REWARD: 40,
            **override,
        }
        with pytest.raises(db.EntityValidationError) as err:
            db.build_activity(user_input)
        assert err.value.translation_key == translation_key

    def test_update_keeps_id(self) -> None:
        original = db.default_activity_catalog()[0]
        updated = db.build_activity(
            {const.DATA_ACTIVITY_IS_COMPLETED: True}, existing=original
        )
        assert updated[const.DATA_ACTIVITY_ID] == original[const.DATA_ACTIVITY_ID]
        assert updated[const.DATA_ACTIVITY_TITLE] == original[const.DATA_ACTIVITY_TITLE]
        assert updated[const.DATA_ACTIVITY_IS_COMPLETED]

    def test_normalize_catalog_drops_invalid(self) -> None:
        good = db.default_activity_catalog()[1]
        bad = {**good, const.DATA_ACTIVITY_ID: "bad", const.DATA_ACTIVITY_DIFFICULTY: 9}
        catalog = db.normalize_activity_catalog([good, bad, None])
        assert catalog == [good]


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (const.THEME_NEON_CYBER, const.THEME_NEON_CYBER),
        ("vaporwave", const.DEFAULT_THEME),
        (None, const.DEFAULT_THEME),
    ],
)
def test_normalize_theme_id(raw: Any, expected: str) -> None:
    assert db.normalize_theme_id(raw) == expected
