"""Tests for ProgressManager - mutations, badge unlocks and events.

Runs against a loaded entry. The test harness uses US/Pacific, so frozen
times are chosen to stay on one local calendar day unless a test moves on.
"""

from typing import Any

import pytest
from freezegun import freeze_time
from homeassistant.core import HomeAssistant

from custom_components.thunderpick_move import const
from custom_components.thunderpick_move.coordinator import ThunderpickMoveCoordinator
from tests.helpers import capture_events, load_scenario, stored_records


@pytest.fixture
def stored_data() -> dict[str, Any]:
    """Returning user one step away from Writer, Steel Eyes and Alpha."""
    return load_scenario("scenario_near_badges.yaml").storage


@pytest.fixture
def stored_grants() -> dict[str, Any]:
    """Neon theme owned."""
    return load_scenario("scenario_near_badges.yaml").grants


# =============================================================================
# TEST: DAILY MOVE / QUEST
# =============================================================================


async def test_daily_move_once_per_local_day(
    hass: HomeAssistant, coordinator: ThunderpickMoveCoordinator
) -> None:
    """A second completion on the same local day changes nothing."""
    manager = coordinator.progress_manager
    # 20:00 UTC = 13:00 PDT on the 10th
    with freeze_time("2026-03-10 20:00:00") as frozen:
        assert manager.complete_daily_move() is not None
        assert manager.is_daily_move_completed()
        body_score = coordinator.progress[const.DATA_PROGRESS_BODY_SCORE]

        # 06:30 UTC on the 11th is still the evening of the 10th locally
        frozen.move_to("2026-03-11 06:30:00")
        assert manager.complete_daily_move() is None
        assert coordinator.progress[const.DATA_PROGRESS_BODY_SCORE] == body_score

        # 08:00 UTC on the 11th is 01:00 PDT on the 11th
        frozen.move_to("2026-03-11 08:00:00")
        assert not manager.is_daily_move_completed()
        assert manager.complete_daily_move() is not None


@freeze_time("2026-03-10 20:00:00")
async def test_daily_quest(
    hass: HomeAssistant, coordinator: ThunderpickMoveCoordinator
) -> None:
    """Daily quest adds 5 body score and 5 Mimicry once per day."""
    manager = coordinator.progress_manager
    manager.complete_daily_quest()
    manager.complete_daily_quest()

    progress = coordinator.progress
    assert progress[const.DATA_PROGRESS_BODY_SCORE] == 93
    assert progress[const.DATA_PROGRESS_SKILL_LEVELS][const.SKILL_MIMICRY] == 45
    assert progress[const.DATA_PROGRESS_ACTIVITIES_COMPLETED] == 10


# =============================================================================
# TEST: BADGES AND EVENTS
# =============================================================================


@freeze_time("2026-03-10 20:00:00")
async def test_badges_unlock_after_every_kind_of_mutation(
    hass: HomeAssistant, coordinator: ThunderpickMoveCoordinator
) -> None:
    """Badges are re-checked after activities, check-ins and journal entries."""
    entry_id = coordinator.config_entry.entry_id
    unlocked = capture_events(hass, entry_id, const.SIGNAL_SUFFIX_BADGE_UNLOCKED)
    updates = capture_events(hass, entry_id, const.SIGNAL_SUFFIX_PROGRESS_UPDATED)
    manager = coordinator.progress_manager

    # activities 9 -> 10
    manager.complete_activity(coordinator.activities[0])
    # body score 88 -> 93 with a perfect check-in
    manager.check_in(1.0, 1.0, 1.0)
    # journal 4 -> 5
    entry = manager.build_journal_entry({const.DATA_JOURNAL_ENTRY_MOOD: "Confidence"})
    manager.add_journal_entry(entry)

    assert [event["badge_id"] for event in unlocked] == [
        const.BADGE_STEEL_EYES,
        const.BADGE_ALPHA,
        const.BADGE_WRITER,
    ]
    assert [event["source"] for event in updates] == [
        const.PROGRESS_SOURCE_ACTIVITY,
        const.PROGRESS_SOURCE_CHECK_IN,
        const.PROGRESS_SOURCE_JOURNAL,
    ]
    assert coordinator.progress[const.DATA_PROGRESS_UNLOCKED_BADGES] == [
        const.BADGE_STEEL_EYES,
        const.BADGE_ALPHA,
        const.BADGE_WRITER,
    ]


@freeze_time("2026-03-10 20:00:00")
async def test_activity_history_is_logged(
    hass: HomeAssistant, coordinator: ThunderpickMoveCoordinator
) -> None:
    """Every action adds one to today's history bucket."""
    manager = coordinator.progress_manager
    manager.complete_activity(coordinator.activities[1])
    manager.complete_activity(coordinator.activities[1])
    manager.complete_training_game("Poker Face")

    history = coordinator.progress[const.DATA_PROGRESS_ACTIVITY_HISTORY]
    assert history["2026-03-10"] == 3
    assert history["2026-03-09"] == 5
    assert manager.heatmap()[-1]["intensity"] == 0.6


# =============================================================================
# TEST: ACTIVITIES, TRAINING GAMES, BATTLES
# =============================================================================


async def test_repeated_activity_is_not_day_gated(
    hass: HomeAssistant, coordinator: ThunderpickMoveCoordinator
) -> None:
    """Five completions in one day all count; skills saturate at 100."""
    manager = coordinator.progress_manager
    training = next(
        a
        for a in coordinator.activities
        if a[const.DATA_ACTIVITY_TYPE] == const.ACTIVITY_TYPE_TRAINING
    )
    for _ in range(5):
        manager.complete_activity(training)

    progress = coordinator.progress
    assert progress[const.DATA_PROGRESS_ACTIVITIES_COMPLETED] == 14
    assert progress[const.DATA_PROGRESS_SKILL_LEVELS][const.SKILL_POSTURE] == 100


async def test_training_game(
    hass: HomeAssistant, coordinator: ThunderpickMoveCoordinator
) -> None:
    """Training games count as training activities; unknown titles are refused."""
    manager = coordinator.progress_manager
    assert manager.complete_training_game("Power Posing") is not None
    assert coordinator.progress[const.DATA_PROGRESS_ACTIVITIES_COMPLETED] == 10

    assert manager.complete_training_game("Staring Contest") is None
    assert coordinator.progress[const.DATA_PROGRESS_ACTIVITIES_COMPLETED] == 10


@pytest.mark.parametrize(
    ("score", "total", "body_score"),
    [(10, 10, 93), (9, 10, 88), (0, 0, 88)],
)
async def test_battle_session(
    hass: HomeAssistant,
    coordinator: ThunderpickMoveCoordinator,
    score: int,
    total: int,
    body_score: int,
) -> None:
    """A battle counts as one battle activity; only a perfect score adds 5."""
    coordinator.progress_manager.complete_battle_session(score, total)

    progress = coordinator.progress
    assert progress[const.DATA_PROGRESS_ACTIVITIES_COMPLETED] == 10
    assert progress[const.DATA_PROGRESS_SKILL_LEVELS][const.SKILL_GESTURES] == 30
    assert progress[const.DATA_PROGRESS_BODY_SCORE] == body_score


# =============================================================================
# TEST: JOURNAL
# =============================================================================


async def test_journal_deletion_keeps_counters(
    hass: HomeAssistant,
    hass_storage: dict[str, Any],
    coordinator: ThunderpickMoveCoordinator,
) -> None:
    """Deleting entries never lowers the journal counter or removes badges."""
    manager = coordinator.progress_manager
    entry = manager.build_journal_entry({const.DATA_JOURNAL_ENTRY_MOOD: "Stress"})
    manager.add_journal_entry(entry)
    assert coordinator.progress[const.DATA_PROGRESS_UNLOCKED_BADGES] == [
        const.BADGE_WRITER
    ]

    for entry_id in ("entry-1", "entry-2", entry[const.DATA_JOURNAL_ENTRY_ID]):
        assert manager.delete_journal_entry(entry_id)
    assert not manager.delete_journal_entry("entry-1")
    await hass.async_block_till_done()

    assert [e["id"] for e in coordinator.journal] == ["entry-3", "entry-4"]
    assert coordinator.progress[const.DATA_PROGRESS_TOTAL_JOURNAL_ENTRIES] == 5
    assert coordinator.progress[const.DATA_PROGRESS_UNLOCKED_BADGES] == [
        const.BADGE_WRITER
    ]
    saved = stored_records(hass_storage)
    assert len(saved[const.DATA_JOURNAL]) == 2


async def test_journal_audio_trains_voice(
    hass: HomeAssistant, coordinator: ThunderpickMoveCoordinator
) -> None:
    """An entry with an audio reference adds 3 to Voice."""
    manager = coordinator.progress_manager
    entry = manager.build_journal_entry(
        {
            const.DATA_JOURNAL_ENTRY_MOOD: "Dominance",
            const.DATA_JOURNAL_ENTRY_AUDIO_PATH: "note.m4a",
        }
    )
    manager.add_journal_entry(entry)
    skills = coordinator.progress[const.DATA_PROGRESS_SKILL_LEVELS]
    assert skills[const.SKILL_VOICE] == 13
    assert coordinator.journal_manager.get(entry["id"]) == entry


async def test_journal_events(
    hass: HomeAssistant, coordinator: ThunderpickMoveCoordinator
) -> None:
    """The journal reports additions and removals."""
    events = capture_events(
        hass, coordinator.config_entry.entry_id, const.SIGNAL_SUFFIX_JOURNAL_UPDATED
    )
    manager = coordinator.progress_manager
    entry = manager.build_journal_entry({const.DATA_JOURNAL_ENTRY_MOOD: "Stress"})
    manager.add_journal_entry(entry)
    manager.delete_journal_entry(entry["id"])

    assert [e["action"] for e in events] == ["added", "removed"]


@freeze_time("2026-03-10 20:00:00")
async def test_mood_stats_from_scenario(
    hass: HomeAssistant, coordinator: ThunderpickMoveCoordinator
) -> None:
    """Mood stats count the scenario journal per local day."""
    stats = {day["date"]: day for day in coordinator.progress_manager.mood_stats()}
    assert stats["2026-03-08"] == {"date": "2026-03-08", "confidence": 1, "stress": 0}
    assert stats["2026-03-09"] == {"date": "2026-03-09", "confidence": 1, "stress": 1}
    assert stats["2026-03-10"] == {"date": "2026-03-10", "confidence": 1, "stress": 0}
