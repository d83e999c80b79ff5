"""Tests for ThunderpickMoveCoordinator - load, normalize, seed and persist."""

from typing import Any

import pytest
from freezegun import freeze_time
from homeassistant.core import HomeAssistant

from custom_components.thunderpick_move import const
from custom_components.thunderpick_move.coordinator import ThunderpickMoveCoordinator
from tests.helpers import stored_records


async def test_fresh_install_seeds_defaults(
    hass: HomeAssistant,
    hass_storage: dict[str, Any],
    coordinator: ThunderpickMoveCoordinator,
) -> None:
    """A fresh install gets default records and the seeded activity catalog."""
    records = coordinator.records
    assert records[const.DATA_META] == {
        const.DATA_META_SCHEMA_VERSION: const.SCHEMA_VERSION_CURRENT
    }
    assert records[const.DATA_SELECTED_THEME_ID] == const.DEFAULT_THEME
    assert records[const.DATA_IS_PREMIUM] is False
    assert records[const.DATA_IS_ONBOARDING_COMPLETE] is False
    assert coordinator.journal == []
    assert [a[const.DATA_ACTIVITY_TITLE] for a in coordinator.activities] == [
        "Mirror Check",
        "Magnetic Walk",
        "Negotiation Face",
    ]
    assert coordinator.progress[const.DATA_PROGRESS_BODY_SCORE] == 0

    # The seeded catalog is persisted right away
    saved = stored_records(hass_storage)
    assert len(saved[const.DATA_ACTIVITIES]) == 3


@pytest.mark.parametrize(
    "stored_data",
    [
        {
            const.DATA_USER_STATS: {
                const.DATA_PROGRESS_BODY_SCORE: 180,
                const.DATA_PROGRESS_CURRENT_STATUS: "Confused",
                const.DATA_PROGRESS_UNLOCKED_BADGES: ["Writer", "Writer"],
            },
            const.DATA_JOURNAL: [{"id": "x", "mood": "Bored"}],
            const.DATA_ACTIVITIES: "not a list",
            const.DATA_SELECTED_THEME_ID: "vaporwave",
            const.DATA_IS_ONBOARDING_COMPLETE: 1,
        }
    ],
)
async def test_corrupt_storage_is_normalized(
    hass: HomeAssistant, coordinator: ThunderpickMoveCoordinator
) -> None:
    """Out-of-range and unknown values are repaired on load."""
    progress = coordinator.progress
    assert progress[const.DATA_PROGRESS_BODY_SCORE] == 100
    assert progress[const.DATA_PROGRESS_CURRENT_STATUS] == const.BODY_STATUS_NEUTRAL
    assert progress[const.DATA_PROGRESS_UNLOCKED_BADGES] == [const.BADGE_WRITER]
    assert coordinator.journal == []
    assert len(coordinator.activities) == 3
    assert coordinator.settings_manager.selected_theme == const.DEFAULT_THEME
    assert coordinator.settings_manager.is_onboarding_complete is True


@pytest.mark.parametrize(
    "stored_data",
    [
        {
            const.DATA_ACTIVITIES: [
                {
                    "id": "custom-1",
                    "type": const.ACTIVITY_TYPE_BATTLE,
                    "title": "Interview Drill",
                    "description": "",
                    "difficulty": 3,
                    "is_completed": False,
                    "xp_reward": 60,
                }
            ]
        }
    ],
)
async def test_existing_catalog_is_not_reseeded(
    hass: HomeAssistant, coordinator: ThunderpickMoveCoordinator
) -> None:
    """Seeding only happens when the catalog is empty."""
    assert [a[const.DATA_ACTIVITY_ID] for a in coordinator.activities] == ["custom-1"]
    assert coordinator.get_activity("custom-1") is not None
    assert coordinator.get_activity("missing") is None


async def test_mutation_is_persisted(
    hass: HomeAssistant,
    hass_storage: dict[str, Any],
    coordinator: ThunderpickMoveCoordinator,
) -> None:
    """Progress changes reach the storage file."""
    coordinator.progress_manager.check_in(1.0, 1.0, 1.0)
    await hass.async_block_till_done()

    saved = stored_records(hass_storage)[const.DATA_USER_STATS]
    assert saved[const.DATA_PROGRESS_BODY_SCORE] == 5
    assert saved[const.DATA_PROGRESS_CURRENT_STATUS] == const.BODY_STATUS_ALPHA


async def test_mutation_updates_listeners(
    hass: HomeAssistant, coordinator: ThunderpickMoveCoordinator
) -> None:
    """Coordinator listeners are notified after each mutation."""
    updates: list[None] = []
    unsub = coordinator.async_add_listener(lambda: updates.append(None))

    coordinator.progress_manager.complete_daily_move()
    coordinator.settings_manager.complete_onboarding()

    assert len(updates) == 2
    unsub()


@freeze_time("2026-03-10 20:00:00")
async def test_summary(
    hass: HomeAssistant, coordinator: ThunderpickMoveCoordinator
) -> None:
    """The summary bundles progress, daily content and entitlement state."""
    coordinator.progress_manager.complete_daily_move()
    summary = coordinator.get_summary()

    assert summary["daily_move_completed"] is True
    assert summary["daily_quest_completed"] is False
    assert summary["selected_theme"] == const.DEFAULT_THEME
    assert summary["progress"][const.DATA_PROGRESS_BODY_SCORE] == 10
    assert len(summary["battle_questions"]) == const.BATTLE_QUESTIONS_PER_DAY
    assert len(summary["heatmap"]) == const.HEATMAP_DAYS
    assert summary["heatmap"][-1] == {
        "date": "2026-03-10",
        "count": 1,
        "intensity": 0.2,
    }
    assert len(summary["mood_stats"]) == const.MOOD_STATS_DAYS
    assert [badge["badge_id"] for badge in summary["badges"]] == [
        const.BADGE_WRITER,
        const.BADGE_STEEL_EYES,
        const.BADGE_ALPHA,
        const.BADGE_CONSISTENT,
    ]
    assert summary["entitlements_loaded"] is True
    assert summary["owned_product_ids"] == []
    assert {p["product_id"] for p in summary["products"]} == const.PREMIUM_PRODUCT_IDS
