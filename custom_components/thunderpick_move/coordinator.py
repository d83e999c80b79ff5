# File: coordinator.py
"""Coordinator for the Thunderpick Move integration.

Owns the in-memory record dict loaded from ThunderpickMoveStore, normalizes it
on load, seeds the activity catalog, wires up the managers and persists
changes. There is no polling: listeners are notified through
async_set_updated_data() after each mutation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from homeassistant.helpers.update_coordinator import DataUpdateCoordinator

from . import const, data_builders as db
from .managers import (
    EntitlementManager,
    JournalManager,
    ProgressManager,
    SettingsManager,
)

if TYPE_CHECKING:
    from homeassistant.config_entries import ConfigEntry
    from homeassistant.core import HomeAssistant

    from .media_store import MediaStore
    from .purchase_provider import PurchaseProvider
    from .store import ThunderpickMoveStore
    from .type_defs import (
        ActivityData,
        JournalEntryData,
        ProgressSummary,
        UserProgressData,
    )


class ThunderpickMoveCoordinator(DataUpdateCoordinator[dict[str, Any]]):
    """Coordinator for Thunderpick Move.

    One coordinator per config entry; everything hangs off it (no module
    level state). Managers reach shared data through the properties below.
    """

    config_entry: ConfigEntry

    def __init__(
        self,
        hass: HomeAssistant,
        config_entry: ConfigEntry,
        store: ThunderpickMoveStore,
        purchase_provider: PurchaseProvider,
        media_store: MediaStore,
    ) -> None:
        """Initialize the coordinator and its managers."""
        super().__init__(
            hass,
            const.LOGGER,
            config_entry=config_entry,
            name=f"{const.DOMAIN}{const.COORDINATOR_SUFFIX}",
            update_interval=None,
        )
        self.store = store
        self.purchase_provider = purchase_provider
        self.media_store = media_store
        self._data: dict[str, Any] = {}

        self.journal_manager = JournalManager(hass, self)
        self.progress_manager = ProgressManager(hass, self)
        self.settings_manager = SettingsManager(hass, self)
        self.entitlement_manager = EntitlementManager(
            hass, self, purchase_provider
        )

    # -------------------------------------------------------------------------------------
    # Setup
    # -------------------------------------------------------------------------------------

    async def _async_setup(self) -> None:
        """Load and normalize stored data, seed activities, start managers.

        Called once by async_config_entry_first_refresh().
        """
        raw = await self.store.async_initialize()
        self._data = self._normalize_data(raw)

        if not self._data[const.DATA_ACTIVITIES]:
            self._data[const.DATA_ACTIVITIES] = db.default_activity_catalog()
            const.LOGGER.info(
                "Seeded activity catalog with %s activities",
                len(self._data[const.DATA_ACTIVITIES]),
            )
        self._persist()

        # Settings must listen before entitlements start loading
        for manager in (
            self.journal_manager,
            self.progress_manager,
            self.settings_manager,
            self.entitlement_manager,
        ):
            await manager.async_setup()

    @staticmethod
    def _normalize_data(raw: Any) -> dict[str, Any]:
        """Return a complete, well-formed record dict from stored data."""
        data: dict[str, Any] = raw if isinstance(raw, dict) else {}
        meta = data.get(const.DATA_META)
        meta = dict(meta) if isinstance(meta, dict) else {}
        meta[const.DATA_META_SCHEMA_VERSION] = const.SCHEMA_VERSION_CURRENT

        return {
            const.DATA_META: meta,
            const.DATA_USER_STATS: db.normalize_user_progress(
                data.get(const.DATA_USER_STATS)
            ),
            const.DATA_JOURNAL: db.normalize_journal(data.get(const.DATA_JOURNAL)),
            const.DATA_ACTIVITIES: db.normalize_activity_catalog(
                data.get(const.DATA_ACTIVITIES)
            ),
            const.DATA_SELECTED_THEME_ID: db.normalize_theme_id(
                data.get(const.DATA_SELECTED_THEME_ID)
            ),
            const.DATA_IS_PREMIUM: bool(data.get(const.DATA_IS_PREMIUM, False)),
            const.DATA_IS_ONBOARDING_COMPLETE: bool(
                data.get(const.DATA_IS_ONBOARDING_COMPLETE, False)
            ),
        }

    async def _async_update_data(self) -> dict[str, Any]:
        """Return the in-memory records (nothing to poll)."""
        return self._data

    # -------------------------------------------------------------------------------------
    # Persistence
    # -------------------------------------------------------------------------------------

    def _persist(self) -> None:
        """Hand the records to the store and save without awaiting."""
        self.store.set_data(self._data)
        self.config_entry.async_create_task(
            self.hass, self.store.async_save(), f"{const.DOMAIN}_save"
        )

    def _persist_and_update(self) -> None:
        """Persist and push the new state to coordinator listeners."""
        self._persist()
        self.async_set_updated_data(self._data)

    # -------------------------------------------------------------------------------------
    # Record accessors
    # -------------------------------------------------------------------------------------

    @property
    def records(self) -> dict[str, Any]:
        """All top-level records keyed by storage key."""
        return self._data

    @property
    def progress(self) -> UserProgressData:
        """The userStats record."""
        return self._data[const.DATA_USER_STATS]

    @property
    def journal(self) -> list[JournalEntryData]:
        """The journal record (live list)."""
        return self._data[const.DATA_JOURNAL]

    @property
    def activities(self) -> list[ActivityData]:
        """The activity catalog."""
        return self._data[const.DATA_ACTIVITIES]

    def get_activity(self, activity_id: str) -> ActivityData | None:
        """Return the catalog activity with `activity_id`, or None."""
        for activity in self.activities:
            if activity[const.DATA_ACTIVITY_ID] == activity_id:
                return activity
        return None

    # -------------------------------------------------------------------------------------
    # Read model
    # -------------------------------------------------------------------------------------

    def get_summary(self) -> ProgressSummary:
        """Everything a dashboard needs in one JSON-ready dict."""
        progress_manager = self.progress_manager
        entitlements = self.entitlement_manager
        return {
            "progress": self.progress,
            "selected_theme": self.settings_manager.selected_theme,
            "is_onboarding_complete": self.settings_manager.is_onboarding_complete,
            "daily_move_completed": progress_manager.is_daily_move_completed(),
            "daily_quest_completed": progress_manager.is_daily_quest_completed(),
            "daily_move": progress_manager.daily_power_move(),
            "daily_pose": progress_manager.daily_pose(),
            "battle_questions": progress_manager.daily_battle_questions(),
            "heatmap": progress_manager.heatmap(),
            "mood_stats": progress_manager.mood_stats(),
            "badges": progress_manager.badge_progress(),
            "owned_product_ids": sorted(entitlements.owned_product_ids),
            "products": entitlements.products,
            "entitlements_loaded": entitlements.is_loaded,
        }
