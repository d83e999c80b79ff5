# File: store.py
"""Record storage for the Thunderpick Move integration.

All records (userStats, journal, activities, theme and flags) live in a single
Home Assistant Store file, one top-level key per record. The store only moves
the dict in and out of that file; normalizing what was read is the
coordinator's job.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from homeassistant.helpers.storage import Store

from . import const, data_builders as db

if TYPE_CHECKING:
    from homeassistant.core import HomeAssistant


class ThunderpickMoveStore:
    """In-memory record dict backed by one Store file."""

    def __init__(
        self, hass: HomeAssistant, storage_key: str = const.STORAGE_KEY
    ) -> None:
        """Initialize the store.

        Args:
            hass: Home Assistant core object.
            storage_key: Storage file key (default: const.STORAGE_KEY).
        """
        self.hass = hass
        self._storage_key = storage_key
        self._store: Store[dict[str, Any]] = Store(
            hass, const.STORAGE_VERSION, storage_key
        )
        self._data: dict[str, Any] = {}

    @staticmethod
    def get_default_structure() -> dict[str, Any]:
        """Records of a fresh installation.

        The activity catalog starts empty and is seeded by the coordinator.
        """
        return {
            const.DATA_META: {
                const.DATA_META_SCHEMA_VERSION: const.SCHEMA_VERSION_CURRENT,
            },
            const.DATA_USER_STATS: db.build_user_progress(),
            const.DATA_JOURNAL: [],
            const.DATA_ACTIVITIES: [],
            const.DATA_SELECTED_THEME_ID: const.DEFAULT_THEME,
            const.DATA_IS_PREMIUM: False,
            const.DATA_IS_ONBOARDING_COMPLETE: False,
        }

    async def async_initialize(self) -> dict[str, Any]:
        """Read the storage file, falling back to the fresh-install records."""
        stored = await self._store.async_load()

        if stored is None:
            const.LOGGER.info(
                "No stored records under %s, starting fresh", self._storage_key
            )
            self._data = self.get_default_structure()
            return self._data

        self._data = stored
        const.LOGGER.debug(
            "Loaded %s records (%s journal entries, %s activities)",
            len(stored),
            len(stored.get(const.DATA_JOURNAL) or []),
            len(stored.get(const.DATA_ACTIVITIES) or []),
        )
        return self._data

    @property
    def data(self) -> dict[str, Any]:
        """The records as last handed to the store."""
        return self._data

    def set_data(self, new_data: dict[str, Any]) -> None:
        """Replace the records written by the next save."""
        self._data = new_data

    async def async_save(self) -> None:
        """Write the records. Failures are logged, never raised."""
        try:
            await self._store.async_save(self._data)
        except (OSError, TypeError, ValueError) as err:
            const.LOGGER.error(
                "Failed to save %s: %s (%s)",
                self._storage_key,
                err,
                type(err).__name__,
            )
            return
        const.LOGGER.debug("Saved %s", self._storage_key)

    async def async_delete_storage(self) -> None:
        """Delete the storage file (used when the config entry is removed)."""
        await self._store.async_remove()
        self._data = {}
        const.LOGGER.info("Storage file %s removed", self._storage_key)
