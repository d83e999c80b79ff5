# File: __init__.py
"""Initialization file for the Thunderpick Move integration.

Handles setting up the integration: loading the config entry, wiring the
record store, purchase provider and media store into the coordinator, and
registering the services.

Key Features:
- Config entry setup and unload support.
- Coordinator initialization (load, normalize, seed, start managers).
- Storage removal when the entry is deleted.
"""

from __future__ import annotations

from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant
from homeassistant.exceptions import ConfigEntryNotReady
from homeassistant.util import dt as dt_util

from . import const
from .coordinator import ThunderpickMoveCoordinator
from .media_store import MediaStore
from .purchase_provider import LocalPurchaseProvider
from .services import async_setup_services, async_unload_services
from .store import ThunderpickMoveStore
from .utils import dt_utils


async def async_setup_entry(hass: HomeAssistant, entry: ConfigEntry) -> bool:
    """Set up the integration from a config entry."""
    const.LOGGER.info("Starting setup for Thunderpick Move entry: %s", entry.entry_id)

    # Day boundaries follow the Home Assistant timezone; set it before any
    # record is normalized.
    dt_utils.set_default_timezone(dt_util.get_default_time_zone())

    store = ThunderpickMoveStore(hass, const.STORAGE_KEY)
    coordinator = ThunderpickMoveCoordinator(
        hass,
        entry,
        store,
        LocalPurchaseProvider(hass),
        MediaStore(hass),
    )

    try:
        await coordinator.async_config_entry_first_refresh()
    except ConfigEntryNotReady as err:
        const.LOGGER.error("Failed to load Thunderpick Move data: %s", err)
        raise

    hass.data.setdefault(const.DOMAIN, {})[entry.entry_id] = {
        const.COORDINATOR: coordinator,
        const.STORE: store,
    }

    async_setup_services(hass)

    const.LOGGER.info("Thunderpick Move setup complete for entry: %s", entry.entry_id)
    return True


async def async_unload_entry(hass: HomeAssistant, entry: ConfigEntry) -> bool:
    """Unload a config entry.

    Background tasks created through the entry (entitlement updates) are
    cancelled by Home Assistant.
    """
    const.LOGGER.info("Unloading Thunderpick Move entry: %s", entry.entry_id)

    entry_data = hass.data[const.DOMAIN].pop(entry.entry_id)
    # Flush pending writes
    await entry_data[const.STORE].async_save()

    if not hass.data[const.DOMAIN]:
        async_unload_services(hass)
    return True


async def async_remove_entry(hass: HomeAssistant, entry: ConfigEntry) -> None:
    """Delete the stored records and purchase grants when the entry is removed."""
    const.LOGGER.info("Removing Thunderpick Move entry: %s", entry.entry_id)

    await ThunderpickMoveStore(hass, const.STORAGE_KEY).async_delete_storage()
    await LocalPurchaseProvider(hass).async_delete_storage()

    const.LOGGER.info("Thunderpick Move data cleared: %s", entry.entry_id)
