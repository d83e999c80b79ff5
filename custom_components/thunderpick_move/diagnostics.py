"""Diagnostics support for the Thunderpick Move integration.

Returns the raw storage data (identical to the thunderpick_move_data file) plus
the in-memory entitlement state, which is never persisted.
"""

from typing import Any

from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant

from . import const
from .coordinator import ThunderpickMoveCoordinator


async def async_get_config_entry_diagnostics(
    hass: HomeAssistant, entry: ConfigEntry
) -> dict[str, Any]:
    """Return diagnostics for a config entry."""
    coordinator: ThunderpickMoveCoordinator = hass.data[const.DOMAIN][
        entry.entry_id
    ][const.COORDINATOR]
    entitlements = coordinator.entitlement_manager

    return {
        "storage": coordinator.store.data,
        "entitlements": {
            "is_loaded": entitlements.is_loaded,
            "owned_product_ids": sorted(entitlements.owned_product_ids),
            "products": entitlements.products,
        },
    }
