"""Shared plumbing for Thunderpick Move managers.

Managers talk to each other through dispatcher signals scoped to one config
entry, so two installations never hear each other's events. Payloads travel
as a single dict argument.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from homeassistant.helpers.dispatcher import (
    async_dispatcher_connect,
    async_dispatcher_send,
)

from .. import const

if TYPE_CHECKING:
    from collections.abc import Callable

    from homeassistant.core import HomeAssistant

    from ..coordinator import ThunderpickMoveCoordinator


def get_event_signal(entry_id: str, suffix: str) -> str:
    """Return the dispatcher signal for `suffix` on one config entry.

    Example:
        >>> get_event_signal("abc123", const.SIGNAL_SUFFIX_BADGE_UNLOCKED)
        'thunderpick_move_abc123_badge_unlocked'
    """
    return f"{const.DOMAIN}_{entry_id}_{suffix}"


class BaseManager(ABC):
    """A manager bound to one coordinator.

    Mutations that users can see end with coordinator._persist_and_update();
    bookkeeping nobody renders only needs coordinator._persist().
    """

    def __init__(
        self, hass: HomeAssistant, coordinator: ThunderpickMoveCoordinator
    ) -> None:
        """Bind the manager to its coordinator and config entry."""
        self.hass = hass
        self.coordinator = coordinator
        self.entry_id = coordinator.config_entry.entry_id

    def emit(self, suffix: str, **payload: Any) -> None:
        """Send `payload` (JSON-safe values only) on this entry's `suffix` signal."""
        const.LOGGER.debug(
            "%s emits %s %s", self.__class__.__name__, suffix, sorted(payload)
        )
        async_dispatcher_send(
            self.hass, get_event_signal(self.entry_id, suffix), payload
        )

    def listen(self, suffix: str, target: Callable[[dict[str, Any]], Any]) -> None:
        """Call `target(payload)` for every `suffix` event until the entry unloads.

        @callback targets run inline inside emit(); coroutine functions are
        scheduled as tasks.
        """
        unsubscribe = async_dispatcher_connect(
            self.hass, get_event_signal(self.entry_id, suffix), target
        )
        self.coordinator.config_entry.async_on_unload(unsubscribe)

    @abstractmethod
    async def async_setup(self) -> None:
        """Subscribe to signals and prepare state. Called once at entry setup."""
