# File: config_flow.py
"""Config flow for the Thunderpick Move integration.

A single confirmation step; all user data lives in storage, not in the entry.
"""

from __future__ import annotations

from typing import Any

import voluptuous as vol
from homeassistant import config_entries

from . import const


class ThunderpickMoveConfigFlow(config_entries.ConfigFlow, domain=const.DOMAIN):
    """Config flow for Thunderpick Move (one instance per installation)."""

    VERSION = 1

    async def async_step_user(self, user_input: dict[str, Any] | None = None):
        """Confirm setup. Aborts if an entry already exists."""
        if any(self._async_current_entries()):
            return self.async_abort(reason=const.TRANS_KEY_ERROR_SINGLE_INSTANCE)

        if user_input is not None:
            return self.async_create_entry(
                title=const.THUNDERPICK_MOVE_TITLE, data={}
            )

        return self.async_show_form(
            step_id=const.CONFIG_FLOW_STEP_USER, data_schema=vol.Schema({})
        )
