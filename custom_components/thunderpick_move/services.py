# File: services.py
"""Defines custom services for the Thunderpick Move integration.

These services are the integration's presentation surface: scripts,
automations and dashboards drive check-ins, training, journaling, themes and
purchases through them.
"""

from __future__ import annotations

from typing import Any

import voluptuous as vol
from homeassistant.core import (
    HomeAssistant,
    ServiceCall,
    ServiceResponse,
    SupportsResponse,
)
from homeassistant.exceptions import HomeAssistantError, ServiceValidationError
from homeassistant.helpers import config_validation as cv

from . import const
from .coordinator import ThunderpickMoveCoordinator
from .data_builders import EntityValidationError

# --- Service Schemas ---
CHECK_IN_SCHEMA = vol.Schema(
    {
        vol.Required(const.FIELD_POSTURE_SCORE): vol.Coerce(float),
        vol.Required(const.FIELD_FACE_SCORE): vol.Coerce(float),
        vol.Required(const.FIELD_ENERGY_SCORE): vol.Coerce(float),
    }
)

COMPLETE_ACTIVITY_SCHEMA = vol.Schema(
    {vol.Required(const.FIELD_ACTIVITY_ID): cv.string}
)

COMPLETE_TRAINING_GAME_SCHEMA = vol.Schema({vol.Required(const.FIELD_GAME): cv.string})

COMPLETE_BATTLE_SESSION_SCHEMA = vol.Schema(
    {
        vol.Required(const.FIELD_SCORE): vol.All(vol.Coerce(int), vol.Range(min=0)),
        vol.Required(const.FIELD_TOTAL): vol.All(vol.Coerce(int), vol.Range(min=0)),
    }
)

ADD_JOURNAL_ENTRY_SCHEMA = vol.Schema(
    {
        vol.Required(const.FIELD_MOOD): cv.string,
        vol.Optional(const.FIELD_NOTES, default=""): cv.string,
        vol.Optional(const.FIELD_PHOTO_PATH): cv.string,
        vol.Optional(const.FIELD_AUDIO_PATH): cv.string,
        vol.Optional(const.FIELD_VOICE_TEXT): cv.string,
    }
)

DELETE_JOURNAL_ENTRY_SCHEMA = vol.Schema(
    {vol.Required(const.FIELD_ENTRY_ID): cv.string}
)

SET_THEME_SCHEMA = vol.Schema(
    {vol.Required(const.FIELD_THEME): vol.In(const.THEME_TYPES)}
)

PURCHASE_PRODUCT_SCHEMA = vol.Schema(
    {vol.Required(const.FIELD_PRODUCT_ID): cv.string}
)

EMPTY_SCHEMA = vol.Schema({})


def _get_coordinator(hass: HomeAssistant) -> ThunderpickMoveCoordinator:
    """Return the coordinator of the (single) loaded entry."""
    entries = hass.data.get(const.DOMAIN) or {}
    for entry_data in entries.values():
        return entry_data[const.COORDINATOR]
    raise HomeAssistantError(
        translation_domain=const.DOMAIN,
        translation_key=const.TRANS_KEY_ERROR_NO_ENTRY,
    )


def _validation_error(
    translation_key: str, placeholders: dict[str, str] | None = None
) -> ServiceValidationError:
    return ServiceValidationError(
        translation_domain=const.DOMAIN,
        translation_key=translation_key,
        translation_placeholders=placeholders,
    )


def async_setup_services(hass: HomeAssistant) -> None:
    """Register Thunderpick Move services."""
    if hass.services.has_service(const.DOMAIN, const.SERVICE_CHECK_IN):
        return

    # =========================================================================
    # Progress
    # =========================================================================

    async def handle_check_in(call: ServiceCall) -> ServiceResponse:
        """Record a posture/face/energy self-assessment."""
        coordinator = _get_coordinator(hass)
        progress = coordinator.progress_manager.check_in(
            call.data[const.FIELD_POSTURE_SCORE],
            call.data[const.FIELD_FACE_SCORE],
            call.data[const.FIELD_ENERGY_SCORE],
        )
        const.LOGGER.info(
            "Check-in: status %s", progress[const.DATA_PROGRESS_CURRENT_STATUS]
        )
        return {
            "current_status": progress[const.DATA_PROGRESS_CURRENT_STATUS],
            "body_score": progress[const.DATA_PROGRESS_BODY_SCORE],
        }

    async def handle_complete_daily_move(call: ServiceCall) -> ServiceResponse:
        """Complete today's power move (once per day)."""
        coordinator = _get_coordinator(hass)
        completed = coordinator.progress_manager.complete_daily_move() is not None
        return {"completed": completed}

    async def handle_complete_daily_quest(call: ServiceCall) -> ServiceResponse:
        """Complete today's quest (once per day)."""
        coordinator = _get_coordinator(hass)
        completed = coordinator.progress_manager.complete_daily_quest() is not None
        return {"completed": completed}

    async def handle_complete_activity(call: ServiceCall) -> None:
        """Complete a catalog activity."""
        coordinator = _get_coordinator(hass)
        activity_id = call.data[const.FIELD_ACTIVITY_ID]
        activity = coordinator.get_activity(activity_id)
        if activity is None:
            raise _validation_error(
                const.TRANS_KEY_ERROR_ACTIVITY_NOT_FOUND, {"activity_id": activity_id}
            )
        coordinator.progress_manager.complete_activity(activity)

    async def handle_complete_training_game(call: ServiceCall) -> None:
        """Complete one of the training games by title."""
        coordinator = _get_coordinator(hass)
        game = call.data[const.FIELD_GAME]
        if coordinator.progress_manager.complete_training_game(game) is None:
            raise _validation_error(
                const.TRANS_KEY_ERROR_TRAINING_GAME_NOT_FOUND, {"game": game}
            )

    async def handle_complete_battle_session(call: ServiceCall) -> None:
        """Record a finished battle session."""
        coordinator = _get_coordinator(hass)
        score = call.data[const.FIELD_SCORE]
        total = call.data[const.FIELD_TOTAL]
        if score > total:
            raise _validation_error(
                const.TRANS_KEY_ERROR_INVALID_BATTLE_SCORE,
                {"score": str(score), "total": str(total)},
            )
        coordinator.progress_manager.complete_battle_session(score, total)

    # =========================================================================
    # Journal
    # =========================================================================

    def _check_media_path(source_path: str) -> None:
        if not hass.config.is_allowed_path(source_path):
            raise _validation_error(
                const.TRANS_KEY_ERROR_PATH_NOT_ALLOWED, {"path": source_path}
            )

    async def handle_add_journal_entry(call: ServiceCall) -> ServiceResponse:
        """Add a journal entry, copying any media into the media store."""
        coordinator = _get_coordinator(hass)
        user_input: dict[str, Any] = {
            const.DATA_JOURNAL_ENTRY_MOOD: call.data[const.FIELD_MOOD],
            const.DATA_JOURNAL_ENTRY_NOTES: call.data[const.FIELD_NOTES],
            const.DATA_JOURNAL_ENTRY_VOICE_TEXT: call.data.get(const.FIELD_VOICE_TEXT),
        }
        photo_path = call.data.get(const.FIELD_PHOTO_PATH)
        audio_path = call.data.get(const.FIELD_AUDIO_PATH)

        # Validate everything before touching the media directory
        try:
            entry = coordinator.progress_manager.build_journal_entry(user_input)
        except EntityValidationError as err:
            raise _validation_error(err.translation_key, err.placeholders) from err
        for source_path in (photo_path, audio_path):
            if source_path:
                _check_media_path(source_path)

        if photo_path:
            entry[
                const.DATA_JOURNAL_ENTRY_PHOTO_PATH
            ] = await coordinator.media_store.async_import_image(photo_path)
        if audio_path:
            entry[
                const.DATA_JOURNAL_ENTRY_AUDIO_PATH
            ] = await coordinator.media_store.async_save_audio(audio_path)

        coordinator.progress_manager.add_journal_entry(entry)
        const.LOGGER.info(
            "Journal entry added: %s (%s)",
            entry[const.DATA_JOURNAL_ENTRY_ID],
            entry[const.DATA_JOURNAL_ENTRY_MOOD],
        )
        return {"entry_id": entry[const.DATA_JOURNAL_ENTRY_ID]}

    async def handle_delete_journal_entry(call: ServiceCall) -> None:
        """Delete a journal entry; counters are left as they are."""
        coordinator = _get_coordinator(hass)
        entry_id = call.data[const.FIELD_ENTRY_ID]
        if not coordinator.progress_manager.delete_journal_entry(entry_id):
            raise _validation_error(
                const.TRANS_KEY_ERROR_JOURNAL_ENTRY_NOT_FOUND, {"entry_id": entry_id}
            )

    # =========================================================================
    # Settings and purchases
    # =========================================================================

    async def handle_set_theme(call: ServiceCall) -> None:
        """Select a theme; locked themes are refused."""
        coordinator = _get_coordinator(hass)
        theme = call.data[const.FIELD_THEME]
        if not coordinator.settings_manager.set_theme(theme):
            raise _validation_error(const.TRANS_KEY_ERROR_THEME_LOCKED, {"theme": theme})

    async def handle_complete_onboarding(call: ServiceCall) -> None:
        """Mark onboarding as finished."""
        _get_coordinator(hass).settings_manager.complete_onboarding()

    async def handle_purchase_product(call: ServiceCall) -> ServiceResponse:
        """Purchase a premium product and report the outcome."""
        coordinator = _get_coordinator(hass)
        outcome = await coordinator.entitlement_manager.async_purchase(
            call.data[const.FIELD_PRODUCT_ID]
        )
        return {"outcome": outcome}

    async def handle_restore_purchases(call: ServiceCall) -> ServiceResponse:
        """Re-pull current entitlements from the purchase provider."""
        entitlements = _get_coordinator(hass).entitlement_manager
        restored = await entitlements.async_restore()
        return {
            "restored": restored,
            "owned_product_ids": sorted(entitlements.owned_product_ids),
        }

    async def handle_get_summary(call: ServiceCall) -> ServiceResponse:
        """Return the dashboard read model."""
        return dict(_get_coordinator(hass).get_summary())

    services: list[tuple[str, Any, vol.Schema, SupportsResponse]] = [
        (
            const.SERVICE_CHECK_IN,
            handle_check_in,
            CHECK_IN_SCHEMA,
            SupportsResponse.OPTIONAL,
        ),
        (
            const.SERVICE_COMPLETE_DAILY_MOVE,
            handle_complete_daily_move,
            EMPTY_SCHEMA,
            SupportsResponse.OPTIONAL,
        ),
        (
            const.SERVICE_COMPLETE_DAILY_QUEST,
            handle_complete_daily_quest,
            EMPTY_SCHEMA,
            SupportsResponse.OPTIONAL,
        ),
        (
            const.SERVICE_COMPLETE_ACTIVITY,
            handle_complete_activity,
            COMPLETE_ACTIVITY_SCHEMA,
            SupportsResponse.NONE,
        ),
        (
            const.SERVICE_COMPLETE_TRAINING_GAME,
            handle_complete_training_game,
            COMPLETE_TRAINING_GAME_SCHEMA,
            SupportsResponse.NONE,
        ),
        (
            const.SERVICE_COMPLETE_BATTLE_SESSION,
            handle_complete_battle_session,
            COMPLETE_BATTLE_SESSION_SCHEMA,
            SupportsResponse.NONE,
        ),
        (
            const.SERVICE_ADD_JOURNAL_ENTRY,
            handle_add_journal_entry,
            ADD_JOURNAL_ENTRY_SCHEMA,
            SupportsResponse.OPTIONAL,
        ),
        (
            const.SERVICE_DELETE_JOURNAL_ENTRY,
            handle_delete_journal_entry,
            DELETE_JOURNAL_ENTRY_SCHEMA,
            SupportsResponse.NONE,
        ),
        (
            const.SERVICE_SET_THEME,
            handle_set_theme,
            SET_THEME_SCHEMA,
            SupportsResponse.NONE,
        ),
        (
            const.SERVICE_COMPLETE_ONBOARDING,
            handle_complete_onboarding,
            EMPTY_SCHEMA,
            SupportsResponse.NONE,
        ),
        (
            const.SERVICE_PURCHASE_PRODUCT,
            handle_purchase_product,
            PURCHASE_PRODUCT_SCHEMA,
            SupportsResponse.OPTIONAL,
        ),
        (
            const.SERVICE_RESTORE_PURCHASES,
            handle_restore_purchases,
            EMPTY_SCHEMA,
            SupportsResponse.OPTIONAL,
        ),
        (
            const.SERVICE_GET_SUMMARY,
            handle_get_summary,
            EMPTY_SCHEMA,
            SupportsResponse.ONLY,
        ),
    ]

    for service, handler, schema, supports_response in services:
        hass.services.async_register(
            const.DOMAIN,
            service,
            handler,
            schema=schema,
            supports_response=supports_response,
        )

    const.LOGGER.debug("Thunderpick Move services registered")


def async_unload_services(hass: HomeAssistant) -> None:
    """Unregister Thunderpick Move services when the last entry unloads."""
    for service in const.SERVICES:
        if hass.services.has_service(const.DOMAIN, service):
            hass.services.async_remove(const.DOMAIN, service)
