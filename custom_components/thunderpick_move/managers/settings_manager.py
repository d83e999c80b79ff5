"""Settings Manager - Theme selection and onboarding flag.

Owns the `selectedThemeID`, `isOnboardingComplete` and legacy `isPremium`
records. Theme changes are gated by EntitlementManager.has_access(); when the
entitlement state loads or changes, the selected theme is re-validated and
reverted to the standard theme if access was lost. Re-validation is
idempotent: once reverted, further signals find nothing to do.
"""

from __future__ import annotations

from typing import Any

from homeassistant.core import callback

from .. import const
from .base_manager import BaseManager


class SettingsManager(BaseManager):
    """Manager for user-facing settings."""

    async def async_setup(self) -> None:
        """Re-validate the theme whenever entitlements load or change."""
        self.listen(
            const.SIGNAL_SUFFIX_ENTITLEMENTS_LOADED, self._on_entitlements_updated
        )
        self.listen(
            const.SIGNAL_SUFFIX_ENTITLEMENTS_CHANGED, self._on_entitlements_updated
        )

    @property
    def selected_theme(self) -> str:
        """Currently selected theme id."""
        return self.coordinator.records[const.DATA_SELECTED_THEME_ID]

    @property
    def is_onboarding_complete(self) -> bool:
        """True once onboarding was finished."""
        return bool(self.coordinator.records[const.DATA_IS_ONBOARDING_COMPLETE])

    def set_theme(self, theme: str) -> bool:
        """Select a theme if it is known and accessible.

        Returns:
            True if the theme is now selected, False if it was refused.
        """
        if theme not in const.THEME_TYPES:
            const.LOGGER.warning("Refusing unknown theme: %s", theme)
            return False
        if not self.coordinator.entitlement_manager.has_access(theme):
            const.LOGGER.warning("Refusing locked theme: %s", theme)
            return False
        if theme != self.selected_theme:
            self._store_theme(theme, reason="selected")
        return True

    def validate_current_theme(self) -> bool:
        """Revert to the standard theme if the selected one is no longer owned.

        Does nothing until entitlements have loaded.

        Returns:
            True if the theme was reverted.
        """
        entitlements = self.coordinator.entitlement_manager
        if not entitlements.is_loaded:
            return False

        self._sync_legacy_premium_flag(entitlements.owns_any_premium())

        if entitlements.has_access(self.selected_theme):
            return False
        const.LOGGER.info(
            "Access to theme %s lost, reverting to %s",
            self.selected_theme,
            const.DEFAULT_THEME,
        )
        self._store_theme(const.DEFAULT_THEME, reason="access_lost")
        return True

    def complete_onboarding(self) -> None:
        """Mark onboarding as finished."""
        if self.is_onboarding_complete:
            return
        self.coordinator.records[const.DATA_IS_ONBOARDING_COMPLETE] = True
        self.coordinator._persist_and_update()

    @callback
    def _on_entitlements_updated(self, payload: dict[str, Any]) -> None:
        self.validate_current_theme()

    def _store_theme(self, theme: str, reason: str) -> None:
        self.coordinator.records[const.DATA_SELECTED_THEME_ID] = theme
        self.coordinator._persist_and_update()
        self.emit(const.SIGNAL_SUFFIX_THEME_CHANGED, theme=theme, reason=reason)

    def _sync_legacy_premium_flag(self, owns_premium: bool) -> None:
        """Keep the legacy isPremium record in step; it is never read back."""
        if self.coordinator.records[const.DATA_IS_PREMIUM] == owns_premium:
            return
        self.coordinator.records[const.DATA_IS_PREMIUM] = owns_premium
        self.coordinator._persist()
