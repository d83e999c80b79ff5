"""Entitlement Manager - Owned premium products and theme access.

This manager holds the in-memory entitlement state:
- owned_product_ids: rebuilt from the purchase provider every session
- products: catalog fetched from the provider
- is_loaded: True once the initial catalog + entitlement pull has finished

It is fed by independent asynchronous tasks (initial load, restore, purchase,
and the never-ending entitlement update subscription). These tasks only ever
write entitlement state; the SettingsManager reacts to the emitted signals to
re-validate the selected theme.

Events emitted:
- ENTITLEMENTS_LOADED once the initial load completes
- ENTITLEMENTS_CHANGED whenever owned_product_ids grows
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .. import const
from ..purchase_provider import (
    PurchaseProviderError,
    TransactionVerificationError,
    verify_transaction,
)
from .base_manager import BaseManager

if TYPE_CHECKING:
    from homeassistant.core import HomeAssistant

    from ..coordinator import ThunderpickMoveCoordinator
    from ..purchase_provider import PurchaseProvider, Transaction
    from ..type_defs import ProductData

# Provider failures that map to a "failed" outcome
PROVIDER_ERRORS = (PurchaseProviderError, OSError, TimeoutError)


class EntitlementManager(BaseManager):
    """Manager for purchase-derived access control."""

    def __init__(
        self,
        hass: HomeAssistant,
        coordinator: ThunderpickMoveCoordinator,
        provider: PurchaseProvider,
    ) -> None:
        """Initialize the EntitlementManager.

        Args:
            hass: Home Assistant instance
            coordinator: The Thunderpick Move coordinator
            provider: Entitlement source (LocalPurchaseProvider by default)
        """
        super().__init__(hass, coordinator)
        self._provider = provider
        self._owned_product_ids: set[str] = set()
        self._products: list[ProductData] = []
        self._is_loaded = False

    async def async_setup(self) -> None:
        """Start the initial load and the update subscription.

        Both run as config entry tasks; the subscription is a background task
        cancelled when the entry unloads.
        """
        await self._provider.async_setup()
        entry = self.coordinator.config_entry
        entry.async_create_background_task(
            self.hass,
            self._async_listen_for_updates(),
            f"{const.DOMAIN}_entitlement_updates_{self.entry_id}",
        )
        entry.async_create_task(
            self.hass,
            self.async_load(),
            f"{const.DOMAIN}_entitlement_load_{self.entry_id}",
        )

    # =========================================================================
    # State
    # =========================================================================

    @property
    def owned_product_ids(self) -> frozenset[str]:
        """Product ids owned in this session."""
        return frozenset(self._owned_product_ids)

    @property
    def products(self) -> list[ProductData]:
        """Catalog fetched from the provider."""
        return list(self._products)

    @property
    def is_loaded(self) -> bool:
        """True once the initial entitlement pull finished."""
        return self._is_loaded

    def get_product(self, product_id: str) -> ProductData | None:
        """Return the catalog entry for `product_id`, or None."""
        for product in self._products:
            if product[const.DATA_PRODUCT_ID] == product_id:
                return product
        return None

    def has_access(self, theme: str) -> bool:
        """Return True if the theme is free or its product is owned.

        Unknown theme ids are never accessible.
        """
        if theme not in const.THEME_TYPES:
            return False
        product_id = const.THEME_PRODUCT_IDS.get(theme)
        if product_id is None:
            return True
        return product_id in self._owned_product_ids

    def owns_any_premium(self) -> bool:
        """True if at least one premium product is owned."""
        return not self._owned_product_ids.isdisjoint(const.PREMIUM_PRODUCT_IDS)

    # =========================================================================
    # Provider operations
    # =========================================================================

    async def async_load(self) -> None:
        """Initial load: catalog, then current entitlements, then mark loaded."""
        await self.async_fetch_catalog()
        await self.async_restore()
        self._is_loaded = True
        const.LOGGER.info(
            "Entitlements loaded: %s", sorted(self._owned_product_ids) or "none"
        )
        self.emit(
            const.SIGNAL_SUFFIX_ENTITLEMENTS_LOADED,
            owned_product_ids=sorted(self._owned_product_ids),
        )

    async def async_fetch_catalog(self) -> list[ProductData]:
        """Fetch the premium catalog. On failure the previous catalog is kept."""
        try:
            products = await self._provider.async_fetch_products(
                sorted(const.PREMIUM_PRODUCT_IDS)
            )
        except PROVIDER_ERRORS as err:
            const.LOGGER.warning("Failed to fetch product catalog: %s", err)
            return self.products
        self._products = list(products)
        const.LOGGER.debug("Product catalog: %s", [p["product_id"] for p in products])
        return self.products

    async def async_restore(self) -> bool:
        """Re-pull every current entitlement from the provider.

        New verified ids are merged into the owned set; duplicates are no-ops.

        Returns:
            False if the provider failed, True otherwise.
        """
        changed = False
        try:
            async for transaction in self._provider.current_entitlements():
                changed |= self._incorporate(transaction)
        except PROVIDER_ERRORS as err:
            const.LOGGER.warning("Failed to restore purchases: %s", err)
            if changed:
                self._notify_changed()
            return False
        if changed:
            self._notify_changed()
        return True

    async def async_purchase(self, product_id: str) -> str:
        """Purchase a product.

        On success the product id is in owned_product_ids before this returns.

        Returns:
            One of const.PURCHASE_OUTCOMES.
        """
        product = self.get_product(product_id)
        if product is None:
            await self.async_fetch_catalog()
            product = self.get_product(product_id)
        if product is None:
            const.LOGGER.warning("Purchase of unknown product %s", product_id)
            return const.PURCHASE_OUTCOME_FAILED

        try:
            result = await self._provider.async_purchase(product)
        except PROVIDER_ERRORS as err:
            const.LOGGER.warning("Purchase of %s failed: %s", product_id, err)
            return const.PURCHASE_OUTCOME_FAILED

        if result.outcome != const.PURCHASE_OUTCOME_SUCCESS:
            const.LOGGER.info("Purchase of %s ended: %s", product_id, result.outcome)
            return result.outcome

        if result.transaction is None:
            const.LOGGER.warning("Purchase of %s returned no transaction", product_id)
            return const.PURCHASE_OUTCOME_FAILED
        try:
            verify_transaction(result.transaction)
        except TransactionVerificationError as err:
            const.LOGGER.warning("Rejected purchase: %s", err)
            return const.PURCHASE_OUTCOME_FAILED

        if self._incorporate(result.transaction):
            self._notify_changed()
        const.LOGGER.info("Purchase of %s succeeded", product_id)
        return const.PURCHASE_OUTCOME_SUCCESS

    async def _async_listen_for_updates(self) -> None:
        """Consume the provider's update stream until the entry unloads."""
        try:
            async for transaction in self._provider.entitlement_updates():
                if self._incorporate(transaction):
                    self._notify_changed()
        except PROVIDER_ERRORS as err:
            const.LOGGER.error("Entitlement update stream stopped: %s", err)

    # =========================================================================
    # Internal
    # =========================================================================

    def _incorporate(self, transaction: Transaction) -> bool:
        """Add a verified transaction's product. Returns True if the set grew."""
        try:
            verify_transaction(transaction)
        except TransactionVerificationError as err:
            const.LOGGER.warning("Rejected transaction: %s", err)
            return False
        if transaction.product_id in self._owned_product_ids:
            const.LOGGER.debug("Product %s already owned", transaction.product_id)
            return False
        self._owned_product_ids.add(transaction.product_id)
        return True

    def _notify_changed(self) -> None:
        self.emit(
            const.SIGNAL_SUFFIX_ENTITLEMENTS_CHANGED,
            owned_product_ids=sorted(self._owned_product_ids),
        )
