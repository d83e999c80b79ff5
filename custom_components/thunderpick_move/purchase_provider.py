# File: purchase_provider.py
"""Purchase provider interface and the bundled local implementation.

The EntitlementManager never talks to a commerce backend directly; it talks
to a PurchaseProvider. A provider exposes four operations:

- async_fetch_products(ids): catalog entries for the requested product ids
- async_purchase(product): run a purchase, returning a PurchaseResult
- current_entitlements(): async iterator over every currently owned transaction
- entitlement_updates(): async iterator over newly granted transactions (never ends)

LocalPurchaseProvider keeps its grant ledger in a separate Home Assistant
Store, so purchases survive restarts while the in-memory owned set in the
EntitlementManager is still rebuilt from scratch every session.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
import asyncio
from collections.abc import AsyncIterator
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any
import uuid

from homeassistant.helpers.storage import Store
from homeassistant.util import dt as dt_util

from . import const

if TYPE_CHECKING:
    from collections.abc import Iterable

    from homeassistant.core import HomeAssistant

    from .type_defs import ProductData


# ==============================================================================
# EXCEPTIONS
# ==============================================================================


class PurchaseProviderError(Exception):
    """Raised when the provider cannot complete a request (network, store, ...)."""


class TransactionVerificationError(Exception):
    """Raised when a transaction fails verification and must not be trusted.

    Attributes:
        product_id: Product the unverified transaction claims to grant
        transaction_id: Provider transaction identifier
    """

    def __init__(self, product_id: str, transaction_id: str) -> None:
        """Initialize TransactionVerificationError."""
        self.product_id = product_id
        self.transaction_id = transaction_id
        super().__init__(
            f"Unverified transaction {transaction_id} for product {product_id}"
        )


# ==============================================================================
# VALUE OBJECTS
# ==============================================================================


@dataclass(frozen=True)
class Transaction:
    """A purchase or grant reported by the provider.

    Attributes:
        product_id: Product granted by this transaction
        transaction_id: Provider-unique transaction identifier
        verified: False when the provider could not verify the receipt
    """

    product_id: str
    transaction_id: str
    verified: bool = True


@dataclass(frozen=True)
class PurchaseResult:
    """Outcome of a purchase attempt.

    `transaction` is set only for PURCHASE_OUTCOME_SUCCESS.
    """

    outcome: str
    transaction: Transaction | None = None


def verify_transaction(transaction: Transaction) -> Transaction:
    """Return the transaction if verified, else raise TransactionVerificationError."""
    if not transaction.verified:
        raise TransactionVerificationError(
            transaction.product_id, transaction.transaction_id
        )
    return transaction


# ==============================================================================
# PROVIDER INTERFACE
# ==============================================================================


class PurchaseProvider(ABC):
    """Opaque entitlement source consumed by the EntitlementManager."""

    async def async_setup(self) -> None:
        """Prepare the provider (load ledgers, open connections)."""

    @abstractmethod
    async def async_fetch_products(
        self, product_ids: Iterable[str]
    ) -> list[ProductData]:
        """Return catalog entries for the known ids; unknown ids are omitted."""

    @abstractmethod
    async def async_purchase(self, product: ProductData) -> PurchaseResult:
        """Purchase a product."""

    @abstractmethod
    def current_entitlements(self) -> AsyncIterator[Transaction]:
        """Iterate over every transaction the user currently owns."""

    @abstractmethod
    def entitlement_updates(self) -> AsyncIterator[Transaction]:
        """Iterate over transactions granted after subscription. Never ends."""


# ==============================================================================
# LOCAL PROVIDER
# ==============================================================================


class LocalPurchaseProvider(PurchaseProvider):
    """Purchase provider backed by a local grant ledger.

    Stands in for a platform commerce service: products come from
    const.LOCAL_PRODUCT_CATALOG, purchases always succeed for known products,
    and grants made outside a purchase (async_grant) are pushed to
    entitlement_updates() subscribers.
    """

    def __init__(
        self, hass: HomeAssistant, storage_key: str = const.PURCHASES_STORAGE_KEY
    ) -> None:
        """Initialize the provider."""
        self.hass = hass
        self._store: Store[dict[str, Any]] = Store(
            hass, const.PURCHASES_STORAGE_VERSION, storage_key
        )
        self._grants: dict[str, dict[str, str]] = {}
        self._updates: asyncio.Queue[Transaction] = asyncio.Queue()

    async def async_setup(self) -> None:
        """Load the grant ledger."""
        stored = await self._store.async_load()
        grants = (stored or {}).get("grants")
        self._grants = grants if isinstance(grants, dict) else {}
        const.LOGGER.debug("Local purchase ledger loaded: %s", sorted(self._grants))

    async def async_fetch_products(
        self, product_ids: Iterable[str]
    ) -> list[ProductData]:
        """Return catalog entries for the known ids."""
        products: list[ProductData] = []
        for product_id in product_ids:
            details = const.LOCAL_PRODUCT_CATALOG.get(product_id)
            if details is None:
                const.LOGGER.debug("Unknown product requested: %s", product_id)
                continue
            products.append(
                {
                    "product_id": product_id,
                    "display_name": details[const.DATA_PRODUCT_DISPLAY_NAME],
                    "display_price": details[const.DATA_PRODUCT_DISPLAY_PRICE],
                }
            )
        return products

    async def async_purchase(self, product: ProductData) -> PurchaseResult:
        """Record the grant and report success.

        Raises:
            PurchaseProviderError: Unknown product or ledger write failure
        """
        product_id = product[const.DATA_PRODUCT_ID]
        if product_id not in const.LOCAL_PRODUCT_CATALOG:
            raise PurchaseProviderError(f"Unknown product: {product_id}")
        transaction = await self._async_record_grant(product_id)
        return PurchaseResult(const.PURCHASE_OUTCOME_SUCCESS, transaction)

    async def async_grant(self, product_id: str) -> Transaction:
        """Grant a product outside a purchase flow and notify subscribers."""
        if product_id not in const.LOCAL_PRODUCT_CATALOG:
            raise PurchaseProviderError(f"Unknown product: {product_id}")
        transaction = await self._async_record_grant(product_id)
        self._updates.put_nowait(transaction)
        return transaction

    async def async_revoke(self, product_id: str) -> bool:
        """Remove a grant from the ledger (takes effect on the next session)."""
        if self._grants.pop(product_id, None) is None:
            return False
        await self._async_save()
        return True

    async def async_delete_storage(self) -> None:
        """Remove the grant ledger file."""
        await self._store.async_remove()
        self._grants = {}

    async def current_entitlements(self) -> AsyncIterator[Transaction]:
        """Yield one transaction per granted product."""
        for product_id, grant in list(self._grants.items()):
            yield Transaction(product_id, grant["transaction_id"])

    async def entitlement_updates(self) -> AsyncIterator[Transaction]:
        """Yield transactions as async_grant() records them."""
        while True:
            yield await self._updates.get()

    async def _async_record_grant(self, product_id: str) -> Transaction:
        existing = self._grants.get(product_id)
        if existing is not None:
            return Transaction(product_id, existing["transaction_id"])

        transaction = Transaction(product_id, uuid.uuid4().hex)
        self._grants[product_id] = {
            "transaction_id": transaction.transaction_id,
            "purchase_date": dt_util.utcnow().isoformat(),
        }
        await self._async_save()
        return transaction

    async def _async_save(self) -> None:
        try:
            await self._store.async_save({"grants": self._grants})
        except (OSError, TypeError, ValueError) as err:
            raise PurchaseProviderError(
                f"Failed to write purchase ledger: {err}"
            ) from err
