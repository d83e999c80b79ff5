"""Shared fixtures for Thunderpick Move tests."""

from collections.abc import Generator
from typing import Any
from zoneinfo import ZoneInfo

import pytest
from homeassistant.core import HomeAssistant
from pytest_homeassistant_custom_component.common import MockConfigEntry

from custom_components.thunderpick_move.const import (
    COORDINATOR,
    DOMAIN,
    PURCHASES_STORAGE_KEY,
    PURCHASES_STORAGE_VERSION,
    STORAGE_KEY,
    STORAGE_VERSION,
    THUNDERPICK_MOVE_TITLE,
)
from custom_components.thunderpick_move.coordinator import ThunderpickMoveCoordinator
from custom_components.thunderpick_move.utils import dt_utils

# pylint: disable=invalid-name
pytest_plugins = "pytest_homeassistant_custom_component"
# pylint: enable=invalid-name


@pytest.fixture(autouse=True)
def auto_enable_custom_integrations(enable_custom_integrations: Any) -> Any:
    """Enable custom integrations in tests."""
    # pylint: disable=unused-argument
    yield


@pytest.fixture(autouse=True)
def reset_default_timezone() -> Generator[None]:
    """Start and end every test with the module timezone set to UTC.

    Integration setup switches dt_utils to the Home Assistant timezone
    (US/Pacific in the test harness); pure tests expect UTC.
    """
    dt_utils.set_default_timezone(ZoneInfo("UTC"))
    yield
    dt_utils.set_default_timezone(ZoneInfo("UTC"))


@pytest.fixture
def mock_config_entry() -> MockConfigEntry:
    """Return a mock config entry."""
    return MockConfigEntry(
        domain=DOMAIN,
        title=THUNDERPICK_MOVE_TITLE,
        data={},
        entry_id="test_entry_id",
    )


@pytest.fixture
def stored_data() -> dict[str, Any] | None:
    """Records present in storage before setup (None = fresh install).

    Override in a test module to seed a scenario.
    """
    return None


@pytest.fixture
def stored_grants() -> dict[str, Any] | None:
    """Local purchase ledger present before setup (None = nothing bought)."""
    return None


@pytest.fixture
async def init_integration(
    hass: HomeAssistant,
    hass_storage: dict[str, Any],
    mock_config_entry: MockConfigEntry,  # pylint: disable=redefined-outer-name
    stored_data: dict[str, Any] | None,  # pylint: disable=redefined-outer-name
    stored_grants: dict[str, Any] | None,  # pylint: disable=redefined-outer-name
) -> MockConfigEntry:
    """Set up the integration with seeded storage.

    Waits for the initial entitlement load, so tests start with
    entitlements loaded.
    """
    if stored_data is not None:
        hass_storage[STORAGE_KEY] = {
            "version": STORAGE_VERSION,
            "minor_version": 1,
            "key": STORAGE_KEY,
            "data": stored_data,
        }
    if stored_grants is not None:
        hass_storage[PURCHASES_STORAGE_KEY] = {
            "version": PURCHASES_STORAGE_VERSION,
            "minor_version": 1,
            "key": PURCHASES_STORAGE_KEY,
            "data": {"grants": stored_grants},
        }

    mock_config_entry.add_to_hass(hass)
    assert await hass.config_entries.async_setup(mock_config_entry.entry_id)
    await hass.async_block_till_done()
    return mock_config_entry


@pytest.fixture
def coordinator(
    hass: HomeAssistant,
    init_integration: MockConfigEntry,  # pylint: disable=redefined-outer-name
) -> ThunderpickMoveCoordinator:
    """Return the coordinator of the loaded entry."""
    return hass.data[DOMAIN][init_integration.entry_id][COORDINATOR]

