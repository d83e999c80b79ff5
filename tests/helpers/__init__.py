"""Test helpers for Thunderpick Move integration tests.

    from tests.helpers import capture_events, load_scenario, stored_records

See setup.py for the scenario file format.
"""

from tests.helpers.setup import (
    Scenario,
    capture_events,
    load_scenario,
    stored_records,
)

__all__ = ["Scenario", "capture_events", "load_scenario", "stored_records"]
