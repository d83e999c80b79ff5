"""Stateful managers for Thunderpick Move.

- progress_manager: userStats mutations and derived read models
- journal_manager: the append-only journal collection
- entitlement_manager: owned products, catalog and theme access
- settings_manager: theme selection, onboarding and the legacy premium flag
"""

from .base_manager import BaseManager, get_event_signal
from .entitlement_manager import EntitlementManager
from .journal_manager import JournalManager
from .progress_manager import ProgressManager
from .settings_manager import SettingsManager

__all__ = [
    "BaseManager",
    "EntitlementManager",
    "JournalManager",
    "ProgressManager",
    "SettingsManager",
    "get_event_signal",
]
