"""Journal Manager - Append-only journal collection.

Owns the ordered list of journal entries stored under the `journal` record.
Entries are immutable once appended; the only other mutation is removal.
Counter and skill effects of a new entry belong to the ProgressManager, which
calls append() as part of add_journal_entry().
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .. import const
from .base_manager import BaseManager

if TYPE_CHECKING:
    from ..type_defs import JournalEntryData


class JournalManager(BaseManager):
    """Manager for the journal collection."""

    async def async_setup(self) -> None:
        """Nothing to subscribe to; the journal is driven by ProgressManager."""

    @property
    def _entries(self) -> list[JournalEntryData]:
        return self.coordinator.journal

    def append(self, entry: JournalEntryData) -> None:
        """Append an entry at the end of the journal."""
        self._entries.append(entry)
        self.emit(
            const.SIGNAL_SUFFIX_JOURNAL_UPDATED,
            action="added",
            entry_id=entry[const.DATA_JOURNAL_ENTRY_ID],
        )

    def remove(self, entry_id: str) -> bool:
        """Remove the entry with `entry_id`.

        Returns:
            True if an entry was removed, False if no entry has that id.
        """
        for index, entry in enumerate(self._entries):
            if entry[const.DATA_JOURNAL_ENTRY_ID] == entry_id:
                del self._entries[index]
                self.emit(
                    const.SIGNAL_SUFFIX_JOURNAL_UPDATED,
                    action="removed",
                    entry_id=entry_id,
                )
                return True
        const.LOGGER.debug("Journal entry %s not found for removal", entry_id)
        return False

    def list_entries(self) -> list[JournalEntryData]:
        """Return a copy of the journal in insertion order."""
        return list(self._entries)

    def get(self, entry_id: str) -> JournalEntryData | None:
        """Return the entry with `entry_id`, or None."""
        for entry in self._entries:
            if entry[const.DATA_JOURNAL_ENTRY_ID] == entry_id:
                return entry
        return None
