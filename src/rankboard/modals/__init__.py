"""Modals package - overlay screens.

Modals:
- EditEntryModal: Edit one leaderboard row
"""

from rankboard.modals.edit_entry_modal import EditEntryModal, EntryEdit

__all__ = ["EditEntryModal", "EntryEdit"]
