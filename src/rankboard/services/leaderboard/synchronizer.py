"""LeaderboardSynchronizer - keeps the local snapshot in step with the store.

Every mutation applies locally whatever the store answers, so the view
stays responsive when the backend is down. Store failures are logged and
never raised to the caller.

Operations are coroutines and are not serialized: when two overlap, their
store calls race and their local changes land in the order the awaits
resume. Each operation captures its target Entry before awaiting and
mutates that object afterwards, so an interleaved re-sort cannot redirect
it onto another row.
"""

import logging
from enum import Enum

from rankboard.services.leaderboard.entry import Entry, parse_score, sort_entries
from rankboard.services.store import RecordStore, StoreResult

_log = logging.getLogger(__name__)

ORDER_FIELD = "score"


class AddOutcome(Enum):
    """How add_entry resolved."""

    REJECTED = "rejected"
    SYNCED = "synced"
    LOCAL = "local"


class LeaderboardSynchronizer:
    """Owns the ranked snapshot and the edit-mode flag for one session."""

    def __init__(self, store: RecordStore) -> None:
        self._store = store
        self._entries: list[Entry] = []
        self.loading = True
        self.edit_mode = False

    @property
    def snapshot(self) -> tuple[Entry, ...]:
        """Current ranked entries, highest score first."""
        return tuple(self._entries)

    def toggle_edit_mode(self) -> bool:
        self.edit_mode = not self.edit_mode
        return self.edit_mode

    def _entry_at(self, position: int) -> Entry:
        if not 0 <= position < len(self._entries):
            raise IndexError(
                f"position {position} out of range for {len(self._entries)} entries"
            )
        return self._entries[position]

    def _report(
        self, action: str, result: StoreResult, entry: Entry | None = None
    ) -> bool:
        """Log a failed store call. Returns True when the call succeeded."""
        if result.ok:
            return True
        if entry is None:
            _log.warning("Error %s: %s", action, result.error)
        else:
            _log.warning("Error %s (id=%s): %s", action, entry.id, result.error)
        return False

    def _discard(self, entry: Entry) -> None:
        for index, candidate in enumerate(self._entries):
            if candidate is entry:
                del self._entries[index]
                return

    def _holds(self, entry: Entry) -> bool:
        return any(candidate is entry for candidate in self._entries)

    async def fetch_all(self) -> bool:
        """Replace the snapshot with the store's rows.

        Empty results and failures, malformed rows included, leave the
        snapshot untouched.

        Returns:
            True if the snapshot was replaced.
        """
        try:
            result = await self._store.list_all(ORDER_FIELD, descending=True)
            if not self._report("fetching leaderboard", result):
                return False
            if not result.records:
                _log.debug("Store returned no rows; keeping current snapshot")
                return False

            try:
                entries = [Entry.from_record(record) for record in result.records]
            except (TypeError, ValueError) as e:
                _log.warning("Error fetching leaderboard: malformed row: %s", e)
                return False
            sort_entries(entries)
            self._entries = entries
            return True
        finally:
            self.loading = False

    async def add_entry(self, name: str, raw_score: str) -> AddOutcome:
        """Create an entry from user input.

        Blank names and scores without a leading integer are ignored
        without error. On store success the snapshot is re-fetched so the
        new row carries its id; on failure the entry is kept locally
        without one.
        """
        name = name.strip()
        score = parse_score(raw_score)
        if not name or score is None:
            return AddOutcome.REJECTED

        candidate = Entry(name=name, score=score)
        result = await self._store.insert(candidate.to_record())
        if self._report("adding entry", result):
            await self.fetch_all()
            return AddOutcome.SYNCED

        self._entries.append(candidate)
        sort_entries(self._entries)
        return AddOutcome.LOCAL

    async def remove_entry(self, position: int) -> Entry:
        """Remove the entry at ``position``, whatever the store answers."""
        entry = self._entry_at(position)
        if entry.id is not None:
            result = await self._store.delete_by_id(entry.id)
            self._report("removing entry", result, entry)

        self._discard(entry)
        return entry

    async def update_score(self, position: int, new_score: int) -> Entry:
        """Set the score at ``position`` and re-rank."""
        entry = self._entry_at(position)
        if entry.id is not None:
            result = await self._store.update_by_id(entry.id, {"score": new_score})
            self._report("updating score", result, entry)

        entry.score = new_score
        if self._holds(entry):
            sort_entries(self._entries)
        return entry

    async def update_name(self, position: int, new_name: str) -> Entry:
        """Rename the entry at ``position``. Ranking is unaffected."""
        entry = self._entry_at(position)
        if entry.id is not None:
            result = await self._store.update_by_id(entry.id, {"name": new_name})
            self._report("updating name", result, entry)

        entry.name = new_name
        return entry
