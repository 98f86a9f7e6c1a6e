"""In-process record store, used when no remote URL is configured."""

from itertools import count

from rankboard.services.store.base import Record, StoreError, StoreResult

OFFLINE_MESSAGE = "Memory store is offline"


class MemoryRecordStore:
    """Record collection held in a dict keyed by assigned integer id.

    Setting ``available`` to False makes every call fail, which stands in
    for an unreachable remote.
    """

    def __init__(self, records: list[Record] | None = None) -> None:
        self.available = True
        self._rows: dict[int, Record] = {}
        self._ids = count(1)
        for record in records or []:
            self._add(record)

    def _add(self, record: Record) -> Record:
        row = {k: v for k, v in record.items() if k != "id"}
        row_id = record.get("id")
        if row_id is None:
            row_id = next(self._ids)
            while row_id in self._rows:
                row_id = next(self._ids)
        row["id"] = row_id
        self._rows[row_id] = row
        return dict(row)

    def _offline(self) -> StoreResult | None:
        if self.available:
            return None
        return StoreResult.failed(StoreError(OFFLINE_MESSAGE))

    @property
    def rows(self) -> list[Record]:
        """Copies of stored rows in insertion order."""
        return [dict(row) for row in self._rows.values()]

    async def list_all(
        self, order_field: str = "score", descending: bool = True
    ) -> StoreResult:
        if failure := self._offline():
            return failure
        rows = sorted(
            self.rows, key=lambda row: row.get(order_field) or 0, reverse=descending
        )
        return StoreResult(records=rows)

    async def insert(self, record: Record) -> StoreResult:
        if failure := self._offline():
            return failure
        return StoreResult(records=[self._add(record)])

    async def delete_by_id(self, record_id: int) -> StoreResult:
        if failure := self._offline():
            return failure
        removed = self._rows.pop(record_id, None)
        return StoreResult(records=[removed] if removed else [])

    async def update_by_id(self, record_id: int, fields: Record) -> StoreResult:
        if failure := self._offline():
            return failure
        row = self._rows.get(record_id)
        if row is None:
            return StoreResult()
        row.update({k: v for k, v in fields.items() if k != "id"})
        return StoreResult(records=[dict(row)])

    async def aclose(self) -> None:
        return None
