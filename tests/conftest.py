"""Shared test fixtures for rankboard tests."""

import pytest

from rankboard.services.store import MemoryRecordStore, Record, StoreError, StoreResult


class ScriptedStore(MemoryRecordStore):
    """Memory store that can fail chosen operations and records every call."""

    def __init__(self, records: list[Record] | None = None) -> None:
        super().__init__(records)
        self.failing: set[str] = set()
        self.calls: list[tuple] = []

    def _scripted_failure(self, operation: str) -> StoreResult | None:
        if operation in self.failing:
            return StoreResult.failed(StoreError(f"{operation} unavailable"))
        return None

    async def list_all(
        self, order_field: str = "score", descending: bool = True
    ) -> StoreResult:
        self.calls.append(("list_all", order_field, descending))
        return self._scripted_failure("list_all") or await super().list_all(
            order_field, descending
        )

    async def insert(self, record: Record) -> StoreResult:
        self.calls.append(("insert", record))
        return self._scripted_failure("insert") or await super().insert(record)

    async def delete_by_id(self, record_id: int) -> StoreResult:
        self.calls.append(("delete_by_id", record_id))
        return self._scripted_failure("delete_by_id") or await super().delete_by_id(
            record_id
        )

    async def update_by_id(self, record_id: int, fields: Record) -> StoreResult:
        self.calls.append(("update_by_id", record_id, fields))
        return self._scripted_failure("update_by_id") or await super().update_by_id(
            record_id, fields
        )


@pytest.fixture
def sample_rows() -> list[Record]:
    """Two persisted rows, already ranked."""
    return [
        {"id": 1, "name": "Ann", "score": 80},
        {"id": 2, "name": "Bo", "score": 60},
    ]


@pytest.fixture
def store(sample_rows: list[Record]) -> ScriptedStore:
    return ScriptedStore(sample_rows)


@pytest.fixture
def empty_store() -> ScriptedStore:
    return ScriptedStore()

