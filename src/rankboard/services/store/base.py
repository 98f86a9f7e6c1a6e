"""Record store protocol and the result shape every adapter returns."""

from dataclasses import dataclass, field
from typing import Any, Protocol

Record = dict[str, Any]


class StoreError(Exception):
    """Remote store unavailable or rejected the request."""

    def __init__(self, message: str, status_code: int = 0) -> None:
        super().__init__(message)
        self.status_code = status_code


@dataclass
class StoreResult:
    """Outcome of one adapter call.

    Adapters never raise across the boundary; callers check ``error``.
    """

    records: list[Record] = field(default_factory=list)
    error: StoreError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def failed(cls, error: StoreError) -> "StoreResult":
        return cls(error=error)


class RecordStore(Protocol):
    """A named record collection reachable over the network."""

    async def list_all(
        self, order_field: str = "score", descending: bool = True
    ) -> StoreResult: ...

    async def insert(self, record: Record) -> StoreResult: ...

    async def delete_by_id(self, record_id: int) -> StoreResult: ...

    async def update_by_id(self, record_id: int, fields: Record) -> StoreResult: ...

    async def aclose(self) -> None: ...
