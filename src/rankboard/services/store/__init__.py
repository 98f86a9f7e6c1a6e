"""Record store adapters for the remote leaderboard collection."""

from rankboard.services.store.base import (
    Record,
    RecordStore,
    StoreError,
    StoreResult,
)
from rankboard.services.store.factory import build_store
from rankboard.services.store.memory import MemoryRecordStore
from rankboard.services.store.rest import RestRecordStore

__all__ = [
    "MemoryRecordStore",
    "Record",
    "RecordStore",
    "RestRecordStore",
    "StoreError",
    "StoreResult",
    "build_store",
]
