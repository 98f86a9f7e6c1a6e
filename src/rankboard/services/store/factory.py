"""Pick a record store from settings."""

import logging

from rankboard.services.config import StoreSettings
from rankboard.services.store.base import RecordStore
from rankboard.services.store.memory import MemoryRecordStore
from rankboard.services.store.rest import RestRecordStore

_log = logging.getLogger(__name__)


def build_store(settings: StoreSettings) -> RecordStore:
    """REST store when a URL is configured, otherwise an in-memory one."""
    if not settings.url:
        _log.warning("No store URL configured; using in-memory store")
        return MemoryRecordStore()
    return RestRecordStore(
        base_url=settings.url,
        table=settings.table,
        api_key=settings.api_key,
        timeout=settings.timeout,
    )
