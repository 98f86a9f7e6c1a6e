"""PostgREST record store (the dialect Supabase serves under /rest/v1).

Uses httpx to talk to the table endpoint directly; no Supabase SDK required.
"""

import logging

import httpx

from rankboard.services.store.base import Record, StoreError, StoreResult

_log = logging.getLogger(__name__)

REST_PREFIX = "/rest/v1"
DEFAULT_TIMEOUT = 10.0


class RestRecordStore:
    """Async HTTP adapter for one PostgREST table."""

    def __init__(
        self,
        base_url: str,
        table: str,
        api_key: str = "",
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        headers = {"Accept": "application/json"}
        if api_key:
            headers["apikey"] = api_key
            headers["Authorization"] = f"Bearer {api_key}"

        self._table = table
        self._client = httpx.AsyncClient(
            base_url=base_url.rstrip("/") + REST_PREFIX,
            headers=headers,
            timeout=timeout,
            transport=transport,
        )

    @property
    def table(self) -> str:
        return self._table

    async def aclose(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()

    @staticmethod
    def _extract_error_message(response: httpx.Response) -> str:
        """Extract human-readable message from a PostgREST error response.

        Avoids leaking raw response bodies that may contain internal details.
        """
        try:
            return response.json().get("message", f"HTTP {response.status_code}")
        except (ValueError, AttributeError):
            return f"HTTP {response.status_code}"

    async def _request(self, method: str, **kwargs) -> list[Record]:
        """Make a table request and return the rows, raising StoreError on failure."""
        try:
            response = await self._client.request(method, f"/{self._table}", **kwargs)
        except httpx.HTTPError as exc:
            raise StoreError(f"{type(exc).__name__}: {exc}") from exc

        if response.status_code >= 400:
            message = self._extract_error_message(response)
            raise StoreError(
                f"Store error {response.status_code}: {message}",
                status_code=response.status_code,
            )
        if response.status_code == 204 or not response.content:
            return []

        try:
            data = response.json()
        except ValueError as exc:
            raise StoreError("Store returned malformed JSON") from exc
        if isinstance(data, dict):
            return [data]
        return list(data)

    async def _call(self, method: str, **kwargs) -> StoreResult:
        try:
            return StoreResult(records=await self._request(method, **kwargs))
        except StoreError as exc:
            _log.debug("%s /%s failed: %s", method, self._table, exc)
            return StoreResult.failed(exc)

    async def list_all(
        self, order_field: str = "score", descending: bool = True
    ) -> StoreResult:
        direction = "desc" if descending else "asc"
        return await self._call(
            "GET", params={"select": "*", "order": f"{order_field}.{direction}"}
        )

    async def insert(self, record: Record) -> StoreResult:
        return await self._call(
            "POST",
            json=[record],
            headers={"Prefer": "return=representation"},
        )

    async def delete_by_id(self, record_id: int) -> StoreResult:
        return await self._call("DELETE", params={"id": f"eq.{record_id}"})

    async def update_by_id(self, record_id: int, fields: Record) -> StoreResult:
        return await self._call(
            "PATCH",
            params={"id": f"eq.{record_id}"},
            json=fields,
        )
