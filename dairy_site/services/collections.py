"""
Remote collection client.

Thin async wrapper over the Supabase table API (PostgREST). One method call
is one network round trip: no caching, no pagination, no retries. The
blocking Supabase client runs in the thread pool.

Errors surface as ``CollectionError(code, message)``; transport failures
(connection refused, timeouts) carry no code. Single-row queries
that find nothing raise ``NotFoundError`` (code ``PGRST116``), except
``get_single`` where "no rows" is an ordinary ``None`` result.
"""

import logging
from typing import Any, Dict, List, Optional

import httpx
from postgrest.exceptions import APIError
from starlette.concurrency import run_in_threadpool
from supabase import Client

logger = logging.getLogger(__name__)

# PostgREST: "JSON object requested, multiple (or no) rows returned"
NO_ROWS_CODE = "PGRST116"


class CollectionError(Exception):
    """A failed call to the remote table API."""

    def __init__(self, code: Optional[str], message: str):
        super().__init__(message)
        self.code = code
        self.message = message

    def __str__(self) -> str:
        return self.message


class NotFoundError(CollectionError):
    """The targeted row does not exist."""

    def __init__(self, message: str = "No rows found"):
        super().__init__(NO_ROWS_CODE, message)


def _to_collection_error(error: APIError) -> CollectionError:
    code = getattr(error, "code", None)
    message = getattr(error, "message", None) or str(error)
    if code == NO_ROWS_CODE:
        return NotFoundError(message)
    return CollectionError(code, message)


class CollectionClient:
    """CRUD access to the site's tables, keyed by table name and row id."""

    def __init__(self, client: Client):
        self._client = client

    async def _execute(self, table: str, action: str, query):
        try:
            return await run_in_threadpool(query.execute)
        except APIError as e:
            error = _to_collection_error(e)
            if not isinstance(error, NotFoundError):
                logger.warning(f"{action} on '{table}' failed: [{error.code}] {error.message}")
            raise error from e
        except httpx.HTTPError as e:
            logger.error(f"{action} on '{table}' failed: {e}")
            raise CollectionError(None, str(e) or type(e).__name__) from e

    async def list(
        self,
        table: str,
        order_by: Optional[str] = None,
        ascending: bool = True,
        filters: Optional[Dict[str, Any]] = None,
        columns: str = "*",
        limit: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        """Fetch a whole table (optionally filtered by equality), ordered by one column."""
        query = self._client.table(table).select(columns)
        for column, value in (filters or {}).items():
            query = query.eq(column, value)
        if order_by:
            query = query.order(order_by, desc=not ascending)
        if limit:
            query = query.limit(limit)

        response = await self._execute(table, "list", query)
        return response.data or []

    async def get_one(self, table: str, row_id: str) -> Dict[str, Any]:
        """Fetch one row by id. Raises NotFoundError when it does not exist."""
        query = self._client.table(table).select("*").eq("id", row_id).single()
        response = await self._execute(table, "get_one", query)
        if not response.data:
            raise NotFoundError(f"No row '{row_id}' in '{table}'")
        return response.data

    async def get_single(
        self,
        table: str,
        filters: Optional[Dict[str, Any]] = None,
        order_by: Optional[str] = None,
        ascending: bool = True,
    ) -> Optional[Dict[str, Any]]:
        """
        Fetch the one row of a singleton table (or the one matching filters).

        "No rows" is not an error here: it means nothing is configured yet.
        """
        query = self._client.table(table).select("*")
        for column, value in (filters or {}).items():
            query = query.eq(column, value)
        if order_by:
            query = query.order(order_by, desc=not ascending)
        query = query.limit(1).single()

        try:
            response = await self._execute(table, "get_single", query)
        except NotFoundError:
            return None
        return response.data or None

    async def insert(self, table: str, row: Dict[str, Any]) -> Dict[str, Any]:
        query = self._client.table(table).insert(row)
        response = await self._execute(table, "insert", query)
        data = response.data or []
        return data[0] if data else row

    async def update(self, table: str, row_id: str, patch: Dict[str, Any]) -> Dict[str, Any]:
        """Update one row by id. Raises NotFoundError when nothing was updated."""
        query = self._client.table(table).update(patch).eq("id", row_id)
        response = await self._execute(table, "update", query)
        data = response.data or []
        if not data:
            raise NotFoundError(f"No row '{row_id}' in '{table}'")
        return data[0]

    async def remove(self, table: str, row_id: str) -> None:
        """Delete one row by id. Raises NotFoundError when nothing was deleted."""
        query = self._client.table(table).delete().eq("id", row_id)
        response = await self._execute(table, "remove", query)
        if not response.data:
            raise NotFoundError(f"No row '{row_id}' in '{table}'")

    async def count(self, table: str, filters: Optional[Dict[str, Any]] = None) -> int:
        query = self._client.table(table).select("id", count="exact")
        for column, value in (filters or {}).items():
            query = query.eq(column, value)
        response = await self._execute(table, "count", query)
        if response.count is not None:
            return response.count
        return len(response.data or [])

    async def rpc(self, function: str, params: Dict[str, Any]) -> Any:
        query = self._client.rpc(function, params)
        response = await self._execute(function, "rpc", query)
        return response.data
