from __future__ import annotations

from typing import Any, Dict, List, Optional

import httpx
from postgrest.exceptions import APIError

from ..domain.errors import StoreReadError, StoreWriteError
from ..presentation.logging import get_logger


_LOGGER = get_logger("newsroom.store")
_STORE_ERRORS = (APIError, httpx.HTTPError)


class SupabaseNewsStore:
    """Single-call operations against the news table. Each method issues exactly one request."""

    def __init__(self, client, table_name: str, replace_function: str) -> None:
        self._client = client
        self._table_name = table_name
        self._replace_function = replace_function

    def list_rows(self) -> Any:
        try:
            response = self._table().select("*").order("date", desc=True).execute()
        except _STORE_ERRORS as exc:
            _LOGGER.error("Failed to list news posts", exc_info=True, extra={"table": self._table_name})
            raise StoreReadError() from exc
        return response.data

    def insert_row(self, row: Dict[str, Any]) -> Dict[str, Any]:
        try:
            response = self._table().insert(row).execute()
        except _STORE_ERRORS as exc:
            _LOGGER.error("Failed to insert news post", exc_info=True, extra={"table": self._table_name})
            raise StoreWriteError() from exc
        rows = response.data or []
        if not rows:
            raise StoreWriteError("Write failed: no row returned")
        return rows[0]

    def update_row(self, post_id: int, patch: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        try:
            response = self._table().update(patch).eq("id", post_id).execute()
        except _STORE_ERRORS as exc:
            _LOGGER.error("Failed to update news post", exc_info=True, extra={"id": post_id})
            raise StoreWriteError() from exc
        rows = response.data or []
        return rows[0] if rows else None

    def delete_row(self, post_id: int) -> None:
        try:
            self._table().delete().eq("id", post_id).execute()
        except _STORE_ERRORS as exc:
            _LOGGER.error("Failed to delete news post", exc_info=True, extra={"id": post_id})
            raise StoreWriteError() from exc

    def replace_rows(self, rows: List[Dict[str, Any]]) -> int:
        # The Postgres function swaps the whole table inside one transaction.
        try:
            self._client.rpc(self._replace_function, {"rows": rows}).execute()
        except _STORE_ERRORS as exc:
            _LOGGER.error("Failed to replace news posts", exc_info=True, extra={"count": len(rows)})
            raise StoreWriteError() from exc
        return len(rows)

    def _table(self):
        return self._client.table(self._table_name)
