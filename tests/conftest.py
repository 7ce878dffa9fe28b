import uuid
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Optional
from unittest.mock import MagicMock

import pytest
from fastapi import Request
from fastapi.testclient import TestClient

from dairy_site.api import deps
from dairy_site.main import app
from dairy_site.services.auth import AdminUser
from dairy_site.services.collections import CollectionClient, CollectionError, NotFoundError

ADMIN = AdminUser(id="00000000-0000-0000-0000-000000000001", email="admin@arib.example")

_EPOCH = datetime(2026, 1, 1, tzinfo=timezone.utc)


# --- In-memory backends ---

class FakeCollectionClient:
    """Same interface as CollectionClient, rows kept in dicts."""

    def __init__(self, tables: Optional[Dict[str, List[Dict[str, Any]]]] = None):
        self.tables: Dict[str, List[Dict[str, Any]]] = {}
        self.calls: List[tuple] = []
        self.failing: set = set()
        self._clock = 0
        for table, rows in (tables or {}).items():
            for row in rows:
                self._store(table, dict(row))

    def _tick(self) -> str:
        self._clock += 1
        return (_EPOCH + timedelta(minutes=self._clock)).isoformat()

    def _store(self, table: str, row: Dict[str, Any]) -> Dict[str, Any]:
        row.setdefault("id", str(uuid.uuid4()))
        row.setdefault("created_at", self._tick())
        self.tables.setdefault(table, []).append(row)
        return row

    def _check(self, action: str, table: str) -> None:
        self.calls.append((action, table))
        if action in self.failing or table in self.failing:
            raise CollectionError("500", f"{action} on {table} failed")

    def _rows(self, table: str, filters: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
        rows = self.tables.get(table, [])
        for column, value in (filters or {}).items():
            rows = [row for row in rows if row.get(column) == value]
        return rows

    def _find(self, table: str, row_id: str) -> Dict[str, Any]:
        for row in self.tables.get(table, []):
            if str(row["id"]) == str(row_id):
                return row
        raise NotFoundError(f"No row '{row_id}' in '{table}'")

    async def list(self, table, order_by=None, ascending=True, filters=None, columns="*", limit=None):
        self._check("list", table)
        rows = [dict(row) for row in self._rows(table, filters)]
        if order_by:
            present = [row for row in rows if row.get(order_by) is not None]
            missing = [row for row in rows if row.get(order_by) is None]
            present.sort(key=lambda row: row[order_by], reverse=not ascending)
            rows = present + missing
        return rows[:limit] if limit else rows

    async def get_one(self, table, row_id):
        self._check("get_one", table)
        return dict(self._find(table, row_id))

    async def get_single(self, table, filters=None, order_by=None, ascending=True):
        self._check("get_single", table)
        rows = self._rows(table, filters)
        return dict(rows[0]) if rows else None

    async def insert(self, table, row):
        self._check("insert", table)
        return dict(self._store(table, dict(row)))

    async def update(self, table, row_id, patch):
        self._check("update", table)
        row = self._find(table, row_id)
        row.update(patch)
        return dict(row)

    async def remove(self, table, row_id):
        self._check("remove", table)
        row = self._find(table, row_id)
        self.tables[table].remove(row)

    async def count(self, table, filters=None):
        self._check("count", table)
        return len(self._rows(table, filters))

    async def rpc(self, function, params):
        """Mirrors the set_active_row SQL function of migration 002."""
        self._check("rpc", function)
        assert function == "set_active_row"
        table = params["table_name"]
        try:
            target = self._find(table, params["target_id"])
        except NotFoundError:
            return False
        for row in self.tables.get(table, []):
            row["is_active"] = False
        target["is_active"] = True
        return True

    def active_ids(self, table: str) -> List[str]:
        return [row["id"] for row in self.tables.get(table, []) if row.get("is_active")]


class FakeStorage:
    def __init__(self):
        self.uploads: List[Dict[str, Any]] = []

    async def upload_image(self, file_content, original_filename, folder, mime_type=None, max_width=None):
        path = f"{folder}/{len(self.uploads) + 1}-{original_filename}"
        self.uploads.append({"path": path, "size": len(file_content), "max_width": max_width})
        return f"https://cdn.example/site-assets/{path}"


class RecordingNotifier:
    def __init__(self):
        self.toasts: List[Dict[str, Any]] = []

    def notify(self, level, message, description=None):
        self.toasts.append({"level": level, "message": message, "description": description})

    def levels(self) -> List[str]:
        return [toast["level"] for toast in self.toasts]


def make_query_client(data=None, count=None, error=None):
    """Real CollectionClient over a Supabase client whose query builder chains onto itself."""
    query = MagicMock()
    for method in ("select", "eq", "order", "limit", "single", "insert", "update", "delete"):
        getattr(query, method).return_value = query
    if error is not None:
        query.execute.side_effect = error
    else:
        query.execute.return_value = MagicMock(data=data, count=count)

    backend = MagicMock()
    backend.table.return_value = query
    backend.rpc.return_value = query
    return CollectionClient(backend), backend, query


# --- Fixtures ---

@pytest.fixture
def collections():
    return FakeCollectionClient()


@pytest.fixture
def storage():
    return FakeStorage()


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def backend():
    return MagicMock()


def _override_backends(collections, storage, backend):
    app.dependency_overrides[deps.get_collection_client] = lambda: collections
    app.dependency_overrides[deps.get_storage] = lambda: storage
    app.dependency_overrides[deps.get_backend] = lambda: backend


@pytest.fixture
def client(collections, storage, backend):
    """Anonymous visitor."""
    _override_backends(collections, storage, backend)
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def admin_client(collections, storage, backend):
    """Signed-in back office user."""

    def signed_in(request: Request) -> AdminUser:
        request.state.admin = ADMIN
        return ADMIN

    _override_backends(collections, storage, backend)
    app.dependency_overrides[deps.get_current_admin] = signed_in
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


# --- Row factories ---

def localized_row(**fields) -> Dict[str, Any]:
    """``title="Milk"`` -> title_en/title_ar/title_fr all set to "Milk"."""
    row: Dict[str, Any] = {}
    for name, value in fields.items():
        if isinstance(value, dict):
            for language, text in value.items():
                row[f"{name}_{language}"] = text
        else:
            for language in ("en", "ar", "fr"):
                row[f"{name}_{language}"] = value
    return row
