import os
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
src_dir = ROOT / "src"
api_dir = src_dir / "api"
for path in (str(api_dir), str(src_dir)):
    if path not in sys.path:
        sys.path.insert(0, path)

os.environ.setdefault("AWS_REGION", "us-west-1")
os.environ.setdefault("SUPABASE_TABLE", "news_posts")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from dotenv import load_dotenv  # noqa: E402

# Load .env before importing newsroom modules when available
load_dotenv()

from postgrest.exceptions import APIError  # noqa: E402


NO_OVERRIDE = object()


class FakeResponse:
    def __init__(self, data):
        self.data = data


class FakeQuery:
    def __init__(self, db, table):
        self._db = db
        self._table = table
        self._op = "select"
        self._payload = None
        self._filters = []
        self._order = None

    def select(self, *_columns):
        return self

    def order(self, column, desc=False):
        self._order = (column, desc)
        return self

    def insert(self, row):
        self._op, self._payload = "insert", row
        return self

    def update(self, patch):
        self._op, self._payload = "update", patch
        return self

    def delete(self):
        self._op = "delete"
        return self

    def eq(self, column, value):
        self._filters.append((column, value))
        return self

    def execute(self):
        self._db.calls.append((self._table, self._op, self._payload, list(self._filters)))
        if self._db.error is not None:
            raise self._db.error
        if self._op == "select":
            if self._db.raw_data is not NO_OVERRIDE:
                return FakeResponse(self._db.raw_data)
            rows = [dict(r) for r in self._db.rows]
            if self._order:
                column, desc = self._order
                rows.sort(key=lambda r: r.get(column) or "", reverse=desc)
            return FakeResponse(rows)
        if self._op == "insert":
            row = dict(self._payload)
            row.setdefault("id", self._db.next_id())
            row.setdefault("created_at", "2024-01-01T00:00:00+00:00")
            row.setdefault("updated_at", "2024-01-01T00:00:00+00:00")
            self._db.rows.append(row)
            return FakeResponse([dict(row)])
        matched = [r for r in self._db.rows if all(r.get(c) == v for c, v in self._filters)]
        if self._op == "update":
            for row in matched:
                row.update(self._payload)
            return FakeResponse([dict(r) for r in matched])
        self._db.rows = [r for r in self._db.rows if r not in matched]
        return FakeResponse([dict(r) for r in matched])


class FakeRpc:
    def __init__(self, db, function, params):
        self._db = db
        self._function = function
        self._params = params

    def execute(self):
        self._db.calls.append((self._function, "rpc", self._params, []))
        if self._db.error is not None:
            raise self._db.error
        self._db.rows = []
        for row in self._params["rows"]:
            stored = dict(row)
            stored.setdefault("id", self._db.next_id())
            self._db.rows.append(stored)
        return FakeResponse(len(self._db.rows))


class FakeSupabase:
    """In-memory stand-in for the subset of the supabase client the store uses."""

    def __init__(self, rows=None):
        self.rows = [dict(r) for r in (rows or [])]
        self.calls = []
        self.error = None
        self.raw_data = NO_OVERRIDE
        self._sequence = max([r.get("id", 0) for r in self.rows] or [0])

    def next_id(self):
        self._sequence += 1
        return self._sequence

    def table(self, name):
        return FakeQuery(self, name)

    def rpc(self, function, params):
        return FakeRpc(self, function, params)

    def fail_with(self, message="boom"):
        self.error = APIError({"message": message, "code": "500", "details": "", "hint": ""})


@pytest.fixture
def fake_supabase():
    return FakeSupabase()


SAMPLE_ROW = {
    "id": 7,
    "title": "주일 예배 안내",
    "date": "2024-03-03",
    "category": "공지사항",
    "content": "본문",
    "file_url": None,
    "file_name": None,
    "file_size": None,
    "views": 3,
    "is_new": True,
    "show_on_home": False,
    "image_url": "https://cdn.example/img.png",
    "created_at": "2024-03-01T00:00:00+00:00",
    "updated_at": "2024-03-01T00:00:00+00:00",
}


@pytest.fixture
def sample_row():
    return dict(SAMPLE_ROW)
