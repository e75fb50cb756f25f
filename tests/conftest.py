import pytest

from core.models import QuizAnswers, Trek
from core.resolver import DataResolver
from core.store import QueryError, RemoteStore


class FakeStore(RemoteStore):
    """In-memory RemoteStore.

    `fail` maps an operation name, or an (operation, table) pair, to the
    exception that call should raise.
    """

    def __init__(self, tables=None, fail=None):
        self.tables = {name: [dict(r) for r in rows] for name, rows in (tables or {}).items()}
        self.fail = dict(fail or {})
        self.calls = []
        self.uploads = []

    def _maybe_fail(self, op, table):
        exc = self.fail.get((op, table)) or self.fail.get(op)
        if exc is not None:
            raise exc

    def select(self, table, columns="*", filters=None, order=None, descending=False):
        self.calls.append(("select", table, filters))
        self._maybe_fail("select", table)
        rows = [dict(r) for r in self.tables.get(table, [])]
        for column, value in (filters or {}).items():
            rows = [r for r in rows if r.get(column) == value]
        if order and all(order in r for r in rows):
            rows.sort(key=lambda r: r[order], reverse=descending)
        return rows

    def insert(self, table, row):
        self.calls.append(("insert", table, row))
        self._maybe_fail("insert", table)
        rows = self.tables.setdefault(table, [])
        if row.get("id") is not None and any(r.get("id") == row["id"] for r in rows):
            raise QueryError("duplicate key value violates unique constraint", code="23505")
        saved = dict(row)
        saved.setdefault("id", f"{table}-{len(rows) + 1}")
        rows.append(saved)
        return dict(saved)

    def upsert(self, table, rows, on_conflict="id"):
        self.calls.append(("upsert", table, rows))
        self._maybe_fail("upsert", table)
        existing = self.tables.setdefault(table, [])
        for row in rows:
            existing[:] = [r for r in existing if r.get(on_conflict) != row.get(on_conflict)]
            existing.append(dict(row))

    def upload(self, bucket, name, data, content_type):
        self.calls.append(("upload", bucket, name))
        self._maybe_fail("upload", bucket)
        self.uploads.append((bucket, name, data, content_type))
        return self.public_url(bucket, name)

    def remove(self, bucket, name):
        self.calls.append(("remove", bucket, name))
        self._maybe_fail("remove", bucket)
        self.uploads[:] = [u for u in self.uploads if (u[0], u[1]) != (bucket, name)]

    def public_url(self, bucket, name):
        return f"https://store.test/storage/{bucket}/{name}"

    def ops(self, op):
        return [c for c in self.calls if c[0] == op]


@pytest.fixture
def store():
    return FakeStore()


@pytest.fixture
def resolver(store):
    return DataResolver(store)


@pytest.fixture
def answers():
    return QuizAnswers(days=9, priority="Mountains", budget="Mid-range",
                       fitness="Moderate", style="solo")


def make_trek(**overrides) -> Trek:
    fields = dict(
        id="test-trek",
        name="Test Trek",
        description="A trek used in tests.",
        min_days=7,
        max_days=10,
        priority_type=("Mountains",),
        budget_level="Mid-range",
        fitness_required="Moderate",
        ideal_for=("solo", "group"),
    )
    fields.update(overrides)
    return Trek(**fields)


def destination_row(**overrides) -> dict:
    row = {
        "id": "rara-lake",
        "name": "Rara Lake",
        "province_id": "karnali",
        "district_id": "mugu",
        "category": "Wildlife",
        "best_months": ["April", "May"],
        "description": "Nepal's largest lake.",
        "cultural_significance": "Sacred lake.",
        "image": "/rara.jpg",
        "coordinates": {"lat": 29.55, "lng": 82.08},
        "elevation": "2,990 m",
        "weather_condition": "Clear",
        "temperature": 12,
    }
    row.update(overrides)
    return row
