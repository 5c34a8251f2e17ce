# tests/test_queries.py
from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from app.core.database import SessionLocal
from app.core.errors import PersistenceError
from app.main import app
from app.query.models import SupportQuery
from app.query.repository import InMemoryQueryRepository, SqlQueryRepository, get_query_repository
from app.query.services import parse_query_id


def test_create_query_defaults_to_open(client):
    r = client.post("/api/query/new", json={"issue": "Damaged box", "orderId": "ORD-1"})
    assert r.status_code == 200
    data = r.json()
    assert data["issue"] == "Damaged box"
    assert data["orderId"] == "ORD-1"
    assert data["status"] == "open"
    assert isinstance(data["id"], int)


def test_create_assigns_unique_ids(client):
    a = client.post("/api/query/new", json={"issue": "A", "orderId": "ORD-2"}).json()
    b = client.post("/api/query/new", json={"issue": "B", "orderId": "ORD-2"}).json()
    assert a["id"] != b["id"]


def test_update_status_keeps_other_fields(client):
    created = client.post("/api/query/new", json={"issue": "Late delivery", "orderId": "ORD-3"}).json()

    r = client.put(f"/api/query/update/{created['id']}", json={"status": "resolved"})
    assert r.status_code == 200
    data = r.json()
    assert data["id"] == created["id"]
    assert data["status"] == "resolved"
    assert data["issue"] == "Late delivery"
    assert data["orderId"] == "ORD-3"


def test_update_status_is_idempotent(client):
    created = client.post("/api/query/new", json={"issue": "Wrong label", "orderId": "ORD-4"}).json()
    url = f"/api/query/update/{created['id']}"

    first = client.put(url, json={"status": "in-progress"})
    second = client.put(url, json={"status": "in-progress"})
    assert first.status_code == second.status_code == 200
    assert first.json() == second.json()


def test_any_status_string_is_accepted(client):
    created = client.post("/api/query/new", json={"issue": "Customs hold", "orderId": "ORD-5"}).json()
    r = client.put(f"/api/query/update/{created['id']}", json={"status": "waiting on broker"})
    assert r.status_code == 200
    assert r.json()["status"] == "waiting on broker"

    # and back again, no transition rules
    r2 = client.put(f"/api/query/update/{created['id']}", json={"status": "open"})
    assert r2.json()["status"] == "open"


def test_update_missing_query_returns_404(client):
    r = client.put("/api/query/update/9999999", json={"status": "resolved"})
    assert r.status_code == 404
    assert r.json() == {"message": "Query not found"}


def test_create_validation_errors(client):
    # missing orderId
    assert client.post("/api/query/new", json={"issue": "no order"}).status_code == 422
    # missing issue
    assert client.post("/api/query/new", json={"orderId": "ORD-6"}).status_code == 422
    # empty strings
    assert client.post("/api/query/new", json={"issue": "", "orderId": ""}).status_code == 422


def test_update_requires_status(client):
    created = client.post("/api/query/new", json={"issue": "X", "orderId": "ORD-7"}).json()
    r = client.put(f"/api/query/update/{created['id']}", json={})
    assert r.status_code == 422


class TestInMemoryBackend:
    @pytest.fixture
    def repo(self, client):
        repo = InMemoryQueryRepository()
        app.dependency_overrides[get_query_repository] = lambda: repo
        return repo

    def test_create_and_update(self, client, repo):
        created = client.post("/api/query/new", json={"issue": "Damaged box", "orderId": "ORD-1"}).json()
        assert created == {"id": 1, "issue": "Damaged box", "orderId": "ORD-1", "status": "open"}

        r = client.put("/api/query/update/1", json={"status": "resolved"})
        assert r.json()["status"] == "resolved"
        assert repo.get(1).status == "resolved"

    def test_missing_id_leaves_collection_unchanged(self, client, repo):
        client.post("/api/query/new", json={"issue": "A", "orderId": "ORD-1"})

        r = client.put("/api/query/update/2", json={"status": "resolved"})
        assert r.status_code == 404
        assert len(repo) == 1
        assert repo.get(1).status == "open"


def test_persistence_failure_returns_500(client):
    class BrokenRepository:
        def create(self, issue, order_id):
            raise PersistenceError("database is locked")

    app.dependency_overrides[get_query_repository] = lambda: BrokenRepository()
    r = client.post("/api/query/new", json={"issue": "A", "orderId": "ORD-1"})
    assert r.status_code == 500
    assert r.json() == {"error": "database is locked"}


def test_id_too_large_for_database_returns_404(client):
    r = client.put("/api/query/update/99999999999999999999", json={"status": "resolved"})
    assert r.status_code == 404
    assert r.json() == {"message": "Query not found"}


@pytest.mark.parametrize("query_id", ["abc", "0", "-3", "1.5"])
def test_unparseable_id_returns_404(client, query_id):
    r = client.put(f"/api/query/update/{query_id}", json={"status": "resolved"})
    assert r.status_code == 404
    assert r.json() == {"message": "Query not found"}


def test_parse_query_id():
    assert parse_query_id("42") == 42
    assert parse_query_id("abc") is None
    assert parse_query_id("0") is None
    assert parse_query_id(str(2**63)) is None


class TestSqlCommitFailure:
    def use_failing_session(self):
        db = SessionLocal()
        db.commit = MagicMock(side_effect=OperationalError("COMMIT", {}, Exception("disk I/O error")))
        db.rollback = MagicMock(wraps=db.rollback)
        app.dependency_overrides[get_query_repository] = lambda: SqlQueryRepository(db)
        return db

    def test_create_rolls_back_and_returns_500(self, client):
        db = self.use_failing_session()
        try:
            r = client.post("/api/query/new", json={"issue": "A", "orderId": "ORD-1"})
            assert r.status_code == 500
            assert "disk I/O error" in r.json()["error"]
            db.rollback.assert_called_once()
        finally:
            db.close()

    def test_update_rolls_back_and_returns_500(self, client):
        created = client.post("/api/query/new", json={"issue": "B", "orderId": "ORD-2"}).json()

        db = self.use_failing_session()
        try:
            r = client.put(f"/api/query/update/{created['id']}", json={"status": "resolved"})
            assert r.status_code == 500
            assert "disk I/O error" in r.json()["error"]
            db.rollback.assert_called_once()
        finally:
            db.close()

        check = SessionLocal()
        try:
            assert check.get(SupportQuery, created["id"]).status == "open"
        finally:
            check.close()
