"""Tests for both match score backends."""

import pytest

from internlink.core.config import Settings
from internlink.db import build_match_store
from internlink.db.match_store import InMemoryMatchScoreStore
from internlink.db.sql import SqlMatchScoreStore, create_db_engine


@pytest.fixture
def sql_store():
    store = SqlMatchScoreStore(create_db_engine("sqlite://"))
    store.init_schema()
    yield store
    store.engine.dispose()


@pytest.fixture(params=["memory", "sql"])
def store(request, sql_store):
    if request.param == "memory":
        return InMemoryMatchScoreStore()
    return sql_store


class TestMatchScoreStore:
    """Contract shared by every backend."""

    def test_get_missing_returns_none(self, store):
        assert store.get(1, 1) is None

    def test_upsert_creates(self, store):
        record = store.upsert(1, 2, 67)

        assert record.student_id == 1
        assert record.job_id == 2
        assert record.score == 67
        assert store.count() == 1

    def test_upsert_twice_overwrites(self, store):
        first = store.upsert(1, 2, 40)
        second = store.upsert(1, 2, 80)

        assert store.count() == 1
        assert second.id == first.id
        assert second.calculated_at >= first.calculated_at
        assert store.get(1, 2).score == 80

    def test_ordered_pairs_are_distinct(self, store):
        store.upsert(1, 2, 10)
        store.upsert(2, 1, 20)

        assert store.count() == 2
        assert store.get(1, 2).score == 10
        assert store.get(2, 1).score == 20

    def test_list_for_student_and_job(self, store):
        store.upsert(1, 10, 50)
        store.upsert(1, 11, 60)
        store.upsert(2, 10, 70)

        assert sorted(s.job_id for s in store.list_for_student(1)) == [10, 11]
        assert sorted(s.student_id for s in store.list_for_job(10)) == [1, 2]
        assert store.list_for_student(3) == []

    def test_fractional_scores_survive(self, store):
        store.upsert(5, 6, 12.5)
        assert store.get(5, 6).score == 12.5


class TestSqlMatchScoreStore:
    """SQL specifics."""

    def test_connection(self, sql_store):
        assert sql_store.test_connection() is True

    def test_init_schema_is_idempotent(self, sql_store):
        sql_store.upsert(1, 1, 10)
        sql_store.init_schema()
        assert sql_store.count() == 1


class TestBuildMatchStore:
    """Backend selection from settings."""

    def test_memory_backend(self):
        store = build_match_store(Settings(match_store_backend="memory"))
        assert isinstance(store, InMemoryMatchScoreStore)

    def test_sql_backend(self):
        store = build_match_store(Settings(match_store_backend="sql", database_url="sqlite://"))
        assert isinstance(store, SqlMatchScoreStore)
        assert store.count() == 0
