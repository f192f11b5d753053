"""Tests for key-value store implementations."""

import pytest

from storage import InMemoryStore, KeyValueStore


@pytest.fixture(params=["memory", "sqlite"])
def store(request, memory_store, sqlite_store):
    """Run each test against both store implementations."""
    return memory_store if request.param == "memory" else sqlite_store


class TestKeyValueStore:
    """Behaviour shared by every KeyValueStore."""

    def test_missing_key_returns_none(self, store):
        assert store.get("2024-01") is None

    def test_set_then_get(self, store):
        store.set("2024-01", '{"beginningBalance": 5}')

        assert store.get("2024-01") == '{"beginningBalance": 5}'

    def test_set_overwrites(self, store):
        store.set("lastMonth", "2024-01")
        store.set("lastMonth", "2024-02")

        assert store.get("lastMonth") == "2024-02"

    def test_keys_sorted(self, store):
        store.set("2024-02", "{}")
        store.set("2023-12", "{}")
        store.set("lastMonth", "2024-02")

        assert store.keys() == ["2023-12", "2024-02", "lastMonth"]

    def test_is_key_value_store(self, store):
        assert isinstance(store, KeyValueStore)


class TestInMemoryStore:
    """Tests specific to InMemoryStore."""

    def test_initial_data(self):
        store = InMemoryStore({"2024-01": "{}"})

        assert store.get("2024-01") == "{}"

    def test_initial_data_is_copied(self):
        initial = {"2024-01": "{}"}
        store = InMemoryStore(initial)
        store.set("2024-02", "{}")

        assert "2024-02" not in initial


class TestSqliteStore:
    """Tests specific to SqliteStore."""

    def test_value_persists_in_table(self, sqlite_store, test_db):
        sqlite_store.set("2024-01", "{}")

        row = test_db.execute(
            "SELECT value FROM kv_store WHERE key = ?", ("2024-01",)
        ).fetchone()
        assert row == ("{}",)

    def test_upsert_keeps_single_row(self, sqlite_store, test_db):
        sqlite_store.set("2024-01", "a")
        sqlite_store.set("2024-01", "b")

        count = test_db.execute("SELECT COUNT(*) FROM kv_store").fetchone()[0]
        assert count == 1
