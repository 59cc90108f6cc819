"""Unit tests for the statistics store."""

import json

import pytest

from mongocli.api.stats.StatsRecord import StatsRecord
from mongocli.api.stats.StatsStore import StatsStore


class TestStatsStore:
    def test_missing_file_created_with_defaults(self, tmp_path):
        path = tmp_path / "stats.json"
        StatsStore(path)
        assert json.loads(path.read_text()) == {
            "lastUsedCollection": "users",
            "operations": {"add": 0, "update": 0, "delete": 0},
            "lastConnection": None,
        }

    def test_counters_are_monotonic_and_persisted(self, tmp_path):
        path = tmp_path / "stats.json"
        store = StatsStore(path)
        for _ in range(3):
            store.record_success("add", "people")
        store.record_success("delete", "people")

        reloaded = StatsStore(path).get_stats()
        assert reloaded.operations.add == 3
        assert reloaded.operations.delete == 1
        assert reloaded.operations.update == 0
        assert reloaded.last_used_collection == "people"

    def test_unknown_operation_rejected(self, tmp_path):
        store = StatsStore(tmp_path / "stats.json")
        with pytest.raises(ValueError, match="Unknown operation"):
            store.record_success("find", "users")  # type: ignore[arg-type]
        assert store.get_stats().last_used_collection == "users"

    def test_record_connection(self, tmp_path):
        path = tmp_path / "stats.json"
        StatsStore(path).record_connection("2024-01-01T00:00:00+00:00")
        assert json.loads(path.read_text())["lastConnection"] == "2024-01-01T00:00:00+00:00"

    def test_record_connection_defaults_to_now(self, tmp_path):
        store = StatsStore(tmp_path / "stats.json")
        store.record_connection()
        assert store.get_stats().last_connection is not None

    def test_corrupt_file_falls_back_to_defaults(self, tmp_path, caplog):
        path = tmp_path / "stats.json"
        path.write_text("{not json")
        with caplog.at_level("WARNING", logger="mongocli.stats"):
            store = StatsStore(path)
        assert store.get_stats() == StatsRecord()
        assert "Could not load stats file" in caplog.text

    def test_negative_counter_in_file_rejected(self, tmp_path):
        path = tmp_path / "stats.json"
        path.write_text(json.dumps({"operations": {"add": -1, "update": 0, "delete": 0}}))
        assert StatsStore(path).get_stats().operations.add == 0

    def test_unknown_keys_preserved(self, tmp_path):
        path = tmp_path / "stats.json"
        path.write_text(json.dumps({"lastUsedCollection": "orders", "theme": "dark"}))
        store = StatsStore(path)
        store.record_success("update", "orders")
        saved = json.loads(path.read_text())
        assert saved["theme"] == "dark"
        assert saved["operations"]["update"] == 1

    def test_get_stats_returns_copy(self, tmp_path):
        store = StatsStore(tmp_path / "stats.json")
        snapshot = store.get_stats()
        store.record_success("add", "users")
        assert snapshot.operations.add == 0

    def test_write_failure_is_logged_not_raised(self, tmp_path, caplog):
        blocker = tmp_path / "blocker"
        blocker.write_text("")
        with caplog.at_level("ERROR", logger="mongocli.stats"):
            store = StatsStore(blocker / "stats.json")
            store.record_success("add", "users")
        assert store.get_stats().operations.add == 1
        assert "Failed to save stats file" in caplog.text
