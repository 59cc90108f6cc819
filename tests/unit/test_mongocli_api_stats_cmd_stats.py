"""Unit tests for stats cmd_stats."""

import json
from unittest.mock import patch

from mongocli.api.database.ConnectionTestResult import ConnectionTestResult
from mongocli.api.document.cmd_add import cmd_add
from mongocli.api.stats.cmd_stats import cmd_stats
from tests.unit.conftest import read_stats, run_cmd


class TestCmdStats:
    def test_reports_counters_and_connection(self, make_context, mongocli_home):
        run_cmd(cmd_add, "orders", data='{"n": 1}', context=make_context())
        result = run_cmd(cmd_stats, context=make_context())
        assert result.success
        assert result.output["stats"]["operations"]["add"] == 1
        assert result.output["stats"]["lastUsedCollection"] == "orders"
        assert result.output["connection"]["success"] is True
        assert result.output["path"] == str(mongocli_home / "stats.json")

    def test_counters_unchanged(self, make_context, mongocli_home):
        run_cmd(cmd_add, "orders", data='{"n": 1}', context=make_context())
        before = read_stats(mongocli_home)["operations"]
        run_cmd(cmd_stats, context=make_context())
        run_cmd(cmd_stats, context=make_context())
        assert read_stats(mongocli_home)["operations"] == before

    def test_snapshot_precedes_connection(self, make_context, mongocli_home):
        result = run_cmd(cmd_stats, context=make_context())
        assert result.output["stats"]["lastConnection"] is None
        assert read_stats(mongocli_home)["lastConnection"] is not None

    def test_connection_failure_marks_failure(self, make_context):
        context = make_context()
        failed = ConnectionTestResult(success=False, message="Database connection test failed", error="refused")
        with patch.object(context.gateway, "test_connection", return_value=failed):
            result = run_cmd(cmd_stats, context=context)
        assert not result.success
        assert result.result == "Statistics loaded; database connection FAILED"
        assert result.output["stats"]["operations"] == {"add": 0, "update": 0, "delete": 0}

    def test_unknown_keys_in_stats_file_survive(self, make_context, mongocli_home):
        path = mongocli_home / "stats.json"
        path.write_text(json.dumps({"operations": {"add": 2, "update": 0, "delete": 0}, "note": "keep"}))
        result = run_cmd(cmd_stats, context=make_context())
        assert result.output["stats"]["note"] == "keep"
        assert read_stats(mongocli_home)["note"] == "keep"
