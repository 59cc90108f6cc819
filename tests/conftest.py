"""Shared pytest configuration and fixtures for all tests."""

import json
from collections.abc import Callable, Iterable
from pathlib import Path
from typing import Any

import pytest

from mongocli.api.CommandContext import CommandContext
from mongocli.api.config.CliConfig import CliConfig
from mongocli.api.database._mongomock._client import _get_mongomock_client, _reset_mongomock_client
from mongocli.api.database.Gateway import Gateway
from mongocli.api.prompt.ScriptedPrompter import ScriptedPrompter
from mongocli.api.stats.StatsStore import StatsStore
from mongocli.display.CLIDisplay import CLIDisplay

TEST_DATABASE = "mission-5"


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests of a single module")
    config.addinivalue_line("markers", "cli: tests that drive the Typer app")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/cli/" in path_str:
            item.add_marker(pytest.mark.cli)


# =============================================================================
# Configuration Helpers
# =============================================================================


def mongomock_config_dict() -> dict:
    """Minimal valid configuration using the in-memory backend."""
    return {
        "database": {
            "type": "mongomock",
            "database": TEST_DATABASE,
            "default_collection": "users",
            "data": {},
        },
        "log": {"level": "INFO", "max_bytes": 1024 * 1024, "backup_count": 1},
    }


@pytest.fixture
def mongocli_home(tmp_path: Path, monkeypatch) -> Path:
    """Temporary MONGOCLI_HOME with a mongomock config and an empty in-memory store."""
    home = tmp_path / "mongocli-home"
    home.mkdir()
    (home / "config.json").write_text(json.dumps(mongomock_config_dict(), indent=2), encoding="utf-8")
    monkeypatch.setenv("MONGOCLI_HOME", str(home))
    monkeypatch.delenv("MONGODB_URI", raising=False)
    monkeypatch.delenv("DEFAULT_COLLECTION", raising=False)
    _reset_mongomock_client()
    yield home
    _reset_mongomock_client()
    CommandContext.active = None


@pytest.fixture
def make_context(mongocli_home: Path) -> Callable[..., CommandContext]:
    """Factory for a CommandContext wired to the temp home and a ScriptedPrompter."""

    def _make(answers: Iterable[str] = ()) -> CommandContext:
        config = CliConfig.load()
        stats = StatsStore(mongocli_home / "stats.json")
        return CommandContext(
            config=config,
            stats=stats,
            gateway=Gateway(config.database, stats),
            prompter=ScriptedPrompter(answers),
            display=CLIDisplay(),
        )

    return _make


@pytest.fixture
def seed(mongocli_home: Path) -> Callable[[str, list[dict[str, Any]]], list[Any]]:
    """Insert documents straight into the in-memory store, bypassing the gateway."""

    def _seed(collection: str, documents: list[dict[str, Any]]) -> list[Any]:
        return list(_get_mongomock_client()[TEST_DATABASE][collection].insert_many(documents).inserted_ids)

    return _seed


@pytest.fixture
def store(mongocli_home: Path):
    """Raw mongomock database, for asserting on stored documents."""
    return _get_mongomock_client()[TEST_DATABASE]


def read_stats(home: Path) -> dict:
    return json.loads((home / "stats.json").read_text(encoding="utf-8"))


# =============================================================================
# Test Helpers
# =============================================================================


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result
