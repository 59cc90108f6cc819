"""Unit tests for CommandContext."""

from mongocli.api.CommandContext import CommandContext
from mongocli.api.prompt.TyperPrompter import TyperPrompter
from mongocli.display.CLIDisplay import CLIDisplay


class TestCommandContext:
    def test_create_loads_home(self, mongocli_home):
        context = CommandContext.create()
        assert context.config.database.type == "mongomock"
        assert context.stats.path == mongocli_home / "stats.json"
        assert isinstance(context.prompter, TyperPrompter)
        assert isinstance(context.display, CLIDisplay)
        assert CommandContext.active is context

    def test_resolve_collection(self, make_context, monkeypatch):
        context = make_context()
        assert context.resolve_collection("orders") == "orders"
        assert context.resolve_collection(None) == "users"
        monkeypatch.setenv("DEFAULT_COLLECTION", "people")
        assert CommandContext.create().resolve_collection(None) == "people"

    def test_release_active_disconnects(self, make_context):
        context = make_context()
        context.gateway.connect()
        CommandContext.release_active()
        assert not context.gateway.is_connected
        CommandContext.release_active()

    def test_release_without_context(self, mongocli_home):
        CommandContext.active = None
        CommandContext.release_active()
