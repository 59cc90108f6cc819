"""Unit tests for the confirmation state machine."""

from unittest.mock import MagicMock

import mongomock
import pytest

from mongocli.api.confirm.ConfirmationProtocol import ConfirmationProtocol
from mongocli.api.confirm.ConfirmOutcome import ConfirmOutcome
from mongocli.api.confirm.ConfirmState import ConfirmState
from mongocli.api.database.DocumentCollection import DocumentCollection
from mongocli.api.prompt.ScriptedPrompter import ScriptedPrompter
from mongocli.display.Display import Display


@pytest.fixture
def users():
    collection = mongomock.MongoClient()["testdb"]["users"]
    collection.insert_many(
        [
            {"name": "Ann", "status": "inactive"},
            {"name": "Bob", "status": "inactive"},
            {"name": "Cid", "status": "inactive"},
            {"name": "Dee", "status": "active"},
        ]
    )
    return DocumentCollection(collection)


@pytest.fixture
def display():
    return MagicMock(spec=Display)


def _protocol(answers, display, action="delete", **kwargs):
    prompter = ScriptedPrompter(answers)
    return prompter, ConfirmationProtocol(prompter, display, action, **kwargs)


class TestConfirmationProtocol:
    def test_zero_matches_is_nothing_to_do(self, users, display):
        prompter, protocol = _protocol([], display)
        execute = MagicMock()
        result = protocol.run(users, {"status": "missing"}, execute)
        assert result.outcome is ConfirmOutcome.NOTHING_TO_DO
        assert result.match_count == 0
        assert result.states == [ConfirmState.RESOLVED, ConfirmState.PREVIEW]
        execute.assert_not_called()
        assert prompter.asked == []

    def test_multi_delete_requires_exact_phrase(self, users, display):
        prompter, protocol = _protocol(["y", "DELETE"], display)
        execute = MagicMock(return_value=3)
        query_filter = {"status": "inactive"}
        result = protocol.run(users, query_filter, execute)
        assert result.outcome is ConfirmOutcome.EXECUTED
        assert result.execution == 3
        assert result.states == [
            ConfirmState.RESOLVED,
            ConfirmState.PREVIEW,
            ConfirmState.PRIMARY_CONFIRM,
            ConfirmState.ESCALATED_CONFIRM,
            ConfirmState.EXECUTE,
        ]
        execute.assert_called_once()
        assert execute.call_args.args[0] is query_filter

    @pytest.mark.parametrize("typed", ["delete", "DELETE ", " DELETE", "Delete", "DELETE ALL", ""])
    def test_escalation_mismatch_cancels(self, users, display, typed):
        _, protocol = _protocol(["y", typed], display)
        execute = MagicMock()
        result = protocol.run(users, {"status": "inactive"}, execute)
        assert result.outcome is ConfirmOutcome.CANCELLED
        execute.assert_not_called()

    def test_single_match_delete_skips_escalation(self, users, display):
        prompter, protocol = _protocol(["yes"], display)
        execute = MagicMock(return_value=1)
        result = protocol.run(users, {"name": "Dee"}, execute)
        assert result.outcome is ConfirmOutcome.EXECUTED
        assert ConfirmState.ESCALATED_CONFIRM not in result.states
        assert len(prompter.asked) == 1

    @pytest.mark.parametrize("answer", ["n", "", "no"])
    def test_primary_decline_cancels(self, users, display, answer):
        _, protocol = _protocol([answer], display)
        execute = MagicMock()
        result = protocol.run(users, {"status": "inactive"}, execute)
        assert result.outcome is ConfirmOutcome.CANCELLED
        assert result.match_count == 3
        execute.assert_not_called()

    def test_end_of_input_cancels(self, users, display):
        _, protocol = _protocol([], display)
        execute = MagicMock()
        result = protocol.run(users, {"status": "inactive"}, execute)
        assert result.outcome is ConfirmOutcome.CANCELLED
        assert "No answer" in result.reason
        execute.assert_not_called()

    def test_update_uses_primary_confirm_only(self, users, display):
        prompter, protocol = _protocol(["y"], display, action="update")
        execute = MagicMock(return_value={"matched_count": 3, "modified_count": 3})
        result = protocol.run(users, {"status": "inactive"}, execute)
        assert result.outcome is ConfirmOutcome.EXECUTED
        assert ConfirmState.ESCALATED_CONFIRM not in result.states
        assert prompter.asked == ["Do you want to update 3 document(s)?"]

    def test_force_skips_confirmations_but_previews(self, users, display, caplog):
        prompter, protocol = _protocol([], display, force=True)
        execute = MagicMock(return_value=3)
        with caplog.at_level("WARNING", logger="mongocli.confirm"):
            result = protocol.run(users, {"status": "inactive"}, execute)
        assert result.outcome is ConfirmOutcome.EXECUTED
        assert result.states == [ConfirmState.RESOLVED, ConfirmState.PREVIEW, ConfirmState.EXECUTE]
        assert prompter.asked == []
        assert display.json_output.call_count == 3
        assert any("FORCE MODE" in str(call) for call in display.warning.call_args_list)
        assert "FORCE MODE" in caplog.text

    def test_force_rejected_for_update(self, display):
        with pytest.raises(ValueError, match="force"):
            ConfirmationProtocol(ScriptedPrompter(), display, "update", force=True)

    def test_dry_run_stops_after_preview(self, users, display):
        prompter, protocol = _protocol([], display, dry_run=True)
        execute = MagicMock()
        result = protocol.run(users, {"status": "inactive"}, execute)
        assert result.outcome is ConfirmOutcome.DRY_RUN
        assert result.match_count == 3
        assert result.states == [ConfirmState.RESOLVED, ConfirmState.PREVIEW]
        assert prompter.asked == []
        execute.assert_not_called()

    def test_dry_run_wins_over_force(self, users, display):
        _, protocol = _protocol([], display, force=True, dry_run=True)
        execute = MagicMock()
        result = protocol.run(users, {"status": "inactive"}, execute)
        assert result.outcome is ConfirmOutcome.DRY_RUN
        execute.assert_not_called()

    def test_preview_is_read_only(self, users, display):
        _, protocol = _protocol(["n"], display)
        protocol.run(users, {"status": "inactive"}, MagicMock())
        assert users.count_documents({}) == 4
