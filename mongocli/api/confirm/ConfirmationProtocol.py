"""Confirmation state machine gating delete and update."""

from collections.abc import Callable
from typing import Any, Literal

from ...display.Display import Display
from ...utils.get_logger import get_logger
from ..database.DocumentCollection import DocumentCollection
from ..database.to_jsonable import to_jsonable
from ..OperationCancelled import OperationCancelled
from ..prompt.Prompter import Prompter
from .ConfirmationResult import ConfirmationResult
from .ConfirmOutcome import ConfirmOutcome
from .ConfirmState import ConfirmState

logger = get_logger("confirm")

ESCALATION_PHRASE = "DELETE"

Action = Literal["delete", "update"]
Transition = ConfirmState | ConfirmOutcome


class ConfirmationProtocol:
    """Preview, confirm and execute a destructive operation.

    States run strictly in order:

    1. RESOLVED -> PREVIEW
    2. PREVIEW: read-only lookup of the filter, matches displayed.
       No matches ends with NOTHING_TO_DO; dry-run ends with DRY_RUN;
       force (delete only) jumps to EXECUTE.
    3. PRIMARY_CONFIRM: yes/no, default no. Declining ends with CANCELLED.
    4. ESCALATED_CONFIRM: delete with more than one match only; the operator
       must type exactly ``DELETE``.
    5. EXECUTE: the executor receives the same filter object used for the preview.

    Running out of input at any prompt counts as declining.
    """

    def __init__(
        self,
        prompter: Prompter,
        display: Display,
        action: Action,
        force: bool = False,
        dry_run: bool = False,
    ):
        if force and action != "delete":
            raise ValueError("force is only supported for delete")
        self.prompter = prompter
        self.display = display
        self.action = action
        self.force = force
        self.dry_run = dry_run
        self._handlers: dict[ConfirmState, Callable[[ConfirmationResult, dict[str, Any]], Transition]] = {
            ConfirmState.RESOLVED: self._resolved,
            ConfirmState.PREVIEW: self._preview,
            ConfirmState.PRIMARY_CONFIRM: self._primary_confirm,
            ConfirmState.ESCALATED_CONFIRM: self._escalated_confirm,
        }
        self._collection: DocumentCollection | None = None
        self._execute: Callable[[dict[str, Any]], Any] | None = None

    def run(
        self,
        collection: DocumentCollection,
        query_filter: dict[str, Any],
        execute: Callable[[dict[str, Any]], Any],
    ) -> ConfirmationResult:
        self._collection = collection
        self._execute = execute
        result = ConfirmationResult(outcome=ConfirmOutcome.CANCELLED)

        state: Transition = ConfirmState.RESOLVED
        while isinstance(state, ConfirmState):
            result.states.append(state)
            if state is ConfirmState.EXECUTE:
                result.execution = execute(query_filter)
                state = ConfirmOutcome.EXECUTED
                break
            try:
                state = self._handlers[state](result, query_filter)
            except OperationCancelled as e:
                logger.info("%s cancelled: %s", self.action, e)
                result.reason = str(e)
                state = ConfirmOutcome.CANCELLED

        result.outcome = state
        logger.info("%s confirmation finished: %s (%d match(es))", self.action, state.value, result.match_count)
        return result

    def _resolved(self, result: ConfirmationResult, query_filter: dict[str, Any]) -> Transition:
        return ConfirmState.PREVIEW

    def _preview(self, result: ConfirmationResult, query_filter: dict[str, Any]) -> Transition:
        self.display.status(f"Searching for documents to {self.action}...")
        matches = self._collection.find(query_filter)  # type: ignore[union-attr]
        result.matches = matches
        result.match_count = len(matches)

        if not matches:
            self.display.warning("No documents found matching the query")
            result.reason = "No documents found matching the query"
            return ConfirmOutcome.NOTHING_TO_DO

        announce = self.display.warning if self.action == "delete" else self.display.info
        announce(f"Found {len(matches)} document(s) matching the query:")
        for index, document in enumerate(matches, start=1):
            self.display.info(f"{index}. ID: {document.get('_id')}")
            self.display.json_output(to_jsonable(document), format="json", err=True)

        if self.dry_run:
            logger.info("Dry run: %s of %d document(s) skipped", self.action, len(matches))
            return ConfirmOutcome.DRY_RUN
        if self.force:
            logger.warning("FORCE MODE - skipping confirmations for %s of %d document(s)", self.action, len(matches))
            self.display.warning("FORCE MODE - Skipping confirmations!")
            return ConfirmState.EXECUTE
        return ConfirmState.PRIMARY_CONFIRM

    def _primary_confirm(self, result: ConfirmationResult, query_filter: dict[str, Any]) -> Transition:
        count = result.match_count
        if self.action == "delete":
            message = f"Are you absolutely sure you want to DELETE {count} document(s)? This action cannot be undone!"
        else:
            message = f"Do you want to update {count} document(s)?"
        if not self.prompter.confirm(message, default=False):
            result.reason = f"{self.action.capitalize()} cancelled"
            return ConfirmOutcome.CANCELLED
        if self.action == "delete" and count > 1:
            return ConfirmState.ESCALATED_CONFIRM
        return ConfirmState.EXECUTE

    def _escalated_confirm(self, result: ConfirmationResult, query_filter: dict[str, Any]) -> Transition:
        answer = self.prompter.exact(
            f'Type "{ESCALATION_PHRASE}" to confirm deletion of {result.match_count} documents'
        )
        if answer != ESCALATION_PHRASE:
            result.reason = "Delete operation cancelled"
            return ConfirmOutcome.CANCELLED
        return ConfirmState.EXECUTE
