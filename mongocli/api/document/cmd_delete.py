"""Delete documents command."""

from collections.abc import Iterator
from typing import Any

from pymongo.errors import PyMongoError

from ...utils.get_logger import get_logger
from .._output_schemas.document import DocumentDeleteOutput
from ..CommandContext import CommandContext
from ..confirm.ConfirmationProtocol import ConfirmationProtocol
from ..confirm.ConfirmOutcome import ConfirmOutcome
from ..confirm.ConfirmState import ConfirmState
from ..database.to_jsonable import to_jsonable
from ..MongoCliError import MongoCliError
from ..OperationCancelled import OperationCancelled
from ..query.parse_json_argument import parse_json_argument
from ..query.prompt_filter import prompt_filter
from ..StageResult import StageResult

logger = get_logger("document")


def cmd_delete(
    collection: str | None,
    query: str | None = None,
    force: bool = False,
    dry_run: bool = False,
    context: CommandContext | None = None,
) -> StageResult:
    """Delete every document matching a filter.

    Matches are always previewed. Without ``force`` the operator confirms, and
    deleting more than one document also requires typing ``DELETE``.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        target = collection or ""
        query_filter: dict[str, Any] = {}
        outcome = "error"
        match_count = 0
        deleted_count = 0
        warnings: list[str] = []
        errors: list[str] = []
        ctx: CommandContext | None = context

        try:
            yield (0.1, "Loading configuration...")
            if ctx is None:
                ctx = CommandContext.create()
            warnings.extend(ctx.config.warnings)
            target = ctx.resolve_collection(collection)
            display = ctx.display
            if dry_run:
                display.info("DRY RUN MODE - No changes will be made")

            yield (0.2, "Connecting to database...")
            ctx.gateway.require_connection()

            yield (0.3, "Resolving query...")
            if query is not None:
                query_filter = parse_json_argument(query, what="query")
            else:
                display.info("Define the query to find documents to delete")
                query_filter = prompt_filter(ctx.prompter, allow_match_all=True)

            yield (0.5, "Searching for documents to delete...")
            accessor = ctx.gateway.get_collection(target)
            protocol = ConfirmationProtocol(ctx.prompter, display, "delete", force=force, dry_run=dry_run)
            confirmation = protocol.run(accessor, query_filter, accessor.delete_many)
            outcome = confirmation.outcome.value
            match_count = confirmation.match_count
            if force and ConfirmState.EXECUTE in confirmation.states:
                warnings.append("FORCE MODE - confirmations skipped")

            yield (0.9, "Finishing...")
            if confirmation.outcome is ConfirmOutcome.EXECUTED:
                deleted_count = confirmation.execution
                ctx.stats.record_success("delete", target)
                result_obj.result = f"Successfully deleted {deleted_count} document(s) from '{target}'"
            elif confirmation.outcome is ConfirmOutcome.DRY_RUN:
                result_obj.result = f"Dry run: would delete {match_count} document(s) from '{target}'"
            elif confirmation.outcome is ConfirmOutcome.NOTHING_TO_DO:
                warnings.append("No documents found matching the query")
                result_obj.result = "No documents found matching the query"
            else:
                warnings.append(confirmation.reason or "Delete cancelled")
                result_obj.result = "Delete cancelled"
            yield (1.0, "Complete")
            result_obj.success = True
        except OperationCancelled as e:
            outcome = ConfirmOutcome.CANCELLED.value
            warnings.append(str(e))
            yield (1.0, "Complete")
            result_obj.result = "Delete cancelled"
            result_obj.success = True
        except (MongoCliError, PyMongoError, ValueError) as e:
            logger.error("Failed to delete documents: %s", e)
            errors.append(str(e))
            yield (1.0, "Complete")
            result_obj.result = f"Failed to delete documents: {e}"
            result_obj.success = False
        finally:
            if ctx is not None:
                ctx.close()

        result_obj.output = DocumentDeleteOutput(
            errors=errors,
            warnings=warnings,
            collection=target,
            query=to_jsonable(query_filter),
            outcome=outcome,
            match_count=match_count,
            deleted_count=deleted_count,
        ).model_dump(mode="python")

    return StageResult(
        announce=f"Deleting documents from '{collection or 'default'}' collection...",
        progress_callback=do_work,
    )
