"""Update documents command."""

from collections.abc import Iterator
from typing import Any

from pymongo.errors import PyMongoError

from ...utils.get_logger import get_logger
from .._output_schemas.document import DocumentUpdateOutput
from ..CommandContext import CommandContext
from ..confirm.ConfirmationProtocol import ConfirmationProtocol
from ..confirm.ConfirmOutcome import ConfirmOutcome
from ..database.to_jsonable import to_jsonable
from ..MongoCliError import MongoCliError
from ..OperationCancelled import OperationCancelled
from ..query.normalize_update import normalize_update
from ..query.parse_json_argument import parse_json_argument
from ..query.prompt_filter import prompt_filter
from ..query.prompt_update import prompt_update
from ..StageResult import StageResult

logger = get_logger("document")


def cmd_update(
    collection: str | None,
    query: str | None = None,
    data: str | None = None,
    dry_run: bool = False,
    context: CommandContext | None = None,
) -> StageResult:
    """Update every document matching a filter after preview and confirmation.

    ``query`` and ``data`` are JSON strings; whichever is missing is asked for
    interactively. Plain field mappings are applied as ``$set``.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        target = collection or ""
        query_filter: dict[str, Any] = {}
        update_spec: dict[str, Any] = {}
        outcome = "error"
        match_count = 0
        counts = {"matched_count": 0, "modified_count": 0}
        updated: list[dict[str, Any]] = []
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

            def _warn(message: str) -> None:
                warnings.append(message)
                display.warning(message)

            yield (0.2, "Connecting to database...")
            ctx.gateway.require_connection()

            yield (0.3, "Resolving query and update...")
            if query is not None:
                query_filter = parse_json_argument(query, what="query")
            else:
                display.info("Define the query to find documents to update")
                query_filter = prompt_filter(ctx.prompter)
            if data is not None:
                raw_update = parse_json_argument(data, what="data")
            else:
                display.info("Define the update to apply")
                raw_update = prompt_update(ctx.prompter, warn=_warn)
            update_spec = normalize_update(raw_update)

            yield (0.5, "Searching for documents to update...")
            accessor = ctx.gateway.get_collection(target)
            protocol = ConfirmationProtocol(ctx.prompter, display, "update", dry_run=dry_run)
            confirmation = protocol.run(accessor, query_filter, lambda f: accessor.update_many(f, update_spec))
            outcome = confirmation.outcome.value
            match_count = confirmation.match_count

            yield (0.9, "Finishing...")
            if confirmation.outcome is ConfirmOutcome.EXECUTED:
                counts = confirmation.execution
                ctx.stats.record_success("update", target)
                ids = [document["_id"] for document in confirmation.matches]
                updated = accessor.find({"_id": {"$in": ids}})
                result_obj.result = (
                    f"Update completed: {counts['matched_count']} matched, {counts['modified_count']} modified"
                )
            elif confirmation.outcome is ConfirmOutcome.DRY_RUN:
                result_obj.result = f"Dry run: would update {match_count} document(s) in '{target}'"
            elif confirmation.outcome is ConfirmOutcome.NOTHING_TO_DO:
                warnings.append("No documents found matching the query")
                result_obj.result = "No documents found matching the query"
            else:
                warnings.append(confirmation.reason or "Update cancelled")
                result_obj.result = "Update cancelled"
            yield (1.0, "Complete")
            result_obj.success = True
        except OperationCancelled as e:
            outcome = ConfirmOutcome.CANCELLED.value
            warnings.append(str(e))
            yield (1.0, "Complete")
            result_obj.result = "Update cancelled"
            result_obj.success = True
        except (MongoCliError, PyMongoError, ValueError) as e:
            logger.error("Failed to update documents: %s", e)
            errors.append(str(e))
            yield (1.0, "Complete")
            result_obj.result = f"Failed to update documents: {e}"
            result_obj.success = False
        finally:
            if ctx is not None:
                ctx.close()

        result_obj.output = DocumentUpdateOutput(
            errors=errors,
            warnings=warnings,
            collection=target,
            query=to_jsonable(query_filter),
            update=to_jsonable(update_spec),
            outcome=outcome,
            match_count=match_count,
            matched_count=counts["matched_count"],
            modified_count=counts["modified_count"],
            documents=to_jsonable(updated),
        ).model_dump(mode="python")

    return StageResult(
        announce=f"Updating documents in '{collection or 'default'}' collection...",
        progress_callback=do_work,
    )
