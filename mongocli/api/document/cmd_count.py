"""Count documents command."""

from collections.abc import Iterator
from typing import Any

from pymongo.errors import PyMongoError

from ...utils.get_logger import get_logger
from .._output_schemas.document import DocumentCountOutput
from ..CommandContext import CommandContext
from ..database.to_jsonable import to_jsonable
from ..MongoCliError import MongoCliError
from ..query.parse_json_argument import parse_json_argument
from ..StageResult import StageResult

logger = get_logger("document")


def cmd_count(
    collection: str | None,
    query: str | None = None,
    context: CommandContext | None = None,
) -> StageResult:
    """Count documents in a collection, optionally restricted by a JSON filter."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        target = collection or ""
        query_filter: dict[str, Any] = {}
        count = -1
        warnings: list[str] = []
        errors: list[str] = []
        ctx: CommandContext | None = context

        try:
            yield (0.1, "Loading configuration...")
            if ctx is None:
                ctx = CommandContext.create()
            warnings.extend(ctx.config.warnings)
            target = ctx.resolve_collection(collection)

            yield (0.3, "Parsing query...")
            if query is not None:
                query_filter = parse_json_argument(query, what="query")

            yield (0.5, "Connecting to database...")
            ctx.gateway.require_connection()

            yield (0.8, "Counting documents...")
            count = ctx.gateway.get_collection(target).count_documents(query_filter)
            yield (1.0, "Complete")
            result_obj.result = f"Document count: {count}"
            result_obj.success = True
        except (MongoCliError, PyMongoError, ValueError) as e:
            logger.error("Failed to count documents: %s", e)
            errors.append(str(e))
            yield (1.0, "Complete")
            result_obj.result = f"Failed to count documents: {e}"
            result_obj.success = False
        finally:
            if ctx is not None:
                ctx.close()

        result_obj.output = DocumentCountOutput(
            errors=errors,
            warnings=warnings,
            collection=target,
            query=to_jsonable(query_filter),
            count=count,
        ).model_dump(mode="python")

    return StageResult(
        announce=f"Counting documents in '{collection or 'default'}' collection...",
        progress_callback=do_work,
    )
