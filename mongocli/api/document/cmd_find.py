"""Find documents command."""

from collections.abc import Iterator
from typing import Any

from pymongo.errors import PyMongoError

from ...utils.get_logger import get_logger
from .._output_schemas.document import DocumentFindOutput
from ..CommandContext import CommandContext
from ..database.to_jsonable import to_jsonable
from ..MongoCliError import MongoCliError
from ..query.parse_json_argument import parse_json_argument
from ..query.parse_sort import parse_sort
from ..query.QueryInputError import QueryInputError
from ..StageResult import StageResult

logger = get_logger("document")


def cmd_find(
    collection: str | None,
    query: str | None = None,
    limit: int = 10,
    skip: int = 0,
    sort: str | None = None,
    context: CommandContext | None = None,
) -> StageResult:
    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        """Do the actual work - generator that yields progress and updates result.

        Yields: (progress_percent: float, message: str) tuples
        Updates result_obj.result, result_obj.output, and result_obj.success before finishing.
        """
        target = collection or ""
        query_filter: dict[str, Any] = {}
        sort_pairs: list[tuple[str, int]] = []
        results: list[dict[str, Any]] = []
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
            sort_pairs = parse_sort(sort)
            if limit < 0 or skip < 0:
                raise QueryInputError("--limit and --skip must not be negative")

            yield (0.5, "Connecting to database...")
            ctx.gateway.require_connection()

            yield (0.7, "Querying database...")
            results = ctx.gateway.get_collection(target).find(query_filter, sort=sort_pairs, skip=skip, limit=limit)
            yield (1.0, "Complete")
            if results:
                result_obj.result = f"Found {len(results)} document(s) in '{target}'"
            else:
                warnings.append("No documents found matching the criteria")
                result_obj.result = "No documents found matching the criteria"
            result_obj.success = True
        except (MongoCliError, PyMongoError, ValueError) as e:
            logger.error("Failed to find documents: %s", e)
            errors.append(str(e))
            yield (1.0, "Complete")
            result_obj.result = f"Failed to find documents: {e}"
            result_obj.success = False
        finally:
            if ctx is not None:
                ctx.close()

        result_obj.output = DocumentFindOutput(
            errors=errors,
            warnings=warnings,
            collection=target,
            query=to_jsonable(query_filter),
            sort=dict(sort_pairs),
            limit=limit,
            skip=skip,
            count=len(results),
            results=to_jsonable(results),
        ).model_dump(mode="python")

    return StageResult(
        announce=f"Finding documents in '{collection or 'default'}' collection...",
        progress_callback=do_work,
    )
