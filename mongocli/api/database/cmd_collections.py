"""List collections command."""

from collections.abc import Iterator

from pymongo.errors import PyMongoError

from ...utils.get_logger import get_logger
from .._output_schemas.database import DatabaseCollectionsOutput
from ..CommandContext import CommandContext
from ..MongoCliError import MongoCliError
from ..StageResult import StageResult

logger = get_logger("database")


def cmd_collections(context: CommandContext | None = None) -> StageResult:
    """List all collections in the configured database."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        database_name = ""
        names: list[str] = []
        warnings: list[str] = []
        errors: list[str] = []
        ctx: CommandContext | None = context

        try:
            yield (0.2, "Loading configuration...")
            if ctx is None:
                ctx = CommandContext.create()
            warnings.extend(ctx.config.warnings)
            database_name = ctx.gateway.database_name

            yield (0.5, "Connecting to database...")
            ctx.gateway.require_connection()

            yield (0.8, "Listing collections...")
            names = ctx.gateway.list_collection_names()
            yield (1.0, "Complete")
            if names:
                result_obj.result = f"Found {len(names)} collection(s) in '{database_name}'"
            else:
                warnings.append("No collections found in the database")
                result_obj.result = "No collections found in the database"
            result_obj.success = True
        except (MongoCliError, PyMongoError, ValueError) as e:
            logger.error("Failed to list collections: %s", e)
            errors.append(str(e))
            yield (1.0, "Complete")
            result_obj.result = f"Failed to list collections: {e}"
            result_obj.success = False
        finally:
            if ctx is not None:
                ctx.close()

        result_obj.output = DatabaseCollectionsOutput(
            errors=errors,
            warnings=warnings,
            database=database_name,
            collections=names,
            count=len(names),
        ).model_dump(mode="python")

    return StageResult(
        announce="Listing database collections...",
        progress_callback=do_work,
    )
