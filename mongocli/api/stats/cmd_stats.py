"""Show usage statistics command."""

from collections.abc import Iterator
from typing import Any

from ...utils.get_logger import get_logger
from .._output_schemas.stats import StatsStatsOutput
from ..CommandContext import CommandContext
from ..StageResult import StageResult

logger = get_logger("stats")


def cmd_stats(context: CommandContext | None = None) -> StageResult:
    """Show the statistics record, then test the database connection.

    The record is captured before connecting, so the reported ``lastConnection``
    is the one from the previous run. Counters are never changed here.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        path = ""
        stats: dict[str, Any] = {}
        connection: dict[str, Any] = {}
        warnings: list[str] = []
        errors: list[str] = []
        ctx: CommandContext | None = context

        try:
            yield (0.2, "Loading statistics...")
            if ctx is None:
                ctx = CommandContext.create()
            warnings.extend(ctx.config.warnings)
            path = str(ctx.stats.path)
            stats = ctx.stats.get_stats().to_dict()

            yield (0.6, "Testing database connection...")
            outcome = ctx.gateway.test_connection()
            connection = outcome.model_dump(mode="json")
            if outcome.error:
                errors.append(f"Database connection: {outcome.error}")
        except ValueError as e:
            logger.error("Failed to get statistics: %s", e)
            errors.append(str(e))
        finally:
            if ctx is not None:
                ctx.close()

        yield (1.0, "Complete")
        if errors:
            result_obj.result = "Statistics loaded; database connection FAILED" if stats else f"Failed to get statistics: {errors[0]}"
            result_obj.success = False
        else:
            result_obj.result = "Statistics loaded; database connection OK"
            result_obj.success = True
        result_obj.output = StatsStatsOutput(
            errors=errors,
            warnings=warnings,
            path=path,
            stats=stats,
            connection=connection,
        ).model_dump(mode="python")

    return StageResult(
        announce="Loading CLI statistics and database info...",
        progress_callback=do_work,
    )
