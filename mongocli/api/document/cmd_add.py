"""Add document(s) command."""

from collections.abc import Iterator
from pathlib import Path
from typing import Any

from pymongo.errors import PyMongoError

from ...utils.get_logger import get_logger
from .._output_schemas.document import DocumentAddOutput
from ..CommandContext import CommandContext
from ..database.to_jsonable import to_jsonable
from ..MongoCliError import MongoCliError
from ..OperationCancelled import OperationCancelled
from ..query.load_documents_file import load_documents_file
from ..query.parse_json_argument import parse_json_argument
from ..query.prompt_document import prompt_document
from ..query.QueryInputError import QueryInputError
from ..StageResult import StageResult

logger = get_logger("document")


def cmd_add(
    collection: str | None,
    data: str | None = None,
    file: str | None = None,
    dry_run: bool = False,
    context: CommandContext | None = None,
) -> StageResult:
    """Insert one document, or a batch from a JSON array.

    Documents come from ``data`` (an object or an array of objects), from a JSON
    ``file``, or from interactive prompts when neither is given. A batch counts as
    a single add in the statistics.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        target = collection or ""
        documents: list[dict[str, Any]] = []
        inserted_ids: list[Any] = []
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

            if data is not None and file is not None:
                raise QueryInputError("Use either --data or --file, not both")

            yield (0.3, "Connecting to database...")
            ctx.gateway.require_connection()

            yield (0.5, "Resolving documents...")
            if data is not None:
                parsed = parse_json_argument(data, what="data", allow_array=True)
                documents = parsed if isinstance(parsed, list) else [parsed]
            elif file is not None:
                documents = load_documents_file(Path(file))
            else:
                display.info("Interactive mode: Enter document fields")
                documents = [prompt_document(ctx.prompter, warn=_warn)]
            if not documents:
                raise QueryInputError("No documents to add")

            if dry_run:
                logger.info("Dry run: %d document(s) not added to %s", len(documents), target)
                yield (1.0, "Complete")
                result_obj.result = f"Dry run: would add {len(documents)} document(s) to '{target}'"
            else:
                yield (0.7, f"Adding {len(documents)} document(s)...")
                accessor = ctx.gateway.get_collection(target)
                if len(documents) == 1:
                    inserted_ids = [accessor.insert_one(documents[0])]
                else:
                    inserted_ids = accessor.insert_many(documents)
                ctx.stats.record_success("add", target)
                logger.info("Added %d document(s) to %s", len(inserted_ids), target)
                yield (1.0, "Complete")
                if len(inserted_ids) == 1:
                    result_obj.result = f"Document added successfully to '{target}' (ID: {inserted_ids[0]})"
                else:
                    result_obj.result = f"Added {len(inserted_ids)} documents to '{target}'"
            result_obj.success = True
        except OperationCancelled as e:
            warnings.append(str(e))
            yield (1.0, "Complete")
            result_obj.result = "Add cancelled"
            result_obj.success = True
        except (MongoCliError, PyMongoError, ValueError) as e:
            logger.error("Failed to add document: %s", e)
            errors.append(str(e))
            yield (1.0, "Complete")
            result_obj.result = f"Failed to add document: {e}"
            result_obj.success = False
        finally:
            if ctx is not None:
                ctx.close()

        result_obj.output = DocumentAddOutput(
            errors=errors,
            warnings=warnings,
            collection=target,
            dry_run=dry_run,
            count=len(documents) if dry_run else len(inserted_ids),
            inserted_ids=[str(i) for i in inserted_ids],
            documents=to_jsonable(documents),
        ).model_dump(mode="python")

    return StageResult(
        announce=f"Adding document to '{collection or 'default'}' collection...",
        progress_callback=do_work,
    )
