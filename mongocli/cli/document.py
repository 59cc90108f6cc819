"""Document commands: add, update, delete, find, count."""

import typer

from ..api.document.cmd_add import cmd_add
from ..api.document.cmd_count import cmd_count
from ..api.document.cmd_delete import cmd_delete
from ..api.document.cmd_find import cmd_find
from ..api.document.cmd_update import cmd_update
from ._handle_stage_result import _handle_stage_result

COLLECTION_HELP = "Collection name (defaults to the configured default collection)"


def add_command(
    collection: str | None = typer.Argument(None, help=COLLECTION_HELP),
    data: str | None = typer.Option(None, "--data", "-d", help="JSON document or array of documents (non-interactive mode)"),
    file: str | None = typer.Option(None, "--file", "-f", help="Path to JSON file containing document(s) to add"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Show what would be added without actually adding"),
) -> None:
    """Add a new document to the specified collection.

    Example: mongo-cli add users -d '{"name":"John","age":30}'
    """
    _handle_stage_result(cmd_add)(collection, data=data, file=file, dry_run=dry_run)


def update_command(
    collection: str | None = typer.Argument(None, help=COLLECTION_HELP),
    query: str | None = typer.Option(None, "--query", "-q", help="JSON query to find documents to update"),
    data: str | None = typer.Option(None, "--data", "-d", help="JSON data for the update"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Show what would be updated without actually updating"),
) -> None:
    """Update documents in the specified collection.

    Example: mongo-cli update users -q '{"name":"John"}' -d '{"age":31}'
    """
    _handle_stage_result(cmd_update)(collection, query=query, data=data, dry_run=dry_run)


def delete_command(
    collection: str | None = typer.Argument(None, help=COLLECTION_HELP),
    query: str | None = typer.Option(None, "--query", "-q", help="JSON query to find documents to delete"),
    force: bool = typer.Option(False, "--force", help="Skip confirmation prompts (DANGEROUS!)"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Show what would be deleted without actually deleting"),
) -> None:
    """Delete documents from the specified collection.

    Example: mongo-cli delete users -q '{"status":"inactive"}'
    """
    _handle_stage_result(cmd_delete)(collection, query=query, force=force, dry_run=dry_run)


def find_command(
    collection: str | None = typer.Argument(None, help=COLLECTION_HELP),
    query: str | None = typer.Option(None, "--query", "-q", help="JSON query to find specific documents"),
    limit: int = typer.Option(10, "--limit", "-l", help="Limit number of results"),
    skip: int = typer.Option(0, "--skip", help="Skip number of documents"),
    sort: str | None = typer.Option(None, "--sort", "-s", help='Sort results (e.g., \'{"createdAt": -1}\')'),
) -> None:
    """Find and display documents from the specified collection.

    Example: mongo-cli find users -q '{"age":{"$gte":18}}' -l 5
    """
    _handle_stage_result(cmd_find)(collection, query=query, limit=limit, skip=skip, sort=sort)


def count_command(
    collection: str | None = typer.Argument(None, help=COLLECTION_HELP),
    query: str | None = typer.Option(None, "--query", "-q", help="JSON query to count specific documents"),
) -> None:
    """Count documents in the specified collection.

    Example: mongo-cli count users -q '{"status":"active"}'
    """
    _handle_stage_result(cmd_count)(collection, query=query)
