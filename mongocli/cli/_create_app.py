"""Create the main Typer CLI app."""

import typer

from .. import __version__
from .config import init_command
from .database import collections_command, connection_test_command
from .document import add_command, count_command, delete_command, find_command, update_command
from .stats import stats_command


def _create_app() -> typer.Typer:
    """Create and configure the main CLI Typer app."""
    app = typer.Typer(
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        help=f"mongo-cli {__version__} - ad-hoc MongoDB document operations",
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    app.command(name="add")(add_command)
    app.command(name="update")(update_command)
    app.command(name="delete")(delete_command)
    app.command(name="del", hidden=True)(delete_command)
    app.command(name="find")(find_command)
    app.command(name="count")(count_command)
    app.command(name="collections")(collections_command)
    app.command(name="ls", hidden=True)(collections_command)
    app.command(name="stats")(stats_command)
    app.command(name="test")(connection_test_command)
    app.command(name="init")(init_command)

    @app.callback(invoke_without_command=True)
    def main_callback(
        ctx: typer.Context,
        display: str = typer.Option("yaml", "--display", help="Output format: json or yaml"),
        verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging"),
        version: bool = typer.Option(False, "--version", help="Show version and exit"),
    ) -> None:
        if version:
            typer.echo(f"mongo-cli {__version__}")
            raise typer.Exit()

        if display not in ("json", "yaml"):
            typer.echo(f"Error: --display must be 'json' or 'yaml', got '{display}'", err=True)
            raise typer.Exit(1)

        # Logging itself is configured by main() before the app runs
        ctx.ensure_object(dict)
        ctx.obj["display_format"] = display
        ctx.obj["verbose"] = verbose

        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help())
            raise typer.Exit()

    return app
