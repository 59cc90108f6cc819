"""CLI - main entry point."""

import sys


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    import click
    import typer

    from .. import __version__
    from ..api.CommandContext import CommandContext
    from ..utils.get_logger import get_logger
    from ._create_app import _create_app
    from ._install_signal_handlers import _install_signal_handlers
    from ._prepare_environment import _prepare_environment

    if argv is None:
        argv = sys.argv[1:]

    if "--version" in argv:
        print(f"mongo-cli {__version__}")
        return 0

    _prepare_environment(verbose="--verbose" in argv or "-v" in argv)
    _install_signal_handlers()

    app = _create_app()
    try:
        app(argv)
        return 0
    except typer.Exit as e:
        return e.exit_code
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 1
    except click.exceptions.UsageError as e:
        typer.echo(f"Usage error: {e}", err=True)
        return 1
    except Exception as e:
        get_logger("cli").exception("Unhandled error")
        typer.echo(f"Unhandled error: {e}", err=True)
        return 1
    finally:
        CommandContext.release_active()
