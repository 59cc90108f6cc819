"""Terminal prompts through Typer."""

import click
import typer

from ..OperationCancelled import OperationCancelled
from .Prompter import Prompter


class TyperPrompter(Prompter):
    def _read(self, message: str, default: str | None = None) -> str:
        try:
            return typer.prompt(message, default=default, show_default=bool(default))
        except click.exceptions.Abort as e:
            raise OperationCancelled("Input aborted") from e

    def confirm(self, message: str, default: bool = False) -> bool:
        try:
            return typer.confirm(message, default=default)
        except click.exceptions.Abort as e:
            raise OperationCancelled("Input aborted") from e

    def notify(self, message: str) -> None:
        typer.echo(message, err=True)
