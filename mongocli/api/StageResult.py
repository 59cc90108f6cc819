"""Outcome of one mongocli command."""

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass
class StageResult:
    """What a ``cmd_*`` function hands to the CLI runner.

    ``announce`` is shown first. Draining ``progress_callback(result)`` does the
    work, yields ``(fraction, message)`` pairs and fills in ``result`` (one-line
    summary), ``output`` (the schema-shaped payload) and ``success``.
    """

    announce: str
    progress_callback: Callable[["StageResult"], Iterator[tuple[float, str]]]
    result: str = ""
    output: dict[str, Any] = field(default_factory=dict)
    success: bool = False
