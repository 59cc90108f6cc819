from dataclasses import dataclass, field
from typing import Any

from .ConfirmOutcome import ConfirmOutcome
from .ConfirmState import ConfirmState


@dataclass
class ConfirmationResult:
    outcome: ConfirmOutcome
    match_count: int = 0
    matches: list[dict[str, Any]] = field(default_factory=list)
    states: list[ConfirmState] = field(default_factory=list)
    execution: Any = None
    reason: str = ""
